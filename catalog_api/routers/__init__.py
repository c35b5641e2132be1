"""
API Routers Package

FastAPI routers that handle API endpoints:
- auth.py: /api/auth/* endpoints (registration, login, password reset, users)
- books.py: /api/books/* endpoints (CRUD, search, paged listing)

Each router is imported and registered in main.py.
"""

from catalog_api.routers.auth import router as auth_router
from catalog_api.routers.books import router as books_router

__all__ = [
    "auth_router",
    "books_router",
]
