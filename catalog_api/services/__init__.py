"""
Services Package

Business logic kept separate from HTTP handling (routers):
- auth.py: Registration, login, password reset, paged user listing
- catalog.py: Book CRUD, search, paged listing
- pagination.py: The page-window algorithm shared by both listings
- security.py: Password hashing and JWT issuing/validation
"""
