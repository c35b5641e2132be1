"""
Test Suite for the Book Catalog API

Test Organization:
- conftest.py: Shared fixtures (test database, client, sample data, tokens)
- test_pagination.py: Page-window algorithm
- test_security.py: Password hashing and bearer tokens
- test_auth.py: /api/auth register, login, forgot-password
- test_users.py: /api/auth/users listing and email masking
- test_books.py: /api/books endpoints
- test_seed.py: Starter data
- test_end_to_end.py: Full client flows

Running Tests:
    # Run all tests
    pytest

    # Run specific file
    pytest tests/test_books.py

    # Run with verbose output
    pytest -v
"""
