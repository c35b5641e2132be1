"""
Tests for Book Endpoints

Tests all CRUD operations plus search and the paged listing:
- GET /api/books (list)
- GET /api/books/{id} (get one)
- POST /api/books (create)
- PUT /api/books/{id} (update)
- DELETE /api/books/{id} (delete)
- GET /api/books/search
- GET /api/books/paged

Every endpoint requires a bearer token.
"""

import pytest
from fastapi import status
from fastapi.testclient import TestClient

from catalog_api.models import Book
from catalog_api.services import catalog as catalog_service

NEW_BOOK = {
    "title": "Working Effectively with Legacy Code",
    "author": "Michael Feathers",
    "publishedDate": "2004-09-22",
    "language": "English",
    "genre": "Software",
}


class TestAuthRequired:
    """Every books route rejects requests without a valid token."""

    @pytest.mark.parametrize(
        "method, url",
        [
            ("get", "/api/books"),
            ("get", "/api/books/1"),
            ("get", "/api/books/search?q=clean"),
            ("get", "/api/books/paged"),
            ("delete", "/api/books/1"),
        ],
    )
    def test_missing_token(self, client: TestClient, method: str, url: str):
        response = getattr(client, method)(url)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.headers["WWW-Authenticate"] == "Bearer"

    def test_create_without_token(self, client: TestClient):
        response = client.post("/api/books", json=NEW_BOOK)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_update_without_token(self, client: TestClient, sample_book: Book):
        response = client.put(f"/api/books/{sample_book.id}", json=NEW_BOOK)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_wrong_scheme(self, client: TestClient, auth_headers: dict):
        token = auth_headers["Authorization"].split(" ", 1)[1]

        response = client.get("/api/books", headers={"Authorization": f"Basic {token}"})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


class TestListBooks:
    """Tests for GET /api/books"""

    def test_list_books_empty(self, client: TestClient, auth_headers: dict):
        response = client.get("/api/books", headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == []

    def test_list_books_in_store_order(
        self,
        client: TestClient,
        auth_headers: dict,
        seeded_books: list[Book],
    ):
        response = client.get("/api/books", headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        titles = [book["title"] for book in response.json()]
        assert titles == [book.title for book in seeded_books]

    def test_book_fields_are_camel_case(
        self,
        client: TestClient,
        auth_headers: dict,
        sample_book: Book,
    ):
        response = client.get("/api/books", headers=auth_headers)

        book = response.json()[0]
        assert book == {
            "id": sample_book.id,
            "title": "Clean Code",
            "author": "Robert C. Martin",
            "publishedDate": "2008-08-01",
            "language": "English",
            "genre": "Software",
        }


class TestGetBook:
    """Tests for GET /api/books/{id}"""

    def test_get_book_success(
        self,
        client: TestClient,
        auth_headers: dict,
        sample_book: Book,
    ):
        response = client.get(f"/api/books/{sample_book.id}", headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["id"] == sample_book.id
        assert data["title"] == sample_book.title

    def test_get_book_not_found(self, client: TestClient, auth_headers: dict):
        response = client.get("/api/books/99999", headers=auth_headers)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert "not found" in response.json()["detail"].lower()


class TestCreateBook:
    """Tests for POST /api/books"""

    def test_create_book_success(self, client: TestClient, auth_headers: dict):
        response = client.post("/api/books", json=NEW_BOOK, headers=auth_headers)

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["title"] == NEW_BOOK["title"]
        assert data["publishedDate"] == NEW_BOOK["publishedDate"]
        assert data["id"] > 0

    def test_create_book_location_header(self, client: TestClient, auth_headers: dict):
        response = client.post("/api/books", json=NEW_BOOK, headers=auth_headers)

        book_id = response.json()["id"]
        location = response.headers["Location"]
        assert location.endswith(f"/api/books/{book_id}")

        fetched = client.get(location, headers=auth_headers)
        assert fetched.status_code == status.HTTP_200_OK
        assert fetched.json()["title"] == NEW_BOOK["title"]

    def test_client_id_is_ignored(
        self,
        client: TestClient,
        auth_headers: dict,
        sample_book: Book,
    ):
        body = {**NEW_BOOK, "id": sample_book.id}

        response = client.post("/api/books", json=body, headers=auth_headers)

        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["id"] != sample_book.id

    def test_create_book_missing_field(self, client: TestClient, auth_headers: dict):
        body = {key: value for key, value in NEW_BOOK.items() if key != "author"}

        response = client.post("/api/books", json=body, headers=auth_headers)

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY

    def test_create_book_blank_title(self, client: TestClient, auth_headers: dict):
        response = client.post(
            "/api/books",
            json={**NEW_BOOK, "title": "   "},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY

    def test_create_book_invalid_date(self, client: TestClient, auth_headers: dict):
        response = client.post(
            "/api/books",
            json={**NEW_BOOK, "publishedDate": "not-a-date"},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


class TestUpdateBook:
    """Tests for PUT /api/books/{id}"""

    def test_update_book_success(
        self,
        client: TestClient,
        auth_headers: dict,
        sample_book: Book,
    ):
        response = client.put(
            f"/api/books/{sample_book.id}",
            json=NEW_BOOK,
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert response.content == b""

        fetched = client.get(f"/api/books/{sample_book.id}", headers=auth_headers)
        data = fetched.json()
        assert data["id"] == sample_book.id
        assert data["title"] == NEW_BOOK["title"]
        assert data["author"] == NEW_BOOK["author"]
        assert data["publishedDate"] == NEW_BOOK["publishedDate"]

    def test_update_book_not_found(self, client: TestClient, auth_headers: dict):
        response = client.put("/api/books/99999", json=NEW_BOOK, headers=auth_headers)

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_update_requires_every_field(
        self,
        client: TestClient,
        auth_headers: dict,
        sample_book: Book,
    ):
        response = client.put(
            f"/api/books/{sample_book.id}",
            json={"title": "Only a title"},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


class TestDeleteBook:
    """Tests for DELETE /api/books/{id}"""

    def test_delete_book_success(
        self,
        client: TestClient,
        auth_headers: dict,
        sample_book: Book,
    ):
        response = client.delete(f"/api/books/{sample_book.id}", headers=auth_headers)

        assert response.status_code == status.HTTP_204_NO_CONTENT

        fetched = client.get(f"/api/books/{sample_book.id}", headers=auth_headers)
        assert fetched.status_code == status.HTTP_404_NOT_FOUND

    def test_delete_book_twice(
        self,
        client: TestClient,
        auth_headers: dict,
        sample_book: Book,
    ):
        first = client.delete(f"/api/books/{sample_book.id}", headers=auth_headers)
        second = client.delete(f"/api/books/{sample_book.id}", headers=auth_headers)

        assert first.status_code == status.HTTP_204_NO_CONTENT
        assert second.status_code == status.HTTP_404_NOT_FOUND


class TestSearchBooks:
    """Tests for GET /api/books/search"""

    def test_search_title_case_insensitive(
        self,
        client: TestClient,
        auth_headers: dict,
        seeded_books: list[Book],
    ):
        response = client.get(
            "/api/books/search",
            params={"q": "CLEAN"},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_200_OK
        titles = [book["title"] for book in response.json()]
        assert titles == ["Clean Code"]

    def test_search_matches_author(
        self,
        client: TestClient,
        auth_headers: dict,
        seeded_books: list[Book],
    ):
        response = client.get(
            "/api/books/search",
            params={"q": "fowler"},
            headers=auth_headers,
        )

        assert [book["title"] for book in response.json()] == ["Refactoring"]

    def test_search_matches_title_or_author(
        self,
        client: TestClient,
        auth_headers: dict,
        seeded_books: list[Book],
    ):
        response = client.get(
            "/api/books/search",
            params={"q": "design"},
            headers=auth_headers,
        )

        titles = [book["title"] for book in response.json()]
        assert titles == ["Domain-Driven Design", "Design Patterns"]

    def test_search_no_results(
        self,
        client: TestClient,
        auth_headers: dict,
        seeded_books: list[Book],
    ):
        response = client.get(
            "/api/books/search",
            params={"q": "nonexistent"},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == []

    def test_search_wildcards_are_literal(
        self,
        client: TestClient,
        auth_headers: dict,
        seeded_books: list[Book],
    ):
        response = client.get(
            "/api/books/search",
            params={"q": "%"},
            headers=auth_headers,
        )

        assert response.json() == []

    @pytest.mark.parametrize("params", [{}, {"q": ""}, {"q": "   "}])
    def test_search_blank_query(
        self,
        client: TestClient,
        auth_headers: dict,
        params: dict,
    ):
        response = client.get("/api/books/search", params=params, headers=auth_headers)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"] == "Query parameter 'q' is required."


class TestPagedBooks:
    """Tests for GET /api/books/paged"""

    def test_default_page(
        self,
        client: TestClient,
        auth_headers: dict,
        multiple_books: list[Book],
    ):
        response = client.get("/api/books/paged", headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert len(data["data"]) == 10
        assert data["currentPage"] == 1
        assert data["previousPage"] is None
        assert data["nextPage"] == 2
        assert data["totalCount"] == 15
        assert data["totalPages"] == 2

    def test_page_two_of_seeded(
        self,
        client: TestClient,
        auth_headers: dict,
        seeded_books: list[Book],
    ):
        response = client.get(
            "/api/books/paged",
            params={"page": 2, "pageSize": 2},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert [book["title"] for book in data["data"]] == [
            "Domain-Driven Design",
            "Design Patterns",
        ]
        assert data["previousPage"] == 1
        assert data["nextPage"] == 3
        assert data["totalCount"] == 5
        assert data["totalPages"] == 3

    def test_empty_catalog(self, client: TestClient, auth_headers: dict):
        response = client.get("/api/books/paged", headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["data"] == []
        assert data["totalCount"] == 0
        assert data["totalPages"] == 1

    def test_page_past_end(
        self,
        client: TestClient,
        auth_headers: dict,
        seeded_books: list[Book],
    ):
        response = client.get(
            "/api/books/paged",
            params={"page": 4, "pageSize": 2},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "exceeds total pages" in response.json()["detail"]

    @pytest.mark.parametrize("params", [{"page": 0}, {"pageSize": -3}])
    def test_non_positive_params(
        self,
        client: TestClient,
        auth_headers: dict,
        params: dict,
    ):
        response = client.get("/api/books/paged", params=params, headers=auth_headers)

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    @pytest.mark.parametrize(
        "params, name",
        [({"page": "abc"}, "page"), ({"pageSize": "1.5"}, "pageSize")],
    )
    def test_non_integer_params(
        self,
        client: TestClient,
        auth_headers: dict,
        params: dict,
        name: str,
    ):
        response = client.get("/api/books/paged", params=params, headers=auth_headers)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert name in response.json()["detail"]

    def test_unexpected_failure_is_generic_500(
        self,
        client: TestClient,
        auth_headers: dict,
        monkeypatch,
    ):
        def broken(db, page, page_size):
            raise RuntimeError("disk I/O error")

        monkeypatch.setattr(catalog_service, "list_books_paged", broken)

        response = client.get("/api/books/paged", headers=auth_headers)

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.json()["detail"] == (
            "An error occurred while retrieving paginated books."
        )
