import pytest

from api.graphql import schema
from src.db.repositories import BookRepository


def _execute(repo: BookRepository, query: str, variables: dict | None = None) -> dict:
    """Run an operation against the schema and return its data."""
    result = schema.execute_sync(
        query,
        variable_values=variables,
        context_value={"repository": repo},
    )
    assert result.errors is None, result.errors
    return result.data


ADD_BOOK = """
    mutation ($title: String!, $author: String!) {
        addBook(title: $title, author: $author) { id title author }
    }
"""

UPDATE_BOOK = """
    mutation ($id: Int!, $title: String!, $author: String!) {
        updateBook(id: $id, title: $title, author: $author) { id title author }
    }
"""

DELETE_BOOK = "mutation ($id: Int!) { deleteBook(id: $id) }"

BOOK_BY_ID = "query ($id: Int!) { bookById(id: $id) { id title author } }"


@pytest.fixture
def repo() -> BookRepository:
    return BookRepository()


def test_books_lists_seed_data(repo: BookRepository) -> None:
    data = _execute(repo, "{ books { id title author } }")

    assert data["books"] == [
        {"id": 1, "title": "C# in Depth", "author": "Jon Skeet"},
        {"id": 2, "title": "Clean Code", "author": "Robert C. Martin"},
    ]


def test_book_by_id_returns_null_when_missing(repo: BookRepository) -> None:
    assert _execute(repo, BOOK_BY_ID, {"id": 2})["bookById"]["title"] == "Clean Code"
    assert _execute(repo, BOOK_BY_ID, {"id": 404})["bookById"] is None


def test_update_missing_book_returns_null(repo: BookRepository) -> None:
    data = _execute(repo, UPDATE_BOOK, {"id": 404, "title": "X", "author": "Y"})

    assert data["updateBook"] is None


def test_catalog_scenario(repo: BookRepository) -> None:
    added = _execute(repo, ADD_BOOK, {"title": "Refactoring", "author": "Martin Fowler"})
    assert added["addBook"] == {"id": 3, "title": "Refactoring", "author": "Martin Fowler"}

    assert _execute(repo, DELETE_BOOK, {"id": 1})["deleteBook"] is True
    assert _execute(repo, BOOK_BY_ID, {"id": 1})["bookById"] is None
    assert _execute(repo, DELETE_BOOK, {"id": 1})["deleteBook"] is False

    updated = _execute(
        repo,
        UPDATE_BOOK,
        {"id": 2, "title": "Clean Code 2nd Ed", "author": "Robert C. Martin"},
    )
    assert updated["updateBook"] == {
        "id": 2,
        "title": "Clean Code 2nd Ed",
        "author": "Robert C. Martin",
    }


def test_schema_exposes_expected_fields() -> None:
    sdl = schema.as_str()

    assert "bookById(id: Int!): Book" in sdl
    assert "addBook(title: String!, author: String!): Book!" in sdl
    assert "updateBook(id: Int!, title: String!, author: String!): Book" in sdl
    assert "deleteBook(id: Int!): Boolean!" in sdl


def test_missing_repository_surfaces_as_graphql_error() -> None:
    result = schema.execute_sync("{ books { id } }", context_value={})

    assert result.errors is not None
    assert "no book repository" in result.errors[0].message
