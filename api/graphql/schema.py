"""
GraphQL Schema
==============
Strawberry GraphQL schema for the book catalog.

Responsibility: GraphQL type definitions and resolvers.
"""

from typing import List, Optional

import strawberry  # type: ignore[import]
from strawberry.types import Info  # type: ignore[import]

from src.models.book import Book as BookModel


# --------------------------------------------------------------------------- #
# GraphQL Types
# --------------------------------------------------------------------------- #


@strawberry.type
class Book:
    """Book GraphQL type."""

    id: int
    title: str
    author: str

    @classmethod
    def from_model(cls, model: BookModel) -> "Book":
        """Convert domain model to GraphQL type."""
        return cls(
            id=model.id,
            title=model.title,
            author=model.author,
        )


# --------------------------------------------------------------------------- #
# Query Root
# --------------------------------------------------------------------------- #


@strawberry.type
class Query:
    """GraphQL Query root."""

    @strawberry.field
    def books(self, info: Info) -> List[Book]:
        """List every book in the catalog."""
        from api.graphql.resolvers import get_books, get_repository

        books = get_books(get_repository(info.context))
        return [Book.from_model(book) for book in books]

    @strawberry.field
    def book_by_id(self, info: Info, id: int) -> Optional[Book]:
        """Fetch a single book."""
        from api.graphql.resolvers import get_book, get_repository

        book = get_book(get_repository(info.context), id)
        return Book.from_model(book) if book else None


# --------------------------------------------------------------------------- #
# Mutation Root
# --------------------------------------------------------------------------- #


@strawberry.type
class Mutation:
    """GraphQL Mutation root."""

    @strawberry.mutation
    def add_book(self, info: Info, title: str, author: str) -> Book:
        """Add a book; its id is assigned by the catalog."""
        from api.graphql.resolvers import add_book, get_repository

        book = add_book(get_repository(info.context), title, author)
        return Book.from_model(book)

    @strawberry.mutation
    def update_book(
        self,
        info: Info,
        id: int,
        title: str,
        author: str,
    ) -> Optional[Book]:
        """Replace a book's title and author, keeping its id."""
        from api.graphql.resolvers import get_repository, update_book

        book = update_book(get_repository(info.context), id, title, author)
        return Book.from_model(book) if book else None

    @strawberry.mutation
    def delete_book(self, info: Info, id: int) -> bool:
        """Delete a book; false when no book has that id."""
        from api.graphql.resolvers import delete_book, get_repository

        return delete_book(get_repository(info.context), id)


# --------------------------------------------------------------------------- #
# Schema
# --------------------------------------------------------------------------- #


schema = strawberry.Schema(
    query=Query,
    mutation=Mutation,
)
