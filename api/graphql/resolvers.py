"""
GraphQL Resolvers
=================
Data-fetching functions behind the Query and Mutation roots.

Each resolver takes the repository from the request context and
forwards to it; the schema module only converts the results.

Responsibility: GraphQL data fetching and mutation dispatch
"""

from typing import List, Optional

from src.db.repositories import BookRepository
from src.models.book import Book


def get_repository(context) -> BookRepository:
    """Return the book repository bound to this request."""
    repository = context.get("repository")
    if repository is None:
        raise RuntimeError("GraphQL context has no book repository")
    return repository


# Query functions
def get_books(repository: BookRepository) -> List[Book]:
    """Get all books"""
    return repository.get_books()


def get_book(repository: BookRepository, book_id: int) -> Optional[Book]:
    """Get a single book, None when absent"""
    return repository.get_book(book_id)


# Mutation functions
def add_book(repository: BookRepository, title: str, author: str) -> Book:
    """Create a book; the repository assigns the id"""
    return repository.add_book(Book(title=title, author=author))


def update_book(
    repository: BookRepository,
    book_id: int,
    title: str,
    author: str
) -> Optional[Book]:
    """Replace title/author of an existing book"""
    book = Book(id=book_id, title=title, author=author)
    return repository.update_book(book_id, book)


def delete_book(repository: BookRepository, book_id: int) -> bool:
    """Delete a book, reporting whether it existed"""
    return repository.delete_book(book_id)
