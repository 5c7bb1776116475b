"""
Models package for the Book Catalog API.

Contains the Pydantic domain entities shared by the repository
and the GraphQL layer.
"""

from .book import Book

__all__ = [
    "Book",
]
