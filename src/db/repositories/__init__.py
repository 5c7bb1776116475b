"""
Repository package for data access operations.

Implements repository pattern for the in-memory book catalog.
"""

from .book_repository import BookRepository

__all__ = [
    "BookRepository",
]
