"""
Storage package for the Book Catalog API.

Provides the in-memory repository that owns the book collection.
"""

from .repositories import BookRepository

__all__ = [
    "BookRepository",
]
