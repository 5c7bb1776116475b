"""
Repository for book catalog operations.

Keeps the catalog as an ordered in-memory list and implements
the CRUD operations exposed through GraphQL.

Responsibility: Own the book collection and every mutation of it
"""

import logging
import threading
from typing import Iterable, List, Optional

from src.models.book import Book

logger = logging.getLogger(__name__)


DEFAULT_BOOKS = (
    Book(id=1, title="C# in Depth", author="Jon Skeet"),
    Book(id=2, title="Clean Code", author="Robert C. Martin"),
)


class BookRepository:
    """
    In-memory repository for books.

    Lookups return copies so callers never hold a reference into the
    stored list. All access goes through a single re-entrant lock.

    Example:
        repo = BookRepository()
        
        book = repo.add_book(Book(title="Refactoring", author="Martin Fowler"))
        assert book.id == 3
        
        repo.delete_book(book.id)
    """

    def __init__(self, books: Optional[Iterable[Book]] = None):
        """
        Initialize repository.
        
        Args:
            books: Initial contents. Defaults to the two seed books;
                pass an empty iterable for an empty catalog. Records
                without an id, or repeating one already taken, get
                the next free id.
        """
        seed = list(DEFAULT_BOOKS if books is None else books)
        self._books: List[Book] = []
        self._lock = threading.RLock()

        explicit_ids = {book.id for book in seed if book.id is not None}
        next_id = max(explicit_ids, default=0) + 1
        taken = set()
        for book in seed:
            if book.id is None or book.id in taken:
                book = book.model_copy(update={"id": next_id})
                next_id += 1
            else:
                book = book.model_copy()
            taken.add(book.id)
            self._books.append(book)

    def get_books(self) -> List[Book]:
        """Return every book in storage order."""
        with self._lock:
            return [book.model_copy() for book in self._books]

    def get_book(self, book_id: int) -> Optional[Book]:
        """Get book by ID, or None if the catalog has no such book."""
        with self._lock:
            stored = self._find(book_id)
            if stored is None:
                logger.debug(f"Book {book_id} not found")
                return None
            return stored.model_copy()

    def add_book(self, book: Book) -> Book:
        """
        Store a new book.
        
        The id is always assigned here as one past the highest id held,
        starting at 1 for an empty catalog. Any id set by the caller is
        discarded.
        
        Args:
            book: Book to store
        
        Returns:
            The stored book with its assigned id
        """
        with self._lock:
            stored = book.model_copy(update={"id": self._next_id()})
            self._books.append(stored)
            logger.info(f"Added book {stored.id}: {stored.title!r} by {stored.author!r}")
            return stored.model_copy()

    def update_book(self, book_id: int, book: Book) -> Optional[Book]:
        """
        Replace the book with the given ID.
        
        The old record is removed and the replacement appended, so an
        updated book moves to the end of the ordering while keeping its id.
        
        Args:
            book_id: ID of the book to replace
            book: New title/author values
        
        Returns:
            The stored replacement, or None if no book has that ID
        """
        with self._lock:
            existing = self._find(book_id)
            if existing is None:
                logger.debug(f"Update skipped, book {book_id} not found")
                return None
            
            self._books.remove(existing)
            stored = book.model_copy(update={"id": existing.id})
            self._books.append(stored)
            logger.info(f"Updated book {stored.id}: {stored.title!r} by {stored.author!r}")
            return stored.model_copy()

    def delete_book(self, book_id: int) -> bool:
        """Remove the book with the given ID. Returns True if one was removed."""
        with self._lock:
            existing = self._find(book_id)
            if existing is None:
                logger.debug(f"Delete skipped, book {book_id} not found")
                return False
            
            self._books.remove(existing)
            logger.info(f"Deleted book {book_id}")
            return True

    def count(self) -> int:
        """Number of books currently held."""
        with self._lock:
            return len(self._books)

    def _find(self, book_id: int) -> Optional[Book]:
        # Caller holds the lock
        return next((book for book in self._books if book.id == book_id), None)

    def _next_id(self) -> int:
        if not self._books:
            return 1
        return max(book.id for book in self._books) + 1
