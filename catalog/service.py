"""
Book collection service.
Owns the in-memory list of books and writes it back through the storage
backend after every mutation.
"""

from typing import List, Optional, Union

import structlog

from .models import Book, BookUpdate, NewBook
from .storage import BookStorage
from .validator import validate_book


class BookValidationError(ValueError):
    """Raised when a new book is missing a required field."""


class BookService:
    """
    Service for book collection operations.

    The collection is loaded once on construction. Persistence is
    best-effort: storage failures are logged by the storage backend and the
    in-memory change is kept.
    """

    def __init__(self, storage: BookStorage, logger=None):
        """
        Initialize the service.

        Args:
            storage: Backend used to load and persist the collection
            logger: Optional structlog-style logger
        """
        self.storage = storage
        self.logger = logger or structlog.get_logger(__name__)
        self._books: List[Book] = list(storage.load())

    def get_all(self) -> List[Book]:
        """Return all books in insertion order."""
        return list(self._books)

    def get_by_id(self, book_id: Optional[int]) -> Optional[Book]:
        """Return the book with the given id, or None."""
        for book in self._books:
            if book.id == book_id:
                return book
        return None

    def next_id(self) -> int:
        """Id the next added book will receive."""
        if not self._books:
            return 1
        return max(book.id for book in self._books) + 1

    def add(self, title: Optional[str], author: Optional[str], description: Optional[str] = None) -> Book:
        """
        Add a new book to the collection.

        Args:
            title: Book title (required)
            author: Book author (required)
            description: Optional description

        Returns:
            The stored book with its assigned id

        Raises:
            BookValidationError: If title or author is empty
        """
        book_id = self.next_id()
        candidate = NewBook(
            title=title,
            author=author,
            description=description if description is not None else "",
        )

        error = validate_book(candidate)
        if error:
            self.logger.info("Rejected invalid book", error=error)
            raise BookValidationError(error)

        book = Book(id=book_id, **candidate.dict())
        self._books.append(book)
        self.storage.save(self._books)

        self.logger.info("Book added", book_id=book.id, title=book.title)
        return book

    def replace(self, book_id: Optional[int], changes: Union[BookUpdate, dict]) -> Optional[Book]:
        """
        Update a book with the fields from a PUT request.

        Fields missing from ``changes`` keep their current values; this is a
        shallow merge rather than a strict replacement.
        """
        return self._merge(book_id, changes)

    def merge_partial(self, book_id: Optional[int], changes: Union[BookUpdate, dict]) -> Optional[Book]:
        """Update the given fields of a book, leaving the rest untouched."""
        return self._merge(book_id, changes)

    def delete(self, book_id: Optional[int]) -> None:
        """
        Remove every book with the given id.

        The collection is persisted even when nothing matched.
        """
        before = len(self._books)
        self._books = [book for book in self._books if book.id != book_id]
        self.storage.save(self._books)

        self.logger.info("Book deleted", book_id=book_id, removed=before - len(self._books))

    def _merge(self, book_id: Optional[int], changes: Union[BookUpdate, dict]) -> Optional[Book]:
        """Overlay ``changes`` onto the stored book and persist."""
        for index, existing in enumerate(self._books):
            if existing.id == book_id:
                break
        else:
            return None

        if isinstance(changes, BookUpdate):
            fields = changes.changes()
        else:
            fields = BookUpdate(**changes).changes()

        updated = Book(**{**existing.dict(), **fields})
        self._books[index] = updated
        self.storage.save(self._books)

        self.logger.info("Book updated", book_id=book_id, fields=sorted(fields))
        return updated
