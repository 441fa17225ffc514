"""
Storage backends for the book collection.
The whole collection is read and written as one document; there is no
locking and no atomic rename, so a crash mid-write can corrupt the file.
"""

import copy
import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional, Union

import structlog

from .models import Book


class BookStorage(ABC):
    """Interface for loading and saving the full book collection."""

    @abstractmethod
    def load(self) -> List[Book]:
        """Return every stored book. Must not raise."""

    @abstractmethod
    def save(self, books: List[Book]) -> None:
        """Persist the full collection. Must not raise."""


class JsonFileStorage(BookStorage):
    """
    Keeps the collection in a single JSON file shaped like
    ``{"books": [{...}, ...]}``.

    Failures are logged and swallowed: load falls back to an empty
    collection (or skips just the records that do not parse) and save
    leaves the file as it was.
    """

    def __init__(self, file_path: Union[str, Path], logger=None):
        """
        Initialize the storage.

        Args:
            file_path: Path of the JSON database file
            logger: Optional structlog-style logger for diagnostics
        """
        self.file_path = Path(file_path)
        self.logger = logger or structlog.get_logger(__name__)

    def load(self) -> List[Book]:
        """Load books from the JSON file."""
        if not self.file_path.exists():
            self.logger.warning("Book database file not found", path=str(self.file_path))
            return []

        try:
            with open(self.file_path, 'r', encoding='utf-8') as f:
                data = json.load(f)

            raw_books = data.get("books") if isinstance(data, dict) else None
            if not isinstance(raw_books, list):
                self.logger.error(
                    "Book database has no books array",
                    path=str(self.file_path),
                )
                return []

            books = []
            for index, item in enumerate(raw_books):
                try:
                    books.append(Book(**item))
                except Exception as e:
                    self.logger.error(
                        "Skipping invalid book record",
                        path=str(self.file_path),
                        index=index,
                        error=str(e),
                    )

            self.logger.info("Loaded books", path=str(self.file_path), count=len(books))
            return books

        except Exception as e:
            self.logger.error("Error loading books", path=str(self.file_path), error=str(e))
            return []

    def save(self, books: List[Book]) -> None:
        """Overwrite the JSON file with the given books."""
        try:
            self.file_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.file_path, 'w', encoding='utf-8') as f:
                json.dump({"books": [book.dict() for book in books]}, f, indent=2)
            self.logger.debug("Saved books", path=str(self.file_path), count=len(books))
        except Exception as e:
            self.logger.error("Error saving books", path=str(self.file_path), error=str(e))


class MemoryStorage(BookStorage):
    """In-process storage, handy for tests and throwaway servers."""

    def __init__(self, books: Optional[List[Book]] = None):
        self.documents = [book.dict() for book in books or []]
        self.save_count = 0

    def load(self) -> List[Book]:
        return [Book(**item) for item in self.documents]

    def save(self, books: List[Book]) -> None:
        self.documents = copy.deepcopy([book.dict() for book in books])
        self.save_count += 1
