"""
Pytest configuration and shared fixtures.
"""

from unittest.mock import Mock

import pytest

from catalog.models import Book
from catalog.service import BookService
from catalog.storage import MemoryStorage


@pytest.fixture
def sample_books():
    """Two stored books with non-contiguous ids."""
    return [
        Book(id=1, title="Dune", author="Frank Herbert", description="Desert planet politics."),
        Book(id=3, title="Neuromancer", author="William Gibson", description=""),
    ]


@pytest.fixture
def mock_logger():
    """Stand-in for a structlog logger so tests can assert on diagnostics."""
    return Mock()


@pytest.fixture
def memory_storage(sample_books):
    """In-memory storage preloaded with the sample books."""
    return MemoryStorage(sample_books)


@pytest.fixture
def book_service(memory_storage, mock_logger):
    """Service over the preloaded in-memory storage."""
    return BookService(memory_storage, logger=mock_logger)


@pytest.fixture
def empty_service(mock_logger):
    """Service over an empty in-memory storage."""
    return BookService(MemoryStorage(), logger=mock_logger)
