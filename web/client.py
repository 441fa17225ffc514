"""
Async HTTP client for the Book Store Management API.
"""

from typing import List, Optional, Union

import httpx
import structlog

from catalog.models import Book, BookUpdate, NewBook

logger = structlog.get_logger(__name__)


class BookApiClient:
    """
    Thin wrapper over the five book endpoints.

    Every call makes exactly one request. Connection problems raise
    ``httpx.RequestError`` and non-2xx answers raise
    ``httpx.HTTPStatusError``; nothing is retried.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """
        Initialize the client.

        Args:
            base_url: Root URL of the API server, e.g. http://localhost:5500
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used to call an app in-process)
        """
        self.base_url = base_url.rstrip("/")
        self.client_config = {
            "base_url": self.base_url,
            "timeout": timeout,
            "headers": {"Accept": "application/json"},
        }
        if transport is not None:
            self.client_config["transport"] = transport

    async def get_all_books(self) -> List[Book]:
        """Fetch every book."""
        data = await self._request("GET", "/api/books")
        return [Book(**item) for item in data]

    async def get_book_by_id(self, book_id: int) -> Book:
        """Fetch one book; a missing id raises HTTPStatusError (404)."""
        data = await self._request("GET", f"/api/books/{book_id}")
        return Book(**data)

    async def add_book(self, new_book: Union[NewBook, dict]) -> Book:
        """Create a book and return it with its assigned id."""
        payload = new_book.dict(exclude_none=True) if isinstance(new_book, NewBook) else new_book
        data = await self._request("POST", "/api/books", json=payload)
        return Book(**data)

    async def update_book(self, book_id: int, book: Union[Book, BookUpdate, dict]) -> Book:
        """Send a PUT for the given book and return the stored result."""
        payload = book.dict(exclude_none=True) if isinstance(book, (Book, BookUpdate)) else book
        data = await self._request("PUT", f"/api/books/{book_id}", json=payload)
        return Book(**data)

    async def delete_book(self, book_id: int) -> None:
        """Delete a book."""
        await self._request("DELETE", f"/api/books/{book_id}")

    async def _request(self, method: str, path: str, json: Optional[dict] = None):
        """Perform one request and return the decoded JSON body, if any."""
        async with httpx.AsyncClient(**self.client_config) as client:
            try:
                response = await client.request(method, path, json=json)
                response.raise_for_status()
            except httpx.HTTPError as e:
                logger.warning("Book API request failed", method=method, path=path, error=str(e))
                raise

        if response.status_code == 204 or not response.content:
            return None
        return response.json()
