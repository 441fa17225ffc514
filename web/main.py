"""
Browser front end for the Book Store Management system.

Server-rendered pages built with Jinja2. All data goes through
BookApiClient; after every successful create, update or delete the
browser is redirected to the index, which re-fetches the list from the API.
"""

from pathlib import Path
from typing import List, Optional

import httpx
import structlog
from fastapi import Depends, FastAPI, Form, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from catalog.models import Book, BookUpdate, NewBook
from catalog.validator import REQUIRED_FIELDS_MESSAGE
from web.client import BookApiClient
from web.config import config

logger = structlog.get_logger(__name__)

SAVE_FAILED_MESSAGE = "The book could not be saved. Please try again."

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent / "templates"))


def get_api_client(request: Request) -> BookApiClient:
    """Dependency returning the API client bound to the running app."""
    return request.app.state.api_client


async def fetch_books(client: BookApiClient) -> List[Book]:
    """Load the book list, logging and returning nothing on failure."""
    try:
        return await client.get_all_books()
    except httpx.HTTPError as e:
        logger.error("Error fetching books", error=str(e))
        return []


async def fetch_selected(client: BookApiClient, selected: Optional[str]) -> Optional[Book]:
    """Resolve the ?selected= query value to a book, if it still exists."""
    if not selected:
        return None
    try:
        book_id = int(selected)
    except ValueError:
        return None

    try:
        return await client.get_book_by_id(book_id)
    except httpx.HTTPError as e:
        logger.warning("Error fetching selected book", book_id=book_id, error=str(e))
        return None


def render_index(
    request: Request,
    books: List[Book],
    selected_book: Optional[Book] = None,
    form: Optional[dict] = None,
    message: Optional[str] = None,
    status_code: int = status.HTTP_200_OK,
):
    """Render the list and form page."""
    if form is None:
        form = selected_book.dict() if selected_book else {"title": "", "author": "", "description": ""}

    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "books": books,
            "selected_book": selected_book,
            "form": form,
            "message": message,
        },
        status_code=status_code,
    )


def create_app(api_client: Optional[BookApiClient] = None) -> FastAPI:
    """
    Build the front end application.

    Args:
        api_client: Client used to reach the API. Defaults to one pointed at
            the configured backend host.
    """
    app = FastAPI(title="Book Store Management", docs_url=None, redoc_url=None)
    if api_client is None:
        api_client = BookApiClient(config.backend_host, timeout=config.request_timeout)
    app.state.api_client = api_client

    @app.get("/", response_class=HTMLResponse)
    async def index(
        request: Request,
        selected: Optional[str] = None,
        client: BookApiClient = Depends(get_api_client)
    ):
        """Book list with the add/update form."""
        books = await fetch_books(client)
        selected_book = await fetch_selected(client, selected)
        return render_index(request, books, selected_book)

    @app.post("/books")
    async def create_book(
        request: Request,
        title: str = Form(""),
        author: str = Form(""),
        description: str = Form(""),
        client: BookApiClient = Depends(get_api_client)
    ):
        """Save a new book."""
        form = {"title": title, "author": author, "description": description}
        if not title or not author:
            books = await fetch_books(client)
            return render_index(
                request,
                books,
                form=form,
                message=REQUIRED_FIELDS_MESSAGE,
                status_code=status.HTTP_400_BAD_REQUEST,
            )

        try:
            book = await client.add_book(NewBook(title=title, author=author, description=description))
            logger.info("Book saved", book_id=book.id)
        except httpx.HTTPError as e:
            logger.error("Error saving book", error=str(e))
            books = await fetch_books(client)
            return render_index(
                request,
                books,
                form=form,
                message=SAVE_FAILED_MESSAGE,
                status_code=status.HTTP_502_BAD_GATEWAY,
            )

        return RedirectResponse("/", status_code=status.HTTP_303_SEE_OTHER)

    @app.post("/books/{book_id}")
    async def update_book(
        book_id: int,
        title: str = Form(""),
        author: str = Form(""),
        description: str = Form(""),
        client: BookApiClient = Depends(get_api_client)
    ):
        """Save changes to the selected book."""
        try:
            await client.update_book(
                book_id,
                BookUpdate(title=title, author=author, description=description)
            )
        except httpx.HTTPError as e:
            logger.error("Error updating book", book_id=book_id, error=str(e))
            return RedirectResponse(f"/?selected={book_id}", status_code=status.HTTP_303_SEE_OTHER)

        return RedirectResponse("/", status_code=status.HTTP_303_SEE_OTHER)

    @app.post("/books/{book_id}/delete")
    async def delete_book(book_id: int, client: BookApiClient = Depends(get_api_client)):
        """Delete the selected book."""
        try:
            await client.delete_book(book_id)
        except httpx.HTTPError as e:
            logger.error("Error deleting book", book_id=book_id, error=str(e))
            return RedirectResponse(f"/?selected={book_id}", status_code=status.HTTP_303_SEE_OTHER)

        return RedirectResponse("/", status_code=status.HTTP_303_SEE_OTHER)

    return app


app = create_app()
