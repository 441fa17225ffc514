"""
FastAPI main application for the Book Store Management API.
"""

from contextlib import asynccontextmanager
from datetime import datetime
from typing import Optional

import structlog
from fastapi import Depends, FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.config import config as api_config
from api.models import BookUpdate, ErrorResponse, HealthResponse, NewBook
from catalog.service import BookService, BookValidationError
from catalog.storage import JsonFileStorage
from utilities.config import config

# Setup logging
logger = structlog.get_logger(__name__)

BOOK_NOT_FOUND = "Book not found"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info("Starting Book Store Management API")

    if app.state.book_service is None:
        storage = JsonFileStorage(config.get_db_file_path())
        app.state.book_service = BookService(storage)
        logger.info(
            "Book service initialized",
            db_file=str(config.get_db_file_path()),
            books=len(app.state.book_service.get_all()),
        )

    yield

    logger.info("Shutting down Book Store Management API")


def get_book_service(request: Request) -> BookService:
    """Dependency returning the service bound to the running app."""
    service = request.app.state.book_service
    if service is None:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Book service not available"
        )
    return service


def parse_book_id(raw_id: str) -> Optional[int]:
    """
    Parse a book id path segment.

    Non-numeric segments give None, which never matches a stored id, so the
    caller answers 404 instead of a parse error.
    """
    try:
        return int(raw_id)
    except ValueError:
        return None


def not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=BOOK_NOT_FOUND)


def internal_error() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Internal server error"
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Handle HTTP exceptions."""
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(message=str(exc.detail)).dict(exclude_none=True),
        headers=getattr(exc, "headers", None)
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Reject unparseable request bodies with a 400."""
    logger.info("Invalid request body", path=request.url.path, errors=len(exc.errors()))
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=ErrorResponse(
            message="Invalid request body",
            detail=str(exc.errors()) if api_config.debug else None
        ).dict(exclude_none=True)
    )


async def general_exception_handler(request: Request, exc: Exception):
    """Handle general exceptions."""
    logger.error("Unhandled exception", error=str(exc), path=request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorResponse(
            message="Internal server error",
            detail=str(exc) if api_config.debug else None
        ).dict(exclude_none=True)
    )


def create_app(book_service: Optional[BookService] = None) -> FastAPI:
    """
    Build the API application.

    Args:
        book_service: Service to serve. When omitted, one backed by the
            configured JSON file is created on startup.
    """
    app = FastAPI(
        title=api_config.api_title,
        description=api_config.api_description,
        version=api_config.api_version,
        lifespan=lifespan
    )
    app.state.book_service = book_service

    app.add_middleware(
        CORSMiddleware,
        allow_origins=api_config.cors_origins,
        allow_credentials=api_config.cors_allow_credentials,
        allow_methods=api_config.cors_allow_methods,
        allow_headers=api_config.cors_allow_headers,
    )

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    @app.get("/", response_class=PlainTextResponse, tags=["Health"])
    async def index():
        """Service banner."""
        return "Book store management"

    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    async def health_check(service: BookService = Depends(get_book_service)):
        """Health check endpoint."""
        return HealthResponse(
            status="healthy",
            timestamp=datetime.utcnow(),
            version=api_config.api_version,
            book_count=len(service.get_all())
        )

    @app.get("/api/books", tags=["Books"])
    async def get_all_books(service: BookService = Depends(get_book_service)):
        """Get every book in the collection."""
        try:
            books = service.get_all()
            return JSONResponse(content=[book.dict() for book in books])
        except Exception as e:
            logger.error("Failed to get books", error=str(e))
            raise internal_error()

    @app.get("/api/books/{book_id}", tags=["Books"])
    async def get_book(book_id: str, service: BookService = Depends(get_book_service)):
        """
        Get a single book by ID.

        - **book_id**: Integer book identifier
        """
        try:
            book = service.get_by_id(parse_book_id(book_id))
            if book is None:
                raise not_found()
            return JSONResponse(content=book.dict())
        except HTTPException:
            raise
        except Exception as e:
            logger.error("Failed to get book", book_id=book_id, error=str(e))
            raise internal_error()

    @app.post("/api/books", status_code=status.HTTP_201_CREATED, tags=["Books"])
    async def add_book(new_book: NewBook, service: BookService = Depends(get_book_service)):
        """
        Add a new book. The id is assigned by the server.

        - **title**: required
        - **author**: required
        - **description**: optional
        """
        try:
            book = service.add(new_book.title, new_book.author, new_book.description)
            return JSONResponse(status_code=status.HTTP_201_CREATED, content=book.dict())
        except BookValidationError as e:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
        except Exception as e:
            logger.error("Failed to add book", error=str(e))
            raise internal_error()

    @app.put("/api/books/{book_id}", tags=["Books"])
    async def update_book(
        book_id: str,
        changes: BookUpdate,
        service: BookService = Depends(get_book_service)
    ):
        """
        Update a book. Fields left out of the body keep their current values.
        """
        try:
            book = service.replace(parse_book_id(book_id), changes)
            if book is None:
                raise not_found()
            return JSONResponse(content=book.dict())
        except HTTPException:
            raise
        except Exception as e:
            logger.error("Failed to update book", book_id=book_id, error=str(e))
            raise internal_error()

    @app.patch("/api/books/{book_id}", tags=["Books"])
    async def update_book_partial(
        book_id: str,
        changes: BookUpdate,
        service: BookService = Depends(get_book_service)
    ):
        """Update only the given fields of a book."""
        try:
            book = service.merge_partial(parse_book_id(book_id), changes)
            if book is None:
                raise not_found()
            return JSONResponse(content=book.dict())
        except HTTPException:
            raise
        except Exception as e:
            logger.error("Failed to patch book", book_id=book_id, error=str(e))
            raise internal_error()

    @app.delete("/api/books/{book_id}", status_code=status.HTTP_204_NO_CONTENT, tags=["Books"])
    async def delete_book(book_id: str, service: BookService = Depends(get_book_service)):
        """Delete a book."""
        try:
            parsed_id = parse_book_id(book_id)
            if service.get_by_id(parsed_id) is None:
                raise not_found()
            service.delete(parsed_id)
            return Response(status_code=status.HTTP_204_NO_CONTENT)
        except HTTPException:
            raise
        except Exception as e:
            logger.error("Failed to delete book", book_id=book_id, error=str(e))
            raise internal_error()

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "api.main:app",
        host=api_config.host,
        port=api_config.port,
        reload=api_config.debug,
        log_level=config.log_level.lower()
    )
