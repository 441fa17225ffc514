"""
API models and schemas for the FastAPI application.
Book payloads reuse the catalog models; this module adds the envelope
types that only exist on the wire.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from catalog.models import BookUpdate, NewBook

__all__ = ["BookUpdate", "NewBook", "ErrorResponse", "HealthResponse"]


class ErrorResponse(BaseModel):
    """Error response model."""
    message: str = Field(..., description="Error message")
    detail: Optional[str] = Field(None, description="Additional error details")


class HealthResponse(BaseModel):
    """Health check response model."""
    status: str = Field(..., description="Service status")
    timestamp: datetime = Field(..., description="Current timestamp")
    version: str = Field(..., description="API version")
    book_count: int = Field(..., description="Number of books in the collection")
