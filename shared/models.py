import datetime
import enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RouteKind(str, enum.Enum):
    """Operations the books API dispatches to"""

    PREFLIGHT = "preflight"
    LIST_BOOKS = "list_books"
    CREATE_BOOK = "create_book"
    GET_BOOK = "get_book"
    DELETE_BOOK = "delete_book"
    UNKNOWN = "unknown"


class ApiRequest(BaseModel):
    """An API Gateway event reduced to what the handler needs"""

    kind: RouteKind
    book_id: Optional[str] = None
    body: Optional[Dict[str, Any]] = None


class BookCreateRequest(BaseModel):
    """POST /books payload. Unknown keys (id, timestamps) are ignored."""

    model_config = ConfigDict(extra="ignore")

    title: str
    author: str
    publisher: str
    publication_date: Optional[datetime.date] = None
    isbn: Optional[str] = None
    genre: Optional[str] = None
    page_count: Optional[int] = Field(default=None, ge=0, le=2147483647)
    language: Optional[str] = None
    owner: Optional[str] = None
    description: Optional[str] = None

    @field_validator("title", "author", "publisher")
    @classmethod
    def required_text(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be empty")
        return value


class Book(BaseModel):
    """A row of the books table as returned to clients"""

    id: int
    title: str
    author: str
    publisher: str
    publication_date: Optional[str] = None  # YYYY-MM-DD, formatted by the store
    isbn: Optional[str] = None
    genre: Optional[str] = None
    page_count: Optional[int] = None
    language: Optional[str] = None
    owner: Optional[str] = None
    description: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class BookCreatedResponse(BaseModel):
    message: str
    id: int
