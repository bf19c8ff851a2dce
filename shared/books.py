import re
import logging
from typing import Any, Dict, List

from pydantic import ValidationError as PydanticValidationError

from db.executor import QueryExecutor
from settings import AppConfig
from shared.errors import BookCreationError, NotFoundError, ValidationError
from shared.models import Book, BookCreateRequest
from shared.sample_books import SAMPLE_BOOKS

logger = logging.getLogger("bookshelf-lambda")

NOT_FOUND_MESSAGE = "指定された図書が見つかりません"

BOOK_COLUMNS = """
    id,
    title,
    author,
    publisher,
    publication_date::text AS publication_date,
    isbn,
    genre,
    page_count,
    language,
    owner,
    description,
    created_at::text AS created_at,
    updated_at::text AS updated_at
"""

INSERT_FIELDS = (
    "title",
    "author",
    "publisher",
    "publication_date",
    "isbn",
    "genre",
    "page_count",
    "language",
    "owner",
    "description",
)

_BOOK_ID_PATTERN = re.compile(r"[0-9]+")


# ---- Book DB Logic ----
def parse_book_id(book_id: Any) -> int:
    """Parse a path identifier, rejecting anything but plain ASCII digits."""
    text = "" if book_id is None else str(book_id).strip()
    if not _BOOK_ID_PATTERN.fullmatch(text):
        raise ValidationError("図書IDが不正です", f"Invalid book id: {book_id!r}")
    return int(text)


def list_books(db: QueryExecutor) -> List[Book]:
    if AppConfig.get_bool("demo_mode"):
        logger.info("Demo mode enabled, returning sample books")
        return [Book(**row) for row in SAMPLE_BOOKS]
    rows = db.query(f"SELECT {BOOK_COLUMNS} FROM books ORDER BY id DESC")
    return [Book(**row) for row in rows]


def create_book(db: QueryExecutor, fields: Dict[str, Any], summarizer=None) -> Book:
    """
    Validate and insert a new book, returning the stored row.

    Args:
        db: executor for this invocation
        fields (dict): decoded request body
        summarizer: optional BookSummaryService used to fill a missing description

    Raises:
        ValidationError: title, author or publisher missing or empty
        BookCreationError: the INSERT returned no row
    """
    try:
        request = BookCreateRequest.model_validate(fields)
    except PydanticValidationError as e:
        problems = ", ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise ValidationError("入力内容が不正です", problems)

    if request.description is None and summarizer is not None:
        summary = summarizer.generate_summary({
            "title": request.title,
            "author": request.author,
            "publisher": request.publisher,
            "genre": request.genre,
        })
        request.description = summary or None

    columns = ", ".join(INSERT_FIELDS)
    placeholders = ", ".join(f"${i}" for i in range(1, len(INSERT_FIELDS) + 1))
    rows = db.query(
        f"""
        INSERT INTO books ({columns})
        VALUES ({placeholders})
        RETURNING {BOOK_COLUMNS}
        """,
        [getattr(request, name) for name in INSERT_FIELDS],
    )
    if not rows:
        raise BookCreationError("図書の登録に失敗しました")
    book = Book(**rows[0])
    logger.info(f"Created book {book.id}")
    return book


def fetch_book(db: QueryExecutor, book_id: Any) -> Book:
    book_pk = parse_book_id(book_id)
    rows = db.query(f"SELECT {BOOK_COLUMNS} FROM books WHERE id = $1", [book_pk])
    if not rows:
        raise NotFoundError(NOT_FOUND_MESSAGE)
    return Book(**rows[0])


def delete_book(db: QueryExecutor, book_id: Any) -> bool:
    """
    Delete a book by id. Returns True when the DELETE removed a row.

    The existence check only picks the error message; a concurrent delete
    between the check and the DELETE shows up as False.
    """
    book_pk = parse_book_id(book_id)
    existing = db.query("SELECT id FROM books WHERE id = $1", [book_pk])
    if not existing:
        raise NotFoundError(NOT_FOUND_MESSAGE)
    deleted = db.query("DELETE FROM books WHERE id = $1 RETURNING id", [book_pk])
    if deleted:
        logger.info(f"Deleted book {book_pk}")
    return len(deleted) > 0
