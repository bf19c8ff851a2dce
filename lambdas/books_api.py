import logging

from db.executor import open_executor
from services.book_summary import BookSummaryService
from settings import AppConfig
from shared.books import NOT_FOUND_MESSAGE, create_book, delete_book, fetch_book, list_books
from shared.errors import BookshelfError, NotFoundError, ValidationError
from shared.events import parse_request
from shared.models import BookCreatedResponse, RouteKind
from shared.responses import api_response

logger = logging.getLogger("bookshelf-lambda")

MISSING_ID_MESSAGE = "図書IDが指定されていません"

STORE_ROUTES = (
    RouteKind.LIST_BOOKS,
    RouteKind.CREATE_BOOK,
    RouteKind.GET_BOOK,
    RouteKind.DELETE_BOOK,
)


def configured_log_level() -> str:
    """Level name from config, INFO when the name is not a logging level."""
    level = str(AppConfig.get_value("log_level")).upper()
    if not isinstance(logging.getLevelName(level), int):
        return "INFO"
    return level


logger.setLevel(configured_log_level())


def _summarizer():
    if not AppConfig.get_bool("ai_summary_enabled"):
        return None
    try:
        return BookSummaryService()
    except Exception as e:
        # Summaries are optional; create the book without one
        logger.error(f"Book summary service unavailable: {str(e)}")
        return None


def _require_book_id(request):
    if not request.book_id:
        raise ValidationError(MISSING_ID_MESSAGE)
    return request.book_id


def dispatch(request, db) -> dict:
    if request.kind == RouteKind.PREFLIGHT:
        return api_response(200, {})

    if request.kind == RouteKind.LIST_BOOKS:
        books = list_books(db)
        return api_response(200, {"books": [book.model_dump() for book in books]})

    if request.kind == RouteKind.CREATE_BOOK:
        book = create_book(db, request.body, summarizer=_summarizer())
        created = BookCreatedResponse(message="図書が登録されました", id=book.id)
        return api_response(201, created.model_dump())

    if request.kind == RouteKind.GET_BOOK:
        book = fetch_book(db, _require_book_id(request))
        return api_response(200, book.model_dump())

    if request.kind == RouteKind.DELETE_BOOK:
        book_id = _require_book_id(request)
        if not delete_book(db, book_id):
            raise NotFoundError(NOT_FOUND_MESSAGE)
        return api_response(204)

    return api_response(404, {"message": "Not Found"})


def lambda_handler(event, context):
    # CORS preflight never reaches the database
    if (event.get("httpMethod") or "").upper() == "OPTIONS":
        return api_response(200, {})

    db = None
    try:
        request = parse_request(event)
        if request.kind not in STORE_ROUTES:
            return dispatch(request, None)
        if request.kind in (RouteKind.GET_BOOK, RouteKind.DELETE_BOOK):
            _require_book_id(request)
        db = open_executor()
        return dispatch(request, db)
    except BookshelfError as e:
        if e.status_code < 500:
            return api_response(e.status_code, e.to_body())
        logger.error(f"Request failed: {e.message}")
        return api_response(500, {"message": "Internal Server Error", "error": e.message})
    except Exception as e:
        logger.exception("Unhandled error while processing request")
        return api_response(500, {"message": "Internal Server Error", "error": str(e)})
    finally:
        if db is not None:
            try:
                db.close()
            except Exception as e:
                logger.error(f"Failed to close database connection: {e}")
