import json
import base64
import logging
from typing import Dict, Any

from shared.errors import BodyParseError
from shared.models import ApiRequest, RouteKind

logger = logging.getLogger("bookshelf-lambda")

BOOKS_RESOURCE = "/books"
BOOK_RESOURCE = "/books/{id}"

ROUTES = {
    ("GET", BOOKS_RESOURCE): RouteKind.LIST_BOOKS,
    ("POST", BOOKS_RESOURCE): RouteKind.CREATE_BOOK,
    ("GET", BOOK_RESOURCE): RouteKind.GET_BOOK,
    ("DELETE", BOOK_RESOURCE): RouteKind.DELETE_BOOK,
}


def decode_body(event: Dict[str, Any]) -> Dict[str, Any]:
    """Extract the JSON object from an API Gateway event body"""
    body = event.get("body")
    if body is None or body == "":
        return {}

    if event.get("isBase64Encoded", False):
        try:
            body = base64.b64decode(body, validate=True).decode("utf-8")
        except ValueError as e:
            logger.error(f"Failed to decode base64 body: {str(e)}")
            raise BodyParseError("リクエストボディが不正です", "Invalid base64 encoding in request body")

    if isinstance(body, (str, bytes)):
        try:
            body = json.loads(body)
        except json.JSONDecodeError as e:
            logger.error("Failed to parse JSON body")
            raise BodyParseError("リクエストボディが不正です", f"Request body is not valid JSON: {e}")

    if not isinstance(body, dict):
        raise BodyParseError("リクエストボディが不正です", "Request body must be a JSON object")
    return body


def parse_request(event: Dict[str, Any]) -> ApiRequest:
    """
    Map an API Gateway proxy event onto one route of the books API.
    The body is only decoded for POST /books, so a malformed body on
    other routes is ignored.
    """
    method = (event.get("httpMethod") or "").upper()
    if method == "OPTIONS":
        return ApiRequest(kind=RouteKind.PREFLIGHT)

    kind = ROUTES.get((method, event.get("resource")), RouteKind.UNKNOWN)
    params = event.get("pathParameters") or {}
    book_id = params.get("id")
    if book_id is not None:
        book_id = str(book_id)

    if kind == RouteKind.CREATE_BOOK:
        return ApiRequest(kind=kind, body=decode_body(event))
    return ApiRequest(kind=kind, book_id=book_id)
