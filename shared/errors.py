# Error kinds raised by the book operations and mapped to HTTP statuses by the handler


class BookshelfError(Exception):
    """Base class for bookshelf API errors"""

    status_code = 500

    def __init__(self, message: str, detail: str = None):
        super().__init__(message)
        self.message = message
        self.detail = detail

    def to_body(self) -> dict:
        body = {"message": self.message}
        if self.detail:
            body["error"] = self.detail
        return body


class ValidationError(BookshelfError):
    """Missing required field or malformed identifier"""

    status_code = 400


class BodyParseError(BookshelfError):
    """Request body is not a JSON object"""

    status_code = 400


class NotFoundError(BookshelfError):
    status_code = 404


class BookCreationError(BookshelfError):
    """INSERT returned no row"""
