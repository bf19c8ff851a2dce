# Shared API response utilities for Lambda handlers
import json

ALLOWED_METHODS = "OPTIONS,GET,POST,DELETE"

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type,Authorization",
    "Access-Control-Allow-Methods": ALLOWED_METHODS,
    "Content-Type": "application/json",
}


def api_response(status_code: int, body: dict = None) -> dict:
    """Wrap a payload in the API Gateway proxy envelope. 204 carries no body."""
    return {
        "statusCode": status_code,
        "headers": dict(CORS_HEADERS),
        "body": "" if status_code == 204 else json.dumps(body, ensure_ascii=False),
    }
