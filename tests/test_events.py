import base64
import json

import pytest

from shared.errors import BodyParseError
from shared.events import decode_body, parse_request
from shared.models import RouteKind
from shared.responses import api_response


@pytest.mark.parametrize(
    "method, resource, kind",
    [
        ("GET", "/books", RouteKind.LIST_BOOKS),
        ("POST", "/books", RouteKind.CREATE_BOOK),
        ("GET", "/books/{id}", RouteKind.GET_BOOK),
        ("DELETE", "/books/{id}", RouteKind.DELETE_BOOK),
        ("options", "/books/{id}", RouteKind.PREFLIGHT),
        ("PUT", "/books/{id}", RouteKind.UNKNOWN),
        (None, None, RouteKind.UNKNOWN),
    ],
)
def test_parse_request_route_table(method, resource, kind):
    event = {"httpMethod": method, "resource": resource, "body": "{}"}
    assert parse_request(event).kind == kind


def test_parse_request_carries_path_id():
    request = parse_request({"httpMethod": "GET", "resource": "/books/{id}", "pathParameters": {"id": 12}})
    assert request.book_id == "12"


def test_body_is_only_decoded_for_create():
    request = parse_request({"httpMethod": "GET", "resource": "/books", "body": "{broken"})
    assert request.body is None


def test_decode_body_variants():
    assert decode_body({"body": None}) == {}
    assert decode_body({"body": ""}) == {}
    assert decode_body({"body": '{"title": "A"}'}) == {"title": "A"}
    encoded = base64.b64encode(json.dumps({"title": "本"}).encode("utf-8")).decode("ascii")
    assert decode_body({"body": encoded, "isBase64Encoded": True}) == {"title": "本"}


@pytest.mark.parametrize(
    "event",
    [
        {"body": "{broken"},
        {"body": "[]"},
        {"body": "not base64!", "isBase64Encoded": True},
        {"body": "本", "isBase64Encoded": True},
    ],
)
def test_decode_body_rejects_malformed_input(event):
    with pytest.raises(BodyParseError):
        decode_body(event)


def test_api_response_envelope():
    response = api_response(200, {"message": "図書"})

    assert response["statusCode"] == 200
    assert response["headers"] == {
        "Access-Control-Allow-Origin": "*",
        "Access-Control-Allow-Headers": "Content-Type,Authorization",
        "Access-Control-Allow-Methods": "OPTIONS,GET,POST,DELETE",
        "Content-Type": "application/json",
    }
    assert json.loads(response["body"]) == {"message": "図書"}


def test_api_response_headers_are_not_shared():
    first = api_response(200, {})
    first["headers"]["X-Extra"] = "1"
    assert "X-Extra" not in api_response(200, {})["headers"]


def test_no_content_response_has_empty_body():
    assert api_response(204)["body"] == ""
