"""Response body classification tests."""

import json

import httpx
import pytest
from edge_graphql.body import JsonBody, TextBody, error_body, is_success, parse_body


def test_parse_json_body() -> None:
    resp = httpx.Response(200, json={"data": {"id": 1}})
    assert parse_body(resp) == JsonBody({"data": {"id": 1}})


def test_parse_json_with_charset() -> None:
    resp = httpx.Response(
        200,
        headers={"Content-Type": "application/json; charset=utf-8"},
        content=b'{"data": null}',
    )
    assert parse_body(resp) == JsonBody({"data": None})


def test_parse_text_body() -> None:
    resp = httpx.Response(502, headers={"Content-Type": "text/html"}, text="Bad Gateway")
    assert parse_body(resp) == TextBody("Bad Gateway")


def test_parse_without_content_type() -> None:
    resp = httpx.Response(200, content=b"plain")
    assert parse_body(resp) == TextBody("plain")


def test_malformed_json_propagates() -> None:
    resp = httpx.Response(200, headers={"Content-Type": "application/json"}, content=b"{not json")
    with pytest.raises(json.JSONDecodeError):
        parse_body(resp)


def test_success_requires_data() -> None:
    resp = httpx.Response(200)
    assert is_success(resp, JsonBody({"data": {"x": 1}})) is True
    assert is_success(resp, JsonBody({"data": None})) is False
    assert is_success(resp, JsonBody({})) is False


def test_success_with_empty_errors() -> None:
    """errors: [] alongside data is still a success."""
    resp = httpx.Response(200)
    assert is_success(resp, JsonBody({"data": {"x": 1}, "errors": []})) is True


def test_errors_fail_even_with_data() -> None:
    resp = httpx.Response(200)
    assert is_success(resp, JsonBody({"data": {"x": 1}, "errors": [{"message": "partial"}]})) is False


def test_http_failure_is_not_success() -> None:
    resp = httpx.Response(500)
    assert is_success(resp, JsonBody({"data": {"x": 1}})) is False


def test_text_is_never_success() -> None:
    resp = httpx.Response(200)
    assert is_success(resp, TextBody("ok")) is False
    assert is_success(resp, JsonBody(["data"])) is False


def test_error_body_shapes() -> None:
    assert error_body(JsonBody({"errors": []})) == {"errors": []}
    assert error_body(JsonBody("boom")) == {"error": "boom"}
    assert error_body(TextBody("Bad Gateway")) == {"error": "Bad Gateway"}
