"""Response body classification."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

import httpx


@dataclass(frozen=True)
class JsonBody:
    """Body delivered with a JSON content type."""

    value: Any


@dataclass(frozen=True)
class TextBody:
    """Body delivered with any other content type."""

    text: str


ParsedBody = Union[JsonBody, TextBody]


def parse_body(response: httpx.Response) -> ParsedBody:
    """Parse the body as JSON or return it as text, depending on Content-Type.

    Malformed JSON raises ``json.JSONDecodeError``.
    """
    content_type = response.headers.get("Content-Type")
    if content_type and content_type.startswith("application/json"):
        return JsonBody(response.json())
    return TextBody(response.text)


def is_success(response: httpx.Response, parsed: ParsedBody) -> bool:
    """2xx status, no (or empty) ``errors`` and a non-null ``data``."""
    if not response.is_success:
        return False
    if not isinstance(parsed, JsonBody) or not isinstance(parsed.value, dict):
        return False
    body = parsed.value
    return not body.get("errors") and body.get("data") is not None


def error_body(parsed: ParsedBody) -> dict[str, Any]:
    """Body shaped as a dictionary for ClientError."""
    if isinstance(parsed, JsonBody):
        if isinstance(parsed.value, dict):
            return parsed.value
        return {"error": parsed.value}
    return {"error": parsed.text}
