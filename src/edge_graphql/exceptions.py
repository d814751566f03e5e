"""edge_graphql library exception types."""

from __future__ import annotations

import json
from typing import Any

import httpx

from .types import GraphQlError, GraphQlQuery


class GraphQlClientError(Exception):
    """Base error of the edge_graphql library."""

    def __init__(
        self,
        code: str,
        message: str,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return f"{self.code}: {super().__str__()}"


class GraphQlClientErrorCodes:
    """GraphQlClientError code constants."""

    CACHE_EVENT_MISSING: str = "CACHE_EVENT_MISSING"
    CACHE_KEY_MISSING: str = "CACHE_KEY_MISSING"
    CACHE_TTL_MISSING: str = "CACHE_TTL_MISSING"
    CACHE_STORE_MISSING: str = "CACHE_STORE_MISSING"
    HTTP_ERROR: str = "HTTP_ERROR"
    GRAPHQL_ERROR: str = "GRAPHQL_ERROR"
    INVALID_RESPONSE: str = "INVALID_RESPONSE"


class ClientError(GraphQlClientError):
    """Raised for every response that is not a successful GraphQL result.

    ``body`` is the parsed response body, always a dictionary (plain text
    bodies arrive as ``{"error": text}``). ``response`` is ``body`` merged
    with ``status`` and ``headers``. ``request`` is the operation that was sent.
    """

    def __init__(
        self,
        body: dict[str, Any],
        status: int,
        headers: httpx.Headers,
        request: GraphQlQuery,
    ) -> None:
        self.body = body
        self.status = status
        self.headers = headers
        self.request = request
        self.response: dict[str, Any] = {**body, "status": status, "headers": headers}
        super().__init__(self._classify(), self._describe())

    @property
    def errors(self) -> list[GraphQlError]:
        raw = self.body.get("errors")
        if not isinstance(raw, list):
            return []
        return [GraphQlError.from_dict(e) for e in raw]

    def _classify(self) -> str:
        if self.errors:
            return GraphQlClientErrorCodes.GRAPHQL_ERROR
        if not 200 <= self.status < 300:
            return GraphQlClientErrorCodes.HTTP_ERROR
        return GraphQlClientErrorCodes.INVALID_RESPONSE

    def _describe(self) -> str:
        errors = self.errors
        summary = errors[0].message if errors else f"GraphQL request failed with status {self.status}"
        context = json.dumps(
            {
                "response": {**self.body, "status": self.status},
                "request": self.request.to_dict(),
            },
            default=str,
        )
        return f"{summary}: {context}"
