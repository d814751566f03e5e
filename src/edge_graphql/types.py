"""GraphQL types."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

import httpx

T = TypeVar("T")


@dataclass(frozen=True)
class GraphQlQuery:
    """GraphQL query or mutation with its variables."""

    query: str
    variables: dict[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        """Request body; variables are omitted when unset."""
        body: dict[str, Any] = {"query": self.query}
        if self.variables is not None:
            body["variables"] = self.variables
        return body


@dataclass
class ErrorLocation:
    """Error location in a GraphQL document."""

    line: int
    column: int

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ErrorLocation:
        return cls(line=data.get("line", 0), column=data.get("column", 0))


@dataclass
class GraphQlError:
    """GraphQL error."""

    message: str
    locations: list[ErrorLocation] | None = None
    path: list[Any] | None = None
    extensions: dict[str, Any] | None = None

    @classmethod
    def from_dict(cls, data: Any) -> GraphQlError:
        """Build from an entry of a response's ``errors`` array."""
        if not isinstance(data, dict):
            return cls(message=str(data))
        locations = data.get("locations")
        return cls(
            message=str(data.get("message", "")),
            locations=(
                [ErrorLocation.from_dict(loc) for loc in locations]
                if isinstance(locations, list)
                else None
            ),
            path=data.get("path"),
            extensions=data.get("extensions"),
        )


@dataclass
class CacheOptions:
    """Edge cache settings for a single request."""

    cache: bool = False
    cache_key: str | None = None
    cache_ttl: int | None = None


@dataclass
class GraphQlResponse(Generic[T]):
    """GraphQL response together with its HTTP status and headers."""

    status: int
    headers: httpx.Headers = field(default_factory=httpx.Headers)
    data: T | None = None
    extensions: Any = None
    errors: list[GraphQlError] | None = None

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    @classmethod
    def from_body(
        cls, body: dict[str, Any], status: int, headers: httpx.Headers
    ) -> GraphQlResponse[Any]:
        errors = body.get("errors")
        return cls(
            status=status,
            headers=headers,
            data=body.get("data"),
            extensions=body.get("extensions"),
            errors=[GraphQlError.from_dict(e) for e in errors] if isinstance(errors, list) else None,
        )
