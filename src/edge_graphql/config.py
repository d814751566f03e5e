"""Client configuration (pydantic BaseModel)."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Keyword arguments of httpx.AsyncClient the client leaves to the caller.
CLIENT_OPTION_KEYS = frozenset(
    {
        "auth",
        "params",
        "cookies",
        "verify",
        "cert",
        "http1",
        "http2",
        "proxy",
        "mounts",
        "limits",
        "max_redirects",
        "event_hooks",
        "transport",
        "trust_env",
        "default_encoding",
        "follow_redirects",
    }
)

# Keyword arguments of httpx.AsyncClient.post the client leaves to the caller.
REQUEST_OPTION_KEYS = frozenset({"params", "cookies", "auth", "follow_redirects", "timeout", "extensions"})


def _check_keys(value: dict[str, Any], allowed: frozenset[str], target: str) -> dict[str, Any]:
    unknown = sorted(set(value) - allowed)
    if unknown:
        raise ValueError(f"{target} does not accept: {', '.join(unknown)}")
    return value


class ClientOptions(BaseModel):
    """Default options applied to every request of a GraphQlClient.

    ``client_options`` go to ``httpx.AsyncClient(...)``, ``request_options``
    to each ``post(...)`` call.
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    headers: dict[str, str] | None = None
    timeout_seconds: float = Field(default=30.0, gt=0)
    client_options: dict[str, Any] = Field(default_factory=dict)
    request_options: dict[str, Any] = Field(default_factory=dict)

    @field_validator("client_options")
    @classmethod
    def _check_client_options(cls, value: dict[str, Any]) -> dict[str, Any]:
        return _check_keys(value, CLIENT_OPTION_KEYS, "httpx.AsyncClient")

    @field_validator("request_options")
    @classmethod
    def _check_request_options(cls, value: dict[str, Any]) -> dict[str, Any]:
        return _check_keys(value, REQUEST_OPTION_KEYS, "httpx.AsyncClient.post")
