"""GraphQL HTTP client with optional edge caching."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

import httpx

from .body import error_body, is_success, parse_body
from .cache import EdgeCache, EventContext, cached_fetch, validate_cache_options
from .config import ClientOptions
from .exceptions import ClientError
from .types import CacheOptions, GraphQlQuery, GraphQlResponse

logger = logging.getLogger(__name__)


class GraphQlClient:
    """GraphQL client bound to a single endpoint.

    Every call POSTs ``{"query": ..., "variables": ...}`` as JSON. Responses
    that are not a successful GraphQL result raise ClientError.

    Args:
        url: GraphQL endpoint
        options: ClientOptions, or a mapping validated into one
        cache: edge cache consulted when a call asks for caching
    """

    def __init__(
        self,
        url: str,
        options: ClientOptions | Mapping[str, Any] | None = None,
        *,
        cache: EdgeCache | None = None,
    ) -> None:
        self._url = url
        if options is None:
            options = ClientOptions()
        elif not isinstance(options, ClientOptions):
            options = ClientOptions.model_validate(dict(options))
        self._options = options
        self._cache = cache

    @property
    def url(self) -> str:
        return self._url

    @property
    def options(self) -> ClientOptions:
        return self._options

    def _make_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self._options.timeout_seconds,
            **self._options.client_options,
        )

    def _build_headers(self) -> dict[str, str]:
        headers: dict[str, str] = {"Content-Type": "application/json"}
        headers.update(self._options.headers or {})
        return headers

    async def _post(self, operation: GraphQlQuery) -> httpx.Response:
        body = json.dumps(operation.to_dict())
        logger.debug("Sending GraphQL request", extra={"url": self._url})
        async with self._make_client() as client:
            resp = await client.post(
                self._url,
                content=body,
                headers=self._build_headers(),
                **self._options.request_options,
            )
        logger.debug(
            "Received GraphQL response",
            extra={"url": self._url, "status": resp.status_code},
        )
        return resp

    async def raw_request(
        self,
        query: str,
        variables: dict[str, Any] | None = None,
        event: EventContext | None = None,
        cache_options: CacheOptions | None = None,
    ) -> GraphQlResponse[Any]:
        """Send an operation and return the full result.

        Raises:
            GraphQlClientError: caching requested without event, key, TTL or store
            ClientError: HTTP failure, GraphQL errors, or no data in the body
        """
        cache_options = cache_options or CacheOptions()
        validate_cache_options(cache_options, event, self._cache)

        operation = GraphQlQuery(query=query, variables=variables)

        if cache_options.cache:
            resp = await cached_fetch(
                self._cache,
                cache_options.cache_key,
                cache_options.cache_ttl,
                event,
                lambda: self._post(operation),
            )
        else:
            resp = await self._post(operation)

        parsed = parse_body(resp)
        if is_success(resp, parsed):
            return GraphQlResponse.from_body(parsed.value, resp.status_code, resp.headers)
        raise ClientError(
            body=error_body(parsed),
            status=resp.status_code,
            headers=resp.headers,
            request=operation,
        )

    async def request(self, query: str, variables: dict[str, Any] | None = None) -> Any:
        """Send an operation and return only its ``data``."""
        result = await self.raw_request(query, variables)
        return result.data

    def set_headers(self, headers: Mapping[str, str]) -> GraphQlClient:
        """Replace all default headers."""
        self._options.headers = dict(headers)
        return self

    def set_header(self, key: str, value: str) -> GraphQlClient:
        """Add or overwrite one default header."""
        self._options.headers = {**(self._options.headers or {}), key: value}
        return self


async def raw_request(url: str, query: str, variables: dict[str, Any] | None = None) -> GraphQlResponse[Any]:
    """One-shot raw_request against url with default options."""
    return await GraphQlClient(url).raw_request(query, variables)


async def request(url: str, query: str, variables: dict[str, Any] | None = None) -> Any:
    """One-shot request against url with default options."""
    return await GraphQlClient(url).request(query, variables)
