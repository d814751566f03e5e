"""Edge cache capability and read-through orchestration."""

from __future__ import annotations

import asyncio
import logging
import re
import time
from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable
from typing import Any, Protocol

import httpx

from .exceptions import GraphQlClientError, GraphQlClientErrorCodes
from .types import CacheOptions

logger = logging.getLogger(__name__)

_MAX_AGE = re.compile(r"max-age=(\d+)")

# Stored bodies are already decoded, so framing headers no longer describe them.
_FRAMING_HEADERS = frozenset({"content-encoding", "content-length", "transfer-encoding"})


class EventContext(Protocol):
    """Host task context that keeps background work alive past the response."""

    def wait_until(self, awaitable: Awaitable[Any]) -> None: ...


class EdgeCache(ABC):
    """Key/value store for whole HTTP responses."""

    @abstractmethod
    async def match(self, key: str) -> httpx.Response | None:
        """Return the stored response for key, or None."""
        ...

    @abstractmethod
    async def put(self, key: str, response: httpx.Response) -> None:
        """Store response under key."""
        ...


class _CacheEntry:
    __slots__ = ("status", "headers", "content", "expires_at")

    def __init__(self, response: httpx.Response) -> None:
        self.status = response.status_code
        self.headers = list(response.headers.multi_items())
        self.content = response.content
        ttl = _max_age(response.headers)
        self.expires_at: float | None = time.monotonic() + ttl if ttl is not None else None

    def is_expired(self) -> bool:
        return self.expires_at is not None and time.monotonic() >= self.expires_at

    def to_response(self) -> httpx.Response:
        return httpx.Response(self.status, headers=self.headers, content=self.content)


class InMemoryEdgeCache(EdgeCache):
    """In-memory edge cache; entries expire after their Cache-Control max-age."""

    def __init__(self) -> None:
        self._store: dict[str, _CacheEntry] = {}

    async def match(self, key: str) -> httpx.Response | None:
        entry = self._store.get(key)
        if entry is None:
            return None
        if entry.is_expired():
            del self._store[key]
            return None
        return entry.to_response()

    async def put(self, key: str, response: httpx.Response) -> None:
        self._store[key] = _CacheEntry(response)

    def __len__(self) -> int:
        return len(self._store)


class TaskEventContext:
    """asyncio-backed EventContext.

    Each awaitable passed to wait_until runs as a task; drain() waits for all
    of them and re-raises the first failure.
    """

    def __init__(self) -> None:
        self._tasks: list[asyncio.Future[Any]] = []

    @property
    def pending(self) -> int:
        return sum(1 for task in self._tasks if not task.done())

    def wait_until(self, awaitable: Awaitable[Any]) -> None:
        self._tasks.append(asyncio.ensure_future(awaitable))

    async def drain(self) -> None:
        tasks, self._tasks = self._tasks, []
        results = await asyncio.gather(*tasks, return_exceptions=True)
        for result in results:
            if isinstance(result, BaseException):
                raise result


def validate_cache_options(
    options: CacheOptions,
    event: EventContext | None,
    cache: EdgeCache | None,
) -> None:
    """Reject caching requests that lack an event, key, TTL or store."""
    if not options.cache:
        return
    if event is None:
        raise GraphQlClientError(
            code=GraphQlClientErrorCodes.CACHE_EVENT_MISSING,
            message="cache is set true but the event is undefined",
        )
    if not options.cache_key:
        raise GraphQlClientError(
            code=GraphQlClientErrorCodes.CACHE_KEY_MISSING,
            message="cache is set true but no cache_key is specified",
        )
    if not options.cache_ttl:
        raise GraphQlClientError(
            code=GraphQlClientErrorCodes.CACHE_TTL_MISSING,
            message="cache is set true but no cache_ttl is specified",
        )
    if cache is None:
        raise GraphQlClientError(
            code=GraphQlClientErrorCodes.CACHE_STORE_MISSING,
            message="cache is set true but the client has no edge cache",
        )


async def cached_fetch(
    cache: EdgeCache,
    key: str,
    ttl: int,
    event: EventContext,
    fetch: Callable[[], Awaitable[httpx.Response]],
) -> httpx.Response:
    """Serve key from cache, or fetch it and store it in the background.

    On a miss the response gets ``Cache-Control: max-age=<ttl>`` appended and a
    copy is handed to ``cache.put`` through ``event.wait_until``; the annotated
    response is returned without waiting for the write.
    """
    cached = await cache.match(key)
    if cached is not None:
        logger.debug("Edge cache hit", extra={"cache_key": key})
        return cached

    logger.debug("Edge cache miss", extra={"cache_key": key})
    response = await fetch()
    annotated = _with_cache_control(response, ttl)
    event.wait_until(cache.put(key, _clone(annotated)))
    logger.debug("Scheduled edge cache write", extra={"cache_key": key, "ttl": ttl})
    return annotated


def _with_cache_control(response: httpx.Response, ttl: int) -> httpx.Response:
    headers = [
        (name, value)
        for name, value in response.headers.multi_items()
        if name.lower() not in _FRAMING_HEADERS
    ]
    headers.append(("Cache-Control", f"max-age={ttl}"))
    return httpx.Response(
        response.status_code,
        headers=headers,
        content=response.content,
    )


def _clone(response: httpx.Response) -> httpx.Response:
    return httpx.Response(
        response.status_code,
        headers=list(response.headers.multi_items()),
        content=response.content,
    )


def _max_age(headers: httpx.Headers) -> int | None:
    ages = [int(m.group(1)) for value in headers.get_list("Cache-Control") if (m := _MAX_AGE.search(value))]
    return min(ages) if ages else None
