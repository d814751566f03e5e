"""edge_graphql: minimal GraphQL client with edge cache support."""

from .body import JsonBody, ParsedBody, TextBody, parse_body
from .cache import EdgeCache, EventContext, InMemoryEdgeCache, TaskEventContext
from .client import GraphQlClient, raw_request, request
from .config import ClientOptions
from .exceptions import ClientError, GraphQlClientError, GraphQlClientErrorCodes
from .types import CacheOptions, ErrorLocation, GraphQlError, GraphQlQuery, GraphQlResponse

__all__ = [
    "CacheOptions",
    "ClientError",
    "ClientOptions",
    "EdgeCache",
    "ErrorLocation",
    "EventContext",
    "GraphQlClient",
    "GraphQlClientError",
    "GraphQlClientErrorCodes",
    "GraphQlError",
    "GraphQlQuery",
    "GraphQlResponse",
    "InMemoryEdgeCache",
    "JsonBody",
    "ParsedBody",
    "TaskEventContext",
    "TextBody",
    "parse_body",
    "raw_request",
    "request",
]
