"""GraphQL type and configuration tests."""

import httpx
import pytest
from edge_graphql import ClientOptions, ErrorLocation, GraphQlError, GraphQlQuery, GraphQlResponse
from pydantic import ValidationError


def test_query_body_with_variables() -> None:
    query = GraphQlQuery(query="query($id: ID!) { user(id: $id) { name } }", variables={"id": "123"})
    assert query.to_dict() == {
        "query": "query($id: ID!) { user(id: $id) { name } }",
        "variables": {"id": "123"},
    }


def test_query_body_keeps_empty_variables() -> None:
    assert GraphQlQuery(query="{ a }", variables={}).to_dict() == {"query": "{ a }", "variables": {}}


def test_query_is_frozen() -> None:
    query = GraphQlQuery(query="{ a }")
    with pytest.raises(AttributeError):
        query.query = "{ b }"  # type: ignore[misc]


def test_graphql_error_from_dict() -> None:
    error = GraphQlError.from_dict(
        {
            "message": "Not found",
            "locations": [{"line": 1, "column": 5}],
            "path": ["user"],
            "extensions": {"code": "NOT_FOUND"},
        }
    )
    assert error.message == "Not found"
    assert error.locations == [ErrorLocation(line=1, column=5)]
    assert error.path == ["user"]
    assert error.extensions == {"code": "NOT_FOUND"}


def test_graphql_error_defaults() -> None:
    error = GraphQlError.from_dict({"message": "test error"})
    assert error.locations is None
    assert error.path is None


def test_graphql_error_from_non_object() -> None:
    assert GraphQlError.from_dict("oops").message == "oops"


def test_response_from_body() -> None:
    headers = httpx.Headers({"X-Id": "1"})
    response = GraphQlResponse.from_body({"data": {"name": "test"}, "extensions": {"t": 1}}, 200, headers)
    assert response.data == {"name": "test"}
    assert response.extensions == {"t": 1}
    assert response.status == 200
    assert response.headers is headers
    assert response.errors is None
    assert response.has_errors is False


def test_response_with_errors() -> None:
    response = GraphQlResponse.from_body({"errors": [{"message": "x"}]}, 200, httpx.Headers())
    assert response.has_errors is True
    assert response.errors[0].message == "x"


def test_client_options_defaults() -> None:
    options = ClientOptions()
    assert options.headers is None
    assert options.timeout_seconds == 30.0
    assert options.request_options == {}


def test_client_options_invalid_timeout() -> None:
    with pytest.raises(ValidationError):
        ClientOptions(timeout_seconds=0)


@pytest.mark.parametrize("key", ["method", "url", "content", "json", "headers"])
def test_client_options_reject_non_post_keys(key: str) -> None:
    with pytest.raises(ValidationError):
        ClientOptions(request_options={key: "x"})


def test_client_options_forbid_unknown_fields() -> None:
    with pytest.raises(ValidationError):
        ClientOptions.model_validate({"timeout": 5})


def test_client_options_split_passthrough() -> None:
    options = ClientOptions(client_options={"verify": False, "http2": True}, request_options={"timeout": 2.0})
    assert options.client_options == {"verify": False, "http2": True}
    assert options.request_options == {"timeout": 2.0}


def test_client_options_validate_assignment() -> None:
    options = ClientOptions()
    with pytest.raises(ValidationError):
        options.headers = {"X": 1}  # type: ignore[dict-item]
