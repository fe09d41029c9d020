import pytest

from wadl2swagger.converter.operations import convert_method, convert_responses
from wadl2swagger.errors import UnsupportedConstructError
from wadl2swagger.parser.wadl import parse_wadl_string

JSON_ID_REPRESENTATION = (
    '<representation mediaType="application/json">'
    '<param name="id" style="plain" path="id" type="xs:long"/>'
    "</representation>"
)


def _dump(operation) -> dict:
    return operation.model_dump(by_alias=True, exclude_none=True)


class TestConvertResponses:
    def test_no_json_keeps_default(self):
        method = parse_wadl_string('<method name="GET"><response status="404"/></method>')
        responses = convert_responses(method.all("response"))
        assert list(responses) == ["200"]
        assert responses["200"].description == "Successful Response"

    def test_status_list(self):
        method = parse_wadl_string(
            f'<method name="GET"><response status="200 201">{JSON_ID_REPRESENTATION}</response></method>'
        )
        responses = convert_responses(method.all("response"))
        assert set(responses) == {"200", "201"}
        assert responses["201"].description == "201"
        assert responses["201"].schema_["properties"]["id"] == {"type": "integer", "format": "int64"}
        # each status owns its schema
        assert responses["200"].schema_ is not responses["201"].schema_

    def test_status_defaults_to_200(self):
        method = parse_wadl_string(f'<method name="GET"><response>{JSON_ID_REPRESENTATION}</response></method>')
        responses = convert_responses(method.all("response"))
        assert responses["200"].description == "200"
        assert responses["200"].schema_ is not None

    def test_last_response_wins(self):
        method = parse_wadl_string(
            '<method name="GET">'
            f'<response status="200">{JSON_ID_REPRESENTATION}</response>'
            '<response status="200"><representation mediaType="application/json">'
            '<param name="other" style="plain" path="other"/>'
            "</representation></response>"
            "</method>"
        )
        responses = convert_responses(method.all("response"))
        assert set(responses["200"].schema_["properties"]) == {"other"}


class TestConvertMethod:
    def test_minimal_method(self):
        method = parse_wadl_string('<method name="GET" id="listWidgets"/>')
        assert _dump(convert_method(method)) == {
            "operationId": "listWidgets",
            "responses": {"200": {"description": "Successful Response"}},
        }

    def test_request_params_and_body(self):
        method = parse_wadl_string(
            '<method name="POST" id="createWidget">'
            "<request>"
            '<param name="dryRun" style="query" type="xs:boolean"/>'
            '<representation mediaType="application/json">'
            '<param name="name" style="plain" path="name" type="xs:string"/>'
            "</representation>"
            "</request>"
            "</method>"
        )
        params = _dump(convert_method(method))["parameters"]
        assert [p["name"] for p in params] == ["dryRun", "body"]
        assert params[1] == {
            "name": "body",
            "in": "body",
            "schema": {"type": "object", "properties": {"name": {"type": "string"}}},
        }

    def test_docs(self):
        method = parse_wadl_string(
            '<method name="GET" id="get">'
            "<doc>Line one.</doc>"
            '<doc title="More" url="http://docs.example.com/get">Line two.</doc>'
            "</method>"
        )
        data = _dump(convert_method(method))
        assert data["description"] == "Line one.\nLine two."
        assert data["externalDocs"] == {"url": "http://docs.example.com/get"}

    def test_empty_doc_skipped(self):
        method = parse_wadl_string('<method name="GET" id="get"><doc/><doc>Real text</doc></method>')
        assert convert_method(method).description == "Real text"

    def test_request_without_params(self):
        method = parse_wadl_string('<method name="GET" id="get"><request/></method>')
        assert _dump(convert_method(method))["parameters"] == []

    def test_responses_replace_default(self):
        method = parse_wadl_string(
            f'<method name="GET" id="get"><response status="201">{JSON_ID_REPRESENTATION}</response></method>'
        )
        responses = convert_method(method).responses
        assert set(responses) == {"200", "201"}

    def test_multiple_requests_raise(self):
        method = parse_wadl_string('<method name="GET"><request/><request/></method>')
        with pytest.raises(UnsupportedConstructError):
            convert_method(method)
