"""WADL method and response conversion."""

import copy

from wadl2swagger.converter.base import DEFAULT_RESPONSE_DESCRIPTION, Operation, Parameter, Response
from wadl2swagger.converter.params import convert_doc, convert_parameter
from wadl2swagger.converter.schema import JSON_MEDIA_TYPE, convert_representations
from wadl2swagger.parser.base import WadlNode


def default_responses() -> dict[str, Response]:
    return {"200": Response(description=DEFAULT_RESPONSE_DESCRIPTION)}


def convert_responses(wadl_responses: list[WadlNode]) -> dict[str, Response]:
    """Convert WADL ``<response>`` elements into Swagger responses.

    The default 200 response is always kept unless a response overrides it.
    Each listed status gets its own copy of the schema; when several responses
    share a status code, the last one wins.
    """
    responses = default_responses()

    for wadl_response in wadl_responses:
        statuses = (wadl_response.attr("status") or "200").split()
        representations = convert_representations(wadl_response.all("representation"))
        schema = representations.get(JSON_MEDIA_TYPE)
        if schema is None:
            continue

        for status in statuses:
            responses[status] = Response(description=status, schema_=copy.deepcopy(schema))

    return responses


def convert_method(wadl_method: WadlNode) -> Operation:
    """Convert a WADL ``<method>`` into a Swagger operation."""
    parameters: list[Parameter] | None = None

    wadl_request = wadl_method.one("request")
    if wadl_request is not None:
        parameters = [convert_parameter(param) for param in wadl_request.all("param")]

        representations = convert_representations(wadl_request.all("representation"))
        if JSON_MEDIA_TYPE in representations:
            parameters.append(
                Parameter(name="body", in_="body", schema_=representations[JSON_MEDIA_TYPE])
            )

    responses = default_responses()
    if wadl_method.has("response"):
        responses = convert_responses(wadl_method.all("response"))

    return Operation(
        operationId=wadl_method.attr("id"),
        parameters=parameters,
        responses=responses,
        **convert_doc(wadl_method.docs()),
    )
