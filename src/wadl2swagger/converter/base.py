"""Swagger 2.0 models produced by the converter.

Only the subset of Swagger that a WADL document can describe is modelled.
Schemas stay plain JSON-Schema dicts.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

SWAGGER_VERSION = "2.0"
INFO_VERSION = "1.0.0"
DEFAULT_TITLE = "Default Title"
DEFAULT_RESPONSE_DESCRIPTION = "Successful Response"

HTTP_METHODS = ("get", "put", "post", "delete", "options", "head", "patch")


class Parameter(BaseModel):
    """A Swagger parameter (query, header, path, or body)."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    in_: str = Field(alias="in")  # query / header / path / body
    required: bool | None = None
    type: str | None = None
    format: str | None = None
    minimum: int | None = None
    default: Any = None
    enum: list[str] | None = None
    description: str | None = None
    schema_: dict | None = Field(default=None, alias="schema")


class ExternalDocs(BaseModel):
    url: str


class Response(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    description: str
    schema_: dict | None = Field(default=None, alias="schema")


class Operation(BaseModel):
    """A single HTTP operation on a path."""

    operationId: str | None = None
    parameters: list[Parameter] | None = None
    responses: dict[str, Response] = {}
    description: str | None = None
    externalDocs: ExternalDocs | None = None


class PathItem(BaseModel):
    """Operations on one path, plus parameters shared by all of them."""

    get: Operation | None = None
    put: Operation | None = None
    post: Operation | None = None
    delete: Operation | None = None
    options: Operation | None = None
    head: Operation | None = None
    patch: Operation | None = None
    parameters: list[Parameter] = []

    def operations(self) -> list[tuple[str, Operation]]:
        """Return ``(method, operation)`` pairs for the methods that are set."""
        return [
            (method, getattr(self, method))
            for method in HTTP_METHODS
            if getattr(self, method) is not None
        ]

    def update(self, other: "PathItem") -> None:
        """Copy every operation of ``other`` over this item's operations."""
        for method, operation in other.operations():
            setattr(self, method, operation)


class Info(BaseModel):
    title: str = DEFAULT_TITLE
    version: str = INFO_VERSION


class Swagger(BaseModel):
    """A complete Swagger 2.0 document."""

    swagger: str = SWAGGER_VERSION
    host: str | None = None
    basePath: str | None = None
    schemes: list[str] | None = None
    info: Info = Field(default_factory=Info)
    paths: dict[str, PathItem] = {}

    def to_dict(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
