"""Data models for a parsed Swagger 2.0 specification.

The loader converts the raw document into these models, with local
``$ref`` pointers already resolved, before any conversion runs.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SchemaNode(BaseModel):
    """A typed description of a data shape (object, array or scalar)."""

    model_config = ConfigDict(populate_by_name=True)

    type: list[str] | None = None  # "string" and ["string", "null"] both allowed
    format: str = ""
    properties: dict[str, "SchemaNode"] = {}
    items: "SchemaNode | None" = None
    enum: list[Any] = []
    example: Any = None
    default: Any = None
    ref: str | None = Field(default=None, alias="$ref")

    @field_validator("type", mode="before")
    @classmethod
    def type_as_list(cls, value):
        if isinstance(value, str):
            return [value]
        return value

    def has_type(self, name: str) -> bool:
        return name in (self.type or [])


class Parameter(BaseModel):
    """A single operation parameter (path, query, body, formData or header)."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    location: str = Field(alias="in")  # path / query / body / formData / header
    required: bool = False
    type: str = ""
    format: str = ""
    default: Any = None
    example: Any = None
    enum: list[Any] = []
    items: SchemaNode | None = None
    body_schema: SchemaNode | None = Field(default=None, alias="schema")


class Operation(BaseModel):
    """One HTTP-method-specific definition within a path."""

    tags: list[str] = []
    consumes: list[str] = []
    produces: list[str] = []
    parameters: list[Parameter] = []
    extensions: dict[str, Any] = {}

    def folder_name(self) -> str | None:
        """First tag, trimmed. None when the operation cannot be placed."""
        if not self.tags:
            return None
        tag = self.tags[0].strip()
        return tag or None


class PathItem(BaseModel):
    """Operations declared under one URL template."""

    get: Operation | None = None
    patch: Operation | None = None
    post: Operation | None = None
    put: Operation | None = None
    delete: Operation | None = None


class Specification(BaseModel):
    """Root of a parsed API description."""

    model_config = ConfigDict(populate_by_name=True)

    title: str = ""
    description: str = ""
    host: str = ""
    base_path: str = Field(default="", alias="basePath")
    schemes: list[str] = []
    paths: dict[str, PathItem] = {}
