"""Swagger 2.0 document loader.

Parses a Swagger 2.0 JSON or YAML document into a Specification model.
Local ``$ref`` pointers are resolved while parsing: every referenced schema
pointer becomes a single shared SchemaNode, so a self-referencing definition
turns into a cyclic object graph instead of an endless expansion.
"""

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from postmanify.errors import SpecificationError

from .base import Operation, Parameter, PathItem, SchemaNode, Specification

logger = logging.getLogger(__name__)

METHODS = ("get", "patch", "post", "put", "delete")

_SCHEMA_FIELDS = ("type", "format", "properties", "items", "enum", "example", "default")


def load_specification(file_path: Path) -> Specification:
    """Read and parse a Swagger 2.0 file."""
    try:
        text = file_path.read_text(encoding="utf-8")
    except OSError as e:
        raise SpecificationError(f"Cannot read {file_path}: {e}") from e
    return parse_specification(text)


def parse_specification(text: str) -> Specification:
    """Parse Swagger 2.0 JSON or YAML text into a Specification."""
    doc = _load_document(text)

    version = str(doc.get("swagger", "")).strip()
    if version != "2.0":
        if "openapi" in doc:
            raise SpecificationError(f"OpenAPI {doc['openapi']} documents are not supported, expected Swagger 2.0")
        raise SpecificationError("Not a Swagger 2.0 document (missing 'swagger: \"2.0\"')")

    resolver = _RefResolver(doc)
    info = _mapping(doc.get("info"), "info")

    paths = {}
    for url, raw_path in _mapping(doc.get("paths"), "paths").items():
        if isinstance(raw_path, dict):
            paths[str(url)] = _parse_path_item(raw_path, resolver)

    spec = Specification(
        title=str(info.get("title") or "").strip(),
        description=str(info.get("description") or "").strip(),
        host=str(doc.get("host") or "").strip(),
        base_path=str(doc.get("basePath") or "").strip(),
        schemes=[str(s) for s in _sequence(doc.get("schemes"), "schemes")],
        paths=paths,
    )
    logger.info("Loaded specification %r with %d paths", spec.title, len(spec.paths))
    return spec


def _load_document(text: str) -> dict:
    try:
        doc = json.loads(text)
    except ValueError:
        try:
            doc = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise SpecificationError(f"Document is neither valid JSON nor YAML: {e}") from e

    if not isinstance(doc, dict):
        raise SpecificationError("Specification root must be a mapping")
    return doc


def _parse_path_item(raw: dict, resolver: "_RefResolver") -> PathItem:
    operations = {}
    for method in METHODS:
        raw_op = raw.get(method)
        if isinstance(raw_op, dict):
            operations[method] = _parse_operation(raw_op, resolver)
    return PathItem(**operations)


def _parse_operation(raw: dict, resolver: "_RefResolver") -> Operation:
    params = []
    for raw_param in _sequence(raw.get("parameters"), "parameters"):
        param = _parse_parameter(raw_param, resolver)
        if param is not None:
            params.append(param)

    return Operation(
        tags=[str(t) for t in _sequence(raw.get("tags"), "tags")],
        consumes=[str(c) for c in _sequence(raw.get("consumes"), "consumes")],
        produces=[str(p) for p in _sequence(raw.get("produces"), "produces")],
        parameters=params,
        extensions={k: v for k, v in raw.items() if str(k).startswith("x-")},
    )


def _parse_parameter(raw: Any, resolver: "_RefResolver") -> Parameter | None:
    if not isinstance(raw, dict):
        return None
    if isinstance(raw.get("$ref"), str):
        ref = raw["$ref"]
        raw = _mapping(resolver.lookup(ref), f"parameter {ref}")

    name = raw.get("name")
    location = raw.get("in")
    if not name or not location:
        logger.debug("Skipping parameter without name or location: %r", raw)
        return None

    items = raw.get("items")
    schema = raw.get("schema")
    return Parameter(
        name=str(name),
        location=str(location),
        required=bool(raw.get("required", False)),
        type=str(raw.get("type") or ""),
        format=str(raw.get("format") or ""),
        default=raw.get("default"),
        example=raw.get("example"),
        enum=list(raw.get("enum") or []),
        items=resolver.schema(items) if isinstance(items, dict) else None,
        body_schema=resolver.schema(schema) if isinstance(schema, dict) else None,
    )


class _RefResolver:
    """Resolves local JSON pointers against the loaded document."""

    def __init__(self, doc: dict):
        self.doc = doc
        self._schemas: dict[str, SchemaNode] = {}

    def lookup(self, ref: str) -> Any:
        if not ref.startswith("#/"):
            raise SpecificationError(f"Unsupported remote reference: {ref}")

        node: Any = self.doc
        for token in ref[2:].split("/"):
            token = token.replace("~1", "/").replace("~0", "~")
            if not isinstance(node, dict) or token not in node:
                raise SpecificationError(f"Unresolvable reference: {ref}")
            node = node[token]
        return node

    def schema(self, raw: Any) -> SchemaNode:
        if not isinstance(raw, dict):
            return SchemaNode()

        ref = raw.get("$ref")
        if isinstance(ref, str):
            if ref in self._schemas:
                return self._schemas[ref]
            # Registered before filling so that self references find it.
            node = SchemaNode(ref=ref)
            self._schemas[ref] = node
            self._fill(node, self.lookup(ref))
            return node

        node = SchemaNode()
        self._fill(node, raw)
        return node

    def _fill(self, node: SchemaNode, raw: Any) -> None:
        if not isinstance(raw, dict):
            return

        if isinstance(raw.get("$ref"), str):
            target = self.schema(raw)
            for field in _SCHEMA_FIELDS:
                setattr(node, field, getattr(target, field))
            return

        node.type = _type_list(raw.get("type"))
        node.format = str(raw.get("format") or "")
        node.properties = {str(k): self.schema(v) for k, v in (raw.get("properties") or {}).items()}

        items = raw.get("items")
        if isinstance(items, list):
            items = items[0] if items else None
        node.items = self.schema(items) if isinstance(items, dict) else None

        node.enum = list(raw.get("enum") or [])
        node.example = raw.get("example")
        node.default = raw.get("default")

        for part in raw.get("allOf") or []:
            sub = self.schema(part)
            node.properties = {**node.properties, **sub.properties}
            if node.type is None and sub.type:
                node.type = list(sub.type)
        if raw.get("allOf") and node.type is None:
            node.type = ["object"]


def _type_list(value: Any) -> list[str] | None:
    if isinstance(value, str):
        return [value]
    if isinstance(value, list):
        return [str(v) for v in value]
    return None


def _mapping(value: Any, where: str) -> dict:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise SpecificationError(f"'{where}' must be a mapping, got {type(value).__name__}")
    return value


def _sequence(value: Any, where: str) -> list:
    if value is None:
        return []
    if not isinstance(value, list):
        raise SpecificationError(f"'{where}' must be a list, got {type(value).__name__}")
    return value
