"""Request builder: one Postman request item per Swagger operation."""

import json
from typing import Any

from postmanify.config import ConverterConfig
from postmanify.generator.example import build_array, build_object_body
from postmanify.generator.script import extract_script
from postmanify.generator.url import build_url
from postmanify.parser.base import Operation, Parameter
from postmanify.postman.models import Body, Event, FormDataParam, Header, Request, RequestItem

BODY_METHODS = ("POST", "PUT", "PATCH")


def build_item(path: str, method: str, operation: Operation, config: ConverterConfig) -> RequestItem:
    """Build the request item for ``method path``, with its test script if any."""
    item = RequestItem(name=path, request=build_request(path, method, operation, config))

    script = extract_script(operation.extensions)
    if script is not None:
        item.event.append(Event(listen="test", script=script))
    return item


def build_request(path: str, method: str, operation: Operation, config: ConverterConfig) -> Request:
    method = method.upper()
    request = Request(
        method=method,
        url=build_url(path, operation, config),
        header=build_headers(operation, config),
    )
    if method in BODY_METHODS:
        request.body = build_body(operation)
    return request


def build_headers(operation: Operation, config: ConverterConfig) -> list[Header]:
    """Content-Type and Accept from the first consumes/produces, then static headers."""
    headers = []
    if operation.consumes and operation.consumes[0].strip():
        headers.append(Header(key="Content-Type", value=operation.consumes[0].strip()))
    if operation.produces and operation.produces[0].strip():
        headers.append(Header(key="Accept", value=operation.produces[0].strip()))
    headers.extend(config.headers)
    return headers


def build_body(operation: Operation) -> Body:
    """Form-data body when the operation declares formData parameters, raw JSON otherwise."""
    form_params = [p for p in operation.parameters if p.location == "formData"]
    if form_params:
        return Body(mode="formdata", formdata=[_form_entry(p) for p in form_params])

    for param in operation.parameters:
        if param.location == "body" and param.required:
            return Body(mode="raw", raw=_raw_body(param))

    return Body(mode="raw")


def render_json(value: Any) -> str:
    """Pretty-print a body example, tab indented."""
    return json.dumps(value, indent="\t", ensure_ascii=False, default=str)


def _form_entry(param: Parameter) -> FormDataParam:
    if param.default is not None:
        value = param.default
    elif param.example is not None:
        value = param.example
    else:
        value = "string"
    if not isinstance(value, str):
        value = json.dumps(value, ensure_ascii=False, default=str)
    return FormDataParam(key=param.name, value=value, type="text", enabled=param.required)


def _raw_body(param: Parameter) -> str:
    schema = param.body_schema
    if schema is None:
        return ""
    if schema.has_type("object"):
        return render_json(build_object_body(schema.properties, frozenset({id(schema)})))
    if schema.has_type("array"):
        return render_json(build_array(schema.items, frozenset({id(schema)})))
    return ""
