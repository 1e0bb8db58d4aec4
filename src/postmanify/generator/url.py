"""URL templating: builds Postman URLs from Swagger path templates."""

import logging
import re
from typing import Any

from postmanify.config import ConverterConfig
from postmanify.generator.defaults import synthesize
from postmanify.parser.base import Operation, Parameter
from postmanify.postman.models import QueryParam, Url, UrlVariable

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")
_SLASHES = re.compile(r"/+")
_PLACEHOLDER = re.compile(r"(?<!\{)\{([^/{}]+)\}(?!\})")
_VARIABLE_SEGMENT = re.compile(r"^\s*\{\{([^{}]+)\}\}\s*$")


def build_url(path: str, operation: Operation, config: ConverterConfig) -> Url:
    """Compose the request URL for one operation.

    Path placeholders ``{name}`` become Postman variables ``{{name}}``, each
    variable segment gets a URL variable entry and every query parameter is
    appended with an example value.
    """
    host = f"{config.hostname_prefix}{config.hostname}{config.hostname_suffix}".strip()

    raw = "/".join([host, config.base_path, _WHITESPACE.sub("", path)]).strip()
    raw = _SLASHES.sub("/", raw).lstrip("/")
    raw = f"{config.scheme}://{raw}"
    logger.debug("Composed url %s", raw)

    raw = _PLACEHOLDER.sub(r"{{\1}}", raw)
    logger.debug("Url after placeholder rewrite %s", raw)

    url = Url.from_raw(raw)

    for segment in url.path:
        match = _VARIABLE_SEGMENT.match(segment)
        if match:
            name = match.group(1)
            url.variable.append(UrlVariable(id=name, value=_path_default(name, operation.parameters)))

    url.query.extend(build_query_params(operation))
    return url


def build_query_params(operation: Operation) -> list[QueryParam]:
    """One query entry per ``in: query`` parameter, in declaration order."""
    return [
        QueryParam(key=param.name, value=query_value(param))
        for param in operation.parameters
        if param.location == "query"
    ]


def query_value(param: Parameter) -> Any:
    """Example for a query parameter: example, default, first enum, then placeholder."""
    if param.example is not None:
        return param.example
    if param.default is not None:
        return param.default
    if param.enum:
        return param.enum[0]

    if param.type == "array":
        items = param.items
        if items is None:
            return synthesize(None)
        if items.example is not None:
            return items.example
        if items.default is not None:
            return items.default
        if items.enum:
            return items.enum[0]
        return synthesize(items.type, items.format)

    return synthesize(param.type, param.format)


def _path_default(name: str, parameters: list[Parameter]) -> Any:
    for param in parameters:
        if param.location == "path" and param.name == name:
            return param.default
    return None
