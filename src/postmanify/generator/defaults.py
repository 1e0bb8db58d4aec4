"""Placeholder values for schema leaves that carry no example."""

from collections.abc import Iterable

# Fixed so that repeated conversions produce identical output.
DATE_TIME_PLACEHOLDER = "2009-11-17T20:34:58Z"


def synthesize(types: str | Iterable[str] | None, fmt: str = ""):
    """Return a placeholder value for a primitive type and format.

    Integers become ``0``, strings become ``"string"`` (or the fixed
    timestamp for ``date-time``), anything else becomes ``""``.
    """
    if not types:
        return ""
    if isinstance(types, str):
        types = [types]
    types = list(types)

    if "integer" in types:
        return 0
    if "string" in types:
        if fmt == "date-time":
            return DATE_TIME_PLACEHOLDER
        return "string"
    return ""
