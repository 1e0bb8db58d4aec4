"""Postman test scripts declared through the ``x-postman-script`` extension."""

from typing import Any

from postmanify.postman.models import Script

SCRIPT_EXTENSION = "x-postman-script"
SCRIPT_TYPE = "text/javascript"


def extract_script(extensions: dict[str, Any]) -> Script | None:
    """Read the script extension, given as one text block or a list of lines."""
    value = extensions.get(SCRIPT_EXTENSION)

    if isinstance(value, str):
        lines = value.split("\n")
    elif isinstance(value, list):
        lines = [str(line) for line in value]
    else:
        return None

    if not any(line.strip() for line in lines):
        return None
    return Script(type=SCRIPT_TYPE, exec=lines)
