"""Converter configuration.

A ConverterConfig is immutable. Defaults taken from the specification are
applied by ``resolve``, which returns a new snapshot for one conversion.
"""

from pydantic import BaseModel, ConfigDict

from postmanify.parser.base import Specification
from postmanify.postman.models import Header

DEFAULT_SCHEME = "http"


class ConverterConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    hostname: str = ""
    hostname_prefix: str = ""
    hostname_suffix: str = ""
    base_path: str = ""
    scheme: str = ""
    headers: tuple[Header, ...] = ()

    def resolve(self, spec: Specification) -> "ConverterConfig":
        """Fill unset hostname, base path and scheme from the specification."""
        scheme = self.scheme.strip()
        if not scheme:
            scheme = spec.schemes[0].strip() if spec.schemes else ""
        return self.model_copy(
            update={
                "hostname": self.hostname.strip() or spec.host.strip(),
                "base_path": self.base_path.strip() or spec.base_path.strip(),
                "scheme": scheme or DEFAULT_SCHEME,
            }
        )


def parse_header(text: str) -> Header:
    """Parse a ``"Key: Value"`` string into a Header."""
    key, sep, value = text.partition(":")
    if not sep or not key.strip():
        raise ValueError(f"Invalid header {text!r}, expected 'Key: Value'")
    return Header(key=key.strip(), value=value.strip())
