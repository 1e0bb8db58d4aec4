"""Collection assembler: groups every tagged operation into tag folders."""

import logging
from pathlib import Path

from postmanify.config import ConverterConfig
from postmanify.generator.request import build_item
from postmanify.parser.base import Operation, PathItem, Specification
from postmanify.parser.swagger import load_specification, parse_specification
from postmanify.postman.models import Collection, CollectionInfo

logger = logging.getLogger(__name__)

# Processing order of the methods within one path.
METHOD_ORDER: tuple[tuple[str, str], ...] = (
    ("GET", "get"),
    ("PATCH", "patch"),
    ("POST", "post"),
    ("PUT", "put"),
    ("DELETE", "delete"),
)


def iter_operations(path_item: PathItem):
    """Yield ``(method, operation)`` for the methods a path declares, in fixed order."""
    for method, attr in METHOD_ORDER:
        operation: Operation | None = getattr(path_item, attr)
        if operation is not None:
            yield method, operation


def assemble(spec: Specification, config: ConverterConfig) -> Collection:
    """Build the collection for a specification.

    Paths are processed in plain string order. Operations without a usable
    first tag are left out.
    """
    config = config.resolve(spec)
    collection = Collection(info=CollectionInfo(name=spec.title.strip(), description=spec.description.strip()))

    for path in sorted(spec.paths):
        for method, operation in iter_operations(spec.paths[path]):
            folder = operation.folder_name()
            if folder is None:
                logger.debug("Skipping untagged operation %s %s", method, path)
                continue
            collection.add_item(build_item(path, method, operation, config), folder)

    logger.info(
        "Assembled %d requests in %d folders",
        sum(len(f.item) for f in collection.item),
        len(collection.item),
    )
    return collection


class Converter:
    """Converts Swagger 2.0 documents into Postman collections."""

    def __init__(self, config: ConverterConfig | None = None):
        self.config = config or ConverterConfig()

    def convert(self, text: str) -> str:
        """Convert Swagger JSON/YAML text into Postman collection JSON."""
        return assemble(parse_specification(text), self.config).to_json()

    def convert_file(self, source: Path) -> Collection:
        """Load a Swagger file and return the assembled collection."""
        return assemble(load_specification(source), self.config)
