"""Exceptions raised by postmanify."""


class PostmanifyError(Exception):
    """Base class for every conversion failure."""


class SpecificationError(PostmanifyError):
    """The source document could not be loaded as a Swagger 2.0 specification."""


class SerializationError(PostmanifyError):
    """The produced collection could not be encoded as JSON."""
