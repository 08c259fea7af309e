"""Business errors raised by the resource service."""


class ResourceError(Exception):
    """Base class for errors the HTTP layer maps to a client-facing status."""


class ValidationError(ResourceError):
    """Input is malformed or carries an invalid value."""


class NotFoundError(ResourceError):
    """Referenced resource id has no corresponding record."""
