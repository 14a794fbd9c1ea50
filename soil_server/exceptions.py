"""
Error conditions raised by the state and archive services.

Routers translate these into HTTP responses; the message is always a
human-readable reason suitable for the client.
"""


class SoilServerError(Exception):
    """Base class for every condition reported back to a caller"""


class InvalidInputError(SoilServerError):
    """Required fields are missing"""


class InvalidFormatError(InvalidInputError):
    """A field is present but cannot be parsed"""


class NotFoundError(SoilServerError):
    """The identifier does not resolve to any record"""


class StorageError(SoilServerError):
    """The persistence layer failed; carries the underlying message"""
