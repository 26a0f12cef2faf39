"""Errors raised by the store services.

Callers can catch ``ValueError``/``LookupError`` as before, or the more
specific classes below when they need to tell a bad request from a
missing row.
"""


class ServiceError(Exception):
    """Base class for store service errors."""


class InvalidArgumentError(ServiceError, ValueError):
    """Raised when a caller breaks an input contract (empty update, bad filter, ...)."""


class NotFoundError(ServiceError, LookupError):
    """Raised when a keyed operation matches no row."""
