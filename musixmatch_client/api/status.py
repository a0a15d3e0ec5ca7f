"""
Service status codes.

The service reports its own status in the envelope header, independently of
the HTTP status line. Descriptions follow the public API documentation.
"""

from enum import IntEnum


class StatusCode(IntEnum):
    """Status codes found in envelope headers."""
    SUCCESS = 200
    BAD_SYNTAX = 400
    AUTH_FAILED = 401
    USAGE_LIMIT_REACHED = 402
    NOT_AUTHORIZED = 403
    RESOURCE_NOT_FOUND = 404
    METHOD_NOT_FOUND = 405
    SERVER_ERROR = 500
    SERVER_BUSY = 503

    @property
    def description(self) -> str:
        return STATUS_DESCRIPTIONS[self]

    @classmethod
    def name_of(cls, code: int) -> str:
        """Return the member name for a code, or 'UNKNOWN'."""
        try:
            return cls(code).name
        except ValueError:
            return "UNKNOWN"


STATUS_DESCRIPTIONS = {
    StatusCode.SUCCESS: "The request was successful.",
    StatusCode.BAD_SYNTAX: (
        "The request had bad syntax or was inherently impossible to be satisfied."
    ),
    StatusCode.AUTH_FAILED: (
        "Authentication failed, probably because of invalid/missing API key."
    ),
    StatusCode.USAGE_LIMIT_REACHED: (
        "The usage limit has been reached, either you exceeded per day requests "
        "limits or your balance is insufficient."
    ),
    StatusCode.NOT_AUTHORIZED: "You are not authorized to perform this operation.",
    StatusCode.RESOURCE_NOT_FOUND: "The requested resource was not found.",
    StatusCode.METHOD_NOT_FOUND: "The requested method was not found.",
    StatusCode.SERVER_ERROR: "Ops. Something were wrong.",
    StatusCode.SERVER_BUSY: (
        "Our system is a bit busy at the moment and your request can't be satisfied."
    ),
}
