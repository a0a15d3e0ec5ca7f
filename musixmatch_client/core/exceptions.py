"""
Exception classes for musixmatch-client.

This module defines all custom exceptions used throughout the library.
Each exception is designed to provide a clear error message and to
distinguish between the different failure modes of a request.

Transport failures (DNS, connection, read errors, non-2xx HTTP responses)
are NOT represented here: they are raised by requests and propagate to
the caller untouched.

Exception Hierarchy:
    MusixmatchError (base)
        ConfigError - Configuration file or environment issues
        RegistryError - API method registry is incomplete
        EnvelopeError - Response body does not have the envelope shape
        ApiStatusError - Envelope parsed but status code is not success
"""


class MusixmatchError(Exception):
    """
    Base exception for all musixmatch-client errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary with additional context (e.g. method, field).

    Example:
        try:
            client.get_track(123)
        except MusixmatchError as e:
            logger.error(f"Request failed: {e.message}")
            if e.details:
                logger.debug(f"Details: {e.details}")
    """

    def __init__(self, message: str, details: dict | None = None) -> None:
        """
        Initialize the base exception.

        Args:
            message: Human-readable error description.
            details: Optional dictionary containing additional context about
                     the error. Common keys include:
                     - 'method': API method involved in the error
                     - 'field': envelope field that could not be read
                     - 'original_error': the underlying exception, as text
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return the error message for display."""
        return self.message


class ConfigError(MusixmatchError):
    """
    Raised when there's an issue with the configuration.

    Common causes:
        - config.yaml has invalid YAML syntax
        - config.yaml is not a mapping
        - No user token in the file nor in MUSIXMATCH_USER_TOKEN
        - Invalid field types (e.g. a list where a string is expected)
    """
    pass


class RegistryError(MusixmatchError):
    """
    Raised when an API method has no endpoint descriptor.

    This is a programming error, not a runtime condition: the registry is
    checked when the methods module is imported, so an incomplete table
    fails before the first request is made.
    """
    pass


class EnvelopeError(MusixmatchError):
    """
    Raised when a structured response cannot be unwrapped.

    Common causes:
        - Response body is not valid JSON
        - The envelope is missing 'header', 'body', 'status_code' or
          'execute_time'
        - A typed cast found a body that does not match the expected model

    Example:
        raise EnvelopeError(
            "Response envelope is missing 'status_code'",
            details={'field': 'status_code'}
        )
    """
    pass


class ApiStatusError(MusixmatchError):
    """
    Raised by the client when the service answers with a non-success status.

    The request engine never interprets status codes; the typed call-sites
    in MusixmatchClient compare the code to StatusCode.SUCCESS and raise
    this error otherwise.

    Attributes:
        status_code: The numeric status code found in the envelope header.
        status_name: Name of the matching StatusCode member, or "UNKNOWN".
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        status_name: str = "UNKNOWN",
        details: dict | None = None
    ) -> None:
        """
        Initialize the status error.

        Args:
            message: Human-readable error description.
            status_code: Numeric status code returned by the service.
            status_name: Symbolic name of the status code.
            details: Optional dictionary with additional context.
        """
        super().__init__(message, details)
        self.status_code = status_code
        self.status_name = status_name
