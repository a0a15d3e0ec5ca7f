"""
Response envelopes.

Every structured response of the service is wrapped the same way:

    {
      "message": {
        "header": {"status_code": 200, "execute_time": 0.0123, ...},
        "body": {...}
      }
    }

parse_envelope() accepts that shape and the bare {"header": ..., "body": ...}
form, and extracts the status code and elapsed time from the header. The
header and body subtrees are kept as JSON text so the caller can decode
the body into whatever model the method returns.

Methods registered with raw_response (the missions backend) skip parsing
and get a RawEnvelope holding the exact response text.
"""

import json
from dataclasses import dataclass
from typing import Any, Callable, TypeVar

from musixmatch_client.core.exceptions import EnvelopeError


T = TypeVar("T")

# Name of the wrapper node around header/body in service responses
MESSAGE_KEY = "message"


class _EnvelopeBody:
    """Body decoding shared by both envelope variants."""

    body: str

    def json(self) -> Any:
        """
        Decode the body as JSON.

        Raises:
            EnvelopeError: If the body is not valid JSON.
        """
        try:
            return json.loads(self.body)
        except ValueError as e:
            raise EnvelopeError(
                f"Response body is not valid JSON: {e}",
                details={"original_error": str(e)}
            ) from e

    def cast(self, factory: Callable[[Any], T]) -> T:
        """
        Decode the body and build a typed object from it.

        Args:
            factory: Callable receiving the decoded body, typically a
                     model's from_api classmethod or a small lambda that
                     picks a key first.

        Raises:
            EnvelopeError: If the body is not JSON, or the factory finds a
                           missing key or a value of the wrong type.
        """
        data = self.json()
        try:
            return factory(data)
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise EnvelopeError(
                f"Response body does not match the expected shape: {e!r}",
                details={"original_error": repr(e)}
            ) from e


@dataclass(frozen=True)
class StructuredEnvelope(_EnvelopeBody):
    """
    A parsed service response.

    Attributes:
        status_code: Service status code from the header (not the HTTP status).
        time_elapsed: Server-side execution time in seconds.
        header: The header subtree, serialized as JSON text.
        body: The body subtree, serialized as JSON text.
    """
    status_code: int
    time_elapsed: float
    header: str
    body: str


@dataclass(frozen=True)
class RawEnvelope(_EnvelopeBody):
    """
    An unparsed response, returned for raw_response methods.

    Attributes:
        body: The complete response text, byte-for-byte as decoded by requests.
    """
    body: str


Envelope = StructuredEnvelope | RawEnvelope


def parse_envelope(text: str) -> StructuredEnvelope:
    """
    Parse response text into a StructuredEnvelope.

    Args:
        text: The full response body.

    Returns:
        The envelope with status code, elapsed time, header and body.

    Raises:
        EnvelopeError: If the text is not a JSON object, or if 'header',
                       'body', 'header.status_code' or 'header.execute_time'
                       is missing or has the wrong type.
    """
    try:
        root = json.loads(text)
    except ValueError as e:
        raise EnvelopeError(
            f"Response is not valid JSON: {e}",
            details={"original_error": str(e)}
        ) from e

    if not isinstance(root, dict):
        raise EnvelopeError(
            "Response is not a JSON object",
            details={"type": type(root).__name__}
        )

    node = root.get(MESSAGE_KEY, root)
    if not isinstance(node, dict):
        raise EnvelopeError(
            f"Response '{MESSAGE_KEY}' is not a JSON object",
            details={"field": MESSAGE_KEY}
        )

    header = _require(node, "header")
    body = _require(node, "body")
    if not isinstance(header, dict):
        raise EnvelopeError(
            "Response 'header' is not a JSON object",
            details={"field": "header"}
        )

    status_code = _require(header, "status_code")
    execute_time = _require(header, "execute_time")

    try:
        status_code = int(status_code)
        execute_time = float(execute_time)
    except (TypeError, ValueError) as e:
        raise EnvelopeError(
            f"Response header has a non-numeric field: {e}",
            details={"field": "header", "original_error": str(e)}
        ) from e

    return StructuredEnvelope(
        status_code=status_code,
        time_elapsed=execute_time,
        header=json.dumps(header),
        body=json.dumps(body)
    )


def _require(node: dict[str, Any], field: str) -> Any:
    if field not in node:
        raise EnvelopeError(
            f"Response envelope is missing '{field}'",
            details={"field": field}
        )
    return node[field]
