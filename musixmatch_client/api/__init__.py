"""
Request/response translation layer.

    - methods: ApiMethod registry (path, verb, override bundle)
    - encoding: query string and form body encoding
    - envelope: StructuredEnvelope / RawEnvelope and the envelope parser
    - request_engine: RequestEngine, the HTTP transport with session cookies
    - status: service status codes
"""

from musixmatch_client.api.methods import (
    ApiMethod,
    EndpointDescriptor,
    RequestParameters,
    resolve,
)
from musixmatch_client.api.encoding import build_argument_string, build_form_payload
from musixmatch_client.api.envelope import (
    Envelope,
    RawEnvelope,
    StructuredEnvelope,
    parse_envelope,
)
from musixmatch_client.api.request_engine import RequestEngine
from musixmatch_client.api.status import StatusCode

__all__ = [
    "ApiMethod",
    "EndpointDescriptor",
    "RequestParameters",
    "resolve",
    "build_argument_string",
    "build_form_payload",
    "Envelope",
    "RawEnvelope",
    "StructuredEnvelope",
    "parse_envelope",
    "RequestEngine",
    "StatusCode",
]
