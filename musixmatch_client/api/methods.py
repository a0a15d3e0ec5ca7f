"""
Registry of the remote API methods.

Each ApiMethod maps to exactly one EndpointDescriptor: the path appended to
the API root, the HTTP verb, and an optional RequestParameters bundle that
can redirect the call to another absolute endpoint and/or ask for the raw
response text instead of the parsed envelope.

The table is checked for total coverage when this module is imported, so
a method added to the enumeration without an entry fails immediately with
RegistryError instead of at the first request.

Usage:
    from musixmatch_client.api.methods import ApiMethod, resolve

    descriptor = resolve(ApiMethod.TRACK_GET)
    descriptor.path   # 'track.get'
    descriptor.verb   # 'GET'
"""

from dataclasses import dataclass
from enum import Enum

from musixmatch_client.core.exceptions import RegistryError


DEFAULT_API_URL = "https://apic-desktop.musixmatch.com/ws/1.1/"
DEFAULT_APP_ID = "web-desktop-app-v1.0"
RESPONSE_FORMAT = "json"

MISSIONS_ENDPOINT = "https://missions-backend.musixmatch.com/"

HTTP_GET = "GET"
HTTP_POST = "POST"

# Verbs whose requests carry a form-encoded body
BODY_VERBS = frozenset({HTTP_POST})


class ApiMethod(Enum):
    """Remote operations exposed by the service."""
    TOKEN_GET = "token_get"
    TRACK_GET = "track_get"
    TRACK_LYRICS_GET = "track_lyrics_get"
    TRACK_SEARCH = "track_search"
    TRACK_SNIPPET_GET = "track_snippet_get"
    TRACK_SUBTITLE_GET = "track_subtitle_get"
    TRACK_SUBTITLE_POST = "track_subtitle_post"
    REQUEST_JWT_TOKEN = "request_jwt_token"
    MISSIONS_GET = "missions_get"


@dataclass(frozen=True)
class RequestParameters:
    """
    Per-call or per-method override bundle.

    Attributes:
        endpoint: Absolute URL used verbatim instead of API root + path.
                  Empty string means "use the registry path".
        raw_response: If True, the response text is returned as a
                      RawEnvelope without any envelope parsing.
    """
    endpoint: str = ""
    raw_response: bool = False


@dataclass(frozen=True)
class EndpointDescriptor:
    """
    Registry entry for one ApiMethod.

    Attributes:
        path: Path segment appended to the API root (e.g. 'track.search').
        verb: HTTP verb, fixed per method.
        parameters: Default override bundle, or None for the common case.
    """
    path: str
    verb: str
    parameters: RequestParameters | None = None

    @property
    def has_body(self) -> bool:
        """True if requests for this method send a form-encoded body."""
        return self.verb in BODY_VERBS


REGISTRY: dict[ApiMethod, EndpointDescriptor] = {
    ApiMethod.TOKEN_GET: EndpointDescriptor("token.get", HTTP_GET),
    ApiMethod.TRACK_SEARCH: EndpointDescriptor("track.search", HTTP_GET),
    ApiMethod.TRACK_GET: EndpointDescriptor("track.get", HTTP_GET),
    ApiMethod.TRACK_SUBTITLE_GET: EndpointDescriptor("track.subtitle.get", HTTP_GET),
    ApiMethod.TRACK_LYRICS_GET: EndpointDescriptor("track.lyrics.get", HTTP_GET),
    ApiMethod.TRACK_SNIPPET_GET: EndpointDescriptor("track.snippet.get", HTTP_GET),
    ApiMethod.TRACK_SUBTITLE_POST: EndpointDescriptor("track.subtitle.post", HTTP_POST),
    ApiMethod.REQUEST_JWT_TOKEN: EndpointDescriptor("jwt.get", HTTP_GET),
    ApiMethod.MISSIONS_GET: EndpointDescriptor(
        "graphql",
        HTTP_POST,
        RequestParameters(endpoint=MISSIONS_ENDPOINT, raw_response=True)
    ),
}


def resolve(method: ApiMethod) -> EndpointDescriptor:
    """
    Return the registry entry for a method.

    Raises:
        RegistryError: If the method has no entry.
    """
    try:
        return REGISTRY[method]
    except KeyError:
        raise RegistryError(
            f"No endpoint registered for API method {method!r}",
            details={"method": str(method)}
        ) from None


def validate_registry(registry: dict[ApiMethod, EndpointDescriptor]) -> None:
    """
    Check that every ApiMethod has a well-formed entry.

    Raises:
        RegistryError: On the first missing method, empty path or unknown verb.
    """
    for method in ApiMethod:
        descriptor = registry.get(method)
        if descriptor is None:
            raise RegistryError(
                f"API method {method.name} has no endpoint descriptor",
                details={"method": method.name}
            )
        if not descriptor.path:
            raise RegistryError(
                f"API method {method.name} has an empty path",
                details={"method": method.name}
            )
        if descriptor.verb not in (HTTP_GET, HTTP_POST):
            raise RegistryError(
                f"API method {method.name} has unsupported verb {descriptor.verb!r}",
                details={"method": method.name, "verb": descriptor.verb}
            )


validate_registry(REGISTRY)
