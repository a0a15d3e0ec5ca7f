"""
Request engine: turns an ApiMethod call into an HTTP request and an envelope.

The engine owns the user token and a requests.Session. The session's cookie
jar accumulates every cookie the server sets and replays it on the next
requests made through the same engine, for the lifetime of the engine.

Request assembly:
    1. Override bundle: caller's, else the registry default, else none
    2. Verb: always the registry's
    3. Base URL: bundle endpoint if set, else API root + registry path
    4. Query: caller arguments + format, app_id, usertoken (injected last,
       so they win on a key collision), empty values dropped
    5. Body (POST only): form-encoded body arguments

Failures:
    - requests exceptions (connection errors, timeouts raised by the
      transport, non-2xx HTTP statuses) propagate untouched
    - a structured response without the envelope shape raises EnvelopeError
    - the service status code is NOT checked here

Thread Safety:
    An engine is NOT thread-safe: the cookie jar is shared mutable state.
    Use one engine per thread, or serialize calls with a lock.

Usage:
    engine = RequestEngine(user_token)
    envelope = engine.send_request(ApiMethod.TRACK_GET, {"track_id": "123"})
    if envelope.status_code == 200:
        track = envelope.cast(lambda body: Track.from_api(body["track"]))
"""

from typing import Any, Mapping

import requests

from musixmatch_client.api.encoding import build_argument_string, build_form_payload
from musixmatch_client.api.envelope import Envelope, RawEnvelope, parse_envelope
from musixmatch_client.api.methods import (
    DEFAULT_API_URL,
    DEFAULT_APP_ID,
    RESPONSE_FORMAT,
    ApiMethod,
    RequestParameters,
    resolve,
)
from musixmatch_client.core.logger import get_logger, mask_token


logger = get_logger(__name__)

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


class RequestEngine:
    """
    Sends API method calls and unwraps their responses.

    Attributes:
        user_token: Token sent as 'usertoken' on every call. Never modified.
        api_url: Root URL that registry paths are appended to.
        app_id: Application identifier sent as 'app_id' on every call.
        session: The requests.Session holding the cookie jar.
    """

    def __init__(
        self,
        user_token: str,
        api_url: str = DEFAULT_API_URL,
        app_id: str = DEFAULT_APP_ID,
        session: requests.Session | None = None
    ) -> None:
        """
        Initialize the engine.

        Args:
            user_token: Opaque authentication token.
            api_url: API root, ending with '/'.
            app_id: Application identifier.
            session: Optional pre-configured session (e.g. with proxies or
                     a custom adapter). A new session is created if None.
        """
        self.user_token = user_token
        self.api_url = api_url
        self.app_id = app_id
        self.session = session or requests.Session()

    def send_request(
        self,
        method: ApiMethod,
        query_args: Mapping[str, Any] | None = None,
        body_args: Mapping[str, Any] | None = None,
        parameters: RequestParameters | None = None
    ) -> Envelope:
        """
        Call a remote method and return its envelope.

        Args:
            method: The API method to call.
            query_args: Arguments added to the query string. Not modified.
            body_args: Form body fields. Ignored unless the method's verb
                       carries a body.
            parameters: Override bundle for this call only. Takes precedence
                        over the registry default bundle.

        Returns:
            A StructuredEnvelope, or a RawEnvelope if the effective bundle
            has raw_response set.

        Raises:
            requests.RequestException: On any transport failure, including
                                       non-2xx HTTP statuses.
            EnvelopeError: If a structured response cannot be parsed.
            RegistryError: If the method is not registered.
        """
        descriptor = resolve(method)
        if parameters is None:
            parameters = descriptor.parameters or RequestParameters()

        base_url = parameters.endpoint or f"{self.api_url}{descriptor.path}"
        url = base_url + build_argument_string(self._with_identity(query_args))

        data = None
        headers = None
        if descriptor.has_body:
            data = build_form_payload(body_args).encode("utf-8")
            headers = {"Content-Type": FORM_CONTENT_TYPE}

        logger.debug(f"{descriptor.verb} {mask_token(url, self.user_token)}")

        response = self.session.request(descriptor.verb, url, data=data, headers=headers)
        response.raise_for_status()
        text = response.content.decode("utf-8", errors="replace")

        if parameters.raw_response:
            logger.debug(f"{method.name}: raw response ({len(text)} chars)")
            return RawEnvelope(body=text)

        envelope = parse_envelope(text)
        logger.debug(
            f"{method.name}: status {envelope.status_code} "
            f"in {envelope.time_elapsed:.3f}s"
        )
        return envelope

    def close(self) -> None:
        """Close the underlying session and its connection pool."""
        self.session.close()

    def __enter__(self) -> "RequestEngine":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def _with_identity(self, query_args: Mapping[str, Any] | None) -> dict[str, Any]:
        arguments = dict(query_args or {})
        identity = {
            "format": RESPONSE_FORMAT,
            "app_id": self.app_id,
            "usertoken": self.user_token,
        }
        # Injected keys go last and replace any caller value
        for key, value in identity.items():
            arguments.pop(key, None)
            arguments[key] = value
        return arguments
