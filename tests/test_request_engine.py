"""Test the request engine against a mocked HTTP transport"""

from urllib.parse import parse_qsl, urlsplit

import pytest
import requests
import responses

from conftest import USER_TOKEN, api_url, envelope_json
from musixmatch_client.api.envelope import RawEnvelope, StructuredEnvelope
from musixmatch_client.api.methods import (
    DEFAULT_APP_ID,
    MISSIONS_ENDPOINT,
    ApiMethod,
    RequestParameters,
)
from musixmatch_client.api.request_engine import FORM_CONTENT_TYPE, RequestEngine
from musixmatch_client.core.exceptions import EnvelopeError


def query_pairs(request) -> list[tuple[str, str]]:
    """Decoded (key, value) pairs of a recorded request's query string"""
    return parse_qsl(urlsplit(request.url).query, keep_blank_values=True)


class TestQueryAssembly:
    """Test URL and query string construction"""

    @responses.activate
    def test_identity_parameters_are_injected(self, engine):
        """format, app_id and usertoken are sent on every call"""
        responses.add(responses.GET, api_url("track.get"), body=envelope_json())

        engine.send_request(ApiMethod.TRACK_GET, {"track_id": "123"})

        request = responses.calls[0].request
        assert urlsplit(request.url).path == "/ws/1.1/track.get"
        assert query_pairs(request) == [
            ("track_id", "123"),
            ("format", "json"),
            ("app_id", DEFAULT_APP_ID),
            ("usertoken", USER_TOKEN),
        ]
        assert engine.user_token == USER_TOKEN

    @responses.activate
    def test_injected_parameters_win_collisions(self, engine):
        """A caller cannot replace the token, app id or format"""
        responses.add(responses.GET, api_url("track.get"), body=envelope_json())
        arguments = {"usertoken": "other", "format": "xml", "track_id": "1"}

        engine.send_request(ApiMethod.TRACK_GET, arguments)

        pairs = query_pairs(responses.calls[0].request)
        assert [value for key, value in pairs if key == "usertoken"] == [USER_TOKEN]
        assert [value for key, value in pairs if key == "format"] == ["json"]
        assert arguments == {"usertoken": "other", "format": "xml", "track_id": "1"}

    @responses.activate
    def test_empty_arguments_are_dropped(self, engine):
        """Empty values never reach the query string"""
        responses.add(responses.GET, api_url("track.search"), body=envelope_json())

        engine.send_request(ApiMethod.TRACK_SEARCH, {"q": "queen", "q_album": ""})

        keys = [key for key, _ in query_pairs(responses.calls[0].request)]
        assert "q_album" not in keys
        assert keys[0] == "q"

    @responses.activate
    def test_spaces_are_percent_encoded(self, engine):
        """Spaces are sent as %20"""
        responses.add(responses.GET, api_url("track.search"), body=envelope_json())

        engine.send_request(ApiMethod.TRACK_SEARCH, {"q": "bohemian rhapsody"})

        assert "q=bohemian%20rhapsody" in responses.calls[0].request.url

    @responses.activate
    def test_custom_api_root_and_app_id(self, user_token):
        """The engine uses its configured root and app id"""
        responses.add(responses.GET, "https://example.test/api/track.get", body=envelope_json())

        with RequestEngine(user_token, api_url="https://example.test/api/", app_id="tests") as engine:
            engine.send_request(ApiMethod.TRACK_GET, {"track_id": "1"})

        assert ("app_id", "tests") in query_pairs(responses.calls[0].request)


class TestRequestBody:
    """Test form bodies on POST methods"""

    @responses.activate
    def test_post_sends_form_body(self, engine):
        """Body arguments are form-encoded"""
        responses.add(responses.POST, api_url("track.subtitle.post"), body=envelope_json())

        engine.send_request(ApiMethod.TRACK_SUBTITLE_POST, {"commontrack_id": "1"}, {"k": "v"})

        request = responses.calls[0].request
        assert request.method == "POST"
        assert request.body == b"k=v"
        assert request.headers["Content-Type"] == FORM_CONTENT_TYPE
        assert ("commontrack_id", "1") in query_pairs(request)

    @responses.activate
    def test_get_ignores_body_arguments(self, engine):
        """GET requests carry no body"""
        responses.add(responses.GET, api_url("track.get"), body=envelope_json())

        engine.send_request(ApiMethod.TRACK_GET, {"track_id": "1"}, {"k": "v"})

        request = responses.calls[0].request
        assert request.method == "GET"
        assert not request.body


class TestResponses:
    """Test envelope selection and error propagation"""

    @responses.activate
    def test_structured_response(self, engine):
        """Registry methods without overrides are parsed"""
        responses.add(
            responses.GET, api_url("track.get"),
            body=envelope_json({"track": {"track_id": 1}}, status_code=404, execute_time=0.5)
        )

        envelope = engine.send_request(ApiMethod.TRACK_GET, {"track_id": "1"})

        assert isinstance(envelope, StructuredEnvelope)
        assert envelope.status_code == 404
        assert envelope.time_elapsed == 0.5
        assert envelope.json() == {"track": {"track_id": 1}}

    @responses.activate
    def test_missions_default_is_raw(self, engine):
        """The missions backend is called at its absolute URL, unparsed"""
        payload = '{"data":{"missions":[{"id":"m1"}]}}'
        responses.add(responses.POST, MISSIONS_ENDPOINT, body=payload)

        envelope = engine.send_request(ApiMethod.MISSIONS_GET)

        assert isinstance(envelope, RawEnvelope)
        assert envelope.body == payload
        assert not hasattr(envelope, "status_code")
        assert responses.calls[0].request.url.startswith(MISSIONS_ENDPOINT + "?")

    @responses.activate
    def test_caller_override_beats_registry(self, engine):
        """A per-call bundle replaces the registry default"""
        responses.add(responses.GET, "https://mirror.test/lookup", body="plain text")

        envelope = engine.send_request(
            ApiMethod.TRACK_GET,
            {"track_id": "1"},
            parameters=RequestParameters(endpoint="https://mirror.test/lookup", raw_response=True)
        )

        assert envelope == RawEnvelope(body="plain text")

    @responses.activate
    def test_caller_override_can_disable_raw(self, engine):
        """An empty bundle on a raw method forces a structured parse"""
        responses.add(responses.POST, api_url("graphql"), body=envelope_json({"ok": True}))

        envelope = engine.send_request(ApiMethod.MISSIONS_GET, parameters=RequestParameters())

        assert isinstance(envelope, StructuredEnvelope)
        assert envelope.json() == {"ok": True}

    @responses.activate
    def test_malformed_envelope_raises(self, engine):
        """A structured method with a non-envelope body fails"""
        responses.add(responses.GET, api_url("track.get"), body='{"header": {}}')

        with pytest.raises(EnvelopeError):
            engine.send_request(ApiMethod.TRACK_GET, {"track_id": "1"})

    @responses.activate
    def test_http_error_propagates(self, engine):
        """Non-2xx HTTP statuses raise the transport error"""
        responses.add(responses.GET, api_url("track.get"), body="boom", status=500)

        with pytest.raises(requests.HTTPError):
            engine.send_request(ApiMethod.TRACK_GET, {"track_id": "1"})

    @responses.activate
    def test_connection_error_propagates(self, engine):
        """Connection failures are not wrapped"""
        with pytest.raises(requests.ConnectionError):
            engine.send_request(ApiMethod.TRACK_GET, {"track_id": "1"})


class TestSessionCookies:
    """Test cookie persistence across calls"""

    @responses.activate
    def test_cookies_are_replayed(self, engine):
        """Cookies set by one response are sent on the next request"""
        responses.add(
            responses.GET, api_url("token.get"),
            body=envelope_json({"user_token": "t"}),
            headers={"Set-Cookie": "S=1; Path=/"}
        )
        responses.add(responses.GET, api_url("track.get"), body=envelope_json())

        engine.send_request(ApiMethod.TOKEN_GET)
        engine.send_request(ApiMethod.TRACK_GET, {"track_id": "1"})

        assert "Cookie" not in responses.calls[0].request.headers
        assert responses.calls[1].request.headers["Cookie"] == "S=1"

    @responses.activate
    def test_engines_do_not_share_cookies(self, user_token):
        """Each engine has its own cookie jar"""
        responses.add(
            responses.GET, api_url("token.get"),
            body=envelope_json(),
            headers={"Set-Cookie": "S=1; Path=/"}
        )
        responses.add(responses.GET, api_url("track.get"), body=envelope_json())

        with RequestEngine(user_token) as first, RequestEngine(user_token) as second:
            first.send_request(ApiMethod.TOKEN_GET)
            second.send_request(ApiMethod.TRACK_GET, {"track_id": "1"})

        assert "Cookie" not in responses.calls[1].request.headers


class TestTokenMasking:
    """Test that debug logs never carry the full token"""

    @responses.activate
    def test_debug_log_masks_token(self, engine, caplog):
        """The request URL is logged with the token masked"""
        responses.add(responses.GET, api_url("track.get"), body=envelope_json())

        with caplog.at_level("DEBUG", logger="musixmatch_client"):
            engine.send_request(ApiMethod.TRACK_GET, {"track_id": "1"})

        assert "track.get" in caplog.text
        assert USER_TOKEN not in caplog.text
        assert f"{USER_TOKEN[:4]}***" in caplog.text

    @responses.activate
    def test_debug_log_masks_encoded_token(self, caplog):
        """A token with reserved characters is masked after URL encoding"""
        token = "abcd1234/efgh+5678=="
        responses.add(responses.GET, api_url("track.get"), body=envelope_json())

        with RequestEngine(token) as engine:
            with caplog.at_level("DEBUG", logger="musixmatch_client"):
                engine.send_request(ApiMethod.TRACK_GET, {"track_id": "1"})

        assert "efgh%2B5678" not in caplog.text
        assert "efgh+5678" not in caplog.text
        assert "usertoken=abcd***" in caplog.text
