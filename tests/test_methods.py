"""Test the API method registry"""

import pytest

from musixmatch_client.api.methods import (
    HTTP_GET,
    HTTP_POST,
    MISSIONS_ENDPOINT,
    REGISTRY,
    ApiMethod,
    EndpointDescriptor,
    RequestParameters,
    resolve,
    validate_registry,
)
from musixmatch_client.core.exceptions import RegistryError


class TestRegistry:
    """Test registry coverage and entries"""

    def test_every_method_resolves(self):
        """Every ApiMethod has exactly one descriptor with a path and verb"""
        for method in ApiMethod:
            descriptor = resolve(method)
            assert descriptor.path
            assert descriptor.verb in (HTTP_GET, HTTP_POST)

    def test_registry_has_no_extra_entries(self):
        """The table is keyed by the enumeration and nothing else"""
        assert set(REGISTRY) == set(ApiMethod)

    @pytest.mark.parametrize("method, path, verb", [
        (ApiMethod.TOKEN_GET, "token.get", "GET"),
        (ApiMethod.TRACK_SEARCH, "track.search", "GET"),
        (ApiMethod.TRACK_GET, "track.get", "GET"),
        (ApiMethod.TRACK_SUBTITLE_GET, "track.subtitle.get", "GET"),
        (ApiMethod.TRACK_LYRICS_GET, "track.lyrics.get", "GET"),
        (ApiMethod.TRACK_SNIPPET_GET, "track.snippet.get", "GET"),
        (ApiMethod.TRACK_SUBTITLE_POST, "track.subtitle.post", "POST"),
        (ApiMethod.REQUEST_JWT_TOKEN, "jwt.get", "GET"),
        (ApiMethod.MISSIONS_GET, "graphql", "POST"),
    ])
    def test_endpoint_table(self, method, path, verb):
        """Paths and verbs match the service"""
        descriptor = resolve(method)
        assert descriptor.path == path
        assert descriptor.verb == verb

    def test_only_missions_has_override(self):
        """Override bundles are sparse"""
        with_override = [m for m in ApiMethod if resolve(m).parameters is not None]
        assert with_override == [ApiMethod.MISSIONS_GET]

        parameters = resolve(ApiMethod.MISSIONS_GET).parameters
        assert parameters == RequestParameters(endpoint=MISSIONS_ENDPOINT, raw_response=True)

    def test_missions_endpoint(self):
        """The missions backend is addressed at its root URL"""
        assert resolve(ApiMethod.MISSIONS_GET).parameters.endpoint == (
            "https://missions-backend.musixmatch.com/"
        )

    def test_has_body(self):
        """Only POST methods carry a form body"""
        assert resolve(ApiMethod.TRACK_SUBTITLE_POST).has_body
        assert not resolve(ApiMethod.TRACK_GET).has_body


class TestRegistryValidation:
    """Test that incomplete registries fail fast"""

    def test_missing_method_raises(self):
        """A missing entry is reported with the method name"""
        incomplete = dict(REGISTRY)
        del incomplete[ApiMethod.TRACK_GET]

        with pytest.raises(RegistryError) as exc_info:
            validate_registry(incomplete)

        assert exc_info.value.details["method"] == "TRACK_GET"

    def test_unsupported_verb_raises(self):
        """Only GET and POST are valid verbs"""
        broken = dict(REGISTRY)
        broken[ApiMethod.TRACK_GET] = EndpointDescriptor("track.get", "DELETE")

        with pytest.raises(RegistryError):
            validate_registry(broken)

    def test_empty_path_raises(self):
        """An empty path cannot resolve to an endpoint"""
        broken = dict(REGISTRY)
        broken[ApiMethod.TRACK_GET] = EndpointDescriptor("", "GET")

        with pytest.raises(RegistryError):
            validate_registry(broken)

    def test_resolve_unknown_value_raises(self):
        """Lookup of something that is not a registered method fails"""
        with pytest.raises(RegistryError):
            resolve("track_get")
