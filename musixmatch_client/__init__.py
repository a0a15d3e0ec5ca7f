"""
musixmatch-client: client library for the Musixmatch desktop API.

Authenticates with a user token, calls a fixed set of remote methods and
converts the service's uniform response envelope into typed objects.

Architecture:
    core/       - Configuration, logging, exceptions
    api/        - Request/response translation layer
                    methods.py         ApiMethod registry (path, verb, overrides)
                    encoding.py        Query string and form body encoding
                    envelope.py        Structured and raw response envelopes
                    request_engine.py  HTTP transport with session cookies
                    status.py          Service status codes
    models.py   - Track, Lyrics, Subtitle, Snippet, search parameters
    client.py   - MusixmatchClient: search, track, lyrics, subtitles
    cli.py      - The 'mxm' command-line interface

Usage:
    Python API:
        from musixmatch_client import MusixmatchClient

        with MusixmatchClient("your_user_token") as client:
            for track in client.search("bohemian rhapsody"):
                print(track.track_id, track.artist_name, track.track_name)

    Low-level access:
        from musixmatch_client.api import ApiMethod, RequestEngine

        engine = RequestEngine("your_user_token")
        envelope = engine.send_request(ApiMethod.TRACK_GET, {"track_id": "123"})

    Command Line:
        mxm search "bohemian rhapsody"
        mxm subtitles 84584600 --format lrc

Dependencies:
    - requests: HTTP transport and cookie persistence
    - pyyaml: Configuration file parsing
    - python-dotenv: .env support for the user token
    - click: CLI framework
    - colorama: Colored console logging
"""

__version__ = "0.1.0"
__author__ = "musixmatch-client"
__license__ = "MIT"

# Convenience imports for common usage
from musixmatch_client.core import (
    ApiStatusError,
    Config,
    ConfigError,
    EnvelopeError,
    MusixmatchError,
    RegistryError,
    get_logger,
    load_config,
    setup_logging,
)
from musixmatch_client.api import (
    ApiMethod,
    RawEnvelope,
    RequestEngine,
    RequestParameters,
    StatusCode,
    StructuredEnvelope,
)
from musixmatch_client.models import (
    Lyrics,
    Snippet,
    SortStrategy,
    Subtitle,
    SubtitleFormat,
    Track,
    TrackSearchParameters,
)
from musixmatch_client.client import MusixmatchClient

__all__ = [
    # Version
    "__version__",
    # Core
    "Config",
    "load_config",
    "setup_logging",
    "get_logger",
    # Exceptions
    "MusixmatchError",
    "ConfigError",
    "RegistryError",
    "EnvelopeError",
    "ApiStatusError",
    # API
    "ApiMethod",
    "RequestEngine",
    "RequestParameters",
    "StructuredEnvelope",
    "RawEnvelope",
    "StatusCode",
    # Models
    "Track",
    "Lyrics",
    "Subtitle",
    "Snippet",
    "SubtitleFormat",
    "SortStrategy",
    "TrackSearchParameters",
    # Client
    "MusixmatchClient",
]
