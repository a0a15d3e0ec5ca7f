"""
Musixmatch client: typed call-sites over the request engine.

Each method builds the arguments of one remote method, sends the request,
checks the envelope status code and casts the body into a model. A status
other than StatusCode.SUCCESS raises ApiStatusError naming the code.

Usage:
    from musixmatch_client import MusixmatchClient, SubtitleFormat

    client = MusixmatchClient("your_user_token")
    tracks = client.search_by_artist_and_title("Queen", "Bohemian Rhapsody")
    subtitle = client.get_synced_lyrics(tracks[0].track_id, SubtitleFormat.LRC)
    print(subtitle.subtitle_body)

Thread Safety:
    A client wraps one RequestEngine and shares its cookie jar across calls.
    Do not use the same client from several threads without a lock.
"""

from typing import Any, Mapping

from musixmatch_client.api.envelope import Envelope, StructuredEnvelope
from musixmatch_client.api.methods import DEFAULT_API_URL, DEFAULT_APP_ID, ApiMethod
from musixmatch_client.api.request_engine import RequestEngine
from musixmatch_client.api.status import StatusCode
from musixmatch_client.core.exceptions import ApiStatusError, EnvelopeError
from musixmatch_client.core.logger import get_logger
from musixmatch_client.models import (
    Lyrics,
    Snippet,
    Subtitle,
    SubtitleFormat,
    Track,
    TrackSearchParameters,
)


logger = get_logger(__name__)

# Fixed values the desktop client reports when submitting subtitles
SUBMIT_NUM_KEYPRESSED = "2048"
SUBMIT_TIME_SPENT = "519852"


class MusixmatchClient:
    """
    High-level client for the Musixmatch desktop API.

    Attributes:
        engine: The RequestEngine used for every call.
    """

    def __init__(
        self,
        user_token: str | None = None,
        api_url: str = DEFAULT_API_URL,
        app_id: str = DEFAULT_APP_ID,
        engine: RequestEngine | None = None
    ) -> None:
        """
        Initialize the client.

        Args:
            user_token: Authentication token. Required unless engine is given.
            api_url: API root passed to the engine.
            app_id: Application identifier passed to the engine.
            engine: Optional pre-built engine (shares its session and token).

        Raises:
            ValueError: If neither user_token nor engine is given.
        """
        if engine is None:
            if user_token is None:
                raise ValueError("Either user_token or engine must be provided")
            engine = RequestEngine(user_token, api_url=api_url, app_id=app_id)
        self.engine = engine

    def close(self) -> None:
        """Close the engine's session."""
        self.engine.close()

    def __enter__(self) -> "MusixmatchClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    def search_tracks(self, parameters: TrackSearchParameters) -> list[Track]:
        """
        Search the track database.

        Args:
            parameters: Search filters, ordering and paging.

        Returns:
            Matching tracks in service order. Empty if nothing matched.

        Raises:
            ApiStatusError: If the service status is not success.
        """
        logger.info(f"Searching tracks: {parameters}")
        envelope = self._call(ApiMethod.TRACK_SEARCH, parameters.to_arguments())
        return envelope.cast(_tracks_from_search)

    def search(self, query: str) -> list[Track]:
        """Search by any word in the song title, artist name or lyrics."""
        return self._search({"q": query})

    def search_by_artist_and_title(self, artist: str, title: str) -> list[Track]:
        """Search by artist name and song title."""
        return self._search({"q_artist": artist, "q_track": title})

    def search_by_lyrics(self, lyrics: str) -> list[Track]:
        """Search by a piece of lyrics."""
        return self._search({"q_lyrics": lyrics})

    def _search(self, arguments: dict[str, str]) -> list[Track]:
        envelope = self._call(ApiMethod.TRACK_SEARCH, arguments)
        return envelope.cast(_tracks_from_search)

    # ------------------------------------------------------------------
    # Track data
    # ------------------------------------------------------------------

    def get_track(self, track_id: int) -> Track:
        """
        Get a track by its Musixmatch id.

        Raises:
            ApiStatusError: RESOURCE_NOT_FOUND if the id is unknown, or any
                            other non-success status.
        """
        envelope = self._call(ApiMethod.TRACK_GET, {"track_id": str(track_id)})
        return envelope.cast(lambda body: Track.from_api(body["track"]))

    def get_track_snippet(self, track_id: int) -> str:
        """
        Get the snippet of a track: one lyrics line meant to represent the song.

        Returns:
            The snippet text, or an empty string for instrumental tracks.
        """
        envelope = self._call(ApiMethod.TRACK_SNIPPET_GET, {"track_id": str(track_id)})
        snippet = envelope.cast(lambda body: Snippet.from_api(body["snippet"]))
        return "" if snippet.instrumental else snippet.snippet_body

    def get_synced_lyrics(
        self,
        track_id: int,
        subtitle_format: SubtitleFormat = SubtitleFormat.LRC
    ) -> Subtitle:
        """
        Get the synced lyrics (subtitle) of a track.

        Args:
            track_id: Musixmatch track id.
            subtitle_format: Format of subtitle_body in the result.
        """
        envelope = self._call(ApiMethod.TRACK_SUBTITLE_GET, {
            "track_id": str(track_id),
            "subtitle_format": subtitle_format.value,
        })
        return envelope.cast(lambda body: Subtitle.from_api(body["subtitle"]))

    def get_lyrics(self, track_id: int) -> Lyrics:
        """Get the static lyrics of a track."""
        envelope = self._call(ApiMethod.TRACK_LYRICS_GET, {
            "track_id": str(track_id),
            "part": "user,lyrics_verified_by",
        })
        return envelope.cast(lambda body: Lyrics.from_api(body["lyrics"]))

    def submit_synced_lyrics(self, track_id: int, subtitles: str) -> None:
        """
        Submit synced lyrics for a track.

        The track is fetched first to fill in the identifying fields the
        service expects. The subtitle text goes in the form body.

        Args:
            track_id: Musixmatch track id.
            subtitles: Subtitle data in Musixmatch (mxm) format.

        Note:
            The service accepts the submission and awards points, but the
            subtitle has been observed to disappear right after. The request
            is sent exactly as the desktop application sends it.
        """
        track = self.get_track(track_id)
        logger.info(f"Submitting synced lyrics for {track.artist_name} - {track.track_name}")
        self._call(
            ApiMethod.TRACK_SUBTITLE_POST,
            {
                "commontrack_id": str(track.commontrack_id),
                "length": str(track.track_length),
                "q_track": track.track_name,
                "original_title": track.track_name,
                "q_artist": track.artist_name,
                "original_artist": track.artist_name,
                "original_uri": track.track_spotify_id,
                "num_keypressed": SUBMIT_NUM_KEYPRESSED,
                "time_spent": SUBMIT_TIME_SPENT,
            },
            {"subtitle_body": subtitles},
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _call(
        self,
        method: ApiMethod,
        query_args: Mapping[str, Any],
        body_args: Mapping[str, Any] | None = None
    ) -> StructuredEnvelope:
        envelope = self.engine.send_request(method, query_args, body_args)
        return check_status(method, envelope)


def check_status(method: ApiMethod, envelope: Envelope) -> StructuredEnvelope:
    """
    Raise ApiStatusError unless the envelope reports success.

    Args:
        method: The method that was called (used in the message).
        envelope: The response returned by the engine.

    Returns:
        The same envelope, narrowed to StructuredEnvelope.

    Raises:
        EnvelopeError: If the response was returned unparsed and carries
                       no status code.
        ApiStatusError: If the status code is not StatusCode.SUCCESS.
    """
    if not isinstance(envelope, StructuredEnvelope):
        raise EnvelopeError(
            f"{method.name} returned an unparsed response without a status code",
            details={"method": method.name}
        )

    if envelope.status_code == StatusCode.SUCCESS:
        return envelope

    status_name = StatusCode.name_of(envelope.status_code)
    logger.warning(f"{method.name} failed with status {envelope.status_code} ({status_name})")
    raise ApiStatusError(
        f"Musixmatch request failed: {status_name} ({envelope.status_code})",
        status_code=envelope.status_code,
        status_name=status_name,
        details={"method": method.name}
    )


def _tracks_from_search(body: dict[str, Any]) -> list[Track]:
    return [Track.from_api(item["track"]) for item in body.get("track_list") or []]
