"""
Data models for Musixmatch entities.

This module defines immutable dataclasses for the objects returned by the
service (tracks, lyrics, subtitles, snippets) and for the arguments of a
track search.

Design Decisions:
    - All dataclasses are frozen (immutable)
    - Field names follow the service's JSON keys
    - Only the fields the client uses are modelled; from_api() ignores
      unknown keys so new server fields never break parsing
    - Numeric flags (0/1) are exposed as bools

Usage:
    from musixmatch_client.models import Track

    track = Track.from_api(body["track"])
    print(f"{track.track_name} by {track.artist_name}")
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any


@dataclass(frozen=True)
class Track:
    """
    Immutable representation of a Musixmatch track.

    Attributes:
        track_id: Musixmatch track id.
        track_name: Track title.
        artist_name: Display name of the artist(s).
        album_name: Album title.
        commontrack_id: Id shared by every version of the same song. Used
                        when submitting subtitles.
        track_length: Duration in seconds.
        track_rating: Popularity score (0-100).
        track_isrc: ISRC code, if known.
        track_spotify_id: Spotify track id, if known.
        artist_id: Musixmatch artist id.
        album_id: Musixmatch album id.
        has_lyrics: Whether static lyrics exist.
        has_subtitles: Whether synced lyrics (subtitles) exist.
        has_richsync: Whether word-by-word synced lyrics exist.
        instrumental: Whether the track is an instrumental.
        explicit: Whether the track is marked explicit.
        restricted: Whether the content is restricted in the caller's region.
        updated_time: ISO timestamp of the last update.
    """

    track_id: int
    track_name: str
    artist_name: str
    album_name: str = ""
    commontrack_id: int = 0
    track_length: int = 0
    track_rating: int = 0
    track_isrc: str = ""
    track_spotify_id: str = ""
    artist_id: int = 0
    album_id: int = 0
    has_lyrics: bool = False
    has_subtitles: bool = False
    has_richsync: bool = False
    instrumental: bool = False
    explicit: bool = False
    restricted: bool = False
    updated_time: str = ""

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "Track":
        """
        Create a Track from the 'track' object of an API response.

        Args:
            data: The track object (e.g. body["track"] of track.get, or
                  body["track_list"][i]["track"] of track.search).

        Raises:
            KeyError: If track_id is missing.
        """
        return cls(
            track_id=int(data["track_id"]),
            track_name=data.get("track_name") or "",
            artist_name=data.get("artist_name") or "",
            album_name=data.get("album_name") or "",
            commontrack_id=int(data.get("commontrack_id") or 0),
            track_length=int(data.get("track_length") or 0),
            track_rating=int(data.get("track_rating") or 0),
            track_isrc=data.get("track_isrc") or "",
            track_spotify_id=data.get("track_spotify_id") or "",
            artist_id=int(data.get("artist_id") or 0),
            album_id=int(data.get("album_id") or 0),
            has_lyrics=bool(data.get("has_lyrics", 0)),
            has_subtitles=bool(data.get("has_subtitles", 0)),
            has_richsync=bool(data.get("has_richsync", 0)),
            instrumental=bool(data.get("instrumental", 0)),
            explicit=bool(data.get("explicit", 0)),
            restricted=bool(data.get("restricted", 0)),
            updated_time=data.get("updated_time") or "",
        )


@dataclass(frozen=True)
class Lyrics:
    """
    Static (unsynchronized) lyrics of a track.

    Attributes:
        lyrics_id: Musixmatch lyrics id.
        lyrics_body: The lyrics text.
        lyrics_language: ISO 639-1 language code.
        lyrics_copyright: Copyright notice that must accompany the text.
        explicit: Whether the lyrics are explicit.
        instrumental: Whether the track is an instrumental (empty body).
        restricted: Whether the lyrics are restricted in the caller's region.
        verified: Whether the lyrics were verified by a curator.
        updated_time: ISO timestamp of the last update.
    """

    lyrics_id: int
    lyrics_body: str
    lyrics_language: str = ""
    lyrics_copyright: str = ""
    explicit: bool = False
    instrumental: bool = False
    restricted: bool = False
    verified: bool = False
    updated_time: str = ""

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "Lyrics":
        """Create Lyrics from the 'lyrics' object of track.lyrics.get."""
        return cls(
            lyrics_id=int(data["lyrics_id"]),
            lyrics_body=data.get("lyrics_body") or "",
            lyrics_language=data.get("lyrics_language") or "",
            lyrics_copyright=data.get("lyrics_copyright") or "",
            explicit=bool(data.get("explicit", 0)),
            instrumental=bool(data.get("instrumental", 0)),
            restricted=bool(data.get("restricted", 0)),
            verified=bool(data.get("verified", 0)),
            updated_time=data.get("updated_time") or "",
        )


@dataclass(frozen=True)
class Subtitle:
    """
    Synchronized lyrics of a track, in the format requested.

    Attributes:
        subtitle_id: Musixmatch subtitle id.
        subtitle_body: The subtitle text (LRC, DFXP, ... as requested).
        subtitle_language: ISO 639-1 language code.
        subtitle_length: Duration covered by the subtitle, in seconds.
        lyrics_copyright: Copyright notice that must accompany the text.
        restricted: Whether the subtitle is restricted in the caller's region.
        updated_time: ISO timestamp of the last update.
    """

    subtitle_id: int
    subtitle_body: str
    subtitle_language: str = ""
    subtitle_length: int = 0
    lyrics_copyright: str = ""
    restricted: bool = False
    updated_time: str = ""

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "Subtitle":
        """Create a Subtitle from the 'subtitle' object of track.subtitle.get."""
        return cls(
            subtitle_id=int(data["subtitle_id"]),
            subtitle_body=data.get("subtitle_body") or "",
            subtitle_language=data.get("subtitle_language") or "",
            subtitle_length=int(data.get("subtitle_length") or 0),
            lyrics_copyright=data.get("lyrics_copyright") or "",
            restricted=bool(data.get("restricted", 0)),
            updated_time=data.get("updated_time") or "",
        )


@dataclass(frozen=True)
class Snippet:
    """A short, representative line of a track's lyrics."""

    snippet_id: int
    snippet_body: str
    snippet_language: str = ""
    instrumental: bool = False
    restricted: bool = False
    updated_time: str = ""

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "Snippet":
        """Create a Snippet from the 'snippet' object of track.snippet.get."""
        return cls(
            snippet_id=int(data.get("snippet_id") or 0),
            snippet_body=data.get("snippet_body") or "",
            snippet_language=data.get("snippet_language") or "",
            instrumental=bool(data.get("instrumental", 0)),
            restricted=bool(data.get("restricted", 0)),
            updated_time=data.get("updated_time") or "",
        )


class SubtitleFormat(Enum):
    """Subtitle formats accepted by track.subtitle.get."""
    LRC = "lrc"
    DFXP = "dfxp"  # XML representation
    STLEDU = "stledu"
    MUSIXMATCH = "mxm"  # JSON lines with per-line timing; required for submission


class SortStrategy(Enum):
    """
    Result ordering for track searches.

    Each value is the (query key, direction) pair sent to track.search.
    """
    TRACK_RATING_ASC = ("s_track_rating", "asc")
    TRACK_RATING_DESC = ("s_track_rating", "desc")
    ARTIST_RATING_ASC = ("s_artist_rating", "asc")
    ARTIST_RATING_DESC = ("s_artist_rating", "desc")

    @property
    def key(self) -> str:
        return self.value[0]

    @property
    def direction(self) -> str:
        return self.value[1]


@dataclass(frozen=True)
class TrackSearchParameters:
    """
    Arguments of a track search.

    Empty strings mean "not set" and are not sent.

    Attributes:
        query: Any word in the song title, artist name or lyrics.
        lyrics_query: Words in the lyrics.
        artist: Words in the artist name.
        title: Words in the track title.
        album: Words in the album title.
        has_lyrics: Only return tracks with lyrics.
        has_subtitles: Only return tracks with synced lyrics.
        sort: Result ordering.
        page: Page number, starting at 1.
        page_size: Results per page (the service caps this at 100).
        language: Only return tracks whose lyrics are in this ISO 639-1 language.
    """

    query: str = ""
    lyrics_query: str = ""
    artist: str = ""
    title: str = ""
    album: str = ""
    has_lyrics: bool = False
    has_subtitles: bool = False
    sort: SortStrategy = SortStrategy.TRACK_RATING_DESC
    page: int = 1
    page_size: int = 10
    language: str = ""

    def to_arguments(self) -> dict[str, str]:
        """Build the track.search query arguments."""
        return {
            "q": self.query,
            "q_lyrics": self.lyrics_query,
            "q_artist": self.artist,
            "q_track": self.title,
            "q_album": self.album,
            "f_has_lyrics": "1" if self.has_lyrics else "",
            "f_has_subtitle": "1" if self.has_subtitles else "",
            self.sort.key: self.sort.direction,
            "page": str(self.page),
            "page_size": str(self.page_size),
            "f_lyrics_language": self.language,
        }
