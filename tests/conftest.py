"""Test configuration and fixtures"""

import json

import pytest

from musixmatch_client.api.methods import DEFAULT_API_URL
from musixmatch_client.api.request_engine import RequestEngine
from musixmatch_client.client import MusixmatchClient


USER_TOKEN = "190523f77464fba06fa5f82a9bfab0aa9dc201244ecf5124a06d95"


def api_url(path: str) -> str:
    """Full URL of a registry path under the default API root"""
    return f"{DEFAULT_API_URL}{path}"


def envelope_json(body=None, status_code: int = 200, execute_time: float = 0.02) -> str:
    """Serialized service response wrapping body in the standard envelope"""
    return json.dumps({
        "message": {
            "header": {"status_code": status_code, "execute_time": execute_time},
            "body": body if body is not None else {},
        }
    })


@pytest.fixture
def user_token():
    """User token sent by the engine under test"""
    return USER_TOKEN


@pytest.fixture
def engine(user_token):
    """Request engine with the default API root"""
    with RequestEngine(user_token) as engine:
        yield engine


@pytest.fixture
def client(engine):
    """Client sharing the engine fixture"""
    return MusixmatchClient(engine=engine)


@pytest.fixture
def sample_track_data():
    """Sample 'track' object as returned by track.get"""
    return {
        "track_id": 84584600,
        "track_name": "Bohemian Rhapsody",
        "track_rating": 99,
        "commontrack_id": 79120,
        "track_length": 355,
        "track_isrc": "GBUM71029604",
        "track_spotify_id": "7tFiyTwD0nx5a1eklYtX2J",
        "instrumental": 0,
        "explicit": 0,
        "has_lyrics": 1,
        "has_subtitles": 1,
        "has_richsync": 1,
        "restricted": 0,
        "album_id": 20858947,
        "album_name": "A Night At The Opera",
        "artist_id": 118,
        "artist_name": "Queen",
        "updated_time": "2021-07-06T14:01:31Z",
        "primary_genres": {"music_genre_list": []},
    }


@pytest.fixture
def sample_lyrics_data():
    """Sample 'lyrics' object as returned by track.lyrics.get"""
    return {
        "lyrics_id": 28978765,
        "restricted": 0,
        "instrumental": 0,
        "lyrics_body": "Is this the real life?\nIs this just fantasy?",
        "lyrics_language": "en",
        "lyrics_copyright": "Lyrics powered by www.musixmatch.com.",
        "explicit": 0,
        "verified": 1,
        "updated_time": "2021-07-06T14:01:31Z",
    }


@pytest.fixture
def sample_subtitle_data():
    """Sample 'subtitle' object as returned by track.subtitle.get"""
    return {
        "subtitle_id": 35731428,
        "restricted": 0,
        "subtitle_body": "[00:00.52] Is this the real life?\n[00:04.49] Is this just fantasy?",
        "subtitle_language": "en",
        "subtitle_length": 355,
        "lyrics_copyright": "Lyrics powered by www.musixmatch.com.",
        "updated_time": "2021-07-06T14:01:31Z",
    }
