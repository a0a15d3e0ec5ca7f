"""
Command-line interface for musixmatch-client.

Commands:
    mxm search QUERY                    Search tracks
    mxm track TRACK_ID                  Show track details
    mxm lyrics TRACK_ID                 Print static lyrics
    mxm subtitles TRACK_ID              Print synced lyrics
    mxm snippet TRACK_ID                Print the track snippet

Global Options:
    --config <path>                     Path to config.yaml
    --token <token>                     User token (overrides config and env)
    --verbose                           Log requests at DEBUG level

Usage:
    mxm search "bohemian rhapsody"
    mxm search --artist Queen --title "Bohemian Rhapsody" --has-subtitles
    mxm subtitles 84584600 --format lrc > song.lrc

Configuration:
    The token is read from --token, then MUSIXMATCH_USER_TOKEN (a .env file
    is honoured), then musixmatch.user_token in config.yaml.
"""

import sys
from pathlib import Path
from typing import Optional

import click
import requests

from musixmatch_client import __version__
from musixmatch_client.client import MusixmatchClient
from musixmatch_client.core import (
    Config,
    MusixmatchError,
    get_logger,
    load_config,
    setup_logging,
    shutdown_logging,
)
from musixmatch_client.models import SortStrategy, SubtitleFormat, Track, TrackSearchParameters

logger = get_logger(__name__)


@click.group()
@click.option(
    "--config", "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    metavar="<config.yaml>",
    help="Path to the configuration file"
)
@click.option(
    "--token",
    type=str,
    default=None,
    metavar="<user-token>",
    help="Musixmatch user token"
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    help="Show request details"
)
@click.version_option(__version__, prog_name="mxm")
@click.pass_context
def cli(
    ctx: click.Context,
    config_path: Optional[Path],
    token: Optional[str],
    verbose: bool
) -> None:
    """
    mxm: query the Musixmatch desktop API.

    \b
    EXAMPLES:
        mxm search "bohemian rhapsody"
        mxm lyrics 84584600
        mxm subtitles 84584600 --format lrc
    """
    # Configuration is loaded by the first command that needs a client,
    # so 'mxm <command> --help' works without a token
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path
    ctx.obj["token"] = token
    ctx.obj["verbose"] = verbose


@cli.command()
@click.argument("query", required=False, default="")
@click.option("--artist", default="", help="Words in the artist name")
@click.option("--title", default="", help="Words in the track title")
@click.option("--album", default="", help="Words in the album title")
@click.option("--lyrics", "lyrics_query", default="", help="Words in the lyrics")
@click.option("--language", default="", help="Lyrics language (ISO 639-1)")
@click.option("--has-lyrics", is_flag=True, help="Only tracks with lyrics")
@click.option("--has-subtitles", is_flag=True, help="Only tracks with synced lyrics")
@click.option(
    "--sort",
    type=click.Choice([s.name.lower() for s in SortStrategy]),
    default=SortStrategy.TRACK_RATING_DESC.name.lower(),
    show_default=True,
    help="Result ordering"
)
@click.option("--page", type=click.IntRange(min=1), default=1, show_default=True)
@click.option("--page-size", type=click.IntRange(1, 100), default=10, show_default=True)
@click.pass_context
def search(
    ctx: click.Context,
    query: str,
    artist: str,
    title: str,
    album: str,
    lyrics_query: str,
    language: str,
    has_lyrics: bool,
    has_subtitles: bool,
    sort: str,
    page: int,
    page_size: int
) -> None:
    """Search tracks."""
    parameters = TrackSearchParameters(
        query=query,
        lyrics_query=lyrics_query,
        artist=artist,
        title=title,
        album=album,
        has_lyrics=has_lyrics,
        has_subtitles=has_subtitles,
        sort=SortStrategy[sort.upper()],
        page=page,
        page_size=page_size,
        language=language,
    )
    client = _get_client(ctx)
    tracks = _run(lambda: client.search_tracks(parameters))

    if not tracks:
        click.echo("No tracks found.")
        return

    for track in tracks:
        click.echo(_format_track_line(track))


@cli.command()
@click.argument("track_id", type=int)
@click.pass_context
def track(ctx: click.Context, track_id: int) -> None:
    """Show track details."""
    client = _get_client(ctx)
    result = _run(lambda: client.get_track(track_id))

    click.echo(f"Title:        {result.track_name}")
    click.echo(f"Artist:       {result.artist_name}")
    click.echo(f"Album:        {result.album_name}")
    click.echo(f"Length:       {_format_length(result.track_length)}")
    click.echo(f"Track id:     {result.track_id}")
    click.echo(f"Commontrack:  {result.commontrack_id}")
    click.echo(f"Lyrics:       {'yes' if result.has_lyrics else 'no'}")
    click.echo(f"Synced:       {'yes' if result.has_subtitles else 'no'}")
    if result.track_spotify_id:
        click.echo(f"Spotify id:   {result.track_spotify_id}")


@cli.command()
@click.argument("track_id", type=int)
@click.pass_context
def lyrics(ctx: click.Context, track_id: int) -> None:
    """Print the static lyrics of a track."""
    client = _get_client(ctx)
    result = _run(lambda: client.get_lyrics(track_id))
    click.echo(result.lyrics_body)
    if result.lyrics_copyright:
        click.echo(f"\n{result.lyrics_copyright}", err=True)


@cli.command()
@click.argument("track_id", type=int)
@click.option(
    "--format", "subtitle_format",
    type=click.Choice([f.value for f in SubtitleFormat]),
    default=SubtitleFormat.LRC.value,
    show_default=True,
    help="Subtitle format"
)
@click.pass_context
def subtitles(ctx: click.Context, track_id: int, subtitle_format: str) -> None:
    """Print the synced lyrics of a track."""
    client = _get_client(ctx)
    result = _run(lambda: client.get_synced_lyrics(track_id, SubtitleFormat(subtitle_format)))
    click.echo(result.subtitle_body)


@cli.command()
@click.argument("track_id", type=int)
@click.pass_context
def snippet(ctx: click.Context, track_id: int) -> None:
    """Print the snippet of a track."""
    client = _get_client(ctx)
    text = _run(lambda: client.get_track_snippet(track_id))
    click.echo(text or "(instrumental)")


def _get_client(ctx: click.Context) -> MusixmatchClient:
    """
    Return the client for this invocation, creating it on first use.

    Loads the configuration with the global options, starts logging and
    registers cleanup on the root context.

    Raises:
        click.ClickException: If the configuration cannot be loaded.
    """
    options = ctx.find_root().obj
    if "client" in options:
        return options["client"]

    try:
        config = load_config(options["config_path"], user_token=options["token"])
    except MusixmatchError as e:
        raise click.ClickException(e.message) from e

    level = "DEBUG" if options["verbose"] else config.logging.level
    setup_logging(level, log_file=config.logging.file)

    root = ctx.find_root()
    root.call_on_close(shutdown_logging)
    client = _create_client(config)
    root.call_on_close(client.close)
    options["client"] = client
    return client


def _create_client(config: Config) -> MusixmatchClient:
    """Build a client from the loaded configuration."""
    return MusixmatchClient(
        config.musixmatch.user_token,
        api_url=config.musixmatch.api_url,
        app_id=config.musixmatch.app_id
    )


def _run(call):
    """
    Run a client call, turning library and transport errors into CLI errors.

    Raises:
        click.ClickException: With the error message; click exits with code 1.
    """
    try:
        return call()
    except MusixmatchError as e:
        logger.debug(f"Request failed: {e.details}")
        raise click.ClickException(e.message) from e
    except requests.RequestException as e:
        raise click.ClickException(f"Network error: {e}") from e


def _format_track_line(track: Track) -> str:
    flags = ""
    if track.has_subtitles:
        flags = " [synced]"
    elif track.has_lyrics:
        flags = " [lyrics]"
    return f"{track.track_id:>10}  {track.artist_name} - {track.track_name}{flags}"


def _format_length(seconds: int) -> str:
    minutes, seconds = divmod(seconds, 60)
    return f"{minutes}:{seconds:02d}"


def main() -> None:
    """
    Entry point for the CLI.

    This function is called when running `mxm` from the command line.
    """
    cli()


if __name__ == "__main__":
    sys.exit(main())
