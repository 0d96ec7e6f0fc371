"""
Defines the command-line interface for the application using Typer.
"""

import asyncio
import logging
from pathlib import Path
from typing import Awaitable, Callable, TypeVar

import typer
from rich.console import Console
from rich.logging import RichHandler

from acnh_cli import __version__
from acnh_cli.client import AcnhClient
from acnh_cli.models.config import ClientConfig
from acnh_cli.models.records import Weather

from .formatters import (
    print_bgm_table,
    print_download_result,
    print_song_table,
)

console = Console()


def configure_logging(verbose: int) -> None:
    """Routes log records through Rich; -vv turns on debug output."""
    handler = RichHandler(console=console, show_path=False, show_level=False, markup=True)
    logging.basicConfig(format="%(message)s", datefmt="[%X]", handlers=[handler])
    logging.getLogger("acnh_cli").setLevel("DEBUG" if verbose >= 2 else "INFO")


app = typer.Typer(
    name="acnh-cli",
    help=(
        "Browse and download Animal Crossing: New Horizons music. Use 'acnh-cli"
        " <command> --help' for more info."
    ),
    rich_markup_mode="rich",
    pretty_exceptions_show_locals=False,
    add_completion=False,
)
bgm_app = typer.Typer(help="Hourly background music, by hour and weather.")
songs_app = typer.Typer(help="K.K. Slider songs, by id or name.")
app.add_typer(bgm_app, name="bgm")
app.add_typer(songs_app, name="songs")

T = TypeVar("T")


def _run(ctx: typer.Context, action: Callable[[AcnhClient], Awaitable[T]]) -> T:
    """Runs one action against a fresh client, closing it afterwards."""

    async def _runner() -> T:
        async with AcnhClient(ctx.obj) as client:
            return await action(client)

    return asyncio.run(_runner())


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help="Increase logging verbosity (-vv for debug).",
    ),
    version: bool = typer.Option(
        False, "--version", help="Show version and exit.", is_eager=True
    ),
    base_url: str = typer.Option(
        "https://acnhapi.com", "--base-url", help="Root URL of the ACNH API."
    ),
    timeout: float = typer.Option(
        60.0, "--timeout", help="Total timeout for each request, in seconds."
    ),
):
    """ACNH music catalog CLI"""
    if version:
        console.print(f"[bold]acnh-cli[/bold] version [cyan]{__version__}[/cyan]")
        raise typer.Exit()

    configure_logging(verbose)

    ctx.obj = ClientConfig.create(base_url=base_url, timeout=timeout)

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())


@bgm_app.command("list")
def bgm_list(
    ctx: typer.Context,
    hour: int | None = typer.Option(None, "--hour", help="Hour of day (0-23)."),
    weather: Weather | None = typer.Option(
        None, "--weather", case_sensitive=False, help="Weather condition."
    ),
):
    """List background tracks, optionally filtered by hour and/or weather."""

    async def _action(client: AcnhClient):
        if hour is not None and weather is not None:
            return [await client.bgm.by_hour_and_weather(hour, weather)]
        if hour is not None:
            return await client.bgm.by_hour(hour)
        if weather is not None:
            return await client.bgm.by_weather(weather)
        return await client.bgm.list()

    print_bgm_table(_run(ctx, _action))


@bgm_app.command("get")
def bgm_get(ctx: typer.Context, track_id: int = typer.Argument(..., help="Track id.")):
    """Show a single background track."""
    track = _run(ctx, lambda client: client.bgm.by_id(track_id))
    print_bgm_table([track])


@bgm_app.command("download")
def bgm_download(
    ctx: typer.Context,
    track_id: int = typer.Argument(..., help="Track id."),
    directory: Path | None = typer.Option(
        None,
        "--dir",
        "-d",
        help="Existing directory to save into. Defaults to the system temp directory.",
    ),
):
    """Download a background track as MP3."""

    async def _action(client: AcnhClient) -> str:
        track = await client.bgm.by_id(track_id)
        if directory is None:
            return await client.bgm.download_to_temp(track)
        return await client.bgm.download(track, str(directory))

    print_download_result(_run(ctx, _action))


@songs_app.command("list")
def songs_list(ctx: typer.Context):
    """List every song."""
    print_song_table(_run(ctx, lambda client: client.songs.list()))


@songs_app.command("get")
def songs_get(ctx: typer.Context, song_id: int = typer.Argument(..., help="Song id.")):
    """Show a single song."""
    song = _run(ctx, lambda client: client.songs.by_id(song_id))
    print_song_table([song])


@songs_app.command("find")
def songs_find(
    ctx: typer.Context, name: str = typer.Argument(..., help="Song name (EUen).")
):
    """Find a song by name, ignoring case."""
    song = _run(ctx, lambda client: client.songs.by_name(name))
    print_song_table([song])


@songs_app.command("download")
def songs_download(
    ctx: typer.Context,
    song_id: int | None = typer.Argument(None, help="Song id."),
    name: str | None = typer.Option(None, "--name", "-n", help="Song name (EUen)."),
    directory: Path | None = typer.Option(
        None,
        "--dir",
        "-d",
        help="Existing directory to save into. Defaults to the system temp directory.",
    ),
):
    """Download a song as MP3, selected by id or by name."""
    if (song_id is None) == (name is None):
        console.print("[red]✗ Provide either a song id or --name, not both.[/red]")
        raise typer.Exit(code=1)

    async def _action(client: AcnhClient) -> str:
        if song_id is not None:
            song = await client.songs.by_id(song_id)
        else:
            song = await client.songs.by_name(name)
        if directory is None:
            return await client.songs.download_to_temp(song)
        return await client.songs.download(song, str(directory))

    print_download_result(_run(ctx, _action))
