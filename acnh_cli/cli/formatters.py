"""
Functions for formatting and displaying catalog data in the console using Rich.
"""

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from acnh_cli.models.records import BGMTrack, Song, Weather

WEATHER_STYLES = {
    Weather.SUNNY: "yellow",
    Weather.RAINY: "blue",
    Weather.SNOWY: "white",
}


def format_error_with_suggestions(
    error: Exception, context: dict | None = None
) -> Panel:
    """Formats an error with actionable suggestions into a Rich Panel."""
    error_type = type(error).__name__
    error_msg = str(error)

    suggestions_map = {
        "ValidationError": [
            "• Hours run from 0 to 23.",
            "• Weather must be one of Sunny, Rainy or Snowy.",
            "• Download directories must exist before downloading.",
        ],
        "NotFoundError": [
            "• Nothing in the catalog matched your query.",
            "• Song names are matched against their EUen name, ignoring case.",
            "• Use `list` to browse the catalog.",
        ],
        "RemoteError": [
            "• The API rejected the request. A 404 usually means the id does not exist.",
            "• The API might be temporarily unavailable.",
        ],
        "TransportError": [
            "• A network connection issue occurred.",
            "• Check your internet connection or the --base-url option.",
            "• Try a larger --timeout.",
        ],
        "ConfigurationError": [
            "• Check the values passed to --base-url and --timeout.",
        ],
    }

    suggestions = suggestions_map.get(
        error_type, ["• Run the command with -vv for detailed logs."]
    )

    error_text = Text()
    error_text.append(f"{error_type}: ", style="bold red")
    error_text.append(error_msg)

    suggestion_text = Text("\n".join(suggestions))

    content = Table.grid(padding=(1, 0))
    content.add_row(error_text)
    content.add_row()
    content.add_row(Text("Suggestions", style="bold yellow"))
    content.add_row(suggestion_text)

    if context:
        content.add_row()
        content.add_row(Text(f"Context: {context}", style="dim"))

    return Panel(
        content,
        title="[bold red]An Error Occurred[/bold red]",
        border_style="red",
        expand=False,
    )


def print_bgm_table(tracks: list[BGMTrack]):
    """Displays background tracks sorted by hour, then weather."""
    console = Console()
    table = Table(box=box.SIMPLE_HEAVY, title=f"Background Music ({len(tracks)})")
    table.add_column("ID", justify="right", style="cyan")
    table.add_column("Hour", justify="right")
    table.add_column("Weather")
    table.add_column("File", style="dim")

    for track in sorted(tracks, key=lambda t: (t.hour, t.weather.value, t.id)):
        style = WEATHER_STYLES.get(track.weather, "white")
        table.add_row(
            str(track.id),
            f"{track.hour:02}:00",
            f"[{style}]{track.weather.value}[/{style}]",
            escape(track.file_name),
        )

    console.print(table)


def print_song_table(songs: list[Song]):
    """Displays songs sorted by id."""
    console = Console()
    table = Table(box=box.SIMPLE_HEAVY, title=f"Songs ({len(songs)})")
    table.add_column("ID", justify="right", style="cyan")
    table.add_column("Name", style="bold")
    table.add_column("Buy", justify="right")
    table.add_column("Orderable", justify="center")
    table.add_column("File", style="dim")

    for song in sorted(songs, key=lambda s: s.id):
        table.add_row(
            str(song.id),
            escape(song.display_name) or "[dim]Unknown[/dim]",
            str(song.buy_price) if song.buy_price is not None else "-",
            "✓" if song.is_orderable else "✗",
            escape(song.file_name),
        )

    console.print(table)


def print_download_result(path: str):
    """Reports where a downloaded asset was written."""
    Console().print(f"[green]✓ Downloaded to[/green] {escape(path)}")
