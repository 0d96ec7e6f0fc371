"""
Console entry point: runs the Typer app and renders library errors.
"""

import logging
import sys

import typer
from rich.console import Console

from acnh_cli.cli.app import app
from acnh_cli.cli.formatters import format_error_with_suggestions
from acnh_cli.exceptions import AcnhCliError


def main() -> None:
    console = Console(stderr=True)

    try:
        app()
    except (typer.Exit, typer.Abort):
        pass
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted.[/yellow]")
        sys.exit(0)
    except AcnhCliError as e:
        console.print(format_error_with_suggestions(e))
        sys.exit(1)
    except Exception as e:
        console.print(format_error_with_suggestions(e, {"type": "Unexpected"}))
        logging.getLogger("acnh_cli").debug("Full traceback:", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
