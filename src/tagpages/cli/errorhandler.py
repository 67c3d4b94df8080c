"""CLI error handling utilities."""

from collections.abc import Generator
from contextlib import contextmanager

import typer

from tagpages.config.exceptions import ConfigError, ConfigValidationError
from tagpages.exceptions import BuildError, CollectionNotFoundError, LayoutError
from tagpages.logging_setup import console


@contextmanager
def handle_cli_errors(*, debug: bool = False) -> Generator[None, None, None]:
    """Context manager turning tagpages errors into friendly messages and exit code 1.

    Args:
        debug: If True, re-raise so the full traceback is shown.

    """
    try:
        yield
    except (KeyboardInterrupt, SystemExit, typer.Exit):
        raise
    except ConfigValidationError as e:
        if debug:
            raise
        console.print(f"[bold red]⚙️ Invalid Configuration:[/bold red] {e}")
        for error in e.errors:
            loc = " -> ".join(str(part) for part in error.get("loc", ()))
            console.print(f"  - {loc or '<root>'}: {error.get('msg', '')}")
        raise typer.Exit(1) from e
    except ConfigError as e:
        if debug:
            raise
        console.print(f"[bold red]⚙️ Configuration Error:[/bold red] {e}")
        raise typer.Exit(1) from e
    except BuildError as e:
        if debug:
            raise
        cause = e.__cause__
        if isinstance(cause, CollectionNotFoundError):
            console.print(f"[bold red]📚 Unknown Collection:[/bold red] {cause}")
            console.print("Define it under [cyan]collections[/cyan] in tagpages.yml or remove its tag options.")
        elif isinstance(cause, LayoutError):
            console.print(f"[bold red]🧩 Template Error:[/bold red] {cause}")
        else:
            console.print(f"[bold red]🚨 Build Failed:[/bold red] {e}")
        raise typer.Exit(1) from e
    except Exception as e:
        if debug:
            console.print_exception(show_locals=False)
            raise typer.Exit(1) from e

        console.print(f"[bold red]💥 An unexpected error occurred:[/bold red] {e}")
        console.print("[dim]Run with [bold]--debug[/bold] for more details.[/dim]")
        raise typer.Exit(1) from e
