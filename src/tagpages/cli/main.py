"""Main Typer application for tagpages."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.panel import Panel
from rich.table import Table

from tagpages.builder import build_site
from tagpages.cli.errorhandler import handle_cli_errors
from tagpages.config import DEFAULT_CONFIG_FILENAME, TagPagesConfig, find_config, load_config, save_config
from tagpages.logging_setup import configure_logging, console
from tagpages.tags import page_count

app = typer.Typer(
    name="tagpages",
    help="Generate tag listing pages for static site collections.",
    no_args_is_help=True,
)

logger = logging.getLogger(__name__)

SiteRoot = Annotated[Path, typer.Argument(help="Site root directory")]
ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", "-c", help=f"Path to {DEFAULT_CONFIG_FILENAME} (searched upward by default)"),
]
DebugOption = Annotated[bool, typer.Option("--debug", help="Enable debug logging and full tracebacks")]


def _load(site_root: Path, config_path: Path | None) -> TagPagesConfig:
    if config_path is not None:
        return load_config(config_path, required=True)
    found = find_config(site_root)
    return load_config(found if found else site_root)


@app.command()
def init(
    site_root: SiteRoot = Path("."),
    *,
    force: Annotated[bool, typer.Option("--force", "-f", help="Overwrite an existing config file")] = False,
) -> None:
    """Write a default tagpages.yml with a sample blog collection."""
    configure_logging()
    config_path = site_root / DEFAULT_CONFIG_FILENAME
    if config_path.exists() and not force:
        console.print(f"[yellow]⚠️ {config_path} already exists.[/yellow] Use [cyan]--force[/cyan] to overwrite.")
        raise typer.Exit(1)

    config = TagPagesConfig(
        collections={"blog": {"pattern": "blog/*.html", "sort": "date", "reverse": True}},
        tags={"blog": {"perPage": 10, "metadata": {"title": "Posts tagged :tag"}}},
    )
    written = save_config(config, site_root)
    console.print(
        Panel(
            f"[bold green]✅ Configuration written to {written}[/bold green]\n\n"
            f"[bold]Next steps:[/bold]\n"
            f"• Put content under [cyan]{site_root / config.source}[/cyan]\n"
            f"• Add a [cyan]{config.tags['blog'].template}[/cyan] template under "
            f"[cyan]{site_root / config.templates_dir}[/cyan]\n"
            f"• Run [cyan]tagpages build {site_root}[/cyan]",
            title="🏷️ tagpages initialized",
            border_style="green",
        )
    )


@app.command()
def build(
    site_root: SiteRoot = Path("."),
    *,
    config_path: ConfigOption = None,
    debug: DebugOption = False,
) -> None:
    """Build the site, generating tag pages for every configured collection."""
    configure_logging(debug=debug)
    with handle_cli_errors(debug=debug):
        config = _load(site_root, config_path)
        site, files = build_site(site_root, config)
        tag_count = len(site.metadata().get("tags", {}))
        console.print(
            f"[bold green]✅ Built {len(files)} file(s) with {tag_count} tag(s) into {site.destination}[/bold green]"
        )


@app.command()
def tags(
    site_root: SiteRoot = Path("."),
    *,
    config_path: ConfigOption = None,
    debug: DebugOption = False,
) -> None:
    """List tags per collection without writing anything."""
    configure_logging(debug=debug)
    with handle_cli_errors(debug=debug):
        config = _load(site_root, config_path)
        site, _files = build_site(site_root, config, write=False)

    collections = site.metadata().get("collections", {})
    table = Table(title="🏷️ Tags", show_header=True, header_style="bold magenta")
    table.add_column("Collection", style="cyan", no_wrap=True)
    table.add_column("Tag", style="green")
    table.add_column("Items", justify="right")
    table.add_column("Pages", justify="right")

    for name, settings in config.tags.items():
        collection = collections.get(name)
        for tag, items in getattr(collection, "tags", {}).items():
            pages = page_count(len(items), settings.per_page)
            table.add_row(name, tag, str(len(items)), str(pages))

    console.print(table)
    console.print(f"\n[dim]{len(site.metadata().get('tags', {}))} tag(s) in the global index[/dim]")


def main() -> None:
    """Entry point for the console script."""
    app()
