"""qwui CLI

Usage:
    qwui list components.yaml                        # Show the components of a library
    qwui render components.yaml alert "Hello"        # Render a component to HTML
    qwui render components.yaml alert "Hi" -V primary -a class=extra
    qwui -v render ...                               # Verbose logging (QWUI_DEBUG=1 for debug)
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Any, List, NoReturn, Optional

import typer
import yaml
from markupsafe import Markup
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from ._version import __version__
from .config import resolve_config
from .engine.attributes import AttributeMerger
from .exceptions import ContentNotAllowedError, QwuiError
from .library import Library, load_library
from .renderer import to_html

console = Console()

app = typer.Typer(help="Render qwui components from a YAML library.", no_args_is_help=True)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the qwui CLI.

    Log levels:
    - Normal: Only warnings/errors shown
    - Verbose (-v): INFO level
    - Debug (QWUI_DEBUG=1): DEBUG level - shows every render
    """
    if os.environ.get("QWUI_DEBUG"):
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    handler = RichHandler(
        console=Console(stderr=True),
        show_time=verbose,
        show_path=bool(os.environ.get("QWUI_DEBUG")),
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    logger = logging.getLogger("qwui")
    logger.setLevel(level)
    logger.handlers = [handler]
    logger.propagate = False


def exit_with_error(message: str, exit_code: int = 1) -> NoReturn:
    """Exit the program with an error message."""
    typer.echo(f"Error: {message}", err=True)
    sys.exit(exit_code)


def parse_attributes(pairs: List[str]) -> dict[str, Any]:
    """Parse ``key=value`` pairs; values are read as YAML scalars (``true``, ``3``)."""
    attrs: dict[str, Any] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise typer.BadParameter(f"Expected key=value, got '{pair}'")
        attrs[key] = yaml.safe_load(value) if value else ""
    return attrs


def _load(library_path: Path, config_path: Optional[Path]) -> Library:
    merger = AttributeMerger.from_config(resolve_config(config_path))
    return load_library(library_path, merger)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"qwui {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose logging."),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show version and exit."
    ),
) -> None:
    """Render qwui components from a YAML library."""
    setup_logging(verbose)


@app.command("list")
def list_command(
    library_path: Path = typer.Argument(..., help="Path to a component library YAML file."),
    config_path: Optional[Path] = typer.Option(None, "--config", help="Engine config YAML."),
) -> None:
    """List the components of a library."""
    try:
        library = _load(library_path, config_path)
    except (QwuiError, OSError) as e:
        exit_with_error(str(e))

    if not library:
        console.print("[yellow]No components found[/yellow]")
        return

    table = Table(title=library.name)
    table.add_column("Name", style="cyan")
    table.add_column("Kind")
    table.add_column("Tag")
    table.add_column("Class")
    table.add_column("Variants")

    for name, component in library.items():
        definition = component.definition
        tag = definition.tag if isinstance(definition.tag, str) else "-"
        table.add_row(
            name,
            definition.kind,
            tag,
            definition.class_,
            ", ".join(definition.variants) or "-",
        )

    console.print(table)


@app.command("render")
def render_command(
    library_path: Path = typer.Argument(..., help="Path to a component library YAML file."),
    component_name: str = typer.Argument(..., help="Component to render."),
    content: Optional[str] = typer.Argument(None, help="Component content."),
    variants: Optional[List[str]] = typer.Option(None, "-V", "--variant", help="Variant (repeatable)."),
    attrs: Optional[List[str]] = typer.Option(None, "-a", "--attr", help="Option as key=value (repeatable)."),
    raw: bool = typer.Option(False, "--raw", help="Treat content as trusted HTML."),
    config_path: Optional[Path] = typer.Option(None, "--config", help="Engine config YAML."),
) -> None:
    """Render one component to HTML."""
    options = parse_attributes(attrs or [])
    if variants:
        options["variants"] = list(variants)

    body: Any = Markup(content) if raw and content is not None else content

    try:
        component = _load(library_path, config_path).get_component(component_name)
        if body is not None and component.kind == "void":
            raise ContentNotAllowedError(component.definition.class_)
        args = () if body is None else (body,)
        node = component(*args, **options)
    except (QwuiError, OSError) as e:
        exit_with_error(str(e))

    typer.echo(to_html(node))


if __name__ == "__main__":
    app()
