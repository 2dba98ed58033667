"""
partial_templates.cli - Command Line Interface
==============================================

Typer application for inspecting and pre-rendering client-side templates
outside of a running web server.

Architecture
------------
    app (main entry point)
    ├── list    - Show the templates in a directory and their ids
    ├── render  - Render the script tag bundle for a directory
    └── view    - Render a full view (e.g. Home/Index)

Every command reads ``[tool.partial-templates]`` from the application's
pyproject.toml; command-line flags override it.

Usage Examples
--------------
    $ partial-templates list ~/Views/Home --root ./webapp
    $ partial-templates render ~/Views/Home --controller Home -o bundle.html
    $ partial-templates view Home Index --data name=Ada

See Also
--------
- engine.py: View lookup and rendering
- helper.py: Script tag wrapping
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer
from jinja2 import TemplateError
from pydantic import ValidationError
from rich import print as rprint
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from partial_templates import __version__
from partial_templates.engine import ViewEngine
from partial_templates.models import EngineConfig, ViewContext
from partial_templates.naming import template_id


# =============================================================================
# CLI Application Setup
# =============================================================================

app = typer.Typer(
    name="partial-templates",
    help="Render partial views as client-side script templates.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)

# Console for rich output
console = Console()

# Errors that end a command with exit code 1
COMMAND_ERRORS = (OSError, TemplateError, ValidationError, ValueError)


# =============================================================================
# Shared Options
# =============================================================================

RootOption = Annotated[
    Path,
    typer.Option(
        "--root",
        "-r",
        help="Application root that logical paths are mapped against",
        exists=True,
        file_okay=False,
        dir_okay=True,
    ),
]

ControllerOption = Annotated[
    str,
    typer.Option(
        "--controller",
        "-c",
        help="Controller name used for view lookup and id prefixes",
    ),
]

DataOption = Annotated[
    list[str] | None,
    typer.Option(
        "--data",
        "-d",
        help="View bag entry as key=value (repeatable)",
    ),
]

OutputOption = Annotated[
    Path | None,
    typer.Option(
        "--output",
        "-o",
        help="Write the result to a file instead of stdout",
        dir_okay=False,
    ),
]

PatternOption = Annotated[
    str | None,
    typer.Option(
        "--pattern",
        help="Glob selecting template files (default: *Template.*)",
    ),
]


# =============================================================================
# Helpers
# =============================================================================

def version_callback(value: bool) -> None:
    """Display version information and exit."""
    if value:
        console.print(Panel(
            f"[bold green]partial-templates[/] version [cyan]{__version__}[/]\n\n"
            f"[dim]Client-side script templates from partial views[/]",
            border_style="green",
        ))
        raise typer.Exit()


def parse_view_data(entries: list[str] | None) -> dict[str, str]:
    """
    Parse ``key=value`` pairs into a view bag.

    Raises
    ------
    typer.BadParameter
        If an entry has no ``=`` or an empty key.
    """
    view_data: dict[str, str] = {}
    for entry in entries or []:
        key, sep, value = entry.partition("=")
        key = key.strip()
        if not sep or not key:
            msg = f"Expected key=value, got '{entry}'"
            raise typer.BadParameter(msg, param_hint="--data")
        view_data[key] = value
    return view_data


def load_engine(root: Path, pattern: str | None = None) -> ViewEngine:
    """Build a view engine for ``root`` from pyproject.toml and overrides."""
    config = EngineConfig.from_pyproject(root, pattern=pattern)
    return ViewEngine(config)


def emit(content: str, output: Path | None) -> None:
    """Write rendered content to ``output`` or stdout."""
    if output is None:
        typer.echo(content)
        return

    output.write_text(content, encoding="utf-8")
    console.print(f"[green]✓[/] Wrote {len(content)} characters to {escape(str(output))}")


def fail(error: Exception) -> typer.Exit:
    rprint(f"[red]Error:[/] {escape(str(error))}")
    return typer.Exit(1)


# =============================================================================
# Main Application Callback
# =============================================================================

@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Log cache and view lookup details.",
        ),
    ] = False,
) -> None:
    """
    [bold]partial-templates[/] - client-side templates from partial views.

    [bold]Quick Start:[/]

        partial-templates render ~/Views/Home --controller Home
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
            force=True,
        )


# =============================================================================
# Commands
# =============================================================================

@app.command("list")
def list_templates(
    directory: Annotated[
        str,
        typer.Argument(help="Logical directory, e.g. ~/Views/Home"),
    ],
    controller: ControllerOption = "Home",
    root: RootOption = Path("."),
    pattern: PatternOption = None,
) -> None:
    """
    Show the templates in a directory and the ids they render with.

    [bold]Example:[/]

        partial-templates list ~/Views/Home --controller Home
    """
    try:
        engine = load_engine(root, pattern)
        names = engine.lister.list_templates(directory)
    except COMMAND_ERRORS as e:
        raise fail(e) from e

    if not names:
        console.print(
            f"[yellow]No templates matching {escape(engine.config.pattern)} "
            f"in {escape(directory)}[/]"
        )
        return

    table = Table(title=f"Templates in {escape(directory)}", show_header=True)
    table.add_column("Template", style="cyan")
    table.add_column("Id", style="green")
    for name in names:
        table.add_row(name, template_id(controller, name))

    console.print(table)


@app.command()
def render(
    directory: Annotated[
        str,
        typer.Argument(help="Logical directory, e.g. ~/Views/Home"),
    ],
    controller: ControllerOption = "Home",
    root: RootOption = Path("."),
    data: DataOption = None,
    output: OutputOption = None,
    pattern: PatternOption = None,
) -> None:
    """
    Render every template in a directory as script tags.

    [bold]Examples:[/]

        partial-templates render ~/Views/Home
        partial-templates render ~/Views/Home -c Home -d name=Ada -o bundle.html
    """
    view_data = parse_view_data(data)
    try:
        engine = load_engine(root, pattern)
        context = ViewContext(controller=controller, view_data=view_data)
        content = engine.helper(context).render_all_templates(directory)
    except COMMAND_ERRORS as e:
        raise fail(e) from e

    emit(str(content), output)


@app.command()
def view(
    controller: Annotated[
        str,
        typer.Argument(help="Controller name, e.g. Home"),
    ],
    name: Annotated[
        str,
        typer.Argument(help="View name, e.g. Index"),
    ] = "Index",
    root: RootOption = Path("."),
    data: DataOption = None,
    output: OutputOption = None,
) -> None:
    """
    Render a full view, including any templates it pulls in via [cyan]html[/].

    [bold]Example:[/]

        partial-templates view Home Index --data name=Ada
    """
    view_data = parse_view_data(data)
    try:
        engine = load_engine(root)
        context = ViewContext(controller=controller, view_data=view_data)
        content = engine.render_partial(name, context)
    except COMMAND_ERRORS as e:
        raise fail(e) from e

    emit(content, output)


if __name__ == "__main__":
    app()
