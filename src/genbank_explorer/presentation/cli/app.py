"""Thin CLI wrapper — Typer commands that delegate to Use Cases.

All parsing and querying is accessed through the Container (bootstrap.py).
No direct imports from infrastructure/ here.
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.markup import escape

from genbank_explorer.presentation.cli.formatters import (
    console,
    entries_table,
    error_message,
    failures_panel,
    json_panel,
    no_results_message,
    result_title,
    results_table,
    success_panel,
)

app = typer.Typer(
    name="genbank-explorer",
    help="🧬 Explore the authors and publications of GenBank flat files (.gbff)",
    rich_markup_mode="rich",
    no_args_is_help=True,
)

# Sub-app for config commands
config_app = typer.Typer(
    name="config",
    help="⚙️  Manage the explorer configuration",
    rich_markup_mode="rich",
    no_args_is_help=True,
)
app.add_typer(config_app, name="config")

DirectoryArg = Annotated[str, typer.Argument(help="Directory with the GenBank files to explore")]
OutputOpt = Annotated[
    Optional[str],
    typer.Option("--output", "-o", help="Write results to this file instead of the console"),
]
JsonOpt = Annotated[bool, typer.Option("--json", help="Emit the result as JSON")]
ConfigOpt = Annotated[
    Optional[str],
    typer.Option("--config", "-c", help="Path to a JSON configuration file"),
]


@app.callback()
def main(
    ctx: typer.Context,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Show debug logging")
    ] = False,
    config: ConfigOpt = None,
) -> None:
    """Explore GenBank flat files."""
    ctx.obj = {"config": config}
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# ---------------------------------------------------------------------------
# Shared plumbing
# ---------------------------------------------------------------------------


def _config_path(ctx: typer.Context, config: Optional[str]) -> Optional[str]:
    """A command's own --config wins over the global one."""
    if config:
        return config
    return (ctx.obj or {}).get("config")


def _load(directory: str, config: Optional[str]):
    """Build the container and load *directory*, exiting on fatal errors."""
    from genbank_explorer.bootstrap import Container
    from genbank_explorer.domain.errors import GenbankExplorerError

    try:
        container = Container(config_path=config)
        result = container.load_entries().execute(Path(directory))
    except GenbankExplorerError as e:
        error_message(str(e))
        raise typer.Exit(code=1)

    if result.failures:
        failures_panel(result.failures)
    return container, result


def _run_query(
    kind: str,
    directory: str,
    subject: Optional[str],
    output: Optional[str],
    as_json: bool,
    config: Optional[str],
) -> None:
    from genbank_explorer.domain.models.enums import QueryKind

    container, loaded = _load(directory, config)
    answer = container.query_references(loaded.entries).execute(QueryKind(kind), subject)

    if answer.is_empty and answer.kind in (QueryKind.BY_AUTHOR, QueryKind.BY_PUBLICATION):
        no_results_message(answer)
        return

    if output:
        lines = [answer.model_dump_json(indent=2)] if as_json else answer.items
        container.result_sink(Path(output)).write_lines(lines)
        success_panel(
            f"✅ {result_title(answer)}: [bold]{len(answer.items)}[/] result(s)\n"
            f"Writing to file [bold green]{output}[/]"
        )
    elif as_json:
        console.print_json(answer.model_dump_json())
    else:
        results_table(answer)


# ---------------------------------------------------------------------------
# genbank-explorer authors / publications / by-author / by-publication
# ---------------------------------------------------------------------------


@app.command()
def authors(
    ctx: typer.Context,
    directory: DirectoryArg,
    output: OutputOpt = None,
    as_json: JsonOpt = False,
    config: ConfigOpt = None,
) -> None:
    """Display all authors in the listed files."""
    _run_query("authors", directory, None, output, as_json, _config_path(ctx, config))


@app.command()
def publications(
    ctx: typer.Context,
    directory: DirectoryArg,
    output: OutputOpt = None,
    as_json: JsonOpt = False,
    config: ConfigOpt = None,
) -> None:
    """Display all publications in the listed files."""
    _run_query("publications", directory, None, output, as_json, _config_path(ctx, config))


@app.command("by-author")
def by_author(
    ctx: typer.Context,
    directory: DirectoryArg,
    author: Annotated[str, typer.Argument(help='Exact author name, e.g. "Reilly,L.P."')],
    output: OutputOpt = None,
    as_json: JsonOpt = False,
    config: ConfigOpt = None,
) -> None:
    """Display all publications by an author (exact match)."""
    _run_query("by_author", directory, author, output, as_json, _config_path(ctx, config))


@app.command("by-publication")
def by_publication(
    ctx: typer.Context,
    directory: DirectoryArg,
    publication: Annotated[str, typer.Argument(help="Publication title or part of it")],
    output: OutputOpt = None,
    as_json: JsonOpt = False,
    config: ConfigOpt = None,
) -> None:
    """Display the authors of a publication. Works with partial titles."""
    _run_query(
        "by_publication", directory, publication, output, as_json, _config_path(ctx, config)
    )


# ---------------------------------------------------------------------------
# genbank-explorer entries
# ---------------------------------------------------------------------------


@app.command()
def entries(
    ctx: typer.Context,
    directory: DirectoryArg,
    as_json: JsonOpt = False,
    config: ConfigOpt = None,
) -> None:
    """List the parsed entries (locus, accession, definition, references)."""
    _, loaded = _load(directory, _config_path(ctx, config))

    if as_json:
        payload = "[" + ",".join(entry.model_dump_json() for entry in loaded.entries) + "]"
        console.print_json(payload)
    else:
        entries_table(loaded.entries)
        console.print(
            f"[dim]{len(loaded.entries)} entries from {len(loaded.files_parsed)} file(s)[/]"
        )


# ---------------------------------------------------------------------------
# genbank-explorer config show / init / validate
# ---------------------------------------------------------------------------


@config_app.command("show")
def config_show(ctx: typer.Context, config: ConfigOpt = None) -> None:
    """Show the active configuration."""
    config = _config_path(ctx, config)
    from genbank_explorer.config import get_config, load_config
    from genbank_explorer.domain.errors import ConfigurationError

    try:
        cfg = load_config(Path(config)) if config else get_config()
    except ConfigurationError as e:
        error_message(str(e))
        raise typer.Exit(code=1)

    json_panel(cfg.model_dump_json(indent=2))


@config_app.command("init")
def config_init(
    output: Annotated[
        str, typer.Option("--output", "-o", help="Destination file name")
    ] = "genbank_explorer.json",
) -> None:
    """Copy the default configuration to the current directory for editing."""
    from genbank_explorer.config.loader import _DEFAULT_CONFIG_PATH

    dest = Path(output)
    if dest.exists():
        console.print(f"[bold yellow]⚠️  File already exists:[/] {dest}")
        overwrite = typer.confirm("Overwrite it?")
        if not overwrite:
            raise typer.Abort()

    shutil.copy2(_DEFAULT_CONFIG_PATH, dest)
    success_panel(
        f"✅ Configuration copied to: [bold green]{dest}[/]\n\n"
        "Edit this file and use it with [bold]--config[/]:\n"
        f'  genbank-explorer authors data/ --config "{dest}"',
        title="⚙️  Config Init",
    )


@config_app.command("validate")
def config_validate(
    config_file: Annotated[str, typer.Argument(help="JSON configuration file to validate")],
) -> None:
    """Validate a JSON configuration file."""
    from genbank_explorer.config import load_config
    from genbank_explorer.domain.errors import ConfigurationError

    path = Path(config_file)
    try:
        cfg = load_config(path)
    except ConfigurationError as e:
        console.print(f"[bold red]❌ Validation error:[/]\n\n{escape(str(e))}")
        raise typer.Exit(code=1)

    success_panel(
        f"✅ Valid configuration\n\n"
        f"  Suffixes: [cyan]{', '.join(cfg.file_suffixes)}[/]\n"
        f"  Encoding: [cyan]{cfg.encoding}[/]\n"
        f"  Terminal entry: [cyan]{cfg.terminal_entry.value}[/]",
        title="✅ Validation",
    )


if __name__ == "__main__":
    app()
