"""Rich formatting utilities for the CLI.

Holds all Rich rendering (tables, panels, syntax) in a dedicated module
that knows nothing about parsing or querying.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

if TYPE_CHECKING:
    from genbank_explorer.application.use_cases.query_references import QueryResult
    from genbank_explorer.domain.models.entry import Entry

console = Console()

_RESULT_TITLES = {
    "authors": "Authors found",
    "publications": "Publications found",
    "by_author": "Publications by {subject}",
    "by_publication": "Authors of {subject}",
}


# ---------------------------------------------------------------------------
# Success / error panels
# ---------------------------------------------------------------------------


def success_panel(message: str, title: str = "GenBank Explorer") -> None:
    """Print a green success panel."""
    console.print(Panel(message, title=title, border_style="green"))


def error_message(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]❌ {escape(message)}[/]")


def failures_panel(failures: dict[Path, str]) -> None:
    """Print the files that could not be parsed."""
    lines = "\n".join(
        f"[cyan]{escape(str(path))}[/]: {escape(reason)}" for path, reason in failures.items()
    )
    console.print(
        Panel(lines, title=f"⚠️  {len(failures)} file(s) not parsed", border_style="yellow")
    )


# ---------------------------------------------------------------------------
# JSON rendering
# ---------------------------------------------------------------------------


def json_panel(raw_json: str, title: str = "⚙️  Active configuration") -> None:
    """Render JSON inside a syntax-highlighted panel."""
    console.print(
        Panel(
            Syntax(raw_json, "json", theme="monokai", line_numbers=True),
            title=title,
            border_style="blue",
        )
    )


# ---------------------------------------------------------------------------
# Query results
# ---------------------------------------------------------------------------


def result_title(result: QueryResult) -> str:
    """Heading for a query result, e.g. ``Publications by Reilly,L.P.``."""
    return _RESULT_TITLES[result.kind.value].format(subject=escape(result.subject or ""))


def results_table(result: QueryResult) -> None:
    """Print query results as a one-column table."""
    table = Table(title=f"{result_title(result)}:", show_header=False, border_style="blue")
    table.add_column("Result", style="cyan")
    for item in result.items:
        table.add_row(escape(item))
    console.print(table)
    console.print(f"[dim]{len(result.items)} result(s)[/]")


def no_results_message(result: QueryResult) -> None:
    """Explain an empty answer to a "by author" / "by publication" query."""
    if result.kind.value == "by_author":
        console.print(f"[bold yellow]No publications found for {escape(result.subject)}[/]")
        console.print(
            'Please type an exact match for the author\'s name. '
            'For example, "Reilly,L.P." instead of "Reilly".'
        )
    elif result.kind.value == "by_publication":
        console.print(f"[bold yellow]No authors found for {escape(result.subject)}[/]")
    else:
        console.print("[bold yellow]No results found[/]")


# ---------------------------------------------------------------------------
# Entries
# ---------------------------------------------------------------------------


def entries_table(entries: list[Entry]) -> None:
    """Print one row per parsed entry."""
    table = Table(title="🧬 GenBank entries", show_header=True, border_style="blue")
    table.add_column("Locus", style="cyan")
    table.add_column("Accession")
    table.add_column("Definition", style="green")
    table.add_column("Refs", justify="right")

    for entry in entries:
        table.add_row(
            escape(entry.locus),
            escape(entry.accession),
            escape(entry.definition),
            str(len(entry.references)),
        )

    console.print(table)
