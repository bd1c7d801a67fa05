"""Rich UI components for the CLI.

Keeps command logic apart from presentation so tables and panels can be
reused across commands.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.rule import Rule
from rich.table import Table
from rich.text import Text

from core.domain.models import DemoSummary
from core.services.catalog import CATALOG, DEMO_COMMANDS, grouped


def print_banner(console: Console, subtitle: str = "JSONPlaceholder API demo") -> None:
    title = Text("placeholder-demo", style="bold cyan")
    body = Align.center(Text.assemble(title, "\n", Text(subtitle, style="dim")), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def print_section(console: Console, title: str) -> None:
    console.print()
    console.print(Rule(Text(title, style="bold"), align="left", style="cyan"))


def build_summary_table(summary: DemoSummary) -> Table:
    """Counts gathered by the full demo."""

    table = Table(title="Demo Summary")
    table.add_column("Resource", style="cyan", no_wrap=True)
    table.add_column("Count", style="white", justify="right")
    table.add_column("Scope", style="dim")
    table.add_row("Posts", str(summary.user_posts), "by user 1")
    table.add_row("Comments", str(summary.comments), "on post 1")
    table.add_row("Users", str(summary.users), "total")
    table.add_row("Albums", str(summary.albums), "total")
    table.add_row("Photos", str(summary.photos), "in album 1")
    table.add_row(
        "Todos",
        str(summary.todos),
        f"total ({summary.completed_todos} completed, {summary.completion_rate:.1f}%)",
    )
    return table


def build_catalog_table() -> Table:
    """Every wrapper, grouped by resource."""

    table = Table(title="Available functions")
    table.add_column("Group", style="bright_green", no_wrap=True)
    table.add_column("Function", style="cyan", no_wrap=True)
    table.add_column("Description", style="dim")
    for group, entries in grouped(CATALOG).items():
        for index, entry in enumerate(entries):
            table.add_row(group if index == 0 else "", escape(entry.signature), entry.description)
        table.add_section()
    for index, (command, description) in enumerate(DEMO_COMMANDS):
        table.add_row("Demo commands" if index == 0 else "", command, description)
    return table
