"""Command line entry points.

- no sub-command: quick test, then hints for the other commands;
- `quick` / `full`: the demo drivers;
- `catalog`: the list of wrappers (no network);
- `call`: invoke a single wrapper and print its JSON result.
"""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import Any

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from adapters.json_exporter import dumps, export_summary_json
from adapters.jsonplaceholder import JsonPlaceholderClient
from cli import doctor
from cli.ui_components import build_catalog_table, build_summary_table, print_banner, print_section
from core.config import AppSettings, get_settings
from core.domain.models import DemoSummary
from core.errors import ApiRequestError
from core.logging_setup import configure_logging
from core.services.catalog import CatalogEntry, find_entry, resolve
from core.services.demo_runner import DemoHooks, run_full_demo, run_quick_test

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="Demo and smoke-test client for the JSONPlaceholder REST API.",
    add_completion=False,
)
app.add_typer(doctor.app, name="doctor")

_console = Console()

_FAILURES = (ApiRequestError, ValidationError)


def _build_api(settings: AppSettings) -> JsonPlaceholderClient:
    return JsonPlaceholderClient(settings)


def _hooks() -> DemoHooks:
    return DemoHooks(
        section=lambda title: print_section(_console, title),
        note=lambda message: _console.print(f"  {escape(message)}"),
        check=lambda label: _console.print(f"[green]✅ {label}[/green]"),
    )


def _abort(prefix: str, exc: Exception) -> typer.Exit:
    logger.error("%s: %s", prefix, exc)
    _console.print(f"[red]❌ {prefix}:[/red] {escape(str(exc))}")
    return typer.Exit(code=1)


async def _quick(settings: AppSettings) -> list[str]:
    async with _build_api(settings) as api:
        return await run_quick_test(api, _hooks())


async def _full(settings: AppSettings) -> DemoSummary:
    async with _build_api(settings) as api:
        return await run_full_demo(api, _hooks())


async def _call(settings: AppSettings, entry: CatalogEntry, args: list[Any]) -> Any:
    async with _build_api(settings) as api:
        return await resolve(api, entry)(*args)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging (every request)."),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only warnings and errors."),
) -> None:
    """Without a command, runs the quick test."""

    settings = get_settings()
    level = "DEBUG" if verbose else "WARNING" if quiet else settings.log_level
    configure_logging(level)

    if ctx.invoked_subcommand is None:
        quick()
        _console.print("\n💡 To run the full demo: [bold]placeholder-demo full[/bold]")
        _console.print("💡 To list every function: [bold]placeholder-demo catalog[/bold]")


@app.command()
def quick() -> None:
    """One representative call per capability (GET, POST, query, nested route)."""

    _console.print("⚡ Running Quick Test...\n")
    try:
        asyncio.run(_quick(get_settings()))
    except _FAILURES as exc:
        raise _abort("Quick test failed", exc) from exc
    _console.print("\n🎉 All tests passed! API is working correctly.")


@app.command()
def full(
    export_json: Path | None = typer.Option(
        None,
        "--export-json",
        help="Also write the summary as JSON to this path.",
    ),
) -> None:
    """Exercise every CRUD path in order and print a summary."""

    print_banner(_console, "Full demo")
    try:
        summary = asyncio.run(_full(get_settings()))
    except _FAILURES as exc:
        raise _abort("Demo failed", exc) from exc

    _console.print()
    _console.print(build_summary_table(summary))
    if export_json is not None:
        path = export_summary_json(summary=summary, output_path=export_json)
        _console.print(f"[green]Summary written to:[/green] {path}")
    _console.print("\n🎉 Demo completed successfully!")


@app.command()
def catalog() -> None:
    """List the available wrapper functions (no network calls)."""

    print_banner(_console, "Interactive help")
    _console.print(build_catalog_table())
    _console.print("\n💡 Try: [bold]placeholder-demo call get_post 1[/bold]")


@app.command()
def call(
    name: str = typer.Argument(..., help="Wrapper name, e.g. get_post or posts.get_post."),
    args: list[str] | None = typer.Argument(None, help="Positional ids for the wrapper."),
    data: str | None = typer.Option(None, "--data", "-d", help="JSON payload for create/update/patch."),
) -> None:
    """Invoke one wrapper and print its result as JSON."""

    entry = find_entry(name)
    if entry is None:
        raise typer.BadParameter(f"Unknown function {name!r}; see `placeholder-demo catalog`.")

    raw = list(args or [])
    most = len(entry.params) + len(entry.optional)
    if not len(entry.params) <= len(raw) <= most:
        raise typer.BadParameter(f"{entry.signature} takes {len(entry.params)} to {most} id argument(s), got {len(raw)}.")
    try:
        values: list[Any] = [int(value) for value in raw]
    except ValueError as exc:
        raise typer.BadParameter(f"Ids must be integers: {' '.join(raw)}") from exc

    if entry.takes_data:
        if data is None:
            raise typer.BadParameter(f"{entry.signature} needs --data '<json object>'.")
        try:
            payload = json.loads(data)
        except json.JSONDecodeError as exc:
            raise typer.BadParameter(f"--data is not valid JSON: {exc}") from exc
        if not isinstance(payload, dict):
            raise typer.BadParameter("--data must be a JSON object.")
        values.append(payload)
    elif data is not None:
        raise typer.BadParameter(f"{entry.signature} does not take --data.")

    try:
        result = asyncio.run(_call(get_settings(), entry, values))
    except _FAILURES as exc:
        raise _abort(f"{entry.name} failed", exc) from exc
    _console.print_json(dumps(result))


def run() -> None:
    app()
