"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_async_client, make_request
from core.config import AppSettings, get_settings, write_user_env_vars
from core.errors import ApiRequestError

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_api(settings: AppSettings) -> tuple[bool, str]:
    url = f"{settings.base_url}/posts/1"
    try:
        async with build_async_client(settings) as client:
            await make_request(client, url)
        return True, f"GET {url}"
    except ApiRequestError as exc:
        return False, str(exc)


@app.command()
def run() -> None:
    """Show the active configuration and check that the API answers."""

    settings = get_settings()

    table = Table(title="placeholder-demo Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("Base URL", "OK", settings.base_url)
    table.add_row("Timeout", "OK", f"{settings.http_timeout_seconds:g}s")
    table.add_row("User-Agent", "OK", settings.user_agent)
    table.add_row("Log level", "OK", settings.log_level)

    ok_api, detail_api = asyncio.run(_check_api(settings))
    table.add_row("API connectivity", "OK" if ok_api else "FAIL", detail_api)

    _console.print(table)
    if not ok_api:
        raise typer.Exit(code=1)


@app.command(name="set-base-url")
def set_base_url(
    url: str = typer.Argument(..., help="Base URL of a JSONPlaceholder-compatible service."),
) -> None:
    """Persist the API base URL in the per-user .env file."""

    url = url.strip()
    if not url.startswith(("http://", "https://")):
        raise typer.BadParameter("URL must start with http:// or https://")

    env_path = write_user_env_vars({"PLACEHOLDER_DEMO_API_BASE_URL": url.rstrip("/")})
    _console.print(f"[green]Saved base URL to:[/green] {env_path}")
