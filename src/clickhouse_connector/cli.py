"""Command line entry point for running source queries against ClickHouse."""
import asyncio
import pathlib
from typing import Annotated, Optional

import typer
from pydantic import SecretStr
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from report_connector_sdk import QueryResult, discover_connectors
from report_connector_sdk.errors import get_safe_message
from report_connector_sdk.logger import configure_logging

from .config import ClickHouseOptions, ClickHouseSettings
from .connection import probe_connection
from .runner import ClickHouseRunner, get_runner

app = typer.Typer(
    name="clickhouse-connector",
    help="Run report source queries against ClickHouse.",
    no_args_is_help=True,
    add_completion=False,
)

console = Console()
err_console = Console(stderr=True)

UrlOption = Annotated[Optional[str], typer.Option("--url", help="ClickHouse instance URL (default: $CLICKHOUSE_URL)")]
UsernameOption = Annotated[Optional[str], typer.Option("--username", "-u", help="Username (default: $CLICKHOUSE_USERNAME)")]
PasswordOption = Annotated[Optional[str], typer.Option("--password", "-p", help="Password (default: $CLICKHOUSE_PASSWORD)")]


def _resolve_options(url: Optional[str], username: Optional[str], password: Optional[str]) -> ClickHouseOptions:
    defaults = ClickHouseOptions.from_settings()
    return ClickHouseOptions(
        url=url or defaults.url,
        username=username or defaults.username,
        password=SecretStr(password) if password else defaults.password,
    )


async def _run_source(runner: ClickHouseRunner, source: pathlib.Path) -> QueryResult:
    try:
        return await runner(source.read_text(encoding="utf-8"), str(source))
    finally:
        await runner.close()


@app.callback()
def global_callback():
    """
    ClickHouse connector CLI.
    """
    settings = ClickHouseSettings()
    configure_logging(level=settings.log_level, json_format=settings.log_json)


@app.command()
def query(
    source: Annotated[pathlib.Path, typer.Argument(help="Path to a .sql source file", exists=True, dir_okay=False)],
    url: UrlOption = None,
    username: UsernameOption = None,
    password: PasswordOption = None,
):
    """
    Execute the query in SOURCE and print the result envelope as JSON.
    """
    runner = get_runner(_resolve_options(url, username, password))
    try:
        result = asyncio.run(_run_source(runner, source))
    except Exception as e:
        err_console.print(f"[bold red]✘ Query failed:[/bold red] {escape(str(e))}")
        raise typer.Exit(code=1)
    console.print_json(data=result.to_host())


@app.command()
def probe(
    url: UrlOption = None,
    username: UsernameOption = None,
    password: PasswordOption = None,
    timeout: Annotated[Optional[float], typer.Option(help="Seconds to wait for the server")] = None,
):
    """
    Check that the configured server answers a health-check query.
    """
    options = _resolve_options(url, username, password)
    status = asyncio.run(probe_connection(options, timeout=timeout))
    if status:
        console.print(f"[bold green]✔ {options.display_host} reachable[/bold green] (version {status.server_version})")
        return
    err_console.print(f"[bold red]✘ {options.display_host} unreachable:[/bold red] {get_safe_message(status.error_code)}")
    err_console.print(f"  {escape(status.reason)}")
    raise typer.Exit(code=1)


@app.command()
def connectors():
    """
    List the connector plugins installed in this environment.
    """
    found = discover_connectors()
    if not found:
        console.print("[yellow]No connectors found.[/yellow]")
        return

    table = Table(title="Installed Connectors")
    table.add_column("Connector", style="cyan", no_wrap=True)
    table.add_column("Module", style="magenta")
    table.add_column("Options", style="green")

    for name, connector in found.items():
        option_names = ", ".join(getattr(connector, "options", {}) or {})
        table.add_row(name, getattr(connector, "__name__", repr(connector)), option_names)

    console.print(table)


def main():
    app()
