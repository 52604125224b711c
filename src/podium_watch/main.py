# ABOUTME: Main CLI application entry point using asyncclick for native async support
# ABOUTME: Provides commands for showing the medal table, tracked countries, and logging status

import json

import asyncclick as click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from podium_watch.config import get_config
from podium_watch.core.models import MedalRecord
from podium_watch.core.registry import default_registry
from podium_watch.core.service import MedalTableService
from podium_watch.extraction.base import MedalTableExtraction
from podium_watch.utils.logging import (
    LoggingMode,
    ProgressReporter,
    configure_logging,
    get_logging_status,
    with_pipeline_context,
)
from podium_watch.utils.rich_tables import (
    create_countries_table,
    create_logging_status_table,
    create_medal_table,
    print_rich_table,
)

console = Console()


async def _load_with_status(service: MedalTableService, json_output: bool) -> MedalTableExtraction:
    """Load the medal table behind a spinner unless JSON output was requested."""
    if json_output:
        return await service.load()

    reporter = ProgressReporter(console=console)
    return await reporter.run_with_status(operation=service.load, message="🏅 Loading medal table...")


def _display_medals(records: list[MedalRecord]) -> None:
    print_rich_table(console, create_medal_table(records))


def _display_load_failure(error: Exception) -> None:
    """Show the failure notification and fall back to an empty display."""
    console.print(
        Panel(f"[red]{escape(str(error))}[/red]", title="❌ Error loading data", border_style="red")
    )
    _display_medals([])


@click.command()
@click.pass_context
async def medals(ctx):
    """
    🏅 Show the 2024 Summer Olympics medal table for tracked countries.
    """
    await _medals_async(ctx, ctx.obj["json_output"])


async def _medals_async(ctx, json_output: bool):
    with with_pipeline_context("medal_table") as logger:
        logger.info("Starting medal table load")

        service = MedalTableService()
        try:
            result = await _load_with_status(service, json_output)
        except Exception as e:
            logger.error("Medal table load failed", error=str(e), error_type=type(e).__name__)
            if json_output:
                click.echo(json.dumps([]))
            else:
                _display_load_failure(e)
            ctx.exit(1)
        finally:
            await service.close()

        if json_output:
            click.echo(json.dumps([record.model_dump(mode="json") for record in result.records], ensure_ascii=False))
            return

        if not result.extraction_success:
            message = escape(result.error_message or "unknown error")
            console.print(f"[yellow]⚠️ Could not fetch the medal table: {message}[/yellow]")
        elif result.is_empty:
            console.print("[yellow]No tracked countries found in the medal table.[/yellow]")

        _display_medals(result.records)


@click.command()
def countries():
    """
    🌍 List the countries tracked in the medal table.
    """
    print_rich_table(console, create_countries_table(default_registry()))


@click.command(name="logging-status")
def logging_status():
    """
    📊 Show current logging configuration and status.
    """
    status = get_logging_status()
    logging_table = create_logging_status_table(status)
    print_rich_table(console, logging_table)


def _initialize_logging(json_output: bool, log_level: str | None = None, log_file: str | None = None) -> None:
    """Initialize logging configuration."""
    config = get_config()
    mode = LoggingMode.PRODUCTION if json_output else config.log_mode

    # Use config defaults when CLI parameters are not provided
    final_log_level = log_level or config.log_level
    final_log_file = log_file or (str(config.log_file) if config.log_file else None)

    configure_logging(mode=mode, log_level=final_log_level, log_file=final_log_file)


@click.group(invoke_without_command=True)
@click.option("--json", is_flag=True, help="Output structured JSON instead of rich tables")
@click.option("--log-level", default=None, help="Logging level (DEBUG, INFO, WARNING, ERROR)")
@click.option("--log-file", help="Custom log file path")
@click.pass_context
def app(ctx, json: bool, log_level: str | None, log_file: str | None):
    """
    🏟️ Podium Watch - 2024 Summer Olympics medal table in your terminal

    Fetches the Wikipedia medal table and shows the standings of a fixed
    set of tracked countries.
    """
    # Store global options in context for commands to access
    ctx.ensure_object(dict)
    ctx.obj["json_output"] = json

    # Initialize logging once here instead of in each command
    _initialize_logging(json, log_level, log_file)

    # Show help if no command provided
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


app.add_command(medals)
app.add_command(countries)
app.add_command(logging_status)


if __name__ == "__main__":
    app()
