# ABOUTME: Main CLI application entry point using asyncclick for native async support
# ABOUTME: Provides commands to build the invasion dataset, inspect it, and show logging status

from pathlib import Path

import asyncclick as click
import httpx
from rich.console import Console
from rich.panel import Panel

from rocket_lineups.config import get_config
from rocket_lineups.core.pipeline import RocketInvasionPipeline
from rocket_lineups.extraction.base import ExtractionError
from rocket_lineups.extraction.wiki.crawl4ai import Crawl4AIPageProvider
from rocket_lineups.persistence import JsonDatasetSink, dump_records
from rocket_lineups.species import PokedexLookup, SpeciesNotFoundError
from rocket_lineups.utils.logging import (
    LoggingMode,
    configure_logging,
    create_page_progress,
    get_logging_status,
    with_pipeline_context,
)
from rocket_lineups.utils.rich_tables import (
    create_invasion_table,
    create_logging_status_table,
    create_run_summary_table,
    print_rich_table,
)

console = Console()


@click.command()
@click.option("--output-dir", type=click.Path(file_okay=False, path_type=Path), help="Directory for the JSON files")
@click.option("--species-data", help="Path or URL of the species JSON used for name lookup")
@click.option("--host-url", help="Base URL of the guide site")
@click.option("--headed", is_flag=True, help="Show the browser window while rendering pages")
@click.pass_context
async def build(ctx, output_dir: Path | None, species_data: str | None, host_url: str | None, headed: bool):
    """
    🚀 Extract every Rocket invasion lineup and write the dataset.

    Renders the grunt battle guide and each leader/boss counters page, then
    writes rocketInvasions.json and rocketInvasions.min.json.
    """
    await _build_async(output_dir, species_data, host_url, headed, ctx.obj["json_output"])


async def _build_async(
    output_dir: Path | None, species_data: str | None, host_url: str | None, headed: bool, json_output: bool
):
    config = get_config()
    species_source = species_data or config.species_data
    if not species_source:
        raise click.UsageError("Species data required - set ROCKET_LINEUPS_SPECIES_DATA or pass --species-data")

    with with_pipeline_context("build", host_url=host_url or config.host_url) as logger:
        if not json_output:
            console.print(Panel.fit("🚀 [bold cyan]Rocket Lineups[/bold cyan] 🚀", border_style="magenta"))

        try:
            species = await PokedexLookup.from_source(species_source)
        except (httpx.HTTPError, OSError, ValueError, KeyError, TypeError) as e:
            logger.error(
                "Species data unavailable, no dataset written",
                source=species_source,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise click.ClickException(f"Could not load species data from {species_source}: {e}") from e

        try:
            provider = Crawl4AIPageProvider(headless=False if headed else None)
            pipeline = RocketInvasionPipeline(provider, species, host_url=host_url)

            if json_output:
                invasions = await pipeline.run()
            else:
                progress, tracker = create_page_progress(console)
                with progress:
                    invasions = await pipeline.run(progress_callback=tracker)

        except (ExtractionError, SpeciesNotFoundError) as e:
            logger.error("Build failed, no dataset written", error=str(e), error_type=type(e).__name__)
            raise click.ClickException(str(e)) from e

        written = JsonDatasetSink(output_dir or config.output_dir).write(invasions)
        logger.info("Build complete", invasion_count=len(invasions))

        if not json_output:
            print_rich_table(console, create_invasion_table(invasions))
            print_rich_table(console, create_run_summary_table(invasions, written))


@click.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.pass_context
def show(ctx, path: Path):
    """
    🔎 Display a previously written invasion dataset.
    """
    invasions = JsonDatasetSink.load(path)

    if ctx.obj["json_output"]:
        click.echo(dump_records(invasions, indent=2))
        return

    print_rich_table(console, create_invasion_table(invasions, title=f"🚀 {path.name}"))


def _initialize_logging(json_output: bool, log_level: str | None = None, log_file: str | None = None) -> None:
    """Initialize logging configuration."""
    config = get_config()
    mode = LoggingMode.PRODUCTION if json_output else config.log_mode

    final_log_level = log_level or config.log_level
    final_log_file = log_file or (str(config.log_file) if config.log_file else None)

    configure_logging(mode=mode, log_level=final_log_level, log_file=final_log_file)


@click.command(name="logging-status")
def logging_status():
    """
    📊 Show current logging configuration and status.
    """
    status = get_logging_status()
    print_rich_table(console, create_logging_status_table(status))


@click.group(invoke_without_command=True)
@click.option("--json", is_flag=True, help="Output structured JSON logs instead of rich interface")
@click.option("--log-level", default=None, help="Logging level (DEBUG, INFO, WARNING, ERROR)")
@click.option("--log-file", help="Custom log file path")
@click.pass_context
def app(ctx, json: bool, log_level: str | None, log_file: str | None):
    """
    🚀 Rocket Lineups - Team GO Rocket invasion data builder

    Scrapes grunt, leader and boss lineups from the guide site and emits a
    normalized JSON dataset.
    """
    ctx.ensure_object(dict)
    ctx.obj["json_output"] = json

    _initialize_logging(json, log_level, log_file)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


app.add_command(build)
app.add_command(show)
app.add_command(logging_status)


if __name__ == "__main__":
    app()
