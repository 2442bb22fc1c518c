"""Command line interface for progress-relay."""

import time
from concurrent.futures import ThreadPoolExecutor, as_completed

import click
from rich.table import Table

from progress_relay import __version__
from progress_relay.config import RelayConfig
from progress_relay.core.progress import Progress, send_and_print
from progress_relay.render import CliProgress, NullRenderer, RendererBinding, Style
from progress_relay.utils.log import configure_logging, console


def _run_step(progress: Progress, step: int, delay: float) -> int:
    """Worker function for the demo: pretend to work, then report."""
    if delay:
        time.sleep(delay)
    progress.complete_unit()
    return step


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Log level (default: PROGRESS_RELAY_LOG_LEVEL or WARNING)",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """progress-relay - Decoupled progress reporting for long-running operations."""
    try:
        config = RelayConfig.from_env()
        if log_level:
            config.log_level = log_level.upper()
        configure_logging(config.log_level)
    except ValueError as e:
        raise click.UsageError(str(e))

    ctx.obj = config


@cli.command()
@click.option("--steps", type=click.IntRange(1), default=10, help="Number of work units to simulate")
@click.option("--workers", type=click.IntRange(1), default=4, help="Number of worker threads sharing one progress")
@click.option("--delay", type=click.FloatRange(0), default=0.2, help="Seconds each unit takes")
@click.option("--total", type=click.IntRange(0), default=100, help="Amount of work shown by the renderer")
@click.option(
    "--style",
    type=click.Choice([style.value for style in Style], case_sensitive=False),
    default=None,
    help="Counter style (default: PROGRESS_RELAY_STYLE or len)",
)
@click.option("--quiet", is_flag=True, default=False, help="Do not draw a progress bar")
@click.pass_obj
def demo(
    config: RelayConfig,
    steps: int,
    workers: int,
    delay: float,
    total: int,
    style: str | None,
    quiet: bool,
) -> None:
    """Simulate a multi-threaded operation reporting through one progress bar."""
    selected_style = Style.parse(style) if style else config.style

    if quiet:
        renderer = NullRenderer()
    else:
        renderer = CliProgress(
            console=console,
            bar_template=config.bar_template,
            refresh_per_second=config.refresh_per_second,
            transient=config.transient,
        )

    try:
        with RendererBinding(renderer, total=total, label="Working...", style=selected_style) as binding:
            progress = binding.progress(length=100 / steps)
            send_and_print(f"Running {steps} step(s) on {workers} worker(s)", progress)

            with ThreadPoolExecutor(max_workers=workers) as executor:
                futures = [
                    executor.submit(_run_step, progress.clone(), step, delay)
                    for step in range(1, steps + 1)
                ]
                for future in as_completed(futures):
                    step = future.result()
                    send_and_print(f"Step {step} done", progress)

            binding.finish(f"Completed {steps} step(s)")

        console.print(f"[green]✓[/green] Finished at {progress.position:.0f}%")

    except Exception as e:
        console.print(f"[red]✗[/red] Error: {e}")
        raise click.Abort()


@cli.command()
def styles() -> None:
    """List available progress styles and their counter templates."""
    table = Table(title="Progress Styles")
    table.add_column("Style", style="cyan")
    table.add_column("Template", style="green")
    table.add_column("Default", style="yellow")

    for style in Style:
        table.add_row(style.value, style.template_str(), "yes" if style is Style.default() else "")

    console.print(table)


if __name__ == "__main__":
    cli()
