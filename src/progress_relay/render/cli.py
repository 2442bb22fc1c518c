"""Terminal progress bar renderer using rich."""

from dataclasses import dataclass
from string import Formatter

from rich import filesize
from rich.console import Console
from rich.progress import BarColumn
from rich.progress import Progress
from rich.progress import ProgressColumn
from rich.progress import SpinnerColumn
from rich.progress import Task
from rich.progress import TaskID
from rich.progress import TextColumn
from rich.progress import TimeElapsedColumn
from rich.text import Text

from progress_relay.render.style import Style
from progress_relay.utils.errors import RendererError
from progress_relay.utils.log import console as shared_console

DEFAULT_BAR_TEMPLATE = "{spinner} {msg} {elapsed} {bar} {counter} {eta}"


class CounterColumn(ProgressColumn):
    """Renders the ``Style`` counter template for a task."""

    def __init__(self, style: Style):
        super().__init__()
        self.style = style

    def render(self, task: Task) -> Text:
        completed = int(task.completed)
        total = int(task.total or 0)
        counter = self.style.template_str().format(
            pos=completed,
            len=total,
            bytes=filesize.decimal(completed),
            total_bytes=filesize.decimal(total),
        )
        return Text(counter, style="progress.download")


class EtaColumn(ProgressColumn):
    """Remaining time in seconds with one decimal."""

    def render(self, task: Task) -> Text:
        remaining = task.time_remaining
        if remaining is None:
            return Text("(?s)", style="progress.remaining")
        return Text(f"({remaining:.1f}s)", style="progress.remaining")


def build_columns(template: str, style: Style) -> list[ProgressColumn]:
    """Translate a bar template into rich progress columns.

    Known placeholders: spinner, msg, elapsed, bar, counter, eta. Text
    between placeholders is shown as-is.

    Raises:
        RendererError: On unknown placeholders or malformed templates
    """
    factories = {
        "spinner": lambda: SpinnerColumn(style="green"),
        "msg": lambda: TextColumn("{task.description}"),
        "elapsed": TimeElapsedColumn,
        "bar": lambda: BarColumn(bar_width=None, style="blue", complete_style="cyan"),
        "counter": lambda: CounterColumn(style),
        "eta": EtaColumn,
    }

    columns: list[ProgressColumn] = []
    try:
        parsed = list(Formatter().parse(template))
    except ValueError as e:
        raise RendererError(f"Invalid bar template '{template}': {e}") from e

    for literal, field, _spec, _conversion in parsed:
        literal = literal.strip()
        if literal:
            escaped = literal.replace("{", "{{").replace("}", "}}")
            columns.append(TextColumn(escaped, markup=False))
        if field is None:
            continue
        if field not in factories:
            raise RendererError(
                f"Unknown placeholder '{{{field}}}' in bar template. Expected one of: {', '.join(factories)}"
            )
        columns.append(factories[field]())

    if not columns:
        raise RendererError("Bar template is empty")
    return columns


@dataclass
class RichBar:
    """Handle for a running rich progress bar."""
    progress: Progress
    task_id: TaskID
    total: int


class CliProgress:
    """Console progress bar using rich.

    Rich progress columns share one line, so the label sits inline before
    the bar instead of on its own line above it, and the bar is drawn with
    rich's line characters rather than ``#>-``.

    Args:
        console: Console to draw on (defaults to the shared stderr console)
        bar_template: Column layout, see ``build_columns``
        refresh_per_second: Live display refresh rate
        transient: Remove the bar from the terminal once stopped
    """

    def __init__(
        self,
        console: Console | None = None,
        bar_template: str = DEFAULT_BAR_TEMPLATE,
        refresh_per_second: float = 10.0,
        transient: bool = False,
    ):
        self.console = console or shared_console
        self.bar_template = bar_template
        self.refresh_per_second = refresh_per_second
        self.transient = transient

    def start(self, total: int, label: str, style: Style) -> RichBar:
        """Create and start a progress bar."""
        if total < 0:
            raise RendererError(f"Progress total must not be negative, got {total}")

        columns = build_columns(self.bar_template, style)
        progress = Progress(
            *columns,
            console=self.console,
            refresh_per_second=self.refresh_per_second,
            transient=self.transient,
        )
        task_id = progress.add_task(label, total=total)
        progress.start()
        return RichBar(progress=progress, task_id=task_id, total=total)

    def update(self, handle: RichBar, position: int) -> None:
        """Update progress to current position."""
        handle.progress.update(handle.task_id, completed=min(position, handle.total))

    def stop(self, handle: RichBar, message: str) -> None:
        """Finish the bar, leaving ``message`` as its description."""
        handle.progress.update(handle.task_id, description=message, completed=handle.total)
        handle.progress.stop()
