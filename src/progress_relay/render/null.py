"""Renderer that draws nothing (quiet mode and testing)."""

from dataclasses import dataclass
from dataclasses import field

from progress_relay.render.style import Style


@dataclass
class NullHandle:
    """Records what a renderer was asked to show."""
    total: int
    label: str
    style: Style
    positions: list[int] = field(default_factory=list)
    message: str | None = None

    @property
    def stopped(self) -> bool:
        return self.message is not None


class NullRenderer:
    """Render progress to nowhere."""

    def start(self, total: int, label: str, style: Style) -> NullHandle:
        return NullHandle(total=total, label=label, style=style)

    def update(self, handle: NullHandle, position: int) -> None:
        handle.positions.append(position)

    def stop(self, handle: NullHandle, message: str) -> None:
        handle.message = message
