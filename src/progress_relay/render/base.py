"""Renderer protocol consumed by progress callbacks."""

from typing import Protocol
from typing import TypeVar

from progress_relay.render.style import Style

H = TypeVar("H")


class Renderer(Protocol[H]):
    """Turns progress reports into a visible indicator.

    ``start`` returns an opaque handle that is passed back to ``update``
    and ``stop``; the renderer keeps no other per-indicator state.
    """

    def start(self, total: int, label: str, style: Style) -> H:
        """Set up an indicator for ``total`` units of work.

        Raises:
            RendererError: If the indicator cannot be created
        """
        ...

    def update(self, handle: H, position: int) -> None:
        """Move the indicator to ``position`` (0 to total)."""
        ...

    def stop(self, handle: H, message: str) -> None:
        """Finish the indicator and show a final message."""
        ...
