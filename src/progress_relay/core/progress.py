"""Progress handle decoupling an operation from how its progress is shown."""

import logging
from typing import Any, Callable

import click

from progress_relay.core.position import ProgressPos

logger = logging.getLogger(__name__)

MessageCallback = Callable[[str], None]
PositionCallback = Callable[[float], None]


class Progress:
    """Progress reporter handed to long-running operations.

    The two callbacks are invoked synchronously on the calling thread and
    signal failure by raising; whatever they raise propagates unchanged.
    Anything the callbacks close over must stay valid for as long as the
    handle (or any clone of it) is in use.

    Clones share one ``ProgressPos``, so worker threads holding separate
    clones still converge on a single position.

    Args:
        msg_callback: Receives textual status messages
        pos_callback: Receives the total position (0-100) after each increment
    """

    def __init__(self, msg_callback: MessageCallback, pos_callback: PositionCallback):
        self._pos = ProgressPos(0.0)
        self.len = 0.0
        self._msg_callback = msg_callback
        self._pos_callback = pos_callback
        logger.debug("Created progress handle")

    def with_len(self, length: float) -> "Progress":
        """Return a handle with ``len`` set, keeping the current position."""
        progress = self.clone()
        progress.len = length
        logger.debug("Progress unit length set to %s", length)
        return progress

    def clone(self) -> "Progress":
        """Return a handle sharing this one's position and callbacks."""
        progress = Progress.__new__(Progress)
        progress._pos = self._pos
        progress.len = self.len
        progress._msg_callback = self._msg_callback
        progress._pos_callback = self._pos_callback
        return progress

    __copy__ = clone

    @property
    def position(self) -> float:
        return self._pos.load()

    def show_msg(self, msg: Any) -> None:
        """Send ``str(msg)`` to the message callback."""
        self._msg_callback(str(msg))

    def increment_by(self, delta: float) -> None:
        """Advance the position by ``delta`` and report the total it produced."""
        self._pos_callback(self._pos.add(delta))

    def complete_unit(self) -> None:
        """Advance the position by one whole ``len``."""
        self.increment_by(self.len)

    def inc(self, value: float | None = None) -> None:
        """Advance by ``value``, or by a whole ``len`` when ``value`` is None."""
        if value is None:
            self.complete_unit()
        else:
            self.increment_by(value)

    def __repr__(self) -> str:
        if self._pos.poisoned:
            return f"Progress(position=<poisoned>, len={self.len!r})"
        return f"Progress(position={self._pos.load()!r}, len={self.len!r})"


def send_and_print(msg: Any, progress: Progress | None = None) -> None:
    """Print a message on stdout and, if given, send it through ``progress`` too."""
    text = str(msg)
    click.echo(text)
    if progress is not None:
        progress.show_msg(text)
