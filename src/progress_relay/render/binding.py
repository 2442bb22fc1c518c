"""Glue between a ``Progress`` handle and a ``Renderer``."""

import logging
import threading
from typing import Generic

from progress_relay.core.position import MAX_POSITION
from progress_relay.core.progress import Progress
from progress_relay.render.base import H
from progress_relay.render.base import Renderer
from progress_relay.render.style import Style

logger = logging.getLogger(__name__)


class RendererBinding(Generic[H]):
    """Starts a renderer and exposes callbacks that drive it.

    ``on_message`` and ``on_position`` have the shapes ``Progress`` expects,
    so the binding can be passed straight into a handle::

        binding = RendererBinding(CliProgress(), total=size, label="Downloading")
        progress = binding.progress(length=100 / chunks)
        ...
        binding.finish("Download complete")

    Positions reach the renderer in non-decreasing order: a report that
    arrives after a higher one (from another thread) is dropped.

    The binding must outlive every handle built over it.
    """

    def __init__(self, renderer: Renderer[H], total: int, label: str, style: Style = Style.LEN):
        self.renderer = renderer
        self.total = total
        self.handle: H = renderer.start(total, label, style)
        self.finished = False
        self._sent = 0
        self._update_lock = threading.Lock()

    def on_message(self, message: str) -> None:
        logger.info(message)

    def on_position(self, position: float) -> None:
        scaled = int(self.total * position / MAX_POSITION)
        with self._update_lock:
            if scaled < self._sent:
                return
            self._sent = scaled
            self.renderer.update(self.handle, scaled)

    def progress(self, length: float = 0.0) -> Progress:
        """Build a fresh ``Progress`` reporting into this binding."""
        return Progress(self.on_message, self.on_position).with_len(length)

    def finish(self, message: str) -> None:
        """Stop the renderer; later calls are ignored."""
        if self.finished:
            return
        self.finished = True
        self.renderer.stop(self.handle, message)

    def __enter__(self) -> "RendererBinding[H]":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        if exc_type is None:
            self.finish("Done")
        else:
            self.finish(f"Failed: {exc_val}")
