"""progress-relay - Decoupled progress reporting for long-running operations."""

__version__ = "0.1.0"
__license__ = "GPL-3.0-or-later"

from progress_relay.core.position import ProgressPos
from progress_relay.core.progress import Progress
from progress_relay.core.progress import send_and_print
from progress_relay.render import CliProgress
from progress_relay.render import NullRenderer
from progress_relay.render import Renderer
from progress_relay.render import RendererBinding
from progress_relay.render import Style


__all__ = [
    "Progress",
    "ProgressPos",
    "send_and_print",
    "Renderer",
    "RendererBinding",
    "CliProgress",
    "NullRenderer",
    "Style",
    "__version__",
]
