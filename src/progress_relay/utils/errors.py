"""Custom exceptions for progress-relay."""


class ProgressRelayError(Exception):
    """Base exception for progress-relay errors."""
    pass


class RendererError(ProgressRelayError):
    """Renderer could not start a progress indicator."""
    pass


class PoisonedPositionError(ProgressRelayError):
    """Position tracker was left inconsistent by a failed update.

    Not recoverable: the shared position can no longer be trusted.
    """
    pass
