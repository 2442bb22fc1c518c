"""Thread-safe clamped position accumulator."""

import math
import threading

from progress_relay.utils.errors import PoisonedPositionError

MAX_POSITION = 100.0


class ProgressPos:
    """Shared progress position, clamped to ``MAX_POSITION``.

    Every read and read-modify-write happens under one lock, so concurrent
    producers never lose an update. A delta that cannot be added (a
    ``TypeError`` from a non-numeric value, for instance) leaves the position
    untouched and usable. If storing the new position is interrupted, the
    tracker is poisoned and refuses all further access.
    """

    def __init__(self, value: float = 0.0):
        self._value = value
        self._lock = threading.Lock()
        self._poisoned = False

    def load(self) -> float:
        """Return the current position."""
        with self._lock:
            self._check_poisoned()
            return self._value

    def add(self, value: float) -> float:
        """Increment position, never exceeding ``MAX_POSITION``.

        A NaN result clamps to ``MAX_POSITION``.

        Returns:
            The position produced by this update
        """
        with self._lock:
            self._check_poisoned()
            new = self._value + value
            try:
                if math.isnan(new) or new > MAX_POSITION:
                    new = MAX_POSITION
                self._value = new
            except BaseException:
                self._poisoned = True
                raise
            return new

    @property
    def poisoned(self) -> bool:
        return self._poisoned

    def _check_poisoned(self) -> None:
        if self._poisoned:
            raise PoisonedPositionError("Progress position is poisoned by a failed update")
