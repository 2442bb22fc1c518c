"""Runtime configuration read from environment variables."""

import os
from dataclasses import dataclass
from typing import Mapping

from progress_relay.render.cli import DEFAULT_BAR_TEMPLATE
from progress_relay.render.style import Style

ENV_PREFIX = "PROGRESS_RELAY_"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


def _parse_bool(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean, got '{value}'")


@dataclass
class RelayConfig:
    """Rendering and logging settings."""
    style: Style = Style.LEN
    refresh_per_second: float = 10.0
    transient: bool = False
    log_level: str = "WARNING"
    bar_template: str = DEFAULT_BAR_TEMPLATE

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "RelayConfig":
        """Build a config from ``PROGRESS_RELAY_*`` variables.

        Unset variables keep their defaults.

        Raises:
            ValueError: If a variable holds an invalid value
        """
        env = os.environ if environ is None else environ
        config = cls()

        style = env.get(f"{ENV_PREFIX}STYLE")
        if style is not None:
            config.style = Style.parse(style)

        refresh = env.get(f"{ENV_PREFIX}REFRESH")
        if refresh is not None:
            try:
                config.refresh_per_second = float(refresh)
            except ValueError:
                raise ValueError(f"{ENV_PREFIX}REFRESH must be a number, got '{refresh}'") from None
            if config.refresh_per_second <= 0:
                raise ValueError(f"{ENV_PREFIX}REFRESH must be positive, got {refresh}")

        transient = env.get(f"{ENV_PREFIX}TRANSIENT")
        if transient is not None:
            config.transient = _parse_bool(f"{ENV_PREFIX}TRANSIENT", transient)

        log_level = env.get(f"{ENV_PREFIX}LOG_LEVEL")
        if log_level is not None:
            config.log_level = log_level.strip().upper()

        bar_template = env.get(f"{ENV_PREFIX}BAR_TEMPLATE")
        if bar_template:
            config.bar_template = bar_template

        return config
