"""Tests for configuration and logging setup."""

import logging

import pytest
from rich.logging import RichHandler

from progress_relay.config import RelayConfig
from progress_relay.render.cli import DEFAULT_BAR_TEMPLATE
from progress_relay.render.style import Style
from progress_relay.utils.log import configure_logging


class TestRelayConfig:
    """Test reading settings from the environment."""

    def test_defaults(self):
        """Test empty environment keeps defaults."""
        config = RelayConfig.from_env({})
        assert config.style is Style.LEN
        assert config.refresh_per_second == 10.0
        assert config.transient is False
        assert config.log_level == "WARNING"
        assert config.bar_template == DEFAULT_BAR_TEMPLATE

    def test_all_values(self):
        """Test every variable is applied."""
        config = RelayConfig.from_env({
            "PROGRESS_RELAY_STYLE": "Bytes",
            "PROGRESS_RELAY_REFRESH": "4",
            "PROGRESS_RELAY_TRANSIENT": "yes",
            "PROGRESS_RELAY_LOG_LEVEL": "debug",
            "PROGRESS_RELAY_BAR_TEMPLATE": "{bar} {counter}",
        })
        assert config.style is Style.BYTES
        assert config.refresh_per_second == 4.0
        assert config.transient is True
        assert config.log_level == "DEBUG"
        assert config.bar_template == "{bar} {counter}"

    def test_reads_process_environment(self, monkeypatch):
        """Test os.environ is used when no mapping is given."""
        monkeypatch.setenv("PROGRESS_RELAY_STYLE", "bytes")
        assert RelayConfig.from_env().style is Style.BYTES

    @pytest.mark.parametrize("name,value", [
        ("PROGRESS_RELAY_STYLE", "percent"),
        ("PROGRESS_RELAY_REFRESH", "fast"),
        ("PROGRESS_RELAY_REFRESH", "0"),
        ("PROGRESS_RELAY_TRANSIENT", "maybe"),
    ])
    def test_invalid_values(self, name, value):
        """Test invalid values are rejected."""
        with pytest.raises(ValueError):
            RelayConfig.from_env({name: value})


class TestConfigureLogging:
    """Test rich logging installation."""

    def test_installs_single_handler(self):
        """Test repeated setup does not stack handlers."""
        configure_logging("info")
        logger = configure_logging("debug")

        handlers = [h for h in logger.handlers if isinstance(h, RichHandler)]
        assert len(handlers) == 1
        assert logger.level == logging.DEBUG
        assert logger.name == "progress_relay"

    def test_unknown_level(self):
        """Test unknown level names are rejected."""
        with pytest.raises(ValueError, match="Unknown log level"):
            configure_logging("chatty")
