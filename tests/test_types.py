"""Tests for waitfor type definitions."""

import dataclasses

import pytest

from waitfor.exceptions import ConfigurationError
from waitfor.types import DEFAULT_TIMEOUT, PollState, Target, WaitConfig, WaitMode


class TestWaitConfig:
    """Tests for WaitConfig dataclass."""

    def test_defaults(self):
        """Test creating config with only a target."""
        config = WaitConfig(target="db:5432")

        assert config.timeout == DEFAULT_TIMEOUT == 3600
        assert config.mode is WaitMode.WAIT_FOR_UP
        assert config.quiet is False
        assert config.verbose is False
        assert config.command == ()

    def test_mode_string_is_coerced(self):
        """Test mode given by value becomes a WaitMode."""
        config = WaitConfig(target="db", mode="wait-for-down")
        assert config.mode is WaitMode.WAIT_FOR_DOWN

    def test_unknown_mode(self):
        """Test an unrecognized mode is a configuration error."""
        with pytest.raises(ConfigurationError, match="Unknown mode: sideways") as exc_info:
            WaitConfig(target="db", mode="sideways")
        assert exc_info.value.result["mode"] == "sideways"

    @pytest.mark.parametrize("timeout", [0, -5, "10", 1.5, True])
    def test_invalid_timeout(self, timeout):
        """Test non-positive and non-integer timeouts are rejected."""
        with pytest.raises(ConfigurationError, match="Invalid timeout"):
            WaitConfig(target="db:5432", timeout=timeout)

    def test_empty_target(self):
        """Test an empty target is rejected."""
        with pytest.raises(ConfigurationError, match="host"):
            WaitConfig(target="")

    def test_command_is_tuple(self):
        """Test the command is normalized to a tuple."""
        config = WaitConfig(target="db:5432", command=["echo", "hi"])
        assert config.command == ("echo", "hi")

    def test_immutable(self):
        """Test configuration cannot be changed after construction."""
        config = WaitConfig(target="db:5432")
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.timeout = 5


class TestTarget:
    """Tests for Target dataclass."""

    def test_str_with_port(self):
        assert str(Target(host="db", port="5432")) == "db:5432"

    def test_str_without_port(self):
        assert str(Target(host="db")) == "db"


class TestPollState:
    """Tests for PollState dataclass."""

    def test_exhausted(self):
        """Test exhausted flips once attempts reach the maximum."""
        state = PollState(max_attempts=2)
        assert not state.exhausted

        state.attempts_made = 1
        assert not state.exhausted

        state.attempts_made = 2
        assert state.exhausted
