"""Tests for the console logger."""

import io

import pytest
from chip8vm import create_state
from chip8vm.logging import ConsoleLogger, format_registers


def test_level_filtering():
    stream = io.StringIO()
    logger = ConsoleLogger(log_level="WARNING", stream=stream, show_timestamps=False)

    logger.info("hidden")
    logger.warning("shown")

    output = stream.getvalue()
    assert "hidden" not in output
    assert "[ WARNING][chip8vm] shown" in output


def test_no_colors_on_non_tty():
    stream = io.StringIO()
    logger = ConsoleLogger(stream=stream)
    logger.error("boom")
    assert "\033[" not in stream.getvalue()


def test_unknown_level():
    with pytest.raises(ValueError):
        ConsoleLogger(log_level="CHATTY")


def test_format_registers():
    state = create_state()
    state = state.replace(V=state.V.at[0xA].set(0x07))
    line = format_registers(state)
    assert line.startswith("PC:0x200 I:0x000 SP:0")
    assert "VA:07" in line
