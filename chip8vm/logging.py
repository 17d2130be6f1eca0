"""Console logging utilities for chip8vm sessions.

A small levelled console logger with optional colours and elapsed-time
stamps, plus a session-flavoured subclass that knows how to report ROM loads,
resets and fatal faults together with the machine state at the time.
"""

import sys
import time
from typing import Iterable, Optional

from tqdm import tqdm


class ConsoleLogger:
    """Flexible console logger with level filtering and formatting."""

    LEVEL_ORDER = {
        "DEBUG": 0,
        "INFO": 1,
        "WARNING": 2,
        "ERROR": 3,
        "CRITICAL": 4,
    }

    def __init__(
        self,
        name: str = "chip8vm",
        log_level: str = "INFO",
        use_colors: bool = True,
        show_timestamps: bool = True,
        stream=None,
    ):
        if log_level.upper() not in self.LEVEL_ORDER:
            raise ValueError(
                f"Unknown log level '{log_level}'. Available: {list(self.LEVEL_ORDER)}"
            )
        self.name = name
        self.log_level = log_level.upper()
        self.stream = stream if stream is not None else sys.stdout
        self.use_colors = (
            use_colors and hasattr(self.stream, "isatty") and self.stream.isatty()
        )
        self.show_timestamps = show_timestamps
        self.start_time = time.time()

        self.colors = (
            {
                "DEBUG": "\033[36m",
                "INFO": "\033[32m",
                "WARNING": "\033[33m",
                "ERROR": "\033[31m",
                "CRITICAL": "\033[35m",
                "RESET": "\033[0m"
            }
            if self.use_colors
            else {
                k: ""
                for k in ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL", "RESET"]
            }
        )

    def is_enabled_for(self, level: str) -> bool:
        """Check if message should be logged based on current log level."""
        return self.LEVEL_ORDER.get(level.upper(), 1) >= self.LEVEL_ORDER[self.log_level]

    def _format_message(self, level: str, message: str) -> str:
        """Format log message with timestamp, level, and colors."""
        timestamp = (
            f"[{time.time() - self.start_time:8.2f}s]" if self.show_timestamps else ""
        )
        level_str = f"[{level:>8s}]"
        name_str = f"[{self.name}]"

        if self.use_colors:
            color = self.colors.get(level.upper(), "")
            reset = self.colors["RESET"]
            level_str = f"{color}{level_str}{reset}"

        return f"{timestamp}{level_str}{name_str} {message}"

    def log(self, level: str, message: str):
        """Log a message at the specified level."""
        if self.is_enabled_for(level):
            print(self._format_message(level, message), file=self.stream, flush=True)

    def debug(self, message: str):
        self.log("DEBUG", message)

    def info(self, message: str):
        self.log("INFO", message)

    def warning(self, message: str):
        self.log("WARNING", message)

    def error(self, message: str):
        self.log("ERROR", message)

    def critical(self, message: str):
        self.log("CRITICAL", message)


def format_registers(state) -> str:
    """One-line dump of PC, I, SP and V0-VF."""
    registers = " ".join(f"V{i:X}:{int(v):02X}" for i, v in enumerate(state.V))
    return (
        f"PC:0x{int(state.pc):03X} I:0x{int(state.I):03X} "
        f"SP:{state.stack.pointer} {registers}"
    )


class SessionLogger(ConsoleLogger):
    """Logger for emulator sessions."""

    def __init__(self, name: str = "Session", **kwargs):
        super().__init__(name, **kwargs)

    def log_rom_loaded(self, rom_size: int):
        self.info(f"Loaded ROM: {rom_size} bytes at 0x200")

    def log_reset(self, cycles_run: int):
        self.info(f"Reset after {cycles_run} cycles")

    def log_instruction(self, pc: int, instruction: int):
        self.debug(f"{pc:04X}: {instruction:04X}")

    def log_fault(self, error: Exception, state):
        self.critical(f"Fatal error: {error}")
        self.critical(format_registers(state))


def progress(iterable: Iterable, total: Optional[int] = None, desc: str = None, enabled: bool = True, **kwargs):
    """Wrap ``iterable`` in a tqdm progress bar when ``enabled``."""
    return tqdm(iterable, total=total, desc=desc, unit="frame", disable=not enabled, **kwargs)
