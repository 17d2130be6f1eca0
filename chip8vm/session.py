"""A running CHIP-8 program: interpreter state plus the ROM it was booted from."""

from typing import Optional

import jax
import numpy as np

from chip8vm.constants import CPU_FREQUENCY, TIMER_FREQUENCY
from chip8vm.display import Display
from chip8vm.emulator import cycle, fetch
from chip8vm.errors import FatalPreconditionError, SessionHaltedError
from chip8vm.keypad import Input, NO_INPUT
from chip8vm.logging import SessionLogger, progress
from chip8vm.peripherals import RandomSource, prng_random_byte
from chip8vm.state import EmulatorState, create_state


class Session:
    """Owns an emulator state and the ROM bytes needed to cold-restart it.

    The host drives it: ``cycle()`` once per instruction, with
    ``should_tick_timers`` set on the cycles that fall on a 60Hz boundary, and
    polls ``is_dirty()`` to know when to redraw. ``run_frame()`` bundles that
    cadence for headless use.

    A fatal error halts the session: the error is logged and re-raised, and
    further cycles raise :class:`SessionHaltedError` until ``reset()``.
    """

    def __init__(
        self,
        rom: bytes,
        seed: int = 0,
        random_source: Optional[RandomSource] = None,
        cycles_per_frame: int = CPU_FREQUENCY // TIMER_FREQUENCY,
        logger: Optional[SessionLogger] = None,
    ):
        """Boot ``rom``.

        Args:
            rom: Program bytes, copied to 0x200 unchanged
            seed: Seed of the PRNG behind CXNN when no random_source is given
            random_source: Callable ``(state) -> (state, byte)`` overriding the PRNG
            cycles_per_frame: Instructions per 60Hz frame in ``run_frame``
            logger: Where session events go; a default SessionLogger if None
        """
        if cycles_per_frame < 1:
            raise ValueError(f"cycles_per_frame must be positive, got {cycles_per_frame}")

        self.rom = bytes(rom)
        self.seed = seed
        self.random_source = random_source if random_source is not None else prng_random_byte
        self.cycles_per_frame = cycles_per_frame
        self.logger = logger if logger is not None else SessionLogger(log_level="WARNING")

        self._boot()
        self.logger.log_rom_loaded(len(self.rom))

    def _boot(self):
        self.state: EmulatorState = create_state(jax.random.PRNGKey(self.seed), self.rom)
        self.is_initial_state = True
        self.cycles_run = 0
        self.fault: Optional[FatalPreconditionError] = None

    def cycle(self, should_tick_timers: bool = False, keypad: Input = NO_INPUT):
        """Execute one instruction."""
        if self.fault is not None:
            raise SessionHaltedError(self.fault)
        self.is_initial_state = False

        try:
            if self.logger.is_enabled_for("DEBUG"):
                self.logger.log_instruction(int(self.state.pc), fetch(self.state))
            self.state = cycle(self.state, should_tick_timers, keypad, self.random_source)
        except FatalPreconditionError as e:
            self.fault = e
            self.logger.log_fault(e, self.state)
            raise
        self.cycles_run += 1

    def reset(self):
        """Power-cycle: rebuild memory, registers, timers and display from the ROM.

        The seeded PRNG restarts from the session seed, and an injected random
        source exposing ``rewind()`` is rewound, so CXNN replays from power-on.
        """
        self.logger.log_reset(self.cycles_run)
        rewind = getattr(self.random_source, "rewind", None)
        if rewind is not None:
            rewind()
        self._boot()

    def run_frame(self, keypad: Input = NO_INPUT) -> bool:
        """Run one 60Hz frame worth of cycles.

        Timers tick on the first cycle of the frame. Returns True if any cycle
        in the frame drew to the display.
        """
        drew = False
        for i in range(self.cycles_per_frame):
            self.cycle(should_tick_timers=(i == 0), keypad=keypad)
            drew = drew or self.is_dirty()
        return drew

    def run_frames(self, frames: int, keypad: Input = NO_INPUT, show_progress: bool = False) -> int:
        """Run ``frames`` frames; returns how many of them drew."""
        frames_drawn = 0
        for _ in progress(range(frames), total=frames, desc="Emulating", enabled=show_progress):
            frames_drawn += self.run_frame(keypad)
        return frames_drawn

    @property
    def display(self) -> Display:
        return self.state.display

    def is_dirty(self) -> bool:
        return self.state.display.is_dirty()

    def clear_dirty(self):
        """Acknowledge the current frame after rendering it."""
        self.state = self.state.replace(display=self.state.display.clear_dirty())

    def framebuffer(self, on_value=1, off_value=0) -> np.ndarray:
        return self.state.display.framebuffer(on_value, off_value)
