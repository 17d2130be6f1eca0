"""CHIP-8 virtual machine core."""

from chip8vm.state import EmulatorState, create_state
from chip8vm.emulator import execute, fetch, cycle, tick_timers
from chip8vm.decode import DecodedInstruction, decode
from chip8vm.display import Display
from chip8vm.timer import Timer
from chip8vm.keypad import Input, Keypad, NO_INPUT
from chip8vm.peripherals import ScriptedRandom, prng_random_byte
from chip8vm.session import Session
from chip8vm.errors import (
    Chip8Error,
    FatalPreconditionError,
    InvalidOpcodeError,
    MemoryAccessError,
    RegisterIndexError,
    StackOverflowError,
    StackUnderflowError,
    InvalidKeyError,
    SessionHaltedError,
)
from chip8vm.constants import *
from chip8vm.rendering import chip8_display_to_rgb, create_color_scheme, framebuffer_to_xrgb

__all__ = [
    "EmulatorState",
    "create_state",
    "fetch",
    "execute",
    "cycle",
    "tick_timers",
    "DecodedInstruction",
    "decode",
    "Display",
    "Timer",
    "Input",
    "Keypad",
    "NO_INPUT",
    "ScriptedRandom",
    "prng_random_byte",
    "Session",
    "Chip8Error",
    "FatalPreconditionError",
    "InvalidOpcodeError",
    "MemoryAccessError",
    "RegisterIndexError",
    "StackOverflowError",
    "StackUnderflowError",
    "InvalidKeyError",
    "SessionHaltedError",
    "PROGRAM_START",
    "FONT_START",
    "SCREEN_WIDTH",
    "SCREEN_HEIGHT",
    "chip8_display_to_rgb",
    "create_color_scheme",
    "framebuffer_to_xrgb",
]
