"""CHIP-8 main memory: 4KB of bytes with the font at FONT_START."""

from typing import Sequence, Union

import jax.numpy as jnp

from chip8vm.constants import MEMORY_SIZE, FONT_START, FONT_DATA, GLYPH_SIZE, PROGRAM_START
from chip8vm.errors import MemoryAccessError

ByteData = Union[bytes, bytearray, Sequence[int], jnp.ndarray]


def _check_range(base: int, length: int) -> None:
    if base < 0 or length < 0 or base + length > MEMORY_SIZE:
        raise MemoryAccessError(base, length)


def create_memory() -> jnp.ndarray:
    """Create zeroed memory with the font glyphs loaded."""
    memory = jnp.zeros(MEMORY_SIZE, dtype=jnp.uint8)
    return memory.at[FONT_START:FONT_START + len(FONT_DATA)].set(FONT_DATA)


def read_byte(memory: jnp.ndarray, address: int) -> jnp.ndarray:
    """Read a single byte."""
    address = int(address)
    _check_range(address, 1)
    return memory[address]


def read_bytes(memory: jnp.ndarray, base: int, length: int) -> jnp.ndarray:
    """Read ``length`` bytes starting at ``base``."""
    base, length = int(base), int(length)
    _check_range(base, length)
    return memory[base:base + length]


def write_bytes(memory: jnp.ndarray, base: int, data: ByteData) -> jnp.ndarray:
    """Write ``data`` starting at ``base``.

    The whole range is validated before anything is written, so a failing
    write leaves memory untouched.
    """
    base = int(base)
    if isinstance(data, (bytes, bytearray)):
        data = list(data)
    values = jnp.asarray(data, dtype=jnp.uint8)
    _check_range(base, values.shape[0])
    return memory.at[base:base + values.shape[0]].set(values)


def glyph_address(digit: int) -> int:
    """Address of the 5-byte font sprite for hex digit ``digit``.

    Values above 0xF are not rejected; the address then points past the font
    table and any read from it is bounds-checked like every other access.
    """
    return FONT_START + int(digit) * GLYPH_SIZE


def load_rom(memory: jnp.ndarray, rom: ByteData) -> jnp.ndarray:
    """Copy ROM bytes into memory at PROGRAM_START."""
    return write_bytes(memory, PROGRAM_START, rom)
