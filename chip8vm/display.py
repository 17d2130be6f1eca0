"""CHIP-8 64x32 monochrome framebuffer."""

from typing import Any, Tuple

import jax.numpy as jnp
import numpy as np
from flax.struct import PyTreeNode

from chip8vm.constants import SCREEN_WIDTH, SCREEN_HEIGHT, SPRITE_WIDTH
from chip8vm.memory import read_bytes

# Pre-computed coordinate grids for display operations
xx, yy = jnp.meshgrid(jnp.arange(SCREEN_WIDTH), jnp.arange(SCREEN_HEIGHT), indexing='ij')


class Display(PyTreeNode):
    """Framebuffer of 0/1 cells indexed ``[x, y]`` plus a dirty flag.

    The dirty flag is raised by every drawing operation and lowered only by
    the consumer (the interpreter at the start of a cycle, or a renderer after
    reading the pixels).
    """
    pixels: jnp.ndarray
    dirty: jnp.ndarray

    @classmethod
    def create(cls) -> "Display":
        return cls(
            pixels=jnp.zeros((SCREEN_WIDTH, SCREEN_HEIGHT), dtype=jnp.uint8),
            dirty=jnp.asarray(True),
        )

    def is_dirty(self) -> bool:
        return bool(self.dirty)

    def clear_dirty(self) -> "Display":
        return self.replace(dirty=jnp.asarray(False))

    def clear(self) -> "Display":
        """Turn every pixel off."""
        return self.replace(pixels=jnp.zeros_like(self.pixels), dirty=jnp.asarray(True))

    def draw_sprite(
        self, memory: jnp.ndarray, x: int, y: int, address: int, height: int
    ) -> Tuple["Display", bool]:
        """XOR an 8 x ``height`` sprite read from ``memory[address:]`` at (x, y).

        Sprites wrap around both screen edges. Returns the new display and
        whether any sprite bit erased a pixel that was already on.
        """
        height = int(height)
        sprite_rows = read_bytes(memory, address, height)
        sprite_x = int(x) % SCREEN_WIDTH
        sprite_y = int(y) % SCREEN_HEIGHT

        col_offset = (xx - sprite_x) % SCREEN_WIDTH
        row_offset = (yy - sprite_y) % SCREEN_HEIGHT
        in_sprite = (col_offset < SPRITE_WIDTH) & (row_offset < height)

        rows = jnp.zeros(SCREEN_HEIGHT, dtype=jnp.uint8).at[:height].set(sprite_rows)
        sprite_bytes = rows[row_offset]
        shift = jnp.clip(SPRITE_WIDTH - 1 - col_offset, 0, SPRITE_WIDTH - 1)
        sprite = jnp.where(in_sprite, (sprite_bytes >> shift) & 1, 0).astype(jnp.uint8)

        collided = bool(jnp.any(self.pixels & sprite))
        display = self.replace(pixels=self.pixels ^ sprite, dirty=jnp.asarray(True))
        return display, collided

    def framebuffer(self, on_value: Any = 1, off_value: Any = 0) -> np.ndarray:
        """Row-major (y, then x) pixel buffer in a two-colour encoding.

        Read only: the dirty flag is left as is.
        """
        pixels = np.asarray(self.pixels, dtype=np.bool_).T.reshape(-1)
        return np.where(pixels, on_value, off_value)
