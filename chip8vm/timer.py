"""60Hz down-counting timers used for the delay and sound registers."""

import jax.numpy as jnp
from flax.struct import PyTreeNode


class Timer(PyTreeNode):
    """8-bit timer that counts down to zero, one step per tick."""
    value: jnp.ndarray

    @classmethod
    def create(cls, value: int = 0) -> "Timer":
        return cls(value=jnp.asarray(value, dtype=jnp.uint8))

    def tick(self) -> "Timer":
        return self.replace(value=jnp.where(self.value > 0, self.value - 1, self.value))

    def set_value(self, value) -> "Timer":
        return self.replace(value=jnp.asarray(value).astype(jnp.uint8))

    def current_value(self) -> jnp.ndarray:
        return self.value

    def is_active(self) -> bool:
        return bool(self.value > 0)
