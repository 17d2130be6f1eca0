"""General purpose register file helpers (V0-VF)."""

import jax.numpy as jnp

from chip8vm.constants import NUM_REGISTERS, FLAG_REGISTER
from chip8vm.errors import RegisterIndexError


def _check_index(index: int) -> int:
    index = int(index)
    if not 0 <= index < NUM_REGISTERS:
        raise RegisterIndexError(index)
    return index


def create_registers() -> jnp.ndarray:
    return jnp.zeros(NUM_REGISTERS, dtype=jnp.uint8)


def set_flag(V: jnp.ndarray, flag) -> jnp.ndarray:
    """Write the carry/borrow/collision flag into VF."""
    return V.at[FLAG_REGISTER].set(jnp.asarray(flag).astype(jnp.uint8))


def registers_through(V: jnp.ndarray, index: int) -> jnp.ndarray:
    """V0 through V[index], inclusive."""
    return V[:_check_index(index) + 1]


def load_registers(V: jnp.ndarray, values: jnp.ndarray) -> jnp.ndarray:
    """Overwrite V0..V[len(values)-1] with ``values``."""
    count = int(values.shape[0])
    if count > NUM_REGISTERS:
        raise RegisterIndexError(count - 1)
    return V.at[:count].set(jnp.asarray(values).astype(jnp.uint8))
