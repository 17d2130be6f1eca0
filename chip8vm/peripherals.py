"""Collaborators injected into the interpreter: keypad input and randomness."""

from typing import Callable, NamedTuple, Sequence, Tuple

import jax
import jax.numpy as jnp

from chip8vm.keypad import Input, NO_INPUT
from chip8vm.state import EmulatorState

RandomSource = Callable[[EmulatorState], Tuple[EmulatorState, int]]


def prng_random_byte(state: EmulatorState) -> Tuple[EmulatorState, jnp.ndarray]:
    """Draw a byte from the state's PRNG key, advancing the key."""
    key, subkey = jax.random.split(state.rng)
    random_value = jax.random.randint(subkey, shape=(), minval=0, maxval=256, dtype=jnp.uint8)
    return state.replace(rng=key), random_value


class ScriptedRandom:
    """Random source replaying a fixed byte sequence, cycling when exhausted."""

    def __init__(self, values: Sequence[int]):
        if not values:
            raise ValueError("ScriptedRandom needs at least one value")
        self.values = [int(v) & 0xFF for v in values]
        self.position = 0

    def rewind(self):
        """Start the sequence over from its first value."""
        self.position = 0

    def __call__(self, state: EmulatorState) -> Tuple[EmulatorState, int]:
        value = self.values[self.position % len(self.values)]
        self.position += 1
        return state, value


class Peripherals(NamedTuple):
    keypad: Input = NO_INPUT
    random_source: RandomSource = prng_random_byte
