"""CHIP-8 memory and register operations."""

import jax.numpy as jnp
from chip8vm.state import EmulatorState, advance
from chip8vm.decode import DecodedInstruction
from chip8vm.peripherals import Peripherals


def execute_set(state: EmulatorState, instruction: DecodedInstruction, peripherals: Peripherals) -> EmulatorState:
    """6XNN - Set VX = NN."""
    return advance(state.replace(V=state.V.at[instruction.x].set(instruction.nn)))


def execute_add(state: EmulatorState, instruction: DecodedInstruction, peripherals: Peripherals) -> EmulatorState:
    """7XNN - Add NN to VX. Wraps at 256 and leaves VF alone."""
    return advance(state.replace(V=state.V.at[instruction.x].add(instruction.nn)))


def execute_set_index(state: EmulatorState, instruction: DecodedInstruction, peripherals: Peripherals) -> EmulatorState:
    """ANNN - Set I = NNN."""
    return advance(state.replace(I=jnp.asarray(instruction.nnn, dtype=jnp.uint16)))


def execute_random(state: EmulatorState, instruction: DecodedInstruction, peripherals: Peripherals) -> EmulatorState:
    """CXNN - Set VX = random & NN."""
    state, random_value = peripherals.random_source(state)
    masked = jnp.asarray(random_value, dtype=jnp.uint8) & instruction.nn
    return advance(state.replace(V=state.V.at[instruction.x].set(masked)))
