"""CHIP-8 emulator state structures."""

import jax
import jax.numpy as jnp
from flax.struct import PyTreeNode

from chip8vm.constants import PROGRAM_START
from chip8vm.display import Display
from chip8vm.memory import create_memory, load_rom
from chip8vm.registers import create_registers
from chip8vm.stack import StackState
from chip8vm.timer import Timer


class EmulatorState(PyTreeNode):
    """Everything the interpreter owns: registers, memory, display and timers."""
    rng: jax.Array
    memory: jnp.ndarray
    pc: jnp.ndarray
    I: jnp.ndarray
    V: jnp.ndarray
    stack: StackState
    display: Display
    delay_timer: Timer
    sound_timer: Timer


def create_state(rng: jax.Array = None, rom: bytes = None) -> EmulatorState:
    """Create power-on state with font data loaded and, optionally, a ROM."""
    if rng is None:
        rng = jax.random.PRNGKey(0)
    memory = create_memory()
    if rom is not None:
        memory = load_rom(memory, rom)
    return EmulatorState(
        rng=rng,
        memory=memory,
        pc=jnp.asarray(PROGRAM_START, dtype=jnp.uint16),
        I=jnp.zeros((), dtype=jnp.uint16),
        V=create_registers(),
        stack=StackState.create(),
        display=Display.create(),
        delay_timer=Timer.create(),
        sound_timer=Timer.create(),
    )


def advance(state: EmulatorState, offset: int = 2) -> EmulatorState:
    """Move the program counter ``offset`` bytes forward."""
    return state.replace(pc=state.pc + offset)


def skip_if(state: EmulatorState, condition) -> EmulatorState:
    """Advance past the next instruction when ``condition`` holds."""
    return state.replace(pc=jnp.where(condition, state.pc + 4, state.pc + 2).astype(jnp.uint16))
