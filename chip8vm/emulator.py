"""Main CHIP-8 emulator execution engine."""

import jax.numpy as jnp
from chip8vm.state import EmulatorState
from chip8vm.decode import decode
from chip8vm.keypad import Input, NO_INPUT
from chip8vm.memory import read_bytes
from chip8vm.peripherals import Peripherals, RandomSource, prng_random_byte
from chip8vm.instructions.system import execute_system_instruction
from chip8vm.instructions.control_flow import (
    execute_jump, execute_call, execute_skip_if_equal_immediate,
    execute_skip_if_not_equal_immediate, execute_skip_if_equal_register,
    execute_skip_if_not_equal_register, execute_jump_with_offset, execute_skip_if_key
)
from chip8vm.instructions.alu import execute_alu_operation
from chip8vm.instructions.memory import execute_set, execute_add, execute_set_index, execute_random
from chip8vm.instructions.display import execute_display
from chip8vm.instructions.misc import execute_misc_instruction

# Indexed by the top nibble of the opcode
INSTRUCTION_FAMILIES = [
    execute_system_instruction,
    execute_jump,
    execute_call,
    execute_skip_if_equal_immediate,
    execute_skip_if_not_equal_immediate,
    execute_skip_if_equal_register,
    execute_set,
    execute_add,
    execute_alu_operation,
    execute_skip_if_not_equal_register,
    execute_set_index,
    execute_jump_with_offset,
    execute_random,
    execute_display,
    execute_skip_if_key,
    execute_misc_instruction,
]


def execute(
    state: EmulatorState,
    instruction: int,
    keypad: Input = NO_INPUT,
    random_source: RandomSource = prng_random_byte,
) -> EmulatorState:
    """Execute a single CHIP-8 instruction.

    The returned state already holds the next program counter, so any opcode
    can be exercised on its own without driving a full cycle.

    Raises:
        FatalPreconditionError: on an unknown opcode or an out-of-range
            memory, register, stack or key access.
    """
    decoded_instruction = decode(instruction)
    peripherals = Peripherals(keypad=keypad, random_source=random_source)
    handler = INSTRUCTION_FAMILIES[decoded_instruction.opcode]
    return handler(state, decoded_instruction, peripherals)


def _pack_u16(high: jnp.uint8, low: jnp.uint8) -> int:
    """Pack two bytes into a big-endian 16-bit word."""
    return (int(high) << 8) | int(low)


def fetch(state: EmulatorState) -> int:
    """Fetch the opcode at the program counter without moving it."""
    high, low = read_bytes(state.memory, state.pc, 2)
    return _pack_u16(high, low)


def tick_timers(state: EmulatorState) -> EmulatorState:
    """Count both timers down by one step."""
    return state.replace(
        delay_timer=state.delay_timer.tick(),
        sound_timer=state.sound_timer.tick(),
    )


def cycle(
    state: EmulatorState,
    should_tick_timers: bool = False,
    keypad: Input = NO_INPUT,
    random_source: RandomSource = prng_random_byte,
) -> EmulatorState:
    """Run one fetch-decode-execute step.

    The display's dirty flag is lowered before executing, so after the cycle
    it is set only if this instruction drew. Timers tick only when asked:
    the host decides the 60Hz cadence.
    """
    instruction = fetch(state)
    state = state.replace(display=state.display.clear_dirty())
    state = execute(state, instruction, keypad, random_source)
    if should_tick_timers:
        state = tick_timers(state)
    return state
