"""CHIP-8 control flow instructions."""

import jax.numpy as jnp
from chip8vm.state import EmulatorState, skip_if
from chip8vm.decode import DecodedInstruction
from chip8vm.keypad import check_key
from chip8vm.peripherals import Peripherals
from chip8vm.stack import push
from chip8vm.instructions.system import unknown_instruction


def execute_jump(state: EmulatorState, instruction: DecodedInstruction, peripherals: Peripherals) -> EmulatorState:
    """1NNN - Jump to address NNN."""
    return state.replace(pc=jnp.asarray(instruction.nnn, dtype=jnp.uint16))


def execute_call(state: EmulatorState, instruction: DecodedInstruction, peripherals: Peripherals) -> EmulatorState:
    """2NNN - Call subroutine at NNN, returning to the instruction after the call."""
    state = state.replace(stack=push(state.stack, state.pc + 2))
    return execute_jump(state, instruction, peripherals)


def make_skip_instruction(condition_fn, require_zero_n=False):
    """Factory for skip instructions."""
    def skip_instruction(state: EmulatorState, instruction: DecodedInstruction, peripherals: Peripherals) -> EmulatorState:
        if require_zero_n and instruction.n != 0:
            return unknown_instruction(state, instruction, peripherals)
        return skip_if(state, condition_fn(state, instruction))
    return skip_instruction


execute_skip_if_equal_immediate = make_skip_instruction(
    lambda state, inst: state.V[inst.x] == inst.nn
)

execute_skip_if_not_equal_immediate = make_skip_instruction(
    lambda state, inst: state.V[inst.x] != inst.nn
)

# 5XY0 and 9XY0 only exist with a zero low nibble
execute_skip_if_equal_register = make_skip_instruction(
    lambda state, inst: state.V[inst.x] == state.V[inst.y], require_zero_n=True
)

execute_skip_if_not_equal_register = make_skip_instruction(
    lambda state, inst: state.V[inst.x] != state.V[inst.y], require_zero_n=True
)


def execute_jump_with_offset(state: EmulatorState, instruction: DecodedInstruction, peripherals: Peripherals) -> EmulatorState:
    """BNNN - Jump to address NNN + V0."""
    jump_address = instruction.nnn + jnp.astype(state.V[0], jnp.uint16)
    return state.replace(pc=jump_address)


def execute_skip_if_key(state: EmulatorState, instruction: DecodedInstruction, peripherals: Peripherals) -> EmulatorState:
    """EX9E/EXA1 - Skip if key VX pressed/not pressed."""
    if instruction.nn not in (0x9E, 0xA1):
        return unknown_instruction(state, instruction, peripherals)

    key = check_key(state.V[instruction.x])
    key_pressed = peripherals.keypad.is_key_down(key)
    is_not_instruction = instruction.nn == 0xA1
    return skip_if(state, key_pressed != is_not_instruction)
