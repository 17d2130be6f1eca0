"""CHIP-8 ALU operations (8xxx)."""

import jax.numpy as jnp
from chip8vm.state import EmulatorState, advance
from chip8vm.decode import DecodedInstruction
from chip8vm.peripherals import Peripherals
from chip8vm.registers import set_flag
from chip8vm.instructions.system import unknown_instruction


def alu_set(vx, vy):
    """8XY0 - Set: VX = VY."""
    return vy, None


def alu_or(vx, vy):
    """8XY1 - Binary OR: VX |= VY."""
    return vx | vy, None


def alu_and(vx, vy):
    """8XY2 - Binary AND: VX &= VY."""
    return vx & vy, None


def alu_xor(vx, vy):
    """8XY3 - Logical XOR: VX ^= VY."""
    return vx ^ vy, None


def alu_add(vx, vy):
    """8XY4 - Add: VX += VY, set carry flag."""
    result = jnp.astype(vx, jnp.int32) + vy
    carry = result > 255
    return result & 0xFF, carry


def alu_sub_xy(vx, vy):
    """8XY5 - Subtract: VX -= VY, VF = 1 when there is no borrow."""
    no_borrow = vx > vy
    result = (jnp.astype(vx, jnp.int32) - vy) & 0xFF
    return result, no_borrow


def alu_shift_right(vx, vy):
    """8XY6 - Shift right: VX >>= 1."""
    return vx >> 1, vx & 1


def alu_sub_yx(vx, vy):
    """8XY7 - Subtract: VX = VY - VX, VF = 1 when there is no borrow."""
    no_borrow = vy > vx
    result = (jnp.astype(vy, jnp.int32) - vx) & 0xFF
    return result, no_borrow


def alu_shift_left(vx, vy):
    """8XYE - Shift left: VX <<= 1."""
    shifted_bit = (vx & 0x80) >> 7
    result = (jnp.astype(vx, jnp.int32) << 1) & 0xFF
    return result, shifted_bit


ALU_OPERATIONS = {
    0x0: alu_set,
    0x1: alu_or,
    0x2: alu_and,
    0x3: alu_xor,
    0x4: alu_add,
    0x5: alu_sub_xy,
    0x6: alu_shift_right,
    0x7: alu_sub_yx,
    0xE: alu_shift_left,
}


def execute_alu_operation(state: EmulatorState, instruction: DecodedInstruction, peripherals: Peripherals) -> EmulatorState:
    """8XYN - ALU operations dispatcher."""
    operation = ALU_OPERATIONS.get(instruction.n)
    if operation is None:
        return unknown_instruction(state, instruction, peripherals)

    result, vf = operation(state.V[instruction.x], state.V[instruction.y])

    # Flag first, result second: with X=F the result overwrites the flag
    new_V = state.V
    if vf is not None:
        new_V = set_flag(new_V, vf)
    new_V = new_V.at[instruction.x].set(jnp.astype(result, jnp.uint8))
    return advance(state.replace(V=new_V))
