"""CHIP-8 miscellaneous instructions (Fxxx)."""

import jax.numpy as jnp
from chip8vm.state import EmulatorState, advance
from chip8vm.decode import DecodedInstruction
from chip8vm.keypad import check_key
from chip8vm.memory import glyph_address, read_bytes, write_bytes
from chip8vm.peripherals import Peripherals
from chip8vm.registers import load_registers, registers_through
from chip8vm.instructions.system import unknown_instruction


def execute_get_delay_timer(state: EmulatorState, instruction: DecodedInstruction, peripherals: Peripherals) -> EmulatorState:
    """FX07 - Set VX to delay timer value."""
    return advance(state.replace(V=state.V.at[instruction.x].set(state.delay_timer.current_value())))


def execute_set_delay_timer(state: EmulatorState, instruction: DecodedInstruction, peripherals: Peripherals) -> EmulatorState:
    """FX15 - Set delay timer to VX."""
    return advance(state.replace(delay_timer=state.delay_timer.set_value(state.V[instruction.x])))


def execute_set_sound_timer(state: EmulatorState, instruction: DecodedInstruction, peripherals: Peripherals) -> EmulatorState:
    """FX18 - Set sound timer to VX."""
    return advance(state.replace(sound_timer=state.sound_timer.set_value(state.V[instruction.x])))


def execute_add_to_index(state: EmulatorState, instruction: DecodedInstruction, peripherals: Peripherals) -> EmulatorState:
    """FX1E - Add VX to I, wrapping at 16 bits. VF is unaffected."""
    new_i = state.I + jnp.astype(state.V[instruction.x], jnp.uint16)
    return advance(state.replace(I=new_i))


def execute_wait_for_key(state: EmulatorState, instruction: DecodedInstruction, peripherals: Peripherals) -> EmulatorState:
    """FX0A - Wait for key press.

    Nothing blocks: without a reported key the program counter stays put and
    the same instruction runs again next cycle.
    """
    pressed_key = peripherals.keypad.last_key_down()
    if pressed_key is None:
        return state
    pressed_key = check_key(pressed_key)
    return advance(state.replace(V=state.V.at[instruction.x].set(pressed_key)))


def execute_font_character(state: EmulatorState, instruction: DecodedInstruction, peripherals: Peripherals) -> EmulatorState:
    """FX29 - Set I to location of sprite for digit VX."""
    font_address = glyph_address(state.V[instruction.x])
    return advance(state.replace(I=jnp.asarray(font_address, dtype=jnp.uint16)))


def execute_bcd_conversion(state: EmulatorState, instruction: DecodedInstruction, peripherals: Peripherals) -> EmulatorState:
    """FX33 - Store BCD representation of VX at I, I+1, I+2."""
    value = state.V[instruction.x]

    digits = jnp.array([
        value // 100,
        (value // 10) % 10,
        value % 10
    ], dtype=jnp.uint8)

    return advance(state.replace(memory=write_bytes(state.memory, state.I, digits)))


def execute_store_registers(state: EmulatorState, instruction: DecodedInstruction, peripherals: Peripherals) -> EmulatorState:
    """FX55 - Store V0 through VX in memory starting at I. I is unchanged."""
    values = registers_through(state.V, instruction.x)
    return advance(state.replace(memory=write_bytes(state.memory, state.I, values)))


def execute_load_registers(state: EmulatorState, instruction: DecodedInstruction, peripherals: Peripherals) -> EmulatorState:
    """FX65 - Load V0 through VX from memory starting at I. I is unchanged."""
    values = read_bytes(state.memory, state.I, instruction.x + 1)
    return advance(state.replace(V=load_registers(state.V, values)))


MISC_INSTRUCTIONS = {
    0x07: execute_get_delay_timer,
    0x0A: execute_wait_for_key,
    0x15: execute_set_delay_timer,
    0x18: execute_set_sound_timer,
    0x1E: execute_add_to_index,
    0x29: execute_font_character,
    0x33: execute_bcd_conversion,
    0x55: execute_store_registers,
    0x65: execute_load_registers,
}


def execute_misc_instruction(state: EmulatorState, instruction: DecodedInstruction, peripherals: Peripherals) -> EmulatorState:
    """Dispatch FX instructions on their low byte."""
    handler = MISC_INSTRUCTIONS.get(instruction.nn, unknown_instruction)
    return handler(state, instruction, peripherals)
