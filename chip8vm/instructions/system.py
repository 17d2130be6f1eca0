"""CHIP-8 system instructions (0x0xxx)."""

from chip8vm.state import EmulatorState, advance
from chip8vm.decode import DecodedInstruction
from chip8vm.errors import InvalidOpcodeError
from chip8vm.peripherals import Peripherals
from chip8vm.stack import pop


def unknown_instruction(state: EmulatorState, instruction: DecodedInstruction, peripherals: Peripherals):
    """Any opcode without a defined meaning halts the machine."""
    raise InvalidOpcodeError(instruction.raw, int(state.pc))


def execute_clear_screen(state: EmulatorState, instruction: DecodedInstruction, peripherals: Peripherals) -> EmulatorState:
    """00E0 - Clear display."""
    return advance(state.replace(display=state.display.clear()))


def execute_return(state: EmulatorState, instruction: DecodedInstruction, peripherals: Peripherals) -> EmulatorState:
    """00EE - Return from subroutine."""
    stack, address = pop(state.stack)
    return state.replace(stack=stack, pc=address)


SYSTEM_INSTRUCTIONS = {
    0x00E0: execute_clear_screen,
    0x00EE: execute_return,
}


def execute_system_instruction(state: EmulatorState, instruction: DecodedInstruction, peripherals: Peripherals) -> EmulatorState:
    """Dispatch system instructions. 0NNN machine-code calls are not supported."""
    handler = SYSTEM_INSTRUCTIONS.get(instruction.raw, unknown_instruction)
    return handler(state, instruction, peripherals)
