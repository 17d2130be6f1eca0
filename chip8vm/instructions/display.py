"""CHIP-8 display operations."""

from chip8vm.state import EmulatorState, advance
from chip8vm.decode import DecodedInstruction
from chip8vm.peripherals import Peripherals
from chip8vm.registers import set_flag


def execute_display(state: EmulatorState, instruction: DecodedInstruction, peripherals: Peripherals) -> EmulatorState:
    """DXYN - Draw sprite at (VX, VY) with height N, VF = collision."""
    display, collided = state.display.draw_sprite(
        state.memory,
        state.V[instruction.x],
        state.V[instruction.y],
        state.I,
        instruction.n,
    )
    return advance(state.replace(display=display, V=set_flag(state.V, collided)))
