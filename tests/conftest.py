"""Test configuration and fixtures for CHIP-8 emulator tests."""

import pytest
import jax.numpy as jnp
from chip8vm import create_state, Keypad, ScriptedRandom


@pytest.fixture
def fresh_state():
    """Provide a fresh emulator state for each test."""
    return create_state()


@pytest.fixture
def keypad():
    """Provide a keypad with nothing pressed."""
    return Keypad()


@pytest.fixture
def scripted_random():
    """Random source that returns 0xAB, then 0x0F, then repeats."""
    return ScriptedRandom([0xAB, 0x0F])


def setup_sprite_in_memory(state, address, sprite_bytes):
    """Helper to put sprite data in memory."""
    return state.replace(
        memory=state.memory.at[address:address+len(sprite_bytes)].set(
            jnp.array(sprite_bytes, dtype=jnp.uint8)
        )
    )


def set_registers(state, **values):
    """Helper to set registers by name, e.g. set_registers(state, V1=0x10, VF=1)."""
    V = state.V
    for name, value in values.items():
        V = V.at[int(name[1:], 16)].set(value)
    return state.replace(V=V)


def rom(*words):
    """Assemble 16-bit opcodes into big-endian ROM bytes."""
    return b"".join(word.to_bytes(2, "big") for word in words)
