"""CHIP-8 return-address stack."""

import jax.numpy as jnp
from flax.struct import PyTreeNode, field

from chip8vm.constants import STACK_SIZE
from chip8vm.errors import StackOverflowError, StackUnderflowError


class StackState(PyTreeNode):
    """Fixed capacity stack of 16-bit return addresses."""
    data: jnp.ndarray
    pointer: int = field(pytree_node=False, default=0)

    @classmethod
    def create(cls, capacity: int = STACK_SIZE) -> "StackState":
        return cls(data=jnp.zeros(capacity, dtype=jnp.uint16))

    @property
    def capacity(self) -> int:
        return self.data.shape[0]


def push(stack: StackState, address) -> StackState:
    """Push address onto stack."""
    if stack.pointer >= stack.capacity:
        raise StackOverflowError(stack.capacity)
    new_data = stack.data.at[stack.pointer].set(jnp.asarray(address).astype(jnp.uint16))
    return stack.replace(data=new_data, pointer=stack.pointer + 1)


def pop(stack: StackState) -> tuple[StackState, jnp.ndarray]:
    """Pop address from stack."""
    if stack.pointer == 0:
        raise StackUnderflowError()
    new_pointer = stack.pointer - 1
    popped_address = stack.data[new_pointer]
    new_data = stack.data.at[new_pointer].set(0)
    return stack.replace(data=new_data, pointer=new_pointer), popped_address
