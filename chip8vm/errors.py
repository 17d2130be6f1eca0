"""Exceptions raised by the CHIP-8 core.

Every error the interpreter can raise is a :class:`FatalPreconditionError`.
They signal a malformed ROM or a bug in the caller, so the core never catches
them: execution stops at the faulting instruction.
"""


class Chip8Error(Exception):
    """Base class for all chip8vm errors."""


class FatalPreconditionError(Chip8Error):
    """An unrecoverable violation of an interpreter precondition."""


class InvalidOpcodeError(FatalPreconditionError):
    """Opcode matches no instruction of its family."""

    def __init__(self, opcode: int, address: int = None):
        self.opcode = opcode
        self.address = address
        where = f" at 0x{address:03X}" if address is not None else ""
        super().__init__(f"Unknown opcode 0x{opcode:04X}{where}")


class MemoryAccessError(FatalPreconditionError):
    """Access outside the 4KB address space."""

    def __init__(self, address: int, length: int = 1):
        self.address = address
        self.length = length
        super().__init__(
            f"Invalid memory access of {length} byte(s) at 0x{address:X}"
        )


class RegisterIndexError(FatalPreconditionError):
    """Register index outside V0..VF."""

    def __init__(self, index: int):
        self.index = index
        super().__init__(f"Invalid register V{index:X} (0xF is the max)")


class StackOverflowError(FatalPreconditionError):
    """Push onto a full return stack."""

    def __init__(self, capacity: int):
        self.capacity = capacity
        super().__init__(f"Attempting to push when stack is full ({capacity} entries)")


class StackUnderflowError(FatalPreconditionError):
    """Pop from an empty return stack."""

    def __init__(self):
        super().__init__("Attempting to pop empty stack")


class InvalidKeyError(FatalPreconditionError):
    """Key outside the 16-key keypad."""

    def __init__(self, key: int):
        self.key = key
        super().__init__(f"Invalid key 0x{key:X} (keys are 0x0-0xF)")


class SessionHaltedError(Chip8Error):
    """Cycle requested on a session that already hit a fatal error."""

    def __init__(self, cause: FatalPreconditionError):
        self.cause = cause
        super().__init__(f"Session halted after fatal error: {cause}. Call reset() to restart.")
