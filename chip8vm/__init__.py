from .cpu import Chip8
from .decode import Instruction, decode
from .errors import (
    Chip8Error, UnimplementedOpcode, MemoryOutOfBounds, StackOverflow,
    StackUnderflow, LoadTooLarge,
)

__version__ = "0.1.0"
