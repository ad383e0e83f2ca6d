"""Fatal execution errors.

Every error leaves the machine at the faulting instruction; the host decides
whether to reset or stop.
"""


class Chip8Error(Exception):
    """Base class for everything the core raises while running a program."""


class UnimplementedOpcode(Chip8Error):
    def __init__(self, opcode, address):
        self.opcode = opcode
        self.address = address
        super().__init__("Unknown opcode: %04X at 0x%03X" % (opcode, address))


class MemoryOutOfBounds(Chip8Error):
    def __init__(self, address, length=1):
        self.address = address
        self.length = length
        super().__init__("Memory access out of bounds: 0x%04X (+%d)" % (address, length))


class StackOverflow(Chip8Error):
    def __init__(self, address):
        self.address = address
        super().__init__("Stack overflow pushing return address 0x%03X" % address)


class StackUnderflow(Chip8Error):
    def __init__(self):
        super().__init__("Stack underflow on RET")


class LoadTooLarge(Chip8Error):
    def __init__(self, size, limit):
        self.size = size
        self.limit = limit
        super().__init__("ROM is %d bytes, at most %d fit" % (size, limit))
