import numpy as np

from .config import (
    WIDTH, HEIGHT, MEMORY_SIZE, START_ADDR, NUM_REGS, STACK_SIZE, NUM_KEYS,
    FONTSET, FONTSET_SIZE,
)
from .errors import MemoryOutOfBounds, StackOverflow, StackUnderflow


class MachineState:
    """Register file, memory, stack, timers, keypad and framebuffer.

    Pure data plus the bounds-checked accessors the instructions share.
    """

    def __init__(self):
        self.reset()

    def reset(self):
        # ---- CPU state ----
        self.memory = bytearray(MEMORY_SIZE)
        self.V = [0] * NUM_REGS             # V0..VF
        self.I = 0                          # index register (memory pointer)
        self.pc = START_ADDR
        self.stack = np.zeros(STACK_SIZE, dtype=np.uint16)
        self.sp = 0                         # next free slot, 0 = empty
        self.delay_timer = 0
        self.sound_timer = 0
        self.keys = np.zeros(NUM_KEYS, dtype=bool)
        self.vram = np.zeros(WIDTH * HEIGHT, dtype=bool)

        # Load fontset into memory
        self.memory[:FONTSET_SIZE] = FONTSET

    # ---- Stack ----
    def push(self, addr):
        if self.sp >= STACK_SIZE:
            raise StackOverflow(addr)
        self.stack[self.sp] = addr
        self.sp += 1

    def pop(self):
        if self.sp == 0:
            raise StackUnderflow()
        self.sp -= 1
        return int(self.stack[self.sp])

    # ---- Memory ----
    def check_range(self, address, length=1):
        if address < 0 or address + length > MEMORY_SIZE:
            raise MemoryOutOfBounds(address, length)

    def read(self, address, length):
        self.check_range(address, length)
        return self.memory[address:address + length]

    def write(self, address, data):
        # the font table is read-only for programs
        if address < FONTSET_SIZE:
            raise MemoryOutOfBounds(address, len(data))
        self.check_range(address, len(data))
        self.memory[address:address + len(data)] = data
