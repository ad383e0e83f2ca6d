import random

from .config import START_ADDR, MEMORY_SIZE, NUM_KEYS, key_index, log
from .decode import decode
from .dispatch import lookup
from .errors import Chip8Error, LoadTooLarge
from .instructions import InstructionSet
from .state import MachineState


class Chip8(MachineState, InstructionSet):
    """One CHIP-8 machine and the only operations a host calls on it.

    load() a ROM, then call tick() at the instruction rate and tick_timers()
    at 60 Hz. Feed keys with key_event() and read snapshot() for drawing.
    Nothing here schedules itself.

    ``rng`` feeds RND and is not part of the machine state: reset() keeps
    it as is, so random values do not replay after a reset.
    """

    def __init__(self, rng=None):
        self.rng = rng if rng is not None else random.Random()
        super().__init__()

    def reset(self):
        super().reset()
        self.fault = None

    @property
    def halted(self):
        return self.fault is not None

    @property
    def sound_active(self):
        return self.sound_timer > 0

    # ---- Load ROM ----
    def load(self, rom):
        rom = bytes(rom)
        limit = MEMORY_SIZE - START_ADDR
        if len(rom) > limit:
            raise LoadTooLarge(len(rom), limit)
        self.memory[START_ADDR:START_ADDR + len(rom)] = rom
        log("Loaded ROM:", len(rom), "bytes")

    # ---- Cycle ----
    def fetch(self):
        hi, lo = self.read(self.pc, 2)
        self.pc = (self.pc + 2) & 0xFFFF
        return (hi << 8) | lo

    def tick(self):
        """Fetch, decode and execute exactly one instruction.

        A Chip8Error halts the machine with PC left on the faulting
        instruction; every later tick() raises it again until reset().
        """
        if self.fault is not None:
            raise self.fault
        address = self.pc
        try:
            opcode = self.fetch()
            ins = decode(opcode)
            lookup(ins, address)(self, ins)
        except Chip8Error as e:
            self.pc = address
            self.fault = e
            log("Emulation error:", e)
            raise

    # ---- timers ----
    def tick_timers(self):
        if self.delay_timer > 0:
            self.delay_timer -= 1
        if self.sound_timer > 0:
            self.sound_timer -= 1

    # ---- Input ----
    def key_event(self, index, pressed):
        if not 0 <= index < NUM_KEYS:
            raise ValueError("key index out of range: %r" % (index,))
        self.keys[index] = bool(pressed)

    def key_event_by_name(self, name, pressed):
        """Press or release a key by its keyboard name; False if unbound."""
        index = key_index(name)
        if index is None:
            return False
        self.key_event(index, pressed)
        return True

    # ---- Output ----
    def snapshot(self):
        return self.vram.copy()
