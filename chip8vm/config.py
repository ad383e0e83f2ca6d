# CHIP8 machine constants, fixed tables and host knobs.
# Memory - 4096 bytes: fonts at the bottom, programs from 0x200 up.
# Display - 64x32 pixels that are either on or off.

# ---- Machine ----
WIDTH, HEIGHT = 64, 32
MEMORY_SIZE = 4096
START_ADDR = 0x200      # programs are loaded here (Cowgod's reference)
NUM_REGS = 16
STACK_SIZE = 16
NUM_KEYS = 16
FLAG = 0xF              # VF, carry/borrow/collision

# ---- Host ----
scale = 10
CPU_HZ = 600
TIMER_HZ = 60

# set fonts (binary pixel patterns)
FONTSET = bytes([
    0xF0, 0x90, 0x90, 0x90, 0xF0,  # 0
    0x20, 0x60, 0x20, 0x20, 0x70,  # 1
    0xF0, 0x10, 0xF0, 0x80, 0xF0,  # 2
    0xF0, 0x10, 0xF0, 0x10, 0xF0,  # 3
    0x90, 0x90, 0xF0, 0x10, 0x10,  # 4
    0xF0, 0x80, 0xF0, 0x10, 0xF0,  # 5
    0xF0, 0x80, 0xF0, 0x90, 0xF0,  # 6
    0xF0, 0x10, 0x20, 0x40, 0x40,  # 7
    0xF0, 0x90, 0xF0, 0x90, 0xF0,  # 8
    0xF0, 0x90, 0xF0, 0x10, 0xF0,  # 9
    0xF0, 0x90, 0xF0, 0x90, 0x90,  # A
    0xE0, 0x90, 0xE0, 0x90, 0xE0,  # B
    0xF0, 0x80, 0x80, 0x80, 0xF0,  # C
    0xE0, 0x90, 0x90, 0x90, 0xE0,  # D
    0xF0, 0x80, 0xF0, 0x80, 0xF0,  # E
    0xF0, 0x80, 0xF0, 0x80, 0x80,  # F
])  # notice 80 bytes
FONTSET_SIZE = len(FONTSET)
GLYPH_SIZE = 5

# map binding keys (keyboard layout -> CHIP-8 keypad)
#   1 2 3 4        1 2 3 C
#   q w e r   ->   4 5 6 D
#   a s d f        7 8 9 E
#   z x c v        A 0 B F
KEYMAP = {
    "1": 0x1, "2": 0x2, "3": 0x3, "4": 0xC,
    "q": 0x4, "w": 0x5, "e": 0x6, "r": 0xD,
    "a": 0x7, "s": 0x8, "d": 0x9, "f": 0xE,
    "z": 0xA, "x": 0x0, "c": 0xB, "v": 0xF,
}


def key_index(name):
    """Keypad index for a key name, or None when the name is not bound."""
    return KEYMAP.get(name.lower())


# make it true if you want the logs
logs_on = False


def log(*args):
    if logs_on:
        print(*args)


def set_logs(on):
    global logs_on
    logs_on = bool(on)
    return logs_on
