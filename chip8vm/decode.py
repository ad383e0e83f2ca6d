"""CHIP-8 instruction decoding.

CHIP-8 packs an immediate byte, a second register plus a sub-opcode nibble,
or nothing into the low bits depending on the first nibble. The first nibble
picks the mask that turns the raw word into a dispatch key.
"""

from collections import namedtuple

Instruction = namedtuple("Instruction", "raw key x y n kk nnn")

# first nibble -> dispatch mask
FAMILY_MASKS = {
    0x0: 0xFFFF,                                    # 00E0, 00EE, 0000
    0x1: 0xF000, 0x2: 0xF000, 0x3: 0xF000, 0x4: 0xF000,
    0x6: 0xF000, 0x7: 0xF000, 0xA: 0xF000, 0xB: 0xF000,
    0xC: 0xF000, 0xD: 0xF000,                       # x, kk / y, n / nnn
    0x5: 0xF00F, 0x8: 0xF00F, 0x9: 0xF00F,          # x, y + sub-opcode
    0xE: 0xF0FF, 0xF: 0xF0FF,                       # x + sub-opcode byte
}


def nibbles(opcode):
    # 0xABCD -> 0xA, 0xB, 0xC, 0xD
    return (opcode >> 12) & 0xF, (opcode >> 8) & 0xF, (opcode >> 4) & 0xF, opcode & 0xF


def dispatch_mask(opcode):
    return FAMILY_MASKS[(opcode >> 12) & 0xF]


def decode(opcode):
    """Split a 16-bit word into its dispatch key and operand fields."""
    opcode &= 0xFFFF
    _, d2, d3, d4 = nibbles(opcode)
    return Instruction(
        raw=opcode,
        key=opcode & dispatch_mask(opcode),
        x=d2,
        y=d3,
        n=d4,
        kk=opcode & 0xFF,
        nnn=opcode & 0x0FFF,
    )
