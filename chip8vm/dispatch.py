from .errors import UnimplementedOpcode
from .instructions import InstructionSet as op

# dispatch table: masked opcode -> handler (35 entries)
OPCODES = {
    0x0000: op.op_NOP,        # 0000 - do nothing
    0x00E0: op.op_CLS,        # 00E0 - Clear the screen
    0x00EE: op.op_RET,        # 00EE - Return from a subroutine

    0x1000: op.op_JP,         # 1nnn - Jump to a specific memory address
    0x2000: op.op_CALL,       # 2nnn - Call a subroutine at a memory address
    0x3000: op.op_SE_Vx_kk,   # 3xkk - Skip next if a register equals a number
    0x4000: op.op_SNE_Vx_kk,  # 4xkk - Skip next if a register does NOT equal a number
    0x5000: op.op_SE_Vx_Vy,   # 5xy0 - Skip next if two registers are equal
    0x6000: op.op_LD_Vx_kk,   # 6xkk - Set a register to a number
    0x7000: op.op_ADD_Vx_kk,  # 7xkk - Add a number to a register

    0x8000: op.op_LD_Vx_Vy,   # 8xy0 - Copy Vy into Vx
    0x8001: op.op_OR,         # 8xy1
    0x8002: op.op_AND,        # 8xy2
    0x8003: op.op_XOR,        # 8xy3
    0x8004: op.op_ADD,        # 8xy4 - Add with carry
    0x8005: op.op_SUB,        # 8xy5 - Vx - Vy, VF = NOT borrow
    0x8006: op.op_SHR,        # 8xy6
    0x8007: op.op_SUBN,       # 8xy7 - Vy - Vx, VF = NOT borrow
    0x800E: op.op_SHL,        # 8xyE

    0x9000: op.op_SNE_Vx_Vy,  # 9xy0 - Skip next if two registers are NOT equal
    0xA000: op.op_LD_I,       # Annn - Set I to an address
    0xB000: op.op_JP_V0,      # Bnnn - Jump to an address plus V0
    0xC000: op.op_RND,        # Cxkk - Random number ANDed with a value
    0xD000: op.op_DRW,        # Dxyn - Draw a sprite at (Vx, Vy)

    0xE09E: op.op_SKP,        # Ex9E - Skip next if key Vx is pressed
    0xE0A1: op.op_SKNP,       # ExA1 - Skip next if key Vx is not pressed

    0xF007: op.op_LD_Vx_DT,   # Fx07 - Read the delay timer
    0xF00A: op.op_WAITKEY,    # Fx0A - Wait for a key press
    0xF015: op.op_LD_DT_Vx,   # Fx15 - Set the delay timer
    0xF018: op.op_LD_ST_Vx,   # Fx18 - Set the sound timer
    0xF01E: op.op_ADD_I_Vx,   # Fx1E - I += Vx
    0xF029: op.op_FONT,       # Fx29 - Point I at the glyph for Vx
    0xF033: op.op_BCD,        # Fx33 - Store BCD of Vx at I..I+2
    0xF055: op.op_STORE,      # Fx55 - Store V0..Vx at I
    0xF065: op.op_LOAD,       # Fx65 - Load V0..Vx from I
}


def lookup(instruction, address):
    """Handler for a decoded instruction; unknown keys are fatal."""
    handler = OPCODES.get(instruction.key)
    if handler is None:
        raise UnimplementedOpcode(instruction.raw, address)
    return handler
