"""The 35 CHIP-8 instruction handlers.

Each handler receives a decoded ``Instruction`` and mutates the machine. The
program counter has already been advanced past the instruction when a handler
runs. Handlers that touch memory check their whole window first so a fault
leaves no partial effects.
"""

from .config import WIDTH, HEIGHT, FLAG, FONTSET_SIZE, GLYPH_SIZE, log


class InstructionSet:
    """Opcode handlers, mixed into the machine that owns the state."""

    # ---- 0x0 family (exact match) ----

    # 0000 - NOP
    def op_NOP(self, ins):
        pass

    # 00E0 - CLS
    def op_CLS(self, ins):
        self.vram[:] = False
        log("Clear the display")

    # 00EE - RET
    def op_RET(self, ins):
        self.pc = self.pop()
        log("Return to", hex(self.pc))

    # ---- 0xF000 families ----

    # 1nnn - JP addr
    def op_JP(self, ins):
        self.pc = ins.nnn
        log("Jump to address", hex(ins.nnn))

    # 2nnn - CALL addr
    def op_CALL(self, ins):
        self.push(self.pc)
        self.pc = ins.nnn
        log("Call subroutine at", hex(ins.nnn))

    # 3xkk - SE Vx, byte
    def op_SE_Vx_kk(self, ins):
        if self.V[ins.x] == ins.kk:
            self.pc = (self.pc + 2) & 0xFFFF

    # 4xkk - SNE Vx, byte
    def op_SNE_Vx_kk(self, ins):
        if self.V[ins.x] != ins.kk:
            self.pc = (self.pc + 2) & 0xFFFF

    # 6xkk - LD Vx, byte
    def op_LD_Vx_kk(self, ins):
        self.V[ins.x] = ins.kk

    # 7xkk - ADD Vx, byte (no carry flag)
    def op_ADD_Vx_kk(self, ins):
        self.V[ins.x] = (self.V[ins.x] + ins.kk) & 0xFF

    # Annn - LD I, addr
    def op_LD_I(self, ins):
        self.I = ins.nnn

    # Bnnn - JP V0, addr
    def op_JP_V0(self, ins):
        self.pc = (self.V[0] + ins.nnn) & 0xFFFF
        log(f"Jump to address V0 + {ins.nnn:03X} = {self.pc:03X}")

    # Cxkk - RND Vx, byte
    def op_RND(self, ins):
        self.V[ins.x] = self.rng.getrandbits(8) & ins.kk

    # Dxyn - DRW Vx, Vy, nibble
    def op_DRW(self, ins):
        """XOR an n-byte sprite from memory[I] onto the screen at (Vx, Vy).

        Pixels wrap around both edges. VF is set to 1 if any lit pixel was
        erased by this draw and to 0 otherwise.
        """
        sprite = self.read(self.I, ins.n)
        px = self.V[ins.x]
        py = self.V[ins.y]
        collision = False
        for row, bits in enumerate(sprite):
            base = ((py + row) % HEIGHT) * WIDTH
            for bit in range(8):
                if bits & (0x80 >> bit):
                    idx = base + (px + bit) % WIDTH
                    collision = collision or bool(self.vram[idx])
                    self.vram[idx] = not self.vram[idx]
        self.V[FLAG] = 1 if collision else 0
        log(f"Drew sprite, collision={self.V[FLAG]}")

    # ---- 0xF00F families ----

    # 5xy0 - SE Vx, Vy
    def op_SE_Vx_Vy(self, ins):
        if self.V[ins.x] == self.V[ins.y]:
            self.pc = (self.pc + 2) & 0xFFFF

    # 9xy0 - SNE Vx, Vy
    def op_SNE_Vx_Vy(self, ins):
        if self.V[ins.x] != self.V[ins.y]:
            self.pc = (self.pc + 2) & 0xFFFF

    # 8xy0 - LD Vx, Vy
    def op_LD_Vx_Vy(self, ins):
        self.V[ins.x] = self.V[ins.y]

    # 8xy1 - OR Vx, Vy
    def op_OR(self, ins):
        self.V[ins.x] |= self.V[ins.y]

    # 8xy2 - AND Vx, Vy
    def op_AND(self, ins):
        self.V[ins.x] &= self.V[ins.y]

    # 8xy3 - XOR Vx, Vy
    def op_XOR(self, ins):
        self.V[ins.x] ^= self.V[ins.y]

    # VF is always written, then Vx, so a VF destination keeps the result.

    # 8xy4 - ADD Vx, Vy with carry
    def op_ADD(self, ins):
        total = self.V[ins.x] + self.V[ins.y]
        self.V[FLAG] = 1 if total > 0xFF else 0
        self.V[ins.x] = total & 0xFF

    # 8xy5 - SUB Vx, Vy, VF = NOT borrow
    def op_SUB(self, ins):
        vx, vy = self.V[ins.x], self.V[ins.y]
        self.V[FLAG] = 1 if vx >= vy else 0
        self.V[ins.x] = (vx - vy) & 0xFF

    # 8xy6 - SHR Vx, VF = bit shifted out
    def op_SHR(self, ins):
        vx = self.V[ins.x]
        self.V[FLAG] = vx & 1
        self.V[ins.x] = vx >> 1

    # 8xy7 - SUBN Vx, Vy, VF = NOT borrow
    def op_SUBN(self, ins):
        vx, vy = self.V[ins.x], self.V[ins.y]
        self.V[FLAG] = 1 if vy >= vx else 0
        self.V[ins.x] = (vy - vx) & 0xFF

    # 8xyE - SHL Vx, VF = bit shifted out
    def op_SHL(self, ins):
        vx = self.V[ins.x]
        self.V[FLAG] = (vx >> 7) & 1
        self.V[ins.x] = (vx << 1) & 0xFF

    # ---- 0xF0FF families ----

    # Ex9E - SKP Vx
    def op_SKP(self, ins):
        if self.keys[self.V[ins.x] & 0xF]:
            self.pc = (self.pc + 2) & 0xFFFF

    # ExA1 - SKNP Vx
    def op_SKNP(self, ins):
        if not self.keys[self.V[ins.x] & 0xF]:
            self.pc = (self.pc + 2) & 0xFFFF

    # Fx07 - LD Vx, DT
    def op_LD_Vx_DT(self, ins):
        self.V[ins.x] = self.delay_timer

    # Fx0A - LD Vx, K
    def op_WAITKEY(self, ins):
        # no real blocking: rewind and re-run this instruction next tick
        for i, down in enumerate(self.keys):
            if down:
                self.V[ins.x] = i
                log(f"Key {i:X} -> V{ins.x:X}")
                return
        self.pc = (self.pc - 2) & 0xFFFF

    # Fx15 - LD DT, Vx
    def op_LD_DT_Vx(self, ins):
        self.delay_timer = self.V[ins.x]

    # Fx18 - LD ST, Vx
    def op_LD_ST_Vx(self, ins):
        self.sound_timer = self.V[ins.x]

    # Fx1E - ADD I, Vx
    def op_ADD_I_Vx(self, ins):
        self.I = (self.I + self.V[ins.x]) & 0xFFFF

    # Fx29 - LD F, Vx
    def op_FONT(self, ins):
        self.I = (self.V[ins.x] * GLYPH_SIZE) % FONTSET_SIZE

    # Fx33 - LD B, Vx
    def op_BCD(self, ins):
        v = self.V[ins.x]
        self.write(self.I, (v // 100, (v // 10) % 10, v % 10))

    # Fx55 - LD [I], Vx
    def op_STORE(self, ins):
        self.write(self.I, self.V[:ins.x + 1])

    # Fx65 - LD Vx, [I]
    def op_LOAD(self, ins):
        self.V[:ins.x + 1] = list(self.read(self.I, ins.x + 1))
