import logging as lg
from typing import Callable, TypeAlias

from chipvm.common.ops import Op
from chipvm.common.hwconf import FLAG_REG, FONT_BASE, FONT_GLYPH_SIZE
from chipvm.runtime.config import Quirks
from chipvm.runtime.decoder import Instruction, decode
from chipvm.runtime.display import Display
from chipvm.runtime.keypad import Keypad
from chipvm.runtime.memory import Memory
from chipvm.runtime.mnemonics import render
from chipvm.runtime.registers import Registers
from chipvm.runtime.timers import Timers


ByteSource: TypeAlias = Callable[[], int]


class CPU():
    memory: Memory
    regs: Registers
    timers: Timers
    display: Display
    keypad: Keypad
    quirks: Quirks
    rng: ByteSource         # Uniform byte generator for RND
    waiting: int | None     # Register awaiting a key press
    fetched_at: int         # Address of the instruction being executed
    trace: bool

    def __init__(
        self,
        memory: Memory,
        regs: Registers,
        timers: Timers,
        display: Display,
        keypad: Keypad,
        quirks: Quirks,
        rng: ByteSource,
        trace: bool = False
    ):
        self.memory = memory
        self.regs = regs
        self.timers = timers
        self.display = display
        self.keypad = keypad
        self.quirks = quirks
        self.rng = rng
        self.trace = trace

        self.waiting = None
        self.fetched_at = regs.pc

    # - Helpers - #

    def set_flag(self, val: int):
        self.regs.v[FLAG_REG] = val

    def skip_if(self, cond: bool):
        if cond:
            self.regs.advance()

    def shift_source(self, instr: Instruction) -> int:
        if self.quirks.shift_uses_vy:
            return self.regs.v[instr.y]

        return self.regs.v[instr.x]

    def logic(self, instr: Instruction, op: Callable[[int, int], int]):
        v = self.regs.v
        v[instr.x] = op(v[instr.x], v[instr.y])

        if self.quirks.logic_resets_vf:
            self.set_flag(0)

    # - Flow - #

    def cls(self, instr: Instruction):
        self.display.clear()

    def ret(self, instr: Instruction):
        self.regs.jump(self.regs.pop(self.fetched_at))

    def jp(self, instr: Instruction):
        self.regs.jump(instr.nnn)

    def call(self, instr: Instruction):
        self.regs.push(self.regs.pc, self.fetched_at)
        self.regs.jump(instr.nnn)

    def jp_v0(self, instr: Instruction):
        offset_reg = instr.x if self.quirks.jump_uses_vx else 0
        self.regs.jump(instr.nnn + self.regs.v[offset_reg])

    # - Skips - #

    def se_byte(self, instr: Instruction):
        self.skip_if(self.regs.v[instr.x] == instr.kk)

    def sne_byte(self, instr: Instruction):
        self.skip_if(self.regs.v[instr.x] != instr.kk)

    def se_reg(self, instr: Instruction):
        self.skip_if(self.regs.v[instr.x] == self.regs.v[instr.y])

    def sne_reg(self, instr: Instruction):
        self.skip_if(self.regs.v[instr.x] != self.regs.v[instr.y])

    def skp(self, instr: Instruction):
        self.skip_if(self.keypad.is_pressed(self.regs.v[instr.x]))

    def sknp(self, instr: Instruction):
        self.skip_if(not self.keypad.is_pressed(self.regs.v[instr.x]))

    # - Loads - #

    def ld_byte(self, instr: Instruction):
        self.regs.v[instr.x] = instr.kk

    def ld_reg(self, instr: Instruction):
        self.regs.v[instr.x] = self.regs.v[instr.y]

    def ld_i(self, instr: Instruction):
        self.regs.i = instr.nnn

    def ld_vx_dt(self, instr: Instruction):
        self.regs.v[instr.x] = self.timers.delay

    def ld_key(self, instr: Instruction):
        # Stay on this instruction until poll_key sees a press
        self.waiting = instr.x
        self.keypad.arm()
        self.regs.jump(self.fetched_at)

    def ld_dt(self, instr: Instruction):
        self.timers.set_delay(self.regs.v[instr.x])

    def ld_st(self, instr: Instruction):
        self.timers.set_sound(self.regs.v[instr.x])

    def ld_f(self, instr: Instruction):
        self.regs.i = FONT_BASE + (self.regs.v[instr.x] & 0xF) * FONT_GLYPH_SIZE

    def ld_bcd(self, instr: Instruction):
        val = self.regs.v[instr.x]
        self.memory.write_block(self.regs.i, bytes([val // 100, val // 10 % 10, val % 10]))

    def ld_mem(self, instr: Instruction):
        self.memory.write_block(self.regs.i, bytes(self.regs.v[:instr.x + 1]))

        if self.quirks.load_store_increments_i:
            self.regs.i = (self.regs.i + instr.x + 1) & 0xFFFF

    def ld_regs(self, instr: Instruction):
        block = self.memory.read_block(self.regs.i, instr.x + 1)
        self.regs.v[:instr.x + 1] = list(block)

        if self.quirks.load_store_increments_i:
            self.regs.i = (self.regs.i + instr.x + 1) & 0xFFFF

    # - Arithmetic - #

    def add_byte(self, instr: Instruction):
        v = self.regs.v
        v[instr.x] = (v[instr.x] + instr.kk) & 0xFF

    def bor(self, instr: Instruction):
        self.logic(instr, lambda a, b: a | b)

    def band(self, instr: Instruction):
        self.logic(instr, lambda a, b: a & b)

    def xor(self, instr: Instruction):
        self.logic(instr, lambda a, b: a ^ b)

    def add_reg(self, instr: Instruction):
        v = self.regs.v
        total = v[instr.x] + v[instr.y]
        v[instr.x] = total & 0xFF
        self.set_flag(1 if total > 0xFF else 0)

    def sub(self, instr: Instruction):
        v = self.regs.v
        a, b = v[instr.x], v[instr.y]
        v[instr.x] = (a - b) & 0xFF
        self.set_flag(1 if a >= b else 0)

    def subn(self, instr: Instruction):
        v = self.regs.v
        a, b = v[instr.x], v[instr.y]
        v[instr.x] = (b - a) & 0xFF
        self.set_flag(1 if b >= a else 0)

    def shr(self, instr: Instruction):
        src = self.shift_source(instr)
        self.regs.v[instr.x] = src >> 1
        self.set_flag(src & 0x01)

    def shl(self, instr: Instruction):
        src = self.shift_source(instr)
        self.regs.v[instr.x] = (src << 1) & 0xFF
        self.set_flag((src >> 7) & 0x01)

    def add_i(self, instr: Instruction):
        self.regs.i = (self.regs.i + self.regs.v[instr.x]) & 0xFFFF

    # - Misc - #

    def rnd(self, instr: Instruction):
        self.regs.v[instr.x] = self.rng() & 0xFF & instr.kk

    def drw(self, instr: Instruction):
        rows = self.memory.read_block(self.regs.i, instr.n)
        x = self.regs.v[instr.x]
        y = self.regs.v[instr.y]
        collision = self.display.draw_sprite(x, y, rows)
        self.set_flag(1 if collision else 0)

    HANDLERS = {
        Op.CLS: cls,
        Op.RET: ret,
        Op.JP: jp,
        Op.CALL: call,
        Op.JP_V0: jp_v0,

        Op.SE_BYTE: se_byte,
        Op.SNE_BYTE: sne_byte,
        Op.SE_REG: se_reg,
        Op.SNE_REG: sne_reg,
        Op.SKP: skp,
        Op.SKNP: sknp,

        Op.LD_BYTE: ld_byte,
        Op.LD_REG: ld_reg,
        Op.LD_I: ld_i,
        Op.LD_VX_DT: ld_vx_dt,
        Op.LD_KEY: ld_key,
        Op.LD_DT: ld_dt,
        Op.LD_ST: ld_st,
        Op.LD_F: ld_f,
        Op.LD_BCD: ld_bcd,
        Op.LD_MEM: ld_mem,
        Op.LD_REGS: ld_regs,

        Op.ADD_BYTE: add_byte,
        Op.OR: bor,
        Op.AND: band,
        Op.XOR: xor,
        Op.ADD_REG: add_reg,
        Op.SUB: sub,
        Op.SUBN: subn,
        Op.SHR: shr,
        Op.SHL: shl,
        Op.ADD_I: add_i,

        Op.RND: rnd,
        Op.DRW: drw
    }

    # -- Implementation -- #

    def reset(self):
        self.waiting = None
        self.fetched_at = self.regs.pc

    def poll_key(self) -> bool:
        if self.waiting is None:
            return True

        key = self.keypad.poll_press()

        if key is None:
            return False

        lg.debug(f'Key {key:X} -> V{self.waiting:X}')
        self.regs.v[self.waiting] = key
        self.waiting = None
        self.regs.advance()
        return True

    def exec_next(self):
        if not self.poll_key():
            return

        self.fetched_at = self.regs.pc
        word = self.memory.read_word(self.fetched_at)
        instr = decode(word, self.fetched_at)

        if self.trace:
            lg.debug(f'{self.fetched_at:03X}  {word:04X}  {render(instr)}')

        self.regs.advance()
        handler = self.HANDLERS[instr.op]
        handler(self, instr)
