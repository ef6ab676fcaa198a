''' Word -> Instruction decoding '''

from dataclasses import dataclass

from chipvm.common.ops import Op, ALU_OPS, KEY_OPS, MISC_OPS, NNN_OPS, XKK_OPS
from chipvm.runtime.faults import UnknownInstruction


@dataclass(frozen=True)
class Instruction:
    op: Op
    word: int

    @property
    def x(self) -> int:
        return (self.word >> 8) & 0xF

    @property
    def y(self) -> int:
        return (self.word >> 4) & 0xF

    @property
    def n(self) -> int:
        return self.word & 0xF

    @property
    def kk(self) -> int:
        return self.word & 0xFF

    @property
    def nnn(self) -> int:
        return self.word & 0xFFF


def classify(word: int) -> Op | None:
    group = word >> 12
    low = word & 0xFF

    if word == 0x00E0:
        return Op.CLS

    if word == 0x00EE:
        return Op.RET

    if group in NNN_OPS:
        return NNN_OPS[group]

    if group in XKK_OPS:
        return XKK_OPS[group]

    if group == 0x5 and word & 0xF == 0:
        return Op.SE_REG

    if group == 0x9 and word & 0xF == 0:
        return Op.SNE_REG

    if group == 0x8:
        return ALU_OPS.get(word & 0xF)

    if group == 0xD:
        return Op.DRW

    if group == 0xE:
        return KEY_OPS.get(low)

    if group == 0xF:
        return MISC_OPS.get(low)

    return None


def decode(word: int, address: int) -> Instruction:
    op = classify(word)

    if op is None:
        raise UnknownInstruction(word, address)

    return Instruction(op, word)
