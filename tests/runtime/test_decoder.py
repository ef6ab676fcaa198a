import pytest

from chipvm.common.ops import Op
from chipvm.runtime.decoder import decode, classify
from chipvm.runtime.faults import UnknownInstruction


@pytest.mark.parametrize('word, op', [
    (0x00E0, Op.CLS),
    (0x00EE, Op.RET),
    (0x1234, Op.JP),
    (0x2ABC, Op.CALL),
    (0x3A10, Op.SE_BYTE),
    (0x4A10, Op.SNE_BYTE),
    (0x5120, Op.SE_REG),
    (0x6A55, Op.LD_BYTE),
    (0x7A01, Op.ADD_BYTE),
    (0x8120, Op.LD_REG),
    (0x8121, Op.OR),
    (0x8122, Op.AND),
    (0x8123, Op.XOR),
    (0x8124, Op.ADD_REG),
    (0x8125, Op.SUB),
    (0x8126, Op.SHR),
    (0x8127, Op.SUBN),
    (0x812E, Op.SHL),
    (0x9120, Op.SNE_REG),
    (0xA22A, Op.LD_I),
    (0xB300, Op.JP_V0),
    (0xC3FF, Op.RND),
    (0xD015, Op.DRW),
    (0xE59E, Op.SKP),
    (0xE5A1, Op.SKNP),
    (0xF507, Op.LD_VX_DT),
    (0xF50A, Op.LD_KEY),
    (0xF515, Op.LD_DT),
    (0xF518, Op.LD_ST),
    (0xF51E, Op.ADD_I),
    (0xF529, Op.LD_F),
    (0xF533, Op.LD_BCD),
    (0xF555, Op.LD_MEM),
    (0xF565, Op.LD_REGS),
])
def test_classify(word, op):
    assert classify(word) == op


@pytest.mark.parametrize('word', [
    0xFFFF, 0x0000, 0x0123, 0x00E1, 0x5121, 0x912F, 0x8128, 0x812F, 0xE59F, 0xF500, 0xF566,
])
def test_unknown_words(word):
    with pytest.raises(UnknownInstruction) as e:
        decode(word, 0x2F0)

    assert e.value.word == word
    assert e.value.address == 0x2F0


def test_operand_fields():
    instr = decode(0xD12F, 0x200)

    assert instr.op == Op.DRW
    assert (instr.x, instr.y, instr.n) == (0x1, 0x2, 0xF)
    assert instr.kk == 0x2F
    assert instr.nnn == 0x12F
