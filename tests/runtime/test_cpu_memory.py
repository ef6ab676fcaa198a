from chipvm.common.hwconf import FONT, FONT_BASE
from chipvm.runtime.config import Settings, Quirks

from unit_utils import machine_with, words


def test_bcd():
    m = machine_with(words(0x60FE, 0xA300, 0xF033))
    m.run(1, 3)

    assert m.memory.read_block(0x300, 3) == bytes([2, 5, 4])


def test_store_and_load_registers_keep_i():
    m = machine_with(words(0x6011, 0x6122, 0x6233, 0xA400, 0xF255, 0x6000, 0x6100, 0xF165))
    m.run(1, 8)

    assert m.memory.read_block(0x400, 4) == bytes([0x11, 0x22, 0x33, 0x00])
    assert m.regs.v[:3] == [0x11, 0x22, 0x33]
    assert m.regs.i == 0x400


def test_store_and_load_increment_quirk():
    settings = Settings(quirks=Quirks(load_store_increments_i=True))
    m = machine_with(words(0x6011, 0x6122, 0xA400, 0xF155, 0xF065), settings)
    m.run(1, 5)

    assert m.regs.v[0] == 0x00
    assert m.regs.i == 0x403


def test_font_lookup():
    m = machine_with(words(0x601A, 0xF029))
    m.run(1, 2)

    assert m.regs.i == FONT_BASE + 0xA * 5
    assert m.memory.read_block(m.regs.i, 5) == FONT[50:55]
