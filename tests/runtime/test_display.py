from chipvm.common.hwconf import FONT
from chipvm.runtime.display import Display

from unit_utils import machine_with, words


def lit(display: Display) -> set[tuple[int, int]]:
    return {
        (x, y)
        for y, row in enumerate(display.pixels)
        for x, pixel in enumerate(row)
        if pixel
    }


def test_draw_sprite_bits():
    d = Display()
    collision = d.draw_sprite(2, 1, bytes([0b10100000, 0b01000000]))

    assert not collision
    assert lit(d) == {(2, 1), (4, 1), (3, 2)}


def test_draw_wraps_both_edges():
    d = Display()
    d.draw_sprite(62, 31, bytes([0xFF, 0x80]))

    assert lit(d) == {(62, 31), (63, 31)} | {(x, 31) for x in range(0, 6)} | {(62, 0)}


def test_start_coordinates_wrap():
    d = Display()
    d.draw_sprite(64 + 3, 32 + 2, bytes([0x80]))

    assert lit(d) == {(3, 2)}


def test_double_draw_restores_and_collides():
    d = Display()
    d.draw_sprite(10, 10, bytes([0x3C]))
    before = d.snapshot()

    d.draw_sprite(20, 5, FONT[0:5])
    assert d.draw_sprite(20, 5, FONT[0:5])

    assert d.snapshot() == before


def test_empty_sprite_never_collides():
    d = Display()
    d.draw_sprite(0, 0, bytes([0xFF]))

    assert not d.draw_sprite(0, 0, bytes([0x00, 0x00]))


def test_drw_sets_flag_and_cls_clears():
    # I -> glyph 0, draw twice, then clear
    m = machine_with(words(0x6000, 0xF029, 0xD005, 0xD005, 0xD005, 0x00E0))

    m.run(1, 3)
    assert m.regs.v[0xF] == 0
    assert any(any(row) for row in m.framebuffer())

    m.step()
    assert m.regs.v[0xF] == 1
    assert not any(any(row) for row in m.framebuffer())

    m.step()
    m.step()
    assert not any(any(row) for row in m.framebuffer())


def test_zero_row_draw():
    m = machine_with(words(0x6F01, 0xD000))
    m.run(1, 2)

    assert m.regs.v[0xF] == 0
    assert not any(any(row) for row in m.framebuffer())


def test_snapshot_is_a_copy():
    d = Display()
    frame = d.snapshot()
    d.draw_sprite(0, 0, bytes([0x80]))

    assert frame[0][0] is False
    assert d.snapshot()[0][0] is True
    assert len(frame) == 32 and len(frame[0]) == 64


def test_render_text():
    d = Display(width=4, height=2)
    d.draw_sprite(1, 1, bytes([0x80]))

    assert d.render_text() == '....\n.#..'
