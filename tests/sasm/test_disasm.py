from click.testing import CliRunner

import chipvm.sasm.asm as asm
import chipvm.sasm.disasm as disasm
from chipvm.runtime.decoder import decode

from unit_utils import words


SOURCE = '''
CLS
LD V1, #0A
DRW V1, V2, 5
LD [I], V3
JP V0, #300
SKNP VF
'''


def test_render():
    assert disasm.render(decode(0xD125, 0x200)) == 'DRW V1, V2, 5'
    assert disasm.render(decode(0xA22A, 0x200)) == 'LD I, #22A'


def test_unknown_word_as_data():
    assert disasm.render_word(0xFFFF) == 'DW #FFFF'


def test_disassembly_reassembles():
    binary = asm.assemble(SOURCE)
    text = '\n'.join(disasm.render_word(int.from_bytes(binary[n:n + 2], 'big')) for n in range(0, len(binary), 2))

    assert asm.assemble(text) == binary


def test_listing_odd_length():
    lines = list(disasm.listing(words(0x00E0) + bytes([0x12])))

    assert lines == ['200  00E0  CLS', '202  12    DB #12']


def test_disassemble_command(tmp_path):
    rom = tmp_path / 'rom.ch8'
    rom.write_bytes(words(0x6A01, 0xFFFF))

    result = CliRunner().invoke(disasm.disassemble, [str(rom)])

    assert result.exit_code == 0
    assert '200  6A01  LD VA, #01' in result.output
    assert '202  FFFF  DW #FFFF' in result.output
