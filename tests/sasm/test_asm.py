import pytest
from click.testing import CliRunner

import chipvm.sasm.asm as asm
import chipvm.sasm.masm as masm
from chipvm.sasm.fpp import AsmError

from unit_utils import words, find_file


@pytest.mark.parametrize('source, word', [
    ('CLS', 0x00E0),
    ('RET', 0x00EE),
    ('JP #234', 0x1234),
    ('JP V0, #300', 0xB300),
    ('CALL 0x2AB', 0x22AB),
    ('SE V3, 12', 0x330C),
    ('SNE VA, #FF', 0x4AFF),
    ('SE V1, V2', 0x5120),
    ('SNE v1, v2', 0x9120),
    ('LD V5, %1010', 0x650A),
    ('LD V5, V6', 0x8560),
    ('LD I, #22A', 0xA22A),
    ('LD V2, DT', 0xF207),
    ('LD V2, K', 0xF20A),
    ('LD DT, V2', 0xF215),
    ('LD ST, V2', 0xF218),
    ('LD F, V2', 0xF229),
    ('LD B, V2', 0xF233),
    ('LD [I], V2', 0xF255),
    ('LD V2, [I]', 0xF265),
    ('ADD V1, 1', 0x7101),
    ('ADD V1, V2', 0x8124),
    ('ADD I, V2', 0xF21E),
    ('OR V1, V2', 0x8121),
    ('AND V1, V2', 0x8122),
    ('XOR V1, V2', 0x8123),
    ('SUB V1, V2', 0x8125),
    ('SHR V1', 0x8106),
    ('SHR V1, V2', 0x8126),
    ('SUBN V1, V2', 0x8127),
    ('SHL V1', 0x810E),
    ('RND V0, #0F', 0xC00F),
    ('DRW V0, V1, 15', 0xD01F),
    ('SKP VE', 0xEE9E),
    ('sknp ve', 0xEEA1),
])
def test_single_instructions(source, word):
    assert asm.assemble(source) == words(word)


def test_labels_and_comments():
    source = '\n'.join([
        '; header comment',
        'start:  LD V0, 1   ; count',
        '        CALL sub',
        'loop:   JP loop',
        'sub:    RET',
        '',
    ])

    assert asm.assemble(source) == words(0x6001, 0x2206, 0x1204, 0x00EE)


def test_forward_label_for_index():
    source = 'LD I, data\nDRW V0, V0, 1\ndata: DB #80'

    assert asm.assemble(source) == words(0xA204, 0xD001) + bytes([0x80])


def test_org_pads():
    binary = asm.assemble('JP #200\nORG #208\nDB 1, 2')

    assert binary == words(0x1200) + bytes(6) + bytes([1, 2])


@pytest.mark.parametrize('source', [
    'FOO V1',
    'LD V1',
    'ADD V1, 256',
    'DRW V0, V1, 16',
    'JP V1, #300',
    'JP nowhere',
    'LD V0, somewhere',
    'a: CLS\na: CLS',
    'JP #200\nORG #100',
    'LD V0, 1 2',
    'DB 300',
])
def test_errors(source):
    with pytest.raises(AsmError):
        asm.assemble(source)


def test_error_reports_line():
    with pytest.raises(AsmError) as e:
        asm.assemble('CLS\nCLS\nBOGUS')

    assert e.value.lineno == 3


def test_multiple_items_share_labels():
    items = [
        asm.CompilationItem('CALL helper\nend: JP end', 'main'),
        asm.CompilationItem('helper: RET', 'lib'),
    ]

    assert asm.compile_items(items) == words(0x2204, 0x1202, 0x00EE)


def test_compile_command(tmp_path):
    binary = tmp_path / 'out' / 'glyph.ch8'
    result = CliRunner().invoke(masm.compile, [str(find_file('testdata/glyph.c8s')), str(binary)])

    assert result.exit_code == 0
    assert binary.read_bytes()[:4] == bytes([0xA2, 0x2A, 0xD0, 0x05])


def test_compile_command_error(tmp_path):
    source = tmp_path / 'bad.c8s'
    source.write_text('NOPE\n')
    result = CliRunner().invoke(masm.compile, [str(source), str(tmp_path / 'bad.ch8')])

    assert result.exit_code == 1
    assert not (tmp_path / 'bad.ch8').exists()
