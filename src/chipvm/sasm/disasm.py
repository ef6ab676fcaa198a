''' ROM image -> assembly listing '''

import logging as lg
from pathlib import Path
from typing import Iterator

import click

from chipvm.common.hwconf import ROM_BASE
from chipvm.runtime.decoder import Instruction, classify
from chipvm.runtime.mnemonics import render


def render_word(word: int) -> str:
    op = classify(word)

    if op is None:
        return f'DW #{word:04X}'

    return render(Instruction(op, word))


def listing(rom: bytes, base: int = ROM_BASE) -> Iterator[str]:
    for offset in range(0, len(rom), 2):
        chunk = rom[offset:offset + 2]

        if len(chunk) < 2:
            yield f'{base + offset:03X}  {chunk[0]:02X}    DB #{chunk[0]:02X}'
            break

        word = (chunk[0] << 8) | chunk[1]
        yield f'{base + offset:03X}  {word:04X}  {render_word(word)}'


@click.command()
@click.option('-v', '--verbose', is_flag=True, help='Sets logging level to debug')
@click.option('--base', type=lambda s: int(s, 0), default=ROM_BASE, help='Load address of the image')
@click.argument('rom', type=Path)
def disassemble(verbose: bool, base: int, rom: Path):
    lg.basicConfig(level=lg.DEBUG if verbose else lg.INFO)
    lg.debug(f'Disassembling {rom}')

    for line in listing(rom.read_bytes(), base):
        click.echo(line)


if __name__ == '__main__':
    disassemble()
