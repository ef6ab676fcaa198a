from pathlib import Path
import logging as lg
import sys
from typing import Tuple

import click

from chipvm.sasm.asm import CompilationItem, compile_items
from chipvm.sasm.fpp import AsmError


def collect_file(filepath: str | Path) -> CompilationItem:
    if isinstance(filepath, str):
        filepath = Path(filepath)

    lg.debug(f'Collecting file {filepath}')
    return CompilationItem(filepath.read_text(), filepath.stem)


def collect_files(filepaths: list[Path]) -> list[CompilationItem]:
    return [collect_file(path) for path in filepaths]


@click.command()
@click.option('-v', '--verbose', is_flag=True, help='Sets logging level to debug')
@click.argument('sources', nargs=-1, required=True, type=Path)
@click.argument('binary', type=Path)
def compile(verbose: bool, sources: Tuple[Path], binary: Path):
    lg.basicConfig(level=lg.DEBUG if verbose else lg.INFO)
    lg.info("CHIPVM ASM")

    try:
        bytestr = compile_items(collect_files(list(sources)))
    except AsmError as e:
        lg.error(str(e))
        sys.exit(1)

    binary.parent.mkdir(parents=True, exist_ok=True)
    binary.write_bytes(bytestr)
    lg.info(f'Wrote {len(bytestr)} bytes to {binary}')


if __name__ == "__main__":
    compile()
