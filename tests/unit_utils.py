import struct
from pathlib import Path

import chipvm.sasm.masm as masm
import chipvm.sasm.asm as asm
from chipvm.runtime.config import Settings
from chipvm.runtime.machine import Machine


def find_file(filename: str) -> Path:
    return Path(__file__).parent / filename


def load_file(filename: str) -> str:
    return find_file(filename).read_text()


def assemble_file(filename: str) -> bytes:
    item = masm.collect_file(find_file(f'testdata/{filename}'))
    return asm.compile_items([item])


def words(*ws: int) -> bytes:
    return b''.join(struct.pack('>H', w) for w in ws)


def fixed_bytes(*values: int):
    it = iter(values)
    return lambda: next(it)


def machine_with(rom: bytes, settings: Settings | None = None, rng=None) -> Machine:
    machine = Machine(settings, rng=rng)
    machine.load_program(rom)
    return machine


def run_source(source: str, steps: int, settings: Settings | None = None, rng=None) -> Machine:
    machine = machine_with(asm.assemble(source), settings, rng)

    for _ in range(steps):
        machine.step()

    return machine
