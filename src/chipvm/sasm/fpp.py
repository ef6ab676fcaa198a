''' First-pass processor '''

import logging as lg
import struct
from dataclasses import dataclass
from typing import Any, Callable, TypeAlias

from chipvm.common.hwconf import ROM_BASE, MEMORY_SIZE


class AsmError(Exception):
    def __init__(self, message: str, lineno: int | None = None):
        if lineno is not None:
            message = f'line {lineno}: {message}'

        super().__init__(message)
        self.lineno = lineno


@dataclass(frozen=True)
class Operand:
    kind: str       # reg, imm, label, or a special name: I DT ST K F B [I]
    value: Any = None

    @property
    def is_addr(self) -> bool:
        return self.kind in ('imm', 'label')


Operands: TypeAlias = list[Operand]
Encoder: TypeAlias = Callable[[Operands], int]


def _nnn(op: Operand) -> int:
    return 0 if op.kind == 'label' else _ranged(op, 0xFFF)


def _ranged(op: Operand, limit: int) -> int:
    if op.kind != 'imm':
        raise AsmError(f'Expected a number, got {op.kind} {op.value}')

    if not 0 <= op.value <= limit:
        raise AsmError(f'Value {op.value} out of range 0..{limit}')

    return op.value


def _xkk(base: int) -> Encoder:
    return lambda ops: base | ops[0].value << 8 | _ranged(ops[1], 0xFF)


def _xy(base: int) -> Encoder:
    return lambda ops: base | ops[0].value << 8 | ops[1].value << 4


def _x(base: int, at: int = 0) -> Encoder:
    return lambda ops: base | ops[at].value << 8


def _addr(base: int, at: int = 0) -> Encoder:
    return lambda ops: base | _nnn(ops[at])


# (mnemonic, operand kinds) -> encoder; 'addr' accepts a number or a label
ENCODINGS: dict[tuple[str, tuple[str, ...]], Encoder] = {
    ('CLS', ()): lambda _: 0x00E0,
    ('RET', ()): lambda _: 0x00EE,
    ('JP', ('addr',)): _addr(0x1000),
    ('JP', ('reg', 'addr')): _addr(0xB000, 1),
    ('CALL', ('addr',)): _addr(0x2000),

    ('SE', ('reg', 'imm')): _xkk(0x3000),
    ('SNE', ('reg', 'imm')): _xkk(0x4000),
    ('SE', ('reg', 'reg')): _xy(0x5000),
    ('SNE', ('reg', 'reg')): _xy(0x9000),
    ('SKP', ('reg',)): _x(0xE09E),
    ('SKNP', ('reg',)): _x(0xE0A1),

    ('LD', ('reg', 'imm')): _xkk(0x6000),
    ('LD', ('reg', 'reg')): _xy(0x8000),
    ('LD', ('I', 'addr')): _addr(0xA000, 1),
    ('LD', ('reg', 'DT')): _x(0xF007),
    ('LD', ('reg', 'K')): _x(0xF00A),
    ('LD', ('DT', 'reg')): _x(0xF015, 1),
    ('LD', ('ST', 'reg')): _x(0xF018, 1),
    ('LD', ('F', 'reg')): _x(0xF029, 1),
    ('LD', ('B', 'reg')): _x(0xF033, 1),
    ('LD', ('[I]', 'reg')): _x(0xF055, 1),
    ('LD', ('reg', '[I]')): _x(0xF065),

    ('ADD', ('reg', 'imm')): _xkk(0x7000),
    ('OR', ('reg', 'reg')): _xy(0x8001),
    ('AND', ('reg', 'reg')): _xy(0x8002),
    ('XOR', ('reg', 'reg')): _xy(0x8003),
    ('ADD', ('reg', 'reg')): _xy(0x8004),
    ('SUB', ('reg', 'reg')): _xy(0x8005),
    ('SHR', ('reg',)): _x(0x8006),
    ('SHR', ('reg', 'reg')): _xy(0x8006),
    ('SUBN', ('reg', 'reg')): _xy(0x8007),
    ('SHL', ('reg',)): _x(0x800E),
    ('SHL', ('reg', 'reg')): _xy(0x800E),
    ('ADD', ('I', 'reg')): _x(0xF01E, 1),

    ('RND', ('reg', 'imm')): _xkk(0xC000),
    ('DRW', ('reg', 'reg', 'imm')): lambda ops: 0xD000 | ops[0].value << 8 | ops[1].value << 4 | _ranged(ops[2], 0xF),
}


def _signatures(ops: Operands) -> list[tuple[str, ...]]:
    kinds = tuple(op.kind for op in ops)
    addr_kinds = tuple('addr' if op.is_addr else op.kind for op in ops)
    return [kinds, addr_kinds]


class FPP:
    cmd_list: list[tuple[str, Any]]
    label_dict: dict[str, int]
    offset: int     # Absolute address of the next emitted byte
    lineno: int

    def __init__(self):
        self.cmd_list = list()
        self.label_dict = dict()
        self.offset = ROM_BASE
        self.lineno = 0

    # Handlers
    def issue_bytes(self, data: bytes):
        if self.offset + len(data) > MEMORY_SIZE:
            raise AsmError(f'Program overflows memory at {self.offset:03X}', self.lineno)

        self.cmd_list.append(('bytes', data))
        self.offset += len(data)

    def issue_word(self, word: int):
        self.issue_bytes(struct.pack('>H', word))

    def on_label(self, name: str):
        if name in self.label_dict:
            raise AsmError(f'Duplicate label {name}', self.lineno)

        lg.debug(f'New label {name} at {self.offset:03X}')
        self.label_dict[name] = self.offset

    def on_ref(self, word: int, name: str):
        if self.offset + 2 > MEMORY_SIZE:
            raise AsmError(f'Program overflows memory at {self.offset:03X}', self.lineno)

        self.cmd_list.append(('ref', (word, name, self.lineno)))
        self.offset += 2

    # Directives
    def issue_db(self, ops: Operands):
        self.issue_bytes(bytes(_ranged(op, 0xFF) for op in ops))

    def issue_org(self, ops: Operands):
        if len(ops) != 1:
            raise AsmError('ORG takes one address', self.lineno)

        target = _ranged(ops[0], MEMORY_SIZE - 1)

        if target < self.offset:
            raise AsmError(f'ORG {target:03X} moves backwards from {self.offset:03X}', self.lineno)

        self.issue_bytes(bytes(target - self.offset))

    def issue_statement(self, statement: tuple[str, Operands]):
        mnemonic, ops = statement

        if mnemonic == 'DB':
            return self.issue_db(ops)

        if mnemonic == 'ORG':
            return self.issue_org(ops)

        encoder = None

        for signature in _signatures(ops):
            encoder = ENCODINGS.get((mnemonic, signature))

            if encoder is not None:
                break

        if encoder is None:
            kinds = ', '.join(op.kind for op in ops)
            raise AsmError(f'Unknown instruction {mnemonic} ({kinds})', self.lineno)

        if mnemonic == 'JP' and ops[0].kind == 'reg' and ops[0].value != 0:
            raise AsmError('Offset jump takes V0', self.lineno)

        try:
            word = encoder(ops)
        except AsmError as e:
            raise AsmError(str(e), self.lineno) from e

        labels = [op.value for op in ops if op.kind == 'label']

        if labels:
            self.on_ref(word, labels[0])
        else:
            self.issue_word(word)
