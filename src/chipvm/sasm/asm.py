import logging as lg
import struct
from typing import cast

import pyparsing as pp

import chipvm.sasm.grammar as grammar
from chipvm.sasm.fpp import FPP, AsmError


class CompilationItem:
    modulename: str = '<source>'
    contents: str

    def __init__(self, contents: str = '', modulename: str | None = None):
        self.contents = contents

        if modulename is not None:
            self.modulename = modulename


def first_pass(fpp: FPP, item: CompilationItem):
    for lineno, text in enumerate(item.contents.splitlines(), start=1):
        fpp.lineno = lineno

        try:
            actions = grammar.line.parse_string(text, parse_all=True)
        except pp.ParseException as e:
            raise AsmError(f'{item.modulename}: cannot parse "{text.strip()}" ({e.msg})', lineno) from e

        for (func, arg) in actions:  # type: ignore
            func(fpp, arg)


def compile_items(compile_items: list[CompilationItem]) -> bytes:
    # First pass
    fpp = FPP()

    for compile_item in compile_items:
        lg.info("Processing {0}".format(compile_item.modulename))
        first_pass(fpp, compile_item)

    # Second pass
    bytestr = bytearray()

    for (t, d) in fpp.cmd_list:
        new_bytes = bytes()

        if t == 'bytes':
            new_bytes = d

        if t == 'ref':
            (word, labelname, lineno) = d

            if labelname not in fpp.label_dict:
                raise AsmError(f'Unresolved label {labelname}', lineno)

            label_addr = fpp.label_dict[labelname]
            new_bytes = struct.pack('>H', word | label_addr)
            lg.debug(f'Resolved {labelname} to {label_addr:03X}')

        bytestr += cast(bytes, new_bytes)

    return bytes(bytestr)


def assemble(source: str) -> bytes:
    return compile_items([CompilationItem(source)])
