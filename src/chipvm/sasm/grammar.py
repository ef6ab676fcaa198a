# type: ignore
''' Line grammar '''

import pyparsing as pp

from chipvm.sasm.fpp import FPP, Operand


id = pp.Word(pp.alphas + '_', pp.alphanums + '_')
comment = pp.Suppress(pp.Literal(';') + pp.rest_of_line)

label = (id + pp.Suppress(':')).set_parse_action(lambda r: (FPP.on_label, r[0]))

# Numbers
dec_const = pp.Regex('[0-9]+').set_parse_action(lambda r: int(r[0]))
hex_const = pp.Regex('(#|0[xX])[0-9A-Fa-f]+').set_parse_action(lambda r: int(r[0].lstrip('#'), 16))
bin_const = pp.Regex('%[01]+').set_parse_action(lambda r: int(r[0][1:], 2))
const = (hex_const | bin_const | dec_const).set_parse_action(lambda r: Operand('imm', r[0]))

# Operands
reg = pp.Regex('[Vv][0-9A-Fa-f]\\b').set_parse_action(lambda r: Operand('reg', int(r[0][1], 16)))
indirect = pp.Regex('\\[\\s*[Ii]\\s*\\]').set_parse_action(lambda _: Operand('[I]'))


def g_special(name):
    return pp.CaselessKeyword(name).set_parse_action(lambda _: Operand(name))


special = pp.MatchFirst([g_special(name) for name in ['DT', 'ST', 'I', 'K', 'F', 'B']])
ref = id.copy().set_parse_action(lambda r: Operand('label', r[0]))

operand = indirect | reg | special | const | ref
operands = pp.Group(pp.Optional(pp.DelimitedList(operand)))

mnemonic = id.copy().set_parse_action(lambda r: r[0].upper())
statement = (mnemonic + operands).set_parse_action(
    lambda r: (FPP.issue_statement, (r[0], list(r[1])))
)

line = pp.Optional(label) + pp.Optional(statement) + pp.Optional(comment) + pp.StringEnd()
