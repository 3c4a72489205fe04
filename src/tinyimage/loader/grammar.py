# type: ignore
''' Instruction line grammar '''

import pyparsing as pp


def to_number(text: str) -> int:
    if text[:2].lower() == '0x':
        return int(text, 16)

    return int(text)


mnemonic = pp.Word(pp.alphas)
num_opcode = pp.Regex('[0-9]+').set_parse_action(lambda r: int(r[0]))
opcode = (mnemonic | num_opcode)('opcode')

# r<n> encodes the register number
register = pp.Regex('[rR][0-9]+').set_parse_action(lambda r: int(r[0][1:]))
register.set_name('register')

# $<n> encodes the value itself
constant = pp.Regex(r'\$(0[xX][0-9a-fA-F]+|[0-9]+)').set_parse_action(
    lambda r: to_number(r[0][1:]))
constant.set_name('constant')

operand = register | constant
operands = pp.Optional(operand + pp.Optional(pp.Suppress(',') + operand))

comment = pp.Suppress(pp.Literal(';') + pp.rest_of_line)

instruction = opcode + pp.Group(operands)('operands') + pp.Optional(comment)
