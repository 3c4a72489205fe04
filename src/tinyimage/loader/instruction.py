import logging as lg
from dataclasses import dataclass

import pyparsing as pp

import tinyimage.common.ops as ops
from tinyimage.common.hwconf import WORD_MAX
from tinyimage.common.errors import ParseError
import tinyimage.loader.grammar as grammar


@dataclass(frozen=True)
class Instruction:
    ''' One decoded program line; None marks an unused operand slot '''

    opcode: int
    operand_1: int | None = None
    operand_2: int | None = None

    def operands(self) -> list[int]:
        return [op for op in (self.operand_1, self.operand_2) if op is not None]

    def __str__(self):
        name = ops.MNEMONICS.get(self.opcode, str(self.opcode)).capitalize()
        fields = [name]

        if self.operand_1 is not None:
            fields.append(str(self.operand_1))
        elif self.operand_2 is not None:
            fields.append('-')

        if self.operand_2 is not None:
            fields.append(str(self.operand_2))

        return ' '.join(fields)


def resolve_opcode(token: str | int) -> int:
    if isinstance(token, int):
        if token not in ops.ARITY:
            raise ParseError(f'Unknown opcode {token}')

        return token

    try:
        return ops.OPCODES[token.lower()]
    except KeyError:
        raise ParseError(f'Unknown mnemonic {token}') from None


def parse_instruction(text: str) -> Instruction:
    ''' Raw line text -> Instruction, raises ParseError '''

    try:
        r = grammar.instruction.parse_string(text, parse_all=True)
    except pp.ParseBaseException as e:
        raise ParseError(f'Syntax error at column {e.column}', text) from e

    try:
        opcode = resolve_opcode(r['opcode'])
    except ParseError as e:
        e.line = text
        raise

    operands = r['operands'].as_list()
    arity = ops.ARITY[opcode]

    if len(operands) != arity:
        raise ParseError(
            f'{ops.MNEMONICS[opcode]} expects {arity} operand(s), got {len(operands)}',
            text
        )

    for value in operands:
        if value > WORD_MAX:
            raise ParseError(f'Operand {value} does not fit in a word', text)

    operands.extend([None] * (2 - len(operands)))
    instruction = Instruction(opcode, operands[0], operands[1])
    lg.debug(f'Parsed {instruction}')
    return instruction
