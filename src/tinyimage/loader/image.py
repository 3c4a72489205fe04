''' Program -> memory image encoder

Per instruction, back to back without padding:

    opcode      1 byte      always
    operand_1   4 bytes     when present
    operand_2   4 bytes     when present

There is no length prefix, count or terminator. Operands are unsigned words
packed in the byte order shared with the execution engine.
'''

import logging as lg
import struct
from typing import Iterable

from tinyimage.common.hwconf import OPCODE_SIZE, WORD_SIZE, OPCODE_MAX, WORD_MAX, BYTE_ORDERS
from tinyimage.common.errors import EncodingContractError
from tinyimage.loader.instruction import Instruction


def word_format(byte_order: str) -> str:
    try:
        return BYTE_ORDERS[byte_order] + 'I'
    except KeyError:
        raise EncodingContractError(f'Unknown byte order {byte_order!r}') from None


def instruction_size(instr: Instruction) -> int:
    return OPCODE_SIZE + WORD_SIZE * len(instr.operands())


def issue_opcode(opcode: int) -> bytes:
    if not isinstance(opcode, int) or not 0 <= opcode <= OPCODE_MAX:
        raise EncodingContractError(f'Opcode {opcode!r} does not fit in a byte')

    return struct.pack('B', opcode)


def issue_word(fmt: str, word: int) -> bytes:
    if not isinstance(word, int) or not 0 <= word <= WORD_MAX:
        raise EncodingContractError(f'Operand {word!r} does not fit in a word')

    return struct.pack(fmt, word)


def encode_instruction(instr: Instruction, byte_order: str) -> bytes:
    fmt = word_format(byte_order)
    bytestr = bytearray(issue_opcode(instr.opcode))

    # Slots are independent, operand_2 may be present without operand_1
    if instr.operand_1 is not None:
        bytestr += issue_word(fmt, instr.operand_1)

    if instr.operand_2 is not None:
        bytestr += issue_word(fmt, instr.operand_2)

    return bytes(bytestr)


def encode_image(program: Iterable[Instruction], byte_order: str) -> bytes:
    word_format(byte_order)
    bytestr = bytearray()

    for instr in program:
        bytestr += encode_instruction(instr, byte_order)

    lg.debug(f'Encoded memory image of {len(bytestr)} bytes')
    return bytes(bytestr)


def instruction_offsets(program: Iterable[Instruction]) -> list[int]:
    ''' Byte offset of every opcode within the memory image '''

    offsets = []
    offset = 0

    for instr in program:
        offsets.append(offset)
        offset += instruction_size(instr)

    return offsets
