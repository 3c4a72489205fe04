import struct

import pytest

import tinyimage.common.ops as ops
from tinyimage.common.errors import EncodingContractError
from tinyimage.loader.instruction import Instruction
from tinyimage.loader.image import encode_image, encode_instruction, instruction_size, instruction_offsets
from tinyimage.loader.program import Program, load_program, load_program_text, dump_program

from unit_utils import program_path, instr

# Hypothetical instruction set: LOAD <a>, ADD, STORE <a> <b>
LOAD = 0x50
ADD = 0x51
STORE = 0x52


def test_empty_image():
    assert encode_image(Program([]), 'little') == b''
    assert encode_image(load_program(program_path('empty')), 'big') == b''


def test_opcode_only():
    assert encode_image(Program([instr(ops.RET)]), 'little') == bytes([ops.RET])


def test_instruction_sizes():
    assert instruction_size(instr(ADD)) == 1
    assert instruction_size(instr(LOAD, 5)) == 5
    assert instruction_size(instr(STORE, 5, 10)) == 9
    assert instruction_size(Instruction(STORE, None, 10)) == 5

    for i in [instr(ADD), instr(LOAD, 5), instr(STORE, 5, 10)]:
        assert len(encode_instruction(i, 'little')) == instruction_size(i)


def test_little_endian_operands():
    image = encode_image(Program([instr(ops.MOVI, 1, 0x11223344)]), 'little')
    assert image == bytes([ops.MOVI, 1, 0, 0, 0, 0x44, 0x33, 0x22, 0x11])


def test_big_endian_operands():
    image = encode_image(Program([instr(ops.MOVI, 1, 0x11223344)]), 'big')
    assert image == bytes([ops.MOVI, 0, 0, 0, 1, 0x11, 0x22, 0x33, 0x44])


def test_all_ones_is_a_regular_operand():
    image = encode_image(Program([instr(ops.PUSHI, 0xFFFFFFFF)]), 'little')
    assert image == bytes([ops.PUSHI, 0xFF, 0xFF, 0xFF, 0xFF])


def test_operand_slots_are_independent():
    image = encode_image(Program([Instruction(STORE, None, 10)]), 'big')
    assert image == bytes([STORE]) + struct.pack('>I', 10)


def test_load_add_store_scenario():
    program = Program([instr(LOAD, 5), instr(ADD), instr(STORE, 5, 10)])
    image = encode_image(program, 'little')

    assert len(image) == 15
    assert instruction_offsets(program) == [0, 5, 6]
    assert image[0] == LOAD
    assert image[5] == ADD
    assert image[6] == STORE
    assert image[1:5] == struct.pack('<I', 5)
    assert image[7:15] == struct.pack('<II', 5, 10)


def test_concatenation():
    s1 = [instr(ops.MOVI, 1, 7), instr(ops.RET)]
    s2 = [instr(ops.INCR, 2), Instruction(STORE, None, 3), instr(ops.EXIT)]

    for order in ('little', 'big'):
        whole = encode_image(Program(s1 + s2), order)
        assert whole == encode_image(Program(s1), order) + encode_image(Program(s2), order)


def test_deterministic():
    program = load_program(program_path('counter'))
    assert encode_image(program, 'little') == encode_image(program, 'little')


def test_loaded_program_image():
    program = load_program(program_path('counter'))
    image = encode_image(program, 'little')

    assert len(image) == 52
    assert instruction_offsets(program) == [0, 9, 18, 27, 32, 41, 46, 51]
    assert image[18:27] == bytes([ops.MOVI, 3, 0, 0, 0, 0xFF, 0xFF, 0xFF, 0xFF])
    assert image[-1] == ops.EXIT


def test_dump_flag_does_not_change_image():
    program = load_program_text('movi r1, $3\ncmpi r1, $0\nret')
    before = encode_image(program, 'big')

    dump_program(program, True)
    assert encode_image(program, 'big') == before

    dump_program(program, False)
    assert encode_image(program, 'big') == before


@pytest.mark.parametrize('bad', [
    instr(0x100),
    instr(-1),
    instr(ops.MOVI, 1, 0x100000000),
    instr(ops.PUSHI, -5),
    Instruction(STORE, None, 1 << 40),
])
def test_values_outside_format(bad):
    with pytest.raises(EncodingContractError):
        encode_image(Program([bad]), 'little')


def test_unknown_byte_order():
    with pytest.raises(EncodingContractError, match='byte order'):
        encode_image(Program([instr(ops.RET)]), 'middle')

    with pytest.raises(EncodingContractError):
        encode_image(Program([]), 'native')


def test_offsets_of_empty_program():
    assert instruction_offsets(Program([])) == []
