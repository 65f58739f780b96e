import pytest

import ls8.common.ops as ops
import ls8.asm.asm as asm
import ls8.asm.loader as loader
from ls8.asm.fpp import AsmError

from unit_utils import load_file


def test_instructions():
    program = asm.assemble('''
        LDI R0, 8       ; load
        prn r0
        HLT
    ''')

    assert program.code == bytes([ops.LDI, 0, 8, ops.PRN, 0, ops.HLT])
    assert program.annotations == {0: 'LDI', 3: 'PRN', 5: 'HLT'}


def test_number_formats():
    program = asm.assemble('''
        LDI R1, 0x41
        LDI R2, 0b101
        LDI R3, 010
        DB 255
    ''')

    assert program.code == bytes([ops.LDI, 1, 0x41, ops.LDI, 2, 5, ops.LDI, 3, 10, 255])


def test_labels_resolve_forward_and_backward():
    program = asm.assemble('''
    top:
        LDI R0, end
        JMP R0
    end:
        LDI R1, top
        HLT
    ''')

    assert program.code[2] == 5
    assert program.code[7] == 0


def test_two_register_forms():
    program = asm.assemble('ADD R0, R1\nMUL R2, R3\nCMP R4, R5\nST R6, R7')

    assert program.code == bytes([
        ops.ADD, 0, 1,
        ops.MUL, 2, 3,
        ops.CMP, 4, 5,
        ops.ST, 6, 7,
    ])


@pytest.mark.parametrize('source', [
    'FOO R0',
    'PRN R8',
    'ADD R0 R1',
    'LDI R0, 256',
    'LDI R0, nowhere',
    'here:\nhere:\nHLT',
])
def test_errors(source):
    with pytest.raises(AsmError):
        asm.assemble(source)


def test_format_ls8_loads_back():
    program = asm.assemble(load_file('testdata/call.asm'))
    text = asm.format_ls8(program)

    assert text.splitlines()[0] == f'{ops.LDI:08b}  # LDI'
    assert loader.parse_program(text) == program.code


def test_label_beyond_memory():
    with pytest.raises(AsmError):
        asm.assemble('DB 0\n' * 256 + 'end:\nLDI R0, end')


def test_label_at_end_of_full_memory():
    with pytest.raises(AsmError):
        asm.assemble('start:\nLDI R0, end\n' + 'DB 0\n' * 253 + 'end:\n')


def test_program_exceeds_memory():
    with pytest.raises(AsmError):
        asm.assemble('DB 0\n' * 257)
