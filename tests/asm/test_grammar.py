import pytest
import pyparsing as pp

from aqasm.common.ops import OperandKind
from aqasm.common.instruction import Operand
from aqasm.asm.grammar import parse_operand, parse_number, is_number


@pytest.mark.parametrize('token, kind, raw', [
    ('R12', OperandKind.REGISTER, '12'),
    ('#255', OperandKind.IMMEDIATE, '255'),
    ('17', OperandKind.MEMORY_ADDRESS, '17'),
    ('skip', OperandKind.MEMORY_ADDRESS, 'skip'),
    ('Bx', OperandKind.MEMORY_ADDRESS, 'Bx'),
    ('R', OperandKind.REGISTER, ''),
])
def test_operand_kinds(token, kind, raw):
    assert parse_operand(token) == Operand(kind, raw)


def test_bare_branch_letter_is_label():
    # Collides with the B opcode name, kept as a label reference
    assert parse_operand('B') == Operand(OperandKind.LABEL, 'B')


def test_leading_whitespace_is_not_skipped():
    assert parse_operand('\t#1') == Operand(OperandKind.MEMORY_ADDRESS, '\t#1')


def test_numbers():
    assert parse_number('0') == 0
    assert parse_number('42') == 42


@pytest.mark.parametrize('raw', ['', '-1', '5a', 'skip', ' 5'])
def test_bad_numbers(raw):
    with pytest.raises(pp.ParseException):
        parse_number(raw)


def test_is_number():
    assert is_number('42')
    assert not is_number('٣')
    assert not is_number('loop')
