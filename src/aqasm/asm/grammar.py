# type: ignore
''' Operand grammar '''

import pyparsing as pp

from aqasm.common.ops import Opcode, OperandKind
from aqasm.common.instruction import Operand


def g_operand(expr, kind: OperandKind):
    return expr.set_parse_action(lambda r: Operand(kind, r[0]))


rest = pp.Regex(r'.*')

# A bare 'B' is a label reference, not an address
label_ref = g_operand(pp.Literal(Opcode.B.value) + pp.StringEnd(), OperandKind.LABEL)
register = g_operand(pp.Suppress('R') + rest, OperandKind.REGISTER)
immediate = g_operand(pp.Suppress('#') + rest, OperandKind.IMMEDIATE)
address = g_operand(rest.copy(), OperandKind.MEMORY_ADDRESS)

operand = (label_ref | register | immediate | address).leave_whitespace().parse_with_tabs()

numeral = pp.Word(pp.nums).leave_whitespace().set_parse_action(lambda r: int(r[0]))


def parse_operand(token: str) -> Operand:
    return operand.parse_string(token, parse_all=True)[0]


def parse_number(raw: str) -> int:
    ''' Non-negative decimal, raises pp.ParseException otherwise '''
    return numeral.parse_string(raw, parse_all=True)[0]


def is_number(raw: str) -> bool:
    try:
        parse_number(raw)
    except pp.ParseException:
        return False

    return True
