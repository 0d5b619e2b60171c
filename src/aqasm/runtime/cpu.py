import logging as lg
from itertools import chain
from typing import Callable

import pyparsing as pp

from aqasm.common.ops import Opcode, OperandKind, Flag, BRANCH_FLAGS
from aqasm.common.instruction import Instruction, Program
from aqasm.common.errors import OperandError, UnknownLabelError
from aqasm.asm.grammar import parse_number, is_number
from aqasm.common.hwconf import BYTE_BITS
from aqasm.runtime.machine import MachineState

Emit = Callable[[int], None]


# - Operand helpers - #

def number(instruction: Instruction, index: int) -> int:
    raw = instruction.operand(index).raw

    try:
        return parse_number(raw)
    except pp.ParseException:
        raise OperandError(
            f'{instruction.mnemonic} operand #{index}: {raw!r} is not a non-negative integer'
        )


def expect_kind(instruction: Instruction, index: int, *kinds: OperandKind):
    kind = instruction.operand(index).kind

    if kind not in kinds:
        expected = ' or '.join(k.value for k in kinds)
        raise OperandError(
            f'{instruction.mnemonic} operand #{index} must be {expected}, got {kind.value}'
        )

    return kind


def register(instruction: Instruction, index: int) -> int:
    ''' Register index named by an operand '''
    expect_kind(instruction, index, OperandKind.REGISTER)
    return number(instruction, index)


def address(instruction: Instruction, index: int) -> int:
    expect_kind(instruction, index, OperandKind.MEMORY_ADDRESS)
    return number(instruction, index)


def resolve(instruction: Instruction, index: int, machine: MachineState) -> int:
    ''' Register contents or immediate literal '''
    kind = expect_kind(instruction, index, OperandKind.REGISTER, OperandKind.IMMEDIATE)

    if kind == OperandKind.REGISTER:
        return machine.read_register(number(instruction, index))

    return number(instruction, index)


def arithm_pair(instruction: Instruction, machine: MachineState, op: Callable[[int, int], int]):
    dest = register(instruction, 0)
    a = machine.read_register(register(instruction, 1))
    b = resolve(instruction, 2, machine)
    machine.write_register(dest, op(a, b))


# Shifting a byte by 8 or more clears it
def shift_left(a: int, b: int) -> int:
    return a << b if b < BYTE_BITS else 0


def shift_right(a: int, b: int) -> int:
    return a >> b if b < BYTE_BITS else 0


# - Operations - #

def ldr(instruction: Instruction, machine: MachineState):
    dest = register(instruction, 0)
    machine.write_register(dest, machine.read_memory(address(instruction, 1)))


def str_(instruction: Instruction, machine: MachineState):
    src = machine.read_register(register(instruction, 0))
    machine.write_memory(address(instruction, 1), src)


def mov(instruction: Instruction, machine: MachineState):
    dest = register(instruction, 0)
    machine.write_register(dest, resolve(instruction, 1, machine))


def mvn(instruction: Instruction, machine: MachineState):
    dest = register(instruction, 0)
    machine.write_register(dest, ~resolve(instruction, 1, machine))


def cmp(instruction: Instruction, machine: MachineState):
    a = machine.read_register(register(instruction, 0))
    b = resolve(instruction, 1, machine)

    if a == b:
        machine.set_flags(Flag.EQ)
    elif a < b:
        machine.set_flags(Flag.NE, Flag.LT)
    else:
        machine.set_flags(Flag.NE, Flag.GT)


def find_label(name: str, machine: MachineState, program: Program) -> int:
    line_number = machine.find_label(name)

    if line_number is not None:
        return line_number

    # Not reached yet, look ahead first, then behind
    for i in chain(range(machine.pc, len(program)), range(0, machine.pc)):
        candidate = program[i]

        if candidate.opcode == Opcode.LABEL and candidate.operands[0].raw == name:
            machine.add_label(name, i)
            return i

    raise UnknownLabelError(f'Unknown label {name}')


def branch_target(instruction: Instruction, machine: MachineState, program: Program) -> int:
    target = instruction.operand(0)

    match target.kind:
        case OperandKind.REGISTER | OperandKind.IMMEDIATE:
            return resolve(instruction, 0, machine)
        case OperandKind.MEMORY_ADDRESS if is_number(target.raw):
            return number(instruction, 0)
        case _:
            return find_label(target.raw, machine, program)


def branch(instruction: Instruction, machine: MachineState, program: Program):
    condition = instruction.branch

    if condition in BRANCH_FLAGS and not machine.flag_is_set(BRANCH_FLAGS[condition]):
        return

    target = branch_target(instruction, machine, program)
    lg.debug(f'{instruction.mnemonic} -> {target}')

    # One behind, the loop increment lands on the target
    machine.jump(target - 1)


def label(instruction: Instruction, machine: MachineState):
    machine.add_label(instruction.operand(0).raw, machine.pc)


def out(instruction: Instruction, machine: MachineState, emit: Emit):
    match instruction.operand(0).kind:
        case OperandKind.REGISTER:
            value = machine.read_register(number(instruction, 0))
        case OperandKind.MEMORY_ADDRESS:
            value = machine.read_memory(number(instruction, 0))
        case _:
            value = number(instruction, 0)

    emit(value)


def unknown(instruction: Instruction, machine: MachineState):
    # Anything else may still be a label definition
    if instruction.operands:
        machine.add_label(instruction.operands[0].raw, machine.pc)
    else:
        lg.warning(f'Line {machine.pc}: not an instruction or label definition ({instruction.opcode})')


# -- Implementation -- #

def exec_instruction(instruction: Instruction, machine: MachineState, program: Program, emit: Emit):
    match instruction.opcode:
        case Opcode.LDR:
            ldr(instruction, machine)
        case Opcode.STR:
            str_(instruction, machine)
        case Opcode.MOV:
            mov(instruction, machine)
        case Opcode.ADD:
            arithm_pair(instruction, machine, lambda a, b: a + b)
        case Opcode.SUB:
            arithm_pair(instruction, machine, lambda a, b: a - b)
        case Opcode.CMP:
            cmp(instruction, machine)
        case Opcode.B:
            branch(instruction, machine, program)
        case Opcode.AND:
            arithm_pair(instruction, machine, lambda a, b: a & b)
        case Opcode.ORR:
            arithm_pair(instruction, machine, lambda a, b: a | b)
        case Opcode.XOR:
            arithm_pair(instruction, machine, lambda a, b: a ^ b)
        case Opcode.MVN:
            mvn(instruction, machine)
        case Opcode.LSL:
            arithm_pair(instruction, machine, shift_left)
        case Opcode.LSR:
            arithm_pair(instruction, machine, shift_right)
        case Opcode.HALT:
            machine.halted = True
        case Opcode.NOP:
            pass
        case Opcode.LABEL:
            label(instruction, machine)
        case Opcode.OUT:
            out(instruction, machine, emit)
        case _:
            unknown(instruction, machine)
