''' Source line -> Instruction '''

import logging as lg
from typing import Iterable

from aqasm.common.ops import Opcode, BRANCH_SUFFIXES
from aqasm.common.instruction import Instruction, Program
from aqasm.common.errors import (
    ParseError, MissingCommaError, InvalidOpcodeError, InvalidBranchFlagError
)
from aqasm.asm.grammar import parse_operand

OPCODES = {op.value: op for op in Opcode}


def split_tokens(line: str) -> list[str]:
    tokens = line.split(' ')

    if len(tokens) <= 2:
        return tokens

    mnemonic, *operands = tokens

    for i, token in enumerate(operands[:-1]):
        if not token.endswith(','):
            raise MissingCommaError(f'Comma missing after operand {token!r}')

        operands[i] = token[:-1]

    return [mnemonic] + operands


def classify(mnemonic: str):
    if mnemonic.startswith(Opcode.B.value):
        suffix = mnemonic[1:3]

        if suffix not in BRANCH_SUFFIXES:
            raise InvalidBranchFlagError(f'Invalid branch flag {suffix}')

        return Opcode.B, BRANCH_SUFFIXES[suffix]

    if mnemonic not in OPCODES:
        raise InvalidOpcodeError(f'Invalid opcode {mnemonic}')

    return OPCODES[mnemonic], None


def parse(line: str) -> Instruction:
    line = line.strip()

    # Blank lines keep their index as NOPs
    if not line:
        return Instruction.blank()

    if line.endswith(':'):
        return Instruction.label(line[:-1])

    mnemonic, *tokens = split_tokens(line)
    opcode, branch = classify(mnemonic)
    operands = tuple(parse_operand(token) for token in tokens)

    return Instruction(opcode, branch, operands)


def parse_program(lines: Iterable[str]) -> Program:
    instructions = []

    for line_number, line in enumerate(lines):
        try:
            instruction = parse(line)
        except ParseError as e:
            raise e.at(line_number, line)

        lg.debug(f'{line_number:>4}: {instruction}')
        instructions.append(instruction)

    return tuple(instructions)
