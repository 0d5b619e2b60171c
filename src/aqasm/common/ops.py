from enum import Enum


class Opcode(Enum):
    LDR = 'LDR'      # M[A2] -> R1
    STR = 'STR'      # R1 -> M[A2]
    MOV = 'MOV'      # R2/#2 -> R1
    ADD = 'ADD'      # R2 +  R3/#3 -> R1
    SUB = 'SUB'      # R2 -  R3/#3 -> R1
    CMP = 'CMP'      # R1 <> R2/#2 -> flags
    B = 'B'          # if flag: goto T1
    AND = 'AND'      # R2 &  R3/#3 -> R1
    ORR = 'ORR'      # R2 |  R3/#3 -> R1
    XOR = 'XOR'      # R2 ^  R3/#3 -> R1
    MVN = 'MVN'      # ~R2/#2 -> R1
    LSL = 'LSL'      # R2 << R3/#3 -> R1
    LSR = 'LSR'      # R2 >> R3/#3 -> R1
    HALT = 'HALT'
    NOP = 'NOP'
    LABEL = 'LABEL'  # name -> labels[pc]
    OUT = 'OUT'      # R1/M1/#1 -> emit


class BranchCondition(Enum):
    EQ = 'EQ'
    NE = 'NE'
    LT = 'LT'
    GT = 'GT'
    UN = 'UN'  # Unconditional


class Flag(Enum):
    EQ = 'EQ'
    NE = 'NE'
    LT = 'LT'
    GT = 'GT'


class OperandKind(Enum):
    REGISTER = 'register'
    IMMEDIATE = 'immediate'
    MEMORY_ADDRESS = 'memory address'
    LABEL = 'label'


# Mnemonic suffix -> condition, e.g. BGT
BRANCH_SUFFIXES = {
    'GT': BranchCondition.GT,
    'LT': BranchCondition.LT,
    'EQ': BranchCondition.EQ,
    'NE': BranchCondition.NE,
    '': BranchCondition.UN
}

# Condition -> flag it tests
BRANCH_FLAGS = {
    BranchCondition.EQ: Flag.EQ,
    BranchCondition.NE: Flag.NE,
    BranchCondition.LT: Flag.LT,
    BranchCondition.GT: Flag.GT
}
