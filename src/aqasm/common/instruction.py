from dataclasses import dataclass, field

from aqasm.common.ops import Opcode, BranchCondition, OperandKind
from aqasm.common.errors import OperandError


@dataclass(frozen=True)
class Operand:
    kind: OperandKind
    raw: str  # Sigil stripped, numeric value parsed on demand

    def __str__(self):
        match self.kind:
            case OperandKind.REGISTER:
                return f'R{self.raw}'
            case OperandKind.IMMEDIATE:
                return f'#{self.raw}'
            case _:
                return self.raw


@dataclass(frozen=True)
class Instruction:
    opcode: Opcode
    branch: BranchCondition | None = None
    operands: tuple[Operand, ...] = field(default_factory=tuple)

    @classmethod
    def blank(cls):
        return cls(Opcode.NOP)

    @classmethod
    def label(cls, name: str):
        return cls(Opcode.LABEL, None, (Operand(OperandKind.LABEL, name),))

    @property
    def mnemonic(self) -> str:
        opcode = getattr(self.opcode, 'value', str(self.opcode))

        if self.branch is None or self.branch == BranchCondition.UN:
            return opcode

        return opcode + self.branch.value

    def operand(self, index: int) -> Operand:
        if index >= len(self.operands):
            raise OperandError(
                f'{self.mnemonic} expects operand #{index}, got {len(self.operands)} operand(s)'
            )

        return self.operands[index]

    def __str__(self):
        if self.opcode == Opcode.LABEL and self.operands:
            return f'{self.operands[0].raw}:'

        if not self.operands:
            return self.mnemonic

        return f'{self.mnemonic} ' + ', '.join(str(o) for o in self.operands)


Program = tuple[Instruction, ...]
