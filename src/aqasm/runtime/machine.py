import logging as lg

from aqasm.common.hwconf import REGISTER_COUNT, MEMORY_SIZE, BYTE_MODULUS
from aqasm.common.ops import Flag
from aqasm.common.errors import OperandError


def wrap(value: int) -> int:
    ''' Floor-modulo into the byte range, so negatives land in 0..255 '''
    return value % BYTE_MODULUS


class MachineState:
    registers: list[int]    # General purpose registers
    memory: bytearray       # Data memory
    flags: set[Flag]        # Set by the last CMP
    labels: dict[str, int]  # Label -> line index
    pc: int                 # Index of the current instruction
    halted: bool
    steps: int              # Instructions executed so far

    def __init__(self):
        self.reset()

    def reset(self):
        self.registers = [0] * REGISTER_COUNT
        self.memory = bytearray(MEMORY_SIZE)
        self.flags = set()
        self.labels = dict()
        self.pc = 0
        self.halted = False
        self.steps = 0

    # - Registers and memory - #

    def read_register(self, index: int) -> int:
        self.check_register(index)
        return self.registers[index]

    def write_register(self, index: int, value: int):
        self.check_register(index)
        self.registers[index] = wrap(value)

    def read_memory(self, address: int) -> int:
        self.check_address(address)
        return self.memory[address]

    def write_memory(self, address: int, value: int):
        self.check_address(address)
        self.memory[address] = wrap(value)

    def check_register(self, index: int):
        if not 0 <= index < REGISTER_COUNT:
            raise OperandError(f'No register R{index}')

    def check_address(self, address: int):
        if not 0 <= address < MEMORY_SIZE:
            raise OperandError(f'Memory address {address} out of range')

    # - Flags - #

    def set_flags(self, *flags: Flag):
        self.flags = set(flags)

    def flag_is_set(self, flag: Flag) -> bool:
        return flag in self.flags

    # - Labels and flow - #

    def add_label(self, name: str, line_number: int):
        lg.debug(f'Label {name} @ {line_number}')
        self.labels[name] = line_number

    def find_label(self, name: str) -> int | None:
        return self.labels.get(name)

    def jump(self, line_number: int):
        self.pc = line_number

    def debug_dump(self):
        state = [f'PC:{self.pc}']
        state.extend([f'R{i}:{self.registers[i]}' for i in range(len(self.registers))])
        state.append('F:' + ','.join(sorted(f.value for f in self.flags)))

        lg.debug(' '.join(state))
