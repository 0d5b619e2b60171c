import sys
from pathlib import Path
from dataclasses import dataclass, field
from typing import Iterable
import logging as lg
import traceback

import click

from aqasm.common.instruction import Program
from aqasm.common.errors import (
    ParseError, ProgramOverrunError, StepLimitExceeded, SourceNotFound
)
from aqasm.asm.parser import parse_program
from aqasm.runtime.machine import MachineState
from aqasm.tools.loader import load_source
import aqasm.runtime.cpu as cpu


EXIT_HALT = 0
EXIT_PARSE_ERROR = 1
EXIT_NOT_FOUND = 2
EXIT_KEYBOARD = 3
EXIT_STEP_LIMIT = 4
EXIT_EXEC_ERROR = 100


@dataclass
class RunResult:
    machine: MachineState
    output: list[int] = field(default_factory=list)


def exec_next(program: Program, machine: MachineState, emit: cpu.Emit):
    if not 0 <= machine.pc < len(program):
        raise ProgramOverrunError(
            f'No instruction at line {machine.pc} (program has {len(program)}), missing HALT?'
        )

    cpu.exec_instruction(program[machine.pc], machine, program, emit)
    machine.pc += 1
    machine.steps += 1


def execute(
    program: Program,
    machine: MachineState | None = None,
    emit: cpu.Emit | None = None,
    max_steps: int | None = None
) -> MachineState:
    if machine is None:
        machine = MachineState()

    if emit is None:
        emit = print

    while not machine.halted:
        if max_steps is not None and machine.steps >= max_steps:
            raise StepLimitExceeded(f'Not halted after {machine.steps} instructions')

        exec_next(program, machine, emit)
        machine.debug_dump()

    lg.debug(f'Halted after {machine.steps} instructions')
    return machine


def run_source(lines: Iterable[str], max_steps: int | None = None) -> RunResult:
    program = parse_program(lines)
    result = RunResult(MachineState())
    execute(program, result.machine, result.output.append, max_steps)
    return result


@click.command()
@click.option('-v', '--verbose', is_flag=True, help='Sets logging level to debug')
@click.option('--max-steps', type=click.IntRange(min=1), help='Abort after this many instructions')
@click.argument('source', type=Path)
def run(verbose: bool, max_steps: int | None, source: Path):
    lg.basicConfig(level=lg.DEBUG if verbose else lg.INFO)
    lg.info('AQASM')

    try:
        program = parse_program(load_source(source))
        execute(program, emit=click.echo, max_steps=max_steps)
        lg.info('Execution halted gracefully')
        sys.exit(EXIT_HALT)

    except SourceNotFound as e:
        lg.error(str(e))
        sys.exit(EXIT_NOT_FOUND)

    except ParseError as e:
        lg.error(f'Parse error: {e}')
        sys.exit(EXIT_PARSE_ERROR)

    except StepLimitExceeded as e:
        lg.error(f'Execution aborted: {e}')
        sys.exit(EXIT_STEP_LIMIT)

    except KeyboardInterrupt:
        lg.info('Execution halted by the user')
        sys.exit(EXIT_KEYBOARD)

    except Exception as e:
        lg.info(f'Execution halted on general error {e}')
        traceback.print_exc()
        sys.exit(EXIT_EXEC_ERROR)


if __name__ == '__main__':
    run()
