class AQAsmError(Exception):
    pass


# - Parsing - #

class ParseError(AQAsmError):
    ''' Fatal, raised before any instruction runs '''

    line_number: int | None
    line: str | None

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
        self.line_number = None
        self.line = None

    def at(self, line_number: int, line: str):
        self.line_number = line_number
        self.line = line
        return self

    def __str__(self):
        if self.line_number is None:
            return self.message

        return f'Line {self.line_number}: {self.message} ({self.line!r})'


class MissingCommaError(ParseError):
    pass


class InvalidOpcodeError(ParseError):
    pass


class InvalidBranchFlagError(ParseError):
    pass


# - Execution - #

class MachineError(AQAsmError):
    ''' Fatal, aborts the run '''
    pass


class ProgramOverrunError(MachineError):
    pass


class OperandError(MachineError):
    pass


class UnknownLabelError(MachineError):
    pass


class StepLimitExceeded(MachineError):
    pass


# - Loading - #

class SourceNotFound(AQAsmError):
    pass
