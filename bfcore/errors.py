"""
Errors raised while loading or running a Brainfuck program.

Structural errors are raised by the loader and mean the program never starts.
Out-of-range errors are raised by the interpreter and abort the run.
Problems reading input are not exceptions: they are logged and the run goes on.
"""


class BrainfuckError(Exception):
    """Base class for every fatal loader or interpreter error."""


class StructuralError(BrainfuckError):
    """The program's brackets do not balance."""

    def __init__(self, message: str, index: int, offset: int):
        super().__init__(message)
        self.index = index    # slot in the instruction sequence
        self.offset = offset  # character position in the raw source


class UnmatchedOpeningBracket(StructuralError):
    def __init__(self, index: int, offset: int):
        super().__init__(
            f"Opening bracket at position {offset} (instruction {index}) has no closing bracket",
            index, offset)


class UnmatchedClosingBracket(StructuralError):
    def __init__(self, index: int, offset: int):
        super().__init__(
            f"Closing bracket at position {offset} (instruction {index}) has no opening bracket",
            index, offset)


class OutOfRangeError(BrainfuckError):
    """The tape pointer left the tape."""

    def __init__(self, pointer: int, tape_size: int, instruction_index: int):
        super().__init__(
            f"Tape pointer moved to {pointer}, outside [0, {tape_size}) "
            f"at instruction {instruction_index}")
        self.pointer = pointer
        self.tape_size = tape_size
        self.instruction_index = instruction_index
