"""Loader and interpreter for the Brainfuck tape language."""

from .config import DEFAULT_TAPE_SIZE, InterpreterConfig
from .errors import (BrainfuckError, OutOfRangeError, StructuralError,
                     UnmatchedClosingBracket, UnmatchedOpeningBracket)
from .instructions import COMMANDS, Instruction, Op
from .interpreter import BrainfuckInterpreter, run_program
from .loader import is_balanced, load

__version__ = "0.1.0"
