"""
Instruction set.

    >   Move the pointer to the right
    <   Move the pointer to the left
    +   Increment the memory cell at the pointer
    -   Decrement the memory cell at the pointer
    .   Output the byte in the cell at the pointer
    ,   Input a byte and store it in the cell at the pointer
    [   Jump past the matching ] if the cell at the pointer is 0
    ]   Jump back to the matching [ if the cell at the pointer is nonzero

All other characters are treated as comments and ignored.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Op(Enum):
    MOVE_RIGHT = '>'
    MOVE_LEFT = '<'
    INCREMENT = '+'
    DECREMENT = '-'
    OUTPUT_BYTE = '.'
    INPUT_BYTE = ','
    JUMP_IF_ZERO = '['
    JUMP_IF_NONZERO = ']'


COMMANDS = frozenset(op.value for op in Op)


@dataclass(frozen=True)
class Instruction:
    """A single loaded instruction.

    Jumps carry the index of their partner bracket in ``target``; every other
    op has ``target=None``.
    """
    op: Op
    target: Optional[int] = None

    def __repr__(self):
        if self.target is not None:
            return f"{self.op.value} (target: {self.target})"
        return self.op.value
