"""
Program loader: turns raw source text into an instruction sequence with
precomputed jump targets.
"""

import logging
from typing import List, Tuple

from .errors import StructuralError, UnmatchedClosingBracket, UnmatchedOpeningBracket
from .instructions import COMMANDS, Instruction, Op

logger = logging.getLogger(__name__)

Program = Tuple[Instruction, ...]


def load(source: str) -> Program:
    """Load source text into an immutable instruction sequence.

    Non-command characters are dropped and do not take a slot. Each ``[``
    targets the index of its matching ``]`` and vice versa.

    Raises UnmatchedClosingBracket or UnmatchedOpeningBracket when the
    brackets do not balance.
    """
    instructions: List[Instruction] = []
    # (instruction index, source offset) of every unmatched '['
    stack: List[Tuple[int, int]] = []

    for offset, ch in enumerate(source):
        if ch not in COMMANDS:
            continue
        i = len(instructions)
        op = Op(ch)
        if op is Op.JUMP_IF_ZERO:
            stack.append((i, offset))
            instructions.append(Instruction(op))  # target filled in by the matching ']'
        elif op is Op.JUMP_IF_NONZERO:
            if not stack:
                raise UnmatchedClosingBracket(i, offset)
            opening, _ = stack.pop()
            instructions[opening] = Instruction(Op.JUMP_IF_ZERO, i)
            instructions.append(Instruction(op, opening))
        else:
            instructions.append(Instruction(op))

    if stack:
        index, offset = stack[-1]
        raise UnmatchedOpeningBracket(index, offset)

    logger.debug("Loaded %d instructions from %d source characters", len(instructions), len(source))
    return tuple(instructions)


def is_balanced(source: str) -> bool:
    """True when source loads, i.e. every bracket has a partner."""
    try:
        load(source)
    except StructuralError:
        return False
    return True
