#!/usr/bin/env python3
"""
Brainfuck Interpreter

Executes a loaded instruction sequence against a fixed-size tape of unsigned
8-bit cells. Cell arithmetic wraps modulo 256; moving the tape pointer off
either end of the tape is fatal.
"""

import io
import logging
from typing import Optional, TextIO

import numpy as np

from .config import DEFAULT_TAPE_SIZE, InterpreterConfig
from .errors import OutOfRangeError
from .instructions import Op
from .loader import load
from .streams import OutputStream, default_input, default_output, read_input_byte, write_output_byte

logger = logging.getLogger(__name__)


class BrainfuckInterpreter:
    def __init__(self, program: str, tape_size: int = DEFAULT_TAPE_SIZE, *,
                 input_stream: Optional[TextIO] = None,
                 output_stream: Optional[OutputStream] = None,
                 output_name: str = "stdout"):
        if tape_size < 1:
            raise ValueError(f"tape_size must be at least 1, got {tape_size}")
        self.instructions = load(program)
        self.memory = np.zeros(tape_size, dtype=np.uint8)
        self.pointer = 0
        self.instruction_pointer = 0
        self.input_stream = input_stream
        self.output_stream = output_stream
        self.output_name = output_name
        self.output = bytearray()
        self.steps = 0
        self.input_reads = 0
        self.output_writes = 0

    @classmethod
    def from_config(cls, program: str, config: InterpreterConfig, **streams) -> 'BrainfuckInterpreter':
        return cls(program, config.tape_size, output_name=config.output, **streams)

    @property
    def tape_size(self) -> int:
        return len(self.memory)

    def run(self) -> bytes:
        """Execute the program to completion and return the bytes it output."""
        instructions = self.instructions
        memory = self.memory
        tape_size = len(memory)
        input_stream = self.input_stream or default_input()
        output_stream = self.output_stream or default_output(self.output_name)

        # Reset state
        memory.fill(0)
        self.pointer = 0
        self.instruction_pointer = 0
        self.output = bytearray()
        self.steps = 0
        self.input_reads = 0
        self.output_writes = 0

        while self.instruction_pointer < len(instructions):
            instruction = instructions[self.instruction_pointer]
            op = instruction.op

            if op is Op.MOVE_RIGHT:
                if self.pointer + 1 >= tape_size:
                    raise OutOfRangeError(self.pointer + 1, tape_size, self.instruction_pointer)
                self.pointer += 1

            elif op is Op.MOVE_LEFT:
                if self.pointer == 0:
                    raise OutOfRangeError(-1, tape_size, self.instruction_pointer)
                self.pointer -= 1

            elif op is Op.INCREMENT:
                memory[self.pointer] = (int(memory[self.pointer]) + 1) % 256

            elif op is Op.DECREMENT:
                memory[self.pointer] = (int(memory[self.pointer]) - 1) % 256

            elif op is Op.OUTPUT_BYTE:
                value = int(memory[self.pointer])
                write_output_byte(output_stream, value)
                self.output.append(value)
                self.output_writes += 1

            elif op is Op.INPUT_BYTE:
                self._read_into_cell(input_stream)

            elif op is Op.JUMP_IF_ZERO:
                if memory[self.pointer] == 0:
                    self.instruction_pointer = instruction.target

            elif op is Op.JUMP_IF_NONZERO:
                if memory[self.pointer] != 0:
                    self.instruction_pointer = instruction.target

            self.instruction_pointer += 1
            self.steps += 1

        logger.debug("Halted after %d steps (%d reads, %d writes)",
                     self.steps, self.input_reads, self.output_writes)
        return bytes(self.output)

    def _read_into_cell(self, input_stream: Optional[TextIO]) -> None:
        """Store one input byte in the current cell; a missing byte leaves it unchanged."""
        # ValueError covers UnicodeDecodeError and reads from a closed stream
        try:
            value = read_input_byte(input_stream)
        except (OSError, ValueError) as e:
            logger.warning("Error occurred while reading input: %s", e)
            return
        if value is None:
            logger.warning("Please enter at least one valid single-byte character")
            return
        self.memory[self.pointer] = value
        self.input_reads += 1


def run_program(source: str, input_data: str = "", tape_size: int = DEFAULT_TAPE_SIZE) -> bytes:
    """Run source against in-memory input (one line per input byte) and return its output."""
    itp = BrainfuckInterpreter(source, tape_size,
                               input_stream=io.StringIO(input_data),
                               output_stream=io.BytesIO())
    return itp.run()
