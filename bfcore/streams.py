"""Adapters between the I/O instructions and the process's streams."""

import io
import sys
from typing import BinaryIO, Optional, TextIO, Union

MAX_BYTE = 0xFF

OutputStream = Union[BinaryIO, TextIO]


def read_input_byte(stream: Optional[TextIO]) -> Optional[int]:
    """Read one line and return the byte value of its first character.

    Returns None at end of input or when the character does not fit in a
    single byte. A missing stream (``sys.stdin`` is None when fd 0 is
    closed) counts as end of input. Read errors propagate to the caller.
    """
    if stream is None:
        return None
    line = stream.readline()
    if not line:
        return None
    value = ord(line[0])
    if value > MAX_BYTE:
        return None
    return value


def write_output_byte(stream: OutputStream, value: int) -> None:
    """Write one byte, as raw bytes on binary streams or a Latin-1 character on text ones."""
    if isinstance(stream, io.TextIOBase):
        stream.write(chr(value))
    else:
        stream.write(bytes((value,)))
    stream.flush()


def default_input() -> Optional[TextIO]:
    return sys.stdin


def default_output(name: str = "stdout") -> OutputStream:
    """Binary buffer behind stdout or stderr, falling back to the text stream."""
    stream = sys.stderr if name == "stderr" else sys.stdout
    return getattr(stream, "buffer", stream)
