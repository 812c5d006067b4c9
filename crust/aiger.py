"""Reader for the binary AIGER format."""

from __future__ import annotations

from dataclasses import dataclass, field
from os import PathLike
from typing import BinaryIO

from crust.aig import AIG, Signal


class AigerError(ValueError):
    """Raised when an AIGER stream is malformed or truncated."""


@dataclass
class AigerFile:
    """A graph read from an AIGER file together with its inputs and outputs."""

    aig: AIG = field(default_factory=AIG)
    inputs: list[Signal] = field(default_factory=list)
    outputs: list[Signal] = field(default_factory=list)


def _literal_to_signal(literal: int) -> Signal:
    return Signal(literal // 2, literal % 2 == 1)


def read_leb(stream: BinaryIO) -> int:
    """Decode one unsigned little-endian base-128 integer from ``stream``."""
    result = 0
    shift = 0
    while True:
        chunk = stream.read(1)
        if not chunk:
            raise AigerError("unexpected end of file while reading a delta")
        byte = chunk[0]
        result |= (byte & 0x7F) << shift
        if not byte & 0x80:
            return result
        shift += 7


def _parse_int(text: str, what: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise AigerError(f"{what} not parseable: {text!r}") from None
    if value < 0:
        raise AigerError(f"{what} must not be negative: {text!r}")
    return value


def _read_text_line(stream: BinaryIO) -> str:
    raw = stream.readline()
    try:
        return raw.decode("ascii")
    except UnicodeDecodeError:
        raise AigerError("non-ASCII text line") from None


def parse_aiger(stream: BinaryIO) -> AigerFile:
    """Build a graph from a binary AIGER stream."""
    header = _read_text_line(stream).split()
    if len(header) < 6 or header[0] != "aig":
        raise AigerError("invalid header")
    num_inputs = _parse_int(header[2], "input count")
    num_latches = _parse_int(header[3], "latch count")
    num_outputs = _parse_int(header[4], "output count")
    num_ands = _parse_int(header[5], "AND count")

    outputs = [
        _literal_to_signal(_parse_int(_read_text_line(stream).strip(), "output"))
        for _ in range(num_outputs)
    ]

    aig = AIG()
    base = 2 * (num_inputs + num_latches) + 2
    for n in range(num_ands):
        delta0 = read_leb(stream)
        delta1 = read_leb(stream)
        lhs = base + 2 * n
        rhs0 = lhs - delta0
        rhs1 = rhs0 - delta1
        if rhs0 < 0 or rhs1 < 0:
            raise AigerError(f"negative literal in AND gate {lhs}")
        aig.create_and(_literal_to_signal(rhs0), _literal_to_signal(rhs1), lhs // 2)

    inputs = [Signal(k + 1, False) for k in range(num_inputs)]
    return AigerFile(aig=aig, inputs=inputs, outputs=outputs)


def read_aiger(filename: str | PathLike[str]) -> AigerFile:
    """Read a binary AIGER file."""
    with open(filename, "rb") as stream:
        return parse_aiger(stream)