import io

import pytest

from crust.aig import AndNode, Signal
from crust.aiger import AigerError, AigerFile, parse_aiger, read_aiger, read_leb


def _encode(value):
    out = bytearray()
    while True:
        low = value & 0x7F
        value >>= 7
        if value:
            out.append(low | 0x80)
        else:
            out.append(low)
            return bytes(out)


@pytest.mark.parametrize(
    "data, expected",
    [(b"\x05", 5), (b"\x7f", 127), (b"\x80\x01", 128)],
)
def test_read_leb_known_values(data, expected):
    assert read_leb(io.BytesIO(data)) == expected


@pytest.mark.parametrize("value", [0, 1, 300, 16384, 2**40 + 17])
def test_read_leb_round_trip(value):
    stream = io.BytesIO(_encode(value) + b"rest")
    assert read_leb(stream) == value
    assert stream.read() == b"rest"


def test_read_leb_truncated():
    with pytest.raises(AigerError):
        read_leb(io.BytesIO(b"\x85"))


def _file(header, outputs, deltas):
    body = "".join(f"{o}\n" for o in outputs).encode()
    gates = b"".join(_encode(d) for d in deltas)
    return io.BytesIO(header.encode() + b"\n" + body + gates)


def test_parse_single_and_gate():
    result = parse_aiger(_file("aig 3 2 0 1 1", [6], [2, 2]))
    assert isinstance(result, AigerFile)
    assert result.inputs == [Signal(1), Signal(2)]
    assert result.outputs == [Signal(3)]
    assert result.aig.node_map == {3: AndNode(Signal(1), Signal(2))}


def test_parse_inverted_literals():
    result = parse_aiger(_file("aig 3 2 0 1 1", [7], [1, 3]))
    assert result.outputs == [Signal(3, True)]
    assert result.aig.node_map == {3: AndNode(Signal(1), Signal(2, True))}


def test_parse_no_gates_constant_output():
    result = parse_aiger(_file("aig 0 0 0 1 0", [1], []))
    assert result.inputs == []
    assert result.outputs == [Signal(0, True)]
    assert result.aig.node_map == {}


@pytest.mark.parametrize(
    "header", ["aag 3 2 0 1 1", "aig 3 2 0 1", "", "aig x 2 0 1 1 ".replace("x", "3") + "z"]
)
def test_invalid_headers(header):
    if header.endswith("z"):
        header = "aig 3 two 0 1 1"
    with pytest.raises(AigerError):
        parse_aiger(_file(header, [], []))


def test_unparseable_output():
    with pytest.raises(AigerError):
        parse_aiger(_file("aig 3 2 0 1 1", ["abc"], [2, 2]))


def test_truncated_gates():
    with pytest.raises(AigerError):
        parse_aiger(_file("aig 3 2 0 1 1", [6], [2]))


def test_negative_literal():
    with pytest.raises(AigerError):
        parse_aiger(_file("aig 3 2 0 1 1", [6], [9, 0]))


def test_read_aiger_from_file(tmp_path):
    path = tmp_path / "and.aig"
    path.write_bytes(_file("aig 3 2 0 1 1", [6], [2, 2]).getvalue())
    result = read_aiger(path)
    assert result.outputs == [Signal(3)]
    assert result.inputs == [Signal(1), Signal(2)]


def test_read_aiger_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_aiger(tmp_path / "missing.aig")