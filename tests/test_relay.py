import io
import os

import pytest

from ipcdemos.message import MESSAGE_SIZE, Message
from ipcdemos.relay import (
    client_main,
    pipe_paths,
    receive_loop,
    relay,
    send_lines,
)


def _pipe_with(payload: bytes):
    read_fd, write_fd = os.pipe()
    os.write(write_fd, payload)
    os.close(write_fd)
    return os.fdopen(read_fd, "rb", buffering=0)


def test_pipe_paths():
    assert pipe_paths("A") == ("/tmp/pipe_A2S", "/tmp/pipe_S2A")
    assert pipe_paths("B") == ("/tmp/pipe_B2S", "/tmp/pipe_S2B")


def test_pipe_paths_unknown_client():
    with pytest.raises(ValueError):
        pipe_paths("C")


def test_send_lines_writes_whole_messages():
    stream = io.BytesIO()
    assert send_lines(["one\n", "two"], "B", stream) == 2
    raw = stream.getvalue()
    assert len(raw) == 2 * MESSAGE_SIZE
    first = Message.from_bytes(raw[:MESSAGE_SIZE])
    second = Message.from_bytes(raw[MESSAGE_SIZE:])
    assert first == Message("B", "one")
    assert second == Message("B", "two")


def test_receive_loop_prints_messages():
    stream = io.BytesIO(Message("A", "hi").to_bytes() + Message("A", "yo").to_bytes())
    out = io.StringIO()
    assert receive_loop(stream, "B", out) == 2
    assert out.getvalue().splitlines() == ["[B] From A: hi", "[B] From A: yo"]


def test_receive_loop_drops_partial_message():
    stream = io.BytesIO(Message("A", "hi").to_bytes() + b"A12")
    out = io.StringIO()
    assert receive_loop(stream, "B", out) == 1
    assert out.getvalue() == "[B] From A: hi\n"


def test_relay_forwards_both_ways():
    from_a = Message("A", "to b")
    from_b = Message("B", "to a")
    a_in = _pipe_with(from_a.to_bytes())
    b_in = _pipe_with(from_b.to_bytes())
    a_out, b_out, out = io.BytesIO(), io.BytesIO(), io.StringIO()
    with a_in, b_in:
        assert relay(a_in, b_in, a_out, b_out, out) == 2
    assert b_out.getvalue() == from_a.to_bytes()
    assert a_out.getvalue() == from_b.to_bytes()
    lines = sorted(out.getvalue().splitlines())
    assert lines == ["[S] A->B: to b", "[S] B->A: to a"]


def test_relay_with_no_traffic():
    a_in, b_in = _pipe_with(b""), _pipe_with(b"")
    a_out, b_out = io.BytesIO(), io.BytesIO()
    with a_in, b_in:
        assert relay(a_in, b_in, a_out, b_out, io.StringIO()) == 0
    assert a_out.getvalue() == b"" and b_out.getvalue() == b""


@pytest.mark.parametrize("argv", [[], ["C"], ["A", "B"], [""]])
def test_client_main_rejects_bad_arguments(argv, capsys):
    assert client_main(argv) == 1
    assert "Usage: ./client A|B" in capsys.readouterr().err