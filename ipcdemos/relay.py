"""Two-client chat relayed by a server through four named pipes."""

from __future__ import annotations

import argparse
import os
import selectors
import sys
import threading
from typing import BinaryIO, Iterable, TextIO

from .fifo import create_fifos
from .message import MESSAGE_SIZE, Message

A2S = "/tmp/pipe_A2S"
S2A = "/tmp/pipe_S2A"
B2S = "/tmp/pipe_B2S"
S2B = "/tmp/pipe_S2B"

_USAGE = "Usage: ./client A|B"


def pipe_paths(client: str) -> tuple[str, str]:
    """Return the (send, receive) pipe paths for client 'A' or 'B'."""
    if client == "A":
        return A2S, S2A
    if client == "B":
        return B2S, S2B
    raise ValueError(f"unknown client {client!r}; expected 'A' or 'B'")


def _read_message(stream: BinaryIO) -> Message | None:
    """Read one whole message, or None at end of stream."""
    buffer = bytearray()
    while len(buffer) < MESSAGE_SIZE:
        chunk = stream.read(MESSAGE_SIZE - len(buffer))
        if not chunk:
            return None
        buffer += chunk
    return Message.from_bytes(bytes(buffer))


def relay(
    a_in: BinaryIO, b_in: BinaryIO, a_out: BinaryIO, b_out: BinaryIO, out: TextIO
) -> int:
    """Forward A's messages to B and B's to A until both inputs close; return the count."""
    forwarded = 0
    with selectors.DefaultSelector() as selector:
        selector.register(a_in, selectors.EVENT_READ, (b_out, "A->B"))
        selector.register(b_in, selectors.EVENT_READ, (a_out, "B->A"))
        while selector.get_map():
            for key, _ in selector.select():
                target, label = key.data
                message = _read_message(key.fileobj)
                if message is None:
                    selector.unregister(key.fileobj)
                    continue
                target.write(message.to_bytes())
                target.flush()
                print(f"[S] {label}: {message.data}", file=out, flush=True)
                forwarded += 1
    return forwarded


def receive_loop(stream: BinaryIO, client: str, out: TextIO) -> int:
    """Print every message arriving on ``stream``; return how many arrived."""
    received = 0
    while (message := _read_message(stream)) is not None:
        print(f"[{client}] From {message.sender}: {message.data}", file=out, flush=True)
        received += 1
    return received


def send_lines(lines: Iterable[str], client: str, stream: BinaryIO) -> int:
    """Send each line as a message from ``client``; return how many were sent."""
    sent = 0
    for line in lines:
        stream.write(Message(client, line.removesuffix("\n")).to_bytes())
        stream.flush()
        sent += 1
    return sent


def server_main(argv: list[str] | None = None) -> int:
    """Create the pipes and relay between clients A and B until both leave."""
    argparse.ArgumentParser(prog="relay-server").parse_args(argv)
    paths = [A2S, S2A, B2S, S2B]
    create_fifos(paths)
    try:
        with open(A2S, "rb", buffering=0) as a_in, open(
            B2S, "rb", buffering=0
        ) as b_in, open(S2A, "wb", buffering=0) as a_out, open(
            S2B, "wb", buffering=0
        ) as b_out:
            relay(a_in, b_in, a_out, b_out, sys.stdout)
    finally:
        for path in paths:
            try:
                os.unlink(path)
            except FileNotFoundError:
                pass
    return 0


def client_main(argv: list[str] | None = None) -> int:
    """Chat as client A or B: send stdin lines, print incoming messages."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1 or not args[0] or args[0][0] not in "AB":
        print(_USAGE, file=sys.stderr)
        return 1

    client = args[0][0]
    send_path, recv_path = pipe_paths(client)

    def receive() -> None:
        with open(recv_path, "rb", buffering=0) as stream:
            receive_loop(stream, client, sys.stdout)

    with open(send_path, "wb", buffering=0) as send_stream:
        receiver = threading.Thread(target=receive)
        receiver.start()
        send_lines(sys.stdin, client, send_stream)
    receiver.join()
    return 0