"""Line-based request/reply over a pair of named pipes."""

from __future__ import annotations

import argparse
import os
import sys
import time
from typing import Iterable, TextIO

FIFO_C2S = "/tmp/fifo_c2s"
FIFO_S2C = "/tmp/fifo_s2c"


def create_fifos(paths: Iterable[str | os.PathLike[str]]) -> None:
    """Create each named pipe, leaving ones that already exist alone."""
    for path in paths:
        try:
            os.mkfifo(path, 0o666)
        except FileExistsError:
            pass


def format_reply(message: str) -> str:
    """Build the server's reply to ``message``."""
    return f"服务端回复: 收到 response [{message}]"


def serve(incoming: Iterable[str], outgoing: TextIO, out: TextIO) -> int:
    """Answer every line read from ``incoming``; return how many were handled."""
    handled = 0
    for line in incoming:
        message = line.removesuffix("\n")
        print(f"[Server 收到] {message}", file=out, flush=True)
        outgoing.write(format_reply(message) + "\n")
        outgoing.flush()
        handled += 1
    return handled


def run_client(
    lines: Iterable[str], to_server: TextIO, from_server: TextIO, out: TextIO
) -> int:
    """Send user lines to the server until 'exit' or end of input; return how many were sent."""
    print("[Client] 输入内容，输入 'exit' 退出:", file=out)
    sent = 0
    source = iter(lines)
    while True:
        print("> ", end="", file=out, flush=True)
        line = next(source, None)
        if line is None:
            break
        text = line.removesuffix("\n")
        if text == "exit":
            break
        to_server.write(text + "\n")
        to_server.flush()
        sent += 1
        response = from_server.readline().removesuffix("\n")
        print(f"[Client 收到] {response}", file=out, flush=True)
    return sent


def _parser(prog: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=prog)
    parser.add_argument("--c2s", default=FIFO_C2S, help="client-to-server pipe")
    parser.add_argument("--s2c", default=FIFO_S2C, help="server-to-client pipe")
    return parser


def server_main(argv: list[str] | None = None) -> int:
    """Create the pipes and answer client lines until the client goes away."""
    args = _parser("fifo-server").parse_args(argv)
    create_fifos([args.c2s, args.s2c])
    print("[Server] 等待客户端消息...", flush=True)
    with open(args.c2s, encoding="utf-8") as incoming, open(
        args.s2c, "w", encoding="utf-8"
    ) as outgoing:
        serve(incoming, outgoing, sys.stdout)
    return 0


def client_main(argv: list[str] | None = None) -> int:
    """Read lines from standard input and exchange them with the server."""
    parser = _parser("fifo-client")
    parser.add_argument(
        "--delay", type=float, default=1.0, help="seconds to wait for the server"
    )
    args = parser.parse_args(argv)
    time.sleep(args.delay)
    with open(args.c2s, "w", encoding="utf-8") as to_server, open(
        args.s2c, encoding="utf-8"
    ) as from_server:
        run_client(sys.stdin, to_server, from_server, sys.stdout)
    return 0