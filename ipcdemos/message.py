"""Fixed-size chat message exchanged over pipes."""

from __future__ import annotations

import struct
from dataclasses import dataclass

DATA_SIZE = 256
_LAYOUT = struct.Struct(f"c{DATA_SIZE}s")
MESSAGE_SIZE = _LAYOUT.size


@dataclass(frozen=True)
class Message:
    """A sender tag and up to 255 bytes of UTF-8 text."""

    sender: str = "A"
    data: str = ""

    def __post_init__(self) -> None:
        try:
            encoded_sender = self.sender.encode("latin-1")
        except UnicodeEncodeError as exc:
            raise ValueError(f"invalid sender {self.sender!r}") from exc
        if len(encoded_sender) != 1:
            raise ValueError(f"sender must be a single character, got {self.sender!r}")
        encoded = self.data.encode("utf-8")
        if len(encoded) > DATA_SIZE - 1:
            truncated = encoded[: DATA_SIZE - 1].decode("utf-8", errors="ignore")
            object.__setattr__(self, "data", truncated)

    def to_bytes(self) -> bytes:
        """Encode to the fixed wire layout: sender byte, then NUL-padded text."""
        return _LAYOUT.pack(self.sender.encode("latin-1"), self.data.encode("utf-8"))

    @classmethod
    def from_bytes(cls, data: bytes) -> Message:
        """Decode one message from exactly ``MESSAGE_SIZE`` bytes."""
        if len(data) != MESSAGE_SIZE:
            raise ValueError(f"expected {MESSAGE_SIZE} bytes, got {len(data)}")
        sender, payload = _LAYOUT.unpack(data)
        text = payload.split(b"\0", 1)[0].decode("utf-8", errors="replace")
        return cls(sender.decode("latin-1"), text)