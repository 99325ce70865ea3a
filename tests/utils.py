from __future__ import annotations

import io
from pathlib import Path


class FailingReader(io.RawIOBase):
    """Binary stream returning its payload, then raising OSError on the next read."""

    def __init__(self, payload: bytes) -> None:
        super().__init__()
        self._payload = payload
        self._served = False

    def readable(self) -> bool:
        return True

    def read(self, size: int = -1) -> bytes:
        if self._served:
            raise OSError("simulated device error")
        self._served = True
        return self._payload


def write_binary(path: Path, *parts: bytes | str) -> Path:
    """Write a file mixing raw bytes with UTF-8 encoded text segments."""
    data = b"".join(
        part.encode("utf-8") if isinstance(part, str) else part for part in parts
    )
    path.write_bytes(data)
    return path
