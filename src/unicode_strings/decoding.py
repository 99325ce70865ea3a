from __future__ import annotations

import logging
from typing import BinaryIO, Iterator

from .models import CodePoint

LOGGER = logging.getLogger(__name__)

REPLACEMENT_CHARACTER = "\ufffd"
DEFAULT_CHUNK_SIZE = 64 * 1024
# Longest UTF-8 encoded sequence.
MAX_SEQUENCE_WIDTH = 4


def iter_code_points(
    stream: BinaryIO, chunk_size: int = DEFAULT_CHUNK_SIZE
) -> Iterator[CodePoint]:
    """Decode a binary stream as UTF-8, yielding one CodePoint per character.

    Invalid or truncated sequences yield U+FFFD with a width of one byte and
    decoding resumes at the following byte. A read failure ends the sequence
    the same way end-of-stream does. The stream is never closed here.
    """
    buffer = b""
    pos = 0
    exhausted = False
    chunk_size = max(1, chunk_size)

    while True:
        # Keep a full sequence available so characters split across reads decode.
        while not exhausted and len(buffer) - pos < MAX_SEQUENCE_WIDTH:
            chunk = _read_chunk(stream, chunk_size)
            if not chunk:
                exhausted = True
                break
            buffer = buffer[pos:] + chunk
            pos = 0

        if pos >= len(buffer):
            return

        lead = buffer[pos]
        if lead < 0x80:
            yield CodePoint(chr(lead), 1)
            pos += 1
            continue

        width = _sequence_width(lead)
        if width and pos + width <= len(buffer):
            try:
                char = buffer[pos : pos + width].decode("utf-8")
            except UnicodeDecodeError:
                pass
            else:
                yield CodePoint(char, width)
                pos += width
                continue

        yield CodePoint(REPLACEMENT_CHARACTER, 1)
        pos += 1


def _sequence_width(lead: int) -> int:
    """Return the encoded length announced by a UTF-8 lead byte, 0 if invalid."""
    if 0xC2 <= lead <= 0xDF:
        return 2
    if 0xE0 <= lead <= 0xEF:
        return 3
    if 0xF0 <= lead <= 0xF4:
        return 4
    return 0


def _read_chunk(stream: BinaryIO, size: int) -> bytes:
    try:
        return stream.read(size) or b""
    except OSError as exc:
        LOGGER.warning("Read failed, treating as end of stream: %s", exc)
        return b""
