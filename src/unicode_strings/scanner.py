from __future__ import annotations

import logging
from enum import Enum
from typing import BinaryIO, Callable, Iterator, List

from .classify import build_predicate
from .config import ScanConfig
from .decoding import DEFAULT_CHUNK_SIZE, iter_code_points
from .emitter import format_line
from .models import CodePoint, Run

LOGGER = logging.getLogger(__name__)


class ScanState(Enum):
    IDLE = "idle"
    ACCUMULATING = "accumulating"


class RunAccumulator:
    """Group printable code points into runs and decide which ones qualify.

    A pending run is only closed by a non-printable code point. The offset
    reported for a qualifying run is the byte cursor after that terminating
    code point. At end of stream the pending run is dropped unless the
    configuration enables ``flush_trailing``.
    """

    def __init__(
        self,
        config: ScanConfig,
        predicate: Callable[[str], bool] | None = None,
    ) -> None:
        self._config = config
        self._predicate = predicate or build_predicate(config)
        self._cursor = 0
        self._pending: List[str] = []
        self._state = ScanState.IDLE

    @property
    def state(self) -> ScanState:
        return self._state

    @property
    def cursor(self) -> int:
        """Bytes consumed so far, including the code point last fed."""
        return self._cursor

    @property
    def pending_length(self) -> int:
        return len(self._pending)

    def feed(self, code_point: CodePoint) -> Run | None:
        """Consume one code point; return a Run when it closes a qualifying run."""
        self._cursor += code_point.width
        if self._predicate(code_point.char):
            self._pending.append(code_point.char)
            self._state = ScanState.ACCUMULATING
            return None
        return self._close()

    def finish(self) -> Run | None:
        """Handle end of stream for the pending run."""
        if self._config.flush_trailing:
            return self._close()
        if self._state is ScanState.ACCUMULATING:
            LOGGER.debug(
                "Dropping %d-character run still open at end of stream.",
                len(self._pending),
            )
        self._reset()
        return None

    def _close(self) -> Run | None:
        run = None
        if (
            self._state is ScanState.ACCUMULATING
            and len(self._pending) >= self._config.min_length
        ):
            run = Run(text="".join(self._pending), offset=self._cursor)
        self._reset()
        return run

    def _reset(self) -> None:
        self._pending = []
        self._state = ScanState.IDLE


def iter_runs(
    stream: BinaryIO,
    config: ScanConfig,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> Iterator[Run]:
    """Yield the qualifying runs of a binary stream in stream order."""
    accumulator = RunAccumulator(config)
    for code_point in iter_code_points(stream, chunk_size=chunk_size):
        run = accumulator.feed(code_point)
        if run is not None:
            yield run
    trailing = accumulator.finish()
    if trailing is not None:
        yield trailing
    LOGGER.debug("Scan consumed %d bytes.", accumulator.cursor)


def scan_stream(
    stream: BinaryIO,
    config: ScanConfig,
    write: Callable[[str], object],
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> int:
    """Write one formatted line per qualifying run and return the line count."""
    emitted = 0
    for run in iter_runs(stream, config, chunk_size=chunk_size):
        write(format_line(run, config.emit_offsets))
        emitted += 1
    LOGGER.debug("Emitted %d lines.", emitted)
    return emitted
