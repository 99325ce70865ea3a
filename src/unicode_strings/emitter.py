from __future__ import annotations

from .models import Run


def format_line(run: Run, emit_offsets: bool) -> str:
    """Render a run as one output line, optionally prefixed by its byte offset."""
    if emit_offsets:
        return f"{run.offset}: {run.text}\n"
    return f"{run.text}\n"
