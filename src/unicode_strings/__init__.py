"""
unicode_strings finds the printable Unicode strings embedded in binary data.
"""

from __future__ import annotations

from .classify import build_predicate, is_printable
from .config import ScanConfig, config_from_dict, config_from_yaml, load_config
from .decoding import iter_code_points
from .emitter import format_line
from .models import CodePoint, Run
from .scanner import RunAccumulator, ScanState, iter_runs, scan_stream

__all__ = [
    "ScanConfig",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
    "CodePoint",
    "Run",
    "iter_code_points",
    "is_printable",
    "build_predicate",
    "RunAccumulator",
    "ScanState",
    "iter_runs",
    "scan_stream",
    "format_line",
]

__version__ = "0.1.0"
