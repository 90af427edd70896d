"""Shared helpers for CLI commands."""

from __future__ import annotations

import time
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from skipscan.config import DEMO_TEXT
from skipscan.models import MatchRecord, SearchReport
from skipscan.searchers import create_searcher
from skipscan.symbols import decode_symbols, encode_symbols


def load_text(text: str | None, file: Path | None) -> str:
    """Resolve the input text: --text, then --file, then the demo sentence."""
    if text is not None and file is not None:
        raise ValueError("use either --text or --file, not both")
    if text is not None:
        return text
    if file is not None:
        return file.read_text(encoding="utf-8")
    return DEMO_TEXT


def run_search(
    algorithm: str,
    pattern: str,
    text: str,
    encoding: str,
    context: int,
) -> SearchReport:
    """Enumerate every match of ``pattern`` in ``text`` with one algorithm.

    ``context`` is the number of trailing symbols rendered after each match;
    zero or less renders the whole remainder of the buffer.
    """
    buffer = encode_symbols(text, encoding)
    needle = encode_symbols(pattern, encoding)
    if len(buffer) == 0:
        raise ValueError("input is empty")

    searcher = create_searcher(algorithm, needle)
    n = searcher.pattern_length
    hits: list[tuple[int, int]] = []

    # only the scan is timed; rendering happens afterwards
    t0 = time.perf_counter()
    for offset in searcher.iter_matches(buffer):
        hits.append((offset, searcher.comparisons))
    elapsed_ms = (time.perf_counter() - t0) * 1000

    matches = [
        MatchRecord(
            offset=offset,
            match=decode_symbols(buffer[offset : offset + n], encoding),
            following=decode_symbols(
                _following(buffer, offset + n, context), encoding
            ),
            comparisons=comparisons,
        )
        for offset, comparisons in hits
    ]

    return SearchReport(
        algorithm=algorithm,
        pattern=pattern,
        encoding=encoding,
        buffer_length=len(buffer),
        matches=matches,
        comparisons=searcher.comparisons,
        elapsed_ms=elapsed_ms,
    )


def _following(buffer: Sequence[Any], start: int, context: int):
    if context <= 0:
        return buffer[start:]
    return buffer[start : start + context]
