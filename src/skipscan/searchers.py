"""Resumable single-pattern searchers.

Three skip-table algorithms share one contract:

- ``BoyerMooreSearcher``: right-to-left comparison, bad-character shift
  from the mismatching symbol (no good-suffix rule)
- ``HorspoolSearcher``: whole-window comparison, shift from the window's
  last symbol
- ``SundaySearcher``: whole-window comparison, shift from the symbol just
  past the window

Each ``search`` call resumes one symbol after the previous match, so
repeated calls enumerate every (possibly overlapping) occurrence::

    searcher = HorspoolSearcher(b"abc")
    while (offset := searcher.search(data)) != NOT_FOUND:
        ...
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator, Sequence
from typing import Any, Literal, get_args

from skipscan.cursor import (
    MAX_BUFFER_LENGTH,
    NOT_FOUND,
    CursorState,
    SearchCursor,
)
from skipscan.logging_config import get_logger
from skipscan.pattern import Pattern, Symbols
from skipscan.shift_table import ShiftTable, build_bad_character_table

logger = get_logger(__name__)

Algorithm = Literal["boyer-moore", "horspool", "sunday"]
ALGORITHM_NAMES: tuple[str, ...] = get_args(Algorithm)


def _check_buffer(buffer: Sequence[Any] | None, length: int | None) -> int:
    """Validate a search buffer and return the effective length."""
    if buffer is None:
        raise ValueError("buffer must not be None")
    size = len(buffer)
    if length is None:
        length = size
    if length < 1:
        raise ValueError("buffer must not be empty")
    if length > size:
        raise ValueError(
            f"length {length} exceeds buffer size {size}"
        )
    if length > MAX_BUFFER_LENGTH:
        raise ValueError(
            f"buffers longer than {MAX_BUFFER_LENGTH} symbols are unsupported"
        )
    return length


class Searcher(ABC):
    """Shared contract for the resumable searchers.

    A searcher owns its pattern, shift table and cursor. Buffers passed to
    ``search`` are only borrowed for the duration of the call.
    """

    name: Algorithm
    # whether the shift table indexes the final pattern symbol
    include_last_symbol: bool = False

    def __init__(self, pattern: Any) -> None:
        self._cursor = SearchCursor()
        self._pattern: Pattern
        self._table: ShiftTable
        self.prepare(pattern)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(pattern={self._pattern.symbols!r}, "
            f"state={self._cursor.state!r})"
        )

    def prepare(self, pattern: Any) -> None:
        """Replace the pattern, rebuild the shift table and rewind.

        The new pattern is validated before anything is replaced, so a
        rejected pattern leaves the searcher as it was.

        Raises:
            ValueError: pattern is None or empty.
            TypeError: pattern is not a sequence.
        """
        new_pattern = Pattern.from_input(pattern)
        new_table = build_bad_character_table(
            new_pattern.symbols,
            include_last_symbol=self.include_last_symbol,
        )

        self._pattern = new_pattern
        self._table = new_table
        self._cursor.rewind()
        logger.debug(
            "prepared %s searcher: pattern length %d, %d table entries",
            self.name,
            len(new_pattern),
            len(new_table),
        )

    def rewind(self) -> None:
        """Restart scanning from offset 0 with the same pattern."""
        self._cursor.rewind()

    def search(
        self,
        buffer: Sequence[Any],
        length: int | None = None,
    ) -> int:
        """Find the next occurrence of the pattern.

        Args:
            buffer: Symbol sequence to scan (bytes, str, list, ...).
            length: Number of leading symbols of ``buffer`` to consider.
                Defaults to ``len(buffer)``.

        Returns:
            Start offset of the next match, or NOT_FOUND once the buffer
            is exhausted. After NOT_FOUND every call returns NOT_FOUND
            until ``rewind`` or ``prepare``.

        Raises:
            ValueError: buffer is None/empty or ``length`` is out of range.
        """
        length = _check_buffer(buffer, length)
        if self._cursor.exhausted:
            return NOT_FOUND

        self._cursor.state = "scanning"
        offset = self._scan(buffer, length)
        if offset == NOT_FOUND:
            self._cursor.exhaust()
            logger.debug(
                "%s search exhausted after %d comparisons",
                self.name,
                self._cursor.comparisons,
            )
        else:
            self._cursor.advance(offset)
        return offset

    @abstractmethod
    def _scan(self, buffer: Sequence[Any], length: int) -> int:
        """Scan from the cursor; return a match offset or NOT_FOUND.

        Implementations bump ``self._cursor.comparisons`` once per window
        alignment and leave ``next_start``/``state`` to ``search``.
        """

    def iter_matches(
        self,
        buffer: Sequence[Any],
        length: int | None = None,
    ) -> Iterator[int]:
        """Rewind, then yield every match offset in increasing order."""
        self.rewind()
        while True:
            offset = self.search(buffer, length)
            if offset == NOT_FOUND:
                return
            yield offset

    def comparison_count(self) -> int:
        return self._cursor.comparisons

    @property
    def comparisons(self) -> int:
        """Window alignments attempted since construction."""
        return self._cursor.comparisons

    @property
    def pattern(self) -> Symbols:
        return self._pattern.symbols

    @property
    def pattern_length(self) -> int:
        return len(self._pattern)

    @property
    def shift_table(self) -> ShiftTable:
        return self._table

    @property
    def state(self) -> CursorState:
        return self._cursor.state

    @property
    def next_start(self) -> int:
        return self._cursor.next_start


class BoyerMooreSearcher(Searcher):
    """Boyer-Moore with the bad-character rule only."""

    name: Algorithm = "boyer-moore"
    include_last_symbol = False

    def _scan(self, buffer: Sequence[Any], length: int) -> int:
        pattern = self._pattern.symbols
        n = len(pattern)
        shift = self._table.lookup()
        cursor = self._cursor

        # i is the buffer index aligned with the last pattern symbol
        i = cursor.next_start + n - 1
        while i < length:
            cursor.comparisons += 1
            j = 0
            while j < n and buffer[i - j] == pattern[n - j - 1]:
                j += 1
            if j == n:
                return i - (n - 1)

            k = shift(buffer[i - j], n)
            if j < k:
                i += k - j - 1
            i += 1

        return NOT_FOUND


class HorspoolSearcher(Searcher):
    """Boyer-Moore-Horspool: shift on the window's last symbol."""

    name: Algorithm = "horspool"
    include_last_symbol = False

    def _scan(self, buffer: Sequence[Any], length: int) -> int:
        n = len(self._pattern)
        shift = self._table.lookup()
        window_equals = self._pattern.window_comparator(buffer)
        cursor = self._cursor

        i = cursor.next_start
        while i + n <= length:
            cursor.comparisons += 1
            if window_equals(buffer, i):
                return i
            i += shift(buffer[i + n - 1], n)

        return NOT_FOUND


class SundaySearcher(Searcher):
    """Sunday's Quick Search: shift on the symbol after the window."""

    name: Algorithm = "sunday"
    include_last_symbol = True

    def _scan(self, buffer: Sequence[Any], length: int) -> int:
        n = len(self._pattern)
        shift = self._table.lookup()
        window_equals = self._pattern.window_comparator(buffer)
        cursor = self._cursor

        i = cursor.next_start
        while i + n <= length:
            cursor.comparisons += 1
            if window_equals(buffer, i):
                return i
            if i + n == length:
                # no symbol follows the last possible window
                break
            i += shift(buffer[i + n], n) + 1

        return NOT_FOUND


SEARCHERS: dict[str, type[Searcher]] = {
    "boyer-moore": BoyerMooreSearcher,
    "horspool": HorspoolSearcher,
    "sunday": SundaySearcher,
}


def create_searcher(algorithm: str, pattern: Any) -> Searcher:
    """Construct the searcher registered under ``algorithm``."""
    try:
        cls = SEARCHERS[algorithm]
    except KeyError:
        raise ValueError(
            f"unknown algorithm {algorithm!r} "
            f"(expected one of: {', '.join(ALGORITHM_NAMES)})"
        ) from None
    return cls(pattern)


def find_all(
    buffer: Sequence[Any],
    pattern: Any,
    algorithm: str = "horspool",
) -> list[int]:
    """Return every start offset of ``pattern`` in ``buffer``."""
    return list(create_searcher(algorithm, pattern).iter_matches(buffer))
