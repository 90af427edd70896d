"""Bad-character shift tables.

A shift table maps each symbol of a pattern to the distance between its
rightmost occurrence and the end of the pattern. Symbols that never occur
fall back to a default shift equal to the pattern length.

Boyer-Moore and Horspool build the table over every position except the
last one; Sunday (Quick Search) includes the last position because its
lookup symbol sits one past the window.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterator, Mapping, Sequence
from types import MappingProxyType
from typing import Any


class ShiftTable(Mapping[Hashable, int]):
    """Immutable symbol -> skip distance mapping with a default shift."""

    __slots__ = ("_entries", "_default", "_include_last_symbol")

    def __init__(
        self,
        entries: Mapping[Hashable, int],
        default: int,
        include_last_symbol: bool = False,
    ) -> None:
        if default < 1:
            raise ValueError(f"default shift must be positive, got {default}")
        self._entries = MappingProxyType(dict(entries))
        self._default = default
        self._include_last_symbol = include_last_symbol

    def __getitem__(self, symbol: Hashable) -> int:
        return self._entries[symbol]

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return (
            f"ShiftTable({dict(self._entries)!r}, default={self._default}, "
            f"include_last_symbol={self._include_last_symbol})"
        )

    @property
    def default(self) -> int:
        return self._default

    @property
    def include_last_symbol(self) -> bool:
        return self._include_last_symbol

    def shift(self, symbol: Any) -> int:
        """Skip distance for a symbol, or the default when it is absent."""
        return self._entries.get(symbol, self._default)

    def lookup(self):
        """Bound lookup for scan loops: ``lookup(symbol, default)``."""
        return self._entries.get


def build_bad_character_table(
    pattern: Sequence[Any],
    include_last_symbol: bool = False,
) -> ShiftTable:
    """Build a bad-character table for a pattern.

    For every position ``i`` in ``[0, n - 1)`` (or ``[0, n)`` when
    ``include_last_symbol`` is set) the entry for ``pattern[i]`` is
    ``n - i - 1``. Later positions overwrite earlier ones, so each symbol
    keeps the distance of its rightmost occurrence.

    Args:
        pattern: Non-empty symbol sequence.
        include_last_symbol: Also index the final pattern symbol (Sunday).

    Returns:
        A ShiftTable whose default shift is ``len(pattern)``.
    """
    n = len(pattern)
    if n == 0:
        raise ValueError("pattern must not be empty")

    stop = n if include_last_symbol else n - 1
    entries: dict[Hashable, int] = {}
    for i in range(stop):
        entries[pattern[i]] = n - i - 1

    return ShiftTable(
        entries, default=n, include_last_symbol=include_last_symbol
    )
