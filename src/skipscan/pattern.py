"""Pattern store - the immutable symbol sequence a searcher looks for.

Patterns are normalised once when a searcher is prepared:

- bytes-like input is stored as ``bytes`` (symbols are ints 0..255)
- ``str`` input is stored as ``str`` (symbols are one-char strings)
- any other finite sequence is stored as a ``tuple``
"""

from __future__ import annotations

from array import array
from collections.abc import Callable, Hashable, Sequence
from dataclasses import dataclass, field
from typing import Any

BYTES_LIKE = (bytes, bytearray, memoryview)

Symbols = bytes | str | tuple[Hashable, ...]
WindowCompare = Callable[[Sequence[Any], int], bool]


def normalize_symbols(pattern: Any) -> Symbols:
    """Convert a caller-supplied pattern into its stored immutable form.

    Raises:
        ValueError: pattern is None or empty.
        TypeError: pattern is not a sequence of symbols.
    """
    if pattern is None:
        raise ValueError("pattern must not be empty")
    if isinstance(pattern, memoryview):
        symbols: Symbols = pattern.tobytes()
    elif isinstance(pattern, (bytes, bytearray)):
        symbols = bytes(pattern)
    elif isinstance(pattern, str):
        symbols = pattern
    elif isinstance(pattern, (Sequence, array)):
        symbols = tuple(pattern)
    else:
        raise TypeError(
            f"pattern must be a sequence of symbols, got "
            f"{type(pattern).__name__}"
        )
    if len(symbols) == 0:
        raise ValueError("pattern must not be empty")
    return symbols


@dataclass(frozen=True)
class Pattern:
    """An immutable, non-empty search pattern."""

    symbols: Symbols
    _as_tuple: tuple[Hashable, ...] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        if len(self.symbols) == 0:
            raise ValueError("pattern must not be empty")
        object.__setattr__(self, "_as_tuple", tuple(self.symbols))

    @classmethod
    def from_input(cls, pattern: Any) -> Pattern:
        return cls(normalize_symbols(pattern))

    def __len__(self) -> int:
        return len(self.symbols)

    def __getitem__(self, index: int) -> Any:
        return self.symbols[index]

    def __iter__(self):
        return iter(self.symbols)

    @property
    def length(self) -> int:
        return len(self.symbols)

    def window_comparator(self, buffer: Sequence[Any]) -> WindowCompare:
        """Pick the cheapest whole-window equality check for a buffer.

        Slice equality is only trusted when the buffer and the stored
        pattern have compatible container types; everything else falls
        back to comparing symbol tuples.
        """
        n = len(self.symbols)
        symbols = self.symbols

        if isinstance(symbols, bytes) and isinstance(buffer, BYTES_LIKE):
            # a cast memoryview ("H", "I", ...) holds wider code units
            if not isinstance(buffer, memoryview) or buffer.format == "B":
                return lambda buf, i: buf[i : i + n] == symbols
        if isinstance(symbols, str) and isinstance(buffer, str):
            return lambda buf, i: buf[i : i + n] == symbols

        expected = self._as_tuple
        return lambda buf, i: tuple(buf[i : i + n]) == expected
