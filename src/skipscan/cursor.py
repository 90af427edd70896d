"""Search cursor - per-searcher scan position and lifecycle state.

The cursor tracks where the next scan window starts, whether the searcher
has run out of matches, and how many window alignments have been tried.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

# largest unsigned 64-bit index, reserved as the "no more matches" value
NOT_FOUND = 2**64 - 1
MAX_BUFFER_LENGTH = NOT_FOUND - 1

CursorState = Literal["fresh", "scanning", "exhausted"]


@dataclass
class SearchCursor:
    next_start: int = 0
    state: CursorState = "fresh"
    # cumulative window alignments since construction; survives rewind
    comparisons: int = 0

    @property
    def exhausted(self) -> bool:
        return self.state == "exhausted"

    def advance(self, match_offset: int) -> None:
        """Record a match; the next scan starts one symbol later."""
        self.next_start = match_offset + 1
        self.state = "scanning"

    def exhaust(self) -> None:
        self.next_start = NOT_FOUND
        self.state = "exhausted"

    def rewind(self) -> None:
        self.next_start = 0
        self.state = "fresh"
