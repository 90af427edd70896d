from skipscan.cursor import MAX_BUFFER_LENGTH, NOT_FOUND, SearchCursor
from skipscan.pattern import Pattern
from skipscan.searchers import (
    ALGORITHM_NAMES,
    SEARCHERS,
    Algorithm,
    BoyerMooreSearcher,
    HorspoolSearcher,
    Searcher,
    SundaySearcher,
    create_searcher,
    find_all,
)
from skipscan.shift_table import ShiftTable, build_bad_character_table

__version__ = "0.1.0"

__all__ = [
    "ALGORITHM_NAMES",
    "Algorithm",
    "BoyerMooreSearcher",
    "HorspoolSearcher",
    "MAX_BUFFER_LENGTH",
    "NOT_FOUND",
    "Pattern",
    "SEARCHERS",
    "SearchCursor",
    "Searcher",
    "ShiftTable",
    "SundaySearcher",
    "build_bad_character_table",
    "create_searcher",
    "find_all",
]
