"""Property tests: every searcher agrees with a brute-force scan."""

from hypothesis import given, settings
from hypothesis import strategies as st

from skipscan.cursor import NOT_FOUND
from skipscan.searchers import ALGORITHM_NAMES, create_searcher

small_text = st.text(alphabet="abc", min_size=1, max_size=60)
small_pattern = st.text(alphabet="abc", min_size=1, max_size=5)


def brute_force(buffer, pattern):
    n = len(pattern)
    return [
        i for i in range(len(buffer) - n + 1) if buffer[i : i + n] == pattern
    ]


def enumerate_matches(algorithm, buffer, pattern):
    searcher = create_searcher(algorithm, pattern)
    offsets = []
    while (offset := searcher.search(buffer)) != NOT_FOUND:
        offsets.append(offset)
    return offsets


@given(small_text, small_pattern)
def test_text_matches_brute_force(buffer, pattern):
    expected = brute_force(buffer, pattern)
    for algorithm in ALGORITHM_NAMES:
        assert enumerate_matches(algorithm, buffer, pattern) == expected


@given(st.binary(min_size=1, max_size=80), st.binary(min_size=1, max_size=4))
def test_bytes_match_brute_force(buffer, pattern):
    expected = brute_force(buffer, pattern)
    for algorithm in ALGORITHM_NAMES:
        assert enumerate_matches(algorithm, buffer, pattern) == expected


@given(
    st.lists(st.integers(0, 3), min_size=1, max_size=60),
    st.lists(st.integers(0, 3), min_size=1, max_size=4),
)
def test_int_sequences_match_brute_force(buffer, pattern):
    expected = brute_force(buffer, pattern)
    for algorithm in ALGORITHM_NAMES:
        assert enumerate_matches(algorithm, buffer, pattern) == expected


@given(small_text, small_pattern)
def test_offsets_strictly_increasing(buffer, pattern):
    for algorithm in ALGORITHM_NAMES:
        offsets = enumerate_matches(algorithm, buffer, pattern)
        assert all(b > a for a, b in zip(offsets, offsets[1:]))


@settings(max_examples=50)
@given(small_text, small_pattern, st.integers(1, 60))
def test_length_prefix_matches_brute_force(buffer, pattern, length):
    length = min(length, len(buffer))
    expected = brute_force(buffer[:length], pattern)
    for algorithm in ALGORITHM_NAMES:
        searcher = create_searcher(algorithm, pattern)
        assert list(searcher.iter_matches(buffer, length)) == expected


@given(small_text, small_pattern)
def test_rewind_is_idempotent(buffer, pattern):
    for algorithm in ALGORITHM_NAMES:
        searcher = create_searcher(algorithm, pattern)
        first = list(searcher.iter_matches(buffer))
        searcher.rewind()
        again = []
        while (offset := searcher.search(buffer)) != NOT_FOUND:
            again.append(offset)
        assert again == first
