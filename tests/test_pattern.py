"""Tests for the pattern store, search cursor and configuration."""

import importlib
from array import array

import pytest

from skipscan import config
from skipscan.config import env_flag, env_int
from skipscan.cursor import MAX_BUFFER_LENGTH, NOT_FOUND, SearchCursor
from skipscan.pattern import Pattern, normalize_symbols


class TestNormalizeSymbols:
    def test_bytes_kept(self):
        assert normalize_symbols(b"ab") == b"ab"

    def test_bytearray_frozen_to_bytes(self):
        source = bytearray(b"ab")
        symbols = normalize_symbols(source)
        source[0] = ord("z")
        assert symbols == b"ab"

    def test_memoryview_copied(self):
        assert normalize_symbols(memoryview(b"xyz")) == b"xyz"

    def test_str_kept(self):
        assert normalize_symbols("ab") == "ab"

    def test_list_becomes_tuple(self):
        assert normalize_symbols([1, 2]) == (1, 2)

    def test_array_becomes_tuple(self):
        assert normalize_symbols(array("H", [1, 2])) == (1, 2)

    def test_none_rejected(self):
        with pytest.raises(ValueError):
            normalize_symbols(None)

    def test_non_sequence_rejected(self):
        with pytest.raises(TypeError):
            normalize_symbols({1, 2})


class TestPattern:
    def test_length(self):
        assert Pattern.from_input("abc").length == 3
        assert len(Pattern.from_input(b"ab")) == 2

    def test_is_immutable(self):
        pattern = Pattern.from_input("abc")
        with pytest.raises(AttributeError):
            pattern.symbols = "xyz"  # type: ignore[misc]

    def test_empty_rejected(self):
        with pytest.raises(ValueError, match="must not be empty"):
            Pattern("")

    def test_bytes_window_comparator(self):
        compare = Pattern.from_input(b"bc").window_comparator(b"abcd")
        assert compare(b"abcd", 1)
        assert not compare(b"abcd", 0)

    def test_mixed_container_comparator(self):
        compare = Pattern.from_input(b"bc").window_comparator([97, 98, 99])
        assert compare([97, 98, 99], 1)

    def test_wide_memoryview_compares_symbols(self):
        units = memoryview(array("H", [1, 2, 3]).tobytes()).cast("H")
        compare = Pattern.from_input([2, 3]).window_comparator(units)
        assert compare(units, 1)


class TestSearchCursor:
    def test_initial_state(self):
        cursor = SearchCursor()
        assert cursor.next_start == 0
        assert cursor.state == "fresh"
        assert cursor.comparisons == 0

    def test_advance_moves_one_past_match(self):
        cursor = SearchCursor()
        cursor.advance(7)
        assert cursor.next_start == 8
        assert cursor.state == "scanning"

    def test_exhaust_uses_sentinel(self):
        cursor = SearchCursor()
        cursor.exhaust()
        assert cursor.exhausted
        assert cursor.next_start == NOT_FOUND

    def test_rewind_keeps_comparisons(self):
        cursor = SearchCursor(comparisons=5)
        cursor.exhaust()
        cursor.rewind()
        assert cursor.state == "fresh"
        assert cursor.next_start == 0
        assert cursor.comparisons == 5

    def test_sentinel_is_max_unsigned_64(self):
        assert NOT_FOUND == 2**64 - 1
        assert MAX_BUFFER_LENGTH == NOT_FOUND - 1


class TestEnvFlag:
    @pytest.mark.parametrize("value", ["1", "true", "YES", "on"])
    def test_truthy(self, monkeypatch, value):
        monkeypatch.setenv("SKIPSCAN_TEST_FLAG", value)
        assert env_flag("SKIPSCAN_TEST_FLAG") is True

    def test_falsy(self, monkeypatch):
        monkeypatch.setenv("SKIPSCAN_TEST_FLAG", "0")
        assert env_flag("SKIPSCAN_TEST_FLAG", default=True) is False

    def test_default_when_unset(self, monkeypatch):
        monkeypatch.delenv("SKIPSCAN_TEST_FLAG", raising=False)
        assert env_flag("SKIPSCAN_TEST_FLAG", default=True) is True


@pytest.fixture
def reload_config(monkeypatch):
    yield lambda: importlib.reload(config)
    monkeypatch.undo()
    importlib.reload(config)


class TestEnvInt:
    def test_parsed(self, monkeypatch):
        monkeypatch.setenv("SKIPSCAN_TEST_INT", " 4 ")
        assert env_int("SKIPSCAN_TEST_INT", 16) == 4

    @pytest.mark.parametrize("value", ["wide", "", "1.5"])
    def test_malformed_falls_back(self, monkeypatch, value):
        monkeypatch.setenv("SKIPSCAN_TEST_INT", value)
        assert env_int("SKIPSCAN_TEST_INT", 16) == 16

    def test_malformed_context_keeps_default(self, monkeypatch, reload_config):
        monkeypatch.setenv(config.ENV_CONTEXT, "wide")
        assert reload_config().DEFAULT_CONTEXT == 16

    def test_context_from_environment(self, monkeypatch, reload_config):
        monkeypatch.setenv(config.ENV_CONTEXT, "4")
        assert reload_config().DEFAULT_CONTEXT == 4
