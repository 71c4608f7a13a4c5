"""Tests for level values"""

import itertools

import pytest

from logtree import InvalidLevel, Level, STANDARD_LEVELS
from logtree.core.level import MAX_RANK, MIN_RANK

MESSAGE_LEVELS = [Level.TRACE, Level.DEBUG, Level.CONFIG, Level.INFO, Level.WARNING, Level.SEVERE]


class TestLevelOrdering:
    """Test rank ordering and equality."""

    def test_standard_order(self):
        assert Level.ALL < Level.TRACE < Level.DEBUG < Level.CONFIG
        assert Level.CONFIG < Level.INFO < Level.WARNING < Level.SEVERE < Level.OFF

    def test_sentinel_ranks(self):
        assert Level.ALL.rank == MIN_RANK
        assert Level.OFF.rank == MAX_RANK
        assert Level.ALL.is_sentinel
        assert Level.OFF.is_sentinel
        assert not any(level.is_sentinel for level in MESSAGE_LEVELS)

    def test_equality_is_by_rank(self):
        assert Level("NOTICE", 30) == Level.INFO
        assert hash(Level("NOTICE", 30)) == hash(Level.INFO)
        assert Level("INFO", 31) != Level.INFO

    def test_comparison_with_other_types(self):
        assert Level.INFO != 30
        with pytest.raises(TypeError):
            Level.INFO < 30

    def test_standard_level_set(self):
        assert list(STANDARD_LEVELS) == [
            "ALL", "TRACE", "DEBUG", "CONFIG", "INFO", "WARNING", "SEVERE", "OFF",
        ]
        ranks = [level.rank for level in STANDARD_LEVELS.values()]
        assert ranks == sorted(ranks)

    def test_immutable(self):
        with pytest.raises(AttributeError):
            Level.INFO.rank = 1


class TestLevelValidation:
    """Test construction errors."""

    @pytest.mark.parametrize("name", ["", None, 5, b"INFO"])
    def test_invalid_name(self, name):
        with pytest.raises(InvalidLevel):
            Level(name, 10)

    @pytest.mark.parametrize("rank", ["10", 1.5, None, True])
    def test_invalid_rank(self, rank):
        with pytest.raises(InvalidLevel):
            Level("CUSTOM", rank)

    def test_rank_out_of_range(self):
        with pytest.raises(InvalidLevel):
            Level("BELOW", MIN_RANK - 1)
        with pytest.raises(InvalidLevel):
            Level("ABOVE", MAX_RANK + 1)

    def test_invalid_level_is_value_error(self):
        with pytest.raises(ValueError):
            Level("X", "high")


class TestLevelAdmission:
    """Test threshold checks."""

    def test_threshold_property(self):
        for low, high in itertools.combinations(MESSAGE_LEVELS, 2):
            assert not high.admits(low)
            assert high.admits(high)
            assert low.admits(high)

    def test_all_admits_every_severity(self):
        assert all(Level.ALL.admits(level) for level in MESSAGE_LEVELS)

    def test_off_admits_nothing(self):
        assert not any(Level.OFF.admits(level) for level in MESSAGE_LEVELS)

    def test_sentinel_is_never_a_severity(self):
        assert not Level.ALL.admits(Level.OFF)
        assert not Level.INFO.admits(Level.OFF)
        assert not Level.ALL.admits(Level.ALL)


class TestLevelHelpers:
    """Test conversion helpers."""

    def test_from_string(self):
        assert Level.from_string("DEBUG") is Level.DEBUG
        assert Level.from_string("warning") is Level.WARNING

    def test_from_string_invalid(self):
        with pytest.raises(InvalidLevel):
            Level.from_string("VERBOSE")
        with pytest.raises(InvalidLevel):
            Level.from_string(10)

    def test_color_codes(self):
        assert Level.SEVERE.color_code == "\033[31m"
        assert Level("CUSTOM", 42).color_code == "\033[0m"
        assert Level.INFO.reset_code == "\033[0m"

    def test_str(self):
        assert str(Level.CONFIG) == "CONFIG"
