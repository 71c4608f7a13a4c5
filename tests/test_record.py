"""Tests for record construction"""

from dataclasses import FrozenInstanceError
from datetime import datetime
import threading

import pytest

from logtree import InvalidLevel, Level, Record


class TestRecordCreate:
    """Test Record.create."""

    def test_string_message(self):
        record = Record.create("app", Level.INFO, "hello {0}", ("world",))
        assert record.message == "hello {0}"
        assert record.thrown is None
        assert record.args == ("world",)
        assert record.logger_name == "app"
        assert record.level is Level.INFO

    def test_exception_message(self):
        error = RuntimeError("boom")
        record = Record.create("app", Level.SEVERE, error)
        assert record.message is None
        assert record.thrown is error

    def test_non_string_message(self):
        record = Record.create("app", Level.INFO, 42)
        assert record.message == "42"
        assert record.thrown is None

    def test_args_become_tuple(self):
        record = Record.create("app", Level.INFO, "{0}", ["a"])
        assert record.args == ("a",)

    def test_captures_time_and_thread(self):
        before = datetime.now()
        record = Record.create("app", Level.INFO, "x")
        assert before <= record.timestamp <= datetime.now()
        assert record.thread_id == threading.get_ident()
        assert record.thread_name == threading.current_thread().name

    def test_invalid_level(self):
        with pytest.raises(InvalidLevel):
            Record.create("app", 30, "x")


class TestRecordBehaviour:
    """Test record value semantics."""

    def test_frozen(self):
        record = Record.create("app", Level.INFO, "x")
        with pytest.raises(FrozenInstanceError):
            record.message = "y"

    def test_identity_equality(self):
        first = Record.create("app", Level.INFO, "x")
        second = Record.create("app", Level.INFO, "x")
        assert first == first
        assert first != second

    def test_to_dict(self):
        record = Record.create("svc.db", Level.DEBUG, "query {0}", ("users",))
        data = record.to_dict()
        assert data["level"] == "DEBUG"
        assert data["message"] == "query {0}"
        assert data["args"] == ["users"]
        assert data["logger_name"] == "svc.db"
        assert data["thrown"] is None

    def test_str(self):
        record = Record.create("app", Level.WARNING, "careful")
        text = str(record)
        assert "WARNING" in text
        assert "[app]" in text
        assert text.endswith("careful")

    def test_str_with_exception(self):
        record = Record.create("app", Level.SEVERE, ValueError("bad"))
        assert "ValueError('bad')" in str(record)
