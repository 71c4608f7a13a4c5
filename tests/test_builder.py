"""Tests for configuration and builder"""

import io

import pytest

from logtree import (
    Handler,
    InvalidLevel,
    Level,
    LoggerBuilder,
    LoggerConfig,
    LoggerRegistry,
)
from logtree.filters import PatternFilter
from logtree.formatters import TextFormatter
from logtree.handlers import ConsoleHandler, FileHandler, RotatingFileHandler


class RecordingHandler(Handler):
    """Handler that keeps published records."""

    def __init__(self):
        super().__init__()
        self.records = []

    def publish(self, record):
        self.records.append(record)


class TestLoggerConfig:
    """Test logger configuration."""

    def test_default_config(self):
        config = LoggerConfig.default()
        assert config.level is None
        assert config.handlers == []
        assert config.propagate is None
        assert config.max_file_size == 10 * 1024 * 1024

    def test_basic_config(self):
        stream = io.StringIO()
        config = LoggerConfig.basic(stream=stream)
        assert config.level is Level.INFO
        assert len(config.handlers) == 1
        assert isinstance(config.handlers[0], ConsoleHandler)
        assert config.handlers[0].level is Level.INFO
        assert config.handlers[0].stream is stream

    def test_debug_config(self):
        config = LoggerConfig.debug_config()
        assert config.level is Level.DEBUG

        handlers = config.create_handlers()
        assert len(handlers) == 1
        assert isinstance(handlers[0], ConsoleHandler)
        assert handlers[0].colored is True

    def test_production_config(self, tmp_path):
        config = LoggerConfig.production_config(str(tmp_path / "app.log"))
        assert config.level is Level.WARNING

        handlers = config.create_handlers()
        assert len(handlers) == 1
        assert isinstance(handlers[0], RotatingFileHandler)
        assert handlers[0].backup_count == 10
        assert handlers[0].max_bytes == 10 * 1024 * 1024
        handlers[0].close()

    def test_create_handlers_order(self, tmp_path):
        extra = RecordingHandler()
        config = LoggerConfig(
            console_output=True,
            log_file=str(tmp_path / "app.log"),
            encoding="latin-1",
            handlers=[extra],
        )
        console, file_handler, last = config.create_handlers()
        assert isinstance(console, ConsoleHandler)
        assert type(file_handler) is FileHandler
        assert file_handler.encoding == "latin-1"
        assert last is extra
        file_handler.close()

    def test_configure_applies_console_settings(self):
        stream = io.StringIO()
        logger = LoggerRegistry().get("app")
        logger.configure(LoggerConfig(console_output=True, colored_output=True, stream=stream))
        logger.severe("down")
        assert stream.getvalue().startswith(Level.SEVERE.color_code)
        assert "SEVERE: down" in stream.getvalue()

    def test_level_name_resolved(self):
        assert LoggerConfig(level="debug").level is Level.DEBUG

    def test_invalid_level(self):
        with pytest.raises(InvalidLevel):
            LoggerConfig(level=10)
        with pytest.raises(InvalidLevel):
            LoggerConfig(level="VERBOSE")

    def test_level_must_belong_to_levels(self):
        with pytest.raises(InvalidLevel):
            LoggerConfig(level=Level.DEBUG, levels={"INFO": Level.INFO})

    def test_invalid_values(self):
        with pytest.raises(ValueError):
            LoggerConfig(max_file_size=0)
        with pytest.raises(ValueError):
            LoggerConfig(max_backup_files=-1)
        with pytest.raises(ValueError):
            LoggerConfig(filter="nope")
        with pytest.raises(ValueError):
            LoggerConfig(handlers=[object()])
        with pytest.raises(ValueError):
            LoggerConfig(rotating_file=True)

    def test_from_dict(self):
        config = LoggerConfig.from_dict({"level": "WARNING", "propagate": False})
        assert config.level is Level.WARNING
        assert config.propagate is False

    def test_from_dict_handler_settings(self, tmp_path):
        config = LoggerConfig.from_dict({
            "log_file": str(tmp_path / "app.log"),
            "rotating_file": True,
            "max_file_size": 2048,
            "max_backup_files": 2,
        })
        handler = config.create_handlers()[0]
        assert isinstance(handler, RotatingFileHandler)
        assert handler.max_bytes == 2048
        assert handler.backup_count == 2
        handler.close()

    def test_from_dict_unknown_key(self):
        with pytest.raises(ValueError):
            LoggerConfig.from_dict({"levle": "INFO"})
        with pytest.raises(ValueError):
            LoggerConfig.from_dict({"timestamp_format": "%H"})


class TestLoggerBuilder:
    """Test builder-driven configuration."""

    def test_build_resolves_from_registry(self):
        registry = LoggerRegistry()
        logger = (LoggerBuilder(registry)
            .with_name("svc.db")
            .with_level(Level.DEBUG)
            .build())

        assert logger is registry.get("svc.db")
        assert logger.level is Level.DEBUG
        assert logger.parent is registry.get("svc")

    def test_build_root(self):
        registry = LoggerRegistry()
        logger = LoggerBuilder(registry).with_level(Level.WARNING).build()
        assert logger is registry.root()
        assert logger.level is Level.WARNING

    def test_console(self):
        registry = LoggerRegistry()
        stream = io.StringIO()
        logger = (LoggerBuilder(registry)
            .with_name("app")
            .with_console(stream=stream)
            .with_formatter(TextFormatter("{logger}: {message}"))
            .build())

        logger.info("hello {0}", "world")
        assert stream.getvalue() == "app: hello world\n"

    def test_file(self, tmp_path):
        registry = LoggerRegistry()
        path = tmp_path / "app.log"
        logger = (LoggerBuilder(registry)
            .with_name("app")
            .with_file(str(path))
            .with_formatter(TextFormatter("{message}"))
            .build())

        logger.warning("saved")
        handler = logger.handlers[0]
        assert isinstance(handler, FileHandler)
        handler.close()
        assert path.read_text(encoding="utf-8") == "saved\n"

    def test_rotating_file(self, tmp_path):
        registry = LoggerRegistry()
        logger = (LoggerBuilder(registry)
            .with_name("app")
            .with_file(str(tmp_path / "app.log"), rotating=True, max_bytes=1024, backup_count=3)
            .build())

        handler = logger.handlers[0]
        assert isinstance(handler, RotatingFileHandler)
        assert handler.max_bytes == 1024
        assert handler.backup_count == 3
        handler.close()

    def test_filter_and_propagate(self):
        registry = LoggerRegistry()
        root_handler = RecordingHandler()
        registry.root().add_handler(root_handler)
        own = RecordingHandler()

        logger = (LoggerBuilder(registry)
            .with_name("app")
            .with_filter(PatternFilter(r"^noise", exclude=True))
            .with_propagate(False)
            .add_handler(own)
            .build())

        logger.info("noise")
        logger.info("signal")
        assert [r.message for r in own.records] == ["signal"]
        # Inherited root handler publishes from the child; propagation is off
        assert [r.message for r in root_handler.records] == ["signal"]

    def test_custom_levels(self):
        registry = LoggerRegistry()
        notice = Level("NOTICE", 35)
        logger = (LoggerBuilder(registry)
            .with_name("app")
            .with_levels({"INFO": Level.INFO, "NOTICE": notice})
            .with_level(notice)
            .build())

        assert logger.level is notice
        assert set(logger.levels) == {"INFO", "NOTICE"}
