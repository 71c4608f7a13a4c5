#!/usr/bin/env python3
"""Basic usage example"""

from logtree import Level, LoggerBuilder, basic_config, get_logger
from logtree.handlers import RotatingFileHandler


def main():
    # Root logger writes INFO and above to stderr
    basic_config()

    app = get_logger("app")
    app.debug("This is dropped, DEBUG is below INFO")
    app.info("Application started")

    # Child logger with its own file. It also holds a copy of the root
    # console handler, which stays owned by the root.
    db_file = RotatingFileHandler("logs/db.log", max_bytes=1024 * 1024, backup_count=3)
    db = (LoggerBuilder()
        .with_name("app.db")
        .with_level(Level.DEBUG)
        .add_handler(db_file)
        .build())

    db.debug("Connecting to {0}:{1}", "localhost", 5432)
    db.warning("Slow query took {0}ms", 1250)

    try:
        raise ConnectionError("connection reset")
    except ConnectionError as exc:
        db.severe(exc)

    db_file.close()


if __name__ == "__main__":
    main()
