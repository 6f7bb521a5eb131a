"""Tests for the event log.

Tables and the workload driver record lifecycle events as structured
entries that can be filtered by level and source.
"""

from py_symtab.logging import LogEntry, Logger, LogLevel
from py_symtab.table import SymTable


class TestLogLevel:
    """Verify log level ordering."""

    def test_levels_are_ordered(self) -> None:
        """DEBUG < INFO < WARNING < ERROR."""
        assert LogLevel.DEBUG < LogLevel.INFO
        assert LogLevel.INFO < LogLevel.WARNING
        assert LogLevel.WARNING < LogLevel.ERROR


class TestLogEntry:
    """Verify log entry structure."""

    def test_entry_str(self) -> None:
        """String representation should be ``[LEVEL] source: message``."""
        entry = LogEntry(level=LogLevel.WARNING, message="table freed", source="symtable")
        assert str(entry) == "[WARNING] symtable: table freed"


class TestLogger:
    """Verify the logger."""

    def test_entries_are_ordered(self) -> None:
        """Entries should be in chronological order."""
        logger = Logger()
        logger.log(LogLevel.INFO, "first", source="test")
        logger.log(LogLevel.INFO, "second", source="test")
        assert [e.message for e in logger.entries] == ["first", "second"]

    def test_entries_returns_a_copy(self) -> None:
        """Mutating the returned list should not change the log."""
        logger = Logger()
        logger.log(LogLevel.INFO, "kept", source="test")
        logger.entries.clear()
        assert len(logger.entries) == 1

    def test_filter_by_level(self) -> None:
        """Filtering should return only entries at or above the level."""
        logger = Logger()
        logger.log(LogLevel.DEBUG, "debug msg", source="test")
        logger.log(LogLevel.INFO, "info msg", source="test")
        logger.log(LogLevel.ERROR, "error msg", source="test")
        warnings_and_above = logger.filter(min_level=LogLevel.WARNING)
        assert len(warnings_and_above) == 1
        assert warnings_and_above[0].level is LogLevel.ERROR

    def test_filter_by_source(self) -> None:
        """Filtering by source should return matching entries."""
        logger = Logger()
        SymTable(logger=logger)
        logger.log(LogLevel.INFO, "phase", source="driver")
        table_logs = logger.filter(source="symtable")
        assert len(table_logs) == 1
        assert table_logs[0].message == "Table created"

    def test_clear(self) -> None:
        """Clearing should remove all entries."""
        logger = Logger()
        logger.log(LogLevel.INFO, "test", source="test")
        logger.clear()
        assert logger.entries == []
