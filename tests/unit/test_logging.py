"""Unit tests for logging setup and edit statistics."""

import logging

import pytest

from pathgeom.utils import EditLogger, EditStats, configure_logging


@pytest.fixture
def clean_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_file_handler(self, clean_root_logger, tmp_path):
        """Test a log file gets a handler at the file level."""
        log_path = tmp_path / "run.log"
        before = len(clean_root_logger.handlers)

        logger = configure_logging(log_file=log_path, file_level="INFO", quiet=True)

        assert logger is not None
        added = clean_root_logger.handlers[before:]
        assert len(added) == 1
        assert isinstance(added[0], logging.FileHandler)
        assert added[0].level == logging.INFO
        assert log_path.exists()

    def test_console_only(self, clean_root_logger):
        """Test no file handler is added without a log file."""
        before = len(clean_root_logger.handlers)
        configure_logging(console_level="ERROR")

        added = clean_root_logger.handlers[before:]
        assert len(added) == 1
        assert not isinstance(added[0], logging.FileHandler)
        assert added[0].level == logging.ERROR

    def test_quiet_without_file(self, clean_root_logger):
        """Test quiet mode with no file adds no handlers."""
        before = len(clean_root_logger.handlers)
        configure_logging(quiet=True)
        assert len(clean_root_logger.handlers) == before


class TestEditLogger:
    """Tests for EditLogger statistics."""

    def test_counts(self):
        """Test each log call updates its counter."""
        log = EditLogger()
        log.log_insert_on_curve(2, 0.5, 5)
        log.log_append(1.0, 2.0, 6)
        log.log_remove(0, 5)
        log.log_conversion(1, "smooth")
        log.log_toggle_close(True)
        log.log_snap_miss(20.0, 12.0)
        log.log_snap_miss(None, 12.0)

        stats = log.stats
        assert stats.inserted_on_curve == 1
        assert stats.appended == 1
        assert stats.removed == 1
        assert stats.converted == 1
        assert stats.close_toggles == 1
        assert stats.snap_misses == 2
        assert stats.total_edits == 5

    def test_action_history(self):
        """Test edits are recorded in order."""
        log = EditLogger()
        log.log_append(0.0, 0.0, 1)
        log.log_conversion(0, "corner")
        assert log.stats.actions == [("append", 0), ("convert_to_corner", 0)]

    def test_empty_stats(self):
        """Test a fresh stats object has no edits."""
        assert EditStats().total_edits == 0
