#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for CLI logging configuration."""

import logging
from unittest.mock import MagicMock, patch

import pytest

from html_simple.logging_utils import SIMPLE_FORMAT, TRACE_FORMAT, configure_logging, resolve_log_level


@pytest.mark.unit
@pytest.mark.cli
class TestLoggingConfiguration:
    """Test logging configuration functions."""

    def test_configure_logging_basic(self):
        """Test basic logging configuration."""
        with patch("logging.getLogger") as mock_get_logger:
            mock_logger = MagicMock()
            mock_get_logger.return_value = mock_logger

            configure_logging(logging.INFO)

            mock_logger.setLevel.assert_called_once_with(logging.INFO)
            mock_logger.handlers.clear.assert_called_once()
            assert mock_logger.addHandler.call_count == 1

    def test_configure_logging_with_file(self, tmp_path):
        """Test logging configuration with file output."""
        log_file = tmp_path / "test.log"

        with patch("logging.getLogger") as mock_get_logger:
            mock_logger = MagicMock()
            mock_get_logger.return_value = mock_logger

            configure_logging(logging.DEBUG, log_file=str(log_file))

            # Should add both console and file handlers
            assert mock_logger.addHandler.call_count == 2

        for handler in [call.args[0] for call in mock_logger.addHandler.call_args_list]:
            handler.close()

    def test_configure_logging_bad_file_warns(self, tmp_path):
        """Test that an unwritable log file only logs a warning."""
        with patch("logging.getLogger") as mock_get_logger:
            mock_logger = MagicMock()
            mock_get_logger.return_value = mock_logger

            configure_logging(logging.INFO, log_file=str(tmp_path / "missing" / "test.log"))

            assert mock_logger.addHandler.call_count == 1
            mock_logger.warning.assert_called_once()

    @pytest.mark.parametrize("trace_mode,expected", [(True, TRACE_FORMAT), (False, SIMPLE_FORMAT)])
    def test_configure_logging_format(self, trace_mode, expected):
        """Test that trace mode selects the detailed format."""
        with patch("logging.getLogger"), patch("logging.Formatter") as mock_formatter:
            configure_logging(logging.DEBUG, trace_mode=trace_mode)

            assert mock_formatter.call_args[0][0] == expected

    @pytest.mark.parametrize(
        "level,expected",
        [
            (logging.ERROR, logging.ERROR),
            ("info", logging.INFO),
            ("DEBUG", logging.DEBUG),
            ("nonsense", logging.WARNING),
        ],
    )
    def test_resolve_log_level(self, level, expected):
        assert resolve_log_level(level) == expected
