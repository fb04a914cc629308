import sys
from unittest.mock import patch

import pytest

from movie_graph_store import app_setup


@pytest.fixture
def mock_logger():
    with patch("movie_graph_store.app_setup.logger") as mock_log:
        mock_log.add.return_value = 7
        yield mock_log


class TestConfigureLogging:
    """Loguru sink installation."""

    def test_replaces_default_handler(self, mock_logger):
        handler_id = app_setup.configure_logging("debug")

        assert handler_id == 7
        mock_logger.remove.assert_called_once_with()
        mock_logger.add.assert_called_once_with(
            sys.stderr, level="DEBUG", format=app_setup.LOG_FORMAT, colorize=True
        )

    def test_uses_configured_level_by_default(self, mock_logger):
        with patch.object(app_setup.settings.app, "log_level", "WARNING"):
            app_setup.configure_logging()

        assert mock_logger.add.call_args.kwargs["level"] == "WARNING"
        mock_logger.info.assert_called_once_with(
            "Logger configured with level: {}", "WARNING"
        )
