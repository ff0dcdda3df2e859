"""Shared test fixtures and configuration."""

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from workflow_data.context import ExecutionContext


@pytest.fixture(autouse=True)
def mock_display():
    """Auto-mock the display for all tests.

    This prevents actual terminal output during tests and provides
    a consistent mock interface for display operations.
    """
    display = MagicMock()
    display.console = MagicMock()

    with patch("workflow_data.display.Display.get_instance", return_value=display):
        with patch("workflow_data.workflow.get_display", return_value=display):
            with patch("workflow_data.tools.data_tool.get_display", return_value=display):
                with patch("workflow_data.cli.get_display", return_value=display):
                    yield display


@pytest.fixture
def context(tmp_path: Path) -> ExecutionContext:
    """Create execution context with temp project path."""
    return ExecutionContext(project_path=tmp_path)
