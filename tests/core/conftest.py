"""
Shared fixtures for core module tests.

This module provides reusable pytest fixtures for testing the classifier,
including singularizers, progress displays and sample classification records.
"""

from unittest.mock import MagicMock

import pytest

from core.inflector import TableSingularizer
from core.models import MainFileInfo, ModuleFileInfo, TemplateFileInfo
from ui.progress_display import NoOpProgressDisplay


@pytest.fixture
def table_singularizer():
    """Singularizer restricted to the conventional directory vocabulary."""
    return TableSingularizer()


@pytest.fixture
def progress_display():
    """Progress display for testing."""
    return NoOpProgressDisplay()


@pytest.fixture
def tracking_progress_display():
    """Progress display that records its calls as (method_name, *args) tuples."""
    mock = MagicMock()
    mock.calls = []

    def make_tracker(method_name):
        def tracker(*args, **kwargs):
            if method_name == "update":
                mock.calls.append((method_name, kwargs.get("advance")))
            else:
                mock.calls.append((method_name, *args))

        return tracker

    mock.on_start = make_tracker("start")
    mock.on_update = make_tracker("update")
    mock.on_complete = make_tracker("complete")
    mock.__enter__ = MagicMock(return_value=mock)
    mock.__exit__ = MagicMock(return_value=None)

    return mock


@pytest.fixture
def sample_file_infos():
    """A mix of grouping and non-grouping records, in listing order."""
    return [
        MainFileInfo("app/app.js", name="app"),
        ModuleFileInfo(
            "app/routes/foo.js", module_type="route", name="foo", slash_name="foo"
        ),
        TemplateFileInfo(
            "app/templates/foo.hbs",
            name="foo",
            slash_name="foo",
            is_component_template=False,
        ),
        ModuleFileInfo(
            "app/controllers/foo.js",
            module_type="controller",
            name="foo",
            slash_name="foo",
        ),
    ]
