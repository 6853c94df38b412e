"""Root pytest configuration for all tests.

This conftest applies to all test types (unit, integration).
"""

import logging

import pytest


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo CLI logging setup after each test.

    The CLI attaches handlers to the package logger that write to the
    streams of the invocation; CliRunner closes those streams afterwards.
    """
    yield
    package_logger = logging.getLogger("editor_markdown")
    for handler in list(package_logger.handlers):
        handler.close()
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)
