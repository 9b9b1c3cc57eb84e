# topmark:header:start
#
#   project      : TagPrint
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the TagPrint test suite.

Sets up global fixtures and the logging configuration for test runs.
Escape-sequence helpers live in `tests/escapes.py`.
"""

from __future__ import annotations

import pytest

from tagprint.config import logging
from tagprint.constants import LOG_LEVEL_ENV_VAR


@pytest.fixture(autouse=True)
def silence_tagprint_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure TagPrint's runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Log at TRACE for all tests so diagnostics show up in failure reports.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)
