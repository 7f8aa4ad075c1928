"""Shared fixtures for waitfor tests."""

import logging

import pytest


@pytest.fixture(autouse=True)
def reset_console_logging():
    """Drop the console handler installed by configure_logging."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in root.handlers[:]:
        if type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
    root.setLevel(level)
