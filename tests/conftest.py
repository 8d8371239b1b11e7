"""Shared test fixtures for subnetkit."""

import logging

import pytest

from subnetkit.config import set_config
from subnetkit.ip.convert import parse_subnet


@pytest.fixture
def net():
    """Return a parser turning CIDR strings into Subnet values."""
    return parse_subnet


@pytest.fixture(autouse=True)
def reset_config():
    """Drop the cached global configuration around every test."""
    set_config(None)
    yield
    set_config(None)


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo any handlers the CLI installed on the package logger."""
    yield
    logger = logging.getLogger("subnetkit")
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
