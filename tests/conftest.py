"""Pytest configuration and shared fixtures."""

import logging

import pytest

from kraftpack.packmanager import Context, PackageManagerRegistry, UmbrellaManager


@pytest.fixture(autouse=True)
def restore_kraftpack_logger():
    """Undo handlers and levels installed by CLI runs."""
    logger = logging.getLogger("kraftpack")
    handlers, level = list(logger.handlers), logger.level
    yield
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(level)


@pytest.fixture
def ctx():
    """Background operation context."""
    return Context.background()


@pytest.fixture
def registry():
    """Fresh, empty package manager registry."""
    return PackageManagerRegistry()


@pytest.fixture
def umbrella(registry):
    """Umbrella over the ``registry`` fixture."""
    return UmbrellaManager(registry)


@pytest.fixture
def sample_config():
    """Sample configuration dictionary."""
    return {
        "logging": {
            "level": "DEBUG",
            "log_dir": "/tmp/kraftpack-logs",
            "file_logging": False,
            "console_logging": False,
        },
        "packmanager": {
            "sort_by_key": True,
            "managers": {
                "oci": "tests.factories:OciManager",
                "tar": "tests.factories:TarManager",
            },
        },
    }
