"""Tests for the package logging setup."""

from __future__ import annotations

import logging

import pytest

from html2json.utils.logging_config import configure_logging, get_logger


@pytest.fixture
def package_logger() -> logging.Logger:
    return logging.getLogger("html2json")


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_repeated_calls_keep_one_handler(self, package_logger: logging.Logger) -> None:
        configure_logging()
        first = package_logger.handlers[-1]

        configure_logging(verbose=True)

        assert first not in package_logger.handlers
        assert len(package_logger.handlers) == 1

    def test_leaves_other_handlers_attached(self, package_logger: logging.Logger) -> None:
        other = logging.NullHandler()
        package_logger.addHandler(other)

        configure_logging()
        configure_logging()

        assert other in package_logger.handlers
        assert len(package_logger.handlers) == 2

    def test_verbose_sets_debug(self, package_logger: logging.Logger) -> None:
        configure_logging(verbose=True)

        assert package_logger.level == logging.DEBUG

    def test_explicit_level(self, package_logger: logging.Logger) -> None:
        configure_logging(level="warning")

        assert package_logger.level == logging.WARNING


def test_get_logger_is_under_package_namespace(package_logger: logging.Logger) -> None:
    assert get_logger("html2json.blocks").parent is package_logger
