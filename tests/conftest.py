"""Test setup for html2json."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers the CLI attached so they do not outlive captured streams."""
    yield
    from html2json.utils import logging_config

    logging_config._handler = None
    logger = logging.getLogger("html2json")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def product_html() -> str:
    """A product description mixing every supported block type."""
    return (
        "<h2>Features</h2>"
        "<p>Made from <strong>organic</strong> cotton.</p>"
        "<ul><li>Soft</li><li><em>Durable</em></li></ul>"
        "<ol><li>Wash cold</li></ol>"
        "<p><br></p>"
    )


@pytest.fixture
def write_csv(tmp_path: Path):
    """Write CSV text to a file under tmp_path and return its path."""

    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write
