"""Tests for HTML tag statistics."""

from __future__ import annotations

from pathlib import Path

import pytest

import html2json.tag_stats as tag_stats
from html2json.exceptions import CsvProcessingError, InputNotFoundError
from html2json.tag_stats import RECOGNIZED_TAGS, collect_stats, format_stats, load_column


def test_collect_stats_counts_tags_and_attributes() -> None:
    tags, attrs = collect_stats(
        ['<p class="lead">a <b>b</b></p>', "", "   ", '<ul><li>x</li><li style="c">y</li></ul>']
    )

    assert tags == {"p": 1, "b": 1, "ul": 1, "li": 2}
    assert attrs == {"p[class]": 1, "li[style]": 1}


def test_recognized_tags_cover_blocks_and_formatting() -> None:
    assert {"p", "ul", "ol", "li", "h1", "h6", "em", "strong", "mark", "sup"} <= RECOGNIZED_TAGS
    assert "div" not in RECOGNIZED_TAGS


def test_format_stats_marks_unconverted_tags() -> None:
    tags, attrs = collect_stats(["<div><p>x</p></div>"])

    text = format_stats(tags, attrs)

    assert "div: 1 (not converted)" in text
    assert "p: 1" in text


def test_load_column(write_csv) -> None:
    source = write_csv("in.csv", 'id,Body HTML\n1,"<p>a</p>"\n2,\n')

    assert load_column(source, "Body HTML") == ["<p>a</p>", ""]


def test_load_column_missing_column(write_csv) -> None:
    source = write_csv("in.csv", "id\n1\n")

    with pytest.raises(CsvProcessingError):
        load_column(source, "Body HTML")


def test_load_column_missing_file(tmp_path: Path) -> None:
    with pytest.raises(InputNotFoundError):
        load_column(tmp_path / "missing.csv", "Body HTML")


def test_load_column_uses_configured_encoding(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr(tag_stats, "HTML2JSON_CSV_ENCODING", "latin-1")
    source = tmp_path / "latin.csv"
    source.write_text('id,Body HTML\n1,"<p>café</p>"\n2,NA\n', encoding="latin-1")

    assert load_column(source, "Body HTML") == ["<p>café</p>", "NA"]
