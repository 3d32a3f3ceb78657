"""Count the HTML tags used in a CSV column to see what the converter keeps."""

from __future__ import annotations

from collections import Counter
from pathlib import Path
from typing import Iterable

import pandas as pd
from bs4 import BeautifulSoup

from html2json.blocks import BLOCK_TAGS, LIST_ITEM_TAG
from html2json.config import HTML2JSON_CSV_ENCODING
from html2json.csv_processor import CSV_READ_OPTIONS
from html2json.exceptions import CsvProcessingError, InputNotFoundError
from html2json.inline import FORMATTING_TAGS

RECOGNIZED_TAGS: frozenset[str] = frozenset((*BLOCK_TAGS, LIST_ITEM_TAG, *FORMATTING_TAGS))


def collect_stats(values: Iterable[str]) -> tuple[Counter, Counter]:
    """Count tag names and ``tag[attribute]`` pairs over HTML values."""
    tags = Counter()
    attrs = Counter()

    for value in values:
        if not value or not value.strip():
            continue
        soup = BeautifulSoup(value, "html.parser")
        for tag in soup.find_all(True):
            tags[tag.name] += 1
            for attr in tag.attrs:
                attrs[f"{tag.name}[{attr}]"] += 1
    return tags, attrs


def load_column(input_path: str | Path, column: str) -> list[str]:
    path = Path(input_path)
    if not path.is_file():
        raise InputNotFoundError(f"Input file not found: {path}")
    try:
        frame = pd.read_csv(
            path, encoding=HTML2JSON_CSV_ENCODING, usecols=[column], **CSV_READ_OPTIONS
        )
    except ValueError as exc:
        raise CsvProcessingError(f"Could not read column {column!r} from {path}: {exc}") from exc
    return frame[column].tolist()


def format_stats(tags: Counter, attrs: Counter, *, unrecognized_only: bool = False) -> str:
    lines = ["Tags:"]
    for name, count in tags.most_common():
        if name in RECOGNIZED_TAGS:
            if unrecognized_only:
                continue
            lines.append(f"{name}: {count}")
        else:
            lines.append(f"{name}: {count} (not converted)")

    lines.append("")
    lines.append("Attributes:")
    for name, count in attrs.most_common():
        lines.append(f"{name}: {count}")
    return "\n".join(lines)
