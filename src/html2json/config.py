"""Local configuration for html2json."""

from __future__ import annotations

import os


DEFAULT_COLUMN = "Body HTML"
DEFAULT_STREAM_CHUNK_SIZE = 1000
DEFAULT_BLOCK_ORDER = "pass"
DEFAULT_CSV_ENCODING = "utf-8"
DEFAULT_LOG_LEVEL = "INFO"

HTML2JSON_DEFAULT_COLUMN = os.getenv("HTML2JSON_DEFAULT_COLUMN", DEFAULT_COLUMN)
HTML2JSON_STREAM_CHUNK_SIZE = int(os.getenv("HTML2JSON_STREAM_CHUNK_SIZE", str(DEFAULT_STREAM_CHUNK_SIZE)))
# "pass" groups blocks by type, "document" keeps source order.
HTML2JSON_BLOCK_ORDER = os.getenv("HTML2JSON_BLOCK_ORDER", DEFAULT_BLOCK_ORDER).strip().lower()
HTML2JSON_CSV_ENCODING = os.getenv("HTML2JSON_CSV_ENCODING", DEFAULT_CSV_ENCODING)
HTML2JSON_LOG_LEVEL = os.getenv("HTML2JSON_LOG_LEVEL", DEFAULT_LOG_LEVEL)
