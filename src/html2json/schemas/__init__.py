"""Shared schemas for html2json."""

from html2json.schemas.nodes import (
    FORMAT_FLAGS,
    BlockNode,
    HeadingNode,
    ListItemNode,
    ListNode,
    ListType,
    ParagraphNode,
    RootNode,
    TextNode,
)
from html2json.schemas.results import (
    BatchResult,
    ConversionResult,
    CsvResult,
    Diagnostic,
    FileResult,
    RowWarning,
)

__all__ = [
    "FORMAT_FLAGS",
    "BatchResult",
    "BlockNode",
    "ConversionResult",
    "CsvResult",
    "Diagnostic",
    "FileResult",
    "HeadingNode",
    "ListItemNode",
    "ListNode",
    "ListType",
    "ParagraphNode",
    "RootNode",
    "RowWarning",
    "TextNode",
]
