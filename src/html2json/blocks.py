"""Locate block-level HTML constructs and build their tree nodes."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Final

from html2json.inline import segment_inline
from html2json.schemas import (
    BlockNode,
    Diagnostic,
    HeadingNode,
    ListItemNode,
    ListNode,
    ListType,
    ParagraphNode,
    RootNode,
    TextNode,
)

BLOCK_TAGS: Final[tuple[str, ...]] = ("p", "ul", "ol", "h1", "h2", "h3", "h4", "h5", "h6")
LIST_ITEM_TAG: Final[str] = "li"

_BLOCK_MARKER_RE = re.compile(r"<(/?)(p|ul|ol|h[1-6])(?:\s[^>]*)?>", re.IGNORECASE)
_LIST_ITEM_MARKER_RE = re.compile(r"<(/?)(li)(?:\s[^>]*)?>", re.IGNORECASE)
_LINE_BREAK_RE = re.compile(r"<br\s*/?>", re.IGNORECASE)

_LIST_TYPES: Final[dict[str, ListType]] = {"ul": ListType.UNORDERED, "ol": ListType.ORDERED}
_EMPTY_PARAGRAPH_TEXT = " "


class BlockOrder(str, Enum):
    """How discovered blocks are ordered under the root.

    ``PASS`` groups blocks by type: paragraphs, unordered lists, ordered lists,
    then headings level 1 to 6, each group in document order. ``DOCUMENT``
    keeps the order in which blocks start in the source.
    """

    PASS = "pass"
    DOCUMENT = "document"


@dataclass(frozen=True)
class BlockSpan:
    """Position of one block in the scanned text."""

    tag: str
    start: int
    end: int
    inner_start: int
    inner_end: int

    def inner(self, html: str) -> str:
        return html[self.inner_start : self.inner_end]


def scan_blocks(html: str, pattern: re.Pattern[str] = _BLOCK_MARKER_RE) -> list[BlockSpan]:
    """Find every block span in a single left-to-right scan.

    Each tag keeps its own state: the first opener starts a span, further
    openers of the same tag are ignored until the next closer of that tag ends
    it. Spans of one tag therefore never overlap each other, while spans of
    different tags may.
    """
    pending: dict[str, re.Match[str]] = {}
    spans: list[BlockSpan] = []
    for match in pattern.finditer(html):
        tag = match.group(2).lower()
        if not match.group(1):
            pending.setdefault(tag, match)
            continue
        opener = pending.pop(tag, None)
        if opener is None:
            continue
        spans.append(
            BlockSpan(
                tag=tag,
                start=opener.start(),
                end=match.end(),
                inner_start=opener.end(),
                inner_end=match.start(),
            )
        )
    return sorted(spans, key=lambda span: span.start)


def order_blocks(spans: list[BlockSpan], order: BlockOrder = BlockOrder.PASS) -> list[BlockSpan]:
    """Arrange block spans in the order they are appended to the root."""
    if order is BlockOrder.DOCUMENT:
        return sorted(spans, key=lambda span: span.start)
    rank = {tag: index for index, tag in enumerate(BLOCK_TAGS)}
    return sorted(spans, key=lambda span: (rank[span.tag], span.start))


class TreeAssembler:
    """Owns the root node and appends blocks in the order they arrive."""

    def __init__(self) -> None:
        self.root = RootNode()

    def append(self, node: BlockNode) -> None:
        self.root.children.append(node)


def extract_blocks(
    html: str,
    assembler: TreeAssembler,
    *,
    order: BlockOrder = BlockOrder.PASS,
    diagnostics: list[Diagnostic] | None = None,
) -> None:
    """Scan ``html`` for blocks and hand each built node to ``assembler``.

    Nodes are appended one by one, so if building a later block fails the
    assembler still holds every block appended before it.
    """
    for span in order_blocks(scan_blocks(html), order):
        node = build_block(span, html, diagnostics)
        if node is not None:
            assembler.append(node)


def build_block(
    span: BlockSpan,
    html: str,
    diagnostics: list[Diagnostic] | None = None,
) -> BlockNode | None:
    """Build the node for one block span; lists without items yield None."""
    content = span.inner(html)
    if span.tag == "p":
        return ParagraphNode(children=_paragraph_runs(content, diagnostics, span.inner_start))
    if span.tag in _LIST_TYPES:
        items = [
            ListItemNode(
                children=segment_inline(
                    item.inner(content),
                    diagnostics,
                    offset=span.inner_start + item.inner_start,
                )
            )
            for item in scan_blocks(content, _LIST_ITEM_MARKER_RE)
        ]
        if not items:
            return None
        return ListNode(list_type=_LIST_TYPES[span.tag], children=items)
    return HeadingNode(
        level=int(span.tag[1]),
        children=segment_inline(content, diagnostics, offset=span.inner_start),
    )


def _paragraph_runs(
    content: str,
    diagnostics: list[Diagnostic] | None,
    offset: int,
) -> list[TextNode]:
    stripped = content.strip()
    if not stripped or _LINE_BREAK_RE.fullmatch(stripped):
        return [TextNode(value=_EMPTY_PARAGRAPH_TEXT)]
    return segment_inline(content, diagnostics, offset=offset)
