"""Split inline HTML content into formatted text runs."""

from __future__ import annotations

import re
from collections import Counter, defaultdict
from dataclasses import dataclass
from typing import Final

from html2json.schemas import Diagnostic, TextNode

FORMATTING_TAGS: Final[dict[str, str]] = {
    "em": "italic",
    "i": "italic",
    "strong": "bold",
    "b": "bold",
    "u": "underline",
    "strike": "strikethrough",
    "s": "strikethrough",
    "del": "strikethrough",
    "code": "code",
    "mark": "highlight",
    "small": "small",
    "sub": "subscript",
    "sup": "superscript",
}

# Longest names first so "strong" is tried before "s".
_TAG_ALTERNATION = "|".join(sorted(FORMATTING_TAGS, key=len, reverse=True))
_MARKER_RE = re.compile(rf"<(/?)({_TAG_ALTERNATION})(?:\s[^>]*)?>", re.IGNORECASE)


@dataclass(frozen=True)
class _Marker:
    start: int
    end: int
    tag: str
    closing: bool

    @property
    def flag(self) -> str:
        return FORMATTING_TAGS[self.tag]


def segment_inline(
    content: str,
    diagnostics: list[Diagnostic] | None = None,
    *,
    offset: int = 0,
) -> list[TextNode]:
    """Split ``content`` into text runs carrying their formatting flags.

    Formatting markers are paired per tag name; each text slice between two
    paired markers becomes one run flagged with every formatting tag open
    around it, so ``<b>a<i>b</i></b>`` yields ``a`` (bold) and ``b`` (bold and
    italic). Markers without a partner are left in the text untouched and
    reported in ``diagnostics``.

    Args:
        content: Inner HTML of one paragraph, heading, or list item.
        diagnostics: Optional list that receives unterminated-marker notices.
        offset: Added to reported positions so they point into the full
            document rather than into ``content``.

    Returns:
        Runs whose values, joined in order, equal ``content`` minus the paired
        markers. Never empty: content without any text yields a single
        unflagged run with an empty value.
    """
    markers = _pair_markers(_tokenize(content), diagnostics, offset)

    runs: list[TextNode] = []
    active: Counter[str] = Counter()
    position = 0
    for marker in markers:
        if marker.start > position:
            runs.append(TextNode.with_flags(content[position : marker.start], _active_flags(active)))
        active[marker.flag] += -1 if marker.closing else 1
        position = marker.end

    if position < len(content):
        runs.append(TextNode.with_flags(content[position:], _active_flags(active)))

    if not runs:
        runs.append(TextNode(value=""))
    return runs


def _tokenize(content: str) -> list[_Marker]:
    return [
        _Marker(
            start=match.start(),
            end=match.end(),
            tag=match.group(2).lower(),
            closing=bool(match.group(1)),
        )
        for match in _MARKER_RE.finditer(content)
    ]


def _pair_markers(
    markers: list[_Marker],
    diagnostics: list[Diagnostic] | None,
    offset: int,
) -> list[_Marker]:
    """Keep only markers that close or are closed by a marker of the same tag."""
    open_stacks: dict[str, list[int]] = defaultdict(list)
    paired: set[int] = set()
    stray: list[_Marker] = []

    for index, marker in enumerate(markers):
        if not marker.closing:
            open_stacks[marker.tag].append(index)
        elif open_stacks[marker.tag]:
            paired.add(open_stacks[marker.tag].pop())
            paired.add(index)
        else:
            stray.append(marker)

    for stack in open_stacks.values():
        stray.extend(markers[index] for index in stack)

    if diagnostics is not None:
        for marker in sorted(stray, key=lambda m: m.start):
            kind = "closing" if marker.closing else "opening"
            diagnostics.append(
                Diagnostic(
                    kind="unterminated_tag",
                    message=f"Unmatched {kind} <{'/' if marker.closing else ''}{marker.tag}> tag",
                    offset=offset + marker.start,
                )
            )

    return [marker for index, marker in enumerate(markers) if index in paired]


def _active_flags(active: Counter[str]) -> frozenset[str]:
    return frozenset(flag for flag, depth in active.items() if depth > 0)
