"""Tests for the document tree and result models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from html2json.schemas import (
    BatchResult,
    FileResult,
    HeadingNode,
    ListNode,
    ListType,
    RootNode,
    TextNode,
)


class TestTextNode:
    """Tests for TextNode."""

    def test_false_flags_are_unset(self) -> None:
        node = TextNode(value="x", bold=False, italic=True)

        assert node.bold is None
        assert node.flags() == frozenset({"italic"})
        assert node.model_dump(exclude_none=True) == {"type": "text", "value": "x", "italic": True}

    def test_with_flags(self) -> None:
        node = TextNode.with_flags("x", {"code", "highlight"})

        assert node.code is True
        assert node.highlight is True
        assert node.flags() == frozenset({"code", "highlight"})


def test_heading_level_is_bounded() -> None:
    with pytest.raises(ValidationError):
        HeadingNode(level=7)


def test_list_type_serializes_camel_case() -> None:
    node = ListNode(list_type=ListType.ORDERED)

    assert node.model_dump(by_alias=True, mode="json") == {
        "type": "list",
        "listType": "ordered",
        "children": [],
    }


def test_root_children_validate_by_type() -> None:
    root = RootNode.model_validate(
        {"children": [{"type": "heading", "level": 1, "children": [{"type": "text", "value": "t"}]}]}
    )

    assert isinstance(root.children[0], HeadingNode)


def test_batch_result_counts() -> None:
    batch = BatchResult(
        pattern="*.csv",
        output_dir="out",
        results=[
            FileResult(input="a.csv", output="out/a.csv", success=True),
            FileResult(input="b.csv", success=False, error="boom"),
        ],
    )

    assert batch.total == 2
    assert batch.succeeded == 1
