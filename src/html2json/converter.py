"""Convert HTML snippets into the JSON document tree."""

from __future__ import annotations

from html2json.blocks import BlockOrder, TreeAssembler, extract_blocks
from html2json.config import HTML2JSON_BLOCK_ORDER
from html2json.schemas import ConversionResult, Diagnostic, RootNode
from html2json.utils.logging_config import get_logger

logger = get_logger(__name__)


def convert_html(
    html: str,
    *,
    block_order: BlockOrder | str | None = None,
) -> ConversionResult:
    """Convert an HTML string into a tree plus conversion diagnostics.

    Never raises for bad input: if extraction fails partway, the error is
    logged and recorded as an ``error`` diagnostic, and the blocks built so far
    are returned.

    Args:
        html: HTML text, typically a product description cell.
        block_order: ``"pass"`` or ``"document"``; defaults to
            ``HTML2JSON_BLOCK_ORDER``.
    """
    order = _resolve_order(block_order)
    assembler = TreeAssembler()
    diagnostics: list[Diagnostic] = []

    try:
        extract_blocks(html, assembler, order=order, diagnostics=diagnostics)
    except Exception as exc:
        logger.exception("Error parsing HTML")
        diagnostics.append(Diagnostic(kind="error", message=f"Error parsing HTML: {exc}"))

    for diagnostic in diagnostics:
        if diagnostic.kind == "unterminated_tag":
            logger.debug("%s at offset %s", diagnostic.message, diagnostic.offset)

    return ConversionResult(tree=assembler.root, diagnostics=diagnostics)


def _resolve_order(block_order: BlockOrder | str | None) -> BlockOrder:
    """Resolve an explicit order strictly, the configured one leniently.

    An explicit value that is not a known order raises ``ValueError``. A bad
    ``HTML2JSON_BLOCK_ORDER`` is logged and replaced by ``BlockOrder.PASS`` so
    conversion itself never fails on configuration.
    """
    if isinstance(block_order, BlockOrder):
        return block_order
    if block_order is not None:
        return BlockOrder(block_order.strip().lower())
    try:
        return BlockOrder(HTML2JSON_BLOCK_ORDER.strip().lower())
    except ValueError:
        logger.warning(
            "Unknown HTML2JSON_BLOCK_ORDER %r, using %r",
            HTML2JSON_BLOCK_ORDER,
            BlockOrder.PASS.value,
        )
        return BlockOrder.PASS


def html_to_tree(html: str, *, block_order: BlockOrder | str | None = None) -> RootNode:
    """Convert an HTML string into its document tree."""
    return convert_html(html, block_order=block_order).tree


def tree_to_json(root: RootNode) -> str:
    """Serialize a tree: ``type`` first, flags only when true, compact separators."""
    return root.model_dump_json(by_alias=True, exclude_none=True)


def html_to_json_string(html: str, *, block_order: BlockOrder | str | None = None) -> str:
    """Convert an HTML string straight to its serialized tree."""
    return tree_to_json(html_to_tree(html, block_order=block_order))
