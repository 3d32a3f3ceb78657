"""html2json: convert HTML in CSV cells into a JSON document tree."""

from html2json.batch import batch_process_csv
from html2json.blocks import BlockOrder
from html2json.converter import convert_html, html_to_json_string, html_to_tree, tree_to_json
from html2json.csv_processor import process_csv, stream_csv
from html2json.exceptions import (
    CsvProcessingError,
    Html2JsonError,
    InputNotFoundError,
    NoFilesMatchedError,
    OutputDirectoryError,
)
from html2json.schemas import (
    BatchResult,
    ConversionResult,
    CsvResult,
    Diagnostic,
    FileResult,
    RootNode,
    RowWarning,
    TextNode,
)

__all__ = [
    "BatchResult",
    "BlockOrder",
    "ConversionResult",
    "CsvProcessingError",
    "CsvResult",
    "Diagnostic",
    "FileResult",
    "Html2JsonError",
    "InputNotFoundError",
    "NoFilesMatchedError",
    "OutputDirectoryError",
    "RootNode",
    "RowWarning",
    "TextNode",
    "batch_process_csv",
    "convert_html",
    "html_to_json_string",
    "html_to_tree",
    "process_csv",
    "stream_csv",
    "tree_to_json",
]
