"""Convert the HTML column of CSV files into serialized document trees."""

from __future__ import annotations

from pathlib import Path

import pandas as pd

from html2json.config import (
    HTML2JSON_CSV_ENCODING,
    HTML2JSON_DEFAULT_COLUMN,
    HTML2JSON_STREAM_CHUNK_SIZE,
)
from html2json.converter import convert_html, tree_to_json
from html2json.exceptions import CsvProcessingError, InputNotFoundError
from html2json.schemas import CsvResult, RowWarning
from html2json.utils.logging_config import get_logger

logger = get_logger(__name__)

# Every cell is read as the exact string found in the file.
CSV_READ_OPTIONS = {
    "dtype": str,
    "keep_default_na": False,
    "na_filter": False,
    "skip_blank_lines": True,
}
_PARSE_ERRORS = (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError)
_LINE_TERMINATOR = "\n"


def process_csv(
    input_path: str | Path,
    output_path: str | Path,
    column: str | None = None,
) -> CsvResult:
    """Convert one CSV file in memory.

    Args:
        input_path: CSV file to read.
        output_path: CSV file to write; overwritten if present.
        column: Name of the column holding HTML. Defaults to
            ``HTML2JSON_DEFAULT_COLUMN``.

    Returns:
        Summary with record counts and per-row warnings.

    Raises:
        InputNotFoundError: If ``input_path`` is not a file.
        CsvProcessingError: If the CSV cannot be parsed or written.
    """
    column = column or HTML2JSON_DEFAULT_COLUMN
    source = _require_file(input_path)

    try:
        frame = pd.read_csv(source, encoding=HTML2JSON_CSV_ENCODING, **CSV_READ_OPTIONS)
    except _PARSE_ERRORS as exc:
        raise CsvProcessingError(f"Could not parse CSV file {source}: {exc}") from exc

    logger.info("Processing %d records from %s", len(frame), source)
    result = _new_result(source, output_path, column, frame.columns)
    result.records_processed = len(frame)

    if result.column_found:
        frame[column] = [
            _convert_cell(value, row, result)
            for row, value in enumerate(frame[column], start=1)
        ]

    try:
        frame.to_csv(
            output_path,
            index=False,
            encoding=HTML2JSON_CSV_ENCODING,
            lineterminator=_LINE_TERMINATOR,
        )
    except OSError as exc:
        raise CsvProcessingError(f"Could not write CSV file {output_path}: {exc}") from exc

    logger.info("CSV processed successfully. Output written to: %s", output_path)
    return result


def stream_csv(
    input_path: str | Path,
    output_path: str | Path,
    column: str | None = None,
    *,
    chunk_size: int | None = None,
) -> CsvResult:
    """Convert one CSV file without loading it whole.

    Rows are read in chunks of ``chunk_size`` and converted one at a time as
    they arrive; each chunk is appended to the output before the next one is
    read, so output rows keep the input order. Semantics otherwise match
    :func:`process_csv`. If reading or writing fails partway, the incomplete
    output file is removed before :class:`CsvProcessingError` is raised.
    """
    column = column or HTML2JSON_DEFAULT_COLUMN
    chunk_size = chunk_size or HTML2JSON_STREAM_CHUNK_SIZE
    source = _require_file(input_path)
    logger.info("Stream processing %s", source)

    try:
        header = pd.read_csv(source, nrows=0, encoding=HTML2JSON_CSV_ENCODING, **CSV_READ_OPTIONS)
    except _PARSE_ERRORS as exc:
        raise CsvProcessingError(f"Could not parse CSV file {source}: {exc}") from exc
    result = _new_result(source, output_path, column, header.columns)

    try:
        with (
            pd.read_csv(
                source,
                chunksize=chunk_size,
                encoding=HTML2JSON_CSV_ENCODING,
                **CSV_READ_OPTIONS,
            ) as reader,
            open(output_path, "w", encoding=HTML2JSON_CSV_ENCODING, newline="") as handle,
        ):
            header.to_csv(handle, index=False, lineterminator=_LINE_TERMINATOR)
            for chunk in reader:
                if result.column_found:
                    first_row = result.records_processed + 1
                    chunk[column] = [
                        _convert_cell(value, row, result)
                        for row, value in enumerate(chunk[column], start=first_row)
                    ]
                chunk.to_csv(handle, index=False, header=False, lineterminator=_LINE_TERMINATOR)
                result.records_processed += len(chunk)
    except _PARSE_ERRORS as exc:
        _discard_partial_output(output_path)
        raise CsvProcessingError(f"Could not parse CSV file {source}: {exc}") from exc
    except OSError as exc:
        _discard_partial_output(output_path)
        raise CsvProcessingError(f"Could not write CSV file {output_path}: {exc}") from exc

    logger.info(
        "CSV stream processed successfully. Processed %d records. Output written to: %s",
        result.records_processed,
        output_path,
    )
    return result


def _require_file(path: str | Path) -> Path:
    source = Path(path)
    if not source.is_file():
        raise InputNotFoundError(f"Input file not found: {source}")
    return source


def _discard_partial_output(output_path: str | Path) -> None:
    path = Path(output_path)
    if path.is_file():
        path.unlink()


def _new_result(source: Path, output_path: str | Path, column: str, columns: pd.Index) -> CsvResult:
    column_found = column in columns
    if not column_found:
        logger.warning('Column "%s" not found in CSV file %s.', column, source)
    return CsvResult(
        input_file=str(source),
        output_file=str(output_path),
        column=column,
        column_found=column_found,
    )


def _convert_cell(value: str, row: int, result: CsvResult) -> str:
    """Return the serialized tree for one cell, or the cell itself on failure."""
    if not value or not value.strip():
        return value
    try:
        conversion = convert_html(value)
        converted = tree_to_json(conversion.tree)
    except Exception as exc:
        logger.warning("Error processing HTML in row %d: %s", row, exc)
        result.warnings.append(RowWarning(row=row, message=str(exc)))
        return value

    result.converted += 1
    result.diagnostics_count += len(conversion.diagnostics)
    return converted
