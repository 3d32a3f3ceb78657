"""Process every CSV file matched by a glob pattern."""

from __future__ import annotations

import glob
from pathlib import Path

import pandas as pd

from html2json.config import HTML2JSON_DEFAULT_COLUMN
from html2json.csv_processor import process_csv
from html2json.exceptions import Html2JsonError, NoFilesMatchedError, OutputDirectoryError
from html2json.schemas import BatchResult, FileResult
from html2json.utils.logging_config import get_logger

logger = get_logger(__name__)


def find_input_files(pattern: str) -> list[Path]:
    """Expand ``pattern`` (``**`` allowed) into a sorted list of files."""
    return [Path(match) for match in sorted(glob.glob(pattern, recursive=True)) if Path(match).is_file()]


def batch_process_csv(
    pattern: str,
    output_dir: str | Path,
    column: str | None = None,
) -> BatchResult:
    """Convert every CSV file matching ``pattern`` into ``output_dir``.

    Output files keep their input basename. A failure on one file is recorded
    in its :class:`FileResult` and the remaining files are still processed.

    Raises:
        NoFilesMatchedError: If the pattern matches no files.
        OutputDirectoryError: If ``output_dir`` cannot be created.
    """
    column = column or HTML2JSON_DEFAULT_COLUMN
    files = find_input_files(pattern)
    if not files:
        raise NoFilesMatchedError(f"No files found matching pattern: {pattern}")

    target_dir = Path(output_dir)
    try:
        target_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise OutputDirectoryError(f"Could not create output directory {target_dir}: {exc}") from exc

    logger.info("Found %d files matching pattern: %s", len(files), pattern)

    batch = BatchResult(pattern=pattern, output_dir=str(target_dir))
    for index, path in enumerate(files, start=1):
        output_file = target_dir / path.name
        logger.info("[%d/%d] Processing %s", index, len(files), path)
        try:
            csv_result = process_csv(path, output_file, column)
        except (Html2JsonError, OSError, pd.errors.ParserError) as exc:
            logger.error("Error processing %s: %s", path, exc)
            batch.results.append(FileResult(input=str(path), success=False, error=str(exc)))
            continue

        batch.results.append(
            FileResult(
                input=str(path),
                output=str(output_file),
                success=True,
                records_processed=csv_result.records_processed,
                warnings=csv_result.warnings,
            )
        )

    logger.info(
        "Processing complete: %d/%d files processed successfully.",
        batch.succeeded,
        batch.total,
    )
    return batch
