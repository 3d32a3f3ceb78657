"""Custom exceptions for html2json."""


class Html2JsonError(Exception):
    """Base exception for html2json operations."""


class InputNotFoundError(Html2JsonError, FileNotFoundError):
    """Input file does not exist or is not a regular file."""


class NoFilesMatchedError(Html2JsonError):
    """Batch glob pattern matched no files."""


class OutputDirectoryError(Html2JsonError):
    """Batch output directory could not be created."""


class CsvProcessingError(Html2JsonError):
    """CSV file could not be parsed or written."""
