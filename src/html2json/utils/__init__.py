"""Internal utilities for html2json."""
