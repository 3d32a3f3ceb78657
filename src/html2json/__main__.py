"""Module entry point for running with python -m html2json."""

from html2json.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
