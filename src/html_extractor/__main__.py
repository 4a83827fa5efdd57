"""Module entry point for running with python -m html_extractor."""

import sys

from html_extractor.cli import main

if __name__ == "__main__":
    sys.exit(main())
