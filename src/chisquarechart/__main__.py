"""Command-line entry point: opens the chart window."""
import sys

from chisquarechart.main import main

if __name__ == "__main__":
    sys.exit(main())
