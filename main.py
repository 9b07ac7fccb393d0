"""
Development script for running the specfilter package directly.

This file is just a convenience wrapper around the main CLI entry point for development.
When installed via pip, use the 'specfilter' command instead.
"""
import sys

from specfilter.cli.commands import main

if __name__ == "__main__":
    sys.exit(main())
