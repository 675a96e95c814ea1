"""Command-line front end for swiftformat."""

__version__ = "0.18.0"
