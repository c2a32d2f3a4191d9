"""Command line client for Notion pages and databases."""

__version__ = "0.1.0"
