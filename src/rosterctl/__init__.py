"""rosterctl — employee roster ingestion CLI."""

__version__ = "0.1.0"
