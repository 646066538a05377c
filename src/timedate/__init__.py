"""timedate — civil time queries, timezone conversion, and display formatting."""

__version__ = "0.4.0"
