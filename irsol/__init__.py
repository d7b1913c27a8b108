"""Protocol messages, parsing, serialization and logging helpers for the irsol camera server."""

__version__ = "1.0.0"