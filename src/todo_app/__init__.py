"""Single-screen todo list backed by a local SQLite file."""

__version__ = "0.1.0"
