"""Parse, build and format 128-bit UUIDs."""

__version__ = "0.1.0"

__all__ = ["builder", "core", "encoding", "errors", "formats", "parser"]