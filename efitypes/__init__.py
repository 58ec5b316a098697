"""Firmware interface data types: characters, strings, GUIDs, enums and a logging handler."""

__version__ = "0.1.0"
__all__ = ["chars", "enums", "guid", "strs", "logger"]