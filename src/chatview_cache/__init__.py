"""Derived-data cache for chat message list views."""

__version__ = "0.1.0"
