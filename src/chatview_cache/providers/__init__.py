"""Adapters that expose third-party message objects through the cache protocols."""
