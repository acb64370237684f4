"""linkpage - Single-page public profiles built from links and content blocks."""

__version__ = "0.1.0"
