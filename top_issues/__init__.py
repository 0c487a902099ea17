"""Top Issues - rank open GitHub issues by thumbs-up reactions."""

__version__ = "0.1.0"
