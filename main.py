#!/usr/bin/env python3
"""Main entry point for the Top Issues reporter."""

from top_issues.cli import app

if __name__ == "__main__":
    app()
