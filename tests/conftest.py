"""
Pytest configuration and fixtures.
"""
import pytest
import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))


class FakeProvider:
    """Search provider returning canned results per query and recording calls."""

    def __init__(self, results=None, default=None, error=None):
        self.results = results or {}
        self.default = default if default is not None else []
        self.error = error
        self.queries = []

    async def search(self, query, pages=1):
        self.queries.append(query)
        if self.error is not None:
            raise self.error
        return {"videos": list(self.results.get(query, self.default))}
