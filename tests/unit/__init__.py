# tests/unit/__init__.py
"""Unit tests. No database is bound, so the data layer serves mock data."""
