# tests/integration/__init__.py
"""Integration tests backed by the `live_db` fixture (aiosqlite, in memory)."""
