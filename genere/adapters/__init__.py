"""Adapters turning external sources (JSON tables) into symbol definitions."""
