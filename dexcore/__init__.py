"""ABOUTME: Root package for dexcore.
ABOUTME: Defensive type matchups and form labels derived from raw creature database records."""

__version__ = "0.1.0"
