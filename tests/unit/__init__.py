"""Unit tests.

Keep them small and deterministic; use the in-memory notifier instead of
capturing process output where possible.
"""
