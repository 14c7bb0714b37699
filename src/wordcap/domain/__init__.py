"""Domain layer for WORDCAP.

Contains the word-normalization rules. This package is deliberately
technology-agnostic.

Dependency rule: do not import from `wordcap.adapters` or `wordcap.entrypoints`.
"""
