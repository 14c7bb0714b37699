"""Interfaces (application boundary) for WORDCAP.

Defines framework-free contracts (ABCs) shared by the domain and adapters.

Dependency rule: this package is independent—do not import from any
`wordcap.*` modules.
"""
