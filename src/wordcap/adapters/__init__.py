"""Adapters (infrastructure) for WORDCAP.

Provide concrete implementations of the interfaces defined in
`wordcap.interfaces` (streams, loggers, in-memory recorders).

Dependency rule: may import `wordcap.interfaces`; the domain must not import
this package.
"""
