"""Entrypoints (inbound adapters) for WORDCAP.

Expose the application to the outside world. Parse and validate inputs, call
the domain, and present results.
"""
