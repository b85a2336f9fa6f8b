"""
Core infrastructure: configuration, logging, errors, security helpers
and the in‑memory entity store.
"""
