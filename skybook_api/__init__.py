"""
Top‑level package for the SkyBook Pro API.

This file makes ``skybook_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``skybook_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
