"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  Storage lives in ``core.store``, business logic in
``services`` and the HTTP surface in ``api``.  Each domain (users,
services, bookings, payments, admin) exposes a router defined in
``api/endpoints``.
"""

from .main import app, create_app  # noqa: F401
