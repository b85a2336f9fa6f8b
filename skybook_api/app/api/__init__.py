"""
HTTP surface of the SkyBook Pro API.

``router`` aggregates the domain routers from ``endpoints`` under the
``/api`` prefix; ``deps`` holds the dependency providers that hand
services to the handlers.
"""
