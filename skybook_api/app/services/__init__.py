"""
Service layer abstraction.

Each service encapsulates business logic for a domain and operates on
the ``EntityStore`` it is constructed with.  Handlers build services
through the providers in ``api.deps`` so the store is injected rather
than imported as a global.
"""
