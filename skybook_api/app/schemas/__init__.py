"""
Pydantic schema definitions for stored entities and API payloads.

Each domain (users, services, bookings, payments, admin) defines its
own models.  The full entity records (``User``, ``Service``,
``Booking``) are what the entity store holds; the remaining models
describe request and response bodies.  All models share the camelCase
wire format defined in ``base``.
"""
