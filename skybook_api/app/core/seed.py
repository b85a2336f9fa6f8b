"""
Demo data installed into a fresh store.

The catalog starts with six service categories and a single verified
demo user (``demo@skybook.pro``, id 1) so that a new deployment can be
browsed and booked immediately.  Users registered afterwards receive
ids from 2 upward.
"""

import logging
from decimal import Decimal

from .store import EntityStore

DEFAULT_SERVICES = [
    {
        "name": "Videography",
        "description": "Professional aerial videos",
        "price_per_hour": Decimal("150.00"),
        "icon": "fas fa-video",
        "color": "from-red-500 to-pink-500",
    },
    {
        "name": "Photography",
        "description": "High-resolution aerial photos",
        "price_per_hour": Decimal("120.00"),
        "icon": "fas fa-camera",
        "color": "from-blue-500 to-cyan-500",
    },
    {
        "name": "Agriculture",
        "description": "Crop monitoring & analysis",
        "price_per_hour": Decimal("200.00"),
        "icon": "fas fa-seedling",
        "color": "from-green-500 to-emerald-500",
    },
    {
        "name": "Surveillance",
        "description": "Security & monitoring",
        "price_per_hour": Decimal("180.00"),
        "icon": "fas fa-eye",
        "color": "from-purple-500 to-indigo-500",
    },
    {
        "name": "Inspection",
        "description": "Infrastructure & building inspection",
        "price_per_hour": Decimal("160.00"),
        "icon": "fas fa-search",
        "color": "from-orange-500 to-red-500",
    },
    {
        "name": "Custom Service",
        "description": "Specialized requirements",
        "price_per_hour": Decimal("0.00"),
        "icon": "fas fa-cogs",
        "color": "from-yellow-500 to-amber-500",
    },
]

DEMO_USER = {
    "full_name": "Demo User",
    "email": "demo@skybook.pro",
    "phone": "+1234567890",
    "is_verified": True,
}


def seed_demo_data(store: EntityStore) -> None:
    """Populate ``store`` with the default catalog and the demo user."""
    logger = logging.getLogger(__name__)
    for fields in DEFAULT_SERVICES:
        store.services.create(fields)
    demo = store.users.create(DEMO_USER)
    logger.info("Seeded %d services and demo user %s", len(DEFAULT_SERVICES), demo.id)
