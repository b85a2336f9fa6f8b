"""
Service layer for the admin dashboard statistics.

Counts users and bookings and sums booking totals.  Revenue is the sum
of ``total_cost`` over all bookings regardless of status or payment
state.  The growth figure is a fixed value from the settings, not a
metric derived from data.
"""

from decimal import Decimal

from skybook_api.app.core.store import EntityStore
from skybook_api.app.schemas.admin import StatsRead


class StatisticsService:
    """Service providing aggregated statistics for administrators."""

    def __init__(self, store: EntityStore, growth: str = "+24%") -> None:
        self.store = store
        self.growth = growth

    async def compute_stats(self) -> StatsRead:
        bookings = self.store.bookings.list()
        revenue = sum((booking.total_cost for booking in bookings), Decimal("0"))
        return StatsRead(
            total_users=self.store.users.count(),
            total_bookings=len(bookings),
            revenue=f"{revenue:.2f}",
            growth=self.growth,
        )
