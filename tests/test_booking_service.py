import logging
from decimal import Decimal

import pytest

from skybook_api.app.core.errors import NotFoundError, PreconditionFailed, ValidationError
from skybook_api.app.schemas.booking import BookingCreate, BookingUpdate
from skybook_api.app.services.booking_service import BookingService
from skybook_api.app.services.statistics_service import StatisticsService
from tests.conftest import booking_fields


@pytest.fixture
def bookings(seeded_store):
    return BookingService(seeded_store, advance_rate="0.30")


@pytest.fixture
def unverified_user(seeded_store):
    return seeded_store.users.create({"full_name": "B. Singh", "email": "b@x.com", "phone": "+91"})


class TestCreateBooking:
    """Admission rules for new bookings."""

    async def test_verified_user_and_existing_service(self, bookings, seeded_store):
        booking = await bookings.create_booking(BookingCreate(**booking_fields()))

        assert booking.id == 1
        assert booking.status == "confirmed"
        assert booking.total_cost == Decimal("300.00")
        assert seeded_store.bookings.get(1) == booking

    async def test_accepts_raw_mapping(self, bookings):
        booking = await bookings.create_booking(booking_fields(total_cost="300"))
        assert booking.total_cost == Decimal("300.00")

    async def test_supplied_status_is_kept(self, bookings):
        booking = await bookings.create_booking(booking_fields(status="advance_paid"))
        assert booking.status == "advance_paid"

    async def test_unverified_user_is_rejected(self, bookings, seeded_store, unverified_user):
        with pytest.raises(PreconditionFailed) as exc_info:
            await bookings.create_booking(booking_fields(user_id=unverified_user.id))

        assert exc_info.value.message == "User not found or not verified"
        assert seeded_store.bookings.count() == 0

    async def test_missing_user_is_rejected(self, bookings):
        with pytest.raises(PreconditionFailed):
            await bookings.create_booking(booking_fields(user_id=77))

    async def test_missing_service_is_rejected(self, bookings, seeded_store):
        with pytest.raises(PreconditionFailed) as exc_info:
            await bookings.create_booking(booking_fields(service_id=77))

        assert exc_info.value.message == "Service not found"
        assert seeded_store.bookings.count() == 0

    async def test_inactive_service_can_still_be_booked(self, bookings, seeded_store):
        seeded_store.services.update(2, {"is_active": False})

        booking = await bookings.create_booking(booking_fields(service_id=2, total_cost="240.00"))
        assert booking.service_id == 2

    async def test_invalid_mapping_reports_every_field(self, bookings, seeded_store):
        with pytest.raises(ValidationError) as exc_info:
            await bookings.create_booking(booking_fields(date="", duration=0))

        locations = {error["loc"][-1] for error in exc_info.value.errors}
        assert {"date", "duration"} <= locations
        assert seeded_store.bookings.count() == 0

    async def test_client_total_is_stored_even_when_it_differs(self, bookings, caplog):
        with caplog.at_level(logging.WARNING, logger="skybook_api.app.services.booking_service"):
            booking = await bookings.create_booking(booking_fields(total_cost="10.00"))

        assert booking.total_cost == Decimal("10.00")
        assert "differs" in caplog.text


class TestBookingViews:
    async def test_user_bookings_include_service_summary(self, bookings, seeded_store):
        await bookings.create_booking(booking_fields())
        other = seeded_store.users.create(
            {"full_name": "C", "email": "c@x.com", "phone": "1", "is_verified": True}
        )
        await bookings.create_booking(booking_fields(user_id=other.id))

        result = await bookings.get_user_bookings(1)

        assert [booking.user_id for booking in result] == [1]
        assert result[0].service.name == "Videography"
        assert result[0].service.icon == "fas fa-video"

    async def test_deleted_service_renders_as_none(self, bookings, seeded_store):
        await bookings.create_booking(booking_fields())
        seeded_store.services.delete(1)

        result = await bookings.get_user_bookings(1)

        assert len(result) == 1
        assert result[0].service is None

    async def test_unknown_user_has_no_bookings(self, bookings):
        assert await bookings.get_user_bookings(55) == []

    async def test_admin_view_joins_user_and_service(self, bookings, seeded_store):
        await bookings.create_booking(booking_fields())
        await bookings.create_booking(booking_fields(service_id=2, total_cost="240.00"))
        seeded_store.services.delete(2)

        result = await bookings.get_all_bookings_enriched()

        assert len(result) == 2
        assert result[0].user.full_name == "Demo User"
        assert result[0].user.email == "demo@skybook.pro"
        assert result[0].service.name == "Videography"
        assert result[1].service is None

    async def test_get_booking(self, bookings):
        created = await bookings.create_booking(booking_fields())
        assert await bookings.get_booking(created.id) == created
        assert await bookings.get_booking(99) is None


class TestUpdateBooking:
    async def test_partial_update(self, bookings):
        created = await bookings.create_booking(booking_fields())

        updated = await bookings.update_booking_status(
            created.id, {"status": "advance_paid", "payment_status": "paid"}
        )

        assert updated.status == "advance_paid"
        assert updated.payment_status == "paid"
        assert updated.location == created.location
        assert updated.created_at == created.created_at

    async def test_missing_booking(self, bookings):
        assert await bookings.update_booking_status(99, {"status": "cancelled"}) is None

    async def test_null_requirements_clears_stored_value(self, bookings):
        created = await bookings.create_booking(booking_fields(requirements="Night shoot"))
        update = BookingUpdate.model_validate({"requirements": None, "status": None})

        assert update.changes() == {"requirements": None}
        updated = await bookings.update_booking_status(created.id, update.changes())
        assert updated.requirements is None
        assert updated.status == "confirmed"

    def test_changes_only_includes_sent_fields(self):
        assert BookingUpdate.model_validate({"paymentStatus": "paid"}).changes() == {"payment_status": "paid"}
        assert BookingUpdate.model_validate({}).changes() == {}


class TestQuote:
    async def test_breakdown(self, bookings):
        quote = await bookings.quote(1, 2)

        assert quote.price_per_hour == Decimal("150.00")
        assert quote.total_cost == Decimal("300.00")
        assert quote.advance_amount == Decimal("90.00")
        assert quote.balance_due == Decimal("210.00")

    async def test_advance_rounds_half_up(self, bookings, seeded_store):
        seeded_store.services.update(1, {"price_per_hour": Decimal("0.05")})

        quote = await bookings.quote(1, 1)

        assert quote.advance_amount == Decimal("0.02")
        assert quote.balance_due == Decimal("0.03")

    async def test_unknown_service(self, bookings):
        with pytest.raises(NotFoundError):
            await bookings.quote(77, 1)


class TestStatistics:
    async def test_empty_store(self, store):
        stats = await StatisticsService(store).compute_stats()

        assert stats.total_users == 0
        assert stats.total_bookings == 0
        assert stats.revenue == "0.00"
        assert stats.growth == "+24%"

    async def test_revenue_sums_every_booking(self, bookings, seeded_store):
        await bookings.create_booking(booking_fields())
        await bookings.create_booking(booking_fields(service_id=2, duration=1, total_cost="120.5"))
        seeded_store.users.create({"full_name": "D", "email": "d@x.com", "phone": "1"})

        stats = await StatisticsService(seeded_store, growth="+10%").compute_stats()

        assert stats.total_users == 2
        assert stats.total_bookings == 2
        assert stats.revenue == "420.50"
        assert stats.growth == "+10%"
