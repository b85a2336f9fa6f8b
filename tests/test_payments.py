from unittest.mock import AsyncMock

import pytest

from skybook_api.app.schemas.payment import PaymentIntentCreate
from skybook_api.app.services.payment_service import PaymentService, to_minor_units


@pytest.mark.parametrize(
    "amount, expected",
    [(90, 9000), (19.99, 1999), (0.125, 13), (2.675, 268), (0.005, 1), (1.004, 100)],
)
def test_to_minor_units_rounds_half_up(amount, expected):
    assert to_minor_units(amount) == expected


class TestPaymentService:
    async def test_provider_receives_minor_units(self):
        provider = AsyncMock()
        provider.create_intent.return_value = "pi_1_secret_abcdefghi"
        payments = PaymentService(provider, default_currency="INR")

        intent = await payments.create_payment_intent(PaymentIntentCreate(amount=0.125, booking_id=4))

        provider.create_intent.assert_awaited_once_with(13, "INR")
        assert intent.amount == 13
        assert intent.booking_id == 4

    async def test_explicit_currency_wins(self):
        provider = AsyncMock()
        provider.create_intent.return_value = "pi_1_secret_abcdefghi"

        intent = await PaymentService(provider).create_payment_intent(
            PaymentIntentCreate(amount=10, currency="USD")
        )

        provider.create_intent.assert_awaited_once_with(1000, "USD")
        assert intent.currency == "USD"
