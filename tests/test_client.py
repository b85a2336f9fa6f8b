import json
from unittest.mock import Mock

import pytest
import requests

from skybook_client import SkyBookClient

DETAILS = {
    "userId": 1,
    "serviceId": 1,
    "location": "Marine Drive, Mumbai",
    "date": "2026-11-02",
    "time": "09:30",
    "duration": 2,
    "totalCost": 300,
}


def make_response(status_code=200, payload=None):
    response = requests.Response()
    response.status_code = status_code
    response._content = json.dumps(payload).encode("utf-8") if payload is not None else b""
    response.headers["Content-Type"] = "application/json"
    response.url = "http://testserver"
    return response


@pytest.fixture
def session():
    return Mock(spec=requests.Session)


@pytest.fixture
def api(session):
    return SkyBookClient(base_url="http://localhost:5000/", session=session, payment_delay=0)


class TestRequests:
    def test_prefixes_api_and_sends_json(self, api, session):
        session.request.return_value = make_response(200, {"userId": 2, "message": "ok"})

        data, error = api.register("Asha Rao", "asha@example.com", "+91")

        assert error is None
        assert data["userId"] == 2
        session.request.assert_called_once_with(
            method="POST",
            url="http://localhost:5000/api/register",
            json={"fullName": "Asha Rao", "email": "asha@example.com", "phone": "+91"},
            timeout=15,
        )

    def test_error_message_comes_from_body(self, api, session):
        session.request.return_value = make_response(400, {"message": "Invalid OTP"})

        data, error = api.verify_otp(2, "000000")

        assert data is None
        assert error == {"status_code": 400, "message": "Invalid OTP"}

    def test_network_failure(self, api, session):
        session.request.side_effect = requests.ConnectionError("connection refused")

        services, error = api.list_services()

        assert services == []
        assert error["status_code"] is None
        assert "connection refused" in error["message"]

    def test_delete_service(self, api, session):
        session.request.return_value = make_response(200, {"message": "Service deleted successfully"})

        deleted, error = api.admin_delete_service(3)

        assert deleted is True and error is None
        assert session.request.call_args.kwargs["method"] == "DELETE"
        assert session.request.call_args.kwargs["url"].endswith("/api/admin/services/3")


class TestCheckout:
    """The booking, payment, update and notification sequence."""

    def _script(self, session, *responses):
        session.request.side_effect = list(responses)

    def test_advance_payment(self, api, session):
        booking = {**DETAILS, "id": 5, "status": "advance_paid"}
        payment = {"clientSecret": "pi_1_secret_abc", "amount": 9000, "currency": "INR"}
        paid = {**booking, "paymentStatus": "paid"}
        self._script(
            session,
            make_response(201, booking),
            make_response(200, payment),
            make_response(200, paid),
            make_response(200, {"message": "Notifications sent successfully"}),
        )

        result, error = api.checkout(DETAILS, payment_type="advance")

        assert error is None
        assert result == {"booking": paid, "payment": payment}
        calls = [c.kwargs for c in session.request.call_args_list]
        assert [(c["method"], c["url"].split("/api")[1]) for c in calls] == [
            ("POST", "/bookings"),
            ("POST", "/create-payment-intent"),
            ("PATCH", "/bookings/5"),
            ("POST", "/send-booking-notification"),
        ]
        assert calls[0]["json"]["status"] == "advance_paid"
        assert calls[0]["json"]["totalCost"] == "300.00"
        assert calls[1]["json"] == {"amount": 90.0, "bookingId": 5, "paymentType": "advance", "currency": "INR"}
        assert calls[2]["json"] == {"status": "advance_paid", "paymentStatus": "paid"}
        assert calls[3]["json"] == {"bookingId": 5, "type": "confirmation", "paymentType": "advance"}

    def test_full_payment(self, api, session):
        booking = {**DETAILS, "id": 6, "status": "confirmed"}
        self._script(
            session,
            make_response(201, booking),
            make_response(200, {"clientSecret": "pi_1_secret_abc", "amount": 30000}),
            make_response(200, {**booking, "paymentStatus": "paid"}),
            make_response(200, {"message": "Notifications sent successfully"}),
        )

        result, error = api.checkout(DETAILS, payment_type="full")

        assert error is None
        calls = [c.kwargs for c in session.request.call_args_list]
        assert calls[0]["json"]["status"] == "confirmed"
        assert calls[1]["json"]["amount"] == 300.0
        assert calls[2]["json"]["status"] == "confirmed"

    def test_stops_at_first_failure(self, api, session):
        self._script(session, make_response(400, {"message": "User not found or not verified"}))

        result, error = api.checkout(DETAILS)

        assert result is None
        assert error == {"status_code": 400, "message": "User not found or not verified"}
        assert session.request.call_count == 1

    def test_notification_failure_is_reported(self, api, session):
        booking = {**DETAILS, "id": 7}
        self._script(
            session,
            make_response(201, booking),
            make_response(200, {"clientSecret": "pi_1_secret_abc"}),
            make_response(200, booking),
            make_response(500, {"message": "Failed to send notifications"}),
        )

        result, error = api.checkout(DETAILS)

        assert result is None
        assert error["status_code"] == 500
