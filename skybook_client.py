"""SkyBook Pro API client.

This module defines a thin client wrapper around the SkyBook Pro REST
API.  The client uses the ``requests`` library internally to make HTTP
calls and never raises on API errors: every method returns a tuple
``(data, error)`` where ``error`` is ``None`` on success or a
dictionary with ``status_code`` and ``message`` describing the
failure.

Besides one method per endpoint, the client implements the checkout
flow a customer goes through on the bill page:

* :meth:`SkyBookClient.checkout` – create the booking, create a payment
  intent for the amount due, simulate the payment, mark the booking as
  paid and ask the server to notify the customer.
"""

from __future__ import annotations

import logging
import time
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

ADVANCE_RATE = Decimal("0.30")

Error = Dict[str, Any]


class SkyBookClient:
    """Client for interacting with the SkyBook Pro API."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
        payment_delay: float = 2.0,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the server, e.g. ``http://localhost:5000``.
                The ``/api`` prefix is added by the client.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per‑request timeout in seconds.
            payment_delay: Seconds the simulated payment takes in
                :meth:`checkout`.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout
        self.payment_delay = payment_delay

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PATCH``, ...).
            path: Path relative to ``/api`` (e.g. ``/services``).
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.
        """
        url = f"{self.base_url}/api{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("message") or err_json.get("detail") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Registration and verification
    # ------------------------------------------------------------------
    def register(self, full_name: str, email: str, phone: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Register a user.  On success ``data["userId"]`` holds the new id."""
        return self._request(
            "POST", "/register", json_body={"fullName": full_name, "email": email, "phone": phone}
        )

    def verify_otp(self, user_id: int, otp: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("POST", "/verify-otp", json_body={"userId": user_id, "otp": otp})

    def resend_otp(self, user_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("POST", "/resend-otp", json_body={"userId": user_id})

    def get_user(self, user_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/user/{user_id}")

    # ------------------------------------------------------------------
    # Catalog
    # ------------------------------------------------------------------
    def list_services(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", "/services")
        if error:
            return [], error
        return data or [], None

    def get_service(self, service_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/services/{service_id}")

    # ------------------------------------------------------------------
    # Bookings
    # ------------------------------------------------------------------
    def quote(self, service_id: int, duration: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("POST", "/bookings/quote", json_body={"serviceId": service_id, "duration": duration})

    def create_booking(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("POST", "/bookings", json_body=payload)

    def get_user_bookings(self, user_id: int) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", f"/bookings/user/{user_id}")
        if error:
            return [], error
        return data or [], None

    def update_booking(self, booking_id: int, fields: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("PATCH", f"/bookings/{booking_id}", json_body=fields)

    # ------------------------------------------------------------------
    # Payments and notifications
    # ------------------------------------------------------------------
    def create_payment_intent(
        self, amount: float, booking_id: int, payment_type: str, currency: str = "INR"
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request(
            "POST",
            "/create-payment-intent",
            json_body={
                "amount": amount,
                "bookingId": booking_id,
                "paymentType": payment_type,
                "currency": currency,
            },
        )

    def send_booking_notification(
        self, booking_id: int, kind: str = "confirmation", payment_type: str = "full"
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request(
            "POST",
            "/send-booking-notification",
            json_body={"bookingId": booking_id, "type": kind, "paymentType": payment_type},
        )

    def checkout(
        self, details: Dict[str, Any], payment_type: str = "advance"
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Book and pay in one go.

        Args:
            details: Booking fields in wire format (``userId``,
                ``serviceId``, ``location``, ``date``, ``time``,
                ``duration``, ``totalCost`` and optionally
                ``requirements``).
            payment_type: ``advance`` to pay 30% now, ``full`` to pay
                everything.
        Returns:
            A tuple ``(result, error)``; ``result`` holds the final
            ``booking`` and the ``payment`` intent.  The flow stops at
            the first failing step.
        """
        full = payment_type == "full"
        status = "confirmed" if full else "advance_paid"
        total = Decimal(str(details["totalCost"]))
        amount = total if full else (total * ADVANCE_RATE).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)

        booking, error = self.create_booking({**details, "totalCost": f"{total:.2f}", "status": status})
        if error:
            return None, error
        payment, error = self.create_payment_intent(float(amount), booking["id"], payment_type)
        if error:
            return None, error

        self._simulate_payment(payment["clientSecret"])

        booking, error = self.update_booking(booking["id"], {"status": status, "paymentStatus": "paid"})
        if error:
            return None, error
        _, error = self.send_booking_notification(booking["id"], "confirmation", payment_type)
        if error:
            return None, error
        return {"booking": booking, "payment": payment}, None

    # ------------------------------------------------------------------
    # Admin
    # ------------------------------------------------------------------
    def admin_login(self, email: str, password: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("POST", "/admin/login", json_body={"email": email, "password": password})

    def admin_create_service(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("POST", "/admin/services", json_body=payload)

    def admin_update_service(self, service_id: int, fields: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("PUT", f"/admin/services/{service_id}", json_body=fields)

    def admin_delete_service(self, service_id: int) -> Tuple[bool, Optional[Error]]:
        _, error = self._request("DELETE", f"/admin/services/{service_id}")
        return error is None, error

    def admin_list_bookings(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", "/admin/bookings")
        if error:
            return [], error
        return data or [], None

    def admin_stats(self) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", "/admin/stats")

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _simulate_payment(self, client_secret: str) -> None:
        """Pretend the customer completes the payment in a gateway widget."""
        logger.info("Simulating payment for %s", client_secret)
        if self.payment_delay > 0:
            time.sleep(self.payment_delay)
