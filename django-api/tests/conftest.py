"""Pytest configuration and shared fixtures."""

import pytest
from factories import RecordingGateway
from rest_framework.test import APIClient

from tickets.services import TicketService


@pytest.fixture
def gateway() -> RecordingGateway:
    return RecordingGateway()


@pytest.fixture
def service(gateway: RecordingGateway) -> TicketService:
    return TicketService(payment_charger=gateway, seat_reserver=gateway)


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()
