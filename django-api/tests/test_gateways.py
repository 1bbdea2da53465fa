"""Tests for the in-process gateway implementations.

Run with: pytest tests/test_gateways.py -v
"""

import logging

import pytest

from tickets.gateways import LocalPaymentCharger, LocalSeatReserver


class TestLocalPaymentCharger:
    def test_charge_logs_amount(self, caplog):
        with caplog.at_level(logging.INFO, logger="tickets"):
            LocalPaymentCharger().charge(3, 250)
        assert "Charged account 3: 250" in caplog.text

    @pytest.mark.parametrize("account_id, amount", [("3", 250), (3, 2.5), (True, 1)])
    def test_charge_rejects_non_integers(self, account_id, amount):
        with pytest.raises(TypeError):
            LocalPaymentCharger().charge(account_id, amount)


class TestLocalSeatReserver:
    def test_reserve_logs_seat_count(self, caplog):
        with caplog.at_level(logging.INFO, logger="tickets"):
            LocalSeatReserver().reserve(3, 20)
        assert "Reserved 20 seat(s) for account 3" in caplog.text

    def test_reserve_rejects_non_integers(self):
        with pytest.raises(TypeError):
            LocalSeatReserver().reserve(3, "20")
