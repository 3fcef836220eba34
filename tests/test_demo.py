"""Tests for the non-interactive demonstration walkthrough."""

import logging

import pytest

from src.config import settings
from src.demo import SAMPLE_TRIP, quote_trip, run_demo
from src.domain.entities import TripRequest
from src.domain.enums import TradeAction


class TestQuoteTrip:
    def test_sample_trip_by_plane(self):
        assert quote_trip(1, SAMPLE_TRIP) == pytest.approx(240.0)

    def test_bus_economy(self):
        assert quote_trip("3", TripRequest(distance_km=50.0, passengers=4)) == pytest.approx(40.0)

    def test_invalid_choice_skips_calculation(self, caplog):
        with caplog.at_level(logging.WARNING, logger="src.demo"):
            assert quote_trip(9, SAMPLE_TRIP) is None
        assert "Invalid choice" in caplog.text


class TestRunDemo:
    def test_invalid_choice_stops_before_stock_demo(self):
        assert run_demo(0) is None

    def test_fixed_price_feed(self):
        result = run_demo(2)
        assert result is not None
        assert result.total_cost == pytest.approx(
            ((100 * 0.3 * 1.5) + 20) * 0.85 * 2
        )

        trader, robot, mobile = result.observers
        assert [(n.symbol, n.price) for n in trader.notifications] == [
            ("AAPL", 90.0),
            ("AAPL", 120.0),
        ]
        assert [n.action for n in robot.notifications] == [
            TradeAction.BUY,
            TradeAction.MONITOR,
        ]
        assert [n.message for n in mobile.notifications] == [
            "Mobile notification: GOOG = 150.0"
        ]
        assert result.exchange.last_price("AAPL") == 120.0

    def test_robot_threshold_ignores_configured_default(self, monkeypatch):
        monkeypatch.setattr(settings, "default_buy_threshold", 50.0)
        result = run_demo(1)
        robot = result.observers[1]
        assert robot.buy_threshold == 100.0
        assert robot.notifications[0].action is TradeAction.BUY
