"""Unit tests for the travel cost policies and the booking context."""

import logging

import pytest

from src.domain.entities import InvalidTransportChoice, TripRequest
from src.domain.enums import ServiceClass, TransportMode
from src.domain.pricing import (
    BookingContext,
    BusPolicy,
    PlanePolicy,
    TrainPolicy,
    policy_for,
)


class TestCostPolicies:
    @pytest.mark.parametrize(
        "policy, rate",
        [(PlanePolicy(), 0.5), (TrainPolicy(), 0.3), (BusPolicy(), 0.2)],
    )
    def test_economy_is_rate_times_distance_times_passengers(self, policy, rate):
        cost = policy.calculate_cost(250.0, "economy", 3, False, False)
        assert cost == pytest.approx(250.0 * rate * 3)

    def test_plane_full_options_example(self):
        # 100*0.5=50; x2 business=100; +50 baggage=150; x0.8=120; x2 pax=240
        assert PlanePolicy().calculate_cost(100.0, "business", 2, True, True) == pytest.approx(240.0)

    def test_train_business_with_baggage(self):
        # (100*0.3*1.5 + 20) * 1 = 65
        assert TrainPolicy().calculate_cost(100.0, "business", 1, False, True) == pytest.approx(65.0)

    def test_bus_discount_applied_after_baggage(self):
        # (100*0.2 + 10) * 0.9 = 27
        assert BusPolicy().calculate_cost(100.0, "economy", 1, True, True) == pytest.approx(27.0)

    def test_service_class_is_case_insensitive(self):
        policy = PlanePolicy()
        assert policy.calculate_cost(100.0, "BuSiNeSs", 1, False, False) == pytest.approx(100.0)
        assert policy.calculate_cost(100.0, ServiceClass.BUSINESS, 1, False, False) == pytest.approx(100.0)

    def test_unknown_service_class_prices_as_economy(self):
        policy = TrainPolicy()
        assert policy.calculate_cost(100.0, "first", 1, False, False) == pytest.approx(30.0)
        assert policy.calculate_cost(100.0, "", 1, False, False) == pytest.approx(30.0)

    def test_zero_distance_still_pays_baggage(self):
        assert PlanePolicy().calculate_cost(0.0, "economy", 2, False, True) == pytest.approx(100.0)

    def test_zero_passengers_is_not_rejected(self):
        assert BusPolicy().calculate_cost(100.0, "economy", 0, False, True) == 0.0

    def test_negative_passengers_give_negative_total(self):
        assert BusPolicy().calculate_cost(100.0, "economy", -1, False, False) == pytest.approx(-20.0)


class TestPolicySelection:
    @pytest.mark.parametrize(
        "choice, expected",
        [
            (1, PlanePolicy),
            (2, TrainPolicy),
            (3, BusPolicy),
            ("2", TrainPolicy),
            ("bus", BusPolicy),
            ("Plane", PlanePolicy),
            (TransportMode.TRAIN, TrainPolicy),
        ],
    )
    def test_resolves_choice(self, choice, expected):
        assert isinstance(policy_for(choice), expected)

    @pytest.mark.parametrize("choice", [0, 4, -1, "ship", "", True, "²", "1²"])
    def test_invalid_choice_raises(self, choice):
        with pytest.raises(InvalidTransportChoice):
            policy_for(choice)

    def test_policy_reports_its_mode(self):
        assert policy_for(3).mode == TransportMode.BUS


class TestBookingContext:
    def test_delegates_to_policy(self):
        context = BookingContext()
        context.set_policy(PlanePolicy())
        trip = TripRequest.build(100.0, passengers=2, service_class="business",
                                 has_discount=True, has_baggage=True)
        assert context.calculate(trip) == pytest.approx(240.0)

    def test_set_policy_replaces_previous(self):
        context = BookingContext(PlanePolicy())
        context.set_policy(BusPolicy())
        assert context.calculate(TripRequest(distance_km=100.0)) == pytest.approx(20.0)

    def test_missing_policy_returns_zero_and_warns(self, caplog):
        context = BookingContext()
        with caplog.at_level(logging.WARNING, logger="src.domain.pricing"):
            assert context.calculate(TripRequest(distance_km=100.0)) == 0.0
        assert not context.has_policy
        assert "not selected" in caplog.text

    def test_has_policy(self):
        policy = TrainPolicy()
        context = BookingContext(policy)
        assert context.has_policy
        assert context.policy is policy


class TestTripRequest:
    def test_build_normalises_service_class(self):
        assert TripRequest.build(10.0, service_class="BUSINESS").service_class is ServiceClass.BUSINESS
        assert TripRequest.build(10.0, service_class=None).service_class is ServiceClass.ECONOMY

    def test_is_immutable(self):
        trip = TripRequest(distance_km=10.0)
        with pytest.raises(AttributeError):
            trip.passengers = 3  # type: ignore[misc]
