"""Delivery fee curve tests"""

import pytest

from storefront.services.fees import quote_fee
from storefront.services.rounding import round_to_currency


class TestQuoteFee:

    def test_base_plus_distance(self):
        assert quote_fee(2.0, 20.0, 4.0) == 28.00

    def test_zero_distance_is_base_fee(self):
        assert quote_fee(0.0, 20.0, 4.0) == 20.00

    @pytest.mark.parametrize("distance", [0.0, 0.5, 1.234, 3.3, 7.0, 12.75])
    def test_matches_rounded_formula(self, distance):
        assert quote_fee(distance, 15.0, 3.0) == round(15.0 + distance * 3.0, 2)

    def test_monotonic_in_distance(self):
        fees = [quote_fee(d / 10, 20.0, 4.0) for d in range(0, 200)]
        assert fees == sorted(fees)

    def test_rounds_half_up_to_currency(self):
        assert quote_fee(0.125, 0.0, 1.0) == 0.13
        assert quote_fee(1.2345, 10.0, 1.0) == 11.23

    def test_min_fee_raises_low_fee(self):
        # raw fee 20 + 2.5 * 4 = 30
        assert quote_fee(2.5, 20.0, 4.0, min_fee=50.0) == 50.00

    def test_max_fee_caps_high_fee(self):
        assert quote_fee(30.0, 20.0, 4.0, max_fee=100.0) == 100.00

    def test_fee_within_bounds_is_unchanged(self):
        assert quote_fee(2.0, 20.0, 4.0, min_fee=10.0, max_fee=100.0) == 28.00

    def test_max_below_min_returns_max(self):
        assert quote_fee(1.0, 20.0, 4.0, min_fee=50.0, max_fee=40.0) == 40.00

    @pytest.mark.parametrize("distance", [0.0, 1.0, 5.0, 25.0, 100.0])
    def test_never_outside_bounds(self, distance):
        fee = quote_fee(distance, 20.0, 4.0, min_fee=30.0, max_fee=90.0)
        assert 30.0 <= fee <= 90.0

    def test_negative_rate_is_not_rejected(self):
        assert quote_fee(2.0, 20.0, -4.0) == 12.00

    def test_huge_distance_does_not_overflow_precision(self):
        assert quote_fee(1e30, 0.0, 1.0) == 1e30

    def test_huge_fee_is_still_capped(self):
        assert quote_fee(1e30, 20.0, 4.0, max_fee=150.0) == 150.00


class TestRoundHalfUp:

    def test_large_values_keep_magnitude(self):
        assert round_to_currency(123456789012345678901234567.125) == pytest.approx(1.2345678901234568e26)

    def test_non_finite_values_pass_through(self):
        assert round_to_currency(float("inf")) == float("inf")
