"""
Tests for the tiered point formula and monthly aggregation.
"""

from datetime import date
from decimal import Decimal

import pytest

from rewards.engine import (
    PurchaseRecord,
    RewardResult,
    calculate_monthly_points,
    month_key,
    points_for_amount,
    summarize_rewards,
)


class TestPointsForAmount:
    """Per-purchase points across the three bands."""

    @pytest.mark.parametrize("amount", [0, 1, 25, Decimal("49.99"), 50])
    def test_no_points_up_to_fifty(self, amount):
        assert points_for_amount(amount) == 0

    @pytest.mark.parametrize("amount, expected", [(51, 1), (80, 30), (99, 49), (100, 50)])
    def test_one_point_per_unit_between_fifty_and_hundred(self, amount, expected):
        assert points_for_amount(amount) == expected
        assert expected == amount - 50

    @pytest.mark.parametrize("amount, expected", [(101, 52), (120, 90), (150, 150), (1000, 1850)])
    def test_two_points_per_unit_above_hundred(self, amount, expected):
        assert points_for_amount(amount) == expected
        assert expected == 2 * (amount - 100) + 50

    def test_worked_examples(self):
        assert points_for_amount(Decimal("120.00")) == 90
        assert points_for_amount(Decimal("80.00")) == 30
        assert points_for_amount(Decimal("150.00")) == 150

    def test_fractional_amount_is_floored_per_purchase(self):
        # 2 * 20.75 + 50 = 91.5
        assert points_for_amount(Decimal("120.75")) == 91
        # 75.99 - 50 = 25.99
        assert points_for_amount(Decimal("75.99")) == 25

    def test_accepts_int_float_and_string_amounts(self):
        assert points_for_amount(120) == 90
        assert points_for_amount(120.5) == 91
        assert points_for_amount("80") == 30

    @pytest.mark.parametrize("amount", [None, Decimal("-10"), -200, "not-a-number", Decimal("NaN"), float("inf")])
    def test_malformed_amounts_score_zero(self, amount):
        assert points_for_amount(amount) == 0


class TestMonthlyAggregation:
    def test_month_key_format(self):
        assert month_key(date(2024, 1, 15)) == "2024-01"
        assert month_key(date(999, 12, 1)) == "0999-12"

    def test_scenario_two_months(self):
        records = [
            PurchaseRecord(Decimal("120.0"), date(2024, 1, 15)),
            PurchaseRecord(Decimal("80.0"), date(2024, 2, 10)),
        ]
        assert calculate_monthly_points(records) == {"2024-01": 90, "2024-02": 30}

    def test_points_are_summed_within_a_month(self):
        records = [
            PurchaseRecord(Decimal("120.75"), date(2024, 3, 1)),
            PurchaseRecord(Decimal("120.75"), date(2024, 3, 31)),
        ]
        # floor per purchase (91 + 91), not floor of the sum (183)
        assert calculate_monthly_points(records) == {"2024-03": 182}

    def test_months_without_points_still_listed_when_they_have_purchases(self):
        records = [PurchaseRecord(Decimal("20"), date(2024, 5, 5))]
        assert calculate_monthly_points(records) == {"2024-05": 0}

    def test_months_without_purchases_are_omitted(self):
        records = [
            PurchaseRecord(Decimal("60"), date(2024, 1, 5)),
            PurchaseRecord(Decimal("60"), date(2024, 4, 5)),
        ]
        assert set(calculate_monthly_points(records)) == {"2024-01", "2024-04"}

    def test_same_month_in_different_years_kept_apart(self):
        records = [
            PurchaseRecord(Decimal("60"), date(2023, 1, 5)),
            PurchaseRecord(Decimal("70"), date(2024, 1, 5)),
        ]
        assert calculate_monthly_points(records) == {"2023-01": 10, "2024-01": 20}

    def test_input_order_does_not_matter(self):
        records = [
            PurchaseRecord(Decimal("80"), date(2024, 2, 10)),
            PurchaseRecord(Decimal("120"), date(2024, 1, 15)),
        ]
        result = calculate_monthly_points(records)
        assert list(result) == ["2024-01", "2024-02"]
        assert result == calculate_monthly_points(list(reversed(records)))

    def test_record_without_date_is_skipped(self):
        records = [
            PurchaseRecord(Decimal("120"), None),
            PurchaseRecord(Decimal("80"), date(2024, 2, 10)),
        ]
        assert calculate_monthly_points(records) == {"2024-02": 30}


class TestSummarizeRewards:
    def test_total_equals_sum_of_months(self):
        records = [
            PurchaseRecord(Decimal("120"), date(2024, 1, 15)),
            PurchaseRecord(Decimal("80"), date(2024, 2, 10)),
            PurchaseRecord(Decimal("150"), date(2024, 2, 20)),
        ]
        result = summarize_rewards(7, records)
        assert result.customer_id == 7
        assert result.monthly_points == {"2024-01": 90, "2024-02": 180}
        assert result.total_points == sum(result.monthly_points.values()) == 270

    def test_no_records_gives_empty_result(self):
        result = summarize_rewards(3, [])
        assert result == RewardResult.empty(3)
        assert result.monthly_points == {}
        assert result.total_points == 0

    def test_empty_results_do_not_share_state(self):
        first = RewardResult.empty(1)
        first.monthly_points["2024-01"] = 5
        assert RewardResult.empty(1).monthly_points == {}
