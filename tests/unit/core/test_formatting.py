# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Display Formatting Unit Tests

Test Coverage:
1. Currency, percentage and ratio rendering (including missing data)
2. Compact currency thresholds and sign placement
3. Lenient parsing of user-entered currency and percentages
4. Metric rendering by format kind, honoring reporting settings
"""

import pytest

from rooflet.core.formatting import (
    format_compact_currency,
    format_compact_percent,
    format_currency,
    format_currency_for_display,
    format_metric,
    format_percentage,
    format_ratio,
    parse_currency_to_number,
    parse_percentage_to_number,
)
from rooflet.core.primitives import GlobalSettings, MetricFormatEnum, ReportingSettings


class TestCurrency:
    def test_whole_dollars(self):
        assert format_currency(1_234.56) == "$1,235"
        assert format_currency(0) == "$0"

    def test_negative_sign_before_symbol(self):
        assert format_currency(-350.4) == "-$350"

    def test_missing_renders_zero(self):
        assert format_currency(None) == "$0"
        assert format_currency(float("nan")) == "$0"

    def test_custom_symbol(self):
        settings = GlobalSettings(reporting=ReportingSettings(currency_symbol="£"))
        assert format_currency(1_000, settings) == "£1,000"


class TestCompactCurrency:
    @pytest.mark.parametrize(
        "value,expected",
        [
            (1_240_000, "$1.2M"),
            (1_000_000, "$1.0M"),
            (250_000, "$250.0K"),
            (100_000, "$100.0K"),
            (99_999, "$99,999"),
            (3_950, "$3,950"),
            (-2_500_000, "-$2.5M"),
            (-120_000, "-$120.0K"),
            (None, "$0"),
        ],
    )
    def test_thresholds(self, value, expected):
        assert format_compact_currency(value) == expected

    def test_threshold_from_settings(self):
        settings = GlobalSettings(reporting=ReportingSettings(compact_threshold=500_000))
        assert format_compact_currency(250_000, settings) == "$250,000"


class TestPercentAndRatio:
    def test_percentage(self):
        assert format_percentage(5.2667) == "5.3%"
        assert format_percentage(5.2667, decimals=2) == "5.27%"
        assert format_percentage(-30.32) == "-30.3%"
        assert format_percentage(None) == "0.0%"

    def test_compact_percent(self):
        assert format_compact_percent(61.111) == "61.1%"

    def test_ratio(self):
        assert format_ratio(1.2274) == "1.23x"
        assert format_ratio(13.636, decimals=1) == "13.6x"

    @pytest.mark.parametrize("value", [0, None])
    def test_undefined_ratio(self, value):
        assert format_ratio(value) == "N/A"

    def test_negative_ratio(self):
        assert format_ratio(-1.5) == "-1.50x"
        assert format_ratio(-0.139) == "-0.14x"


class TestDisplayAndParsing:
    def test_currency_for_display(self):
        assert format_currency_for_display(1_234.5) == "1,234.50"
        assert format_currency_for_display("2500") == "2,500.00"
        assert format_currency_for_display("1234.5abc") == "1,234.50"

    def test_currency_for_display_not_numeric(self):
        assert format_currency_for_display("abc") == ""

    @pytest.mark.parametrize(
        "text,expected",
        [("$1,234.56", 1_234.56), ("1234", 1_234.0), ("-$50", -50.0), ("abc", 0.0), ("", 0.0), (None, 0.0)],
    )
    def test_parse_currency(self, text, expected):
        assert parse_currency_to_number(text) == pytest.approx(expected)

    @pytest.mark.parametrize(
        "text,expected", [("6.125%", 6.125), ("5", 5.0), ("%", 0.0), (None, 0.0)]
    )
    def test_parse_percentage(self, text, expected):
        assert parse_percentage_to_number(text) == pytest.approx(expected)


class TestFormatMetric:
    def test_by_kind(self):
        assert format_metric(900_000, MetricFormatEnum.CURRENCY) == "$900.0K"
        assert format_metric(5.2667, MetricFormatEnum.PERCENT) == "5.3%"
        assert format_metric(2, MetricFormatEnum.COUNT) == "2"
        assert format_metric(13.636, MetricFormatEnum.RATIO) == "13.64x"

    def test_percent_decimals_from_settings(self):
        settings = GlobalSettings(reporting=ReportingSettings(percent_decimals=2))
        assert format_metric(5.2667, MetricFormatEnum.PERCENT, settings) == "5.27%"
