# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Display formatting and parsing for currency, percentage and ratio values.

Formatting never fails on missing data: None and NaN render as zero.
Parsing mirrors lenient form input handling, so "$1,234.56" and "6.125%"
parse to numbers and anything unparseable becomes 0.
"""

from __future__ import annotations

import re
from typing import Any, Optional

from .primitives import (
    GlobalSettings,
    MetricFormatEnum,
    ReportingSettings,
    coerce_amount,
)

_LEADING_NUMBER = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def _reporting(settings: Optional[GlobalSettings]) -> ReportingSettings:
    return (settings or GlobalSettings()).reporting


def _signed(value: float, body: str, symbol: str) -> str:
    sign = "-" if value < 0 else ""
    return f"{sign}{symbol}{body}"


def format_currency(value: Any, settings: Optional[GlobalSettings] = None) -> str:
    """Whole-dollar currency, e.g. ``$1,235`` or ``-$350``."""
    amount = coerce_amount(value)
    return _signed(amount, f"{abs(amount):,.0f}", _reporting(settings).currency_symbol)


def format_percentage(value: Any, decimals: int = 1) -> str:
    """Percentage already scaled to 0-100, e.g. ``6.2%``."""
    return f"{coerce_amount(value):.{decimals}f}%"


def format_compact_currency(value: Any, settings: Optional[GlobalSettings] = None) -> str:
    """
    Short currency for dense tables.

    ``$1.2M`` from one million, ``$250.0K`` from the compact threshold
    (100,000 by default), whole dollars below that.
    """
    reporting = _reporting(settings)
    amount = coerce_amount(value)
    magnitude = abs(amount)

    if magnitude >= 1_000_000:
        body = f"{magnitude / 1_000_000:.1f}M"
    elif magnitude >= reporting.compact_threshold:
        body = f"{magnitude / 1_000:.1f}K"
    else:
        body = f"{magnitude:,.0f}"
    return _signed(amount, body, reporting.currency_symbol)


def format_compact_percent(value: Any) -> str:
    return format_percentage(value, decimals=1)


def format_ratio(value: Any, decimals: int = 2) -> str:
    """
    Coverage-style multiple, e.g. ``1.23x`` or ``-0.63x``.

    ``N/A`` only for exactly zero, which the ratio guards return when the
    ratio is undefined. Negative coverage is shown as a number.
    """
    ratio = coerce_amount(value)
    if ratio == 0:
        return "N/A"
    return f"{ratio:.{decimals}f}x"


def format_currency_for_display(value: Any) -> str:
    """Two-decimal amount with thousands separators; ``""`` if not numeric."""
    if isinstance(value, str):
        match = _LEADING_NUMBER.match(value)
        if match is None:
            return ""
        value = match.group(0)
    return f"{coerce_amount(value):,.2f}"


def _parse_number(text: Optional[str], strip: str) -> float:
    if text is None:
        return 0.0
    cleaned = re.sub(f"[{re.escape(strip)}]", "", str(text))
    match = _LEADING_NUMBER.match(cleaned)
    if match is None:
        return 0.0
    return float(match.group(0))


def parse_currency_to_number(text: Optional[str]) -> float:
    """``"$1,234.56"`` -> 1234.56; invalid input -> 0."""
    return _parse_number(text, "$,")


def parse_percentage_to_number(text: Optional[str]) -> float:
    """``"6.125%"`` -> 6.125; invalid input -> 0."""
    return _parse_number(text, "%")


def format_metric(
    value: Any, kind: MetricFormatEnum, settings: Optional[GlobalSettings] = None
) -> str:
    """Render a metric the way summary tables show it."""
    if kind == MetricFormatEnum.CURRENCY:
        return format_compact_currency(value, settings)
    if kind == MetricFormatEnum.PERCENT:
        return format_percentage(value, _reporting(settings).percent_decimals)
    if kind == MetricFormatEnum.COUNT:
        return f"{coerce_amount(value):.0f}"
    return format_ratio(value)
