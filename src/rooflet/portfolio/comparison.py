# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Baseline comparison of portfolio totals and metrics.

A metric counts as changed only when its displayed value changes, so
floating-point noise below display precision is not reported.
"""

from __future__ import annotations

from typing import Dict, Literal, Mapping, Optional

from ..core.formatting import format_metric
from ..core.primitives import GlobalSettings, MetricFormatEnum, Model
from .metrics import PortfolioMetrics
from .totals import PortfolioTotals

_CURRENCY = MetricFormatEnum.CURRENCY
_PERCENT = MetricFormatEnum.PERCENT
_COUNT = MetricFormatEnum.COUNT
_RATIO = MetricFormatEnum.RATIO

METRIC_FORMATS: Dict[str, MetricFormatEnum] = {
    "total_rent_annual": _CURRENCY,
    "total_rent_monthly": _CURRENCY,
    "active_units": _COUNT,
    "rent_per_unit_per_month": _CURRENCY,
    "coc_return": _PERCENT,
    "levered_cash_yield": _PERCENT,
    "unlevered_cash_yield": _PERCENT,
    "leverage": _PERCENT,
    "dscr": _RATIO,
    "cap_rate": _PERCENT,
    "grm": _RATIO,
    "opex_ratio": _PERCENT,
    "property_count": _COUNT,
    "avg_property_value": _CURRENCY,
    "avg_rent_per_property": _CURRENCY,
}

TOTALS_FORMATS: Dict[str, MetricFormatEnum] = {
    name: _CURRENCY for name in PortfolioTotals.model_fields
}


class MetricChange(Model):
    """Difference between a current and a baseline value of one metric."""

    name: str
    current: float
    baseline: float
    delta: float
    direction: Literal["up", "down"]
    display_current: str
    display_baseline: str


def _compare(
    current: Model,
    baseline: Model,
    formats: Mapping[str, MetricFormatEnum],
    settings: Optional[GlobalSettings],
) -> Dict[str, MetricChange]:
    changes: Dict[str, MetricChange] = {}
    for name, kind in formats.items():
        now = float(getattr(current, name))
        before = float(getattr(baseline, name))
        display_now = format_metric(now, kind, settings)
        display_before = format_metric(before, kind, settings)
        if display_now == display_before:
            continue
        changes[name] = MetricChange(
            name=name,
            current=now,
            baseline=before,
            delta=now - before,
            direction="up" if now > before else "down",
            display_current=display_now,
            display_baseline=display_before,
        )
    return changes


def compare_metrics(
    current: PortfolioMetrics,
    baseline: PortfolioMetrics,
    settings: Optional[GlobalSettings] = None,
) -> Dict[str, MetricChange]:
    """
    Report portfolio metrics whose displayed value differs from the baseline.

    Returns:
        Mapping of metric name to MetricChange, in PortfolioMetrics field order
    """
    return _compare(current, baseline, METRIC_FORMATS, settings)


def compare_totals(
    current: PortfolioTotals,
    baseline: PortfolioTotals,
    settings: Optional[GlobalSettings] = None,
) -> Dict[str, MetricChange]:
    """Report portfolio totals whose displayed value differs from the baseline."""
    return _compare(current, baseline, TOTALS_FORMATS, settings)
