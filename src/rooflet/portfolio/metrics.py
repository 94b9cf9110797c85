# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Portfolio Metrics - Ratios Derived From Portfolio Totals

Every ratio is zero-guarded: an undefined ratio (no equity, no assets, no
debt service, no rent, no properties) is reported as 0, never as NaN or
infinity.
"""

from __future__ import annotations

from typing import Iterable

from ..core.calculations import FinancialCalculations
from ..core.primitives import Model
from ..property import PropertyLike, as_property_record
from .totals import PortfolioTotals, aggregate_totals


class PortfolioMetrics(Model):
    """
    Portfolio-level performance ratios.

    Percentages are whole-number scaled (5.27 means 5.27%). ``dscr`` and
    ``grm`` are plain multiples.

    ``levered_cash_yield`` always equals ``coc_return`` and ``cap_rate``
    always equals ``unlevered_cash_yield``. The pairs are separate fields
    because callers display them separately; keep them in step.
    """

    # Rental income
    total_rent_annual: float = 0.0
    total_rent_monthly: float = 0.0
    active_units: int = 0
    rent_per_unit_per_month: float = 0.0

    # Returns
    coc_return: float = 0.0
    levered_cash_yield: float = 0.0
    unlevered_cash_yield: float = 0.0

    # Leverage and coverage
    leverage: float = 0.0
    dscr: float = 0.0

    # Valuation
    cap_rate: float = 0.0
    grm: float = 0.0

    # Efficiency
    opex_ratio: float = 0.0

    # Portfolio size
    property_count: int = 0
    avg_property_value: float = 0.0
    avg_rent_per_property: float = 0.0


class PortfolioSummary(Model):
    """Totals and metrics computed from the same record set."""

    totals: PortfolioTotals
    metrics: PortfolioMetrics


def derive_metrics(
    records: Iterable[PropertyLike], totals: PortfolioTotals
) -> PortfolioMetrics:
    """
    Calculate portfolio ratios from totals and the record set.

    Args:
        records: The same records ``totals`` was aggregated from
        totals: Output of ``aggregate_totals``

    Returns:
        PortfolioMetrics; all-zero for an empty portfolio
    """
    ratio = FinancialCalculations.safe_ratio
    properties = [as_property_record(record) for record in records]

    # Rental income
    total_rent_monthly = sum(p.rent for p in properties)
    total_rent_annual = sum(p.rent * 12 for p in properties)
    active_units = sum(1 for p in properties if p.rent > 0)
    rent_per_unit_per_month = ratio(total_rent_monthly, active_units)

    # Returns
    coc_return = ratio(totals.cashflow_yearly, totals.total_equity, 100)
    levered_cash_yield = coc_return
    unlevered_cash_yield = ratio(totals.noi_yearly, totals.total_assets, 100)

    # Leverage and coverage
    leverage = ratio(totals.total_debt, totals.total_assets, 100)
    dscr = ratio(totals.noi_yearly, totals.debt_service * 12)

    # Valuation (same formula as unlevered cash yield)
    cap_rate = ratio(totals.noi_yearly, totals.total_assets, 100)
    grm = ratio(totals.total_assets, total_rent_annual)

    # Efficiency
    opex_ratio = ratio(totals.total_expenses_monthly * 12, total_rent_annual, 100)

    # Portfolio size
    property_count = len(properties)
    avg_property_value = ratio(totals.total_assets, property_count)
    avg_rent_per_property = ratio(total_rent_monthly, property_count)

    return PortfolioMetrics(
        total_rent_annual=total_rent_annual,
        total_rent_monthly=total_rent_monthly,
        active_units=active_units,
        rent_per_unit_per_month=rent_per_unit_per_month,
        coc_return=coc_return,
        levered_cash_yield=levered_cash_yield,
        unlevered_cash_yield=unlevered_cash_yield,
        leverage=leverage,
        dscr=dscr,
        cap_rate=cap_rate,
        grm=grm,
        opex_ratio=opex_ratio,
        property_count=property_count,
        avg_property_value=avg_property_value,
        avg_rent_per_property=avg_rent_per_property,
    )


def analyze_portfolio(records: Iterable[PropertyLike]) -> PortfolioSummary:
    """Aggregate totals and derive metrics for one record set."""
    properties = [as_property_record(record) for record in records]
    totals = aggregate_totals(properties)
    return PortfolioSummary(totals=totals, metrics=derive_metrics(properties, totals))
