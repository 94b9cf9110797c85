# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Portfolio totals - straight sums over already-computed property records.
"""

from __future__ import annotations

from typing import Iterable

from ..core.primitives import Model
from ..property import PropertyLike, as_property_record


class PortfolioTotals(Model):
    """
    Summed financials for a set of properties.

    Always rebuilt from the full record set; never updated incrementally.
    Monthly figures unless the name says otherwise.
    """

    noi_monthly: float = 0.0
    noi_yearly: float = 0.0
    debt_service: float = 0.0
    cashflow_monthly: float = 0.0
    cashflow_yearly: float = 0.0
    total_assets: float = 0.0
    total_debt: float = 0.0
    total_equity: float = 0.0
    total_expenses_monthly: float = 0.0


def aggregate_totals(records: Iterable[PropertyLike]) -> PortfolioTotals:
    """
    Sum portfolio totals across property records.

    Derived fields are taken as the records carry them; run
    ``recompute_property`` first if the inputs may have changed. Missing
    values count as zero and an empty portfolio yields all-zero totals.

    Args:
        records: PropertyRecord instances or API payload mappings

    Returns:
        PortfolioTotals for the whole set
    """
    properties = [as_property_record(record) for record in records]

    return PortfolioTotals(
        noi_monthly=sum(p.noi_monthly for p in properties),
        noi_yearly=sum(p.noi_yearly for p in properties),
        debt_service=sum(p.debt_service for p in properties),
        cashflow_monthly=sum(p.cashflow for p in properties),
        cashflow_yearly=sum(p.cashflow * 12 for p in properties),
        total_assets=sum(p.market_value for p in properties),
        total_debt=sum(p.debt for p in properties),
        total_equity=sum(p.equity for p in properties),
        total_expenses_monthly=sum(p.total_expenses_monthly for p in properties),
    )
