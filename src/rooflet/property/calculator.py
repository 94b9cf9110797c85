# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Single-property metrics calculator.

Turns one property's financing and operating inputs into its derived
fields: equity, debt service, NOI, cash flow and cash-on-cash return.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, List, Optional

from ..core.calculations import FinancialCalculations
from ..core.primitives import coerce_amount
from .record import PropertyLike, PropertyRecord, as_property_record

logger = logging.getLogger(__name__)

# Debt service always assumes a 30-year fixed-rate loan
DEBT_SERVICE_TERM_MONTHS = 360


def compute_debt_service(principal: Optional[float], annual_rate_percent: Optional[float]) -> float:
    """
    Monthly payment on a 30-year fixed-rate, fully amortizing loan.

    Args:
        principal: Outstanding loan balance (None treated as 0)
        annual_rate_percent: Annual rate as a whole percentage, 6 for 6%

    Returns:
        Monthly payment. Zero when either the principal or the rate is zero or
        missing: interest-free balances are not spread over 360 months.

    Example:
        >>> round(compute_debt_service(300_000, 6), 2)
        1798.65
    """
    principal = coerce_amount(principal)
    annual_rate_percent = coerce_amount(annual_rate_percent)

    if principal == 0 or annual_rate_percent == 0:
        return 0.0

    monthly_rate = annual_rate_percent / 100 / 12
    return FinancialCalculations.level_payment(
        principal, monthly_rate, DEBT_SERVICE_TERM_MONTHS
    )


def recompute_property(record: PropertyLike) -> PropertyRecord:
    """
    Recalculate every derived field of a property from its raw inputs.

    The input is never modified; a new record is returned with the coerced
    raw inputs, fresh derived fields, and all other fields passed through.

    Derived fields:
        equity = market_value - debt
        equity_percent = equity / market_value * 100 (0 if market_value <= 0)
        debt_service = compute_debt_service(debt, interest_rate)
        noi_monthly = rent - hoa - property_tax - insurance - other_expenses
        noi_yearly = noi_monthly * 12
        cashflow = noi_monthly - debt_service
        return_percent = cashflow * 12 / equity * 100 (0 if equity <= 0)

    Negative cash flow and negative returns are reported as they are.

    Args:
        record: PropertyRecord or an API payload mapping

    Returns:
        New PropertyRecord with consistent derived fields
    """
    record = as_property_record(record)

    equity = record.market_value - record.debt
    equity_percent = FinancialCalculations.safe_ratio(equity, record.market_value, 100)
    debt_service = compute_debt_service(record.debt, record.interest_rate)

    noi_monthly = (
        record.rent
        - record.hoa
        - record.property_tax
        - record.insurance
        - record.other_expenses
    )
    noi_yearly = noi_monthly * 12
    cashflow = noi_monthly - debt_service
    return_percent = FinancialCalculations.safe_ratio(cashflow * 12, equity, 100)

    logger.debug(
        f"{record.address}: NOI ${noi_monthly:,.2f}/mo, "
        f"debt service ${debt_service:,.2f}/mo, cash flow ${cashflow:,.2f}/mo"
    )

    derived: dict[str, Any] = {
        "equity": equity,
        "equity_percent": equity_percent,
        "debt_service": debt_service,
        "noi_monthly": noi_monthly,
        "noi_yearly": noi_yearly,
        "cashflow": cashflow,
        "return_percent": return_percent,
    }
    return record.model_copy(update=derived)


def recompute_properties(records: Iterable[PropertyLike]) -> List[PropertyRecord]:
    """Recompute each record in a collection, preserving order."""
    return [recompute_property(record) for record in records]
