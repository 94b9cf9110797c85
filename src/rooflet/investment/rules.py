# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Investment rules of thumb for screening a single property.

Quick-analysis indicators that need only price, rent and the mortgage
payment. Where operating expenses are unknown they are estimated as a
fraction of gross rent (``operating_expense_ratio``, 50% by default).
"""

from __future__ import annotations

from typing import Optional

from ..core.calculations import FinancialCalculations
from ..core.primitives import coerce_amount

DEFAULT_OPERATING_EXPENSE_RATIO = 0.5


def meets_1_percent_rule(
    monthly_rent: Optional[float], purchase_price: Optional[float], threshold: float = 0.01
) -> bool:
    """Monthly rent is at least 1% of the purchase price."""
    price = coerce_amount(purchase_price)
    if price <= 0:
        return False
    return coerce_amount(monthly_rent) >= price * threshold


def meets_2_percent_rule(
    monthly_rent: Optional[float], purchase_price: Optional[float], threshold: float = 0.02
) -> bool:
    """Monthly rent is at least 2% of the purchase price (stricter screen)."""
    return meets_1_percent_rule(monthly_rent, purchase_price, threshold)


def meets_50_percent_rule(
    monthly_rent: Optional[float],
    monthly_mortgage_payment: Optional[float],
    expense_ratio: float = 0.5,
) -> bool:
    """NOI left after estimating expenses at half of rent covers the mortgage."""
    rent = coerce_amount(monthly_rent)
    net_operating_income = rent - rent * expense_ratio
    return net_operating_income > coerce_amount(monthly_mortgage_payment)


def calculate_price_to_rent_ratio(
    purchase_price: Optional[float], monthly_rent: Optional[float]
) -> float:
    """
    Purchase price over annual rent.

    Below 15 generally favours buying, 15-20 is neutral, above 20 favours
    renting. Zero when there is no rent.
    """
    return FinancialCalculations.safe_ratio(
        coerce_amount(purchase_price), coerce_amount(monthly_rent) * 12
    )


def calculate_cap_rate(
    purchase_price: Optional[float],
    monthly_rent: Optional[float],
    operating_expense_ratio: float = DEFAULT_OPERATING_EXPENSE_RATIO,
) -> float:
    """Estimated annual NOI over purchase price, as a percentage."""
    annual_rent = coerce_amount(monthly_rent) * 12
    noi = annual_rent - annual_rent * operating_expense_ratio
    return FinancialCalculations.safe_ratio(noi, coerce_amount(purchase_price), 100)


def calculate_dscr(
    monthly_rent: Optional[float],
    monthly_mortgage_payment: Optional[float],
    operating_expense_ratio: float = DEFAULT_OPERATING_EXPENSE_RATIO,
) -> float:
    """
    Debt service coverage from estimated NOI.

    Monthly and annual coverage are the same ratio. Zero when there is no
    mortgage payment.
    """
    rent = coerce_amount(monthly_rent)
    noi = rent - rent * operating_expense_ratio
    return FinancialCalculations.safe_ratio(noi, coerce_amount(monthly_mortgage_payment))


def calculate_break_even_ratio(
    monthly_rent: Optional[float],
    monthly_mortgage_payment: Optional[float],
    operating_expense_ratio: float = DEFAULT_OPERATING_EXPENSE_RATIO,
) -> float:
    """
    Operating expenses plus debt service over gross rent, as a percentage.

    Above 100 the property does not cover its costs. Zero when there is no
    rent.
    """
    rent = coerce_amount(monthly_rent)
    outflows = rent * operating_expense_ratio + coerce_amount(monthly_mortgage_payment)
    return FinancialCalculations.safe_ratio(outflows, rent, 100)


def calculate_operating_expense_ratio(
    monthly_rent: Optional[float],
    operating_expense_ratio: float = DEFAULT_OPERATING_EXPENSE_RATIO,
) -> float:
    """Estimated operating expenses over gross rent, as a percentage."""
    rent = coerce_amount(monthly_rent)
    return FinancialCalculations.safe_ratio(rent * operating_expense_ratio, rent, 100)
