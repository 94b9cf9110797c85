# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Listing analysis - financing a purchase and screening it against the rules.

Combines the mortgage payment, estimated carrying costs and every rule of
thumb into one result per listing.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, List, Literal, Mapping, Optional

from pydantic import Field

from ..core.primitives import GlobalSettings, Model, PositiveFloat, coerce_amount
from .estimates import estimate_monthly_insurance, estimate_monthly_property_tax
from .mortgage import calculate_cash_on_cash_return, calculate_monthly_mortgage_payment
from .rules import (
    calculate_break_even_ratio,
    calculate_cap_rate,
    calculate_dscr,
    calculate_operating_expense_ratio,
    calculate_price_to_rent_ratio,
    meets_1_percent_rule,
    meets_2_percent_rule,
    meets_50_percent_rule,
)

logger = logging.getLogger(__name__)


class FinancingStrategy(Model):
    """
    Purchase financing assumptions.

    Attributes:
        down_payment_percent: Share of price paid in cash, percent (20 for 20%)
        interest_rate: Annual rate, percent
        loan_term_years: Amortization term in years
    """

    down_payment_percent: PositiveFloat = Field(default=20.0, le=100)
    interest_rate: PositiveFloat = 6.0
    loan_term_years: int = Field(default=30, gt=0)


class InvestmentMetrics(Model):
    """Cash flow picture of a financed purchase (PITI plus HOA)."""

    purchase_price: float
    expected_rent: float
    monthly_mortgage_payment: float
    down_payment: float
    loan_amount: float
    monthly_hoa: float = 0.0
    monthly_property_tax: float = 0.0
    monthly_insurance: float = 0.0
    total_monthly_expenses: float
    monthly_net_income: float
    annual_net_income: float
    cash_on_cash_return: float
    meets_1_percent_rule: bool


class ListingAnalysis(Model):
    """Financing metrics and rule-of-thumb indicators for one listing."""

    metrics: InvestmentMetrics
    meets_2_percent_rule: bool
    meets_50_percent_rule: bool
    price_to_rent_ratio: float
    cap_rate: float
    dscr: float
    dscr_rating: Literal["healthy", "marginal", "insufficient", "n/a"]
    break_even_ratio: float
    operating_expense_ratio: float


def calculate_investment_metrics(
    purchase_price: Optional[float],
    expected_rent: Optional[float],
    financing: FinancingStrategy,
    monthly_hoa: Optional[float] = 0.0,
    monthly_property_tax: Optional[float] = 0.0,
    monthly_insurance: Optional[float] = 0.0,
    settings: Optional[GlobalSettings] = None,
) -> InvestmentMetrics:
    """
    Compute the cash flow of buying a property with the given financing.

    Net income is rent less mortgage, HOA, tax and insurance; cash-on-cash
    return divides its annual amount by the down payment.
    """
    price = coerce_amount(purchase_price)
    rent = coerce_amount(expected_rent)
    hoa = coerce_amount(monthly_hoa)
    tax = coerce_amount(monthly_property_tax)
    insurance = coerce_amount(monthly_insurance)

    down_payment = price * financing.down_payment_percent / 100
    loan_amount = price - down_payment
    mortgage = calculate_monthly_mortgage_payment(
        loan_amount, financing.interest_rate, financing.loan_term_years
    )

    total_monthly_expenses = mortgage + hoa + tax + insurance
    monthly_net_income = rent - total_monthly_expenses
    annual_net_income = monthly_net_income * 12

    return InvestmentMetrics(
        purchase_price=price,
        expected_rent=rent,
        monthly_mortgage_payment=mortgage,
        down_payment=down_payment,
        loan_amount=loan_amount,
        monthly_hoa=hoa,
        monthly_property_tax=tax,
        monthly_insurance=insurance,
        total_monthly_expenses=total_monthly_expenses,
        monthly_net_income=monthly_net_income,
        annual_net_income=annual_net_income,
        cash_on_cash_return=calculate_cash_on_cash_return(annual_net_income, down_payment),
        meets_1_percent_rule=meets_1_percent_rule(
            rent, price, (settings or GlobalSettings()).rules.one_percent_threshold
        ),
    )


def rate_dscr(dscr: float, settings: Optional[GlobalSettings] = None) -> str:
    """Classify coverage against the configured DSCR bands."""
    rules = (settings or GlobalSettings()).rules
    if dscr <= 0:
        return "n/a"
    if dscr >= rules.dscr_healthy:
        return "healthy"
    if dscr >= rules.dscr_minimum:
        return "marginal"
    return "insufficient"


def analyze_listing(
    purchase_price: Optional[float],
    expected_rent: Optional[float],
    financing: Optional[FinancingStrategy] = None,
    monthly_hoa: Optional[float] = 0.0,
    state: Optional[str] = None,
    settings: Optional[GlobalSettings] = None,
) -> ListingAnalysis:
    """
    Screen a for-sale listing as a rental investment.

    Property tax is estimated from the listing's state and insurance from its
    price; rule thresholds and the operating expense estimate come from
    ``settings.rules``.
    """
    settings = settings or GlobalSettings()
    financing = financing or FinancingStrategy()
    rules = settings.rules
    price = coerce_amount(purchase_price)
    rent = coerce_amount(expected_rent)

    metrics = calculate_investment_metrics(
        price,
        rent,
        financing,
        monthly_hoa=monthly_hoa,
        monthly_property_tax=estimate_monthly_property_tax(price, state, settings),
        monthly_insurance=estimate_monthly_insurance(price, settings),
        settings=settings,
    )
    mortgage = metrics.monthly_mortgage_payment
    oer = rules.default_operating_expense_ratio
    dscr = calculate_dscr(rent, mortgage, oer)

    return ListingAnalysis(
        metrics=metrics,
        meets_2_percent_rule=meets_2_percent_rule(rent, price, rules.two_percent_threshold),
        meets_50_percent_rule=meets_50_percent_rule(
            rent, mortgage, rules.fifty_percent_expense_ratio
        ),
        price_to_rent_ratio=calculate_price_to_rent_ratio(price, rent),
        cap_rate=calculate_cap_rate(price, rent, oer),
        dscr=dscr,
        dscr_rating=rate_dscr(dscr, settings),
        break_even_ratio=calculate_break_even_ratio(rent, mortgage, oer),
        operating_expense_ratio=calculate_operating_expense_ratio(rent, oer),
    )


def analyze_listings(
    listings: Iterable[Mapping[str, Any]],
    financing: Optional[FinancingStrategy] = None,
    settings: Optional[GlobalSettings] = None,
) -> List[Optional[ListingAnalysis]]:
    """
    Analyze a batch of listing payloads.

    Each mapping provides ``price`` and ``expected_rent`` plus optional
    ``hoa_fee`` and ``state``. The result is aligned with the input; a
    listing without an expected rent or a positive price, or whose values
    cannot be read as numbers, yields None and the rest of the batch still
    runs.
    """
    results: List[Optional[ListingAnalysis]] = []
    for position, listing in enumerate(listings):
        label = listing.get("id", position)
        if listing.get("expected_rent") is None:
            logger.debug(f"Listing {label}: no expected rent, skipping analysis")
            results.append(None)
            continue
        try:
            price = coerce_amount(listing.get("price"))
            if price <= 0:
                logger.debug(f"Listing {label}: no price, skipping analysis")
                analysis = None
            else:
                analysis = analyze_listing(
                    price,
                    listing.get("expected_rent"),
                    financing,
                    monthly_hoa=listing.get("hoa_fee"),
                    state=listing.get("state"),
                    settings=settings,
                )
        except (ValueError, TypeError) as e:
            logger.warning(f"Could not analyze listing {label}: {e}")
            analysis = None
        results.append(analysis)
    return results
