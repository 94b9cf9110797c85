# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Rooflet Investment Helpers

Per-property screening tools independent of the portfolio aggregator:
1. Rules of thumb - 1%/2%/50% rules, cap rate, DSCR, break-even, OER, price-to-rent
2. Mortgage math - term-parameterized payment, P&I split, amortization schedule
3. Estimates - state property tax table and tiered insurance
4. Listing analysis - financing plus every indicator in one result
"""

from .analysis import (
    FinancingStrategy,
    InvestmentMetrics,
    ListingAnalysis,
    analyze_listing,
    analyze_listings,
    calculate_investment_metrics,
    rate_dscr,
)
from .estimates import (
    STATE_PROPERTY_TAX_RATES,
    estimate_monthly_insurance,
    estimate_monthly_property_tax,
    property_tax_rate,
)
from .mortgage import (
    PaymentBreakdown,
    amortization_schedule,
    calculate_cash_on_cash_return,
    calculate_monthly_mortgage_payment,
    calculate_principal_and_interest,
)
from .rules import (
    DEFAULT_OPERATING_EXPENSE_RATIO,
    calculate_break_even_ratio,
    calculate_cap_rate,
    calculate_dscr,
    calculate_operating_expense_ratio,
    calculate_price_to_rent_ratio,
    meets_1_percent_rule,
    meets_2_percent_rule,
    meets_50_percent_rule,
)

__all__ = [
    # Rules of thumb
    "meets_1_percent_rule",
    "meets_2_percent_rule",
    "meets_50_percent_rule",
    "calculate_cap_rate",
    "calculate_dscr",
    "calculate_break_even_ratio",
    "calculate_operating_expense_ratio",
    "calculate_price_to_rent_ratio",
    "DEFAULT_OPERATING_EXPENSE_RATIO",
    # Mortgage math
    "calculate_monthly_mortgage_payment",
    "calculate_principal_and_interest",
    "calculate_cash_on_cash_return",
    "amortization_schedule",
    "PaymentBreakdown",
    # Estimates
    "STATE_PROPERTY_TAX_RATES",
    "property_tax_rate",
    "estimate_monthly_property_tax",
    "estimate_monthly_insurance",
    # Listing analysis
    "FinancingStrategy",
    "InvestmentMetrics",
    "ListingAnalysis",
    "calculate_investment_metrics",
    "analyze_listing",
    "analyze_listings",
    "rate_dscr",
]
