# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Mortgage payment calculations with a caller-chosen loan term.

``calculate_monthly_mortgage_payment`` uses the same amortization formula as
``rooflet.property.compute_debt_service`` but takes the term in years and
spreads an interest-free loan evenly over the term. The property calculator
keeps its fixed 30-year, zero-at-0% policy.
"""

from __future__ import annotations

from typing import Optional, Tuple

import numpy as np
import pandas as pd

from ..core.calculations import FinancialCalculations
from ..core.primitives import Model, coerce_amount


class PaymentBreakdown(Model):
    """Principal and interest split of the first monthly payment."""

    principal: float
    interest: float
    total_payment: float


def calculate_monthly_mortgage_payment(
    loan_amount: Optional[float],
    annual_interest_rate: Optional[float],
    loan_term_years: Optional[float],
) -> float:
    """
    Monthly payment on a fixed-rate, fully amortizing loan.

    Args:
        loan_amount: Amount borrowed
        annual_interest_rate: Annual rate as a whole percentage (6 for 6%)
        loan_term_years: Term in years

    Returns:
        Level monthly payment; 0 for a non-positive loan or term, and
        loan_amount / months for a zero or negative rate
    """
    loan_amount = coerce_amount(loan_amount)
    annual_interest_rate = coerce_amount(annual_interest_rate)
    periods = int(round(coerce_amount(loan_term_years) * 12))

    if loan_amount <= 0 or periods <= 0:
        return 0.0
    if annual_interest_rate <= 0:
        return loan_amount / periods

    monthly_rate = annual_interest_rate / 100 / 12
    return FinancialCalculations.level_payment(loan_amount, monthly_rate, periods)


def calculate_principal_and_interest(
    loan_amount: Optional[float],
    annual_interest_rate: Optional[float],
    loan_term_years: Optional[float],
) -> PaymentBreakdown:
    """Split the first month's payment into principal and interest."""
    total_payment = calculate_monthly_mortgage_payment(
        loan_amount, annual_interest_rate, loan_term_years
    )
    interest = coerce_amount(loan_amount) * coerce_amount(annual_interest_rate) / 100 / 12
    return PaymentBreakdown(
        principal=total_payment - interest,
        interest=interest,
        total_payment=total_payment,
    )


def calculate_cash_on_cash_return(
    annual_net_income: Optional[float], down_payment: Optional[float]
) -> float:
    """
    Annual pre-tax cash flow over cash invested, as a percentage.

    Cash invested is the down payment alone; closing costs are not added.
    """
    return FinancialCalculations.safe_ratio(
        coerce_amount(annual_net_income), coerce_amount(down_payment), 100
    )


def amortization_schedule(
    loan_amount: float,
    annual_interest_rate: float,
    loan_term_years: int,
) -> Tuple[pd.DataFrame, pd.Series]:
    """
    Month-by-month amortization schedule for a fixed-rate loan.

    Args:
        loan_amount: Amount borrowed
        annual_interest_rate: Annual rate as a whole percentage
        loan_term_years: Term in years

    Returns:
        Tuple containing:
        - DataFrame indexed by payment number (1..n) with columns:
            Begin Balance, Payment, Interest, Principal, End Balance
        - Series with summary statistics:
            Total Payments, Total Principal Paid, Total Interest Paid,
            Monthly Payment, Number of Payments
    """
    loan_amount = coerce_amount(loan_amount)
    periods = max(int(round(coerce_amount(loan_term_years) * 12)), 0)
    monthly_rate = max(coerce_amount(annual_interest_rate), 0.0) / 100 / 12
    payment = calculate_monthly_mortgage_payment(
        loan_amount, annual_interest_rate, loan_term_years
    )

    balances = np.zeros(periods + 1)  # Extra element for initial balance
    interest_paid = np.zeros(periods)
    principal_paid = np.zeros(periods)
    balances[0] = max(loan_amount, 0.0)

    for i in range(periods):
        interest_paid[i] = balances[i] * monthly_rate
        principal_paid[i] = min(payment - interest_paid[i], balances[i])
        balances[i + 1] = balances[i] - principal_paid[i]

    # Absorb rounding drift in the final period
    if periods > 0:
        principal_paid[-1] += balances[-1]
        balances[-1] = 0.0

    payments = interest_paid + principal_paid
    df = pd.DataFrame(
        {
            "Begin Balance": balances[:-1],
            "Payment": payments,
            "Interest": interest_paid,
            "Principal": principal_paid,
            "End Balance": balances[1:],
        },
        index=pd.RangeIndex(1, periods + 1, name="Period"),
    )

    summary = pd.Series(
        {
            "Total Payments": float(payments.sum()),
            "Total Principal Paid": float(principal_paid.sum()),
            "Total Interest Paid": float(interest_paid.sum()),
            "Monthly Payment": payment,
            "Number of Payments": periods,
        }
    )
    return df, summary
