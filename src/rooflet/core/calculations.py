# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Financial calculation functions.

Contains static methods for the arithmetic every other module leans on.
These functions are pure (math-only); property and portfolio modules
delegate to them so that zero-guards and the payment formula live in one
place.
"""

from __future__ import annotations

import math

from pyxirr import pmt


class FinancialCalculations:
    """
    Pure mathematical functions for financial calculations.

    Static methods for guarded ratios and level loan payments, independent of
    record shape or business rules.
    """

    @staticmethod
    def safe_ratio(numerator: float, denominator: float, scale: float = 1.0) -> float:
        """
        Divide with a zero-guard.

        Args:
            numerator: Value on top
            denominator: Value below; the ratio is undefined unless positive
            scale: Multiplier applied to the ratio (100 for percentages)

        Returns:
            numerator / denominator * scale, or 0.0 when the denominator is
            not positive or the result is not finite

        Example:
            ```python
            FinancialCalculations.safe_ratio(47_400, 900_000, 100)  # 5.27
            FinancialCalculations.safe_ratio(47_400, 0, 100)        # 0.0
            ```
        """
        if not denominator > 0:
            return 0.0
        result = numerator / denominator * scale
        if not math.isfinite(result):
            return 0.0
        return result

    @staticmethod
    def level_payment(principal: float, monthly_rate: float, periods: int) -> float:
        """
        Level payment that fully amortizes ``principal`` over ``periods``.

        Standard annuity formula P = L·c·(1+c)^n / ((1+c)^n − 1), evaluated by
        PyXIRR. PyXIRR follows spreadsheet sign conventions (a loan received
        produces a negative payment), so the sign is flipped here.

        Callers own the zero-rate and zero-principal policy; this function
        expects a non-zero rate and at least one period.
        """
        return pmt(monthly_rate, periods, principal) * -1
