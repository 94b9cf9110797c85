# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import List, Optional

from pydantic import Field, model_validator

from .model import Model
from .types import FloatBetween0And1, PositiveFloat, PositiveInt


class ReportingSettings(Model):
    """Settings related to display formatting."""

    currency_symbol: str = Field(default="$", description="Prefix for currency values.")
    decimal_precision: PositiveInt = Field(
        default=2, description="Number of decimal places for detailed currency values."
    )
    percent_decimals: PositiveInt = Field(
        default=1, description="Number of decimal places for percentages."
    )
    compact_threshold: PositiveFloat = Field(
        default=100_000,
        description="Absolute value at which compact currency switches to K notation.",
    )


class RuleSettings(Model):
    """
    Thresholds for the investment rules of thumb.

    Defaults are the conventional values (1% and 2% rent-to-price rules, 50%
    operating expense estimate). DSCR bands classify coverage as healthy,
    marginal or insufficient.
    """

    one_percent_threshold: FloatBetween0And1 = 0.01
    two_percent_threshold: FloatBetween0And1 = 0.02
    fifty_percent_expense_ratio: FloatBetween0And1 = 0.5
    default_operating_expense_ratio: FloatBetween0And1 = Field(
        default=0.5,
        description="Operating expenses as a fraction of gross rent for quick analysis.",
    )
    dscr_healthy: PositiveFloat = 1.25
    dscr_minimum: PositiveFloat = 1.0

    @model_validator(mode="after")
    def check_dscr_bands(self) -> "RuleSettings":
        """Ensure the healthy DSCR band sits above the minimum band."""
        if self.dscr_healthy < self.dscr_minimum:
            raise ValueError("dscr_healthy must be greater than or equal to dscr_minimum")
        return self


class InsuranceTier(Model):
    """Annual insurance rate applied to property values below ``max_value``."""

    max_value: Optional[PositiveFloat] = Field(
        default=None, description="Exclusive upper bound; None for the top tier."
    )
    annual_rate: FloatBetween0And1


def _default_insurance_tiers() -> List[InsuranceTier]:
    return [
        InsuranceTier(max_value=200_000, annual_rate=0.005),
        InsuranceTier(max_value=500_000, annual_rate=0.0035),
        InsuranceTier(max_value=None, annual_rate=0.0025),
    ]


class EstimationSettings(Model):
    """Assumptions used to estimate carrying costs for listings."""

    national_property_tax_rate: FloatBetween0And1 = Field(
        default=0.011,
        description="Annual property tax rate used when the state is unknown.",
    )
    insurance_tiers: List[InsuranceTier] = Field(default_factory=_default_insurance_tiers)

    @model_validator(mode="after")
    def check_insurance_tiers(self) -> "EstimationSettings":
        """Tiers must ascend and end with a single open-ended tier."""
        tiers = self.insurance_tiers
        if not tiers:
            raise ValueError("insurance_tiers must contain at least one tier")
        if tiers[-1].max_value is not None:
            raise ValueError("the last insurance tier must be open-ended (max_value=None)")
        bounds = [tier.max_value for tier in tiers[:-1]]
        if any(bound is None for bound in bounds):
            raise ValueError("only the last insurance tier may be open-ended")
        if bounds != sorted(bounds) or len(set(bounds)) != len(bounds):
            raise ValueError("insurance tier ceilings must be strictly ascending")
        return self


# --- Main Global Settings Class ---


class GlobalSettings(Model):
    """Global engine settings

    Groups the tunable assumptions by functional area. Calculations take an
    optional settings object and fall back to these defaults.
    """

    reporting: ReportingSettings = Field(default_factory=ReportingSettings)
    rules: RuleSettings = Field(default_factory=RuleSettings)
    estimation: EstimationSettings = Field(default_factory=EstimationSettings)
