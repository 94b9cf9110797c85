# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Location- and value-based carrying cost estimates for listings.

Used when a listing does not publish its tax bill or insurance premium.
Rates are annual fractions of property value; results are monthly.
"""

from __future__ import annotations

from typing import Dict, Optional

from ..core.primitives import GlobalSettings, coerce_amount

# Effective annual property tax rate by state (owner-occupied, approximate)
STATE_PROPERTY_TAX_RATES: Dict[str, float] = {
    "AL": 0.0040,
    "AK": 0.0104,
    "AZ": 0.0052,
    "AR": 0.0057,
    "CA": 0.0071,
    "CO": 0.0049,
    "CT": 0.0179,
    "DE": 0.0056,
    "DC": 0.0057,
    "FL": 0.0082,
    "GA": 0.0083,
    "HI": 0.0027,
    "ID": 0.0053,
    "IL": 0.0197,
    "IN": 0.0075,
    "IA": 0.0143,
    "KS": 0.0129,
    "KY": 0.0076,
    "LA": 0.0055,
    "ME": 0.0109,
    "MD": 0.0099,
    "MA": 0.0104,
    "MI": 0.0124,
    "MN": 0.0102,
    "MS": 0.0067,
    "MO": 0.0088,
    "MT": 0.0068,
    "NE": 0.0150,
    "NV": 0.0050,
    "NH": 0.0161,
    "NJ": 0.0223,
    "NM": 0.0067,
    "NY": 0.0140,
    "NC": 0.0073,
    "ND": 0.0092,
    "OH": 0.0141,
    "OK": 0.0080,
    "OR": 0.0082,
    "PA": 0.0135,
    "RI": 0.0123,
    "SC": 0.0051,
    "SD": 0.0108,
    "TN": 0.0056,
    "TX": 0.0147,
    "UT": 0.0052,
    "VT": 0.0161,
    "VA": 0.0080,
    "WA": 0.0076,
    "WV": 0.0055,
    "WI": 0.0138,
    "WY": 0.0056,
}


def property_tax_rate(state: Optional[str], settings: Optional[GlobalSettings] = None) -> float:
    """Annual tax rate for a state code, or the national average if unknown."""
    if state:
        rate = STATE_PROPERTY_TAX_RATES.get(state.strip().upper())
        if rate is not None:
            return rate
    return (settings or GlobalSettings()).estimation.national_property_tax_rate


def estimate_monthly_property_tax(
    property_value: Optional[float],
    state: Optional[str] = None,
    settings: Optional[GlobalSettings] = None,
) -> float:
    """
    Estimate monthly property tax.

    Example:
        ```python
        estimate_monthly_property_tax(300_000, "TX")  # about 367.50 (1.47% / 12)
        estimate_monthly_property_tax(300_000)        # about 275.00 (1.1% fallback)
        ```
    """
    return coerce_amount(property_value) * property_tax_rate(state, settings) / 12


def estimate_monthly_insurance(
    property_value: Optional[float], settings: Optional[GlobalSettings] = None
) -> float:
    """
    Estimate monthly hazard insurance from value tiers.

    Default tiers: under $200k at 0.5%/yr, under $500k at 0.35%/yr, and
    0.25%/yr above that.
    """
    value = coerce_amount(property_value)
    tiers = (settings or GlobalSettings()).estimation.insurance_tiers
    for tier in tiers:
        if tier.max_value is None or value < tier.max_value:
            return value * tier.annual_rate / 12
    return value * tiers[-1].annual_rate / 12
