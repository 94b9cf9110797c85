# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Test utilities and fixtures for Rooflet testing.

Provides the reference properties used across the suite: a typical levered
rental, a second levered rental, and a debt-free rental. Raw inputs only;
tests recompute derived fields themselves unless a fixture says otherwise.
"""

from __future__ import annotations

from typing import List

import pytest

from rooflet.property import PropertyRecord, recompute_property


def make_property(**overrides) -> PropertyRecord:
    """Create a property record with zeroed inputs and the given overrides."""
    fields = {
        "address": "Test Property",
        "market_value": 0.0,
        "debt": 0.0,
        "interest_rate": 0.0,
        "rent": 0.0,
        "hoa": 0.0,
        "property_tax": 0.0,
        "insurance": 0.0,
        "other_expenses": 0.0,
    }
    fields.update(overrides)
    return PropertyRecord(**fields)


@pytest.fixture
def main_street() -> PropertyRecord:
    """$500k rental, $300k at 6%, $3,000 rent, $850 monthly expenses."""
    return make_property(
        address="123 Main St",
        state="TX",
        market_value=500_000,
        debt=300_000,
        interest_rate=6,
        rent=3_000,
        hoa=200,
        property_tax=400,
        insurance=150,
        other_expenses=100,
    )


@pytest.fixture
def oak_avenue() -> PropertyRecord:
    """$400k rental, $250k at 5.5%, $2,500 rent, $700 monthly expenses."""
    return make_property(
        address="456 Oak Ave",
        state="FL",
        market_value=400_000,
        debt=250_000,
        interest_rate=5.5,
        rent=2_500,
        hoa=150,
        property_tax=350,
        insurance=125,
        other_expenses=75,
    )


@pytest.fixture
def free_and_clear() -> PropertyRecord:
    """$400k rental with no loan."""
    return make_property(
        address="789 Elm St",
        state="OH",
        market_value=400_000,
        rent=2_500,
        property_tax=300,
        insurance=100,
        other_expenses=50,
    )


@pytest.fixture
def two_property_portfolio(
    main_street: PropertyRecord, oak_avenue: PropertyRecord
) -> List[PropertyRecord]:
    """Main Street and Oak Avenue, recomputed."""
    return [recompute_property(main_street), recompute_property(oak_avenue)]
