# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

import importlib
import logging

"""
Rooflet - Real Estate Investment and Portfolio Calculation Engine

Pure, side-effect-free numeric layer that turns raw property and loan inputs
into derived financial metrics for a single property and for a portfolio.

Key Entry Points:
- rooflet.property.recompute_property() - Derived metrics for one property
- rooflet.portfolio.aggregate_totals() / derive_metrics() - Portfolio roll-up
- rooflet.investment.* - Rules of thumb and listing analysis
- rooflet.reporting.* - Display formatting and tabular output

Example Usage:
    ```python
    from rooflet.property import PropertyRecord, recompute_property
    from rooflet.portfolio import aggregate_totals, derive_metrics

    record = recompute_property(
        PropertyRecord(market_value=500_000, debt=300_000, interest_rate=6, rent=3_000)
    )
    totals = aggregate_totals([record])
    metrics = derive_metrics([record], totals)
    print(f"Cap rate: {metrics.cap_rate:.2f}%")
    ```
"""

# Package logger; handlers are configured by the application.
logging.getLogger(__name__).addHandler(logging.NullHandler())


# Public API surface (lazy-loaded on first attribute access)
__all__ = [  # noqa: F822 - lazy loading
    "core",
    "investment",
    "portfolio",
    "property",
    "reporting",
]


_LAZY_MODULES = {
    "core": "rooflet.core",
    "investment": "rooflet.investment",
    "portfolio": "rooflet.portfolio",
    "property": "rooflet.property",
    "reporting": "rooflet.reporting",
}


def __getattr__(name: str):
    module_path = _LAZY_MODULES.get(name)
    if module_path is None:
        raise AttributeError(f"module 'rooflet' has no attribute '{name}'")
    module = importlib.import_module(module_path)
    globals()[name] = module
    return module
