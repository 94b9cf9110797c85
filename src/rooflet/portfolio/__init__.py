# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Portfolio aggregation: totals, ratio metrics, filters, baseline comparison
and what-if scenarios over a set of computed property records.
"""

from .comparison import (
    METRIC_FORMATS,
    TOTALS_FORMATS,
    MetricChange,
    compare_metrics,
    compare_totals,
)
from .filters import PortfolioFilter, available_states
from .metrics import (
    PortfolioMetrics,
    PortfolioSummary,
    analyze_portfolio,
    derive_metrics,
)
from .scenario import EDITABLE_FIELDS, PortfolioScenario, ScenarioAnalysis
from .totals import PortfolioTotals, aggregate_totals

__all__ = [
    # Aggregation
    "PortfolioTotals",
    "PortfolioMetrics",
    "PortfolioSummary",
    "aggregate_totals",
    "derive_metrics",
    "analyze_portfolio",
    # Filtering
    "PortfolioFilter",
    "available_states",
    # Comparison
    "MetricChange",
    "compare_metrics",
    "compare_totals",
    "METRIC_FORMATS",
    "TOTALS_FORMATS",
    # Scenarios
    "PortfolioScenario",
    "ScenarioAnalysis",
    "EDITABLE_FIELDS",
]
