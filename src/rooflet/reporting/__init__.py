# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Rooflet Reporting

Display formatting and pandas tables for property and portfolio results.
"""

from ..core.formatting import (
    format_compact_currency,
    format_compact_percent,
    format_currency,
    format_currency_for_display,
    format_metric,
    format_percentage,
    format_ratio,
    parse_currency_to_number,
    parse_percentage_to_number,
)
from .portfolio_report import (
    PROPERTY_COLUMNS,
    PortfolioReport,
    properties_frame,
    summary_frame,
)

__all__ = [
    # Formatting
    "format_currency",
    "format_percentage",
    "format_compact_currency",
    "format_compact_percent",
    "format_ratio",
    "format_metric",
    "format_currency_for_display",
    "parse_currency_to_number",
    "parse_percentage_to_number",
    # Tables
    "PortfolioReport",
    "properties_frame",
    "summary_frame",
    "PROPERTY_COLUMNS",
]
