# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Tabular portfolio output.

Reports only arrange and format numbers the calculators already produced;
they never perform financial calculations of their own.
"""

from __future__ import annotations

from typing import Iterable, Optional

import pandas as pd

from ..core.formatting import format_metric
from ..core.primitives import GlobalSettings
from ..portfolio import (
    METRIC_FORMATS,
    TOTALS_FORMATS,
    PortfolioSummary,
)
from ..property import (
    DERIVED_FIELDS,
    RAW_INPUT_FIELDS,
    PropertyLike,
    as_property_record,
)

PROPERTY_COLUMNS = ("address", "state", *RAW_INPUT_FIELDS, *DERIVED_FIELDS)


def properties_frame(records: Iterable[PropertyLike]) -> pd.DataFrame:
    """
    One row per property with raw inputs and derived fields.

    Columns follow PROPERTY_COLUMNS; rows keep the input order. Addresses are
    kept as a column rather than the index because they need not be unique.
    """
    rows = [
        {column: getattr(record, column) for column in PROPERTY_COLUMNS}
        for record in map(as_property_record, records)
    ]
    return pd.DataFrame(rows, columns=list(PROPERTY_COLUMNS))


def summary_frame(
    summary: PortfolioSummary,
    baseline: Optional[PortfolioSummary] = None,
    settings: Optional[GlobalSettings] = None,
) -> pd.DataFrame:
    """
    Totals and metrics as a table indexed by metric name.

    Columns:
        section: "totals" or "metrics"
        value: raw number
        display: formatted for presentation
        baseline, delta: present only when ``baseline`` is given
    """
    rows = []
    for section, model, base_model, formats in (
        ("totals", summary.totals, baseline.totals if baseline else None, TOTALS_FORMATS),
        ("metrics", summary.metrics, baseline.metrics if baseline else None, METRIC_FORMATS),
    ):
        for name, kind in formats.items():
            value = float(getattr(model, name))
            row = {
                "metric": name,
                "section": section,
                "value": value,
                "display": format_metric(value, kind, settings),
            }
            if base_model is not None:
                base_value = float(getattr(base_model, name))
                row["baseline"] = base_value
                row["delta"] = value - base_value
            rows.append(row)

    return pd.DataFrame(rows).set_index("metric")


class PortfolioReport:
    """
    Presentation wrapper around a portfolio summary.

    Example:
        ```python
        report = PortfolioReport(analyze_portfolio(records))
        table = report.generate()
        print(table.loc["cap_rate", "display"])  # "5.3%"
        ```
    """

    def __init__(
        self,
        summary: PortfolioSummary,
        baseline: Optional[PortfolioSummary] = None,
        settings: Optional[GlobalSettings] = None,
    ):
        if not isinstance(summary, PortfolioSummary):
            raise TypeError("PortfolioReport requires a PortfolioSummary object")
        self._summary = summary
        self._baseline = baseline
        self._settings = settings

    def generate(self, section: Optional[str] = None) -> pd.DataFrame:
        """
        Build the summary table, optionally limited to one section.

        Args:
            section: "totals", "metrics", or None for both
        """
        frame = summary_frame(self._summary, self._baseline, self._settings)
        if section is None:
            return frame
        if section not in ("totals", "metrics"):
            raise ValueError(f"Unknown report section '{section}'")
        return frame[frame["section"] == section]
