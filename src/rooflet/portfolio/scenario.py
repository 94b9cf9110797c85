# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
What-if editing of a portfolio against its loaded baseline.

A scenario is an immutable value: every edit returns a new scenario, and
the edited property is recomputed in the same step so its derived fields
always match its inputs.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Optional, Tuple

from ..core.primitives import GlobalSettings, Model
from ..property import (
    DERIVED_FIELDS,
    PropertyLike,
    PropertyRecord,
    create_empty_property,
    recompute_properties,
)
from .comparison import MetricChange, compare_metrics, compare_totals
from .filters import PortfolioFilter
from .metrics import PortfolioSummary, analyze_portfolio

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = (
    "address",
    "state",
    "market_value",
    "debt",
    "interest_rate",
    "rent",
    "hoa",
    "property_tax",
    "insurance",
    "other_expenses",
)


class ScenarioAnalysis(Model):
    """Edited portfolio next to its baseline, with the visible differences."""

    summary: PortfolioSummary
    baseline_summary: PortfolioSummary
    metric_changes: Dict[str, MetricChange]
    total_changes: Dict[str, MetricChange]


class PortfolioScenario(Model):
    """
    Editable copy of a portfolio plus the baseline it was loaded from.

    Attributes:
        baseline: Records as loaded, recomputed
        properties: Working records after edits
        is_modified: True once any edit has been applied

    Example:
        >>> scenario = PortfolioScenario.from_records(api_records)
        >>> scenario = scenario.update_property(0, "rent", 3_200)
        >>> analysis = scenario.analyze()
        >>> analysis.metric_changes["cap_rate"].direction
        'up'
    """

    baseline: Tuple[PropertyRecord, ...] = ()
    properties: Tuple[PropertyRecord, ...] = ()
    is_modified: bool = False

    @classmethod
    def from_records(cls, records: Iterable[PropertyLike]) -> "PortfolioScenario":
        """Recompute loaded records and use them as both baseline and working set."""
        recomputed = tuple(recompute_properties(records))
        return cls(baseline=recomputed, properties=recomputed)

    @property
    def has_new_properties(self) -> bool:
        return any(record.is_new for record in self.properties)

    def _check_index(self, index: int) -> None:
        if not -len(self.properties) <= index < len(self.properties):
            raise IndexError(
                f"Property index {index} out of range for {len(self.properties)} properties"
            )

    def _with_properties(self, properties: Tuple[PropertyRecord, ...]) -> "PortfolioScenario":
        return self.model_copy(update={"properties": properties, "is_modified": True})

    def update_property(self, index: int, field: str, value: Any) -> "PortfolioScenario":
        """
        Change one input of one property and recompute that property.

        Raises:
            IndexError: If ``index`` does not address a property
            ValueError: If ``field`` is derived or not editable
        """
        self._check_index(index)
        if field in DERIVED_FIELDS:
            raise ValueError(f"'{field}' is derived and cannot be edited")
        if field not in EDITABLE_FIELDS:
            raise ValueError(f"'{field}' is not an editable property field")

        properties = list(self.properties)
        properties[index] = properties[index].with_inputs(**{field: value})
        logger.debug(f"Scenario edit: property {index} {field} -> {value!r}")
        return self._with_properties(tuple(properties))

    def add_property(self, address: str = "New Property") -> "PortfolioScenario":
        """Append an empty, newly flagged property."""
        return self._with_properties(self.properties + (create_empty_property(address),))

    def remove_property(self, index: int) -> "PortfolioScenario":
        self._check_index(index)
        properties = list(self.properties)
        del properties[index]
        return self._with_properties(tuple(properties))

    def reset(self) -> "PortfolioScenario":
        """Discard every edit and return to the baseline."""
        return self.model_copy(update={"properties": self.baseline, "is_modified": False})

    def analyze(
        self,
        filters: Optional[PortfolioFilter] = None,
        settings: Optional[GlobalSettings] = None,
    ) -> ScenarioAnalysis:
        """
        Summarize the working set and the baseline under the same filter.

        Args:
            filters: Applied identically to both record sets (defaults select all)
            settings: Display settings used to decide what counts as a change
        """
        filters = filters or PortfolioFilter()
        summary = analyze_portfolio(filters.apply(self.properties))
        baseline_summary = analyze_portfolio(filters.apply(self.baseline))

        return ScenarioAnalysis(
            summary=summary,
            baseline_summary=baseline_summary,
            metric_changes=compare_metrics(
                summary.metrics, baseline_summary.metrics, settings
            ),
            total_changes=compare_totals(
                summary.totals, baseline_summary.totals, settings
            ),
        )
