# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Record filters applied before portfolio aggregation."""

from __future__ import annotations

from typing import Iterable, List, Tuple

from pydantic import Field

from ..core.primitives import (
    Amount,
    CashFlowFilterEnum,
    DebtFilterEnum,
    Model,
)
from ..property import PropertyLike, PropertyRecord, as_property_record


class PortfolioFilter(Model):
    """
    Selection criteria for the properties included in a portfolio view.

    The defaults select everything. Criteria combine with AND.

    Example:
        >>> levered_only = PortfolioFilter(debt=DebtFilterEnum.WITH_DEBT, states=("TX",))
        >>> selected = levered_only.apply(records)
    """

    include_vacant: bool = True
    states: Tuple[str, ...] = ()
    cashflow: CashFlowFilterEnum = CashFlowFilterEnum.ALL
    debt: DebtFilterEnum = DebtFilterEnum.ALL
    min_market_value: Amount = Field(
        default=0.0, description="Only applied when positive."
    )

    @property
    def is_active(self) -> bool:
        """True when any criterion would exclude something."""
        return (
            not self.include_vacant
            or len(self.states) > 0
            or self.cashflow != CashFlowFilterEnum.ALL
            or self.debt != DebtFilterEnum.ALL
            or self.min_market_value > 0
        )

    def matches(self, record: PropertyRecord) -> bool:
        if not self.include_vacant and record.rent <= 0:
            return False
        if self.states and (record.state or "") not in self.states:
            return False

        if self.cashflow == CashFlowFilterEnum.POSITIVE and not record.cashflow > 0:
            return False
        if self.cashflow == CashFlowFilterEnum.NEGATIVE and not record.cashflow < 0:
            return False

        if self.debt == DebtFilterEnum.WITH_DEBT and not record.debt > 0:
            return False
        if self.debt == DebtFilterEnum.NO_DEBT and record.debt != 0:
            return False

        if self.min_market_value > 0 and record.market_value < self.min_market_value:
            return False
        return True

    def apply(self, records: Iterable[PropertyLike]) -> List[PropertyRecord]:
        """Return the matching records in their original order."""
        properties = [as_property_record(record) for record in records]
        return [record for record in properties if self.matches(record)]


def available_states(records: Iterable[PropertyLike]) -> List[str]:
    """Distinct, non-empty state codes present in the records, sorted."""
    states = {as_property_record(record).state for record in records}
    return sorted(state for state in states if state)
