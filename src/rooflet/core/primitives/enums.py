# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from enum import Enum


class CashFlowFilterEnum(str, Enum):
    """Portfolio filter on monthly cash flow sign."""

    ALL = "all"
    POSITIVE = "positive"
    NEGATIVE = "negative"


class DebtFilterEnum(str, Enum):
    """Portfolio filter on whether a property carries a loan."""

    ALL = "all"
    WITH_DEBT = "with-debt"
    NO_DEBT = "no-debt"


class MetricFormatEnum(str, Enum):
    """How a metric is rendered for display (and therefore compared)."""

    CURRENCY = "currency"
    PERCENT = "percent"
    COUNT = "count"
    RATIO = "ratio"
