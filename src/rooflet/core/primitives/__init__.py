# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Rooflet Core Primitives

Building blocks shared by every calculation module: the immutable model
base, nullable numeric types, enums and settings.
"""

from .enums import CashFlowFilterEnum, DebtFilterEnum, MetricFormatEnum
from .model import Model
from .settings import (
    EstimationSettings,
    GlobalSettings,
    InsuranceTier,
    ReportingSettings,
    RuleSettings,
)
from .types import (
    Amount,
    FloatBetween0And1,
    PositiveFloat,
    PositiveInt,
    coerce_amount,
)

__all__ = [
    # Core models
    "Model",
    # Settings
    "GlobalSettings",
    "ReportingSettings",
    "RuleSettings",
    "EstimationSettings",
    "InsuranceTier",
    # Enums
    "CashFlowFilterEnum",
    "DebtFilterEnum",
    "MetricFormatEnum",
    # Types
    "Amount",
    "PositiveFloat",
    "PositiveInt",
    "FloatBetween0And1",
    "coerce_amount",
]
