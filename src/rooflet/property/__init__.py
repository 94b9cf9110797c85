# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Single-property metrics: the property record and its recompute operation.
"""

from .calculator import (
    DEBT_SERVICE_TERM_MONTHS,
    compute_debt_service,
    recompute_properties,
    recompute_property,
)
from .record import (
    DERIVED_FIELDS,
    IDENTITY_FIELDS,
    RAW_INPUT_FIELDS,
    PropertyLike,
    PropertyRecord,
    as_property_record,
    create_empty_property,
)

__all__ = [
    "PropertyRecord",
    "PropertyLike",
    "as_property_record",
    "create_empty_property",
    "compute_debt_service",
    "recompute_property",
    "recompute_properties",
    "DEBT_SERVICE_TERM_MONTHS",
    "RAW_INPUT_FIELDS",
    "DERIVED_FIELDS",
    "IDENTITY_FIELDS",
]
