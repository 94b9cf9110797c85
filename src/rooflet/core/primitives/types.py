# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Numeric field types and the input-boundary coercion pass.

Currency and percentage inputs arrive from the property API as nullable
numbers. They are normalized exactly once, here, so that formulas downstream
never need their own null checks.
"""

from __future__ import annotations

from typing import Any

import pandas as pd
from pydantic import BeforeValidator, Field
from typing_extensions import Annotated


def coerce_amount(value: Any) -> float:
    """
    Normalize a nullable numeric input to a float.

    Missing values (None, NaN, pd.NA, blank strings, False) become 0.0.
    Anything else is converted with float(), so numeric strings are accepted
    and non-numeric strings raise ValueError.

    Example:
        >>> coerce_amount(None)
        0.0
        >>> coerce_amount("1250.5")
        1250.5
    """
    if value is None or value is False:
        return 0.0
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return 0.0
    elif pd.api.types.is_scalar(value) and pd.isna(value):
        return 0.0
    number = float(value)
    if pd.isna(number):
        return 0.0
    return number


# Nullable currency/percentage input: None and NaN coerce to 0 on construction
Amount = Annotated[float, BeforeValidator(coerce_amount)]

# constrained types
PositiveInt = Annotated[int, Field(strict=True, ge=0)]
PositiveFloat = Annotated[float, Field(strict=True, ge=0)]
FloatBetween0And1 = Annotated[float, Field(strict=True, ge=0, le=1)]
