# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import math

import numpy as np
import pandas as pd
import pytest
from pydantic import TypeAdapter, ValidationError

from rooflet.core.primitives import (
    Amount,
    FloatBetween0And1,
    PositiveFloat,
    PositiveInt,
    coerce_amount,
)

# Use TypeAdapter for testing Pydantic constrained types
amount_adapter = TypeAdapter(Amount)
positive_int_adapter = TypeAdapter(PositiveInt)
positive_float_adapter = TypeAdapter(PositiveFloat)
float_01_adapter = TypeAdapter(FloatBetween0And1)


# coerce_amount
@pytest.mark.parametrize("missing", [None, float("nan"), np.nan, pd.NA, "", "   ", False])
def test_coerce_amount_missing_values(missing):
    assert coerce_amount(missing) == 0.0


@pytest.mark.parametrize(
    "value,expected",
    [(0, 0.0), (1250, 1250.0), (-35.5, -35.5), ("1250.5", 1250.5), (" 42 ", 42.0), (np.float64(3.5), 3.5)],
)
def test_coerce_amount_numbers(value, expected):
    result = coerce_amount(value)
    assert result == expected
    assert isinstance(result, float)


def test_coerce_amount_nan_string():
    assert coerce_amount("nan") == 0.0


def test_coerce_amount_rejects_text():
    with pytest.raises(ValueError):
        coerce_amount("twelve")


def test_coerce_amount_keeps_infinity():
    """Infinity is a number; ratio guards downstream deal with it."""
    assert math.isinf(coerce_amount(float("inf")))


# Amount
def test_amount_field():
    assert amount_adapter.validate_python(None) == 0.0
    assert amount_adapter.validate_python("7.25") == 7.25
    with pytest.raises(ValidationError):
        amount_adapter.validate_python("seven")


# PositiveInt
def test_positive_int_valid():
    assert positive_int_adapter.validate_python(0) == 0
    assert positive_int_adapter.validate_python(100) == 100


def test_positive_int_invalid():
    with pytest.raises(ValidationError):
        positive_int_adapter.validate_python(-1)
    with pytest.raises(ValidationError):
        positive_int_adapter.validate_python(1.5)  # strict=True fails on float
    with pytest.raises(ValidationError):
        positive_int_adapter.validate_python("1")  # strict=True fails on string


# PositiveFloat
def test_positive_float_valid():
    assert positive_float_adapter.validate_python(0.0) == 0.0
    assert positive_float_adapter.validate_python(123.45) == 123.45


def test_positive_float_invalid():
    with pytest.raises(ValidationError):
        positive_float_adapter.validate_python(-0.001)
    with pytest.raises(ValidationError):
        positive_float_adapter.validate_python("1.5")  # strict=True fails on string


# FloatBetween0And1
def test_float_01_valid():
    assert float_01_adapter.validate_python(0.0) == 0.0
    assert float_01_adapter.validate_python(1.0) == 1.0
    assert float_01_adapter.validate_python(0.5) == 0.5


def test_float_01_invalid():
    with pytest.raises(ValidationError):
        float_01_adapter.validate_python(-0.01)
    with pytest.raises(ValidationError):
        float_01_adapter.validate_python(1.01)
    with pytest.raises(ValidationError):
        float_01_adapter.validate_python("0.5")  # strict=True fails on string
