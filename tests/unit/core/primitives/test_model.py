# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

import pytest
from pydantic import ValidationError

from rooflet.core.primitives import Model


class _TestModel(Model):
    a: int
    b: str = "hello"


def test_model_is_frozen():
    """Test that the base Model is frozen and attributes cannot be changed after instantiation."""
    m = _TestModel(a=1)
    with pytest.raises(ValidationError):
        m.a = 2


def test_model_rejects_unknown_fields():
    """Test that typos in field names fail loudly instead of being dropped."""
    with pytest.raises(ValidationError):
        _TestModel(a=1, c=2)


def test_model_copy_with_updates():
    """Test model_copy with updates leaves the original untouched."""
    m1 = _TestModel(a=1, b="original")
    m2 = m1.model_copy(update={"a": 100})

    assert m1 != m2
    assert m1.a == 1
    assert m2.a == 100
    assert m2.b == "original"


def test_model_equality_is_by_value():
    assert _TestModel(a=1) == _TestModel(a=1, b="hello")
