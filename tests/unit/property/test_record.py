# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import pytest
from pydantic import ValidationError

from rooflet.property import (
    DERIVED_FIELDS,
    RAW_INPUT_FIELDS,
    PropertyRecord,
    as_property_record,
    create_empty_property,
    recompute_property,
)


class TestPropertyRecordConstruction:
    """Input normalization at the record boundary."""

    def test_defaults_are_zero(self):
        record = PropertyRecord()
        assert record.address == "New Property"
        assert record.state is None
        assert record.is_new is False
        for field in RAW_INPUT_FIELDS + DERIVED_FIELDS:
            assert getattr(record, field) == 0

    def test_none_and_nan_coerce_to_zero(self):
        record = PropertyRecord(market_value=None, debt=float("nan"), rent="2500")
        assert record.market_value == 0.0
        assert record.debt == 0.0
        assert record.rent == 2500.0

    def test_camel_case_payload(self):
        record = PropertyRecord.model_validate(
            {
                "address": "1 Camel Ct",
                "marketValue": 250_000,
                "interestRate": 6.5,
                "reTax": 210,
                "otherExpenses": 40,
                "isNew": True,
            }
        )
        assert record.market_value == 250_000
        assert record.interest_rate == 6.5
        assert record.property_tax == 210
        assert record.other_expenses == 40
        assert record.is_new is True

    def test_re_tax_alias(self):
        assert PropertyRecord(re_tax=125).property_tax == 125

    def test_null_new_flag_reads_false(self):
        assert PropertyRecord(is_new=None).is_new is False
        record = recompute_property({"address": "x", "marketValue": 1, "isNew": None})
        assert record.is_new is False
        assert record.equity == 1

    def test_non_numeric_input_raises(self):
        with pytest.raises(ValidationError):
            PropertyRecord(rent="two thousand")

    def test_records_are_frozen(self):
        record = PropertyRecord(rent=1_000)
        with pytest.raises(ValidationError):
            record.rent = 2_000

    def test_total_expenses_monthly(self, main_street):
        assert main_street.total_expenses_monthly == 850

    def test_is_vacant(self):
        assert PropertyRecord(rent=0).is_vacant
        assert not PropertyRecord(rent=1).is_vacant


class TestWithInputs:
    """Editing raw inputs always recomputes derived fields."""

    def test_edit_recomputes(self, main_street):
        edited = main_street.with_inputs(rent=3_500)

        assert edited.rent == 3_500
        assert edited.noi_monthly == 2_650
        assert main_street.rent == 3_000

    def test_edit_coerces_none(self, main_street):
        edited = main_street.with_inputs(debt=None)

        assert edited.debt == 0
        assert edited.debt_service == 0
        assert edited.equity == 500_000

    def test_identity_fields_can_change(self, main_street):
        edited = main_street.with_inputs(address="124 Main St", state="NM")
        assert edited.address == "124 Main St"
        assert edited.state == "NM"

    def test_derived_fields_rejected(self, main_street):
        with pytest.raises(ValueError, match="Derived fields cannot be set directly: cashflow"):
            main_street.with_inputs(cashflow=10_000)

    def test_unknown_fields_rejected(self, main_street):
        with pytest.raises(ValueError, match="Unknown property fields: vacancy"):
            main_street.with_inputs(vacancy=0.05)


class TestFactories:
    def test_create_empty_property(self):
        record = create_empty_property()

        assert record.address == "New Property"
        assert record.is_new is True
        assert record.market_value == 0
        assert record.cashflow == 0

    def test_create_empty_property_with_address(self):
        assert create_empty_property("9 Lot Ln").address == "9 Lot Ln"

    def test_as_property_record_passthrough(self, main_street):
        assert as_property_record(main_street) is main_street

    def test_as_property_record_keeps_supplied_derived_values(self):
        record = as_property_record({"address": "X", "noiMonthly": 1_234.5, "cashflow": None})

        assert record.noi_monthly == 1_234.5
        assert record.cashflow == 0

    def test_as_property_record_rejects_other_types(self):
        with pytest.raises(TypeError):
            as_property_record(42)
