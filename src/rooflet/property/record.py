# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Property record - one asset's financial snapshot.

Raw inputs come from the property API; derived fields are produced only by
``recompute_property`` and are never edited on their own.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Union

from pydantic import AliasChoices, AliasGenerator, BeforeValidator, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing_extensions import Annotated

from ..core.primitives import Amount, Model, coerce_amount

RAW_INPUT_FIELDS = (
    "market_value",
    "debt",
    "interest_rate",
    "rent",
    "hoa",
    "property_tax",
    "insurance",
    "other_expenses",
)

DERIVED_FIELDS = (
    "equity",
    "equity_percent",
    "debt_service",
    "noi_monthly",
    "noi_yearly",
    "cashflow",
    "return_percent",
)

IDENTITY_FIELDS = ("address", "state", "is_new")


def _null_as_false(value: Any) -> Any:
    return False if value is None else value


Flag = Annotated[bool, BeforeValidator(_null_as_false)]


class PropertyRecord(Model):
    """
    Financial snapshot of a single rental property.

    All currency amounts are monthly except ``market_value`` and ``debt``;
    ``interest_rate`` is a whole-number percentage (6 means 6%). Null inputs
    are coerced to 0 on construction. Unknown keys (API identifiers and
    flags) are kept and pass through every recompute untouched.

    Attributes:
        address: Opaque identifier shown to users
        state: Two-letter US state code, used for filtering and tax estimates
        is_new: True for records created in the editor rather than loaded;
            a null flag reads as False
        market_value: Current asset value
        debt: Outstanding loan principal
        interest_rate: Annual loan rate, percent
        rent: Monthly rent collected
        hoa, property_tax, insurance, other_expenses: Monthly operating costs
        equity ... return_percent: Derived; see ``recompute_property``

    Example:
        >>> record = PropertyRecord(address="123 Main St", market_value=500_000, debt=None)
        >>> record.debt
        0.0
    """

    model_config = ConfigDict(
        extra="allow",
        populate_by_name=True,
        alias_generator=AliasGenerator(validation_alias=to_camel),
    )

    address: str = "New Property"
    state: Optional[str] = None
    is_new: Flag = False

    # Raw inputs
    market_value: Amount = 0.0
    debt: Amount = 0.0
    interest_rate: Amount = 0.0
    rent: Amount = 0.0
    hoa: Amount = 0.0
    property_tax: Amount = Field(
        default=0.0,
        validation_alias=AliasChoices("property_tax", "propertyTax", "re_tax", "reTax"),
    )
    insurance: Amount = 0.0
    other_expenses: Amount = 0.0

    # Derived
    equity: Amount = 0.0
    equity_percent: Amount = 0.0
    debt_service: Amount = 0.0
    noi_monthly: Amount = 0.0
    noi_yearly: Amount = 0.0
    cashflow: Amount = 0.0
    return_percent: Amount = 0.0

    @property
    def total_expenses_monthly(self) -> float:
        """Recurring non-debt operating costs per month."""
        return self.hoa + self.property_tax + self.insurance + self.other_expenses

    @property
    def is_vacant(self) -> bool:
        return self.rent <= 0

    def with_inputs(self, **changes: Any) -> "PropertyRecord":
        """
        Return a copy with raw inputs changed and every derived field recomputed.

        Raises:
            ValueError: If a derived or unknown field is passed
        """
        from .calculator import recompute_property  # noqa: PLC0415

        derived = sorted(set(changes) & set(DERIVED_FIELDS))
        if derived:
            raise ValueError(
                f"Derived fields cannot be set directly: {', '.join(derived)}"
            )
        unknown = sorted(set(changes) - set(RAW_INPUT_FIELDS) - set(IDENTITY_FIELDS))
        if unknown:
            raise ValueError(f"Unknown property fields: {', '.join(unknown)}")

        update = {
            name: coerce_amount(value) if name in RAW_INPUT_FIELDS else value
            for name, value in changes.items()
        }
        return recompute_property(self.model_copy(update=update))


PropertyLike = Union[PropertyRecord, Mapping[str, Any]]


def as_property_record(record: PropertyLike) -> PropertyRecord:
    """
    Normalize a record or API payload mapping into a ``PropertyRecord``.

    Derived values present in a mapping are kept as given; nothing is
    recomputed here.

    Raises:
        TypeError: If ``record`` is neither a PropertyRecord nor a mapping
    """
    if isinstance(record, PropertyRecord):
        return record
    if isinstance(record, Mapping):
        return PropertyRecord.model_validate(dict(record))
    raise TypeError(
        f"Expected PropertyRecord or mapping, got {type(record).__name__}"
    )


def create_empty_property(address: str = "New Property") -> PropertyRecord:
    """Create a new, all-zero record flagged as newly added."""
    return PropertyRecord(address=address, is_new=True)
