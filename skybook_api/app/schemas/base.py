"""
Shared pydantic configuration.

The HTTP surface speaks camelCase JSON (``fullName``, ``totalCost``)
while Python code uses snake_case attribute names.  ``ApiModel``
generates the camelCase aliases and still accepts snake_case input so
that services and tests can build models by field name.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

CENTS = Decimal("0.01")


def to_money(value: Decimal) -> Decimal:
    """Round a decimal amount to two places (half up)."""
    return Decimal(value).quantize(CENTS, rounding=ROUND_HALF_UP)


# Currency amount with exactly two decimal places.  Serialises to JSON
# as a string, e.g. ``"150.00"``.
Money = Annotated[Decimal, AfterValidator(to_money)]


class ApiModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
