"""
Item record stored in the backpack.

Field limits mirror the fixed-size text buffers of the classic console
version: names hold up to 29 characters, categories up to 19.
"""
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from .errors import InvalidInput

NAME_MAX_LENGTH = 29
CATEGORY_MAX_LENGTH = 19

FIELD_LABELS = {
    "name": "Name",
    "category": "Category",
    "quantity": "Quantity",
}

ItemName = Annotated[str, Field(strict=True, min_length=1, max_length=NAME_MAX_LENGTH)]
ItemCategory = Annotated[str, Field(strict=True, min_length=1, max_length=CATEGORY_MAX_LENGTH)]
ItemQuantity = Annotated[int, Field(strict=True, ge=0)]

FIELD_ADAPTERS = {
    "name": TypeAdapter(ItemName),
    "category": TypeAdapter(ItemCategory),
    "quantity": TypeAdapter(ItemQuantity),
}


class Item(BaseModel):
    """A named stack of things in the backpack."""
    model_config = ConfigDict(frozen=True)

    name: ItemName
    category: ItemCategory
    quantity: ItemQuantity

    def as_tuple(self) -> tuple[str, str, int]:
        return (self.name, self.category, self.quantity)


def describe_validation_error(exc: ValidationError, field: Optional[str] = None) -> str:
    """Turn the first pydantic error into a one-line message for the user."""
    error = exc.errors()[0]
    if error["loc"]:
        field = error["loc"][0]
    label = FIELD_LABELS.get(field, str(field or "item"))

    if error["type"] == "string_too_short":
        return f"{label} must not be empty"
    if error["type"] == "string_too_long":
        return f"{label} must be at most {error['ctx']['max_length']} characters"
    if error["type"] == "greater_than_equal":
        return f"{label} cannot be negative"
    if error["type"] == "int_type":
        return f"{label} must be a whole number"
    if error["type"] == "string_type":
        return f"{label} must be text"
    return f"{label}: {error['msg']}"


def validate_field(field: str, value):
    """
    Check a single Item field on its own, before the whole Item is built.

    Raises:
        InvalidInput: if the value breaks the constraints for `field`
    """
    try:
        return FIELD_ADAPTERS[field].validate_python(value)
    except ValidationError as e:
        raise InvalidInput(describe_validation_error(e, field)) from e


def make_item(name: str, category: str, quantity: int) -> Item:
    """
    Build a validated Item.

    Raises:
        InvalidInput: if any field breaks the Item constraints
    """
    try:
        return Item(name=name, category=category, quantity=quantity)
    except ValidationError as e:
        raise InvalidInput(describe_validation_error(e)) from e
