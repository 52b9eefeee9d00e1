"""
Input validation for the text fields that reach the dispenser.

Every quantity and price arrives as text; `parse_amount` is the single rule
for turning that text into a non-negative integer, and the Pydantic schemas
below apply it to whole records at once.
"""
import re
from typing import List

from pydantic import BaseModel, ValidationError, ValidationInfo, field_validator

_AMOUNT_PATTERN = re.compile(r'[+-]?[0-9]+')


def parse_amount(text, field: str = "value") -> int:
    """Parse `text` as a non-negative integer or raise ValueError.

    Accepts an optional sign followed by ASCII digits. Whitespace, decimals,
    digit separators and values that are not `str` are all rejected.
    """
    if not isinstance(text, str):
        raise ValueError(f"{field} must be given as text, got {type(text).__name__}")
    if not _AMOUNT_PATTERN.fullmatch(text):
        raise ValueError(f"{field} must be an integer: {text!r}")
    value = int(text)
    if value < 0:
        raise ValueError(f"{field} must be non-negative: {text!r}")
    return value


def validate_name(text) -> str:
    """Return `text` unchanged if it is a usable recipe name."""
    if not isinstance(text, str) or not text.strip():
        raise ValueError('Recipe name cannot be empty')
    return text


def format_errors(exc: ValidationError) -> List[str]:
    """Flatten a Pydantic ValidationError into 'field: message' strings."""
    messages = []
    for err in exc.errors():
        field = ".".join(str(part) for part in err.get('loc', ())) or "input"
        msg = err.get('msg', '')
        # Pydantic prefixes errors raised inside validators
        if msg.startswith('Value error, '):
            msg = msg[len('Value error, '):]
        messages.append(f"{field}: {msg}")
    return messages


class InventoryInput(BaseModel):
    """Schema for an inventory restock: four quantities given as text."""
    coffee: int
    milk: int
    sugar: int
    chocolate: int

    @field_validator('coffee', 'milk', 'sugar', 'chocolate', mode='before')
    @classmethod
    def parse_quantity(cls, v, info: ValidationInfo):
        """Quantities must be non-negative integer text."""
        return parse_amount(v, info.field_name)


class RecipeInput(BaseModel):
    """Schema for a complete recipe given as text fields."""
    name: str
    price: int
    coffee: int
    milk: int
    sugar: int
    chocolate: int

    @field_validator('name', mode='before')
    @classmethod
    def check_name(cls, v):
        return validate_name(v)

    @field_validator('price', 'coffee', 'milk', 'sugar', 'chocolate', mode='before')
    @classmethod
    def parse_number(cls, v, info: ValidationInfo):
        """Price and amounts must be non-negative integer text."""
        return parse_amount(v, info.field_name)
