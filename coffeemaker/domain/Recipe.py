"""Recipe domain entity: name, price and the four ingredient amounts."""
import logging
from typing import Any, Dict

from pydantic import ValidationError

from coffeemaker.domain.exceptions import ErrorCodes, RecipeException
from coffeemaker.utilities.validators import RecipeInput, format_errors, parse_amount, validate_name

logger = logging.getLogger(__name__)


class Recipe:
    def __init__(self):
        self.name = ""
        self.price = 0
        self.amt_coffee = 0
        self.amt_milk = 0
        self.amt_sugar = 0
        self.amt_chocolate = 0
        self._locked = False

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return (f"Recipe({self.name!r}, price={self.price}, coffee={self.amt_coffee}, "
                f"milk={self.amt_milk}, sugar={self.amt_sugar}, chocolate={self.amt_chocolate})")

    def __eq__(self, other) -> bool:
        if not isinstance(other, Recipe):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    # --- Accessors ---------------------------------------------------------
    def get_name(self) -> str: return self.name
    def get_price(self) -> int: return self.price
    def get_amt_coffee(self) -> int: return self.amt_coffee
    def get_amt_milk(self) -> int: return self.amt_milk
    def get_amt_sugar(self) -> int: return self.amt_sugar
    def get_amt_chocolate(self) -> int: return self.amt_chocolate

    def has_name(self) -> bool:
        return bool(self.name)

    def is_locked(self) -> bool:
        return self._locked

    def lock(self):
        '''Freezes the recipe once a recipe book has accepted it.'''
        self._locked = True
        return self

    # --- Validating setters ------------------------------------------------
    def _check_unlocked(self):
        if self._locked:
            raise RecipeException(f"Recipe '{self.name}' is in use and cannot be changed",
                                  code=ErrorCodes.RECIPE_LOCKED)

    def _parse(self, text, field: str) -> int:
        self._check_unlocked()
        try:
            return parse_amount(text, field)
        except ValueError as e:
            logger.warning(f"Rejected {field} for recipe '{self.name}': {e}")
            raise RecipeException(str(e)) from e

    def set_name(self, name):
        self._check_unlocked()
        try:
            self.name = validate_name(name)
        except ValueError as e:
            raise RecipeException(str(e)) from e

    def set_price(self, price):
        self.price = self._parse(price, "price")

    def set_amt_coffee(self, amt_coffee):
        self.amt_coffee = self._parse(amt_coffee, "coffee")

    def set_amt_milk(self, amt_milk):
        self.amt_milk = self._parse(amt_milk, "milk")

    def set_amt_sugar(self, amt_sugar):
        self.amt_sugar = self._parse(amt_sugar, "sugar")

    def set_amt_chocolate(self, amt_chocolate):
        self.amt_chocolate = self._parse(amt_chocolate, "chocolate")

    # --- Construction from text -------------------------------------------
    @classmethod
    def from_text(cls, name, price, coffee, milk, sugar, chocolate) -> "Recipe":
        """Validate all six text fields together and build a complete Recipe.

        Raises RecipeException listing every field that failed; no partially
        built recipe is ever returned.
        """
        try:
            data = RecipeInput(name=name, price=price, coffee=coffee,
                               milk=milk, sugar=sugar, chocolate=chocolate)
        except ValidationError as e:
            errors = format_errors(e)
            logger.warning(f"Rejected recipe {name!r}: {errors}")
            raise RecipeException("Invalid recipe", errors=errors) from e
        recipe = cls()
        recipe.name = data.name
        recipe.price = data.price
        recipe.amt_coffee = data.coffee
        recipe.amt_milk = data.milk
        recipe.amt_sugar = data.sugar
        recipe.amt_chocolate = data.chocolate
        return recipe

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "Recipe":
        '''Creates a Recipe from a dictionary of text fields. Ignores unknown keys.'''
        d = dict(data) if isinstance(data, dict) else {}
        return Recipe.from_text(
            d.get("name"), d.get("price"), d.get("coffee"),
            d.get("milk"), d.get("sugar"), d.get("chocolate"),
        )

    def to_dict(self) -> Dict[str, Any]:
        '''Converts the Recipe to a dictionary of text fields, the form from_dict reads.'''
        return {
            "name": self.name,
            "price": str(self.price),
            "coffee": str(self.amt_coffee),
            "milk": str(self.amt_milk),
            "sugar": str(self.amt_sugar),
            "chocolate": str(self.amt_chocolate),
        }
