"""Inventory aggregate: stock of coffee, milk, sugar and chocolate units."""
import logging
from typing import Dict

from pydantic import ValidationError

from coffeemaker.domain.exceptions import InventoryException
from coffeemaker.domain.Recipe import Recipe
from coffeemaker.events.Event_Bus import GLOBAL_EVENT_BUS
from coffeemaker.events.event_helpers import publish_low_stock
from coffeemaker.utilities import config
from coffeemaker.utilities.constants import DEFAULT_UNITS, INGREDIENTS
from coffeemaker.utilities.validators import InventoryInput, format_errors, parse_amount

logger = logging.getLogger(__name__)


class Inventory:
    def __init__(self, coffee: int = DEFAULT_UNITS, milk: int = DEFAULT_UNITS,
                 sugar: int = DEFAULT_UNITS, chocolate: int = DEFAULT_UNITS):
        errors = [f"{label.lower()}: must be a non-negative integer, got {amount!r}"
                  for label, amount in zip(INGREDIENTS, (coffee, milk, sugar, chocolate))
                  if isinstance(amount, bool) or not isinstance(amount, int) or amount < 0]
        if errors:
            raise InventoryException("Starting stock must be non-negative integers", errors=errors)
        self.coffee = coffee
        self.milk = milk
        self.sugar = sugar
        self.chocolate = chocolate
        self._event_bus = GLOBAL_EVENT_BUS

    # --- Observer helpers -------------------------------------------------
    def set_event_bus(self, bus):
        self._event_bus = bus
        return self

    def _notify_low_stock(self, recipe: Recipe):
        # Only ingredients the recipe consumed can have crossed the threshold
        threshold = config.LOW_STOCK_THRESHOLD
        used = (recipe.get_amt_coffee(), recipe.get_amt_milk(),
                recipe.get_amt_sugar(), recipe.get_amt_chocolate())
        for (label, remaining), amount in zip(self.to_dict().items(), used):
            if amount > 0 and remaining <= threshold:
                publish_low_stock(label, remaining, threshold, bus=self._event_bus)

    # --- Accessors ---------------------------------------------------------
    def get_coffee(self) -> int: return self.coffee
    def get_milk(self) -> int: return self.milk
    def get_sugar(self) -> int: return self.sugar
    def get_chocolate(self) -> int: return self.chocolate

    # --- Restocking --------------------------------------------------------
    def add_stock(self, coffee, milk, sugar, chocolate):
        '''
        Adds all four quantities, given as text. Either every quantity is
        valid and all are added, or InventoryException is raised and nothing
        changes.
        '''
        try:
            data = InventoryInput(coffee=coffee, milk=milk, sugar=sugar, chocolate=chocolate)
        except ValidationError as e:
            errors = format_errors(e)
            logger.warning(f"Rejected inventory addition: {errors}")
            raise InventoryException("Units must be non-negative integers", errors=errors) from e
        self.coffee += data.coffee
        self.milk += data.milk
        self.sugar += data.sugar
        self.chocolate += data.chocolate
        logger.info(f"Stock added: coffee={data.coffee}, milk={data.milk}, "
                    f"sugar={data.sugar}, chocolate={data.chocolate}")

    def _parse(self, text, field: str) -> int:
        try:
            return parse_amount(text, field)
        except ValueError as e:
            logger.warning(f"Rejected {field} addition: {e}")
            raise InventoryException(f"Units of {field} must be a non-negative integer",
                                     errors=[str(e)]) from e

    def add_coffee(self, coffee):
        self.coffee += self._parse(coffee, "coffee")

    def add_milk(self, milk):
        self.milk += self._parse(milk, "milk")

    def add_sugar(self, sugar):
        self.sugar += self._parse(sugar, "sugar")

    def add_chocolate(self, chocolate):
        self.chocolate += self._parse(chocolate, "chocolate")

    # --- Consumption -------------------------------------------------------
    def has_enough(self, recipe: Recipe) -> bool:
        """Return True if every ingredient of the recipe is in stock."""
        return (recipe.get_amt_coffee() <= self.coffee
                and recipe.get_amt_milk() <= self.milk
                and recipe.get_amt_sugar() <= self.sugar
                and recipe.get_amt_chocolate() <= self.chocolate)

    def deduct(self, recipe: Recipe) -> bool:
        """Consume the recipe's ingredients if sufficient; returns False and leaves stock alone otherwise."""
        if not self.has_enough(recipe):
            logger.debug(f"Not enough stock for '{recipe.get_name()}'")
            return False
        self.coffee -= recipe.get_amt_coffee()
        self.milk -= recipe.get_amt_milk()
        self.sugar -= recipe.get_amt_sugar()
        self.chocolate -= recipe.get_amt_chocolate()
        self._notify_low_stock(recipe)
        return True

    # --- Reporting ---------------------------------------------------------
    def to_dict(self) -> Dict[str, int]:
        '''Structured snapshot in fixed order: Coffee, Milk, Sugar, Chocolate.'''
        return dict(zip(INGREDIENTS, (self.coffee, self.milk, self.sugar, self.chocolate)))

    def report(self) -> str:
        return "".join(f"{label}: {amount}\n" for label, amount in self.to_dict().items())

    def __str__(self) -> str:
        return self.report()

    def __repr__(self) -> str:
        return f"Inventory({self.to_dict()})"
