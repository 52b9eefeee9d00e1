"""CoffeeMaker: the dispenser that ties the recipe book, the inventory and payment together.

Every mutating operation holds one (re-entrant) lock for its whole duration, so the
check-then-deduct sequence in make_coffee is atomic.

A declined purchase hands the payment straight back: make_coffee returns
the full amount paid and changes nothing. There is no separate error for
it, the same as coins dropping into the return tray.
"""
import logging
from threading import RLock
from typing import List, Optional

from coffeemaker.domain.exceptions import PaymentException
from coffeemaker.domain.Inventory import Inventory
from coffeemaker.domain.Recipe import Recipe
from coffeemaker.domain.RecipeBook import RecipeBook
from coffeemaker.events.Event_Bus import GLOBAL_EVENT_BUS
from coffeemaker.events.event_helpers import publish_beverage_dispensed

logger = logging.getLogger(__name__)


class CoffeeMaker:
    def __init__(self, recipe_book: Optional[RecipeBook] = None, inventory: Optional[Inventory] = None):
        self.recipe_book = recipe_book if recipe_book is not None else RecipeBook()
        self.inventory = inventory if inventory is not None else Inventory()
        self._event_bus = GLOBAL_EVENT_BUS
        self._lock = RLock()

    def set_event_bus(self, bus):
        self._event_bus = bus
        self.inventory.set_event_bus(bus)
        return self

    # --- Recipe management ---------------------------------------------
    def add_recipe(self, recipe: Recipe) -> bool:
        with self._lock:
            return self.recipe_book.add_recipe(recipe)

    def delete_recipe(self, index) -> Optional[str]:
        with self._lock:
            return self.recipe_book.delete_recipe(index)

    def edit_recipe(self, index, new_recipe: Recipe) -> Optional[str]:
        with self._lock:
            return self.recipe_book.edit_recipe(index, new_recipe)

    def get_recipes(self) -> List[Optional[Recipe]]:
        with self._lock:
            return self.recipe_book.get_recipes()

    # --- Inventory ---------------------------------------------------------
    def add_inventory(self, amt_coffee, amt_milk, amt_sugar, amt_chocolate):
        """Restock from text quantities; raises InventoryException on bad input."""
        with self._lock:
            self.inventory.add_stock(amt_coffee, amt_milk, amt_sugar, amt_chocolate)

    def check_inventory(self) -> str:
        with self._lock:
            return self.inventory.report()

    # --- Purchase ----------------------------------------------------------
    def make_coffee(self, recipe_to_purchase, amt_paid: int) -> int:
        """Sell the recipe in the given slot.

        Returns the change (amt_paid - price) on success. If the slot is
        invalid or empty, the payment is short, or the inventory cannot
        cover the recipe, returns amt_paid unchanged and touches nothing.
        A payment that is not a non-negative int raises PaymentException.
        """
        if isinstance(amt_paid, bool) or not isinstance(amt_paid, int) or amt_paid < 0:
            logger.warning(f"Rejected payment {amt_paid!r}")
            raise PaymentException(f"Payment must be a non-negative integer, got {amt_paid!r}")
        with self._lock:
            recipe = self.recipe_book.get_recipe(recipe_to_purchase)
            if recipe is None:
                logger.debug(f"No recipe in slot {recipe_to_purchase!r}; returning {amt_paid}")
                return amt_paid
            if amt_paid < recipe.get_price():
                logger.debug(f"Insufficient payment {amt_paid} for '{recipe.get_name()}' "
                             f"(price {recipe.get_price()})")
                return amt_paid
            if not self.inventory.deduct(recipe):
                logger.debug(f"Insufficient inventory for '{recipe.get_name()}'; returning {amt_paid}")
                return amt_paid
            change = amt_paid - recipe.get_price()
            logger.info(f"Dispensed '{recipe.get_name()}', paid {amt_paid}, change {change}")
        publish_beverage_dispensed(recipe.get_name(), amt_paid, change, bus=self._event_bus)
        return change
