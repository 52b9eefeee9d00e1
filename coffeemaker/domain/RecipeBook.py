"""RecipeBook aggregate: a fixed number of recipe slots.

Slots keep their index for the life of the book. Deleting a recipe leaves
an empty slot (None) behind instead of shifting later recipes down.
"""
import logging
from typing import List, Optional

from coffeemaker.domain.exceptions import RecipeException
from coffeemaker.domain.Recipe import Recipe
from coffeemaker.utilities.constants import NUM_RECIPES

logger = logging.getLogger(__name__)


class RecipeBook:
    def __init__(self, capacity: int = NUM_RECIPES):
        self._slots: List[Optional[Recipe]] = [None] * capacity

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def _valid_index(self, index) -> bool:
        # bool is an int subclass; True/False are not slot numbers
        return (isinstance(index, int) and not isinstance(index, bool)
                and 0 <= index < len(self._slots))

    def _find(self, name: str) -> Optional[int]:
        for i, recipe in enumerate(self._slots):
            if recipe is not None and recipe.get_name() == name:
                return i
        return None

    def get_recipes(self) -> List[Optional[Recipe]]:
        '''
        Returns a snapshot of the slots; empty slots are None.
        '''
        return list(self._slots)

    def get_recipe(self, index) -> Optional[Recipe]:
        if not self._valid_index(index):
            return None
        return self._slots[index]

    def add_recipe(self, recipe: Recipe) -> bool:
        '''
        Places the recipe in the first empty slot. Returns False if the book
        is full or a recipe with the same name is already present.
        '''
        if not recipe.has_name():
            raise RecipeException("Recipe must have a name before it can be added")
        if self._find(recipe.get_name()) is not None:
            logger.debug(f"Recipe '{recipe.get_name()}' already exists")
            return False
        for i, slot in enumerate(self._slots):
            if slot is None:
                self._slots[i] = recipe.lock()
                logger.info(f"Recipe '{recipe.get_name()}' added to slot {i}")
                return True
        logger.debug(f"No empty slot for recipe '{recipe.get_name()}'")
        return False

    def delete_recipe(self, index) -> Optional[str]:
        '''
        Empties the slot and returns the name of the removed recipe, or None
        if the index is invalid or the slot is already empty.
        '''
        recipe = self.get_recipe(index)
        if recipe is None:
            return None
        self._slots[index] = None
        logger.info(f"Recipe '{recipe.get_name()}' deleted from slot {index}")
        return recipe.get_name()

    def edit_recipe(self, index, new_recipe: Recipe) -> Optional[str]:
        '''
        Replaces the recipe in the slot and returns the replaced name. Returns
        None if the index is invalid, the slot is empty, or another slot
        already holds a recipe with the new name.
        '''
        old = self.get_recipe(index)
        if old is None:
            return None
        if not new_recipe.has_name():
            raise RecipeException("Recipe must have a name before it can be added")
        holder = self._find(new_recipe.get_name())
        if holder is not None and holder != index:
            logger.debug(f"Recipe '{new_recipe.get_name()}' already exists in slot {holder}")
            return None
        self._slots[index] = new_recipe.lock()
        logger.info(f"Recipe '{old.get_name()}' in slot {index} replaced by '{new_recipe.get_name()}'")
        return old.get_name()

    def __str__(self) -> str:
        slots_str = ",\n\t".join(str(r) if r is not None else "-" for r in self._slots)
        return f"Recipes:\n\t{slots_str}"

    def __repr__(self) -> str:
        return self.__str__()
