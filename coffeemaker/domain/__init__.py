"""Dispenser domain layer.

Modules:
- Recipe: validated recipe value object
- Inventory: ingredient stock
- RecipeBook: fixed slots of recipes
- CoffeeMaker: recipe management and the purchase operation
- exceptions: RecipeException / InventoryException
"""
__all__ = ["Recipe", "Inventory", "RecipeBook", "CoffeeMaker", "exceptions"]
