from typing import Final

NUM_RECIPES: Final[int] = 3
DEFAULT_UNITS: Final[int] = 15
INGREDIENTS: Final[tuple[str, ...]] = ("Coffee", "Milk", "Sugar", "Chocolate")

# Event names published on the bus
INVENTORY_LOW_STOCK: Final[str] = "inventory.low_stock"
BEVERAGE_DISPENSED: Final[str] = "beverage.dispensed"
