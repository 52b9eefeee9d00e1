from threading import Thread
from unittest import mock
import unittest
from coffeemaker.domain.CoffeeMaker import CoffeeMaker
from coffeemaker.domain.Recipe import Recipe
from coffeemaker.domain.exceptions import InventoryException, PaymentException, RecipeException
from coffeemaker.events.Event_Bus import EventBus, BEVERAGE_DISPENSED, INVENTORY_LOW_STOCK
from coffeemaker.utilities import config

DEFAULT_REPORT = "Coffee: 15\nMilk: 15\nSugar: 15\nChocolate: 15\n"


def _recipe(name, chocolate, coffee, milk, sugar, price):
    recipe = Recipe()
    recipe.set_name(name)
    recipe.set_amt_chocolate(chocolate)
    recipe.set_amt_coffee(coffee)
    recipe.set_amt_milk(milk)
    recipe.set_amt_sugar(sugar)
    recipe.set_price(price)
    return recipe


class TestCoffeeMaker(unittest.TestCase):

    def setUp(self):
        self.bus = EventBus()
        self.coffee_maker = CoffeeMaker().set_event_bus(self.bus)
        self.dispensed = []
        self.bus.subscribe(BEVERAGE_DISPENSED, lambda name, payload: self.dispensed.append(payload))

        self.recipe1 = _recipe("Coffee", "0", "3", "1", "1", "50")
        self.recipe2 = _recipe("Mocha", "20", "3", "1", "1", "75")
        self.recipe3 = _recipe("Latte", "0", "3", "3", "1", "100")
        self.recipe4 = _recipe("Hot Chocolate", "4", "0", "1", "1", "65")

    # --- Add inventory ----------------------------------------------------
    def test_add_inventory(self):
        self.coffee_maker.add_inventory("4", "7", "0", "9")
        self.assertEqual(self.coffee_maker.check_inventory(),
                         "Coffee: 19\nMilk: 22\nSugar: 15\nChocolate: 24\n")

    def test_add_inventory_exception(self):
        with self.assertRaises(InventoryException):
            self.coffee_maker.add_inventory("4", "-1", "asdf", "3")
        self.assertEqual(self.coffee_maker.check_inventory(), DEFAULT_REPORT)

    def test_add_inventory_negative_each(self):
        for args in (("-4", "1", "1", "3"), ("4", "-1", "1", "3"),
                     ("4", "1", "-1", "3"), ("4", "1", "1", "-3")):
            with self.assertRaises(InventoryException):
                self.coffee_maker.add_inventory(*args)
        self.assertEqual(self.coffee_maker.check_inventory(), DEFAULT_REPORT)

    def test_check_inventory(self):
        self.assertEqual(self.coffee_maker.check_inventory(), DEFAULT_REPORT)

    # --- Recipes ----------------------------------------------------------
    def test_add_recipe(self):
        self.assertTrue(self.coffee_maker.add_recipe(self.recipe1))

    def test_add_fourth_recipe(self):
        self.coffee_maker.add_recipe(self.recipe1)
        self.coffee_maker.add_recipe(self.recipe2)
        self.coffee_maker.add_recipe(self.recipe3)
        self.assertFalse(self.coffee_maker.add_recipe(self.recipe4))
        self.assertNotIn(self.recipe4, self.coffee_maker.get_recipes())

    def test_add_duplicate_recipe(self):
        self.coffee_maker.add_recipe(self.recipe1)
        self.assertFalse(self.coffee_maker.add_recipe(self.recipe1))

    def test_bad_recipe_never_reaches_catalog(self):
        with self.assertRaises(RecipeException):
            _recipe("Bad Latte", "-2", "-4", "-2", "-5", "-400")
        self.assertEqual(self.coffee_maker.get_recipes(), [None, None, None])

    def test_delete_recipe(self):
        self.coffee_maker.add_recipe(self.recipe1)
        self.coffee_maker.add_recipe(self.recipe2)
        self.assertEqual(self.coffee_maker.delete_recipe(0), "Coffee")
        self.assertIsNone(self.coffee_maker.get_recipes()[0])
        self.assertEqual(self.coffee_maker.get_recipes()[1], self.recipe2)

    def test_delete_recipe_invalid(self):
        self.assertIsNone(self.coffee_maker.delete_recipe(3))
        self.assertIsNone(self.coffee_maker.delete_recipe('a'))
        self.assertIsNone(self.coffee_maker.delete_recipe(0))

    def test_edit_recipe(self):
        self.coffee_maker.add_recipe(self.recipe1)
        self.assertEqual(self.coffee_maker.edit_recipe(0, self.recipe2), "Coffee")
        self.assertEqual(self.coffee_maker.get_recipes()[0], self.recipe2)

    def test_edit_recipe_invalid(self):
        self.assertIsNone(self.coffee_maker.edit_recipe(0, self.recipe1))
        self.coffee_maker.add_recipe(self.recipe1)
        self.assertIsNone(self.coffee_maker.edit_recipe('a', self.recipe2))
        self.assertEqual(self.coffee_maker.get_recipes()[0], self.recipe1)

    # --- Make coffee ------------------------------------------------------
    def test_make_coffee(self):
        self.coffee_maker.add_recipe(self.recipe1)
        self.assertEqual(self.coffee_maker.make_coffee(0, 75), 25)
        self.assertEqual(self.coffee_maker.check_inventory(),
                         "Coffee: 12\nMilk: 14\nSugar: 14\nChocolate: 15\n")
        self.assertEqual(self.dispensed, [{"recipe": "Coffee", "paid": 75, "change": 25}])

    def test_make_coffee_exact_payment(self):
        self.coffee_maker.add_recipe(self.recipe1)
        self.assertEqual(self.coffee_maker.make_coffee(0, 50), 0)
        self.assertEqual(self.coffee_maker.check_inventory(),
                         "Coffee: 12\nMilk: 14\nSugar: 14\nChocolate: 15\n")

    def test_make_coffee_bad_price(self):
        self.coffee_maker.add_recipe(self.recipe1)
        self.assertEqual(self.coffee_maker.make_coffee(0, 1), 1)
        self.assertEqual(self.coffee_maker.check_inventory(), DEFAULT_REPORT)
        self.assertEqual(self.dispensed, [])

    def test_make_coffee_bad_index(self):
        self.coffee_maker.add_recipe(self.recipe1)
        self.assertEqual(self.coffee_maker.make_coffee(45, 2), 2)
        self.assertEqual(self.coffee_maker.make_coffee(-1, 100), 100)
        self.assertEqual(self.coffee_maker.make_coffee(1, 100), 100)
        self.assertEqual(self.coffee_maker.check_inventory(), DEFAULT_REPORT)

    def test_make_coffee_empty_slot_after_delete(self):
        self.coffee_maker.add_recipe(self.recipe1)
        self.coffee_maker.delete_recipe(0)
        self.assertEqual(self.coffee_maker.make_coffee(0, 75), 75)

    def test_make_coffee_insufficient_inventory(self):
        self.coffee_maker.add_recipe(self.recipe2)
        self.assertEqual(self.coffee_maker.make_coffee(0, 100), 100)
        self.assertEqual(self.coffee_maker.check_inventory(), DEFAULT_REPORT)
        self.assertEqual(self.dispensed, [])

    def test_make_coffee_after_restock(self):
        self.coffee_maker.add_recipe(self.recipe2)
        self.coffee_maker.add_inventory("0", "0", "0", "5")
        self.assertEqual(self.coffee_maker.make_coffee(0, 100), 25)
        self.assertEqual(self.coffee_maker.check_inventory(),
                         "Coffee: 12\nMilk: 14\nSugar: 14\nChocolate: 0\n")

    def test_make_coffee_until_empty(self):
        self.coffee_maker.add_recipe(self.recipe1)
        changes = [self.coffee_maker.make_coffee(0, 60) for _ in range(6)]
        self.assertEqual(changes, [10, 10, 10, 10, 10, 60])
        self.assertEqual(self.coffee_maker.check_inventory(),
                         "Coffee: 0\nMilk: 10\nSugar: 10\nChocolate: 15\n")

    def test_concurrent_purchases_never_oversell(self):
        self.coffee_maker.add_recipe(self.recipe1)
        results = []

        def buy():
            results.append(self.coffee_maker.make_coffee(0, 50))

        threads = [Thread(target=buy) for _ in range(20)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        self.assertEqual(results.count(0), 5)
        self.assertEqual(results.count(50), 15)
        self.assertTrue(self.coffee_maker.check_inventory().startswith("Coffee: 0\n"))

    def test_make_coffee_invalid_payment(self):
        self.coffee_maker.add_recipe(self.recipe1)
        for paid in (-10, "75", 75.0, None, True):
            with self.assertRaises(PaymentException):
                self.coffee_maker.make_coffee(0, paid)
        with self.assertRaises(PaymentException):
            self.coffee_maker.make_coffee(45, -1)
        self.assertEqual(self.coffee_maker.check_inventory(), DEFAULT_REPORT)
        self.assertEqual(self.dispensed, [])

    def test_make_coffee_zero_payment(self):
        free = _recipe("Water", "0", "0", "0", "0", "0")
        self.coffee_maker.add_recipe(self.recipe1)
        self.coffee_maker.add_recipe(free)
        self.assertEqual(self.coffee_maker.make_coffee(0, 0), 0)
        self.assertEqual(self.coffee_maker.make_coffee(1, 0), 0)
        self.assertEqual(self.dispensed, [{"recipe": "Water", "paid": 0, "change": 0}])

    def test_listener_can_read_inventory_during_sale(self):
        reports = []
        self.bus.subscribe(INVENTORY_LOW_STOCK,
                           lambda name, payload: reports.append(self.coffee_maker.check_inventory()))
        self.coffee_maker.add_recipe(self.recipe1)
        with mock.patch.object(config, "LOW_STOCK_THRESHOLD", 12):
            self.assertEqual(self.coffee_maker.make_coffee(0, 50), 0)
        self.assertEqual(reports, ["Coffee: 12\nMilk: 14\nSugar: 14\nChocolate: 15\n"])
