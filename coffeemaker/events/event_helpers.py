"""Event helper utilities.

Small wrappers that build the payloads for dispenser events so publishers
and listeners agree on their shape.

Quick import:
    from coffeemaker.events.event_helpers import (
        publish_low_stock, publish_beverage_dispensed,
        INVENTORY_LOW_STOCK, BEVERAGE_DISPENSED
    )
"""
from __future__ import annotations
from typing import Optional
from .Event_Bus import (
    EventBus, GLOBAL_EVENT_BUS, INVENTORY_LOW_STOCK, BEVERAGE_DISPENSED
)

__all__ = [
    'publish_low_stock', 'publish_beverage_dispensed',
    'INVENTORY_LOW_STOCK', 'BEVERAGE_DISPENSED'
]


def publish_low_stock(ingredient: str, remaining: int, threshold: int,
                      bus: Optional[EventBus] = None):
    """Publish an inventory.low_stock event."""
    (bus or GLOBAL_EVENT_BUS).publish(INVENTORY_LOW_STOCK, {
        'ingredient': ingredient,
        'remaining': remaining,
        'threshold': threshold
    })


def publish_beverage_dispensed(recipe: str, paid: int, change: int,
                               bus: Optional[EventBus] = None):
    """Publish a beverage.dispensed event."""
    (bus or GLOBAL_EVENT_BUS).publish(BEVERAGE_DISPENSED, {
        'recipe': recipe,
        'paid': paid,
        'change': change
    })
