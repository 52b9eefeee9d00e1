"""Simple Event Bus / Observer implementation for dispenser notifications.

Event names:
  inventory.low_stock -> payload {"ingredient": str, "remaining": int, "threshold": int}
  beverage.dispensed -> payload {"recipe": str, "paid": int, "change": int}

Subscribers are callables taking (event_name, payload).
"""
from __future__ import annotations
import logging
from collections import defaultdict
from typing import Callable, Any, Dict, List

from coffeemaker.utilities.constants import INVENTORY_LOW_STOCK, BEVERAGE_DISPENSED

logger = logging.getLogger(__name__)


class EventBus:
	def __init__(self):
		self._subscribers: Dict[str, List[Callable[[str, Any], None]]] = defaultdict(list)

	def subscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		if callback not in self._subscribers[event_name]:
			self._subscribers[event_name].append(callback)

	def unsubscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		try:
			self._subscribers[event_name].remove(callback)
		except (ValueError, KeyError):
			pass

	def publish(self, event_name: str, payload: Any):
		# A failing listener must not undo a completed sale
		for cb in list(self._subscribers.get(event_name, [])):
			try:
				cb(event_name, payload)
			except Exception:
				logger.exception("Error delivering %s to %r", event_name, cb)

	def subscriber_count(self, event_name: str) -> int:
		return len(self._subscribers.get(event_name, []))


# A singleton-like instance (can be imported)
GLOBAL_EVENT_BUS = EventBus()


__all__ = [
	'EventBus', 'GLOBAL_EVENT_BUS', 'INVENTORY_LOW_STOCK', 'BEVERAGE_DISPENSED'
]
