"""Domain exceptions raised for malformed input data.

Declined operations (bad slot, too little money, not enough stock) are not
errors and never raise; they are reported through return values.
"""
from typing import List, Optional


class ErrorCodes:
    """Centralized error code constants"""
    INVALID_RECIPE = "INVALID_RECIPE"
    RECIPE_LOCKED = "RECIPE_LOCKED"
    INVALID_INVENTORY = "INVALID_INVENTORY"
    INVALID_PAYMENT = "INVALID_PAYMENT"


class CoffeeMakerError(Exception):
    """Base exception for coffee maker operations."""
    def __init__(
        self,
        message: str,
        errors: Optional[List[str]] = None,
        code: Optional[str] = None
    ):
        super().__init__(message)
        self.message = message
        self.errors = errors or []
        self.code = code

    def __str__(self):
        error_details = f" - Errors: {', '.join(self.errors)}" if self.errors else ""
        code_details = f" [Code: {self.code}]" if self.code else ""
        return f"{self.message}{error_details}{code_details}"


class RecipeException(CoffeeMakerError):
    """Raised when recipe fields fail validation."""
    def __init__(self, message: str = "Invalid recipe", errors: Optional[List[str]] = None,
                 code: str = ErrorCodes.INVALID_RECIPE):
        super().__init__(message=message, errors=errors or [message], code=code)


class InventoryException(CoffeeMakerError):
    """Raised when inventory quantities fail validation."""
    def __init__(self, message: str = "Invalid inventory quantity", errors: Optional[List[str]] = None):
        super().__init__(
            message=message,
            errors=errors or [message],
            code=ErrorCodes.INVALID_INVENTORY
        )


class PaymentException(CoffeeMakerError):
    """Raised when the amount paid is not a non-negative integer."""
    def __init__(self, message: str = "Invalid payment", errors: Optional[List[str]] = None):
        super().__init__(
            message=message,
            errors=errors or [message],
            code=ErrorCodes.INVALID_PAYMENT
        )
