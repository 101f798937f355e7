"""Application-level exceptions.

Repository failures are not raised: they are carried inside a `Failure`
(see `warehouse.core.result`) and translated into reports by the manager.
"""


class AppException(Exception):
    """Base application exception."""

    def __init__(self, message: str, code: str = "INTERNAL_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)

class DuplicateKeyError(AppException):
    def __init__(self, item_id: int):
        self.item_id = item_id
        super().__init__(f"Item with ID {item_id} already exists.", code="DUPLICATE_KEY")

class NotFoundError(AppException):
    def __init__(self, item_id: int, action: str | None = None):
        self.item_id = item_id
        msg = f"Item with ID {item_id} not found."
        if action:
            msg = f"Cannot {action}: item with ID {item_id} not found."
        super().__init__(msg, code="NOT_FOUND")

class InvalidQuantityError(AppException):
    def __init__(self, message: str = "Quantity cannot be negative."):
        super().__init__(message, code="INVALID_QUANTITY")

class UnexpectedError(AppException):
    """Wraps any exception that does not belong to a known error kind."""

    def __init__(self, cause: Exception):
        self.cause = cause
        super().__init__(str(cause) or type(cause).__name__, code="INTERNAL_ERROR")
