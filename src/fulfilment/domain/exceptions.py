"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.

Each failure kind is its own class and keeps the values that caused it
(ids, requested vs. available quantities, limits) as attributes, so callers
can build their own responses without parsing the message.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class ConflictError(DomainException):
    """The request clashes with the current state of an entity."""


# --- Allocation ledger --------------------------------------------------------


class InvalidQuantityError(ValidationError):

    def __init__(self, quantity: object) -> None:
        self.quantity = quantity
        super().__init__(f"Quantity must be a positive integer, got {quantity!r}")


class InsufficientStockError(ValidationError):

    def __init__(self, product_id: str, product_name: str, requested: int, available: int) -> None:
        self.product_id = product_id
        self.product_name = product_name
        self.requested = requested
        self.available = available
        super().__init__(
            f"Insufficient stock for '{product_name}' "
            f"(need {requested}, have {available} available)"
        )


class CapacityExceededError(ValidationError):

    def __init__(self, business_unit_code: str, occupancy: int, capacity: int) -> None:
        self.business_unit_code = business_unit_code
        self.occupancy = occupancy
        self.capacity = capacity
        super().__init__(
            f"Total product quantity ({occupancy}) exceeds capacity ({capacity}) "
            f"of warehouse '{business_unit_code}'"
        )


class AllocationNotFoundError(EntityNotFoundError):

    def __init__(self, container: str, product_id: str) -> None:
        self.container = container
        self.product_id = product_id
        super().__init__(
            f"No allocation of product '{product_id}' exists in {container}"
        )


class ContainerArchivedError(ConflictError):

    def __init__(self, business_unit_code: str) -> None:
        self.business_unit_code = business_unit_code
        super().__init__(f"Warehouse '{business_unit_code}' is archived")


# --- Warehouse lifecycle ------------------------------------------------------


class WarehouseNotFoundError(EntityNotFoundError):

    def __init__(self, business_unit_code: str) -> None:
        self.business_unit_code = business_unit_code
        super().__init__(f"Warehouse '{business_unit_code}' does not exist")


class DuplicateCodeError(ConflictError):

    def __init__(self, business_unit_code: str) -> None:
        self.business_unit_code = business_unit_code
        super().__init__(f"Warehouse '{business_unit_code}' already exists")


class InvalidLocationError(ValidationError):

    def __init__(self, location: str) -> None:
        self.location = location
        super().__init__(f"Location '{location}' is not valid")


class CapacityOutOfRangeError(ValidationError):

    def __init__(self, location: str, capacity: int, max_capacity: int) -> None:
        self.location = location
        self.capacity = capacity
        self.max_capacity = max_capacity
        super().__init__(
            f"Capacity {capacity} exceeds location max capacity "
            f"{max_capacity} for '{location}'"
        )


class StockExceedsCapacityError(ValidationError):

    def __init__(self, stock: int, capacity: int) -> None:
        self.stock = stock
        self.capacity = capacity
        super().__init__(f"Stock {stock} exceeds warehouse capacity {capacity}")


class AlreadyArchivedError(ConflictError):

    def __init__(self, business_unit_code: str) -> None:
        self.business_unit_code = business_unit_code
        super().__init__(f"Warehouse '{business_unit_code}' is already archived")


class ConcurrentModificationError(ConflictError):

    def __init__(self, business_unit_code: str, expected_version: int, actual_version: int) -> None:
        self.business_unit_code = business_unit_code
        self.expected_version = expected_version
        self.actual_version = actual_version
        super().__init__(
            f"Warehouse '{business_unit_code}' was modified by another request "
            f"(expected version {expected_version}, found {actual_version}); "
            f"reload and try again"
        )


# --- Warehouse search ---------------------------------------------------------


class InvalidSortError(ValidationError):

    def __init__(self, field: str, value: object, allowed: tuple[str, ...]) -> None:
        self.field = field
        self.value = value
        self.allowed = allowed
        options = " or ".join(f"'{a}'" for a in allowed)
        super().__init__(f"{field} must be either {options}, got {value!r}")


class InvalidPageError(ValidationError):

    def __init__(self, page: int) -> None:
        self.page = page
        super().__init__(f"page must be >= 0, got {page}")


class InvalidPageSizeError(ValidationError):

    def __init__(self, page_size: int, maximum: int) -> None:
        self.page_size = page_size
        self.maximum = maximum
        super().__init__(f"pageSize must be between 1 and {maximum}, got {page_size}")


class InvalidRangeError(ValidationError):

    def __init__(self, min_capacity: int | None, max_capacity: int | None) -> None:
        self.min_capacity = min_capacity
        self.max_capacity = max_capacity
        super().__init__(
            f"Invalid capacity range: minCapacity={min_capacity}, maxCapacity={max_capacity}"
        )


# --- Catalogue and stores -----------------------------------------------------


class ProductNotFoundError(EntityNotFoundError):

    def __init__(self, product_id: str) -> None:
        self.product_id = product_id
        super().__init__(f"Product with id '{product_id}' does not exist")


class StoreNotFoundError(EntityNotFoundError):

    def __init__(self, store_id: str) -> None:
        self.store_id = store_id
        super().__init__(f"Store with id '{store_id}' does not exist")


class DuplicateNameError(ConflictError):

    def __init__(self, kind: str, name: str) -> None:
        self.kind = kind
        self.name = name
        super().__init__(f"{kind} '{name}' already exists")


class ProductInUseError(ConflictError):

    def __init__(self, product_id: str, allocated: int) -> None:
        self.product_id = product_id
        self.allocated = allocated
        super().__init__(
            f"Product '{product_id}' still has {allocated} unit(s) allocated to containers"
        )
