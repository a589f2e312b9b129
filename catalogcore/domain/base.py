"""Base classes for domain layer.

Provides the value object abstraction shared by every catalog type.
"""

from abc import ABC
from dataclasses import dataclass


@dataclass(frozen=True)
class ValueObject(ABC):
    """Base class for value objects.

    Value objects are immutable and compared by their attributes,
    not by identity. They have no lifecycle and are interchangeable
    when their values are equal.

    Example:
        @dataclass(frozen=True)
        class ProductTypeKey(ValueObject):
            category_id: str
            subcategory_id: str
            slug: str
    """

    pass
