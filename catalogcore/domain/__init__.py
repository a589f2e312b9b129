"""Domain layer - value object base and catalog exceptions."""

from catalogcore.domain.base import ValueObject
from catalogcore.domain.exceptions import (
    CatalogError,
    CatalogLoadError,
    DomainError,
    InvalidProductTypeIdError,
    MultipleDefaultOptionsError,
    ProductTypeNotFoundError,
    UnknownVariantOptionError,
    UnknownVariantTemplateError,
)

__all__ = [
    "ValueObject",
    "DomainError",
    "CatalogError",
    "CatalogLoadError",
    "InvalidProductTypeIdError",
    "ProductTypeNotFoundError",
    "UnknownVariantTemplateError",
    "UnknownVariantOptionError",
    "MultipleDefaultOptionsError",
]
