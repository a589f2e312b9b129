"""Domain exceptions.

Catalog operations degrade to empty results instead of raising. These
exceptions are raised only when a catalog snapshot is invalid at load
time, or when a caller opts into strict reference checking.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain exceptions.

    All domain errors should inherit from this class to allow
    catching domain-specific errors at the application layer.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize domain error.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional error context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


# ============================================================================
# Catalog Errors
# ============================================================================


class CatalogError(DomainError):
    """Base class for catalog-related errors."""

    pass


class CatalogLoadError(CatalogError):
    """Raised when a catalog document cannot be turned into a snapshot."""

    def __init__(self, reason: str, source: str | None = None) -> None:
        """Initialize catalog load error.

        Args:
            reason: What was wrong with the document.
            source: File path or other origin of the document.
        """
        super().__init__(
            f"Cannot load catalog{f' from {source}' if source else ''}: {reason}",
            details={"reason": reason, "source": source},
        )


class InvalidProductTypeIdError(CatalogError):
    """Raised in strict mode for a product type id without three segments."""

    def __init__(self, product_type_id: str) -> None:
        super().__init__(
            f"Invalid product type id '{product_type_id}': expected "
            "'<category>-<subcategory>-<product-type>'",
            details={"product_type_id": product_type_id},
        )


class ProductTypeNotFoundError(CatalogError):
    """Raised in strict mode when a product type is not in the catalog."""

    def __init__(self, product_type_id: str) -> None:
        super().__init__(
            f"Product type {product_type_id} not found",
            details={"product_type_id": product_type_id},
        )


class UnknownVariantTemplateError(CatalogError):
    """Raised in strict mode when a variant template reference is stale."""

    def __init__(self, template_id: str) -> None:
        super().__init__(
            f"Variant template {template_id} not found",
            details={"template_id": template_id},
        )


class UnknownVariantOptionError(CatalogError):
    """Raised in strict mode when a template has no option with the value."""

    def __init__(self, template_id: str, value: str) -> None:
        super().__init__(
            f"Variant template {template_id} has no option '{value}'",
            details={"template_id": template_id, "value": value},
        )


class MultipleDefaultOptionsError(CatalogError):
    """Raised when a single-select template marks more than one default."""

    def __init__(self, template_id: str, default_values: list[str]) -> None:
        """Initialize multiple default options error.

        Args:
            template_id: Template being constructed.
            default_values: Values of all options flagged as default.
        """
        super().__init__(
            f"Variant template {template_id} has {len(default_values)} default "
            f"options {default_values}; at most one is allowed",
            details={"template_id": template_id, "default_values": default_values},
        )
