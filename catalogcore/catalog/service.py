"""Catalog service.

High-level facade that wires one catalog snapshot into the resolver,
encoder and generator. The API layer talks only to this service.
"""

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

import structlog

from catalogcore.catalog.encoder import EncodeOptions, VariantStringEncoder
from catalogcore.catalog.generator import CombinationGenerator, GeneratorConfig
from catalogcore.catalog.models import (
    Category,
    Price,
    ProductCombination,
    ProductType,
    ProductVariant,
    SelectionIssue,
    Subcategory,
    VariantTemplate,
)
from catalogcore.catalog.registry import CatalogParser, CatalogRegistry
from catalogcore.catalog.resolver import VariantTemplateResolver
from catalogcore.infrastructure.config import settings

T = TypeVar("T")

logger = structlog.get_logger()


@dataclass
class PaginationParams:
    """Pagination parameters.

    Attributes:
        page: Page number (1-indexed).
        page_size: Items per page.
    """

    page: int = 1
    page_size: int = 20

    @property
    def offset(self) -> int:
        """Calculate offset from page number."""
        return (self.page - 1) * self.page_size

    @property
    def limit(self) -> int:
        return self.page_size


@dataclass
class PaginatedResult(Generic[T]):
    """Paginated result container.

    Attributes:
        items: List of items.
        total: Total count.
        page: Current page.
        page_size: Items per page.
    """

    items: list[T]
    total: int
    page: int
    page_size: int

    @property
    def total_pages(self) -> int:
        """Calculate total pages."""
        return (self.total + self.page_size - 1) // self.page_size

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages


class CatalogService:
    """Service for catalog and variant operations.

    Example usage:
        service = CatalogService(CatalogParser().parse_embedded())

        templates = service.get_variant_templates(
            "fashion-apparel-mens-clothing-shirts-tops", recommended=True
        )
        combinations = service.generate_combinations(variants, 20, "SKU1")
    """

    def __init__(
        self,
        registry: CatalogRegistry,
        strict: bool = False,
        generator_config: GeneratorConfig | None = None,
    ) -> None:
        """Initialize service with a catalog snapshot.

        Args:
            registry: Catalog snapshot shared by all components.
            strict: Raise on stale or malformed references.
            generator_config: Combination generation config.
        """
        self.registry = registry
        self.resolver = VariantTemplateResolver(registry, strict=strict)
        self.encoder = VariantStringEncoder(registry, strict=strict)
        self.generator = CombinationGenerator(self.encoder, generator_config)

    # ------------------------------------------------------------------
    # Catalog browsing
    # ------------------------------------------------------------------

    def list_categories(self, query: str | None = None) -> list[Category]:
        """List categories, optionally filtered by a name query."""
        if query:
            return self.registry.search_categories(query)
        return self.registry.list_categories()

    def get_category(self, category_id: str) -> Category | None:
        return self.registry.get_category(category_id)

    def get_subcategory(self, category_id: str, subcategory_id: str) -> Subcategory | None:
        return self.registry.get_subcategory(category_id, subcategory_id)

    def list_product_types(
        self,
        category_id: str | None = None,
        subcategory_id: str | None = None,
        pagination: PaginationParams | None = None,
    ) -> PaginatedResult[ProductType]:
        """List product types with optional category filters.

        Args:
            category_id: Only product types of this category.
            subcategory_id: Only product types of this subcategory
                (requires ``category_id``).
            pagination: Pagination parameters.

        Returns:
            Page of product types.
        """
        pagination = pagination or PaginationParams()

        if category_id and subcategory_id:
            product_types = self.registry.list_product_types_by_subcategory(
                category_id, subcategory_id
            )
        elif category_id:
            product_types = self.registry.list_product_types_by_category(category_id)
        else:
            product_types = self.registry.list_product_types()

        return PaginatedResult(
            items=product_types[pagination.offset : pagination.offset + pagination.limit],
            total=len(product_types),
            page=pagination.page,
            page_size=pagination.page_size,
        )

    def get_product_type(self, product_type_id: str) -> ProductType | None:
        return self.registry.get_product_type(product_type_id)

    def list_variant_templates(self) -> list[VariantTemplate]:
        return self.registry.list_variant_templates()

    def get_variant_template(self, template_id: str) -> VariantTemplate | None:
        return self.registry.get_variant_template(template_id)

    def get_variant_templates(
        self, product_type_id: str, recommended: bool = False
    ) -> list[VariantTemplate]:
        """Get templates offered for a product type.

        Args:
            product_type_id: Composite product type id.
            recommended: Sort with the recommendation ordering.

        Returns:
            Applicable templates, empty for malformed or unknown ids.
        """
        if recommended:
            return self.resolver.get_recommended_variant_templates(product_type_id)
        return self.resolver.get_variant_templates_for_product_type(product_type_id)

    def check_template_selection(
        self, category_id: str, template_ids: Iterable[str]
    ) -> list[SelectionIssue]:
        return self.resolver.check_template_selection(category_id, template_ids)

    # ------------------------------------------------------------------
    # Combinations
    # ------------------------------------------------------------------

    def generate_combinations(
        self,
        variants: Sequence[ProductVariant],
        base_price: Price,
        base_sku: str,
        existing: Sequence[ProductCombination] | None = None,
        price_adjustment: Price = 0,
    ) -> list[ProductCombination]:
        """Generate combinations, optionally merging previously stored ones.

        Args:
            variants: Selected templates with their enabled options.
            base_price: Product base price.
            base_sku: Product base SKU.
            existing: Stored combinations whose SKU, price and quantity
                should survive regeneration.
            price_adjustment: Amount added to every resulting price.

        Returns:
            Generated combinations.
        """
        combinations = self.generator.generate_combinations(variants, base_price, base_sku)
        if existing:
            combinations = self.generator.merge_with_existing(combinations, existing)
        if price_adjustment:
            combinations = self.generator.bulk_adjust_prices(combinations, price_adjustment)

        logger.info(
            "Combinations generated",
            base_sku=base_sku,
            variants=len(variants),
            combinations=len(combinations),
            merged=bool(existing),
        )
        return combinations

    def filter_combinations(
        self,
        combinations: Iterable[ProductCombination],
        filters: Mapping[str, Iterable[str]],
    ) -> list[ProductCombination]:
        return self.generator.filter_combinations(combinations, filters)

    def get_unique_variant_values(
        self, combinations: Iterable[ProductCombination]
    ) -> dict[str, list[str]]:
        return self.generator.get_unique_variant_values(combinations)

    def encode_variants(
        self, variant_values: Mapping[str, str], options: EncodeOptions | None = None
    ) -> list[str]:
        return self.encoder.encode_variants_to_string_array(variant_values, options)


# ============================================================================
# Service Factory
# ============================================================================

# Global service instance
_catalog_service: CatalogService | None = None


def load_registry(data_path: str | None = None) -> CatalogRegistry:
    """Load a catalog snapshot from a JSON file, or the embedded seed.

    Args:
        data_path: Path to catalog JSON document, None for the seed.

    Returns:
        Catalog registry snapshot.
    """
    parser = CatalogParser()
    if data_path:
        return parser.parse_file(data_path)
    return parser.parse_embedded()


def get_catalog_service() -> CatalogService:
    """Get catalog service singleton built from settings."""
    global _catalog_service
    if _catalog_service is None:
        _catalog_service = CatalogService(
            load_registry(settings.catalog_data_path),
            strict=settings.strict_variant_references,
            generator_config=GeneratorConfig.with_max_length(settings.variant_string_max_length),
        )
    return _catalog_service


def reset_catalog_service() -> None:
    """Drop the singleton so the next call reloads the catalog."""
    global _catalog_service
    _catalog_service = None
