"""Catalog and variant combination engine.

Provides the catalog registry, variant template resolution, combination
generation and the variant string encoding used for search and filters.
"""

from catalogcore.catalog.encoder import EncodeOptions, StoreFilterCriteria, VariantStringEncoder
from catalogcore.catalog.generator import CombinationGenerator, GeneratorConfig
from catalogcore.catalog.models import (
    Category,
    ColorOption,
    InputType,
    ProductCombination,
    ProductType,
    ProductVariant,
    Subcategory,
    VariantOption,
    VariantTemplate,
)
from catalogcore.catalog.registry import CatalogParser, CatalogRegistry
from catalogcore.catalog.resolver import VariantTemplateResolver
from catalogcore.catalog.service import (
    CatalogService,
    PaginatedResult,
    PaginationParams,
    get_catalog_service,
)

__all__ = [
    # Registry
    "CatalogParser",
    "CatalogRegistry",
    # Models
    "Category",
    "Subcategory",
    "ProductType",
    "InputType",
    "VariantOption",
    "ColorOption",
    "VariantTemplate",
    "ProductVariant",
    "ProductCombination",
    # Resolver
    "VariantTemplateResolver",
    # Encoder
    "EncodeOptions",
    "StoreFilterCriteria",
    "VariantStringEncoder",
    # Generator
    "GeneratorConfig",
    "CombinationGenerator",
    # Service
    "CatalogService",
    "PaginatedResult",
    "PaginationParams",
    "get_catalog_service",
]
