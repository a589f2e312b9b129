"""Catalog registry and parser.

The catalog is a three-level tree (category > subcategory > product type)
plus a set of variant templates and the static mapping from product types
to templates. ``CatalogParser`` turns a raw catalog document into an
immutable ``CatalogRegistry`` snapshot that is built once and shared.

Document format example:
    {
        "categories": [{"id": "fashion-apparel", "name": "...",
                        "subcategories": [{"id": "shoes", "name": "...",
                                           "productTypes": ["boots"]}]}],
        "variantTemplates": {"color": {"id": "color", "inputType": "color",
                                       "options": [...]}},
        "productTypeVariantMapping": {"fashion-apparel": {"boots": ["color"]}}
    }
"""

import json
import math
from collections.abc import Iterable, Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

import structlog

from catalogcore.catalog.models import (
    Category,
    CompatibilityRule,
    InputType,
    ProductType,
    ProductTypeKey,
    Subcategory,
    VariantOption,
    VariantTemplate,
)
from catalogcore.catalog.seed_data import EMBEDDED_CATALOG
from catalogcore.domain.exceptions import CatalogLoadError

logger = structlog.get_logger()

DEFAULT_GROUP = "Other"

# Substring of a template id -> display unit for range templates
RANGE_UNITS: tuple[tuple[str, str], ...] = (
    ("spf", "SPF"),
    ("volume", "ml"),
    ("battery", "hours"),
    ("weight", "lbs"),
)


# ============================================================================
# Registry
# ============================================================================


class CatalogRegistry:
    """Read-only catalog snapshot.

    All collections are tuples or read-only mappings of frozen dataclasses,
    so a single instance can be shared by concurrent callers.

    Example usage:
        registry = CatalogParser().parse_embedded()
        shoes = registry.get_subcategory("fashion-apparel", "shoes")
        boots = registry.get_product_type("fashion-apparel-shoes-boots")
    """

    def __init__(
        self,
        categories: Iterable[Category],
        variant_templates: Iterable[VariantTemplate],
        product_type_variant_mapping: Mapping[str, Mapping[str, Iterable[str]]],
        required_variants_by_category: Mapping[str, Iterable[str]] | None = None,
        compatibility_matrix: Mapping[str, CompatibilityRule] | None = None,
    ) -> None:
        """Initialize registry from already-parsed catalog parts.

        Args:
            categories: Categories in seed order.
            variant_templates: Variant templates with derived fields set.
            product_type_variant_mapping: category id -> slug -> template ids.
            required_variants_by_category: category id -> template ids.
            compatibility_matrix: template id -> compatibility rule.
        """
        self._categories: tuple[Category, ...] = tuple(categories)
        self._templates: Mapping[str, VariantTemplate] = MappingProxyType(
            {template.id: template for template in variant_templates}
        )
        self._mapping: Mapping[str, Mapping[str, tuple[str, ...]]] = MappingProxyType(
            {
                category_id: MappingProxyType(
                    {slug: tuple(ids) for slug, ids in by_slug.items()}
                )
                for category_id, by_slug in product_type_variant_mapping.items()
            }
        )
        self._required_by_category: Mapping[str, tuple[str, ...]] = MappingProxyType(
            {
                category_id: tuple(ids)
                for category_id, ids in (required_variants_by_category or {}).items()
            }
        )
        self._compatibility: Mapping[str, CompatibilityRule] = MappingProxyType(
            dict(compatibility_matrix or {})
        )
        self._product_types: Mapping[str, ProductType] = MappingProxyType(
            {product_type.id: product_type for product_type in self._build_product_types()}
        )
        # Longest ids first so hyphenated ids win over their own prefixes
        self._category_prefixes: tuple[Category, ...] = tuple(
            sorted(self._categories, key=lambda c: len(c.id), reverse=True)
        )

    def _build_product_types(self) -> Iterable[ProductType]:
        for category in self._categories:
            for subcategory in category.subcategories:
                for slug in subcategory.product_types:
                    yield ProductType(
                        id=f"{category.id}-{subcategory.id}-{slug}",
                        name=format_product_type_name(slug),
                        description=f"{subcategory.name} product type",
                        category_id=category.id,
                        subcategory_id=subcategory.id,
                        slug=slug,
                        default_variant_templates=self.mapped_template_ids(category.id, slug),
                    )

    # ------------------------------------------------------------------
    # Categories
    # ------------------------------------------------------------------

    def list_categories(self) -> list[Category]:
        """Get all categories in seed order.

        Returns:
            List of categories with nested subcategories.
        """
        return list(self._categories)

    def get_category(self, category_id: str) -> Category | None:
        """Get category by ID.

        Args:
            category_id: Category ID.

        Returns:
            Category if found, None otherwise.
        """
        for category in self._categories:
            if category.id == category_id:
                return category
        return None

    def get_subcategory(self, category_id: str, subcategory_id: str) -> Subcategory | None:
        """Get subcategory by category and subcategory ID.

        Args:
            category_id: Category ID.
            subcategory_id: Subcategory ID.

        Returns:
            Subcategory if found, None otherwise.
        """
        category = self.get_category(category_id)
        if category is None:
            return None
        return category.get_subcategory(subcategory_id)

    def search_categories(self, query: str) -> list[Category]:
        """Search categories by name (case-insensitive).

        A category matches when the query appears in its own name, in one
        of its subcategory names, or in one of its product type names.

        Args:
            query: Search query.

        Returns:
            List of matching categories.
        """
        query_lower = query.lower()
        results = []
        for category in self._categories:
            names = [category.name]
            for subcategory in category.subcategories:
                names.append(subcategory.name)
                names.extend(format_product_type_name(slug) for slug in subcategory.product_types)
            if any(query_lower in name.lower() for name in names):
                results.append(category)
        return results

    # ------------------------------------------------------------------
    # Product types
    # ------------------------------------------------------------------

    def list_product_types(self) -> list[ProductType]:
        """Get all product types flattened across the tree.

        Returns:
            List of product types in seed order.
        """
        return list(self._product_types.values())

    def list_product_types_by_category(self, category_id: str) -> list[ProductType]:
        return [pt for pt in self._product_types.values() if pt.category_id == category_id]

    def list_product_types_by_subcategory(
        self, category_id: str, subcategory_id: str
    ) -> list[ProductType]:
        return [
            pt
            for pt in self._product_types.values()
            if pt.category_id == category_id and pt.subcategory_id == subcategory_id
        ]

    def get_product_type(self, product_type_id: str) -> ProductType | None:
        return self._product_types.get(product_type_id)

    def parse_product_type_id(self, product_type_id: str) -> ProductTypeKey | None:
        """Split a product type id into category, subcategory and slug.

        Known ``category-subcategory-`` prefixes are matched first because
        catalog ids may contain hyphens themselves. Otherwise the first two
        segments are taken as category and subcategory and the remainder
        as the slug.

        Args:
            product_type_id: Composite product type id.

        Returns:
            Parsed key, or None when the id has fewer than three segments
            or an empty segment (``a--b``, ``a-b-``). No catalog id is
            empty, so such ids are malformed rather than unknown.
        """
        parts = product_type_id.split("-")
        if len(parts) < 3 or not all(parts):
            return None

        for category in self._category_prefixes:
            prefix = f"{category.id}-"
            if not product_type_id.startswith(prefix):
                continue
            rest = product_type_id[len(prefix):]
            for subcategory in sorted(
                category.subcategories, key=lambda s: len(s.id), reverse=True
            ):
                sub_prefix = f"{subcategory.id}-"
                if rest.startswith(sub_prefix) and len(rest) > len(sub_prefix):
                    return ProductTypeKey(category.id, subcategory.id, rest[len(sub_prefix):])

        return ProductTypeKey(parts[0], parts[1], "-".join(parts[2:]))

    def mapped_template_ids(self, category_id: str, slug: str) -> tuple[str, ...]:
        """Get template ids from the static product type mapping.

        Args:
            category_id: Category ID.
            slug: Product type slug.

        Returns:
            Mapped template ids, empty when unmapped.
        """
        return self._mapping.get(category_id, {}).get(slug, ())

    # ------------------------------------------------------------------
    # Variant templates
    # ------------------------------------------------------------------

    def list_variant_templates(self) -> list[VariantTemplate]:
        """Get all variant templates with derived input type and group.

        Returns:
            List of variant templates in seed order.
        """
        return list(self._templates.values())

    def get_variant_template(self, template_id: str) -> VariantTemplate | None:
        return self._templates.get(template_id)

    def required_variants_for_category(self, category_id: str) -> tuple[str, ...]:
        return self._required_by_category.get(category_id, ())

    def get_compatibility_rule(self, template_id: str) -> CompatibilityRule | None:
        return self._compatibility.get(template_id)

    def __repr__(self) -> str:
        return (
            f"<CatalogRegistry(categories={len(self._categories)}, "
            f"product_types={len(self._product_types)}, templates={len(self._templates)})>"
        )


# ============================================================================
# Parser
# ============================================================================


class CatalogParser:
    """Parser for catalog documents.

    Derives each template's effective input type, range fields and
    display group while parsing, so the resulting registry never has to
    recompute them.

    Example usage:
        parser = CatalogParser()
        registry = parser.parse_embedded()
        registry = parser.parse_file("catalog.json")
    """

    def parse_embedded(self) -> CatalogRegistry:
        """Parse the embedded seed catalog.

        Returns:
            Catalog registry snapshot.
        """
        return self.parse_dict(EMBEDDED_CATALOG, source="embedded")

    def parse_file(self, path: str | Path) -> CatalogRegistry:
        """Parse a catalog from a JSON file.

        Args:
            path: Path to catalog JSON document.

        Returns:
            Catalog registry snapshot.

        Raises:
            CatalogLoadError: If the file is unreadable or not valid JSON.
        """
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise CatalogLoadError(str(e), source=str(path)) from e
        return self.parse_dict(data, source=str(path))

    def parse_dict(self, data: Mapping[str, Any], source: str | None = None) -> CatalogRegistry:
        """Parse a catalog from an in-memory document.

        Args:
            data: Catalog document.
            source: Origin of the document, for error messages and logs.

        Returns:
            Catalog registry snapshot.

        Raises:
            CatalogLoadError: If the document structure is invalid.
            MultipleDefaultOptionsError: If a template has several defaults.
        """
        if not isinstance(data, Mapping):
            raise CatalogLoadError("document must be an object", source=source)

        try:
            categories = [self._parse_category(raw) for raw in data.get("categories", [])]
            groups = self._build_group_index(
                data.get("variantDisplayGroups", {}),
                data.get("variantCategories", {}),
            )
            raw_templates = data.get("variantTemplates", {})
            if isinstance(raw_templates, Mapping):
                raw_templates = list(raw_templates.values())
            templates = [self._parse_template(raw, groups) for raw in raw_templates]
            compatibility = {
                template_id: CompatibilityRule(
                    incompatible=tuple(rule.get("incompatible", [])),
                    required=tuple(rule.get("required", [])),
                    recommended=tuple(rule.get("recommended", [])),
                )
                for template_id, rule in data.get("compatibilityMatrix", {}).items()
            }
            registry = CatalogRegistry(
                categories=categories,
                variant_templates=templates,
                product_type_variant_mapping=data.get("productTypeVariantMapping", {}),
                required_variants_by_category=data.get("requiredVariantsByCategory", {}),
                compatibility_matrix=compatibility,
            )
        except (KeyError, TypeError, AttributeError) as e:
            raise CatalogLoadError(f"malformed catalog document ({e!r})", source=source) from e

        logger.info(
            "Catalog snapshot loaded",
            source=source,
            categories=len(categories),
            product_types=len(registry.list_product_types()),
            variant_templates=len(templates),
        )
        return registry

    def _parse_category(self, raw: Mapping[str, Any]) -> Category:
        subcategories = tuple(
            Subcategory(
                id=sub["id"],
                name=sub.get("name", sub["id"]),
                product_types=tuple(sub.get("productTypes", [])),
                icon_url=sub.get("iconUrl"),
            )
            for sub in raw.get("subcategories", [])
        )
        return Category(
            id=raw["id"],
            name=raw.get("name", raw["id"]),
            subcategories=subcategories,
            icon_url=raw.get("iconUrl"),
        )

    def _build_group_index(
        self,
        display_groups: Mapping[str, Iterable[str]],
        variant_categories: Mapping[str, Iterable[str]],
    ) -> dict[str, str]:
        """Map template id -> display group name.

        Display groups take precedence over category groupings.
        """
        index: dict[str, str] = {}
        for group_key, template_ids in variant_categories.items():
            for template_id in template_ids:
                index.setdefault(template_id, humanize_group_name(group_key))
        for group_key, template_ids in display_groups.items():
            for template_id in template_ids:
                index[template_id] = humanize_group_name(group_key)
        return index

    def _parse_template(self, raw: Mapping[str, Any], groups: Mapping[str, str]) -> VariantTemplate:
        template_id = raw["id"]
        options = tuple(
            VariantOption.create(
                value=str(opt["value"]),
                label=opt.get("label") or opt.get("name") or "",
                additional_price=opt.get("additionalPrice", 0),
                color_code=opt.get("colorCode"),
                is_default=bool(opt.get("isDefault", False)),
                sort_order=opt.get("sortOrder", index),
                is_active=opt.get("isActive", True),
            )
            for index, opt in enumerate(raw.get("options") or raw.get("variantOptions") or [])
        )

        native_kind = str(raw.get("inputType", InputType.SELECT.value))
        try:
            input_type = InputType(native_kind)
        except ValueError:
            logger.warning(
                "Unknown variant input type, using select",
                template_id=template_id,
                input_type=native_kind,
            )
            input_type = InputType.SELECT

        range_fields: dict[str, Any] = {}
        if input_type.is_numeric:
            numbers = _parse_numbers(option.value for option in options)
            if numbers:
                input_type = InputType.RANGE
                range_fields = derive_range(template_id, numbers)
            else:
                input_type = InputType.SELECT

        return VariantTemplate(
            id=template_id,
            name=raw.get("name", template_id),
            description=raw.get("description"),
            input_type=input_type,
            is_required=bool(raw.get("isRequired", False)),
            category_ids=tuple(raw.get("categoryIds") or ()),
            subcategory_ids=tuple(raw.get("subcategoryIds") or ()),
            product_type_ids=tuple(raw.get("productTypeIds") or ()),
            variant_options=options,
            group=groups.get(template_id, DEFAULT_GROUP),
            **range_fields,
        )


# ============================================================================
# Helpers
# ============================================================================


def format_product_type_name(slug: str) -> str:
    """Title-case a product type slug (``shirts-tops`` -> ``Shirts Tops``)."""
    return " ".join(word[:1].upper() + word[1:] for word in slug.split("-"))


def humanize_group_name(group_key: str) -> str:
    """Turn a group key into a display name (``commercial_info`` -> ``Commercial Info``)."""
    words = group_key.replace("-", "_").split("_")
    return " ".join(word[:1].upper() + word[1:] for word in words if word)


def derive_range(template_id: str, numbers: list[float]) -> dict[str, Any]:
    """Compute slider bounds, step and unit for a numeric template.

    The step is the smallest positive gap between sorted distinct values,
    or 1 when there is no such gap.

    Args:
        template_id: Template id, used to infer the unit.
        numbers: Parsed option values.

    Returns:
        Keyword arguments for the range fields of VariantTemplate.
    """
    distinct = sorted(set(numbers))
    gaps = [round(b - a, 6) for a, b in zip(distinct, distinct[1:]) if b > a]
    step = min(gaps) if gaps else 1
    unit = next((unit for key, unit in RANGE_UNITS if key in template_id.lower()), None)
    return {
        "min_value": _as_number(distinct[0]),
        "max_value": _as_number(distinct[-1]),
        "step": _as_number(step),
        "unit": unit,
    }


def _parse_numbers(values: Iterable[str]) -> list[float]:
    """Parse every value as a number; empty list if any value is not numeric."""
    numbers = []
    for value in values:
        try:
            number = float(value)
        except ValueError:
            return []
        if not math.isfinite(number):
            return []
        numbers.append(number)
    return numbers


def _as_number(value: float) -> int | float:
    return int(value) if float(value).is_integer() else value
