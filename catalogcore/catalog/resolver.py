"""Variant template resolver.

Decides which variant templates a product type offers. An explicit entry
in the product type mapping wins outright; otherwise templates qualify by
their own category, subcategory or product type scope.
"""

from collections.abc import Iterable

import structlog

from catalogcore.catalog.models import (
    ProductTypeKey,
    SelectionIssue,
    SelectionIssueKind,
    VariantTemplate,
)
from catalogcore.catalog.registry import CatalogRegistry
from catalogcore.domain.exceptions import InvalidProductTypeIdError, ProductTypeNotFoundError

logger = structlog.get_logger()

# Template ids containing one of these sort earlier among recommendations
COMMON_VARIANTS: tuple[str, ...] = ("color", "size", "material", "storage", "ram", "condition")


def is_common_variant(template_id: str) -> bool:
    return any(name in template_id for name in COMMON_VARIANTS)


class VariantTemplateResolver:
    """Resolves variant templates for product types.

    Example usage:
        resolver = VariantTemplateResolver(registry)
        templates = resolver.get_recommended_variant_templates(
            "fashion-apparel-mens-clothing-shirts-tops"
        )
    """

    def __init__(self, registry: CatalogRegistry, strict: bool = False) -> None:
        """Initialize resolver.

        Args:
            registry: Catalog snapshot.
            strict: Raise on malformed or unknown product type ids
                instead of returning an empty list.
        """
        self.registry = registry
        self.strict = strict

    def _resolve_key(self, product_type_id: str) -> ProductTypeKey | None:
        key = self.registry.parse_product_type_id(product_type_id)
        if key is None:
            if self.strict:
                raise InvalidProductTypeIdError(product_type_id)
            logger.warning("Invalid product type id format", product_type_id=product_type_id)
            return None

        if self.registry.get_product_type(product_type_id) is None:
            if self.strict:
                raise ProductTypeNotFoundError(product_type_id)
            logger.warning("Unknown product type", product_type_id=product_type_id)
            return None

        return key

    def get_variant_templates_for_product_type(self, product_type_id: str) -> list[VariantTemplate]:
        """Get the templates a product of this type should offer.

        Args:
            product_type_id: Composite product type id.

        Returns:
            Mapped templates in mapping order when the product type has a
            mapping, otherwise scope-matched templates in catalog order.
            Empty for malformed or unknown ids.
        """
        key = self._resolve_key(product_type_id)
        if key is None:
            return []

        mapped_ids = self.registry.mapped_template_ids(key.category_id, key.slug)
        if mapped_ids:
            templates = []
            for template_id in mapped_ids:
                template = self.registry.get_variant_template(template_id)
                if template is None:
                    logger.debug(
                        "Mapped variant template not in catalog",
                        product_type_id=product_type_id,
                        template_id=template_id,
                    )
                    continue
                templates.append(template)
            return templates

        return [
            template
            for template in self.registry.list_variant_templates()
            if key.category_id in template.category_ids
            or key.subcategory_key in template.subcategory_ids
            or product_type_id in template.product_type_ids
        ]

    def get_recommended_variant_templates(self, product_type_id: str) -> list[VariantTemplate]:
        """Get applicable templates, best suggestions first.

        Required templates come first, then common axes such as color or
        size, then the rest by display name.

        Args:
            product_type_id: Composite product type id.

        Returns:
            Sorted templates, empty for malformed or unknown ids.
        """
        templates = self.get_variant_templates_for_product_type(product_type_id)
        return sorted(
            templates,
            key=lambda t: (not t.is_required, not is_common_variant(t.id), t.name.casefold()),
        )

    def check_template_selection(
        self, category_id: str, template_ids: Iterable[str]
    ) -> list[SelectionIssue]:
        """Check a set of selected templates against the compatibility rules.

        Args:
            category_id: Category of the product.
            template_ids: Selected template ids.

        Returns:
            Issues found; empty when the selection is consistent.
        """
        selected = list(dict.fromkeys(template_ids))
        selected_set = set(selected)
        issues: list[SelectionIssue] = []
        seen_pairs: set[frozenset[str]] = set()

        for template_id in selected:
            rule = self.registry.get_compatibility_rule(template_id)
            if rule is None:
                continue

            for other in rule.incompatible:
                pair = frozenset((template_id, other))
                if other in selected_set and pair not in seen_pairs:
                    seen_pairs.add(pair)
                    issues.append(
                        SelectionIssue(
                            kind=SelectionIssueKind.INCOMPATIBLE,
                            template_id=template_id,
                            related_template_id=other,
                            message=f"{template_id} cannot be combined with {other}",
                        )
                    )

            for other in rule.required:
                if other not in selected_set:
                    issues.append(
                        SelectionIssue(
                            kind=SelectionIssueKind.MISSING_REQUIRED,
                            template_id=template_id,
                            related_template_id=other,
                            message=f"{template_id} requires {other}",
                        )
                    )

            for other in rule.recommended:
                if other not in selected_set:
                    issues.append(
                        SelectionIssue(
                            kind=SelectionIssueKind.RECOMMENDED,
                            template_id=template_id,
                            related_template_id=other,
                            message=f"{other} is recommended with {template_id}",
                        )
                    )

        for required_id in self.registry.required_variants_for_category(category_id):
            if required_id not in selected_set:
                issues.append(
                    SelectionIssue(
                        kind=SelectionIssueKind.MISSING_CATEGORY_REQUIRED,
                        template_id=required_id,
                        message=f"{required_id} is required for category {category_id}",
                    )
                )

        return issues
