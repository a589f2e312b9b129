"""Catalog value objects.

Defines the immutable types that make up a catalog snapshot (categories,
product types, variant templates and their options) and the types that
flow through combination generation.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from enum import Enum
from types import MappingProxyType
from typing import Any, Self

from catalogcore.domain.base import ValueObject
from catalogcore.domain.exceptions import MultipleDefaultOptionsError

Price = int | float


# ============================================================================
# Enums
# ============================================================================


class InputType(str, Enum):
    """How a variant template is presented and validated."""

    TEXT = "text"
    COLOR = "color"
    RANGE = "range"
    NUMBER = "number"
    SELECT = "select"
    MULTISELECT = "multiselect"
    BOOLEAN = "boolean"

    @property
    def is_numeric(self) -> bool:
        """Whether values of this kind are expected to be numbers."""
        return self in (InputType.NUMBER, InputType.RANGE)


class OptionKind(str, Enum):
    """Discriminant for the variant option union."""

    PLAIN = "plain"
    COLOR = "color"


# ============================================================================
# Taxonomy
# ============================================================================


@dataclass(frozen=True)
class Subcategory(ValueObject):
    """Second level of the catalog tree.

    Attributes:
        id: Subcategory id, unique within its category.
        name: Display name.
        product_types: Product type slugs in seed order.
    """

    id: str
    name: str
    product_types: tuple[str, ...] = ()
    icon_url: str | None = None


@dataclass(frozen=True)
class Category(ValueObject):
    """Top level of the catalog tree."""

    id: str
    name: str
    subcategories: tuple[Subcategory, ...] = ()
    icon_url: str | None = None

    def get_subcategory(self, subcategory_id: str) -> Subcategory | None:
        """Get a nested subcategory by id.

        Args:
            subcategory_id: Subcategory id.

        Returns:
            Subcategory if found, None otherwise.
        """
        for subcategory in self.subcategories:
            if subcategory.id == subcategory_id:
                return subcategory
        return None


@dataclass(frozen=True)
class ProductTypeKey(ValueObject):
    """A product type id split into its three parts."""

    category_id: str
    subcategory_id: str
    slug: str

    @property
    def subcategory_key(self) -> str:
        """Composite ``category-subcategory`` key used by template scoping."""
        return f"{self.category_id}-{self.subcategory_id}"


@dataclass(frozen=True)
class ProductType(ValueObject):
    """Leaf of the catalog tree.

    Attributes:
        id: Composite ``{category_id}-{subcategory_id}-{slug}`` id.
        name: Display name derived from the slug.
        description: Short description.
        category_id: Owning category.
        subcategory_id: Owning subcategory.
        slug: Product type slug as seeded.
        default_variant_templates: Template ids from the static mapping.
    """

    id: str
    name: str
    description: str
    category_id: str
    subcategory_id: str
    slug: str
    default_variant_templates: tuple[str, ...] = ()


# ============================================================================
# Variant Options
# ============================================================================


@dataclass(frozen=True, kw_only=True)
class VariantOption(ValueObject):
    """One selectable value of a variant template.

    Attributes:
        value: Machine key.
        label: Display label (falls back to value).
        additional_price: Signed price delta applied when selected.
        is_default: Whether the option is preselected.
        sort_order: Display order within the template.
        is_active: Inactive options are kept but not offered.
        kind: Union discriminant, ``plain`` for this class.
    """

    value: str
    label: str = ""
    additional_price: Price = 0
    is_default: bool = False
    sort_order: int = 0
    is_active: bool = True
    kind: OptionKind = field(default=OptionKind.PLAIN, init=False)

    @property
    def display_name(self) -> str:
        return self.label or self.value

    @classmethod
    def create(
        cls,
        value: str,
        label: str = "",
        additional_price: Price = 0,
        color_code: str | None = None,
        is_default: bool = False,
        sort_order: int = 0,
        is_active: bool = True,
    ) -> "VariantOption":
        """Build the right option case from raw fields.

        Args:
            value: Machine key.
            label: Display label.
            additional_price: Signed price delta.
            color_code: Hex colour; selects ColorOption when present.
            is_default: Whether the option is preselected.
            sort_order: Display order.
            is_active: Whether the option is offered.

        Returns:
            ColorOption when a colour code is given, VariantOption otherwise.
        """
        common: dict[str, Any] = {
            "value": value,
            "label": label,
            "additional_price": additional_price or 0,
            "is_default": is_default,
            "sort_order": sort_order,
            "is_active": is_active,
        }
        if color_code:
            return ColorOption(color_code=color_code, **common)
        return VariantOption(**common)


@dataclass(frozen=True, kw_only=True)
class ColorOption(VariantOption):
    """Variant option carrying a hex colour swatch."""

    color_code: str
    kind: OptionKind = field(default=OptionKind.COLOR, init=False)


# ============================================================================
# Variant Templates
# ============================================================================


@dataclass(frozen=True)
class VariantTemplate(ValueObject):
    """A configurable product axis such as Color, Size or Storage.

    Scoping arrays decide where the template applies when a product type
    has no explicit mapping. Range fields are only set for templates
    classified as ``range``.

    Raises:
        MultipleDefaultOptionsError: If a non-multiselect template marks
            more than one option as default.
    """

    id: str
    name: str
    input_type: InputType = InputType.SELECT
    description: str | None = None
    is_required: bool = False
    category_ids: tuple[str, ...] = ()
    subcategory_ids: tuple[str, ...] = ()
    product_type_ids: tuple[str, ...] = ()
    variant_options: tuple[VariantOption, ...] = ()
    min_value: float | None = None
    max_value: float | None = None
    step: float | None = None
    unit: str | None = None
    group: str = "Other"

    def __post_init__(self) -> None:
        if self.input_type is InputType.MULTISELECT:
            return
        defaults = [option.value for option in self.variant_options if option.is_default]
        if len(defaults) > 1:
            raise MultipleDefaultOptionsError(self.id, defaults)

    @property
    def default_option(self) -> VariantOption | None:
        """First option flagged as default, if any."""
        for option in self.variant_options:
            if option.is_default:
                return option
        return None

    def get_option(self, value: str) -> VariantOption | None:
        """Get an option by its machine value.

        Args:
            value: Option value.

        Returns:
            Option if found, None otherwise.
        """
        for option in self.variant_options:
            if option.value == value:
                return option
        return None

    def with_default(self, value: str | None) -> Self:
        """Return a copy in which only ``value`` is the default option.

        Args:
            value: Option value to mark as default, or None to clear all.

        Returns:
            New template with updated default flags.
        """
        options = tuple(
            replace(option, is_default=option.value == value)
            for option in self.variant_options
        )
        return replace(self, variant_options=options)


# ============================================================================
# Combination Generation
# ============================================================================


@dataclass(frozen=True)
class ProductVariant(ValueObject):
    """A product's chosen template and the option subset enabled for it.

    Only used as generator input; never persisted in this form.
    """

    template_id: str
    options: tuple[VariantOption, ...] = ()


@dataclass(frozen=True)
class ProductCombination(ValueObject):
    """One purchasable cell of the option cartesian product.

    Attributes:
        id: Combination id.
        variant_values: Template id to option value, in dimension order.
            Stored as a read-only mapping and left out of the hash.
        sku: Generated SKU.
        price: Base price plus option deltas, never negative.
        quantity: Stock quantity.
        is_default: True only for the first generated combination.
        variant_strings: Encoded tokens used for filtering.
    """

    id: str
    variant_values: Mapping[str, str] = field(hash=False)
    sku: str
    price: Price
    quantity: int = 0
    is_default: bool = False
    variant_strings: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "variant_values", MappingProxyType(dict(self.variant_values)))


@dataclass(frozen=True)
class DecodedVariant(ValueObject):
    """Result of decoding one encoded variant token."""

    variant_type: str
    value: str
    has_price: bool = False
    price_modifier: int | None = None


@dataclass(frozen=True)
class VariantDisplayInfo(ValueObject):
    """Display name, colour and price delta for a template/value pair."""

    display_name: str
    color_code: str | None = None
    additional_price: Price | None = None


@dataclass(frozen=True)
class FilterArrays(ValueObject):
    """Parallel array columns for ``array contains`` queries."""

    exact_match: tuple[str, ...] = ()
    fuzzy_match: tuple[str, ...] = ()
    type_match: tuple[str, ...] = ()
    price_range: tuple[str, ...] = ()


# ============================================================================
# Template Compatibility
# ============================================================================


@dataclass(frozen=True)
class CompatibilityRule(ValueObject):
    """Companion rules for one template from the compatibility matrix."""

    incompatible: tuple[str, ...] = ()
    required: tuple[str, ...] = ()
    recommended: tuple[str, ...] = ()


class SelectionIssueKind(str, Enum):
    INCOMPATIBLE = "incompatible"
    MISSING_REQUIRED = "missing_required"
    MISSING_CATEGORY_REQUIRED = "missing_category_required"
    RECOMMENDED = "recommended"


@dataclass(frozen=True)
class SelectionIssue(ValueObject):
    """A problem or suggestion for a set of selected templates.

    Attributes:
        kind: Issue kind.
        template_id: Template the issue is reported for.
        related_template_id: The other template involved, if any.
        message: Human-readable description.
    """

    kind: SelectionIssueKind
    template_id: str
    related_template_id: str | None = None
    message: str = ""
