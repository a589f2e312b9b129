"""Variant string encoder and decoder.

Turns a combination's ``{template_id: value}`` map into compact tokens for
storage, search tags and ``array contains`` filter columns, and parses
tokens back. Tokens look like::

    red                       value only
    color-red                 with the template name
    color-blue_price-plus5    with a price suffix

Encoding is lossy: ids and values are normalised by ``clean_string`` and
long tokens are truncated. Unknown templates are skipped unless the
encoder runs in strict mode.
"""

import re
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass

import structlog

from catalogcore.catalog.models import (
    DecodedVariant,
    FilterArrays,
    OptionKind,
    Price,
    ProductCombination,
    ProductVariant,
    VariantDisplayInfo,
    VariantOption,
    VariantTemplate,
)
from catalogcore.catalog.registry import CatalogRegistry
from catalogcore.domain.exceptions import UnknownVariantOptionError, UnknownVariantTemplateError

logger = structlog.get_logger()

# ============================================================================
# Constants
# ============================================================================

DEFAULT_SEPARATOR = "/"
DEFAULT_PRICE_SEPARATOR = "_"
DEFAULT_MAX_LENGTH = 100
PRICE_PREFIX = "price-"
VALUE_SEPARATOR = "-"

PRICE_PATTERN = re.compile(r"price-(plus|minus)(\d+)")
_INVALID_CHARS = re.compile(r"[^a-z0-9\-_]")
_SEPARATOR_RUNS = re.compile(r"[-_]+")
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

# Upper bound (exclusive) -> bucket name, by absolute price delta
PRICE_BUCKETS: tuple[tuple[float, str], ...] = (
    (10, "under10"),
    (25, "10to25"),
    (50, "25to50"),
    (100, "50to100"),
    (250, "100to250"),
)
TOP_PRICE_BUCKET = "over250"

COLOR_CATEGORIES: dict[str, str] = {
    "#000000": "black",
    "#ffffff": "white",
    "#808080": "gray",
    "#000080": "blue",
    "#0000ff": "blue",
    "#ff0000": "red",
    "#008000": "green",
    "#ffff00": "yellow",
    "#ffa500": "orange",
    "#800080": "purple",
    "#ffc0cb": "pink",
    "#a52a2a": "brown",
}

SIZE_CATEGORIES: dict[str, str] = {
    "xxxs": "extrasmall",
    "xxs": "extrasmall",
    "xs": "extrasmall",
    "s": "small",
    "small": "small",
    "m": "medium",
    "medium": "medium",
    "l": "large",
    "large": "large",
    "xl": "extralarge",
    "xxl": "extralarge",
    "xxxl": "extralarge",
    "xlarge": "extralarge",
}

# Inclusive upper bound of the leading integer -> size bucket
NUMERIC_SIZE_BUCKETS: tuple[tuple[int, str], ...] = (
    (6, "small"),
    (10, "medium"),
    (14, "large"),
)


# ============================================================================
# Helpers
# ============================================================================


def clean_string(value: str) -> str:
    """Normalise a raw id or value for embedding in a token.

    Lowercases, drops everything outside ``[a-z0-9-_]``, collapses runs of
    ``-``/``_`` into one ``-`` and trims leading/trailing ``-``.

    Args:
        value: Raw string.

    Returns:
        Canonical token fragment.
    """
    cleaned = _INVALID_CHARS.sub("", value.lower())
    cleaned = _SEPARATOR_RUNS.sub("-", cleaned)
    return cleaned.strip("-")


def format_price_amount(amount: Price) -> str:
    """Render an absolute price delta, integral values without a decimal point."""
    amount = abs(amount)
    if float(amount).is_integer():
        return str(int(amount))
    return str(amount)


def price_bucket(additional_price: Price) -> str:
    """Bucket a price delta by absolute magnitude (``under10`` ... ``over250``)."""
    magnitude = abs(additional_price)
    for upper, bucket in PRICE_BUCKETS:
        if magnitude < upper:
            return bucket
    return TOP_PRICE_BUCKET


def color_category(color_code: str | None) -> str:
    if not color_code or not color_code.startswith("#"):
        return "other"
    return COLOR_CATEGORIES.get(color_code.lower(), "other")


def size_category(size: str) -> str:
    """Bucket a size value into extrasmall/small/medium/large/extralarge.

    Letter sizes use a fixed table; numeric sizes use their leading
    integer. Anything else is ``other``.
    """
    size_lower = size.lower()
    if size_lower in SIZE_CATEGORIES:
        return SIZE_CATEGORIES[size_lower]

    match = _LEADING_INT.match(size_lower)
    if match is None:
        return "other"
    number = int(match.group(1))
    for upper, bucket in NUMERIC_SIZE_BUCKETS:
        if number <= upper:
            return bucket
    return "extralarge"


def sku_suffix(template_id: str, value: str) -> str:
    """SKU fragment for one template/value pair.

    Args:
        template_id: Template id; substrings select the rule.
        value: Selected option value.

    Returns:
        Upper-case suffix, possibly empty.
    """
    if "color" in template_id:
        return clean_string(value)[:3].upper()
    if "size" in template_id:
        return re.sub(r"[^A-Z0-9]", "", value.upper())
    if "storage" in template_id:
        value = re.sub("gb", "G", value, flags=re.IGNORECASE)
        return re.sub("tb", "T", value, flags=re.IGNORECASE).upper()
    if "ram" in template_id:
        return re.sub("gb", "R", value, flags=re.IGNORECASE).upper()
    return clean_string(value)[:3].upper()


def search_tag_type(template_id: str) -> str:
    """Template id as used in search tags (``size-clothing`` -> ``sizeclothing``)."""
    return clean_string(template_id.replace("-", ""))


# ============================================================================
# Result Types
# ============================================================================


@dataclass(frozen=True)
class EncodeOptions:
    """Token encoding options.

    Attributes:
        include_price: Append a price suffix for non-zero deltas.
        include_name: Prefix the token with the cleaned template id.
        separator: Joins tokens into one combination string.
        price_separator: Separates the value from the price suffix.
        max_length: Tokens longer than this are truncated.
    """

    include_price: bool = True
    include_name: bool = False
    separator: str = DEFAULT_SEPARATOR
    price_separator: str = DEFAULT_PRICE_SEPARATOR
    max_length: int = DEFAULT_MAX_LENGTH


@dataclass(frozen=True)
class EncodedCombination:
    combination_id: str
    variant_strings: tuple[str, ...]
    combination_string: str
    final_price: Price
    sku: str


@dataclass(frozen=True)
class StoredCombination:
    """Storage-ready form of one combination."""

    id: str
    variant_strings: tuple[str, ...]
    combination_string: str
    search_tags: tuple[str, ...]
    filter_arrays: FilterArrays
    price: Price
    sku: str
    quantity: int


@dataclass(frozen=True)
class StoragePayload:
    """Variant fields written alongside a product document."""

    has_variants: bool
    variant_types: tuple[str, ...] = ()
    variant_combinations: tuple[StoredCombination, ...] = ()
    all_variant_tags: tuple[str, ...] = ()


@dataclass(frozen=True)
class StoreFilterCriteria:
    variant_type: str | None = None
    variant_value: str | None = None
    price_range: str | None = None
    color_category: str | None = None
    size_category: str | None = None


@dataclass(frozen=True)
class _ResolvedValue:
    template: VariantTemplate
    option: VariantOption | None
    template_id: str
    value: str

    @property
    def additional_price(self) -> Price:
        return self.option.additional_price if self.option else 0


# ============================================================================
# Encoder
# ============================================================================


class VariantStringEncoder:
    """Encoder/decoder bound to one catalog snapshot.

    Example usage:
        encoder = VariantStringEncoder(registry)
        tokens = encoder.encode_variants_to_string_array({"color": "red"})
        decoded = encoder.decode_variant_strings(tokens)
    """

    def __init__(
        self,
        registry: CatalogRegistry,
        strict: bool = False,
        default_options: EncodeOptions | None = None,
    ) -> None:
        """Initialize encoder.

        Args:
            registry: Catalog snapshot used to resolve templates and options.
            strict: Raise on unknown templates/options instead of skipping.
            default_options: Options used when a call passes none.
        """
        self.registry = registry
        self.strict = strict
        self.default_options = default_options or EncodeOptions()

    def _resolve(self, template_id: str, value: str) -> _ResolvedValue | None:
        template = self.registry.get_variant_template(template_id)
        if template is None:
            if self.strict:
                raise UnknownVariantTemplateError(template_id)
            logger.debug("Skipping unknown variant template", template_id=template_id)
            return None

        option = template.get_option(value)
        if option is None and self.strict:
            raise UnknownVariantOptionError(template_id, value)
        return _ResolvedValue(template=template, option=option, template_id=template_id, value=value)

    def _resolve_all(self, variant_values: Mapping[str, str]) -> list[_ResolvedValue]:
        resolved = (self._resolve(template_id, value) for template_id, value in variant_values.items())
        return [item for item in resolved if item is not None]

    # ------------------------------------------------------------------
    # Encode / decode
    # ------------------------------------------------------------------

    def encode_variants_to_string_array(
        self,
        variant_values: Mapping[str, str],
        options: EncodeOptions | None = None,
    ) -> list[str]:
        """Encode one combination into tokens, one per resolvable template.

        Args:
            variant_values: Template id to option value.
            options: Encoding options; encoder defaults when omitted.

        Returns:
            Tokens in ``variant_values`` order.
        """
        options = options or self.default_options
        tokens = []
        for item in self._resolve_all(variant_values):
            token = clean_string(item.value)
            if options.include_name:
                token = f"{clean_string(item.template_id)}{VALUE_SEPARATOR}{token}"

            delta = item.additional_price
            if options.include_price and delta:
                sign = "plus" if delta > 0 else "minus"
                token += f"{options.price_separator}{PRICE_PREFIX}{sign}{format_price_amount(delta)}"

            if len(token) > options.max_length:
                token = token[: options.max_length]
            tokens.append(token)
        return tokens

    @staticmethod
    def decode_variant_strings(
        tokens: Iterable[str],
        separator: str = DEFAULT_SEPARATOR,
        price_separator: str = DEFAULT_PRICE_SEPARATOR,
    ) -> list[DecodedVariant]:
        """Parse tokens back into type, value and price modifier.

        The part before the first ``-`` is the variant type; a token
        without ``-`` is a bare value. Decoding does not undo
        ``clean_string``.

        Args:
            tokens: Encoded tokens.
            separator: Separator used to join tokens.
            price_separator: Separator placed before the price suffix.

        Returns:
            One decoded entry per token.
        """
        price_marker = f"{price_separator}{PRICE_PREFIX}"
        decoded = []
        for token in tokens:
            parts = token.split(separator)
            main_part = parts[0]
            marker_index = main_part.find(price_marker)
            if marker_index >= 0:
                main_part = main_part[:marker_index]

            if VALUE_SEPARATOR in main_part:
                variant_type, value = main_part.split(VALUE_SEPARATOR, 1)
            else:
                variant_type, value = "", main_part

            has_price = False
            price_modifier = None
            price_part = next((part for part in parts if PRICE_PREFIX in part), None)
            if price_part is not None:
                has_price = True
                match = PRICE_PATTERN.search(price_part)
                if match:
                    multiplier = 1 if match.group(1) == "plus" else -1
                    price_modifier = int(match.group(2)) * multiplier

            decoded.append(
                DecodedVariant(
                    variant_type=variant_type,
                    value=value,
                    has_price=has_price,
                    price_modifier=price_modifier,
                )
            )
        return decoded

    # ------------------------------------------------------------------
    # Search and filter columns
    # ------------------------------------------------------------------

    def create_variant_search_tags(self, variant_values: Mapping[str, str]) -> list[str]:
        """Build de-duplicated search tags for one combination.

        Emits ``type:value``, ``type:display`` when the display name
        differs, ``has:type``, ``pricemod:bucket`` for non-zero deltas,
        ``colorcat:*`` for colour options and ``sizecat:*`` for size
        templates.

        Args:
            variant_values: Template id to option value.

        Returns:
            Tags in first-seen order.
        """
        tags: list[str] = []
        for item in self._resolve_all(variant_values):
            tag_type = search_tag_type(item.template_id)
            tags.append(f"{tag_type}:{clean_string(item.value)}")

            display_name = item.option.display_name if item.option else item.value
            if display_name != item.value:
                tags.append(f"{tag_type}:{clean_string(display_name)}")

            tags.append(f"has:{tag_type}")

            if item.additional_price:
                tags.append(f"pricemod:{price_bucket(item.additional_price)}")

            if (
                "color" in item.template_id
                and item.option is not None
                and item.option.kind is OptionKind.COLOR
            ):
                tags.append(f"colorcat:{color_category(item.option.color_code)}")

            if "size" in item.template_id:
                tags.append(f"sizecat:{size_category(item.value)}")

        return list(dict.fromkeys(tags))

    def create_filter_arrays(self, variant_values: Mapping[str, str]) -> FilterArrays:
        """Build the parallel ``array contains`` columns for one combination.

        Args:
            variant_values: Template id to option value.

        Returns:
            De-duplicated exact, fuzzy, type and price-range columns.
        """
        exact_match, fuzzy_match, type_match, price_range = [], [], [], []
        for item in self._resolve_all(variant_values):
            clean_type = clean_string(item.template_id)
            clean_value = clean_string(item.value)
            exact_match.append(f"{clean_type}{VALUE_SEPARATOR}{clean_value}")
            fuzzy_match.append(clean_value)
            type_match.append(clean_type)
            if item.additional_price:
                price_range.append(price_bucket(item.additional_price))

        return FilterArrays(
            exact_match=tuple(dict.fromkeys(exact_match)),
            fuzzy_match=tuple(dict.fromkeys(fuzzy_match)),
            type_match=tuple(dict.fromkeys(type_match)),
            price_range=tuple(dict.fromkeys(price_range)),
        )

    # ------------------------------------------------------------------
    # SKU and display
    # ------------------------------------------------------------------

    @staticmethod
    def generate_variant_sku_suffix(variant_values: Mapping[str, str]) -> str:
        """Join per-template SKU fragments with ``-``; empty fragments are dropped."""
        suffixes = (sku_suffix(template_id, value) for template_id, value in variant_values.items())
        return "-".join(suffix for suffix in suffixes if suffix)

    def get_variant_display_info(self, template_id: str, value: str) -> VariantDisplayInfo:
        """Resolve display name, colour and price delta for a value.

        Unknown templates or options fall back to the raw value.

        Args:
            template_id: Template id.
            value: Option value.

        Returns:
            Display info.
        """
        resolved = self._resolve(template_id, value)
        if resolved is None or resolved.option is None:
            return VariantDisplayInfo(display_name=value)

        option = resolved.option
        return VariantDisplayInfo(
            display_name=option.display_name,
            color_code=option.color_code if option.kind is OptionKind.COLOR else None,
            additional_price=option.additional_price,
        )

    # ------------------------------------------------------------------
    # Combination-level helpers
    # ------------------------------------------------------------------

    def encode_product_combinations(
        self,
        combinations: Sequence[ProductCombination],
        base_price: Price = 0,
        options: EncodeOptions | None = None,
    ) -> list[EncodedCombination]:
        """Encode every combination of a product.

        Args:
            combinations: Generated or stored combinations.
            base_price: Used when a combination has no price.
            options: Encoding options; encoder defaults when omitted.

        Returns:
            Encoded combinations in input order.
        """
        options = options or self.default_options
        encoded = []
        for index, combination in enumerate(combinations):
            tokens = self.encode_variants_to_string_array(combination.variant_values, options)
            encoded.append(
                EncodedCombination(
                    combination_id=combination.id or f"combo-{index}",
                    variant_strings=tuple(tokens),
                    combination_string=options.separator.join(tokens),
                    final_price=combination.price or base_price,
                    sku=combination.sku or "",
                )
            )
        return encoded

    def prepare_for_storage(
        self,
        variants: Sequence[ProductVariant],
        combinations: Sequence[ProductCombination],
    ) -> StoragePayload:
        """Build the variant fields of a product document.

        Tokens are always encoded with the template name and price.

        Args:
            variants: Selected templates for the product.
            combinations: The product's combinations.

        Returns:
            Storage payload; ``has_variants`` is False without combinations.
        """
        if not combinations:
            return StoragePayload(has_variants=False)

        options = EncodeOptions(
            include_price=True,
            include_name=True,
            max_length=self.default_options.max_length,
        )
        stored = []
        all_tags: list[str] = []
        for combination in combinations:
            tokens = self.encode_variants_to_string_array(combination.variant_values, options)
            search_tags = self.create_variant_search_tags(combination.variant_values)
            stored.append(
                StoredCombination(
                    id=combination.id,
                    variant_strings=tuple(tokens),
                    combination_string=DEFAULT_SEPARATOR.join(tokens),
                    search_tags=tuple(search_tags),
                    filter_arrays=self.create_filter_arrays(combination.variant_values),
                    price=combination.price,
                    sku=combination.sku,
                    quantity=combination.quantity,
                )
            )
            all_tags.extend(search_tags)

        return StoragePayload(
            has_variants=True,
            variant_types=tuple(clean_string(variant.template_id) for variant in variants),
            variant_combinations=tuple(stored),
            all_variant_tags=tuple(dict.fromkeys(all_tags)),
        )

    @staticmethod
    def build_store_filters(criteria: StoreFilterCriteria) -> list[str]:
        """Compose ``array contains`` predicates for the document store.

        Args:
            criteria: Search criteria; unset fields add no predicate.

        Returns:
            Predicate strings, e.g. ``variantTypes.contains("color")``.
        """
        filters = []
        if criteria.variant_type:
            filters.append(f'variantTypes.contains("{criteria.variant_type}")')
        if criteria.variant_value:
            filters.append(f'allVariantTags.contains("{criteria.variant_value}")')
        if criteria.price_range:
            filters.append(f'allVariantTags.contains("pricemod:{criteria.price_range}")')
        if criteria.color_category:
            filters.append(f'allVariantTags.contains("colorcat:{criteria.color_category}")')
        if criteria.size_category:
            filters.append(f'allVariantTags.contains("sizecat:{criteria.size_category}")')
        return filters
