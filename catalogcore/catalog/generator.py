"""Combination generator.

Expands a product's selected variant options into the cartesian product
of purchasable combinations, each with a composed price, SKU and encoded
variant strings. Also provides the helpers used when combinations are
regenerated, filtered or turned into facets.
"""

import itertools
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field, replace

import structlog

from catalogcore.catalog.encoder import (
    PRICE_PREFIX,
    VALUE_SEPARATOR,
    EncodeOptions,
    VariantStringEncoder,
    clean_string,
)
from catalogcore.catalog.models import Price, ProductCombination, ProductVariant, VariantOption

logger = structlog.get_logger()


# ============================================================================
# Configuration
# ============================================================================


@dataclass(frozen=True)
class GeneratorConfig:
    """Configuration for combination generation.

    Attributes:
        default_quantity: Stock quantity given to new combinations.
        id_prefix: Combination ids are ``{id_prefix}-{index}``.
        encode_options: Options for the variant strings of each combination.
    """

    default_quantity: int = 0
    id_prefix: str = "combination"
    encode_options: EncodeOptions = field(
        default_factory=lambda: EncodeOptions(include_price=True, include_name=True)
    )

    @classmethod
    def with_max_length(cls, max_length: int) -> "GeneratorConfig":
        """Create default config with a custom token length limit.

        Args:
            max_length: Maximum encoded token length.

        Returns:
            Config with named, priced tokens truncated at ``max_length``.
        """
        return cls(
            encode_options=EncodeOptions(
                include_price=True,
                include_name=True,
                max_length=max_length,
            )
        )


# ============================================================================
# Combination Generator
# ============================================================================


class CombinationGenerator:
    """Generates product combinations from variant selections.

    Example usage:
        generator = CombinationGenerator(VariantStringEncoder(registry))
        combinations = generator.generate_combinations(variants, 20, "SKU1")
    """

    def __init__(
        self,
        encoder: VariantStringEncoder,
        config: GeneratorConfig | None = None,
    ) -> None:
        """Initialize generator.

        Args:
            encoder: Encoder used for variant strings.
            config: Generation config.
        """
        self.encoder = encoder
        self.config = config or GeneratorConfig()

    def _participating(self, variants: Iterable[ProductVariant]) -> list[ProductVariant]:
        """Drop variants without options and repeated template ids."""
        participating: list[ProductVariant] = []
        seen: set[str] = set()
        for variant in variants:
            if variant.template_id in seen:
                logger.warning(
                    "Duplicate variant selection ignored",
                    template_id=variant.template_id,
                )
                continue
            seen.add(variant.template_id)
            if not variant.options:
                logger.debug("Variant has no selected options", template_id=variant.template_id)
                continue
            participating.append(variant)
        return participating

    def generate_combinations(
        self,
        variants: Sequence[ProductVariant],
        base_price: Price,
        base_sku: str,
    ) -> list[ProductCombination]:
        """Expand variant selections into combinations.

        Input order is the dimension order: it decides the key order of
        ``variant_values`` and the order of SKU suffixes. The first
        combination is the default one. Options of templates the catalog
        does not know stay in ``variant_values`` but add nothing to the
        price or SKU.

        Args:
            variants: Selected templates with their enabled options.
            base_price: Product base price.
            base_sku: Product base SKU.

        Returns:
            One combination per cell of the cartesian product, empty when
            no variant has options.
        """
        participating = self._participating(variants)
        if not participating:
            return []

        # Templates missing from the catalog add no price delta and no SKU suffix
        known_ids = {
            variant.template_id
            for variant in participating
            if self.encoder.registry.get_variant_template(variant.template_id) is not None
        }

        combinations = []
        option_lists = [variant.options for variant in participating]
        for index, chosen in enumerate(itertools.product(*option_lists)):
            variant_values = {
                variant.template_id: option.value
                for variant, option in zip(participating, chosen)
            }
            known_options = [
                option
                for variant, option in zip(participating, chosen)
                if variant.template_id in known_ids
            ]
            combinations.append(
                ProductCombination(
                    id=f"{self.config.id_prefix}-{index}",
                    variant_values=variant_values,
                    sku=self.compose_sku(
                        base_sku,
                        {k: v for k, v in variant_values.items() if k in known_ids},
                    ),
                    price=self.compose_price(base_price, known_options),
                    quantity=self.config.default_quantity,
                    is_default=index == 0,
                    variant_strings=tuple(
                        self.encoder.encode_variants_to_string_array(
                            variant_values, self.config.encode_options
                        )
                    ),
                )
            )

        logger.debug(
            "Generated combinations",
            base_sku=base_sku,
            dimensions=len(participating),
            count=len(combinations),
        )
        return combinations

    @staticmethod
    def compose_price(base_price: Price, options: Iterable[VariantOption]) -> Price:
        """Base price plus every option delta, floored at 0."""
        return max(0, base_price + sum(option.additional_price for option in options))

    def compose_sku(self, base_sku: str, variant_values: Mapping[str, str]) -> str:
        """``{base_sku}-{suffix}-...``, or the base SKU when there are no suffixes."""
        suffix = self.encoder.generate_variant_sku_suffix(variant_values)
        return f"{base_sku}-{suffix}" if suffix else base_sku

    # ------------------------------------------------------------------
    # Regeneration helpers
    # ------------------------------------------------------------------

    @staticmethod
    def combination_key(variant_values: Mapping[str, str]) -> str:
        """Canonical key of a combination (``color:red|size:m``), independent of key order."""
        return "|".join(f"{key}:{variant_values[key]}" for key in sorted(variant_values))

    def merge_with_existing(
        self,
        generated: Sequence[ProductCombination],
        existing: Iterable[ProductCombination],
    ) -> list[ProductCombination]:
        """Carry edited fields over from previously stored combinations.

        A generated combination with the same key as an existing one keeps
        the existing SKU, price and quantity.

        Args:
            generated: Freshly generated combinations.
            existing: Previously stored combinations.

        Returns:
            Generated combinations with existing values applied.
        """
        by_key = {self.combination_key(c.variant_values): c for c in existing}
        merged = []
        for combination in generated:
            previous = by_key.get(self.combination_key(combination.variant_values))
            if previous is None:
                merged.append(combination)
                continue
            merged.append(
                replace(
                    combination,
                    sku=previous.sku,
                    price=previous.price,
                    quantity=previous.quantity,
                )
            )
        return merged

    @staticmethod
    def bulk_adjust_prices(
        combinations: Iterable[ProductCombination], adjustment: Price
    ) -> list[ProductCombination]:
        return [replace(c, price=max(0, c.price + adjustment)) for c in combinations]

    # ------------------------------------------------------------------
    # Filtering and facets
    # ------------------------------------------------------------------

    def _type_value_parts(self, combination: ProductCombination) -> set[str]:
        price_marker = f"{self.config.encode_options.price_separator}{PRICE_PREFIX}"
        return {token.split(price_marker, 1)[0] for token in combination.variant_strings}

    def filter_combinations(
        self,
        combinations: Iterable[ProductCombination],
        filters: Mapping[str, Iterable[str]],
    ) -> list[ProductCombination]:
        """Keep combinations matching every filter.

        Filter keys are ANDed, the values of one key are ORed. Matching
        uses the ``type-value`` part of the encoded variant strings.

        Args:
            combinations: Combinations to filter.
            filters: Variant type to allowed values.

        Returns:
            Matching combinations in input order.
        """
        wanted = [
            {
                f"{clean_string(variant_type)}{VALUE_SEPARATOR}{clean_string(value)}"
                for value in values
            }
            for variant_type, values in filters.items()
        ]
        if not wanted:
            return list(combinations)

        results = []
        for combination in combinations:
            parts = self._type_value_parts(combination)
            if all(allowed & parts for allowed in wanted):
                results.append(combination)
        return results

    def get_unique_variant_values(
        self, combinations: Iterable[ProductCombination]
    ) -> dict[str, list[str]]:
        """Index encoded strings into ``{variant_type: sorted values}`` facets.

        Args:
            combinations: Combinations with encoded variant strings.

        Returns:
            Distinct values per decoded variant type.
        """
        facets: dict[str, set[str]] = {}
        for combination in combinations:
            decoded = self.encoder.decode_variant_strings(
                combination.variant_strings,
                separator=self.config.encode_options.separator,
                price_separator=self.config.encode_options.price_separator,
            )
            for item in decoded:
                if not item.variant_type:
                    continue
                facets.setdefault(item.variant_type, set()).add(item.value)
        return {variant_type: sorted(values) for variant_type, values in facets.items()}
