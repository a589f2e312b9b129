"""Tests for variant string encoding and decoding."""

import pytest

from catalogcore.catalog.encoder import (
    EncodeOptions,
    StoreFilterCriteria,
    VariantStringEncoder,
    clean_string,
    color_category,
    price_bucket,
    size_category,
    sku_suffix,
)
from catalogcore.catalog.models import DecodedVariant, ProductCombination, ProductVariant
from catalogcore.catalog.registry import CatalogRegistry
from catalogcore.domain.exceptions import UnknownVariantOptionError, UnknownVariantTemplateError


class TestHelpers:
    """Tests for normalisation and bucketing helpers."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("Red", "red"),
            ("Rose Gold!", "rosegold"),
            ("  --Hello__World--", "hello-world"),
            ("a_-_b", "a-b"),
            ("XL/Tall", "xltall"),
            ("", ""),
        ],
    )
    def test_clean_string(self, raw: str, expected: str) -> None:
        """Raw strings are normalised to canonical token fragments."""
        assert clean_string(raw) == expected

    def test_clean_string_is_stable(self) -> None:
        """Cleaning a canonical string changes nothing."""
        assert clean_string(clean_string("Space Gray / 2024")) == clean_string("Space Gray / 2024")

    @pytest.mark.parametrize(
        ("delta", "bucket"),
        [
            (5, "under10"),
            (9.99, "under10"),
            (10, "10to25"),
            (24.99, "10to25"),
            (25, "25to50"),
            (-30, "25to50"),
            (99, "50to100"),
            (100, "100to250"),
            (250, "over250"),
        ],
    )
    def test_price_bucket(self, delta: float, bucket: str) -> None:
        """Buckets are contiguous by absolute delta."""
        assert price_bucket(delta) == bucket

    @pytest.mark.parametrize(
        ("size", "category"),
        [
            ("xs", "extrasmall"),
            ("S", "small"),
            ("medium", "medium"),
            ("l", "large"),
            ("xxl", "extralarge"),
            ("6", "small"),
            ("8", "medium"),
            ("10.5", "medium"),
            ("14", "large"),
            ("15", "extralarge"),
            ("one-size", "other"),
        ],
    )
    def test_size_category(self, size: str, category: str) -> None:
        """Letter sizes use the table, numeric sizes the leading integer."""
        assert size_category(size) == category

    def test_color_category(self) -> None:
        """Hex codes map through the fixed table, case-insensitively."""
        assert color_category("#FF0000") == "red"
        assert color_category("#000080") == "blue"
        assert color_category("#FFD700") == "other"
        assert color_category("red") == "other"
        assert color_category(None) == "other"

    @pytest.mark.parametrize(
        ("template_id", "value", "suffix"),
        [
            ("color", "blue", "BLU"),
            ("color", "Rose Gold", "ROS"),
            ("size", "m", "M"),
            ("size-clothing", "x-l", "XL"),
            ("storage", "256gb", "256G"),
            ("storage", "1TB", "1T"),
            ("ram", "16gb", "16R"),
            ("material", "cotton", "COT"),
            ("color", "!!", ""),
        ],
    )
    def test_sku_suffix(self, template_id: str, value: str, suffix: str) -> None:
        """SKU fragments follow the per-template rules."""
        assert sku_suffix(template_id, value) == suffix


class TestEncode:
    """Tests for encode_variants_to_string_array."""

    def test_default_options(self, encoder: VariantStringEncoder) -> None:
        """Defaults include the price but not the template name."""
        tokens = encoder.encode_variants_to_string_array({"color": "blue", "size": "m"})
        assert tokens == ["blue_price-plus5", "m"]

    def test_include_name(self, encoder: VariantStringEncoder) -> None:
        """Names prefix the cleaned template id."""
        tokens = encoder.encode_variants_to_string_array(
            {"color": "blue", "size": "m"}, EncodeOptions(include_name=True)
        )
        assert tokens == ["color-blue_price-plus5", "size-m"]

    def test_negative_price(self, encoder: VariantStringEncoder) -> None:
        """Negative deltas use the minus form."""
        tokens = encoder.encode_variants_to_string_array({"material": "recycled"})
        assert tokens == ["recycled_price-minus3"]

    def test_exclude_price(self, encoder: VariantStringEncoder) -> None:
        """Prices can be left out."""
        tokens = encoder.encode_variants_to_string_array(
            {"color": "blue"}, EncodeOptions(include_price=False)
        )
        assert tokens == ["blue"]

    def test_custom_price_separator(self, encoder: VariantStringEncoder) -> None:
        """The price separator is configurable."""
        tokens = encoder.encode_variants_to_string_array(
            {"color": "blue"}, EncodeOptions(price_separator="~")
        )
        assert tokens == ["blue~price-plus5"]

    def test_unknown_template_skipped(self, encoder: VariantStringEncoder) -> None:
        """Unknown templates contribute no token."""
        tokens = encoder.encode_variants_to_string_array({"ghost": "x", "color": "red"})
        assert tokens == ["red"]

    def test_unknown_option_encoded_without_price(self, encoder: VariantStringEncoder) -> None:
        """Values missing from the template are encoded without a price."""
        assert encoder.encode_variants_to_string_array({"color": "Deep Purple"}) == ["deeppurple"]

    def test_truncation(self, encoder: VariantStringEncoder) -> None:
        """Long tokens are truncated at max_length."""
        tokens = encoder.encode_variants_to_string_array(
            {"color": "blue"}, EncodeOptions(max_length=5)
        )
        assert tokens == ["blue_"]

    def test_strict_unknown_template(self, registry: CatalogRegistry) -> None:
        """Strict mode rejects unknown templates."""
        encoder = VariantStringEncoder(registry, strict=True)
        with pytest.raises(UnknownVariantTemplateError):
            encoder.encode_variants_to_string_array({"ghost": "x"})

    def test_strict_unknown_option(self, registry: CatalogRegistry) -> None:
        """Strict mode rejects unknown option values."""
        encoder = VariantStringEncoder(registry, strict=True)
        with pytest.raises(UnknownVariantOptionError):
            encoder.encode_variants_to_string_array({"color": "purple"})


class TestDecode:
    """Tests for decode_variant_strings."""

    def test_decode_named_token_with_price(self) -> None:
        """Type, value and signed price are recovered."""
        decoded = VariantStringEncoder.decode_variant_strings(["color-blue_price-plus5"])
        assert decoded == [DecodedVariant("color", "blue", has_price=True, price_modifier=5)]

    def test_decode_bare_value(self) -> None:
        """Tokens without a hyphen are bare values."""
        assert VariantStringEncoder.decode_variant_strings(["m"]) == [DecodedVariant("", "m")]

    def test_decode_negative_price(self) -> None:
        """Minus prices decode to negative modifiers."""
        decoded = VariantStringEncoder.decode_variant_strings(["recycled_price-minus3"])
        assert decoded == [DecodedVariant("", "recycled", has_price=True, price_modifier=-3)]

    def test_decode_hyphenated_value(self) -> None:
        """Only the first hyphen separates type from value."""
        decoded = VariantStringEncoder.decode_variant_strings(["color-rose-gold"])
        assert decoded[0].variant_type == "color"
        assert decoded[0].value == "rose-gold"

    def test_decode_price_in_separate_part(self) -> None:
        """A price part after the separator is found."""
        decoded = VariantStringEncoder.decode_variant_strings(["color-red/price-plus12"])
        assert decoded == [DecodedVariant("color", "red", has_price=True, price_modifier=12)]

    def test_round_trip(self, encoder: VariantStringEncoder) -> None:
        """Canonical values survive encode then decode."""
        tokens = encoder.encode_variants_to_string_array(
            {"color": "blue", "material": "recycled", "size": "m"},
            EncodeOptions(include_name=True),
        )
        decoded = encoder.decode_variant_strings(tokens)
        assert [(d.variant_type, d.value, d.price_modifier) for d in decoded] == [
            ("color", "blue", 5),
            ("material", "recycled", -3),
            ("size", "m", None),
        ]


class TestSearchTags:
    """Tests for search tags and filter arrays."""

    def test_color_tags(self, encoder: VariantStringEncoder) -> None:
        """Colour values get price and colour category tags."""
        tags = encoder.create_variant_search_tags({"color": "blue"})
        assert tags == ["color:blue", "has:color", "pricemod:under10", "colorcat:blue"]

    def test_display_name_tag(self, encoder: VariantStringEncoder) -> None:
        """A display name that cleans differently adds a tag."""
        tags = encoder.create_variant_search_tags({"color": "gold"})
        assert "colorcat:other" in tags
        assert "pricemod:10to25" in tags
        tags = encoder.create_variant_search_tags({"gift-wrap": "yes"})
        assert tags[0] == "giftwrap:yes"
        assert "has:giftwrap" in tags

    def test_size_tags(self, encoder: VariantStringEncoder) -> None:
        """Size templates get a size category tag."""
        tags = encoder.create_variant_search_tags({"size": "xl"})
        assert tags == ["size:xl", "has:size", "pricemod:under10", "sizecat:extralarge"]

    def test_hyphens_removed_from_tag_type(self, encoder: VariantStringEncoder) -> None:
        """Tag types drop hyphens from the template id."""
        tags = encoder.create_variant_search_tags({"screen-size": "6.1"})
        assert tags == ["screensize:61", "has:screensize", "sizecat:small"]

    def test_tags_deduplicated(self, encoder: VariantStringEncoder) -> None:
        """Repeated tags appear once."""
        tags = encoder.create_variant_search_tags({"color": "red", "size": "m"})
        assert len(tags) == len(set(tags))
        assert "colorcat:red" in tags
        assert "sizecat:medium" in tags

    def test_unknown_template_has_no_tags(self, encoder: VariantStringEncoder) -> None:
        """Unknown templates are skipped."""
        assert encoder.create_variant_search_tags({"ghost": "x"}) == []

    def test_filter_arrays(self, encoder: VariantStringEncoder) -> None:
        """Filter arrays hold exact, fuzzy, type and price columns."""
        arrays = encoder.create_filter_arrays({"color": "blue", "size": "m", "ghost": "x"})
        assert arrays.exact_match == ("color-blue", "size-m")
        assert arrays.fuzzy_match == ("blue", "m")
        assert arrays.type_match == ("color", "size")
        assert arrays.price_range == ("under10",)


class TestSkuAndDisplay:
    """Tests for SKU suffixes and display info."""

    def test_sku_suffix_order(self, encoder: VariantStringEncoder) -> None:
        """Suffixes follow the variant value order."""
        assert encoder.generate_variant_sku_suffix({"color": "blue", "size": "m"}) == "BLU-M"
        assert encoder.generate_variant_sku_suffix({"size": "m", "color": "blue"}) == "M-BLU"

    def test_empty_suffixes_dropped(self, encoder: VariantStringEncoder) -> None:
        """Values that produce no suffix are dropped."""
        assert encoder.generate_variant_sku_suffix({"color": "!!", "size": "l"}) == "L"

    def test_display_info(self, encoder: VariantStringEncoder) -> None:
        """Display info carries label, colour and price."""
        info = encoder.get_variant_display_info("color", "blue")
        assert info.display_name == "Blue"
        assert info.color_code == "#0000FF"
        assert info.additional_price == 5

    def test_display_info_plain_option(self, encoder: VariantStringEncoder) -> None:
        """Plain options have no colour code."""
        info = encoder.get_variant_display_info("size", "xl")
        assert info.display_name == "XL"
        assert info.color_code is None

    def test_display_info_unknown(self, encoder: VariantStringEncoder) -> None:
        """Unknown values fall back to the raw value."""
        info = encoder.get_variant_display_info("ghost", "x")
        assert info.display_name == "x"
        assert info.additional_price is None


class TestCombinationEncoding:
    """Tests for combination-level encoding."""

    @pytest.fixture
    def combinations(self) -> list[ProductCombination]:
        return [
            ProductCombination(
                id="combination-0",
                variant_values={"color": "red", "size": "m"},
                sku="SKU1-RED-M",
                price=20,
                quantity=4,
                is_default=True,
            ),
            ProductCombination(
                id="",
                variant_values={"color": "blue", "size": "m"},
                sku="SKU1-BLU-M",
                price=0,
            ),
        ]

    def test_encode_product_combinations(
        self, encoder: VariantStringEncoder, combinations: list[ProductCombination]
    ) -> None:
        """Combinations are encoded with ids, strings and prices."""
        encoded = encoder.encode_product_combinations(
            combinations, base_price=18, options=EncodeOptions(include_name=True)
        )
        assert encoded[0].combination_id == "combination-0"
        assert encoded[0].combination_string == "color-red/size-m"
        assert encoded[0].final_price == 20
        # Missing id and zero price fall back
        assert encoded[1].combination_id == "combo-1"
        assert encoded[1].final_price == 18
        assert encoded[1].variant_strings == ("color-blue_price-plus5", "size-m")

    def test_prepare_for_storage(
        self, encoder: VariantStringEncoder, combinations: list[ProductCombination]
    ) -> None:
        """Storage payload collects strings, tags and filter arrays."""
        variants = [ProductVariant(template_id="color"), ProductVariant(template_id="size")]
        payload = encoder.prepare_for_storage(variants, combinations)
        assert payload.has_variants
        assert payload.variant_types == ("color", "size")
        first = payload.variant_combinations[0]
        assert first.variant_strings == ("color-red", "size-m")
        assert first.combination_string == "color-red/size-m"
        assert first.quantity == 4
        assert "colorcat:red" in first.search_tags
        assert first.filter_arrays.exact_match == ("color-red", "size-m")
        assert payload.all_variant_tags.count("has:color") == 1
        assert "colorcat:blue" in payload.all_variant_tags

    def test_prepare_for_storage_without_combinations(self, encoder: VariantStringEncoder) -> None:
        """Products without combinations have no variant payload."""
        payload = encoder.prepare_for_storage([ProductVariant(template_id="color")], [])
        assert not payload.has_variants
        assert payload.variant_combinations == ()

    def test_build_store_filters(self) -> None:
        """Criteria become array-contains predicates."""
        filters = VariantStringEncoder.build_store_filters(
            StoreFilterCriteria(
                variant_type="color",
                price_range="under10",
                color_category="red",
                size_category="small",
            )
        )
        assert filters == [
            'variantTypes.contains("color")',
            'allVariantTags.contains("pricemod:under10")',
            'allVariantTags.contains("colorcat:red")',
            'allVariantTags.contains("sizecat:small")',
        ]

    def test_build_store_filters_empty(self) -> None:
        """Empty criteria produce no predicates."""
        assert VariantStringEncoder.build_store_filters(StoreFilterCriteria()) == []
