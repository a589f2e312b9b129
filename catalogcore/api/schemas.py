"""API schemas for the catalog API.

Pydantic models for request/response validation and serialization.
"""

from pydantic import BaseModel, Field

from catalogcore.catalog.models import InputType, OptionKind, SelectionIssueKind


# ============================================================================
# Common Schemas
# ============================================================================


class ErrorDetail(BaseModel):
    """Detailed error information."""

    field: str | None = Field(default=None, description="Field that caused the error")
    message: str = Field(..., description="Error message")


class ErrorResponse(BaseModel):
    """Standard error response.

    All API errors follow this format for consistency.
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: list[ErrorDetail] = Field(
        default_factory=list, description="Additional error details"
    )
    request_id: str | None = Field(
        default=None, description="Request ID for correlation"
    )


class PaginatedResponse(BaseModel):
    """Base paginated response."""

    total: int = Field(..., description="Total number of items")
    page: int = Field(..., description="Current page number")
    page_size: int = Field(..., description="Items per page")
    has_more: bool = Field(..., description="Whether there are more pages")


# ============================================================================
# Catalog Schemas
# ============================================================================


class SubcategorySchema(BaseModel):
    """Subcategory with its product type slugs."""

    id: str
    name: str
    product_types: list[str] = Field(default_factory=list, description="Product type slugs")
    icon_url: str | None = None


class CategorySchema(BaseModel):
    """Top-level category."""

    id: str
    name: str
    subcategories: list[SubcategorySchema] = Field(default_factory=list)
    icon_url: str | None = None


class CategoryListResponse(BaseModel):
    categories: list[CategorySchema]
    total: int


class ProductTypeSchema(BaseModel):
    """Product type (leaf of the catalog tree)."""

    id: str = Field(..., description="Composite id: category-subcategory-slug")
    name: str
    description: str
    category_id: str
    subcategory_id: str
    slug: str
    default_variant_templates: list[str] = Field(
        default_factory=list, description="Template ids from the product type mapping"
    )


class ProductTypeListResponse(PaginatedResponse):
    """Paginated list of product types."""

    items: list[ProductTypeSchema]


class VariantOptionSchema(BaseModel):
    """Option of a variant template."""

    value: str
    label: str
    kind: OptionKind = OptionKind.PLAIN
    additional_price: float = Field(default=0, description="Signed price delta")
    color_code: str | None = Field(default=None, description="Hex colour for colour options")
    is_default: bool = False
    sort_order: int = 0
    is_active: bool = True


class VariantTemplateSchema(BaseModel):
    """Variant template with derived input type and display group."""

    id: str
    name: str
    description: str | None = None
    input_type: InputType
    is_required: bool = False
    group: str
    category_ids: list[str] = Field(default_factory=list)
    subcategory_ids: list[str] = Field(default_factory=list)
    product_type_ids: list[str] = Field(default_factory=list)
    options: list[VariantOptionSchema] = Field(default_factory=list)
    default_value: str | None = Field(
        default=None, description="Value of the default option, if any"
    )
    min_value: float | None = None
    max_value: float | None = None
    step: float | None = None
    unit: str | None = None


class VariantTemplateListResponse(BaseModel):
    templates: list[VariantTemplateSchema]
    total: int


class CompatibilityCheckRequest(BaseModel):
    """Selected templates to check against the compatibility rules."""

    category_id: str = Field(..., description="Category of the product")
    template_ids: list[str] = Field(..., description="Selected template ids")


class SelectionIssueSchema(BaseModel):
    kind: SelectionIssueKind
    template_id: str
    related_template_id: str | None = None
    message: str


class CompatibilityCheckResponse(BaseModel):
    """Result of a template compatibility check."""

    compatible: bool = Field(
        ..., description="False when templates conflict or required ones are missing"
    )
    issues: list[SelectionIssueSchema] = Field(default_factory=list)


# ============================================================================
# Variant Schemas
# ============================================================================


class VariantOptionInput(BaseModel):
    """Option selected for a product."""

    value: str = Field(..., min_length=1)
    label: str = ""
    additional_price: float = Field(default=0, description="Signed price delta")
    color_code: str | None = None


class ProductVariantInput(BaseModel):
    """Template selected for a product with its enabled options."""

    template_id: str = Field(..., min_length=1)
    options: list[VariantOptionInput] = Field(default_factory=list)


class CombinationSchema(BaseModel):
    """One purchasable combination of variant options."""

    id: str
    variant_values: dict[str, str] = Field(..., description="Template id to option value")
    sku: str
    price: float = Field(..., ge=0)
    quantity: int = Field(default=0, ge=0)
    is_default: bool = False
    variant_strings: list[str] = Field(default_factory=list)


class GenerateCombinationsRequest(BaseModel):
    """Request to expand variant selections into combinations."""

    variants: list[ProductVariantInput]
    base_price: float = Field(..., ge=0, description="Product base price")
    base_sku: str = Field(..., min_length=1, description="Product base SKU")
    existing: list[CombinationSchema] = Field(
        default_factory=list,
        description="Stored combinations whose SKU, price and quantity are kept",
    )
    price_adjustment: float = Field(default=0, description="Added to every price")


class CombinationListResponse(BaseModel):
    combinations: list[CombinationSchema]
    total: int


class FilterCombinationsRequest(BaseModel):
    """Combinations to filter by variant type and allowed values."""

    combinations: list[CombinationSchema]
    filters: dict[str, list[str]] = Field(
        default_factory=dict, description="Variant type to allowed values"
    )


class FacetsRequest(BaseModel):
    combinations: list[CombinationSchema]


class FacetsResponse(BaseModel):
    facets: dict[str, list[str]] = Field(..., description="Variant type to distinct values")


class EncodeRequest(BaseModel):
    """Variant values to encode into tokens."""

    variant_values: dict[str, str]
    include_price: bool = True
    include_name: bool = False
    separator: str = Field(default="/", min_length=1)
    price_separator: str = Field(default="_", min_length=1)
    max_length: int | None = Field(default=None, ge=1, description="Token length limit")


class EncodeResponse(BaseModel):
    variant_strings: list[str]
    combination_string: str


class DecodeRequest(BaseModel):
    variant_strings: list[str]
    separator: str = Field(default="/", min_length=1)
    price_separator: str = Field(default="_", min_length=1)


class DecodedVariantSchema(BaseModel):
    variant_type: str
    value: str
    has_price: bool
    price_modifier: int | None = None


class DecodeResponse(BaseModel):
    variants: list[DecodedVariantSchema]


class VariantValuesRequest(BaseModel):
    variant_values: dict[str, str]


class SearchTagsResponse(BaseModel):
    tags: list[str]


class FilterArraysSchema(BaseModel):
    """Parallel array columns for array-contains queries."""

    exact_match: list[str]
    fuzzy_match: list[str]
    type_match: list[str]
    price_range: list[str]


class StoragePayloadRequest(BaseModel):
    """Product variants and combinations to prepare for storage."""

    variants: list[ProductVariantInput] = Field(default_factory=list)
    combinations: list[CombinationSchema] = Field(default_factory=list)


class StoredCombinationSchema(BaseModel):
    id: str
    variant_strings: list[str]
    combination_string: str
    search_tags: list[str]
    filter_arrays: FilterArraysSchema
    price: float
    sku: str
    quantity: int


class StoragePayloadResponse(BaseModel):
    """Variant fields of a product document."""

    has_variants: bool
    variant_types: list[str]
    variant_combinations: list[StoredCombinationSchema]
    all_variant_tags: list[str]


class StoreFiltersRequest(BaseModel):
    """Search criteria to turn into document store predicates."""

    variant_type: str | None = None
    variant_value: str | None = None
    price_range: str | None = Field(default=None, description="Price bucket, e.g. under10")
    color_category: str | None = None
    size_category: str | None = None


class StoreFiltersResponse(BaseModel):
    filters: list[str]
