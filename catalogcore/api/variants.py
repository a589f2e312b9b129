"""Variant API endpoints.

Provides combination generation, filtering and facets, and the variant
string encoding used by the product storage and search layers.
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from catalogcore.api.schemas import (
    CombinationListResponse,
    CombinationSchema,
    DecodedVariantSchema,
    DecodeRequest,
    DecodeResponse,
    EncodeRequest,
    EncodeResponse,
    ErrorResponse,
    FacetsRequest,
    FacetsResponse,
    FilterArraysSchema,
    FilterCombinationsRequest,
    GenerateCombinationsRequest,
    ProductVariantInput,
    SearchTagsResponse,
    StoragePayloadRequest,
    StoragePayloadResponse,
    StoredCombinationSchema,
    StoreFiltersRequest,
    StoreFiltersResponse,
    VariantValuesRequest,
)
from catalogcore.catalog.encoder import EncodeOptions, StoreFilterCriteria
from catalogcore.catalog.models import (
    FilterArrays,
    ProductCombination,
    ProductVariant,
    VariantOption,
)
from catalogcore.catalog.service import CatalogService, get_catalog_service

router = APIRouter(
    prefix="/variants",
    tags=["Variants"],
    responses={401: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
)


# ============================================================================
# Dependencies
# ============================================================================


def get_service() -> CatalogService:
    """Get catalog service."""
    return get_catalog_service()


# ============================================================================
# Converters
# ============================================================================


def variant_from_request(variant: ProductVariantInput) -> ProductVariant:
    """Convert a variant selection to the domain type."""
    return ProductVariant(
        template_id=variant.template_id,
        options=tuple(
            VariantOption.create(
                value=option.value,
                label=option.label,
                additional_price=option.additional_price,
                color_code=option.color_code,
            )
            for option in variant.options
        ),
    )


def combination_from_request(combination: CombinationSchema) -> ProductCombination:
    return ProductCombination(
        id=combination.id,
        variant_values=dict(combination.variant_values),
        sku=combination.sku,
        price=combination.price,
        quantity=combination.quantity,
        is_default=combination.is_default,
        variant_strings=tuple(combination.variant_strings),
    )


def combination_to_response(combination: ProductCombination) -> CombinationSchema:
    return CombinationSchema(
        id=combination.id,
        variant_values=dict(combination.variant_values),
        sku=combination.sku,
        price=combination.price,
        quantity=combination.quantity,
        is_default=combination.is_default,
        variant_strings=list(combination.variant_strings),
    )


def filter_arrays_to_response(arrays: FilterArrays) -> FilterArraysSchema:
    return FilterArraysSchema(
        exact_match=list(arrays.exact_match),
        fuzzy_match=list(arrays.fuzzy_match),
        type_match=list(arrays.type_match),
        price_range=list(arrays.price_range),
    )


# ============================================================================
# Combinations
# ============================================================================


@router.post(
    "/combinations",
    response_model=CombinationListResponse,
    summary="Generate combinations",
    description=(
        "Expand the selected options of every variant into the cartesian product "
        "of combinations, each with price, SKU and encoded variant strings."
    ),
)
async def generate_combinations(
    request: GenerateCombinationsRequest,
    service: Annotated[CatalogService, Depends(get_service)],
) -> CombinationListResponse:
    """Generate combinations for a product.

    Args:
        request: Variant selections, base price and base SKU.
        service: Catalog service.

    Returns:
        Generated combinations; the first one is the default.
    """
    combinations = service.generate_combinations(
        [variant_from_request(v) for v in request.variants],
        base_price=request.base_price,
        base_sku=request.base_sku,
        existing=[combination_from_request(c) for c in request.existing],
        price_adjustment=request.price_adjustment,
    )
    return CombinationListResponse(
        combinations=[combination_to_response(c) for c in combinations],
        total=len(combinations),
    )


@router.post(
    "/combinations/filter",
    response_model=CombinationListResponse,
    summary="Filter combinations",
    description="Keep combinations matching every variant type filter (values within one type are alternatives).",
)
async def filter_combinations(
    request: FilterCombinationsRequest,
    service: Annotated[CatalogService, Depends(get_service)],
) -> CombinationListResponse:
    combinations = service.filter_combinations(
        [combination_from_request(c) for c in request.combinations],
        request.filters,
    )
    return CombinationListResponse(
        combinations=[combination_to_response(c) for c in combinations],
        total=len(combinations),
    )


@router.post(
    "/combinations/facets",
    response_model=FacetsResponse,
    summary="Build filter facets",
)
async def combination_facets(
    request: FacetsRequest,
    service: Annotated[CatalogService, Depends(get_service)],
) -> FacetsResponse:
    facets = service.get_unique_variant_values(
        [combination_from_request(c) for c in request.combinations]
    )
    return FacetsResponse(facets=facets)


# ============================================================================
# Encoding
# ============================================================================


@router.post("/encode", response_model=EncodeResponse, summary="Encode variant values")
async def encode_variants(
    request: EncodeRequest,
    service: Annotated[CatalogService, Depends(get_service)],
) -> EncodeResponse:
    """Encode variant values into tokens.

    Args:
        request: Variant values and encoding options.
        service: Catalog service.

    Returns:
        Tokens and the joined combination string.
    """
    options = EncodeOptions(
        include_price=request.include_price,
        include_name=request.include_name,
        separator=request.separator,
        price_separator=request.price_separator,
        max_length=request.max_length or service.encoder.default_options.max_length,
    )
    tokens = service.encode_variants(request.variant_values, options)
    return EncodeResponse(
        variant_strings=tokens,
        combination_string=options.separator.join(tokens),
    )


@router.post("/decode", response_model=DecodeResponse, summary="Decode variant strings")
async def decode_variants(
    request: DecodeRequest,
    service: Annotated[CatalogService, Depends(get_service)],
) -> DecodeResponse:
    decoded = service.encoder.decode_variant_strings(
        request.variant_strings,
        separator=request.separator,
        price_separator=request.price_separator,
    )
    return DecodeResponse(
        variants=[
            DecodedVariantSchema(
                variant_type=item.variant_type,
                value=item.value,
                has_price=item.has_price,
                price_modifier=item.price_modifier,
            )
            for item in decoded
        ]
    )


@router.post("/search-tags", response_model=SearchTagsResponse, summary="Create search tags")
async def create_search_tags(
    request: VariantValuesRequest,
    service: Annotated[CatalogService, Depends(get_service)],
) -> SearchTagsResponse:
    return SearchTagsResponse(tags=service.encoder.create_variant_search_tags(request.variant_values))


@router.post("/filter-arrays", response_model=FilterArraysSchema, summary="Create filter arrays")
async def create_filter_arrays(
    request: VariantValuesRequest,
    service: Annotated[CatalogService, Depends(get_service)],
) -> FilterArraysSchema:
    return filter_arrays_to_response(service.encoder.create_filter_arrays(request.variant_values))


@router.post(
    "/storage-payload",
    response_model=StoragePayloadResponse,
    summary="Prepare variant storage payload",
    description="Build the variant fields written alongside a product document.",
)
async def storage_payload(
    request: StoragePayloadRequest,
    service: Annotated[CatalogService, Depends(get_service)],
) -> StoragePayloadResponse:
    payload = service.encoder.prepare_for_storage(
        [variant_from_request(v) for v in request.variants],
        [combination_from_request(c) for c in request.combinations],
    )
    return StoragePayloadResponse(
        has_variants=payload.has_variants,
        variant_types=list(payload.variant_types),
        variant_combinations=[
            StoredCombinationSchema(
                id=stored.id,
                variant_strings=list(stored.variant_strings),
                combination_string=stored.combination_string,
                search_tags=list(stored.search_tags),
                filter_arrays=filter_arrays_to_response(stored.filter_arrays),
                price=stored.price,
                sku=stored.sku,
                quantity=stored.quantity,
            )
            for stored in payload.variant_combinations
        ],
        all_variant_tags=list(payload.all_variant_tags),
    )


@router.post(
    "/store-filters",
    response_model=StoreFiltersResponse,
    summary="Build document store filters",
)
async def store_filters(
    request: StoreFiltersRequest,
    service: Annotated[CatalogService, Depends(get_service)],
) -> StoreFiltersResponse:
    criteria = StoreFilterCriteria(
        variant_type=request.variant_type,
        variant_value=request.variant_value,
        price_range=request.price_range,
        color_category=request.color_category,
        size_category=request.size_category,
    )
    return StoreFiltersResponse(filters=service.encoder.build_store_filters(criteria))
