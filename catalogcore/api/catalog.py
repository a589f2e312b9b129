"""Catalog API endpoints.

Provides read-only browsing of categories, product types and variant
templates, plus the template compatibility check.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from catalogcore.api.schemas import (
    CategoryListResponse,
    CategorySchema,
    CompatibilityCheckRequest,
    CompatibilityCheckResponse,
    ErrorResponse,
    ProductTypeListResponse,
    ProductTypeSchema,
    SelectionIssueSchema,
    SubcategorySchema,
    VariantOptionSchema,
    VariantTemplateListResponse,
    VariantTemplateSchema,
)
from catalogcore.catalog.models import (
    Category,
    OptionKind,
    ProductType,
    SelectionIssueKind,
    Subcategory,
    VariantOption,
    VariantTemplate,
)
from catalogcore.catalog.service import CatalogService, PaginationParams, get_catalog_service

router = APIRouter(prefix="/catalog", tags=["Catalog"])

# Issue kinds that make a selection invalid; recommendations do not
BLOCKING_ISSUES = {
    SelectionIssueKind.INCOMPATIBLE,
    SelectionIssueKind.MISSING_REQUIRED,
    SelectionIssueKind.MISSING_CATEGORY_REQUIRED,
}


# ============================================================================
# Dependencies
# ============================================================================


def get_service() -> CatalogService:
    """Get catalog service."""
    return get_catalog_service()


# ============================================================================
# Converters
# ============================================================================


def subcategory_to_response(subcategory: Subcategory) -> SubcategorySchema:
    return SubcategorySchema(
        id=subcategory.id,
        name=subcategory.name,
        product_types=list(subcategory.product_types),
        icon_url=subcategory.icon_url,
    )


def category_to_response(category: Category) -> CategorySchema:
    """Convert Category to response schema."""
    return CategorySchema(
        id=category.id,
        name=category.name,
        subcategories=[subcategory_to_response(s) for s in category.subcategories],
        icon_url=category.icon_url,
    )


def product_type_to_response(product_type: ProductType) -> ProductTypeSchema:
    return ProductTypeSchema(
        id=product_type.id,
        name=product_type.name,
        description=product_type.description,
        category_id=product_type.category_id,
        subcategory_id=product_type.subcategory_id,
        slug=product_type.slug,
        default_variant_templates=list(product_type.default_variant_templates),
    )


def option_to_response(option: VariantOption) -> VariantOptionSchema:
    """Convert VariantOption to response schema."""
    return VariantOptionSchema(
        value=option.value,
        label=option.display_name,
        kind=option.kind,
        additional_price=option.additional_price,
        color_code=option.color_code if option.kind is OptionKind.COLOR else None,
        is_default=option.is_default,
        sort_order=option.sort_order,
        is_active=option.is_active,
    )


def template_to_response(template: VariantTemplate) -> VariantTemplateSchema:
    """Convert VariantTemplate to response schema."""
    default = template.default_option
    return VariantTemplateSchema(
        id=template.id,
        name=template.name,
        description=template.description,
        input_type=template.input_type,
        is_required=template.is_required,
        group=template.group,
        category_ids=list(template.category_ids),
        subcategory_ids=list(template.subcategory_ids),
        product_type_ids=list(template.product_type_ids),
        options=[option_to_response(o) for o in template.variant_options],
        default_value=default.value if default else None,
        min_value=template.min_value,
        max_value=template.max_value,
        step=template.step,
        unit=template.unit,
    )


def _not_found(error_code: str, message: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail={"error_code": error_code, "message": message},
    )


# ============================================================================
# Categories
# ============================================================================


@router.get(
    "/categories",
    response_model=CategoryListResponse,
    summary="List categories",
    description="List catalog categories with nested subcategories, optionally filtered by name.",
)
async def list_categories(
    service: Annotated[CatalogService, Depends(get_service)],
    q: Annotated[str | None, Query(description="Case-insensitive name query")] = None,
) -> CategoryListResponse:
    categories = service.list_categories(q)
    return CategoryListResponse(
        categories=[category_to_response(c) for c in categories],
        total=len(categories),
    )


@router.get(
    "/categories/{category_id}",
    response_model=CategorySchema,
    responses={404: {"model": ErrorResponse}},
    summary="Get category",
)
async def get_category(
    category_id: str,
    service: Annotated[CatalogService, Depends(get_service)],
) -> CategorySchema:
    """Get a category by ID.

    Args:
        category_id: Category identifier.
        service: Catalog service.

    Returns:
        Category with subcategories.

    Raises:
        HTTPException: If category not found.
    """
    category = service.get_category(category_id)
    if category is None:
        raise _not_found("CATEGORY_NOT_FOUND", f"Category not found: {category_id}")
    return category_to_response(category)


@router.get(
    "/categories/{category_id}/subcategories/{subcategory_id}",
    response_model=SubcategorySchema,
    responses={404: {"model": ErrorResponse}},
    summary="Get subcategory",
)
async def get_subcategory(
    category_id: str,
    subcategory_id: str,
    service: Annotated[CatalogService, Depends(get_service)],
) -> SubcategorySchema:
    if service.get_category(category_id) is None:
        raise _not_found("CATEGORY_NOT_FOUND", f"Category not found: {category_id}")

    subcategory = service.get_subcategory(category_id, subcategory_id)
    if subcategory is None:
        raise _not_found(
            "SUBCATEGORY_NOT_FOUND",
            f"Subcategory not found: {category_id}/{subcategory_id}",
        )
    return subcategory_to_response(subcategory)


# ============================================================================
# Product Types
# ============================================================================


@router.get(
    "/product-types",
    response_model=ProductTypeListResponse,
    summary="List product types",
    description="List product types across the catalog, optionally scoped to a category or subcategory.",
)
async def list_product_types(
    service: Annotated[CatalogService, Depends(get_service)],
    category_id: Annotated[str | None, Query(description="Filter by category")] = None,
    subcategory_id: Annotated[
        str | None, Query(description="Filter by subcategory (with category_id)")
    ] = None,
    page: Annotated[int, Query(ge=1)] = 1,
    page_size: Annotated[int, Query(ge=1, le=100)] = 20,
) -> ProductTypeListResponse:
    result = service.list_product_types(
        category_id=category_id,
        subcategory_id=subcategory_id,
        pagination=PaginationParams(page=page, page_size=page_size),
    )
    return ProductTypeListResponse(
        items=[product_type_to_response(pt) for pt in result.items],
        total=result.total,
        page=result.page,
        page_size=result.page_size,
        has_more=result.has_next,
    )


@router.get(
    "/product-types/{product_type_id}",
    response_model=ProductTypeSchema,
    responses={404: {"model": ErrorResponse}},
    summary="Get product type",
)
async def get_product_type(
    product_type_id: str,
    service: Annotated[CatalogService, Depends(get_service)],
) -> ProductTypeSchema:
    product_type = service.get_product_type(product_type_id)
    if product_type is None:
        raise _not_found("PRODUCT_TYPE_NOT_FOUND", f"Product type not found: {product_type_id}")
    return product_type_to_response(product_type)


@router.get(
    "/product-types/{product_type_id}/variant-templates",
    response_model=VariantTemplateListResponse,
    summary="Get variant templates for a product type",
    description=(
        "Templates from the product type mapping, or scope-matched templates "
        "when the product type is unmapped. Empty for unknown product types."
    ),
)
async def get_product_type_variant_templates(
    product_type_id: str,
    service: Annotated[CatalogService, Depends(get_service)],
    recommended: Annotated[
        bool, Query(description="Sort required and common templates first")
    ] = False,
) -> VariantTemplateListResponse:
    templates = service.get_variant_templates(product_type_id, recommended=recommended)
    return VariantTemplateListResponse(
        templates=[template_to_response(t) for t in templates],
        total=len(templates),
    )


# ============================================================================
# Variant Templates
# ============================================================================


@router.get(
    "/variant-templates",
    response_model=VariantTemplateListResponse,
    summary="List variant templates",
)
async def list_variant_templates(
    service: Annotated[CatalogService, Depends(get_service)],
) -> VariantTemplateListResponse:
    templates = service.list_variant_templates()
    return VariantTemplateListResponse(
        templates=[template_to_response(t) for t in templates],
        total=len(templates),
    )


@router.get(
    "/variant-templates/{template_id}",
    response_model=VariantTemplateSchema,
    responses={404: {"model": ErrorResponse}},
    summary="Get variant template",
)
async def get_variant_template(
    template_id: str,
    service: Annotated[CatalogService, Depends(get_service)],
) -> VariantTemplateSchema:
    template = service.get_variant_template(template_id)
    if template is None:
        raise _not_found("VARIANT_TEMPLATE_NOT_FOUND", f"Variant template not found: {template_id}")
    return template_to_response(template)


@router.post(
    "/variant-templates/compatibility",
    response_model=CompatibilityCheckResponse,
    responses={401: {"model": ErrorResponse}},
    summary="Check template compatibility",
    description="Check selected templates for conflicts, missing companions and recommendations.",
)
async def check_compatibility(
    request: CompatibilityCheckRequest,
    service: Annotated[CatalogService, Depends(get_service)],
) -> CompatibilityCheckResponse:
    """Check a template selection.

    Args:
        request: Category and selected template ids.
        service: Catalog service.

    Returns:
        Compatibility flag and all issues found.
    """
    issues = service.check_template_selection(request.category_id, request.template_ids)
    return CompatibilityCheckResponse(
        compatible=not any(issue.kind in BLOCKING_ISSUES for issue in issues),
        issues=[
            SelectionIssueSchema(
                kind=issue.kind,
                template_id=issue.template_id,
                related_template_id=issue.related_template_id,
                message=issue.message,
            )
            for issue in issues
        ],
    )
