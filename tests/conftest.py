"""Shared fixtures: a small synthetic catalog and the components built on it."""

import copy
from typing import Any

import pytest

from catalogcore.catalog.encoder import VariantStringEncoder
from catalogcore.catalog.generator import CombinationGenerator
from catalogcore.catalog.registry import CatalogParser, CatalogRegistry
from catalogcore.catalog.resolver import VariantTemplateResolver

SYNTHETIC_CATALOG: dict[str, Any] = {
    "categories": [
        {
            "id": "apparel",
            "name": "Apparel",
            "subcategories": [
                {"id": "tops", "name": "Tops", "productTypes": ["t-shirts", "hoodies"]},
                {"id": "shoes", "name": "Shoes", "productTypes": ["sneakers"]},
            ],
        },
        {
            "id": "tech",
            "name": "Tech",
            "subcategories": [
                {"id": "phones", "name": "Phones", "productTypes": ["smartphones"]},
            ],
        },
        {
            "id": "home-living",
            "name": "Home Living",
            "subcategories": [
                {"id": "bath-room", "name": "Bath Room", "productTypes": ["towels"]},
            ],
        },
    ],
    "variantTemplates": {
        "color": {
            "id": "color",
            "name": "Color",
            "inputType": "color",
            "categoryIds": ["apparel"],
            "options": [
                {"value": "black", "name": "Black", "colorCode": "#000000", "isDefault": True},
                {"value": "red", "name": "Red", "colorCode": "#FF0000"},
                {"value": "blue", "name": "Blue", "colorCode": "#0000FF", "additionalPrice": 5},
                {"value": "gold", "name": "Gold", "colorCode": "#FFD700", "additionalPrice": 15},
                {"value": "rose-gold", "name": "Rose Gold", "colorCode": "#E8B4B8", "additionalPrice": 20},
            ],
        },
        "size": {
            "id": "size",
            "name": "Size",
            "inputType": "select",
            "isRequired": True,
            "subcategoryIds": ["apparel-tops"],
            "options": [
                {"value": "s", "name": "S"},
                {"value": "m", "name": "M", "isDefault": True},
                {"value": "l", "name": "L"},
                {"value": "xl", "name": "XL", "additionalPrice": 3},
            ],
        },
        "material": {
            "id": "material",
            "name": "Material",
            "inputType": "select",
            "productTypeIds": ["apparel-tops-hoodies"],
            "options": [
                {"value": "cotton", "name": "Cotton"},
                {"value": "wool", "name": "Wool", "additionalPrice": 12},
                {"value": "recycled", "name": "Recycled", "additionalPrice": -3},
            ],
        },
        "storage": {
            "id": "storage",
            "name": "Storage",
            "inputType": "select",
            "options": [
                {"value": "128gb", "name": "128GB"},
                {"value": "256gb", "name": "256GB", "additionalPrice": 100},
                {"value": "1tb", "name": "1TB", "additionalPrice": 300},
            ],
        },
        "ram": {
            "id": "ram",
            "name": "RAM",
            "inputType": "select",
            "options": [
                {"value": "8gb", "name": "8GB"},
                {"value": "16gb", "name": "16GB", "additionalPrice": 50},
            ],
        },
        "screen-size": {
            "id": "screen-size",
            "name": "Screen Size",
            "inputType": "number",
            "options": [{"value": "6.1"}, {"value": "6.7", "additionalPrice": 100}],
        },
        "spf-level": {
            "id": "spf-level",
            "name": "SPF Level",
            "inputType": "number",
            "options": [{"value": "15"}, {"value": "30"}, {"value": "50"}],
        },
        "volume": {
            "id": "volume",
            "name": "Volume",
            "inputType": "number",
            "options": [{"value": "50"}, {"value": "100"}, {"value": "250"}],
        },
        "battery-life": {
            "id": "battery-life",
            "name": "Battery Life",
            "inputType": "range",
            "options": [{"value": "10"}, {"value": "12"}, {"value": "12"}],
        },
        "weight-capacity": {
            "id": "weight-capacity",
            "name": "Weight Capacity",
            "inputType": "number",
            "options": [{"value": "light"}, {"value": "heavy", "additionalPrice": 50}],
        },
        "connectivity": {
            "id": "connectivity",
            "name": "Connectivity",
            "inputType": "multiselect",
            "options": [
                {"value": "wifi", "name": "Wi-Fi", "isDefault": True},
                {"value": "bluetooth", "name": "Bluetooth", "isDefault": True},
            ],
        },
        "warranty": {
            "id": "warranty",
            "name": "Warranty",
            "inputType": "select",
            "categoryIds": ["tech"],
            "options": [{"value": "1-year"}, {"value": "2-year", "additionalPrice": 30}],
        },
        "gift-wrap": {
            "id": "gift-wrap",
            "name": "Gift Wrap",
            "inputType": "boolean",
            "options": [{"value": "no"}, {"value": "yes", "additionalPrice": 4}],
        },
    },
    "productTypeVariantMapping": {
        "tech": {"smartphones": ["storage", "color", "ram", "ghost"]},
    },
    "variantCategories": {
        "physical": ["size", "weight-capacity"],
        "technical": ["storage", "ram", "screen-size"],
    },
    "variantDisplayGroups": {
        "physical_attributes": ["size", "color"],
    },
    "requiredVariantsByCategory": {
        "apparel": ["size", "color"],
    },
    "compatibilityMatrix": {
        "size": {"incompatible": ["storage"], "required": ["color"]},
        "storage": {"incompatible": ["size"], "recommended": ["ram"]},
    },
}


@pytest.fixture
def catalog_document() -> dict[str, Any]:
    """Fresh copy of the synthetic catalog document."""
    return copy.deepcopy(SYNTHETIC_CATALOG)


@pytest.fixture
def registry(catalog_document: dict[str, Any]) -> CatalogRegistry:
    """Registry parsed from the synthetic catalog."""
    return CatalogParser().parse_dict(catalog_document, source="tests")


@pytest.fixture
def resolver(registry: CatalogRegistry) -> VariantTemplateResolver:
    return VariantTemplateResolver(registry)


@pytest.fixture
def encoder(registry: CatalogRegistry) -> VariantStringEncoder:
    return VariantStringEncoder(registry)


@pytest.fixture
def generator(encoder: VariantStringEncoder) -> CombinationGenerator:
    return CombinationGenerator(encoder)
