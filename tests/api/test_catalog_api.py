"""Tests for catalog browsing endpoints."""

from fastapi.testclient import TestClient

SMARTPHONES = "electronics-technology-smartphones-mobile-smartphones"


class TestCategoryEndpoints:
    """Tests for category endpoints."""

    def test_list_categories(self, client: TestClient) -> None:
        """All categories are listed with subcategories."""
        response = client.get("/catalog/categories")
        assert response.status_code == 200
        data = response.json()
        assert data["total"] == len(data["categories"])
        first = data["categories"][0]
        assert first["id"] == "fashion-apparel"
        assert first["subcategories"][0]["id"] == "mens-clothing"
        assert "shirts-tops" in first["subcategories"][0]["product_types"]

    def test_search_categories(self, client: TestClient) -> None:
        """Queries match subcategory and product type names."""
        response = client.get("/catalog/categories", params={"q": "smartphones"})
        assert [c["id"] for c in response.json()["categories"]] == ["electronics-technology"]

    def test_get_category(self, client: TestClient) -> None:
        """Should return a category by id."""
        response = client.get("/catalog/categories/home-garden")
        assert response.status_code == 200
        assert response.json()["id"] == "home-garden"

    def test_get_category_not_found(self, client: TestClient) -> None:
        """Unknown categories return 404."""
        response = client.get("/catalog/categories/nope")
        assert response.status_code == 404
        assert response.json()["error_code"] == "CATEGORY_NOT_FOUND"

    def test_get_subcategory(self, client: TestClient) -> None:
        """Should return a subcategory."""
        response = client.get("/catalog/categories/fashion-apparel/subcategories/shoes")
        assert response.status_code == 200
        assert response.json()["id"] == "shoes"

    def test_get_subcategory_not_found(self, client: TestClient) -> None:
        """Unknown subcategories return 404."""
        response = client.get("/catalog/categories/fashion-apparel/subcategories/nope")
        assert response.status_code == 404
        assert response.json()["error_code"] == "SUBCATEGORY_NOT_FOUND"


class TestProductTypeEndpoints:
    """Tests for product type endpoints."""

    def test_list_product_types_paginated(self, client: TestClient) -> None:
        """Product types are paginated."""
        response = client.get("/catalog/product-types", params={"page_size": 2})
        assert response.status_code == 200
        data = response.json()
        assert len(data["items"]) == 2
        assert data["total"] > 2
        assert data["has_more"] is True

    def test_list_product_types_by_subcategory(self, client: TestClient) -> None:
        """Category and subcategory filters narrow the list."""
        response = client.get(
            "/catalog/product-types",
            params={"category_id": "electronics-technology", "subcategory_id": "smartphones-mobile"},
        )
        data = response.json()
        assert [item["slug"] for item in data["items"]] == [
            "smartphones",
            "phone-cases-covers",
            "power-banks",
        ]
        assert data["has_more"] is False

    def test_invalid_page_size(self, client: TestClient) -> None:
        """Page size is bounded."""
        response = client.get("/catalog/product-types", params={"page_size": 0})
        assert response.status_code == 422

    def test_get_product_type(self, client: TestClient) -> None:
        """Product types are found by composite id."""
        response = client.get(f"/catalog/product-types/{SMARTPHONES}")
        assert response.status_code == 200
        data = response.json()
        assert data["category_id"] == "electronics-technology"
        assert data["subcategory_id"] == "smartphones-mobile"
        assert data["name"] == "Smartphones"
        assert data["default_variant_templates"][:2] == ["color", "storage"]

    def test_get_product_type_not_found(self, client: TestClient) -> None:
        """Unknown product types return 404."""
        response = client.get("/catalog/product-types/electronics-technology-nope-nope")
        assert response.status_code == 404
        assert response.json()["error_code"] == "PRODUCT_TYPE_NOT_FOUND"

    def test_product_type_variant_templates(self, client: TestClient) -> None:
        """Mapped templates are returned in mapping order."""
        response = client.get(f"/catalog/product-types/{SMARTPHONES}/variant-templates")
        assert response.status_code == 200
        assert [t["id"] for t in response.json()["templates"]] == [
            "color",
            "storage",
            "ram",
            "condition",
            "warranty",
            "connectivity",
        ]

    def test_unknown_product_type_has_no_templates(self, client: TestClient) -> None:
        """Unknown product types get an empty template list."""
        response = client.get("/catalog/product-types/a-b/variant-templates")
        assert response.status_code == 200
        assert response.json() == {"templates": [], "total": 0}


class TestVariantTemplateEndpoints:
    """Tests for variant template endpoints."""

    def test_list_variant_templates(self, client: TestClient) -> None:
        """All templates are listed."""
        response = client.get("/catalog/variant-templates")
        data = response.json()
        assert data["total"] == len(data["templates"])
        assert "color" in [t["id"] for t in data["templates"]]

    def test_get_color_template(self, client: TestClient) -> None:
        """Colour options carry colour codes."""
        response = client.get("/catalog/variant-templates/color")
        assert response.status_code == 200
        data = response.json()
        assert data["input_type"] == "color"
        gold = next(o for o in data["options"] if o["value"] == "gold")
        assert gold["kind"] == "color"
        assert gold["color_code"] == "#FFD700"
        assert gold["additional_price"] == 15
        defaults = [o["value"] for o in data["options"] if o["is_default"]]
        assert defaults == ["black"]
        assert data["default_value"] == "black"

    def test_get_variant_template_not_found(self, client: TestClient) -> None:
        """Unknown templates return 404."""
        response = client.get("/catalog/variant-templates/nope")
        assert response.status_code == 404
        assert response.json()["error_code"] == "VARIANT_TEMPLATE_NOT_FOUND"


class TestCompatibilityEndpoint:
    """Tests for the template compatibility check."""

    def test_compatible_selection(self, auth_client: TestClient) -> None:
        """A complete selection is compatible."""
        response = auth_client.post(
            "/catalog/variant-templates/compatibility",
            json={"category_id": "fashion-apparel", "template_ids": ["size-clothing", "color"]},
        )
        assert response.status_code == 200
        assert response.json() == {"compatible": True, "issues": []}

    def test_incompatible_selection(self, auth_client: TestClient) -> None:
        """Conflicting templates are reported."""
        response = auth_client.post(
            "/catalog/variant-templates/compatibility",
            json={
                "category_id": "fashion-apparel",
                "template_ids": ["size-clothing", "shoe-size", "color"],
            },
        )
        data = response.json()
        assert data["compatible"] is False
        assert data["issues"][0]["kind"] == "incompatible"
        assert data["issues"][0]["template_id"] == "size-clothing"
        assert data["issues"][0]["related_template_id"] == "shoe-size"

    def test_recommendations_do_not_block(self, auth_client: TestClient) -> None:
        """Recommended companions are advisory."""
        response = auth_client.post(
            "/catalog/variant-templates/compatibility",
            json={
                "category_id": "electronics-technology",
                "template_ids": ["color", "condition", "processor"],
            },
        )
        data = response.json()
        assert data["compatible"] is True
        assert {i["kind"] for i in data["issues"]} == {"recommended"}
