"""Embedded catalog seed.

The same document shape is accepted by ``CatalogParser.parse_file`` for
catalogs kept outside the package:

    categories                  category -> subcategory -> product type slugs
    variantTemplates            template id -> template definition
    productTypeVariantMapping   category id -> product type slug -> template ids
    variantCategories           grouping of templates by purpose
    variantDisplayGroups        grouping of templates for filter panels
    requiredVariantsByCategory  category id -> template ids
    compatibilityMatrix         template id -> incompatible/required/recommended
"""

from typing import Any

EMBEDDED_CATALOG: dict[str, Any] = {
    "categories": [
        {
            "id": "fashion-apparel",
            "name": "Fashion & Apparel",
            "subcategories": [
                {
                    "id": "mens-clothing",
                    "name": "Men's Clothing",
                    "productTypes": [
                        "shirts-tops",
                        "pants-bottoms",
                        "outerwear-jackets",
                        "activewear-sportswear",
                        "swimwear",
                    ],
                },
                {
                    "id": "womens-clothing",
                    "name": "Women's Clothing",
                    "productTypes": [
                        "tops-blouses",
                        "dresses",
                        "pants-skirts",
                        "outerwear-coats",
                    ],
                },
                {
                    "id": "shoes",
                    "name": "Shoes",
                    "productTypes": [
                        "athletic-shoes",
                        "casual-shoes",
                        "boots",
                        "sandals-flipflops",
                    ],
                },
                {
                    "id": "accessories",
                    "name": "Accessories",
                    "productTypes": ["bags-handbags", "jewelry", "watches", "belts"],
                },
            ],
        },
        {
            "id": "electronics-technology",
            "name": "Electronics & Technology",
            "subcategories": [
                {
                    "id": "smartphones-mobile",
                    "name": "Smartphones & Mobile",
                    "productTypes": ["smartphones", "phone-cases-covers", "power-banks"],
                },
                {
                    "id": "computers-laptops",
                    "name": "Computers & Laptops",
                    "productTypes": ["desktop-computers", "laptops", "tablets", "monitors"],
                },
                {
                    "id": "audio-video",
                    "name": "Audio & Video",
                    "productTypes": ["headphones-earbuds", "speakers", "tvs-displays"],
                },
            ],
        },
        {
            "id": "home-garden",
            "name": "Home & Garden",
            "subcategories": [
                {
                    "id": "furniture",
                    "name": "Furniture",
                    "productTypes": ["sofas-couches", "tables", "chairs", "beds-mattresses"],
                },
                {
                    "id": "kitchen-dining",
                    "name": "Kitchen & Dining",
                    "productTypes": ["cookware", "small-appliances", "dinnerware"],
                },
            ],
        },
        {
            "id": "health-beauty",
            "name": "Health & Beauty",
            "subcategories": [
                {
                    "id": "skincare",
                    "name": "Skincare",
                    "productTypes": ["moisturizers", "sunscreen", "cleansers"],
                },
                {
                    "id": "hair-care",
                    "name": "Hair Care",
                    "productTypes": ["shampoo-conditioner", "hair-styling"],
                },
            ],
        },
        {
            "id": "sports-outdoors",
            "name": "Sports & Outdoors",
            "subcategories": [
                {
                    "id": "exercise-fitness",
                    "name": "Exercise & Fitness",
                    "productTypes": ["weights-dumbbells", "yoga-mats", "treadmills"],
                },
                {
                    "id": "outdoor-recreation",
                    "name": "Outdoor Recreation",
                    "productTypes": ["camping-gear", "hiking-backpacks"],
                },
            ],
        },
    ],
    "variantTemplates": {
        # Clothing
        "size-clothing": {
            "id": "size-clothing",
            "name": "Size",
            "description": "Clothing size",
            "inputType": "select",
            "isRequired": True,
            "options": [
                {"value": "xs", "name": "XS", "additionalPrice": 0},
                {"value": "s", "name": "S", "additionalPrice": 0},
                {"value": "m", "name": "M", "additionalPrice": 0, "isDefault": True},
                {"value": "l", "name": "L", "additionalPrice": 0},
                {"value": "xl", "name": "XL", "additionalPrice": 0},
                {"value": "xxl", "name": "XXL", "additionalPrice": 5},
                {"value": "xxxl", "name": "XXXL", "additionalPrice": 10},
            ],
        },
        "clothing-material": {
            "id": "clothing-material",
            "name": "Material",
            "description": "Fabric material",
            "inputType": "select",
            "isRequired": False,
            "categoryIds": ["fashion-apparel"],
            "options": [
                {"value": "cotton", "name": "Cotton", "additionalPrice": 0},
                {"value": "polyester", "name": "Polyester", "additionalPrice": -5},
                {"value": "cotton-blend", "name": "Cotton Blend", "additionalPrice": 0},
                {"value": "linen", "name": "Linen", "additionalPrice": 15},
                {"value": "silk", "name": "Silk", "additionalPrice": 40},
                {"value": "wool", "name": "Wool", "additionalPrice": 25},
            ],
        },
        "clothing-fit": {
            "id": "clothing-fit",
            "name": "Fit",
            "description": "Garment fit",
            "inputType": "select",
            "isRequired": False,
            "options": [
                {"value": "slim", "name": "Slim Fit", "additionalPrice": 0},
                {"value": "regular", "name": "Regular Fit", "additionalPrice": 0},
                {"value": "relaxed", "name": "Relaxed Fit", "additionalPrice": 0},
            ],
        },
        "clothing-sleeve": {
            "id": "clothing-sleeve",
            "name": "Sleeve Length",
            "inputType": "select",
            "isRequired": False,
            "options": [
                {"value": "short", "name": "Short Sleeve", "additionalPrice": 0},
                {"value": "long", "name": "Long Sleeve", "additionalPrice": 5},
                {"value": "sleeveless", "name": "Sleeveless", "additionalPrice": 0},
            ],
        },
        # Shoes
        "shoe-size": {
            "id": "shoe-size",
            "name": "Shoe Size",
            "description": "US shoe size",
            "inputType": "select",
            "isRequired": True,
            "options": [
                {"value": "6", "name": "US 6", "additionalPrice": 0},
                {"value": "7", "name": "US 7", "additionalPrice": 0},
                {"value": "8", "name": "US 8", "additionalPrice": 0},
                {"value": "9", "name": "US 9", "additionalPrice": 0},
                {"value": "10", "name": "US 10", "additionalPrice": 0},
                {"value": "11", "name": "US 11", "additionalPrice": 0},
                {"value": "12", "name": "US 12", "additionalPrice": 0},
                {"value": "13", "name": "US 13", "additionalPrice": 5},
            ],
        },
        "shoe-width": {
            "id": "shoe-width",
            "name": "Width",
            "inputType": "select",
            "isRequired": False,
            "subcategoryIds": ["fashion-apparel-shoes"],
            "options": [
                {"value": "narrow", "name": "Narrow", "additionalPrice": 0},
                {"value": "medium", "name": "Medium", "additionalPrice": 0},
                {"value": "wide", "name": "Wide", "additionalPrice": 5},
            ],
        },
        # Electronics
        "processor": {
            "id": "processor",
            "name": "Processor",
            "inputType": "select",
            "isRequired": False,
            "options": [
                {"value": "i5", "name": "Intel Core i5", "additionalPrice": 0},
                {"value": "i7", "name": "Intel Core i7", "additionalPrice": 200},
                {"value": "i9", "name": "Intel Core i9", "additionalPrice": 450},
                {"value": "m3", "name": "Apple M3", "additionalPrice": 300},
            ],
        },
        "ram": {
            "id": "ram",
            "name": "RAM",
            "description": "Memory capacity",
            "inputType": "select",
            "isRequired": False,
            "options": [
                {"value": "8gb", "name": "8GB", "additionalPrice": 0},
                {"value": "16gb", "name": "16GB", "additionalPrice": 100},
                {"value": "32gb", "name": "32GB", "additionalPrice": 300},
                {"value": "64gb", "name": "64GB", "additionalPrice": 600},
            ],
        },
        "storage": {
            "id": "storage",
            "name": "Storage",
            "description": "Storage capacity",
            "inputType": "select",
            "isRequired": False,
            "options": [
                {"value": "128gb", "name": "128GB", "additionalPrice": 0},
                {"value": "256gb", "name": "256GB", "additionalPrice": 100},
                {"value": "512gb", "name": "512GB", "additionalPrice": 200},
                {"value": "1tb", "name": "1TB", "additionalPrice": 400},
            ],
        },
        "screen-size": {
            "id": "screen-size",
            "name": "Screen Size",
            "description": "Diagonal in inches",
            "inputType": "number",
            "isRequired": False,
            "options": [
                {"value": "13", "name": "13 inch", "additionalPrice": 0},
                {"value": "14", "name": "14 inch", "additionalPrice": 50},
                {"value": "15.6", "name": "15.6 inch", "additionalPrice": 100},
                {"value": "17", "name": "17 inch", "additionalPrice": 200},
            ],
        },
        "battery-life": {
            "id": "battery-life",
            "name": "Battery Life",
            "inputType": "number",
            "isRequired": False,
            "options": [
                {"value": "6", "name": "6 hours", "additionalPrice": 0},
                {"value": "8", "name": "8 hours", "additionalPrice": 50},
                {"value": "10", "name": "10 hours", "additionalPrice": 100},
                {"value": "12", "name": "12 hours", "additionalPrice": 150},
            ],
        },
        "connectivity": {
            "id": "connectivity",
            "name": "Connectivity",
            "inputType": "multiselect",
            "isRequired": False,
            "options": [
                {"value": "wifi", "name": "Wi-Fi", "additionalPrice": 0, "isDefault": True},
                {"value": "bluetooth", "name": "Bluetooth", "additionalPrice": 0, "isDefault": True},
                {"value": "5g", "name": "5G", "additionalPrice": 100},
            ],
        },
        # Home
        "furniture-material": {
            "id": "furniture-material",
            "name": "Furniture Material",
            "inputType": "select",
            "isRequired": False,
            "subcategoryIds": ["home-garden-furniture"],
            "options": [
                {"value": "oak", "name": "Solid Oak", "additionalPrice": 150},
                {"value": "pine", "name": "Pine", "additionalPrice": 0},
                {"value": "metal", "name": "Metal", "additionalPrice": 50},
                {"value": "fabric", "name": "Fabric", "additionalPrice": 0},
                {"value": "leather", "name": "Leather", "additionalPrice": 300},
            ],
        },
        "seating-capacity": {
            "id": "seating-capacity",
            "name": "Seating Capacity",
            "inputType": "number",
            "isRequired": False,
            "productTypeIds": ["home-garden-furniture-sofas-couches"],
            "options": [
                {"value": "2", "name": "2 seats", "additionalPrice": 0},
                {"value": "3", "name": "3 seats", "additionalPrice": 200},
                {"value": "4", "name": "4 seats", "additionalPrice": 400},
                {"value": "6", "name": "6 seats", "additionalPrice": 800},
            ],
        },
        "energy-rating": {
            "id": "energy-rating",
            "name": "Energy Rating",
            "inputType": "select",
            "isRequired": False,
            "categoryIds": ["home-garden"],
            "options": [
                {"value": "a-plus-plus", "name": "A++", "additionalPrice": 80},
                {"value": "a-plus", "name": "A+", "additionalPrice": 40},
                {"value": "a", "name": "A", "additionalPrice": 0},
            ],
        },
        # Health & beauty
        "skin-type": {
            "id": "skin-type",
            "name": "Skin Type",
            "inputType": "select",
            "isRequired": False,
            "categoryIds": ["health-beauty"],
            "options": [
                {"value": "dry", "name": "Dry", "additionalPrice": 0},
                {"value": "oily", "name": "Oily", "additionalPrice": 0},
                {"value": "combination", "name": "Combination", "additionalPrice": 0},
                {"value": "sensitive", "name": "Sensitive", "additionalPrice": 3},
            ],
        },
        "spf-level": {
            "id": "spf-level",
            "name": "SPF Level",
            "description": "Sun protection factor",
            "inputType": "number",
            "isRequired": False,
            "options": [
                {"value": "15", "name": "SPF 15", "additionalPrice": 0},
                {"value": "30", "name": "SPF 30", "additionalPrice": 5},
                {"value": "50", "name": "SPF 50", "additionalPrice": 10},
            ],
        },
        "volume-size": {
            "id": "volume-size",
            "name": "Volume",
            "description": "Product volume",
            "inputType": "number",
            "isRequired": False,
            "options": [
                {"value": "50", "name": "50 ml", "additionalPrice": -15},
                {"value": "100", "name": "100 ml", "additionalPrice": 0},
                {"value": "250", "name": "250 ml", "additionalPrice": 20},
                {"value": "500", "name": "500 ml", "additionalPrice": 40},
            ],
        },
        # Sports
        "weight-capacity": {
            "id": "weight-capacity",
            "name": "Weight Capacity",
            "description": "Maximum weight support",
            "inputType": "number",
            "isRequired": False,
            "options": [
                {"value": "light", "name": "Up to 200 lbs", "additionalPrice": 0},
                {"value": "medium", "name": "Up to 300 lbs", "additionalPrice": 50},
                {"value": "heavy", "name": "Up to 400 lbs", "additionalPrice": 100},
            ],
        },
        "dumbbell-weight": {
            "id": "dumbbell-weight",
            "name": "Dumbbell Weight",
            "inputType": "range",
            "isRequired": True,
            "options": [
                {"value": "5", "name": "5 lbs", "additionalPrice": 0},
                {"value": "10", "name": "10 lbs", "additionalPrice": 10},
                {"value": "15", "name": "15 lbs", "additionalPrice": 20},
                {"value": "25", "name": "25 lbs", "additionalPrice": 35},
                {"value": "50", "name": "50 lbs", "additionalPrice": 70},
            ],
        },
        # Universal
        "color": {
            "id": "color",
            "name": "Color",
            "description": "Available colors",
            "inputType": "color",
            "isRequired": False,
            "options": [
                {"value": "black", "name": "Black", "colorCode": "#000000", "additionalPrice": 0, "isDefault": True},
                {"value": "white", "name": "White", "colorCode": "#FFFFFF", "additionalPrice": 0},
                {"value": "gray", "name": "Gray", "colorCode": "#808080", "additionalPrice": 0},
                {"value": "navy", "name": "Navy", "colorCode": "#000080", "additionalPrice": 0},
                {"value": "red", "name": "Red", "colorCode": "#FF0000", "additionalPrice": 0},
                {"value": "blue", "name": "Blue", "colorCode": "#0000FF", "additionalPrice": 0},
                {"value": "green", "name": "Green", "colorCode": "#008000", "additionalPrice": 0},
                {"value": "brown", "name": "Brown", "colorCode": "#A52A2A", "additionalPrice": 0},
                {"value": "gold", "name": "Gold", "colorCode": "#FFD700", "additionalPrice": 15},
                {"value": "silver", "name": "Silver", "colorCode": "#C0C0C0", "additionalPrice": 10},
                {"value": "rose-gold", "name": "Rose Gold", "colorCode": "#E8B4B8", "additionalPrice": 20},
            ],
        },
        "condition": {
            "id": "condition",
            "name": "Condition",
            "description": "Product condition",
            "inputType": "select",
            "isRequired": False,
            "options": [
                {"value": "new", "name": "New", "additionalPrice": 0, "isDefault": True},
                {"value": "refurbished", "name": "Refurbished", "additionalPrice": -50},
                {"value": "used-good", "name": "Used - Good", "additionalPrice": -100},
            ],
        },
        "brand-tier": {
            "id": "brand-tier",
            "name": "Brand Tier",
            "inputType": "select",
            "isRequired": False,
            "options": [
                {"value": "budget", "name": "Budget", "additionalPrice": -10},
                {"value": "standard", "name": "Standard", "additionalPrice": 0},
                {"value": "premium", "name": "Premium", "additionalPrice": 50},
                {"value": "luxury", "name": "Luxury", "additionalPrice": 300},
            ],
        },
        "warranty": {
            "id": "warranty",
            "name": "Warranty",
            "inputType": "select",
            "isRequired": False,
            "options": [
                {"value": "none", "name": "No Warranty", "additionalPrice": 0},
                {"value": "1-year", "name": "1 Year", "additionalPrice": 20},
                {"value": "2-year", "name": "2 Years", "additionalPrice": 45},
            ],
        },
        "gift-wrap": {
            "id": "gift-wrap",
            "name": "Gift Wrap",
            "inputType": "boolean",
            "isRequired": False,
            "options": [
                {"value": "yes", "name": "Gift wrapped", "additionalPrice": 5},
                {"value": "no", "name": "No gift wrap", "additionalPrice": 0, "isDefault": True},
            ],
        },
    },
    "productTypeVariantMapping": {
        "fashion-apparel": {
            "shirts-tops": ["size-clothing", "color", "clothing-material", "clothing-fit", "clothing-sleeve", "condition", "brand-tier"],
            "pants-bottoms": ["size-clothing", "color", "clothing-material", "clothing-fit", "condition"],
            "outerwear-jackets": ["size-clothing", "color", "clothing-material", "condition", "warranty"],
            "activewear-sportswear": ["size-clothing", "color", "clothing-material", "clothing-fit"],
            "tops-blouses": ["size-clothing", "color", "clothing-material", "clothing-fit", "clothing-sleeve"],
            "dresses": ["size-clothing", "color", "clothing-material", "clothing-fit"],
            "athletic-shoes": ["shoe-size", "shoe-width", "color", "condition", "warranty"],
            "casual-shoes": ["shoe-size", "shoe-width", "color", "condition"],
            "boots": ["shoe-size", "shoe-width", "color", "condition", "warranty"],
            "watches": ["color", "condition", "brand-tier", "warranty"],
            "jewelry": ["color", "condition", "brand-tier", "gift-wrap"],
        },
        "electronics-technology": {
            "smartphones": ["color", "storage", "ram", "condition", "warranty", "connectivity"],
            "laptops": ["processor", "ram", "storage", "screen-size", "battery-life", "color", "condition", "warranty"],
            "tablets": ["storage", "screen-size", "color", "connectivity", "condition"],
            "desktop-computers": ["processor", "ram", "storage", "condition", "warranty"],
            "headphones-earbuds": ["color", "battery-life", "connectivity", "condition"],
            "power-banks": ["color", "battery-life"],
        },
        "home-garden": {
            "sofas-couches": ["color", "furniture-material", "seating-capacity", "condition"],
            "tables": ["furniture-material", "color", "condition"],
            "small-appliances": ["color", "energy-rating", "warranty"],
        },
        "health-beauty": {
            "sunscreen": ["spf-level", "volume-size", "skin-type"],
            "moisturizers": ["volume-size", "skin-type"],
            "shampoo-conditioner": ["volume-size"],
        },
        "sports-outdoors": {
            "weights-dumbbells": ["dumbbell-weight", "color"],
            "treadmills": ["weight-capacity", "warranty", "condition"],
        },
    },
    "variantCategories": {
        "physical": ["size-clothing", "shoe-size", "shoe-width", "seating-capacity", "weight-capacity", "dumbbell-weight"],
        "technical": ["processor", "ram", "storage", "screen-size", "connectivity", "battery-life", "energy-rating"],
        "aesthetic": ["color", "clothing-material", "furniture-material", "clothing-fit", "clothing-sleeve"],
        "functional": ["skin-type", "spf-level", "volume-size", "gift-wrap"],
        "commercial": ["condition", "brand-tier", "warranty"],
    },
    "variantDisplayGroups": {
        "specifications": ["processor", "ram", "storage", "screen-size"],
        "physical_attributes": ["size-clothing", "shoe-size", "color", "clothing-material", "furniture-material"],
        "features": ["connectivity", "battery-life", "energy-rating"],
        "commercial_info": ["condition", "brand-tier", "warranty"],
    },
    "requiredVariantsByCategory": {
        "fashion-apparel": ["size-clothing", "color"],
        "electronics-technology": ["color", "condition"],
        "home-garden": ["color"],
        "health-beauty": ["volume-size"],
        "sports-outdoors": ["color"],
    },
    "compatibilityMatrix": {
        "size-clothing": {
            "incompatible": ["shoe-size", "shoe-width"],
            "required": ["color"],
        },
        "shoe-size": {
            "incompatible": ["size-clothing"],
            "required": ["color"],
        },
        "processor": {
            "recommended": ["ram", "storage"],
            "incompatible": ["clothing-material", "furniture-material"],
        },
    },
}
