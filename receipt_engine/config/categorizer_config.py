"""
Categorizer configuration for receipt line-item categorisation.
Contains score constants, locale settings and the default category taxonomy.
"""

# Locales the locale hint matcher has rule tables for.
# "unknown" is valid input and means "skip locale-specific rules".
SUPPORTED_LOCALES = ("es", "en", "pt", "fr", "it", "de", "nl", "ca")
UNKNOWN_LOCALE = "unknown"

CATEGORIZER_CONFIG = {
    # Appended to every preference list; expected to always be registered
    "fallback_category": "Other",

    # Locale hints are single high-precision keywords
    "locale_hint_score": 0.84,

    # Weak "short description" guess
    "short_description": {
        "max_tokens": 2,
        "min_length": 3,
    },

    # Category label resolver (free-form label -> registry name)
    "label_resolver": {
        "fuzzy_threshold": 88,
        "min_label_length": 4,
    },

    # Reconciliation of an upstream category with the heuristic suggestion
    "reconciliation": {
        "drinks_broad_type": "Drinks",
        "default_broad_type": "Other",
    },

    # Receipt payload defaults
    "receipt_defaults": {
        "currency": "EUR",
        "max_description_key_length": 160,
        "max_store_key_length": 120,
    },
}


# Default receipt taxonomy
# type: macronutrient group, broad_type: coarse grouping used for reconciliation
DEFAULT_RECEIPT_CATEGORIES = [
    # FOOD - fresh
    {"name": "Fruits", "type": "Fiber", "broad_type": "Food"},
    {"name": "Vegetables", "type": "Fiber", "broad_type": "Food"},
    {"name": "Herbs & Fresh Aromatics", "type": "Fiber", "broad_type": "Food"},
    {"name": "Meat & Poultry", "type": "Protein", "broad_type": "Food"},
    {"name": "Fish & Seafood", "type": "Protein", "broad_type": "Food"},
    {"name": "Eggs", "type": "Protein", "broad_type": "Food"},
    {"name": "Dairy (Milk/Yogurt)", "type": "Fat", "broad_type": "Food"},
    {"name": "Cheese", "type": "Fat", "broad_type": "Food"},
    {"name": "Deli / Cold Cuts", "type": "Protein", "broad_type": "Food"},
    {"name": "Fresh Ready-to-Eat", "type": "Other", "broad_type": "Food"},

    # FOOD - bakery & pantry
    {"name": "Bread", "type": "Carbs", "broad_type": "Food"},
    {"name": "Pastries", "type": "Carbs", "broad_type": "Food"},
    {"name": "Wraps & Buns", "type": "Carbs", "broad_type": "Food"},
    {"name": "Pasta, Rice & Grains", "type": "Carbs", "broad_type": "Food"},
    {"name": "Legumes", "type": "Fiber", "broad_type": "Food"},
    {"name": "Canned & Jarred", "type": "Fiber", "broad_type": "Food"},
    {"name": "Sauces", "type": "Fat", "broad_type": "Food"},
    {"name": "Condiments", "type": "Fat", "broad_type": "Food"},
    {"name": "Spices & Seasonings", "type": "Other", "broad_type": "Food"},
    {"name": "Oils & Vinegars", "type": "Fat", "broad_type": "Food"},
    {"name": "Baking Ingredients", "type": "Carbs", "broad_type": "Food"},
    {"name": "Breakfast & Spreads", "type": "Carbs", "broad_type": "Food"},

    # FOOD - snacks
    {"name": "Salty Snacks", "type": "Carbs", "broad_type": "Food"},
    {"name": "Cookies & Biscuits", "type": "Carbs", "broad_type": "Food"},
    {"name": "Chocolate & Candy", "type": "Carbs", "broad_type": "Food"},
    {"name": "Nuts & Seeds", "type": "Fat", "broad_type": "Food"},
    {"name": "Ice Cream & Desserts", "type": "Carbs", "broad_type": "Food"},

    # FOOD - frozen & prepared
    {"name": "Frozen Vegetables & Fruit", "type": "Fiber", "broad_type": "Food"},
    {"name": "Frozen Meals", "type": "Other", "broad_type": "Food"},
    {"name": "Ready Meals", "type": "Other", "broad_type": "Food"},
    {"name": "Prepared Salads", "type": "Fiber", "broad_type": "Food"},
    {"name": "Sandwiches / Takeaway", "type": "Other", "broad_type": "Food"},

    # DRINKS
    {"name": "Water", "type": "Other", "broad_type": "Drinks"},
    {"name": "Soft Drinks", "type": "Other", "broad_type": "Drinks"},
    {"name": "Juice", "type": "Vitamins/Minerals", "broad_type": "Drinks"},
    {"name": "Coffee & Tea", "type": "Other", "broad_type": "Drinks"},
    {"name": "Energy & Sports Drinks", "type": "Other", "broad_type": "Drinks"},
    {"name": "Beer", "type": "Other", "broad_type": "Drinks"},
    {"name": "Wine", "type": "Other", "broad_type": "Drinks"},
    {"name": "Spirits", "type": "Other", "broad_type": "Drinks"},
    {"name": "Low/No Alcohol", "type": "Other", "broad_type": "Drinks"},

    # HEALTH & PERSONAL CARE
    {"name": "OTC Medicine", "type": "Other", "broad_type": "Health Care"},
    {"name": "Supplements", "type": "Vitamins/Minerals", "broad_type": "Health Care"},
    {"name": "First Aid", "type": "Other", "broad_type": "Health Care"},
    {"name": "Hygiene & Toiletries", "type": "Other", "broad_type": "Personal Care"},
    {"name": "Hair Care", "type": "Other", "broad_type": "Personal Care"},
    {"name": "Skin Care", "type": "Other", "broad_type": "Personal Care"},
    {"name": "Oral Care", "type": "Other", "broad_type": "Personal Care"},
    {"name": "Cosmetics", "type": "Other", "broad_type": "Personal Care"},

    # HOUSEHOLD
    {"name": "Cleaning Supplies", "type": "Other", "broad_type": "Household"},
    {"name": "Laundry", "type": "Other", "broad_type": "Household"},
    {"name": "Paper Goods", "type": "Other", "broad_type": "Household"},
    {"name": "Kitchen Consumables", "type": "Other", "broad_type": "Household"},
    {"name": "Storage (containers, zip bags)", "type": "Other", "broad_type": "Household"},
    {"name": "Bags", "type": "Other", "broad_type": "Household"},

    # BABY & PET
    {"name": "Baby (Diapers & Wipes)", "type": "Other", "broad_type": "Baby"},
    {"name": "Baby Food", "type": "Other", "broad_type": "Baby"},
    {"name": "Pet Food", "type": "Other", "broad_type": "Pet Care"},
    {"name": "Pet Supplies", "type": "Other", "broad_type": "Pet Care"},

    # OTHER
    {"name": "Other", "type": "Other", "broad_type": "Other"},
]


def get_default_category_names():
    """Return the default taxonomy's category names in display order."""
    return [category["name"] for category in DEFAULT_RECEIPT_CATEGORIES]
