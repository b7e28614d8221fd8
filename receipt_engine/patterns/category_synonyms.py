"""
Category label synonyms.
Maps each default category to the free-form labels an upstream extraction
step may produce for it, across the supported languages.
"""

# Filler words ignored when comparing labels ("Fruit and Veg", "Pan de molde")
LABEL_STOPWORDS = frozenset([
    "and", "the", "for", "of", "with",
    "y", "e", "de", "del", "la", "las", "el", "los", "por", "para", "con",
    "da", "do", "das", "dos",
    "du", "des", "le", "les", "au", "aux", "et", "en",
    "und", "oder", "mit", "von", "der", "die", "den", "dem", "im", "zum", "zur", "ein", "eine",
    "van", "het", "een",
])

CATEGORY_SYNONYMS = {
    "Fruits": ["fruit", "fruta", "frutas", "fruita", "frutta", "obst", "fruit and veg"],
    "Vegetables": [
        "vegetable", "veg", "veggies", "verdura", "verduras", "vegetal", "vegetales",
        "verdure", "gemuse", "groente", "groenten", "verdures", "legumes verts",
    ],
    "Herbs & Fresh Aromatics": ["herbs", "fresh herbs", "aromatics", "hierbas frescas", "aromaticas"],
    "Meat & Poultry": [
        "meat", "poultry", "carne", "carnes", "pollo", "chicken", "beef", "pork", "turkey",
        "viande", "frango", "fleisch", "geflugel", "kip", "pollastre", "carniceria", "butcher",
    ],
    "Fish & Seafood": [
        "fish", "seafood", "pescado", "marisco", "mariscos", "pescaderia", "poisson", "pesce",
        "fisch", "vis", "peix", "peixe",
    ],
    "Eggs": ["egg", "huevo", "huevos", "oeufs", "uova", "eier", "ovos"],
    "Dairy (Milk/Yogurt)": [
        "dairy", "milk", "yogurt", "yoghurt", "yogur", "leche", "lacteos", "lait", "latte",
        "milch", "melk", "llet", "leite",
    ],
    "Cheese": ["cheese", "queso", "fromage", "queijo", "formaggio", "kase", "kaese", "kaas", "formatge"],
    "Deli / Cold Cuts": [
        "deli", "cold cuts", "coldcuts", "charcuterie", "fiambre", "fiambres", "embutido", "embutidos",
        "jamon", "ham", "salami", "chorizo", "deli meat", "wurst", "schinken", "vleeswaren", "embotit",
    ],
    "Fresh Ready-to-Eat": ["ready to eat", "fresh ready", "prepared fresh", "listo para comer"],
    "Bread": ["bread", "pan", "baguette", "pao", "pain", "pane", "brot", "brood", "panaderia", "bakery"],
    "Pastries": ["pastry", "pastries", "bolleria", "pasteleria", "croissant", "viennoiserie"],
    "Wraps & Buns": ["wrap", "bun", "tortilla", "tortillas de trigo"],
    "Pasta, Rice & Grains": ["pasta", "rice", "grain", "grains", "arroz", "noodles", "cereales y pasta"],
    "Legumes": ["legume", "legumbres", "lentil", "lentejas", "garbanzos", "beans", "pulses"],
    "Canned & Jarred": ["canned", "canned goods", "jarred", "tinned", "conserva", "conservas", "enlatados"],
    "Sauces": ["sauce", "salsa", "salsas", "tomato sauce", "pasta sauce"],
    "Condiments": ["condiment", "condimento", "condimentos", "aderezo", "aderezos"],
    "Spices & Seasonings": ["spice", "spices", "seasoning", "seasonings", "especia", "especias"],
    "Oils & Vinegars": ["oil", "aceite", "aceites", "vinegar", "vinagre", "oils and fats"],
    "Baking Ingredients": ["baking", "flour", "harina", "levadura", "yeast", "reposteria"],
    "Breakfast & Spreads": ["breakfast", "spread", "cereal", "cereals", "mermelada", "jam", "honey", "miel"],
    "Salty Snacks": ["snacks", "snack", "chips", "crisps", "aperitivos", "patatas fritas"],
    "Cookies & Biscuits": ["cookie", "biscuit", "galletas", "galleta", "biscuits"],
    "Chocolate & Candy": ["chocolate", "candy", "sweets", "dulces", "caramelos", "golosinas"],
    "Nuts & Seeds": ["nuts", "seeds", "frutos secos", "nueces", "almendras", "semillas"],
    "Ice Cream & Desserts": ["ice cream", "dessert", "helado", "helados", "postre", "postres"],
    "Water": ["water", "agua", "eau", "acqua", "wasser", "aigua", "mineral water"],
    "Soft Drinks": ["soft drink", "soda", "refresco", "refrescos", "cola", "gaseosa", "soda and cola"],
    "Juice": ["juice", "zumo", "zumos", "jugo", "jugos", "suco", "succo", "jus", "saft", "sap"],
    "Coffee & Tea": ["coffee", "tea", "cafe", "te", "caffe", "cha", "infusiones"],
    "Energy & Sports Drinks": ["energy drink", "energy drinks", "sports drink", "energetica", "isotonica"],
    "Beer": ["beer", "cerveza", "cervezas", "biere", "cerveja", "birra", "bier", "cervesa"],
    "Wine": ["wine", "vino", "vinos", "vin", "vinho", "wein", "wijn"],
    "Spirits": ["spirit", "liquor", "licor", "licores", "whisky", "vodka", "ron", "rum", "gin"],
    "Low/No Alcohol": ["non alcoholic", "alcohol free", "sin alcohol", "low alcohol"],
    "Frozen Vegetables & Fruit": ["frozen vegetables", "frozen veggies", "frozen fruit", "verduras congeladas"],
    "Frozen Meals": ["frozen meal", "frozen food", "frozen foods", "frozen dinner", "congelados"],
    "Ready Meals": ["ready meal", "prepared meal", "comida preparada", "plato preparado", "platos preparados"],
    "Prepared Salads": ["prepared salad", "ensalada preparada", "ensaladas preparadas"],
    "Sandwiches / Takeaway": ["sandwich", "bocadillo", "bocadillos", "takeaway", "take away", "para llevar"],
    "OTC Medicine": ["otc", "over the counter", "medicine", "medicamento", "medicamentos", "pharmacy", "farmacia"],
    "Supplements": ["supplement", "suplemento", "suplementos", "vitamins"],
    "First Aid": ["first aid", "primeros auxilios", "botiquin"],
    "Hygiene & Toiletries": ["hygiene", "toiletries", "higiene", "aseo", "personal care"],
    "Hair Care": ["hair care", "shampoo", "champu", "conditioner", "acondicionador"],
    "Skin Care": ["skin care", "skincare", "cuidado piel", "cuidado facial"],
    "Oral Care": ["oral care", "dental", "toothpaste", "pasta de dientes", "higiene bucal"],
    "Cosmetics": ["cosmetic", "cosmetics", "maquillaje", "cosmetica", "perfumeria"],
    "Cleaning Supplies": ["cleaning", "cleaner", "limpieza", "detergent", "detergente", "bleach", "lejia", "household"],
    "Laundry": ["laundry", "lavanderia", "detergente ropa", "softener", "suavizante"],
    "Paper Goods": ["paper goods", "paper", "papel", "tissue", "toilet paper", "papel higienico"],
    "Kitchen Consumables": ["kitchen consumables", "foil", "cling film", "aluminium foil", "menaje"],
    "Storage (containers, zip bags)": ["storage", "container", "containers", "zip bag", "tupper", "tupperware"],
    "Baby (Diapers & Wipes)": ["diapers", "nappies", "wipes", "panales", "toallitas", "baby care"],
    "Baby Food": ["baby food", "comida bebe", "alimentacion infantil", "potitos"],
    "Pet Food": ["pet food", "alimento mascota", "comida mascota", "pienso"],
    "Pet Supplies": ["pet supplies", "pet care", "mascota", "mascotas"],
    "Bags": ["bag", "bolsa", "bolsas", "shopping bag"],
    "Other": ["other", "otros", "varios", "misc", "miscellaneous"],
}
