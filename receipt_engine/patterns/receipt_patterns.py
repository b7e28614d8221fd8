"""
Receipt line-item categorization patterns.
Multilingual (es, en, pt, fr, it, de, nl, ca) regex patterns matched against
normalized item descriptions (lowercase, no accents, no punctuation).

GENERAL_RULES is evaluated top to bottom and the first match wins, so the
order of the list is significant.
"""

from ..config.categorizer_config import CATEGORIZER_CONFIG

# =============================================================================
# SHARED VOCABULARY
# =============================================================================

SALTY_SNACK_PATTERNS = [
    r"\b(chips|crisps|pringles|lays|doritos|cheetos|ruffles|walkers|tyrrells|kettle)\b",
    r"\b(monster munch|patatas fritas|papas fritas|patatillas|nachos|totopos|tortilla chips)\b",
    r"\b(snack|snacks|gusanitos|cortezas|palomitas|popcorn|pretzels|crackers|aperitivo|aperitivos)\b",
    r"\b(matutano|risi|frit ravich|chipsletten|funny frisch|croky|bugles|fritos|tostitos|takis)\b",
]

ICE_CREAM_PATTERNS = [
    r"\b(ice cream|helado|helados|gelato|gelati|glace|glaces|eis|ijs|gelat|gelats|sorvete)\b",
    r"\b(sorbet|sorbete|magnum|cornetto|haagen dazs|ben and jerrys|carte dor|frigo)\b",
    r"\b(natillas|flan|flanes|arroz con leche|tiramisu|mousse|pudding|cuajada|profiteroles)\b",
    r"\b(dessert|desserts|postre|postres|sobremesa|dolce)\b",
]

PET_PATTERNS = [
    r"\b(pienso|mascota|mascotas|pet food|dog food|cat food|cat litter|katzenfutter|hundefutter)\b",
    r"\b(whiskas|friskies|pedigree|purina|royal canin|affinity|felix|sheba|gourmet gold)\b",
    r"\b(?:comida|snack|snacks|arena|latas?) (?:para )?(?:perro|perros|gato|gatos)\b",
]

FROZEN_PATTERNS = [
    r"\b(congelado|congelada|congelados|congeladas|frozen|surgele|surgeles|surgelati|surgelato)\b",
    r"\b(tiefkuhl|tiefgekuhlt|diepvries|congelat|congelats|congelado|ultracongelado)\b",
]

PREPARED_FOOD_PATTERNS = [
    r"\b(croqueta|croquetas|sandwich|sandwiches|bocadillo|bocata|pizza|pizzas|empanada|empanadas)\b",
    r"\b(empanadilla|empanadillas|canelones|nuggets|varitas|san jacobo|san jacobos|lasana|lasagna)\b",
    r"\b(sopa|sopas|soup|caldo|broth|crema|pure|consome)\b",
]

# Dishes that carry an ingredient word ("pizza cuatro quesos")
PREPARED_DISH_PATTERNS = [
    r"\b(pizza|pizzas|croqueta|croquetas|sandwich|sandwiches|bocadillo|bocata|empanada|empanadas)\b",
    r"\b(empanadilla|empanadillas|lasana|lasagna|canelones|san jacobo|san jacobos|nuggets)\b",
    r"\b(sopa|sopas|soup|caldo|consome)\b",
]

FLAVOUR_PATTERNS = [
    r"\b(sabor|sabores|flavor|flavour|flavored|flavoured|aroma|gusto|gout|geschmack|smaak)\b",
]

SALAD_WORD_PATTERNS = [
    r"\b(ensalada|ensaladas|salad|salads|salade|insalata|amanida|salada|macedonia)\b",
]

PREPARED_QUALIFIER_PATTERNS = [
    r"\b(preparada|preparado|preparadas|prepared|ready|listo|lista|ready to eat|bowl|cesar|caesar)\b",
    r"\b(cortada|cortado|troceada|troceado|fresh cut|recien cortada|lavada|iv gama)\b",
]

PRODUCE_PROCESSED_PATTERNS = [
    r"\b(mermelada|jam|confitura|confiture|marmelade|compota|jalea|gelatina)\b",
    r"\b(yogur|tarta|galleta|galletas|muesli|cereales|chocolate|caramelos|gominolas)\b",
    r"\b(lata|latas|conserva|conservas|canned|tinned|en almibar|encurtido|encurtidos)\b",
    r"\b(deshidratada|deshidratado|seca|secas|secos|dried|orejones|pasas)\b",
]

VEGETABLE_WORD_PATTERNS = [
    r"\b(verdura|verduras|vegetable|vegetables|veggies|verdure|gemuse|groente|groenten|legumes verts)\b",
    r"\b(tomate|tomates|tomato|tomatoes|cebolla|cebollas|onion|onions|ajo|ajos|garlic|zanahoria|zanahorias)\b",
    r"\b(carrot|carrots|lechuga|lettuce|pepino|pepinos|cucumber|pimiento|pimientos|bell pepper|bell peppers)\b",
    r"\b(calabacin|calabacines|zucchini|courgette|courgettes|berenjena|berenjenas|eggplant|aubergine)\b",
    r"\b(brocoli|broccoli|coliflor|cauliflower|espinaca|espinacas|spinach|acelga|acelgas|repollo|cabbage)\b",
    r"\b(puerro|puerros|leek|leeks|apio|celery|champinon|champinones|setas|mushroom|mushrooms)\b",
    r"\b(judias verdes|green beans|guisantes|peas|calabaza|pumpkin|alcachofa|alcachofas|esparrago|esparragos)\b",
    r"\b(asparagus|rucula|rocket|canonigos|brotes|remolacha|beetroot|rabano|rabanos|maiz|boniato|boniatos)\b",
    r"\b(oignon|oignons|carotte|carottes|poireau|poireaux|cipolla|cipolle|pomodoro|pomodori|carota|carote)\b",
    r"\b(zwiebel|zwiebeln|karotte|karotten|tomaten|gurke|gurken|uien|wortel|wortels|cebola|cebolas)\b",
    r"\b(cenoura|cenouras|alface|ceba|cebes|pastanaga|pastanagues|enciam|tomaquet|tomaquets)\b",
]

FRUIT_WORD_PATTERNS = [
    r"\b(fruit|fruits|fruta|frutas|fruita|fruites|frutta|obst)\b",
    r"\b(manzana|manzanas|apple|apples|pera|peras|pear|pears|platano|platanos|banana|bananas)\b",
    r"\b(naranja|naranjas|orange|oranges|mandarina|mandarinas|clementina|clementinas)\b",
    r"\b(limon|limones|lemon|lemons|lima|limas|lime|limes|uva|uvas|grape|grapes)\b",
    r"\b(fresa|fresas|fresones|strawberry|strawberries|frambuesa|frambuesas|raspberries)\b",
    r"\b(arandano|arandanos|blueberries|kiwi|kiwis|melon|melones|sandia|watermelon|pina|pineapple)\b",
    r"\b(mango|mangos|papaya|aguacate|aguacates|avocado|avocados|melocoton|melocotones|peach|peaches)\b",
    r"\b(nectarina|nectarinas|ciruela|ciruelas|plum|plums|cereza|cerezas|cherries|higo|higos|granada|coco)\b",
    r"\b(pomme|pommes|poire|poires|fraise|fraises|mela|mele|arancia|arance|apfel|birne|erdbeeren)\b",
    r"\b(appel|appels|peer|peren|sinaasappel|sinaasappels|aardbei|aardbeien|maca|macas|laranja|laranjas)\b",
    r"\b(morango|morangos|poma|pomes|taronja|taronges|platan|platans|maduixa|maduixes)\b",
]


# =============================================================================
# SIGNALS
# =============================================================================
# Boolean flags computed once per description and shared by several rules.

BEVERAGE_SIGNAL_PATTERNS = [
    r"\b(drink|drinks|beverage|beverages|bebida|bebidas|boisson|boissons|bevanda|getrank|getranke|drank|beguda)\b",
    r"\b(soda|sodas|cola|refresco|refrescos|juice|juices|zumo|zumos|jugo|jugos|suco|succo|jus|saft|sap|smoothie)\b",
    r"\b(water|agua|eau|acqua|wasser|aigua|tonica|tonic|gaseosa|limonada|lemonade|nectar)\b",
    r"\b(energy drink|energetica|isotonic|isotonica|isotonico|red bull|monster energy|gatorade|powerade|aquarius)\b",
    r"\b(botella|botellas|botellin|bottle|bottles|bouteille|bottiglia|flasche|fles|garrafa|ampolla|brik|canette|lattina)\b",
    r"\b\d+(?:ml|cl|l|lt|ltr|litro|litros|liter|litre|litres)\b",
    r"\b\d+ (?:ml|cl|lt|ltr|litro|litros|liter|litre|litres)\b",
]

# Bare unit tokens that mark a liquid on their own
BEVERAGE_UNIT_TOKENS = ("ml", "cl")

SAUCE_SIGNAL_PATTERNS = [
    r"\b(sauce|sauces|salsa|salsas|ketchup|mayonesa|mayonnaise|mayo|mustard|mostaza|moutarde|senf)\b",
    r"\b(pesto|dressing|alino|vinagreta|vinaigrette|tomate frito|sofrito|passata|bbq|barbacoa)\b",
    r"\b(alioli|aioli|guacamole|soja|soy sauce|teriyaki|sriracha|tabasco|worcestershire|brava|bravas)\b",
    r"\b(sugo|molho|saus|salsa de tomate|salsa tomate)\b",
]

CLEANING_SIGNAL_PATTERNS = [
    r"\b(detergent|detergente|detergentes|lejia|bleach|limpiador|limpiadora|cleaner|cleaning|limpieza)\b",
    r"\b(lavavajillas|dishwasher|dish soap|dishwashing|friegasuelos|fregasuelos|multiusos|quitagrasas)\b",
    r"\b(desinfectante|disinfectant|antical|limpiacristales|ambientador|air freshener|estropajo|bayeta)\b",
    r"\b(lessive|javel|nettoyant|detersivo|candeggina|waschmittel|reiniger|wasmiddel|schoonmaak|lixivia)\b",
    r"\b(jabon (?:de )?platos|jabon vajilla|suavizante|softener|fairy|mistol|finish|pastillas lavavajillas)\b",
]

ENERGY_SNACK_SIGNAL_PATTERNS = [
    r"\b(bar|bars|barrita|barritas|barra energetica|barras energeticas|riegel|reep|barre|barres)\b",
    r"\b(gel energetico|energy gel|gummies|chews|bites|energy balls|protein bar|cereal bar)\b",
]


# =============================================================================
# GENERAL RULES
# =============================================================================

GENERAL_RULES = [
    # 1. Salty snacks first: brand names carry produce words ("onion", "queso")
    {
        "reason": "salty_snacks",
        "regex_patterns": SALTY_SNACK_PATTERNS,
        "exclude_patterns": PET_PATTERNS + FROZEN_PATTERNS,
        "categories": ["Salty Snacks", "Snacks"],
        "confidence": "strong",
        "score": 0.88,
    },
    # 2. Ice cream & desserts
    {
        "reason": "ice_cream_desserts",
        "regex_patterns": ICE_CREAM_PATTERNS,
        "categories": ["Ice Cream & Desserts", "Frozen Foods", "Snacks"],
        "confidence": "strong",
        "score": 0.86,
    },
    # 3. Bags & packaging
    {
        "reason": "bags",
        "regex_patterns": [
            r"\b(bag|bags|bolsa|bolsas|sac|sacs|sacchetto|shopper|tute|tasche|tas|tasje|bossa|bosses|saco|sacola)\b",
        ],
        "exclude_patterns": [
            r"\b(ensalada|salad|lechuga|brotes|canonigos|rucula|espinacas|patata|patatas|cebolla|cebollas)\b",
            r"\b(naranja|naranjas|manzana|manzanas|limon|limones|zanahoria|zanahorias|tea|te|infusion)\b",
        ] + SALTY_SNACK_PATTERNS,
        "categories": ["Bags", "Household & Cleaning Supplies"],
        "confidence": "strong",
        "score": 0.90,
    },
    # 3b. Pet food ahead of proteins ("pienso pollo")
    {
        "reason": "pet_food",
        "regex_patterns": PET_PATTERNS,
        "categories": ["Pet Food", "Pet Supplies", "Pet Care"],
        "confidence": "strong",
        "score": 0.88,
    },
    # 4. Starches
    {
        "reason": "rice_grains",
        "regex_patterns": [
            r"\b(rice|arroz|riz|riso|reis|rijst|arros|quinoa|couscous|cuscus|bulgur|trigo|semola|polenta)\b",
        ],
        "exclude_signals": ["beverage"],
        "categories": ["Pasta, Rice & Grains", "Pasta, Rice & Cereal"],
        "confidence": "strong",
        "score": 0.86,
    },
    {
        "reason": "potatoes",
        "regex_patterns": [
            r"\b(potato|potatoes|patata|patatas|papa|papas|pomme de terre|pommes de terre|batata|batatas)\b",
            r"\b(kartoffel|kartoffeln|aardappel|aardappelen|patate|trumfa|trumfes)\b",
        ],
        "exclude_patterns": FROZEN_PATTERNS + [
            r"\b(tortilla|pure|crema|sopa|frita|fritas|chips|gratinadas|bravas|deluxe)\b",
        ],
        "exclude_signals": ["beverage", "sauce"],
        "categories": ["Vegetables", "Pasta, Rice & Grains"],
        "confidence": "strong",
        "score": 0.82,
    },
    {
        "reason": "pasta",
        "regex_patterns": [
            r"\b(pasta|spaghetti|espaguetis|macarrones|macaroni|penne|fusilli|tallarines|fideos|fideua)\b",
            r"\b(noodles|tagliatelle|ravioli|tortellini|gnocchi|linguine|farfalle|rigatoni|espirales|helices)\b",
            r"\b(nouilles|pates|nudeln|massa|macarrao|esparguete|pasta fresca)\b",
        ],
        "exclude_patterns": [
            r"\b(dientes|dental|dentifrico|toothpaste|tooth|brisa|hojaldre|quebrada|folhada)\b",
        ] + FROZEN_PATTERNS,
        "categories": ["Pasta, Rice & Grains", "Pasta, Rice & Cereal"],
        "confidence": "strong",
        "score": 0.86,
    },
    {
        "reason": "wraps_buns",
        "regex_patterns": [
            r"\b(wrap|wraps|tortilla|tortillas|fajita|fajitas|bun|buns|piadina|pita|pitas|naan|burrito)\b",
            r"\bpan (?:de )?(?:hamburguesa|perrito|perritos|hot dog)\b",
        ],
        "exclude_patterns": [r"\b(chips|patatas|patata|espanola)\b"],
        "categories": ["Wraps & Buns", "Bread", "Bread & Bakery"],
        "confidence": "strong",
        "score": 0.82,
    },
    {
        "reason": "pastries",
        "regex_patterns": [
            r"\b(croissant|croissants|napolitana|napolitanas|magdalena|magdalenas|muffin|muffins|donut|donuts)\b",
            r"\b(berlina|berlinas|ensaimada|palmera|palmeras|bolleria|pastry|pastries|cake|bizcocho|brioche)\b",
            r"\b(pastel|pasteles|brownie|gofre|gofres|waffle|waffles|crepes|croissant|pain au chocolat)\b",
        ],
        "categories": ["Pastries", "Bread & Bakery", "Bread"],
        "confidence": "strong",
        "score": 0.84,
    },
    {
        "reason": "bread",
        "regex_patterns": [
            r"\b(bread|pan|pain|pane|brot|brood|pao|baguette|barra|chapata|ciabatta|hogaza|panecillo|panecillos)\b",
            r"\b(biscote|biscotes|tostada|tostadas|picos|regana|reganas|bagel|bagels|focaccia|toast|broodje)\b",
        ],
        "exclude_patterns": [r"\b(rallado|labios|energetica|cereales|chocolate)\b"],
        "categories": ["Bread", "Bread & Bakery"],
        "confidence": "strong",
        "score": 0.86,
    },
    # 5. Proteins, deli before generic meat ("jamon" would otherwise be meat)
    {
        "reason": "deli_cold_cuts",
        "regex_patterns": [
            r"\b(jamon|ham|salami|salchichon|chorizo|fuet|mortadela|mortadella|prosciutto|pancetta)\b",
            r"\b(fiambre|fiambres|embutido|embutidos|sobrasada|cecina|longaniza|pepperoni|lacon|york)\b",
            r"\b(cold cuts|deli|charcuterie|jambon|saucisson|schinken|wurst|salame|bresaola|speck)\b",
            r"\b(vleeswaren|presunto|fiambre|pernil|embotit|lomo embuchado|pechuga de pavo|pavo cocido)\b",
        ],
        "exclude_patterns": PREPARED_FOOD_PATTERNS + FLAVOUR_PATTERNS,
        "categories": ["Deli / Cold Cuts", "Deli", "Meat & Poultry", "Meat"],
        "confidence": "strong",
        "score": 0.88,
    },
    {
        "reason": "meat_poultry",
        "regex_patterns": [
            r"\b(meat|carne|carnes|pollo|chicken|beef|ternera|vacuno|cerdo|pork|cordero|lamb|pavo|turkey)\b",
            r"\b(conejo|rabbit|pechuga|pechugas|muslo|muslos|contramuslo|contramuslos|alitas|wings)\b",
            r"\b(filete|filetes|solomillo|entrecot|chuleta|chuletas|costilla|costillas|ribs|lomo|steak)\b",
            r"\b(hamburguesa|hamburguesas|albondigas|meatballs|salchicha|salchichas|sausage|sausages)\b",
            r"\b(picada|picadillo|mince|minced|bacon|beicon|viande|poulet|boeuf|porc|veau|agneau)\b",
            r"\b(fleisch|huhn|hahnchen|rind|schwein|hackfleisch|vlees|kip|gehakt|varken|rund)\b",
            r"\b(frango|carne moida|porco|vaca|pollastre|vedella|carn|manzo|maiale|vitello|tacchino)\b",
        ],
        "exclude_patterns": PREPARED_FOOD_PATTERNS + FLAVOUR_PATTERNS,
        "categories": ["Meat & Poultry", "Meat"],
        "confidence": "strong",
        "score": 0.86,
    },
    {
        "reason": "fish_seafood",
        "regex_patterns": [
            r"\b(fish|pescado|pescados|marisco|mariscos|seafood|salmon|atun|tuna|merluza|bacalao|cod)\b",
            r"\b(sardina|sardinas|boqueron|boquerones|anchoa|anchoas|gamba|gambas|langostino|langostinos)\b",
            r"\b(prawn|prawns|shrimp|calamar|calamares|pulpo|sepia|mejillon|mejillones|almeja|almejas)\b",
            r"\b(dorada|lubina|rape|trucha|trout|lenguado|caballa|mackerel|surimi|palitos de cangrejo)\b",
            r"\b(poisson|saumon|thon|cabillaud|crevettes|pesce|tonno|merluzzo|gamberi|fisch|lachs)\b",
            r"\b(thunfisch|garnelen|vis|zalm|tonijn|garnalen|peixe|atum|bacalhau|camarao|peix|tonyina|gambes)\b",
        ],
        "exclude_patterns": PREPARED_FOOD_PATTERNS + FLAVOUR_PATTERNS,
        "categories": ["Fish & Seafood", "Meat & Poultry"],
        "confidence": "strong",
        "score": 0.86,
    },
    {
        "reason": "eggs",
        "regex_patterns": [
            r"\b(egg|eggs|huevo|huevos|oeuf|oeufs|uova|eier|eieren|ovos|ous)\b",
        ],
        "exclude_patterns": [r"\b(chocolate|kinder|pascua|easter|sorpresa|noodles)\b"],
        "exclude_signals": ["sauce"],
        "categories": ["Eggs", "Meat & Poultry"],
        "confidence": "strong",
        "score": 0.88,
    },
    # 6. Dairy, cheese before generic dairy
    {
        "reason": "cheese",
        "regex_patterns": [
            r"\b(cheese|queso|quesos|fromage|formaggio|kase|kaese|kaas|queijo|formatge|quesito|quesitos)\b",
            r"\b(mozzarella|parmesano|parmigiano|parmesan|cheddar|gouda|emmental|brie|camembert|manchego)\b",
            r"\b(feta|ricotta|mascarpone|gorgonzola|roquefort|burrata|edam|provolone|comte|raclette)\b",
            r"\b(grana padano|pecorino|halloumi|philadelphia|babybel|rulo de cabra|havarti)\b",
        ],
        "exclude_patterns": PREPARED_DISH_PATTERNS + FLAVOUR_PATTERNS,
        "categories": ["Cheese", "Dairy (Milk/Yogurt)", "Dairy", "Deli"],
        "confidence": "strong",
        "score": 0.88,
    },
    {
        "reason": "milk_yogurt",
        "regex_patterns": [
            r"\b(milk|leche|lait|latte|milch|melk|leite|llet|yogurt|yoghurt|yogur|yogures|yaourt|yaourts)\b",
            r"\b(joghurt|iogurte|iogurt|kefir|nata|skyr|quark|batido|batidos|creme fraiche|requeson)\b",
            r"\b(semidesnatada|desnatada|bebida de (?:avena|soja|almendra|almendras|arroz|coco))\b",
            r"\b(oat milk|almond milk|soy milk|oat drink|haferdrink|lait d avoine)\b",
        ],
        "exclude_patterns": [
            r"\b(cafe|coffee|capsulas|chocolate|corporal|body|hidratante|limpiadora|solar)\b",
        ],
        "categories": ["Dairy (Milk/Yogurt)", "Dairy"],
        "confidence": "strong",
        "score": 0.86,
    },
    {
        "reason": "butter",
        "regex_patterns": [
            r"\b(butter|mantequilla|beurre|burro|mantega|manteiga|boter|margarina|margarine)\b",
        ],
        "exclude_patterns": [r"\b(peanut|cacahuete|galleta|galletas|cookies|biscuits|corporal|body)\b"],
        "categories": ["Oils & Vinegars", "Condiments", "Oils & Fats", "Condiments & Spices"],
        "confidence": "strong",
        "score": 0.80,
    },
    # 7. Produce, gated off by drink/sauce/cleaning signals
    {
        "reason": "fruits",
        "regex_patterns": FRUIT_WORD_PATTERNS,
        "exclude_patterns": (
            PRODUCE_PROCESSED_PATTERNS + FROZEN_PATTERNS + FLAVOUR_PATTERNS
            + SALAD_WORD_PATTERNS + PREPARED_QUALIFIER_PATTERNS + PREPARED_FOOD_PATTERNS
        ),
        "exclude_signals": ["beverage", "sauce", "cleaning"],
        "categories": ["Fruits", "Fresh Ready-to-Eat"],
        "confidence": "strong",
        "score": 0.82,
    },
    {
        "reason": "vegetables",
        "regex_patterns": VEGETABLE_WORD_PATTERNS,
        "exclude_patterns": (
            PRODUCE_PROCESSED_PATTERNS + FROZEN_PATTERNS + FLAVOUR_PATTERNS
            + SALAD_WORD_PATTERNS + PREPARED_QUALIFIER_PATTERNS + PREPARED_FOOD_PATTERNS
        ),
        "exclude_signals": ["beverage", "sauce", "cleaning", "snack_brand"],
        "categories": ["Vegetables", "Herbs & Fresh Aromatics"],
        "confidence": "strong",
        "score": 0.82,
    },
    # 8. Prepared salads
    {
        "reason": "prepared_salads",
        "regex_patterns": SALAD_WORD_PATTERNS + FRUIT_WORD_PATTERNS + VEGETABLE_WORD_PATTERNS,
        "requires_patterns": SALAD_WORD_PATTERNS + PREPARED_QUALIFIER_PATTERNS,
        "exclude_signals": ["beverage", "cleaning"],
        "categories": ["Prepared Salads", "Fresh Ready-to-Eat", "Ready Meals"],
        "confidence": "strong",
        "score": 0.80,
    },
    # 9. Soups
    {
        "reason": "soups",
        "regex_patterns": [
            r"\b(sopa|sopas|soup|soups|soupe|zuppa|suppe|soep|caldo|broth|consome|gazpacho|salmorejo)\b",
            r"\b(vichyssoise|minestrone|ramen|miso soup|sopa de sobre)\b",
        ],
        "categories": ["Ready Meals", "Canned & Jarred", "Fresh Ready-to-Eat"],
        "confidence": "strong",
        "score": 0.78,
    },
    {
        "reason": "cream_soups",
        "regex_patterns": [r"\b(crema|creme|veloute|pure)\b"],
        "requires_patterns": VEGETABLE_WORD_PATTERNS + [
            r"\b(marisco|mariscos|pollo|chicken|pescado|legumbres|calabaza|puerro|verduras)\b",
        ],
        "exclude_signals": ["cleaning"],
        "categories": ["Ready Meals", "Canned & Jarred", "Fresh Ready-to-Eat"],
        "confidence": "strong",
        "score": 0.76,
    },
    # 10. Drinks; coconut water stays Water
    {
        "reason": "water",
        "regex_patterns": [
            r"\b(water|agua|aguas|eau|acqua|wasser|aigua|agua mineral|mineral water|sparkling water)\b",
            r"\b(font vella|lanjaron|bezoya|solan de cabras|evian|vittel|volvic|perrier|san pellegrino)\b",
            r"\b(aquabona|fuente liviana|viladrau|cabreiroa|vichy catalan)\b",
        ],
        "exclude_patterns": [
            r"\b(micelar|micellar|oxigenada|destilada|colonia|perfume|tonica|tonic|fresca de colonia)\b",
        ],
        "exclude_signals": ["cleaning"],
        "categories": ["Water", "Drinks", "Beverages"],
        "confidence": "strong",
        "score": 0.88,
    },
    {
        "reason": "energy_sports_drinks",
        "regex_patterns": [
            r"\b(energy|energetica|energetico|energizante|red bull|monster|burn|rockstar|isostar)\b",
            r"\b(isotonic|isotonica|isotonico|sports drink|gatorade|powerade|aquarius|electrolitos)\b",
        ],
        "exclude_signals": ["energy_snack"],
        "categories": ["Energy & Sports Drinks", "Energy Drinks", "Soft Drinks", "Drinks", "Beverages"],
        "confidence": "strong",
        "score": 0.86,
    },
    {
        "reason": "soft_drinks",
        "regex_patterns": [
            r"\b(soda|sodas|cola|coca cola|cocacola|pepsi|fanta|sprite|seven up|7up|schweppes|tonica|tonic)\b",
            r"\b(gaseosa|refresco|refrescos|soft drink|soft drinks|limonada|lemonade|naranjada|ginger ale)\b",
            r"\b(ginger beer|kas|casera|trina|nestea|ice tea|iced tea|te frio|frisdrank|limonade|gazosa)\b",
            r"\b(bibita|dr pepper|mountain dew|root beer|tonic water)\b",
        ],
        "exclude_patterns": [r"\bcola ?cao\b"],
        "categories": ["Soft Drinks", "Soda & Cola", "Drinks", "Beverages"],
        "confidence": "strong",
        "score": 0.86,
    },
    {
        "reason": "juice",
        "regex_patterns": [
            r"\b(juice|juices|zumo|zumos|jugo|jugos|suco|sucos|succo|succhi|jus|saft|safte|sap|suc|sucs)\b",
            r"\b(smoothie|smoothies|nectar|nectars|nektar|granini|don simon|minute maid|tropicana|innocent)\b",
        ],
        "categories": ["Juice", "Drinks", "Beverages"],
        "confidence": "strong",
        "score": 0.86,
    },
    {
        "reason": "coffee_tea",
        "regex_patterns": [
            r"\b(coffee|cafe|cafes|caffe|kaffee|koffie|capsulas|capsules|nespresso|dolce gusto|tassimo)\b",
            r"\b(marcilla|saimaza|nescafe|bonka|descafeinado|espresso|expresso|cappuccino|colacao|cola cao)\b",
            r"\b(tea|te|tee|thee|cha|infusion|infusiones|manzanilla|tila|poleo|rooibos|matcha|chai)\b",
            r"\b(earl grey|green tea|te verde|te negro|nesquik|cacao soluble)\b",
        ],
        "exclude_patterns": [r"\b(aceituna|aceitunas|olives|olivas)\b"],
        "exclude_signals": ["cleaning"],
        "categories": ["Coffee & Tea", "Beverages", "Drinks"],
        "confidence": "strong",
        "score": 0.84,
    },
    {
        "reason": "low_no_alcohol",
        "regex_patterns": [
            r"\b(sin alcohol|alcohol free|non alcoholic|alcoholfrei|sans alcool|analcolica|00|0 0)\b",
        ],
        "requires_patterns": [
            r"\b(beer|cerveza|cervezas|biere|cerveja|birra|bier|cervesa|wine|vino|vin|wein|tostada)\b",
        ],
        "categories": ["Low/No Alcohol", "Beer", "Alcohol", "Drinks"],
        "confidence": "strong",
        "score": 0.84,
    },
    {
        "reason": "beer",
        "regex_patterns": [
            r"\b(beer|beers|cerveza|cervezas|biere|bieres|cerveja|birra|bier|cervesa|lager|ipa|pilsner|pils)\b",
            r"\b(stout|ale|mahou|estrella galicia|estrella damm|san miguel|cruzcampo|heineken|amstel)\b",
            r"\b(alhambra|voll damm|desperados|coronita|budweiser|guinness|leffe|moritz|shandy|clara)\b",
        ],
        "categories": ["Beer", "Alcohol", "Drinks", "Beverages"],
        "confidence": "strong",
        "score": 0.88,
    },
    {
        "reason": "wine",
        "regex_patterns": [
            r"\b(wine|wines|vino|vinos|vin|vins|vinho|wein|wijn|rioja|ribera|albarino|verdejo|rueda)\b",
            r"\b(cava|champagne|champan|prosecco|lambrusco|tinto|rosado|sangria|tinto de verano|moscatel)\b",
            r"\b(cabernet|merlot|tempranillo|garnacha|chardonnay|sauvignon|crianza|jerez|sherry|oporto)\b",
            r"\b(vermut|vermouth|lambrusco)\b",
        ],
        "exclude_patterns": [r"\b(vinagre|vinegar|vinaigre)\b"],
        "categories": ["Wine", "Alcohol", "Drinks", "Beverages"],
        "confidence": "strong",
        "score": 0.88,
    },
    {
        "reason": "spirits",
        "regex_patterns": [
            r"\b(spirits|liquor|licor|licores|whisky|whiskey|vodka|ron|rum|gin|ginebra|tequila|brandy)\b",
            r"\b(cognac|conac|orujo|pacharan|baileys|jagermeister|absolut|smirnoff|bacardi|beefeater)\b",
            r"\b(larios|johnnie walker|ballantines|martini|aperol|campari|schnapps|grappa|limoncello)\b",
            r"\b(mezcal|calvados|armagnac|absenta|pastis|ricard)\b",
        ],
        "categories": ["Spirits", "Alcohol", "Drinks", "Beverages"],
        "confidence": "strong",
        "score": 0.88,
    },
    # 11. Household & personal care
    {
        "reason": "laundry",
        "regex_patterns": [
            r"\b(detergente ropa|suavizante|softener|laundry|lavadora|lessive|waschmittel|wasmiddel)\b",
            r"\b(quitamanchas|stain remover|ariel|skip|dixan|wipp|norit|perlan|mimosin|vernel)\b",
        ],
        "categories": ["Laundry", "Cleaning Supplies", "Household & Cleaning Supplies"],
        "confidence": "strong",
        "score": 0.86,
    },
    {
        "reason": "cleaning",
        "regex_patterns": CLEANING_SIGNAL_PATTERNS,
        "categories": ["Cleaning Supplies", "Household & Cleaning Supplies", "Laundry"],
        "confidence": "strong",
        "score": 0.86,
    },
    {
        "reason": "soap",
        "regex_patterns": [
            r"\b(soap|jabon|jabones|savon|sapone|seife|zeep|sabao|sabo|hand wash|jabon de manos)\b",
            r"\b(gel de ducha|gel ducha|shower gel|body wash|gel de bano|gel bano|duschgel|douchegel)\b",
        ],
        "exclude_patterns": [
            r"\b(dish|platos|vajilla|lavavajillas|fregar|dishwashing|vaisselle|piatti|geschirr|afwas|loica)\b",
        ],
        "categories": ["Hygiene & Toiletries", "Personal Care", "Skin Care"],
        "confidence": "strong",
        "score": 0.84,
    },
    {
        "reason": "kitchen_consumables",
        "regex_patterns": [
            r"\b(aluminio|aluminium|aluminum|foil|film transparente|cling film|papel horno|papel de horno)\b",
            r"\b(baking paper|papel vegetal|palillos|toothpicks|pajitas|straws|vasos desechables)\b",
            r"\b(tupper|tupperware|zip bags)\b",
        ],
        "categories": ["Kitchen Consumables", "Storage (containers, zip bags)", "Household & Cleaning Supplies"],
        "confidence": "strong",
        "score": 0.82,
    },
    {
        "reason": "paper_goods",
        "regex_patterns": [
            r"\b(paper|papel|papier|papel higienico|toilet paper|toilet roll|kitchen roll|servilletas)\b",
            r"\b(napkins|panuelos|tissues|kleenex|scottex|renova|rollo de cocina|papel cocina)\b",
            r"\b(essuie tout|mouchoirs|tovaglioli|toilettenpapier|wc papier|toiletpapier)\b",
        ],
        "categories": ["Paper Goods", "Household & Cleaning Supplies"],
        "confidence": "strong",
        "score": 0.84,
    },
    {
        "reason": "hair_care",
        "regex_patterns": [
            r"\b(shampoo|champu|champus|conditioner|acondicionador|mascarilla capilar|hair|cabello|pelo)\b",
            r"\b(cheveux|capelli|haar|cabelo|cabell|laca|gomina|tinte|hair spray|hair dye|shampooing)\b",
            r"\b(spulung|balsamo capilar|pantene|h and s|head and shoulders|garnier fructis)\b",
        ],
        "categories": ["Hair Care", "Personal Care", "Hygiene & Toiletries"],
        "confidence": "strong",
        "score": 0.84,
    },
    {
        "reason": "deodorant",
        "regex_patterns": [
            r"\b(deodorant|desodorante|desodorantes|deo|deodorante|desodorant|antitranspirante)\b",
            r"\b(antiperspirant|roll on|axe|rexona|dove men)\b",
        ],
        "categories": ["Hygiene & Toiletries", "Personal Care", "Skin Care"],
        "confidence": "strong",
        "score": 0.84,
    },
    {
        "reason": "oral_care",
        "regex_patterns": [
            r"\b(toothpaste|pasta de dientes|pasta dental|dentifrico|dentifrice|dentifricio|zahnpasta)\b",
            r"\b(tandpasta|cepillo de dientes|cepillo dental|toothbrush|colutorio|enjuague bucal|mouthwash)\b",
            r"\b(hilo dental|dental floss|seda dental|colgate|sensodyne|oral b|lacer|vitis)\b",
        ],
        "categories": ["Oral Care", "Personal Care", "Hygiene & Toiletries"],
        "confidence": "strong",
        "score": 0.86,
    },
    {
        "reason": "skin_care",
        "regex_patterns": [
            r"\b(crema hidratante|crema facial|crema corporal|body milk|locion|lotion|protector solar)\b",
            r"\b(sunscreen|after sun|agua micelar|micellar|desmaquillante|nivea|serum|contorno de ojos)\b",
        ],
        "categories": ["Skin Care", "Personal Care", "Hygiene & Toiletries"],
        "confidence": "strong",
        "score": 0.82,
    },
    {
        "reason": "cosmetics",
        "regex_patterns": [
            r"\b(maquillaje|makeup|make up|rimel|mascara de pestanas|pintalabios|barra de labios)\b",
            r"\b(esmalte|colonia|perfume|eau de toilette|eau de parfum|base de maquillaje|lipstick)\b",
        ],
        "categories": ["Cosmetics", "Personal Care"],
        "confidence": "strong",
        "score": 0.80,
    },
    {
        "reason": "baby_care",
        "regex_patterns": [
            r"\b(panales|panal|diapers|nappies|toallitas|wipes|dodot|huggies|couches|lingettes|windeln)\b",
        ],
        "categories": ["Baby (Diapers & Wipes)", "Baby Items", "Hygiene & Toiletries"],
        "confidence": "strong",
        "score": 0.86,
    },
    {
        "reason": "baby_food",
        "regex_patterns": [
            r"\b(potito|potitos|papilla|papillas|baby food|leche de continuacion|leche infantil|hero baby)\b",
            r"\b(blevit|nutriben|almiron|babynat)\b",
        ],
        "categories": ["Baby Food", "Baby Items"],
        "confidence": "strong",
        "score": 0.84,
    },
    {
        "reason": "otc_medicine",
        "regex_patterns": [
            r"\b(ibuprofeno|ibuprofen|paracetamol|aspirina|aspirin|antihistaminico|jarabe|pastillas para)\b",
            r"\b(frenadol|gelocatil|couldina|strepsils|medicine|medicamento|medicamentos)\b",
        ],
        "categories": ["OTC Medicine", "Health Care"],
        "confidence": "strong",
        "score": 0.84,
    },
    {
        "reason": "first_aid_supplements",
        "regex_patterns": [
            r"\b(tiritas|apositos|plasters|band aid|gasas|vendas|agua oxigenada|alcohol 96|betadine)\b",
            r"\b(vitamina|vitaminas|vitamin|vitamins|suplemento|suplementos|supplement|supplements|magnesio)\b",
        ],
        "categories": ["First Aid", "Supplements", "Health Care"],
        "confidence": "strong",
        "score": 0.80,
    },
    # 12. Snacks
    {
        "reason": "snack_bars",
        "regex_patterns": [
            r"\b(barrita|barritas|energy bar|energy bars|protein bar|protein bars|cereal bar|cereal bars)\b",
            r"\b(granola bar|granola bars|muesliriegel|mueslireep|barre de cereales|barres de cereales)\b",
        ],
        "categories": ["Chocolate & Candy", "Snacks"],
        "confidence": "strong",
        "score": 0.82,
    },
    {
        "reason": "cookies_biscuits",
        "regex_patterns": [
            r"\b(cookie|cookies|galleta|galletas|biscuit|biscuits|biscotti|keks|kekse|koekjes|koekje)\b",
            r"\b(bolacha|bolachas|galeta|galetes|oreo|oreos|digestive|chips ahoy|principe|tostarica)\b",
        ],
        "categories": ["Cookies & Biscuits", "Snacks"],
        "confidence": "strong",
        "score": 0.86,
    },
    {
        "reason": "chocolate_candy",
        "regex_patterns": [
            r"\b(chocolate|chocolates|chocolat|cioccolato|schokolade|chocolade|xocolata|cacao|bombon)\b",
            r"\b(bombones|bonbons|pralines|candy|candies|sweets|caramelo|caramelos|gominolas|chuches)\b",
            r"\b(chicle|chicles|chewing gum|regaliz|piruleta|lacasitos|kitkat|kit kat|twix|snickers)\b",
            r"\b(mars|milka|lindt|ferrero|kinder|toblerone|haribo|m and ms|turron|turrones|mazapan)\b",
            r"\b(polvorones|snoep|dulces|golosinas)\b",
        ],
        "categories": ["Chocolate & Candy", "Snacks"],
        "confidence": "strong",
        "score": 0.86,
    },
    {
        "reason": "nuts_seeds",
        "regex_patterns": [
            r"\b(nuts|frutos secos|nueces|nuez|almendra|almendras|almonds|cacahuete|cacahuetes|peanuts)\b",
            r"\b(pistacho|pistachos|pistachios|anacardo|anacardos|cashews|avellana|avellanas|hazelnuts)\b",
            r"\b(pipas|semillas|seeds|chia|sesamo|pinones|macadamia|pecan|noix|noisettes|amandes)\b",
            r"\b(noci|mandorle|nusse|mandeln|noten|amandelen|castanas|castanyes|mani|ametlles)\b",
        ],
        "exclude_patterns": [r"\b(moscada|crema|butter|mantequilla|leche|milk|bebida)\b"],
        "categories": ["Nuts & Seeds", "Snacks"],
        "confidence": "strong",
        "score": 0.84,
    },
    {
        "reason": "ice_cream_terminal",
        "regex_patterns": [
            r"\b(helad\w*|gelat\w*|ice ?creams?|polo|polos|cucurucho|cucuruchos|granizado|tarrina)\b",
        ],
        "categories": ["Ice Cream & Desserts", "Frozen Foods", "Snacks"],
        "confidence": "strong",
        "score": 0.80,
    },
    # 13. Frozen
    {
        "reason": "frozen_meals",
        "regex_patterns": FROZEN_PATTERNS,
        "requires_patterns": [
            r"\b(pizza|pizzas|lasana|lasagna|croquetas|nuggets|varitas|empanadillas|canelones|paella)\b",
            r"\b(meal|meals|dinner|plato|platos|burrito|burritos|san jacobo|san jacobos|fingers)\b",
            r"\b(rebozado|rebozados|rebozada|rebozadas|patatas|fritas|gyozas|rollitos)\b",
        ],
        "categories": ["Frozen Meals", "Frozen Foods", "Ready Meals"],
        "confidence": "strong",
        "score": 0.84,
    },
    {
        "reason": "frozen_generic",
        "regex_patterns": FROZEN_PATTERNS,
        "categories": ["Frozen Vegetables & Fruit", "Frozen Foods", "Frozen Meals"],
        "confidence": "strong",
        "score": 0.78,
    },
    # 14. Condiments & pantry
    {
        "reason": "sauces_condiments",
        "regex_patterns": SAUCE_SIGNAL_PATTERNS,
        "categories": ["Sauces", "Condiments", "Condiments & Spices"],
        "confidence": "strong",
        "score": 0.84,
    },
    {
        "reason": "jam_honey_spreads",
        "regex_patterns": [
            r"\b(mermelada|mermeladas|jam|confitura|confiture|marmellata|marmelade|konfiture|compota)\b",
            r"\b(miel|honey|mel|honig|honing|nutella|nocilla|crema de cacao|crema de cacahuete)\b",
            r"\b(peanut butter|spread|untable|pate|foie)\b",
        ],
        "categories": ["Breakfast & Spreads", "Condiments"],
        "confidence": "strong",
        "score": 0.84,
    },
    {
        "reason": "oils_vinegars",
        "regex_patterns": [
            r"\b(aceite|aceites|oil|oils|olive oil|huile|olio|azeite|oli|ol|vinagre|vinegar|vinaigre|aceto)\b",
        ],
        "exclude_patterns": [r"\b(corporal|body|motor|capilar|masaje)\b"],
        "categories": ["Oils & Vinegars", "Condiments", "Oils & Fats"],
        "confidence": "strong",
        "score": 0.84,
    },
    {
        "reason": "salt_pepper_spices",
        "regex_patterns": [
            r"\b(sal|salt|sel|salz|zout|pimienta|pepper|poivre|pepe|pfeffer|peper|pimenta|pebre)\b",
            r"\b(oregano|comino|cumin|canela|cinnamon|pimenton|paprika|curry|azafran|saffron|tomillo)\b",
            r"\b(thyme|romero|rosemary|perejil|parsley|albahaca|basil|laurel|nuez moscada|nutmeg|clavo)\b",
            r"\b(especias|especia|spices|spice|seasoning|sazonador|avecrem|pastilla de caldo|cubitos)\b",
            r"\b(jengibre|curcuma|turmeric|ajo en polvo|cebolla en polvo|hierbas provenzales)\b",
        ],
        "categories": ["Spices & Seasonings", "Condiments", "Condiments & Spices"],
        "confidence": "strong",
        "score": 0.82,
    },
    {
        "reason": "baking_ingredients",
        "regex_patterns": [
            r"\b(harina|flour|farine|farina|mehl|bloem|farinha|levadura|yeast|bicarbonato|maicena)\b",
            r"\b(azucar|sugar|sucre|zucchero|zucker|suiker|acucar|edulcorante|sacarina|gasificante)\b",
            r"\b(pan rallado|breadcrumbs|panko)\b",
        ],
        "categories": ["Baking Ingredients", "Baking", "Condiments & Spices"],
        "confidence": "strong",
        "score": 0.82,
    },
    # 15. Breakfast cereals
    {
        "reason": "breakfast_cereals",
        "regex_patterns": [
            r"\b(cereal|cereales|cereals|muesli|granola|corn flakes|cornflakes|copos de avena|avena)\b",
            r"\b(oats|porridge|special k|kelloggs|choco krispies|chocapic|smacks|all bran|flocons)\b",
            r"\b(avoine|haferflocken|havermout|aveia|civada)\b",
        ],
        "exclude_signals": ["beverage", "energy_snack"],
        "categories": ["Breakfast & Spreads", "Pasta, Rice & Grains", "Pasta, Rice & Cereal"],
        "confidence": "strong",
        "score": 0.84,
    },
    # 16. Prepared & takeaway
    {
        "reason": "sandwiches_takeaway",
        "regex_patterns": [
            r"\b(sandwich|sandwiches|bocadillo|bocadillos|bocata|burger|hamburger|pizza|pizzas|kebab)\b",
            r"\b(doner|durum|shawarma|hot dog|perrito|takeaway|take away|para llevar|to go|panini)\b",
            r"\b(sushi|menu|combo|empanada|empanadas|tosta|tostas)\b",
        ],
        "categories": ["Sandwiches / Takeaway", "Ready Meals", "Fresh Ready-to-Eat"],
        "confidence": "strong",
        "score": 0.82,
    },
    {
        "reason": "ready_meals",
        "regex_patterns": [
            r"\b(ready meal|ready meals|prepared meal|plato preparado|platos preparados|comida preparada)\b",
            r"\b(precocinado|precocinados|precocinada|plat cuisine|plats cuisines|fertiggericht)\b",
            r"\b(kant en klaar|refeicao|croqueta|croquetas|lasana|lasagna|canelones|paella|tortilla de patatas)\b",
            r"\b(empanadilla|empanadillas|nuggets|pure|hummus|guacamole|ensaladilla)\b",
        ],
        "categories": ["Ready Meals", "Fresh Ready-to-Eat", "Sandwiches / Takeaway"],
        "confidence": "strong",
        "score": 0.80,
    },
    # 17. Canned goods & legumes
    {
        "reason": "canned_goods",
        "regex_patterns": [
            r"\b(lata|latas|conserva|conservas|canned|tinned|tin|tins|enlatado|enlatados|conserve|boite)\b",
            r"\b(bote|tarro|frasco|aceitunas|olives|olivas|encurtidos|pepinillos|pickles|alcaparras|capers)\b",
        ],
        "categories": ["Canned & Jarred", "Canned Goods"],
        "confidence": "strong",
        "score": 0.78,
    },
    {
        "reason": "legumes",
        "regex_patterns": [
            r"\b(legumbre|legumbres|legumes|lentejas|lenteja|lentils|garbanzos|garbanzo|chickpeas|judias)\b",
            r"\b(alubias|frijoles|habichuelas|beans|fabes|tofu|tempeh|seitan|edamame|soja texturizada)\b",
            r"\b(lentilles|pois chiches|haricots|lenticchie|ceci|fagioli|linsen|kichererbsen|bohnen)\b",
            r"\b(linzen|kikkererwten|bonen|feijao|grao|cigrons|mongetes|llenties)\b",
        ],
        "categories": ["Legumes", "Canned & Jarred", "Canned Goods", "Plant-Based Protein"],
        "confidence": "strong",
        "score": 0.80,
    },
    # 18. Weak fallbacks
    {
        "reason": "fresh_qualifier_guess",
        "regex_patterns": [
            r"\b(organic|organico|organica|ecologico|ecologica|eco|bio|biologico|biologica|biologique)\b",
            r"\b(natural|naturales|fresh|fresco|fresca|frescos|frescas|frais|fraiche|frisch|vers)\b",
        ],
        "categories": ["Fruits", "Vegetables", "Fresh Ready-to-Eat"],
        "confidence": "weak",
        "score": 0.45,
    },
    {
        "reason": "short_description_guess",
        "regex_patterns": [],
        "max_tokens": CATEGORIZER_CONFIG["short_description"]["max_tokens"],
        "min_length": CATEGORIZER_CONFIG["short_description"]["min_length"],
        "categories": ["Vegetables", "Fruits", "Pasta, Rice & Grains", "Grains"],
        "confidence": "weak",
        "score": 0.40,
    },
]
