"""
Locale hint patterns.
Single high-precision vocabulary words per language, tried before the
general cascade when the receipt locale is known.

Each locale maps to an ordered list of (regex, preference list) pairs; the
first matching pair wins. Processed-food words come before the produce,
protein, dairy and bread words they contain ("zumo de naranja",
"caldo de pollo", "tomate frito", "chocolate con leche", "pan rallado").
"""

SNACKS = ["Salty Snacks", "Snacks"]
ICE_CREAM = ["Ice Cream & Desserts", "Frozen Foods", "Snacks"]
JUICE = ["Juice", "Drinks", "Beverages"]
WATER = ["Water", "Drinks", "Beverages"]
COFFEE_TEA = ["Coffee & Tea", "Beverages", "Drinks"]
BEER = ["Beer", "Alcohol", "Drinks"]
WINE = ["Wine", "Alcohol", "Drinks"]
SOUPS = ["Ready Meals", "Canned & Jarred", "Fresh Ready-to-Eat"]
SAUCES = ["Sauces", "Condiments", "Condiments & Spices"]
CLEANING = ["Cleaning Supplies", "Household & Cleaning Supplies"]
COOKIES = ["Cookies & Biscuits", "Snacks"]
DELI = ["Deli / Cold Cuts", "Deli", "Meat & Poultry"]
CHEESE = ["Cheese", "Dairy (Milk/Yogurt)", "Dairy"]
DAIRY = ["Dairy (Milk/Yogurt)", "Dairy"]
MEAT = ["Meat & Poultry", "Meat"]
FISH = ["Fish & Seafood", "Meat & Poultry"]
EGGS = ["Eggs", "Meat & Poultry"]
BREAD = ["Bread", "Bread & Bakery"]
BAKING = ["Baking Ingredients", "Baking", "Condiments & Spices"]
GRAINS = ["Pasta, Rice & Grains", "Pasta, Rice & Cereal"]
CHOCOLATE = ["Chocolate & Candy", "Snacks"]
FRUITS = ["Fruits", "Fresh Ready-to-Eat"]
VEGETABLES = ["Vegetables", "Herbs & Fresh Aromatics"]


LOCALE_HINT_PATTERNS = {
    "es": [
        (r"\bpatatas fritas\b", SNACKS),
        (r"\bhelados?\b", ICE_CREAM),
        (r"\bzumos?\b", JUICE),
        (r"\bagua\b(?! (?:micelar|oxigenada|destilada))", WATER),
        (r"\bcafe\b", COFFEE_TEA),
        (r"\bcervezas?\b", BEER),
        (r"\bvinos?\b", WINE),
        (r"\b(?:caldo|sopa)\b", SOUPS),
        (r"\bsalsa\b", SAUCES),
        (r"\blejia\b", CLEANING),
        (r"\bgalletas?\b", COOKIES),
        (r"\bchocolates?\b", CHOCOLATE),
        (r"\bjamon\b", DELI),
        (r"\bqueso\b", CHEESE),
        (r"\bleche\b", DAIRY),
        (r"\bpollo\b", MEAT),
        (r"\bternera\b", MEAT),
        (r"\bmerluza\b", FISH),
        (r"\bhuevos?\b", EGGS),
        (r"\bpan rallado\b", BAKING),
        (r"\bpan\b", BREAD),
        (r"\barroz\b", GRAINS),
        (r"\bplatanos?\b", FRUITS),
        (r"\bmanzanas?\b", FRUITS),
        (r"\btomate frito\b", SAUCES),
        (r"\btomates?\b", VEGETABLES),
        (r"\bcebollas?\b", VEGETABLES),
    ],
    "en": [
        (r"\bcrisps\b", SNACKS),
        (r"\bice cream\b", ICE_CREAM),
        (r"\bjuice\b", JUICE),
        (r"\bwater\b", WATER),
        (r"\bcoffee\b", COFFEE_TEA),
        (r"\bbeer\b", BEER),
        (r"\bwine\b", WINE),
        (r"\bsoup\b", SOUPS),
        (r"\bbleach\b", CLEANING),
        (r"\bbiscuits\b", COOKIES),
        (r"\bham\b", DELI),
        (r"\bcheese\b", CHEESE),
        (r"\bmilk\b", DAIRY),
        (r"\bchicken\b", MEAT),
        (r"\bbeef\b", MEAT),
        (r"\bsalmon\b", FISH),
        (r"\beggs\b", EGGS),
        (r"\bbread\b", BREAD),
        (r"\brice\b", GRAINS),
        (r"\bbananas?\b", FRUITS),
        (r"\bapples?\b", FRUITS),
        (r"\bpotatoes\b", VEGETABLES),
        (r"\bonions\b", VEGETABLES),
    ],
    "pt": [
        (r"\bbatatas fritas\b", SNACKS),
        (r"\bgelados?\b", ICE_CREAM),
        (r"\bsumo\b", JUICE),
        (r"\bsuco\b", JUICE),
        (r"\bagua\b(?! (?:micelar|oxigenada|destilada))", WATER),
        (r"\bcafe\b", COFFEE_TEA),
        (r"\bcerveja\b", BEER),
        (r"\bvinho\b", WINE),
        (r"\bsopa\b", SOUPS),
        (r"\blixivia\b", CLEANING),
        (r"\bbolachas?\b", COOKIES),
        (r"\bfiambre\b", DELI),
        (r"\bqueijo\b", CHEESE),
        (r"\bleite\b", DAIRY),
        (r"\bfrango\b", MEAT),
        (r"\bbacalhau\b", FISH),
        (r"\bovos\b", EGGS),
        (r"\bpao\b", BREAD),
        (r"\barroz\b", GRAINS),
        (r"\bbananas?\b", FRUITS),
        (r"\bmacas?\b", FRUITS),
        (r"\bcebolas?\b", VEGETABLES),
    ],
    "fr": [
        (r"\bchips\b", SNACKS),
        (r"\bglaces?\b", ICE_CREAM),
        (r"\bjus\b", JUICE),
        (r"\beau\b", WATER),
        (r"\bcafe\b", COFFEE_TEA),
        (r"\bbieres?\b", BEER),
        (r"\bvin\b", WINE),
        (r"\bsoupe\b", SOUPS),
        (r"\bjavel\b", CLEANING),
        (r"\bbiscuits\b", COOKIES),
        (r"\bjambon\b", DELI),
        (r"\bfromage\b", CHEESE),
        (r"\blait\b", DAIRY),
        (r"\bpoulet\b", MEAT),
        (r"\bboeuf\b", MEAT),
        (r"\bpoisson\b", FISH),
        (r"\boeufs\b", EGGS),
        (r"\bpain\b", BREAD),
        (r"\briz\b", GRAINS),
        (r"\bpommes\b", FRUITS),
        (r"\bcarottes\b", VEGETABLES),
        (r"\boignons\b", VEGETABLES),
    ],
    "it": [
        (r"\bpatatine\b", SNACKS),
        (r"\bgelato\b", ICE_CREAM),
        (r"\bsucco\b", JUICE),
        (r"\bacqua\b", WATER),
        (r"\bcaffe\b", COFFEE_TEA),
        (r"\bbirra\b", BEER),
        (r"\bvino\b", WINE),
        (r"\bzuppa\b", SOUPS),
        (r"\bcandeggina\b", CLEANING),
        (r"\bbiscotti\b", COOKIES),
        (r"\bprosciutto\b", DELI),
        (r"\bformaggio\b", CHEESE),
        (r"\blatte\b", DAIRY),
        (r"\bpollo\b", MEAT),
        (r"\bmanzo\b", MEAT),
        (r"\btonno\b", FISH),
        (r"\buova\b", EGGS),
        (r"\bpane\b", BREAD),
        (r"\briso\b", GRAINS),
        (r"\bmele\b", FRUITS),
        (r"\bpomodori\b", VEGETABLES),
        (r"\bcipolle\b", VEGETABLES),
    ],
    "de": [
        (r"\bchips\b", SNACKS),
        (r"\beis\b", ICE_CREAM),
        (r"\bsaft\b", JUICE),
        (r"\bwasser\b", WATER),
        (r"\bkaffee\b", COFFEE_TEA),
        (r"\bbier\b", BEER),
        (r"\bwein\b", WINE),
        (r"\bsuppe\b", SOUPS),
        (r"\breiniger\b", CLEANING),
        (r"\bkekse\b", COOKIES),
        (r"\bschinken\b", DELI),
        (r"\bkase\b", CHEESE),
        (r"\bmilch\b", DAIRY),
        (r"\bhahnchen\b", MEAT),
        (r"\brind\b", MEAT),
        (r"\blachs\b", FISH),
        (r"\beier\b", EGGS),
        (r"\bbrot\b", BREAD),
        (r"\breis\b", GRAINS),
        (r"\bapfel\b", FRUITS),
        (r"\bkartoffeln\b", VEGETABLES),
        (r"\bzwiebeln\b", VEGETABLES),
    ],
    "nl": [
        (r"\bchips\b", SNACKS),
        (r"\bijs\b", ICE_CREAM),
        (r"\bsap\b", JUICE),
        (r"\bwater\b", WATER),
        (r"\bkoffie\b", COFFEE_TEA),
        (r"\bbier\b", BEER),
        (r"\bwijn\b", WINE),
        (r"\bsoep\b", SOUPS),
        (r"\bwasmiddel\b", CLEANING),
        (r"\bkoekjes\b", COOKIES),
        (r"\bham\b", DELI),
        (r"\bkaas\b", CHEESE),
        (r"\bmelk\b", DAIRY),
        (r"\bkip\b", MEAT),
        (r"\bgehakt\b", MEAT),
        (r"\bzalm\b", FISH),
        (r"\beieren\b", EGGS),
        (r"\bbrood\b", BREAD),
        (r"\brijst\b", GRAINS),
        (r"\bappels\b", FRUITS),
        (r"\baardappelen\b", VEGETABLES),
        (r"\buien\b", VEGETABLES),
    ],
    "ca": [
        (r"\bpatates fregides\b", SNACKS),
        (r"\bgelats?\b", ICE_CREAM),
        (r"\bsucs?\b", JUICE),
        (r"\baigua\b", WATER),
        (r"\bcafe\b", COFFEE_TEA),
        (r"\bcervesa\b", BEER),
        (r"\bvi\b", WINE),
        (r"\bsopa\b", SOUPS),
        (r"\bleixiu\b", CLEANING),
        (r"\bgaletes\b", COOKIES),
        (r"\bpernil\b", DELI),
        (r"\bformatge\b", CHEESE),
        (r"\bllet\b", DAIRY),
        (r"\bpollastre\b", MEAT),
        (r"\bvedella\b", MEAT),
        (r"\bpeix\b", FISH),
        (r"\bous\b", EGGS),
        (r"\bpa\b", BREAD),
        (r"\barros\b", GRAINS),
        (r"\bpomes\b", FRUITS),
        (r"\btomaquets\b", VEGETABLES),
        (r"\bcebes\b", VEGETABLES),
    ],
}
