"""Alias rules for dictionary v1.

`exact` aliases must equal the folded input. `contains` aliases match a
whole word or phrase inside it; lower priority wins, then earlier position.
"""

ALIASES = [
    # alcohol_type
    {"dimension": "alcohol_type", "key": "Whiskey", "alias": "whisky", "match_type": "exact", "priority": 10},
    {"dimension": "alcohol_type", "key": "Whiskey", "alias": "bourbon", "match_type": "exact", "priority": 10},
    {"dimension": "alcohol_type", "key": "Whiskey", "alias": "rye", "match_type": "exact", "priority": 10},
    {"dimension": "alcohol_type", "key": "Whiskey", "alias": "scotch", "match_type": "exact", "priority": 10},
    {"dimension": "alcohol_type", "key": "Mezcal", "alias": "mescal", "match_type": "exact", "priority": 10},
    {"dimension": "alcohol_type", "key": "Brandy", "alias": "cognac", "match_type": "exact", "priority": 10},
    {"dimension": "alcohol_type", "key": "Brandy", "alias": "armagnac", "match_type": "exact", "priority": 10},
    {"dimension": "alcohol_type", "key": "Rum", "alias": "rhum", "match_type": "exact", "priority": 10},
    {"dimension": "alcohol_type", "key": "Rum", "alias": "cachaca", "match_type": "exact", "priority": 10},
    {"dimension": "alcohol_type", "key": "Rum", "alias": "cachaça", "match_type": "exact", "priority": 10},
    {"dimension": "alcohol_type", "key": "Non-alcoholic", "alias": "none", "match_type": "exact", "priority": 10},
    {"dimension": "alcohol_type", "key": "Non-alcoholic", "alias": "no alcohol", "match_type": "exact", "priority": 10},
    {"dimension": "alcohol_type", "key": "Non-alcoholic", "alias": "virgin", "match_type": "exact", "priority": 10},
    {"dimension": "alcohol_type", "key": "Non-alcoholic", "alias": "non alcoholic", "match_type": "contains", "priority": 1},
    {"dimension": "alcohol_type", "key": "Non-alcoholic", "alias": "alcohol free", "match_type": "contains", "priority": 1},
    {"dimension": "alcohol_type", "key": "Non-alcoholic", "alias": "zero proof", "match_type": "contains", "priority": 1},
    {"dimension": "alcohol_type", "key": "Non-alcoholic", "alias": "mocktail", "match_type": "contains", "priority": 1},
    {"dimension": "alcohol_type", "key": "Non-alcoholic", "alias": "ginger beer", "match_type": "contains", "priority": 1},
    {"dimension": "alcohol_type", "key": "Non-alcoholic", "alias": "root beer", "match_type": "contains", "priority": 1},
    {"dimension": "alcohol_type", "key": "Non-alcoholic", "alias": "ginger ale", "match_type": "contains", "priority": 1},
    {"dimension": "alcohol_type", "key": "Whiskey", "alias": "whiskey", "match_type": "contains", "priority": 5},
    {"dimension": "alcohol_type", "key": "Whiskey", "alias": "whisky", "match_type": "contains", "priority": 5},
    {"dimension": "alcohol_type", "key": "Whiskey", "alias": "bourbon", "match_type": "contains", "priority": 5},
    {"dimension": "alcohol_type", "key": "Whiskey", "alias": "rye", "match_type": "contains", "priority": 5},
    {"dimension": "alcohol_type", "key": "Whiskey", "alias": "scotch", "match_type": "contains", "priority": 5},
    {"dimension": "alcohol_type", "key": "Whiskey", "alias": "single malt", "match_type": "contains", "priority": 5},
    {"dimension": "alcohol_type", "key": "Vodka", "alias": "vodka", "match_type": "contains", "priority": 5},
    {"dimension": "alcohol_type", "key": "Gin", "alias": "gin", "match_type": "contains", "priority": 5},
    {"dimension": "alcohol_type", "key": "Gin", "alias": "genever", "match_type": "contains", "priority": 5},
    {"dimension": "alcohol_type", "key": "Gin", "alias": "old tom", "match_type": "contains", "priority": 5},
    {"dimension": "alcohol_type", "key": "Rum", "alias": "rum", "match_type": "contains", "priority": 5},
    {"dimension": "alcohol_type", "key": "Rum", "alias": "rhum", "match_type": "contains", "priority": 5},
    {"dimension": "alcohol_type", "key": "Rum", "alias": "cachaca", "match_type": "contains", "priority": 5},
    {"dimension": "alcohol_type", "key": "Rum", "alias": "cachaça", "match_type": "contains", "priority": 5},
    {"dimension": "alcohol_type", "key": "Tequila", "alias": "tequila", "match_type": "contains", "priority": 5},
    {"dimension": "alcohol_type", "key": "Mezcal", "alias": "mezcal", "match_type": "contains", "priority": 5},
    {"dimension": "alcohol_type", "key": "Mezcal", "alias": "mescal", "match_type": "contains", "priority": 5},
    {"dimension": "alcohol_type", "key": "Brandy", "alias": "brandy", "match_type": "contains", "priority": 5},
    {"dimension": "alcohol_type", "key": "Brandy", "alias": "cognac", "match_type": "contains", "priority": 5},
    {"dimension": "alcohol_type", "key": "Brandy", "alias": "armagnac", "match_type": "contains", "priority": 5},
    {"dimension": "alcohol_type", "key": "Brandy", "alias": "calvados", "match_type": "contains", "priority": 5},
    {"dimension": "alcohol_type", "key": "Pisco", "alias": "pisco", "match_type": "contains", "priority": 5},
    {"dimension": "alcohol_type", "key": "Wine", "alias": "wine", "match_type": "contains", "priority": 6},
    {"dimension": "alcohol_type", "key": "Wine", "alias": "prosecco", "match_type": "contains", "priority": 6},
    {"dimension": "alcohol_type", "key": "Wine", "alias": "champagne", "match_type": "contains", "priority": 6},
    {"dimension": "alcohol_type", "key": "Beer", "alias": "beer", "match_type": "contains", "priority": 6},
    {"dimension": "alcohol_type", "key": "Beer", "alias": "lager", "match_type": "contains", "priority": 6},
    {"dimension": "alcohol_type", "key": "Beer", "alias": "ipa", "match_type": "contains", "priority": 6},
    {"dimension": "alcohol_type", "key": "Beer", "alias": "stout", "match_type": "contains", "priority": 6},
    {"dimension": "alcohol_type", "key": "Sake", "alias": "sake", "match_type": "contains", "priority": 6},
    {"dimension": "alcohol_type", "key": "Liqueur", "alias": "liqueur", "match_type": "contains", "priority": 7},
    # strength
    {"dimension": "strength", "key": "Very strong", "alias": "boozy", "match_type": "exact", "priority": 10},
    {"dimension": "strength", "key": "Very strong", "alias": "spirit forward", "match_type": "exact", "priority": 10},
    {"dimension": "strength", "key": "Very strong", "alias": "extra strong", "match_type": "exact", "priority": 10},
    {"dimension": "strength", "key": "Very strong", "alias": "all alcohol", "match_type": "exact", "priority": 10},
    {"dimension": "strength", "key": "Very strong", "alias": "very high", "match_type": "exact", "priority": 10},
    {"dimension": "strength", "key": "Strong", "alias": "high", "match_type": "exact", "priority": 10},
    {"dimension": "strength", "key": "Strong", "alias": "spirit led", "match_type": "exact", "priority": 10},
    {"dimension": "strength", "key": "Strong", "alias": "potent", "match_type": "exact", "priority": 10},
    {"dimension": "strength", "key": "Medium", "alias": "normal", "match_type": "exact", "priority": 10},
    {"dimension": "strength", "key": "Medium", "alias": "moderate", "match_type": "exact", "priority": 10},
    {"dimension": "strength", "key": "Medium", "alias": "average", "match_type": "exact", "priority": 10},
    {"dimension": "strength", "key": "Medium", "alias": "balanced", "match_type": "exact", "priority": 10},
    {"dimension": "strength", "key": "Medium", "alias": "spirit and mixer", "match_type": "exact", "priority": 10},
    {"dimension": "strength", "key": "Low", "alias": "mild", "match_type": "exact", "priority": 10},
    {"dimension": "strength", "key": "Low", "alias": "weak", "match_type": "exact", "priority": 10},
    {"dimension": "strength", "key": "Low", "alias": "light", "match_type": "exact", "priority": 10},
    {"dimension": "strength", "key": "Low", "alias": "mostly mixer", "match_type": "exact", "priority": 10},
    {"dimension": "strength", "key": "Low", "alias": "low abv", "match_type": "exact", "priority": 10},
    {"dimension": "strength", "key": "Low", "alias": "not", "match_type": "contains", "priority": 0},
    {"dimension": "strength", "key": "Very strong", "alias": "very strong", "match_type": "contains", "priority": 1},
    {"dimension": "strength", "key": "Very strong", "alias": "extra strong", "match_type": "contains", "priority": 1},
    {"dimension": "strength", "key": "Very strong", "alias": "boozy", "match_type": "contains", "priority": 2},
    {"dimension": "strength", "key": "Very strong", "alias": "spirit forward", "match_type": "contains", "priority": 2},
    {"dimension": "strength", "key": "Strong", "alias": "strong", "match_type": "contains", "priority": 5},
    {"dimension": "strength", "key": "Strong", "alias": "high", "match_type": "contains", "priority": 5},
    {"dimension": "strength", "key": "Medium", "alias": "medium", "match_type": "contains", "priority": 5},
    {"dimension": "strength", "key": "Medium", "alias": "moderate", "match_type": "contains", "priority": 5},
    {"dimension": "strength", "key": "Low", "alias": "low", "match_type": "contains", "priority": 5},
    {"dimension": "strength", "key": "Low", "alias": "light", "match_type": "contains", "priority": 5},
    {"dimension": "strength", "key": "Low", "alias": "mild", "match_type": "contains", "priority": 5},
    # glassware
    {"dimension": "glassware", "key": "Highball", "alias": "high ball", "match_type": "exact", "priority": 10},
    {"dimension": "glassware", "key": "Lowball", "alias": "low ball", "match_type": "exact", "priority": 10},
    {"dimension": "glassware", "key": "Rocks", "alias": "on the rocks", "match_type": "exact", "priority": 10},
    {"dimension": "glassware", "key": "Rocks", "alias": "dof", "match_type": "exact", "priority": 10},
    {"dimension": "glassware", "key": "Old Fashioned", "alias": "of", "match_type": "exact", "priority": 10},
    {"dimension": "glassware", "key": "Coupe", "alias": "coupette", "match_type": "exact", "priority": 10},
    {"dimension": "glassware", "key": "Nick & Nora", "alias": "nick and nora", "match_type": "exact", "priority": 10},
    {"dimension": "glassware", "key": "Cocktail glass", "alias": "cocktail", "match_type": "exact", "priority": 10},
    {"dimension": "glassware", "key": "Cocktail glass", "alias": "v glass", "match_type": "exact", "priority": 10},
    {"dimension": "glassware", "key": "Wine glass", "alias": "wine", "match_type": "exact", "priority": 10},
    {"dimension": "glassware", "key": "Wine glass", "alias": "stemmed glass", "match_type": "exact", "priority": 10},
    {"dimension": "glassware", "key": "Shot", "alias": "shooter", "match_type": "exact", "priority": 10},
    {"dimension": "glassware", "key": "Tiki", "alias": "tiki", "match_type": "contains", "priority": 1},
    {"dimension": "glassware", "key": "Highball", "alias": "highball", "match_type": "contains", "priority": 5},
    {"dimension": "glassware", "key": "Collins", "alias": "collins", "match_type": "contains", "priority": 5},
    {"dimension": "glassware", "key": "Lowball", "alias": "lowball", "match_type": "contains", "priority": 5},
    {"dimension": "glassware", "key": "Rocks", "alias": "rocks", "match_type": "contains", "priority": 5},
    {"dimension": "glassware", "key": "Old Fashioned", "alias": "old fashioned", "match_type": "contains", "priority": 4},
    {"dimension": "glassware", "key": "Coupe", "alias": "coupe", "match_type": "contains", "priority": 5},
    {"dimension": "glassware", "key": "Nick & Nora", "alias": "nick nora", "match_type": "contains", "priority": 5},
    {"dimension": "glassware", "key": "Martini", "alias": "martini", "match_type": "contains", "priority": 5},
    {"dimension": "glassware", "key": "Cocktail glass", "alias": "cocktail", "match_type": "contains", "priority": 6},
    {"dimension": "glassware", "key": "Flute", "alias": "flute", "match_type": "contains", "priority": 5},
    {"dimension": "glassware", "key": "Wine glass", "alias": "wine", "match_type": "contains", "priority": 6},
    {"dimension": "glassware", "key": "Mug", "alias": "mug", "match_type": "contains", "priority": 6},
    {"dimension": "glassware", "key": "Shot", "alias": "shot", "match_type": "contains", "priority": 6},
    # acidity
    {"dimension": "acidity", "key": "Low", "alias": "no", "match_type": "exact", "priority": 10},
    {"dimension": "acidity", "key": "Low", "alias": "none", "match_type": "exact", "priority": 10},
    {"dimension": "acidity", "key": "Low", "alias": "zero", "match_type": "exact", "priority": 10},
    {"dimension": "acidity", "key": "Low", "alias": "not acidic", "match_type": "exact", "priority": 10},
    {"dimension": "acidity", "key": "Medium", "alias": "moderate", "match_type": "exact", "priority": 10},
    {"dimension": "acidity", "key": "Medium", "alias": "balanced", "match_type": "exact", "priority": 10},
    {"dimension": "acidity", "key": "High", "alias": "tart", "match_type": "exact", "priority": 10},
    {"dimension": "acidity", "key": "High", "alias": "sour", "match_type": "exact", "priority": 10},
    {"dimension": "acidity", "key": "High", "alias": "citrusy", "match_type": "exact", "priority": 10},
    {"dimension": "acidity", "key": "High", "alias": "bright", "match_type": "exact", "priority": 10},
    {"dimension": "acidity", "key": "High", "alias": "zesty", "match_type": "exact", "priority": 10},
    {"dimension": "acidity", "key": "High", "alias": "acidic", "match_type": "exact", "priority": 10},
    {"dimension": "acidity", "key": "Low", "alias": "not", "match_type": "contains", "priority": 0},
    {"dimension": "acidity", "key": "High", "alias": "high", "match_type": "contains", "priority": 5},
    {"dimension": "acidity", "key": "Medium", "alias": "medium", "match_type": "contains", "priority": 5},
    {"dimension": "acidity", "key": "Low", "alias": "low", "match_type": "contains", "priority": 5},
    {"dimension": "acidity", "key": "High", "alias": "tart", "match_type": "contains", "priority": 6},
    {"dimension": "acidity", "key": "High", "alias": "sour", "match_type": "contains", "priority": 6},
    {"dimension": "acidity", "key": "High", "alias": "citrus", "match_type": "contains", "priority": 6},
    # sweetness
    {"dimension": "sweetness", "key": "Low", "alias": "no", "match_type": "exact", "priority": 10},
    {"dimension": "sweetness", "key": "Low", "alias": "none", "match_type": "exact", "priority": 10},
    {"dimension": "sweetness", "key": "Low", "alias": "zero", "match_type": "exact", "priority": 10},
    {"dimension": "sweetness", "key": "Dry", "alias": "bone dry", "match_type": "exact", "priority": 10},
    {"dimension": "sweetness", "key": "Dry", "alias": "not sweet", "match_type": "exact", "priority": 10},
    {"dimension": "sweetness", "key": "Dry", "alias": "unsweetened", "match_type": "exact", "priority": 10},
    {"dimension": "sweetness", "key": "Low", "alias": "off dry", "match_type": "exact", "priority": 10},
    {"dimension": "sweetness", "key": "Low", "alias": "semi dry", "match_type": "exact", "priority": 10},
    {"dimension": "sweetness", "key": "Low", "alias": "slightly sweet", "match_type": "exact", "priority": 10},
    {"dimension": "sweetness", "key": "Medium", "alias": "semi sweet", "match_type": "exact", "priority": 10},
    {"dimension": "sweetness", "key": "Medium", "alias": "moderate", "match_type": "exact", "priority": 10},
    {"dimension": "sweetness", "key": "Medium", "alias": "balanced", "match_type": "exact", "priority": 10},
    {"dimension": "sweetness", "key": "High", "alias": "sweet", "match_type": "exact", "priority": 10},
    {"dimension": "sweetness", "key": "High", "alias": "very sweet", "match_type": "exact", "priority": 10},
    {"dimension": "sweetness", "key": "High", "alias": "rich", "match_type": "exact", "priority": 10},
    {"dimension": "sweetness", "key": "High", "alias": "dessert", "match_type": "exact", "priority": 10},
    {"dimension": "sweetness", "key": "Low", "alias": "not", "match_type": "contains", "priority": 0},
    {"dimension": "sweetness", "key": "Dry", "alias": "dry", "match_type": "contains", "priority": 3},
    {"dimension": "sweetness", "key": "High", "alias": "high", "match_type": "contains", "priority": 5},
    {"dimension": "sweetness", "key": "Medium", "alias": "medium", "match_type": "contains", "priority": 5},
    {"dimension": "sweetness", "key": "Low", "alias": "low", "match_type": "contains", "priority": 5},
    {"dimension": "sweetness", "key": "High", "alias": "sweet", "match_type": "contains", "priority": 6},
    # bitterness
    {"dimension": "bitterness", "key": "Low", "alias": "no", "match_type": "exact", "priority": 10},
    {"dimension": "bitterness", "key": "Low", "alias": "none", "match_type": "exact", "priority": 10},
    {"dimension": "bitterness", "key": "Low", "alias": "zero", "match_type": "exact", "priority": 10},
    {"dimension": "bitterness", "key": "Medium", "alias": "bittersweet", "match_type": "exact", "priority": 10},
    {"dimension": "bitterness", "key": "Medium", "alias": "moderate", "match_type": "exact", "priority": 10},
    {"dimension": "bitterness", "key": "High", "alias": "bitter", "match_type": "exact", "priority": 10},
    {"dimension": "bitterness", "key": "High", "alias": "very bitter", "match_type": "exact", "priority": 10},
    {"dimension": "bitterness", "key": "Low", "alias": "not", "match_type": "contains", "priority": 0},
    {"dimension": "bitterness", "key": "High", "alias": "high", "match_type": "contains", "priority": 5},
    {"dimension": "bitterness", "key": "Medium", "alias": "medium", "match_type": "contains", "priority": 5},
    {"dimension": "bitterness", "key": "Low", "alias": "low", "match_type": "contains", "priority": 5},
    {"dimension": "bitterness", "key": "High", "alias": "bitter", "match_type": "contains", "priority": 6},
    # spice
    {"dimension": "spice", "key": "Low", "alias": "no", "match_type": "exact", "priority": 10},
    {"dimension": "spice", "key": "Low", "alias": "none", "match_type": "exact", "priority": 10},
    {"dimension": "spice", "key": "Low", "alias": "zero", "match_type": "exact", "priority": 10},
    {"dimension": "spice", "key": "Low", "alias": "no spice", "match_type": "exact", "priority": 10},
    {"dimension": "spice", "key": "Medium", "alias": "mild", "match_type": "exact", "priority": 10},
    {"dimension": "spice", "key": "Medium", "alias": "slight", "match_type": "exact", "priority": 10},
    {"dimension": "spice", "key": "Medium", "alias": "a little", "match_type": "exact", "priority": 10},
    {"dimension": "spice", "key": "High", "alias": "yes", "match_type": "exact", "priority": 10},
    {"dimension": "spice", "key": "High", "alias": "spicy", "match_type": "exact", "priority": 10},
    {"dimension": "spice", "key": "High", "alias": "hot", "match_type": "exact", "priority": 10},
    {"dimension": "spice", "key": "High", "alias": "fiery", "match_type": "exact", "priority": 10},
    {"dimension": "spice", "key": "Low", "alias": "not", "match_type": "contains", "priority": 0},
    {"dimension": "spice", "key": "High", "alias": "high", "match_type": "contains", "priority": 5},
    {"dimension": "spice", "key": "Medium", "alias": "medium", "match_type": "contains", "priority": 5},
    {"dimension": "spice", "key": "Medium", "alias": "mild", "match_type": "contains", "priority": 5},
    {"dimension": "spice", "key": "Low", "alias": "low", "match_type": "contains", "priority": 5},
    {"dimension": "spice", "key": "High", "alias": "spicy", "match_type": "contains", "priority": 6},
    {"dimension": "spice", "key": "High", "alias": "hot", "match_type": "contains", "priority": 6},
]
