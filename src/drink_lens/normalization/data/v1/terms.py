"""Canonical attribute values for dictionary v1.

`group` marks near-equivalent values (adjacent, never exact).
`rank` places a value on an ordinal scale; neighbours are adjacent.
"""

TERMS = [
    {"dimension": "alcohol_type", "key": "Whiskey", "group": None, "rank": None},
    {"dimension": "alcohol_type", "key": "Vodka", "group": None, "rank": None},
    {"dimension": "alcohol_type", "key": "Gin", "group": None, "rank": None},
    {"dimension": "alcohol_type", "key": "Rum", "group": None, "rank": None},
    {"dimension": "alcohol_type", "key": "Tequila", "group": "agave", "rank": None},
    {"dimension": "alcohol_type", "key": "Mezcal", "group": "agave", "rank": None},
    {"dimension": "alcohol_type", "key": "Brandy", "group": "grape_spirit", "rank": None},
    {"dimension": "alcohol_type", "key": "Pisco", "group": "grape_spirit", "rank": None},
    {"dimension": "alcohol_type", "key": "Wine", "group": None, "rank": None},
    {"dimension": "alcohol_type", "key": "Beer", "group": None, "rank": None},
    {"dimension": "alcohol_type", "key": "Sake", "group": None, "rank": None},
    {"dimension": "alcohol_type", "key": "Liqueur", "group": None, "rank": None},
    {"dimension": "alcohol_type", "key": "Non-alcoholic", "group": None, "rank": None},
    {"dimension": "strength", "key": "Low", "group": None, "rank": 1},
    {"dimension": "strength", "key": "Medium", "group": None, "rank": 2},
    {"dimension": "strength", "key": "Strong", "group": None, "rank": 3},
    {"dimension": "strength", "key": "Very strong", "group": None, "rank": 4},
    {"dimension": "glassware", "key": "Highball", "group": "highball", "rank": None},
    {"dimension": "glassware", "key": "Collins", "group": "highball", "rank": None},
    {"dimension": "glassware", "key": "Lowball", "group": "lowball", "rank": None},
    {"dimension": "glassware", "key": "Rocks", "group": "lowball", "rank": None},
    {"dimension": "glassware", "key": "Old Fashioned", "group": "lowball", "rank": None},
    {"dimension": "glassware", "key": "Coupe", "group": "coupe", "rank": None},
    {"dimension": "glassware", "key": "Nick & Nora", "group": "coupe", "rank": None},
    {"dimension": "glassware", "key": "Martini", "group": "martini", "rank": None},
    {"dimension": "glassware", "key": "Cocktail glass", "group": "martini", "rank": None},
    {"dimension": "glassware", "key": "Flute", "group": None, "rank": None},
    {"dimension": "glassware", "key": "Wine glass", "group": None, "rank": None},
    {"dimension": "glassware", "key": "Mug", "group": None, "rank": None},
    {"dimension": "glassware", "key": "Tiki", "group": None, "rank": None},
    {"dimension": "glassware", "key": "Shot", "group": None, "rank": None},
    {"dimension": "acidity", "key": "Low", "group": None, "rank": 1},
    {"dimension": "acidity", "key": "Medium", "group": None, "rank": 2},
    {"dimension": "acidity", "key": "High", "group": None, "rank": 3},
    {"dimension": "sweetness", "key": "Dry", "group": None, "rank": 1},
    {"dimension": "sweetness", "key": "Low", "group": None, "rank": 2},
    {"dimension": "sweetness", "key": "Medium", "group": None, "rank": 3},
    {"dimension": "sweetness", "key": "High", "group": None, "rank": 4},
    {"dimension": "bitterness", "key": "Low", "group": None, "rank": 1},
    {"dimension": "bitterness", "key": "Medium", "group": None, "rank": 2},
    {"dimension": "bitterness", "key": "High", "group": None, "rank": 3},
    {"dimension": "spice", "key": "Low", "group": None, "rank": 1},
    {"dimension": "spice", "key": "Medium", "group": None, "rank": 2},
    {"dimension": "spice", "key": "High", "group": None, "rank": 3},
]
