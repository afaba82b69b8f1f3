"""
encounter_tables – Research-based Gen 3 encounter classifications.

Keyed by national dex number.  ``biomes`` uses the fine-grained encounter
tags (``ROUTE_GRASS``, ``WATER_FISH`` ...) that ``habitats.HABITAT_MAP``
folds into coarse habitats; ``tier`` is the encounter rarity, with
``"starter"`` marking gift starters; ``exclude`` flags species that regular
trainers should not field.
"""

from __future__ import annotations

from typing import Any, Dict

ENCOUNTER_ROWS: Dict[int, Dict[str, Any]] = {
    1: {"biomes": ["FOREST"], "tier": "starter", "exclude": True},
    4: {"biomes": ["MOUNTAIN"], "tier": "starter", "exclude": True},
    7: {"biomes": ["WATER_SURF"], "tier": "starter", "exclude": True},
    16: {"biomes": ["ROUTE_GRASS", "FOREST"], "tier": "common"},
    19: {"biomes": ["ROUTE_GRASS", "FOREST"], "tier": "common"},
    21: {"biomes": ["ROUTE_GRASS", "FOREST"], "tier": "common"},
    23: {"biomes": ["ROUTE_GRASS"], "tier": "uncommon"},
    25: {"biomes": ["FOREST", "POWER_PLANT"], "tier": "uncommon"},
    27: {"biomes": ["CAVE", "MOUNTAIN"], "tier": "uncommon"},
    29: {"biomes": ["ROUTE_GRASS", "SAFARI_ZONE"], "tier": "uncommon"},
    32: {"biomes": ["ROUTE_GRASS", "SAFARI_ZONE"], "tier": "uncommon"},
    35: {"biomes": ["CAVE", "MOUNTAIN"], "tier": "rare"},
    37: {"biomes": ["ROUTE_GRASS"], "tier": "uncommon"},
    39: {"biomes": ["ROUTE_GRASS"], "tier": "common"},
    41: {"biomes": ["CAVE"], "tier": "common"},
    43: {"biomes": ["ROUTE_GRASS", "FOREST"], "tier": "common"},
    46: {"biomes": ["FOREST", "SAFARI_ZONE"], "tier": "uncommon"},
    48: {"biomes": ["FOREST", "SAFARI_ZONE"], "tier": "uncommon"},
    50: {"biomes": ["CAVE"], "tier": "common"},
    52: {"biomes": ["ROUTE_GRASS"], "tier": "common"},
    54: {"biomes": ["WATER_SURF", "WATER_FISH"], "tier": "common"},
    56: {"biomes": ["ROUTE_GRASS", "MOUNTAIN"], "tier": "uncommon"},
    58: {"biomes": ["ROUTE_GRASS"], "tier": "uncommon"},
    60: {"biomes": ["WATER_FISH"], "tier": "common"},
    63: {"biomes": ["ROUTE_GRASS"], "tier": "uncommon"},
    66: {"biomes": ["CAVE"], "tier": "uncommon"},
    69: {"biomes": ["ROUTE_GRASS"], "tier": "common"},
    72: {"biomes": ["WATER_SURF", "WATER_FISH"], "tier": "common"},
    74: {"biomes": ["CAVE", "MOUNTAIN"], "tier": "common"},
    77: {"biomes": ["ROUTE_GRASS"], "tier": "uncommon"},
    79: {"biomes": ["WATER_FISH"], "tier": "common"},
    81: {"biomes": ["POWER_PLANT"], "tier": "uncommon"},
    83: {"biomes": ["ROUTE_GRASS"], "tier": "uncommon"},
    84: {"biomes": ["ROUTE_GRASS", "SAFARI_ZONE"], "tier": "uncommon"},
    86: {"biomes": ["WATER_SURF"], "tier": "uncommon"},
    88: {"biomes": ["CAVE"], "tier": "uncommon"},
    90: {"biomes": ["WATER_FISH"], "tier": "common"},
    92: {"biomes": ["CAVE"], "tier": "rare"},
    95: {"biomes": ["CAVE"], "tier": "rare"},
    96: {"biomes": ["ROUTE_GRASS"], "tier": "uncommon"},
    98: {"biomes": ["WATER_FISH"], "tier": "common"},
    100: {"biomes": ["POWER_PLANT"], "tier": "uncommon"},
    102: {"biomes": ["FOREST", "SAFARI_ZONE"], "tier": "uncommon"},
    104: {"biomes": ["CAVE"], "tier": "uncommon"},
    106: {"biomes": ["RARE_SPECIAL"], "tier": "rare"},
    107: {"biomes": ["RARE_SPECIAL"], "tier": "rare"},
    108: {"biomes": ["RARE_SPECIAL"], "tier": "rare"},
    109: {"biomes": ["CAVE"], "tier": "uncommon"},
    111: {"biomes": ["ROUTE_GRASS", "SAFARI_ZONE"], "tier": "uncommon"},
    113: {"biomes": ["ROUTE_GRASS", "SAFARI_ZONE"], "tier": "rare"},
    114: {"biomes": ["ROUTE_GRASS", "SAFARI_ZONE"], "tier": "rare"},
    115: {"biomes": ["SAFARI_ZONE"], "tier": "rare"},
    116: {"biomes": ["WATER_FISH"], "tier": "common"},
    118: {"biomes": ["WATER_FISH"], "tier": "common"},
    120: {"biomes": ["WATER_FISH"], "tier": "uncommon"},
    123: {"biomes": ["SAFARI_ZONE"], "tier": "rare"},
    124: {"biomes": ["RARE_SPECIAL"], "tier": "rare"},
    125: {"biomes": ["POWER_PLANT"], "tier": "rare"},
    126: {"biomes": ["MOUNTAIN"], "tier": "rare"},
    127: {"biomes": ["SAFARI_ZONE"], "tier": "rare"},
    128: {"biomes": ["SAFARI_ZONE"], "tier": "rare"},
    129: {"biomes": ["WATER_FISH"], "tier": "common"},
    131: {"biomes": ["WATER_SURF"], "tier": "rare"},
    132: {"biomes": ["RARE_SPECIAL"], "tier": "rare"},
    133: {"biomes": ["RARE_SPECIAL"], "tier": "rare"},
    137: {"biomes": ["RARE_SPECIAL"], "tier": "rare"},
    138: {"biomes": ["CAVE"], "tier": "rare"},
    140: {"biomes": ["CAVE"], "tier": "rare"},
    142: {"biomes": ["CAVE"], "tier": "rare"},
    143: {"biomes": ["ROUTE_GRASS"], "tier": "rare"},
    144: {"biomes": ["MOUNTAIN"], "tier": "legendary", "exclude": True},
    145: {"biomes": ["POWER_PLANT"], "tier": "legendary", "exclude": True},
    146: {"biomes": ["MOUNTAIN"], "tier": "legendary", "exclude": True},
    147: {"biomes": ["SAFARI_ZONE"], "tier": "rare"},
    150: {"biomes": ["CAVE"], "tier": "legendary", "exclude": True},
    151: {"biomes": ["RARE_SPECIAL"], "tier": "legendary", "exclude": True},
    152: {"biomes": ["FOREST"], "tier": "starter", "exclude": True},
    155: {"biomes": ["MOUNTAIN"], "tier": "starter", "exclude": True},
    158: {"biomes": ["WATER_SURF"], "tier": "starter", "exclude": True},
    161: {"biomes": ["ROUTE_GRASS"], "tier": "common"},
    163: {"biomes": ["ROUTE_GRASS"], "tier": "common"},
    165: {"biomes": ["FOREST"], "tier": "common"},
    167: {"biomes": ["FOREST"], "tier": "common"},
    170: {"biomes": ["WATER_FISH"], "tier": "common"},
    179: {"biomes": ["ROUTE_GRASS"], "tier": "uncommon"},
    183: {"biomes": ["WATER_SURF"], "tier": "uncommon"},
    190: {"biomes": ["FOREST"], "tier": "uncommon"},
    191: {"biomes": ["FOREST"], "tier": "common"},
    193: {"biomes": ["FOREST"], "tier": "uncommon"},
    194: {"biomes": ["WATER_FISH"], "tier": "common"},
    198: {"biomes": ["ROUTE_GRASS"], "tier": "uncommon"},
    200: {"biomes": ["CAVE"], "tier": "rare"},
    203: {"biomes": ["ROUTE_GRASS"], "tier": "rare"},
    206: {"biomes": ["CAVE"], "tier": "uncommon"},
    207: {"biomes": ["ROUTE_GRASS"], "tier": "uncommon"},
    209: {"biomes": ["ROUTE_GRASS"], "tier": "uncommon"},
    213: {"biomes": ["CAVE"], "tier": "rare"},
    214: {"biomes": ["FOREST"], "tier": "rare"},
    215: {"biomes": ["MOUNTAIN"], "tier": "rare"},
    216: {"biomes": ["FOREST"], "tier": "uncommon"},
    218: {"biomes": ["MOUNTAIN"], "tier": "uncommon"},
    220: {"biomes": ["MOUNTAIN"], "tier": "uncommon"},
    222: {"biomes": ["WATER_FISH"], "tier": "uncommon"},
    223: {"biomes": ["WATER_FISH"], "tier": "common"},
    225: {"biomes": ["MOUNTAIN"], "tier": "rare"},
    227: {"biomes": ["ROUTE_GRASS"], "tier": "rare"},
    228: {"biomes": ["ROUTE_GRASS"], "tier": "uncommon"},
    231: {"biomes": ["SAFARI_ZONE"], "tier": "rare"},
    234: {"biomes": ["ROUTE_GRASS"], "tier": "rare"},
    243: {"biomes": ["ROUTE_GRASS"], "tier": "legendary", "exclude": True},
    244: {"biomes": ["MOUNTAIN"], "tier": "legendary", "exclude": True},
    245: {"biomes": ["WATER_SURF"], "tier": "legendary", "exclude": True},
    246: {"biomes": ["CAVE"], "tier": "rare"},
    249: {"biomes": ["WATER_SURF"], "tier": "legendary", "exclude": True},
    250: {"biomes": ["MOUNTAIN"], "tier": "legendary", "exclude": True},
    251: {"biomes": ["FOREST"], "tier": "legendary", "exclude": True},
    252: {"biomes": ["FOREST"], "tier": "starter", "exclude": True},
    255: {"biomes": ["MOUNTAIN"], "tier": "starter", "exclude": True},
    258: {"biomes": ["WATER_SURF"], "tier": "starter", "exclude": True},
    261: {"biomes": ["ROUTE_GRASS"], "tier": "common"},
    263: {"biomes": ["ROUTE_GRASS"], "tier": "common"},
    265: {"biomes": ["FOREST"], "tier": "common"},
    270: {"biomes": ["WATER_FISH"], "tier": "common"},
    273: {"biomes": ["FOREST"], "tier": "common"},
    276: {"biomes": ["ROUTE_GRASS"], "tier": "common"},
    278: {"biomes": ["WATER_SURF"], "tier": "common"},
    280: {"biomes": ["ROUTE_GRASS"], "tier": "uncommon"},
    285: {"biomes": ["FOREST"], "tier": "uncommon"},
    287: {"biomes": ["FOREST"], "tier": "uncommon"},
    290: {"biomes": ["CAVE"], "tier": "uncommon"},
    293: {"biomes": ["CAVE"], "tier": "uncommon"},
    296: {"biomes": ["CAVE"], "tier": "uncommon"},
    298: {"biomes": ["WATER_SURF"], "tier": "rare"},
    299: {"biomes": ["CAVE"], "tier": "uncommon"},
    300: {"biomes": ["ROUTE_GRASS"], "tier": "uncommon"},
    302: {"biomes": ["CAVE"], "tier": "rare"},
    303: {"biomes": ["CAVE"], "tier": "rare"},
    304: {"biomes": ["CAVE"], "tier": "uncommon"},
    307: {"biomes": ["MOUNTAIN"], "tier": "uncommon"},
    309: {"biomes": ["ROUTE_GRASS"], "tier": "uncommon"},
    311: {"biomes": ["ROUTE_GRASS"], "tier": "rare"},
    312: {"biomes": ["ROUTE_GRASS"], "tier": "rare"},
    313: {"biomes": ["FOREST"], "tier": "rare"},
    314: {"biomes": ["FOREST"], "tier": "rare"},
    315: {"biomes": ["ROUTE_GRASS"], "tier": "uncommon"},
    316: {"biomes": ["ROUTE_GRASS"], "tier": "uncommon"},
    318: {"biomes": ["WATER_FISH"], "tier": "uncommon"},
    320: {"biomes": ["WATER_SURF"], "tier": "uncommon"},
    322: {"biomes": ["MOUNTAIN"], "tier": "common"},
    325: {"biomes": ["ROUTE_GRASS"], "tier": "rare"},
    327: {"biomes": ["ROUTE_GRASS"], "tier": "rare"},
    328: {"biomes": ["DESERT"], "tier": "uncommon"},
    331: {"biomes": ["DESERT"], "tier": "uncommon"},
    333: {"biomes": ["ROUTE_GRASS"], "tier": "uncommon"},
    335: {"biomes": ["ROUTE_GRASS"], "tier": "rare"},
    336: {"biomes": ["ROUTE_GRASS"], "tier": "rare"},
    337: {"biomes": ["CAVE"], "tier": "rare"},
    338: {"biomes": ["CAVE"], "tier": "rare"},
    339: {"biomes": ["WATER_FISH"], "tier": "common"},
    341: {"biomes": ["WATER_FISH"], "tier": "common"},
    343: {"biomes": ["DESERT"], "tier": "uncommon"},
    345: {"biomes": ["WATER_FISH"], "tier": "rare"},
    347: {"biomes": ["WATER_FISH"], "tier": "rare"},
    349: {"biomes": ["WATER_FISH"], "tier": "common"},
    351: {"biomes": ["ROUTE_GRASS"], "tier": "rare"},
    352: {"biomes": ["FOREST"], "tier": "rare"},
    353: {"biomes": ["CAVE"], "tier": "uncommon"},
    355: {"biomes": ["CAVE"], "tier": "uncommon"},
    357: {"biomes": ["FOREST"], "tier": "rare"},
    358: {"biomes": ["CAVE"], "tier": "rare"},
    359: {"biomes": ["ROUTE_GRASS"], "tier": "rare"},
    361: {"biomes": ["CAVE"], "tier": "uncommon"},
    363: {"biomes": ["WATER_SURF"], "tier": "uncommon"},
    366: {"biomes": ["WATER_FISH"], "tier": "rare"},
    370: {"biomes": ["WATER_SURF"], "tier": "rare"},
    371: {"biomes": ["CAVE"], "tier": "rare"},
    374: {"biomes": ["CAVE"], "tier": "rare"},
    377: {"biomes": ["CAVE"], "tier": "legendary", "exclude": True},
    378: {"biomes": ["CAVE"], "tier": "legendary", "exclude": True},
    379: {"biomes": ["CAVE"], "tier": "legendary", "exclude": True},
    380: {"biomes": ["WATER_SURF"], "tier": "legendary", "exclude": True},
    381: {"biomes": ["WATER_SURF"], "tier": "legendary", "exclude": True},
    382: {"biomes": ["WATER_SURF"], "tier": "legendary", "exclude": True},
    383: {"biomes": ["MOUNTAIN"], "tier": "legendary", "exclude": True},
    384: {"biomes": ["MOUNTAIN"], "tier": "legendary", "exclude": True},
    385: {"biomes": ["RARE_SPECIAL"], "tier": "legendary", "exclude": True},
    386: {"biomes": ["RARE_SPECIAL"], "tier": "legendary", "exclude": True},
}
