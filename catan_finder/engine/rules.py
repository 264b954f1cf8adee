"""Règles et constantes du plateau standard (19 cases, rayon 2).

Ce module expose le contrat minimal attendu par le moteur:
- types de ressources (`RESOURCE_TYPES`, `DESERT`)
- multisets officiels (`RESOURCE_COUNTS`, `NUMBER_COUNTS`)
- paramètres du scoring (taille de case, distance minimale, seuils)
"""

from typing import Dict

# Ressources productives (le désert est à part)
RESOURCE_TYPES: tuple[str, ...] = ("LUMBER", "BRICK", "WOOL", "GRAIN", "ORE")
DESERT: str = "DESERT"
ALL_TILE_KINDS: tuple[str, ...] = RESOURCE_TYPES + (DESERT,)

BOARD_RADIUS: int = 2
TILE_COUNT: int = 19

# Ordre de remplissage du pool = ordre de tirage du randomiseur
RESOURCE_COUNTS: Dict[str, int] = {
    "LUMBER": 4,
    "WOOL": 4,
    "GRAIN": 4,
    "BRICK": 3,
    "ORE": 3,
    "DESERT": 1,
}

NUMBER_COUNTS: Dict[int, int] = {
    2: 1,
    3: 2,
    4: 2,
    5: 2,
    6: 2,
    8: 2,
    9: 2,
    10: 2,
    11: 2,
    12: 1,
}
VALID_NUMBERS: tuple[int, ...] = tuple(NUMBER_COUNTS)
RED_NUMBERS: frozenset[int] = frozenset({6, 8})

# Géométrie / scoring des sommets
DEFAULT_TILE_SIZE: float = 58.0
MIN_DISTANCE_FACTOR: float = 1.05
MIN_ADJACENT_TILES: int = 2
MAX_ADJACENT_TILES: int = 3
DIVERSITY_WEIGHT: float = 0.75

# Nombre de positions de départ affichées par nombre de joueurs
START_SPOTS_BY_PLAYERS: Dict[int, int] = {3: 6, 4: 8}

# Balance
CV_ZERO_SCORE: float = 0.6
EXCELLENT_BALANCE: int = 90

# Recherche
DEFAULT_SEARCH_TRIES: int = 250

__all__ = [
    "RESOURCE_TYPES",
    "DESERT",
    "ALL_TILE_KINDS",
    "BOARD_RADIUS",
    "TILE_COUNT",
    "RESOURCE_COUNTS",
    "NUMBER_COUNTS",
    "VALID_NUMBERS",
    "RED_NUMBERS",
    "DEFAULT_TILE_SIZE",
    "MIN_DISTANCE_FACTOR",
    "MIN_ADJACENT_TILES",
    "MAX_ADJACENT_TILES",
    "DIVERSITY_WEIGHT",
    "START_SPOTS_BY_PLAYERS",
    "CV_ZERO_SCORE",
    "EXCELLENT_BALANCE",
    "DEFAULT_SEARCH_TRIES",
]
