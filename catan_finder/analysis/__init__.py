"""Moteur de scoring du plateau.

- pips.py : table des pips par numéro de dés
- geometry.py : projection axiale -> pixels et coins d'hexagone
- vertices.py : extraction/score des sommets et positions de départ
- balance.py : forces par ressource et score de balance 0..100
- search.py : recherche bornée d'un plateau équilibré

Exemple :
    >>> from catan_finder.engine.board import make_default_tiles
    >>> from catan_finder.engine.randomize import randomize, seeded_rng
    >>> from catan_finder.analysis import balance_score, best_start_spots
    >>>
    >>> tiles = randomize(make_default_tiles(), seeded_rng(42))
    >>> result = balance_score(tiles)
    >>> spots = best_start_spots(tiles, player_count=4)
"""

from .balance import BalanceResult, balance_score, resource_strength
from .geometry import BoardGeometry, axial_to_pixel, hex_corners
from .pips import is_red, pip_value
from .search import search
from .vertices import (
    StartSpot,
    Vertex,
    best_start_spots,
    extract_vertices,
    score_vertex,
    score_vertices,
    select_top,
)

__all__ = [
    "BalanceResult",
    "BoardGeometry",
    "StartSpot",
    "Vertex",
    "axial_to_pixel",
    "balance_score",
    "best_start_spots",
    "extract_vertices",
    "hex_corners",
    "is_red",
    "pip_value",
    "resource_strength",
    "score_vertex",
    "score_vertices",
    "search",
    "select_top",
]
