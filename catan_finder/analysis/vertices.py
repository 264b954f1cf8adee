"""Sommets (emplacements de colonie) et classement des positions de départ.

Les sommets sont dérivés à chaque évaluation depuis la liste des cases:
les coins de chaque case sont regroupés par position arrondie, puis notés
d'après les pips des cases adjacentes.

Note de scoring: une variante additive a existé (bonus +3/+1 selon la
diversité, pénalité `3 × cases manquantes`, −1 pour deux ressources
identiques). Seule la variante multiplicative par couverture est conservée.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Dict, List, Sequence, Tuple

from catan_finder.analysis.geometry import Point, axial_to_pixel, distance, hex_corners
from catan_finder.analysis.pips import pip_value
from catan_finder.engine.board import Coord, Tile
from catan_finder.engine.rules import (
    DEFAULT_TILE_SIZE,
    DIVERSITY_WEIGHT,
    MAX_ADJACENT_TILES,
    MIN_ADJACENT_TILES,
    MIN_DISTANCE_FACTOR,
    START_SPOTS_BY_PLAYERS,
)

VertexKey = Tuple[float, float]

# Arrondi au millième de pixel
_KEY_ROUNDING = 3


@dataclass(frozen=True)
class Vertex:
    key: VertexKey
    position: Point
    adjacent_tiles: Tuple[Tile, ...]
    score: float = 0.0

    @property
    def x(self) -> float:
        return self.position[0]

    @property
    def y(self) -> float:
        return self.position[1]


@dataclass(frozen=True)
class StartSpot:
    """Position de départ classée (rang 1 = meilleure)."""

    rank: int
    key: VertexKey
    x: float
    y: float
    score: float


def vertex_key(x: float, y: float) -> VertexKey:
    return (round(x, _KEY_ROUNDING) + 0.0, round(y, _KEY_ROUNDING) + 0.0)


def extract_vertices(
    tiles: Sequence[Tile],
    size: float = DEFAULT_TILE_SIZE,
    *,
    min_adjacent: int = MIN_ADJACENT_TILES,
    max_adjacent: int = MAX_ADJACENT_TILES,
) -> List[Vertex]:
    """Regroupe les coins des cases posées en sommets uniques.

    Seules les cases avec une ressource (désert compris) participent. Un
    sommet est conservé s'il touche entre `min_adjacent` et `max_adjacent`
    cases distinctes; `min_adjacent=1` garde aussi les coins côtiers isolés.
    """

    positions: Dict[VertexKey, Point] = {}
    adjacency: Dict[VertexKey, Dict[Coord, Tile]] = {}

    for tile in tiles:
        if tile.resource is None:
            continue
        cx, cy = axial_to_pixel(tile.q, tile.r, size)
        for corner in hex_corners(cx, cy, size):
            key = vertex_key(*corner)
            if key not in positions:
                positions[key] = corner
                adjacency[key] = {}
            adjacency[key].setdefault(tile.coord, tile)

    vertices: List[Vertex] = []
    for key, position in positions.items():
        adjacent = tuple(adjacency[key].values())
        if not min_adjacent <= len(adjacent) <= max_adjacent:
            continue
        vertices.append(Vertex(key=key, position=position, adjacent_tiles=adjacent))
    return vertices


def score_vertex(adjacent_tiles: Sequence[Tile]) -> float:
    """Score d'un sommet: `(pips + bonus diversité) × couverture`.

    - productives: cases non-désert avec un numéro
    - bonus diversité: `0.75 × (ressources distinctes − 1)`
    - couverture: `productives / 3` (désert et bord comptent comme manquants)
    """

    productive = [tile for tile in adjacent_tiles if tile.is_productive]
    base = sum(pip_value(tile.number) for tile in productive)
    distinct = len({tile.resource for tile in productive})
    diversity_bonus = 0.0 if distinct <= 1 else DIVERSITY_WEIGHT * (distinct - 1)
    coverage = len(productive) / MAX_ADJACENT_TILES
    return max(0.0, (base + diversity_bonus) * coverage)


def score_vertices(tiles: Sequence[Tile], size: float = DEFAULT_TILE_SIZE) -> List[Vertex]:
    """Sommets notés, triés par score décroissant (tri stable)."""

    scored = [
        replace(vertex, score=score_vertex(vertex.adjacent_tiles))
        for vertex in extract_vertices(tiles, size)
    ]
    return sorted(scored, key=lambda vertex: vertex.score, reverse=True)


def select_top(vertices: Sequence[Vertex], count: int, min_distance: float) -> List[Vertex]:
    """Sélection gloutonne des meilleurs sommets sans voisins directs.

    `vertices` doit déjà être trié par score décroissant. Un sommet est
    retenu s'il est à au moins `min_distance` de chaque sommet déjà retenu.
    Peut retourner moins de `count` sommets.
    """

    chosen: List[Vertex] = []
    for vertex in vertices:
        if len(chosen) >= count:
            break
        if all(distance(vertex.position, other.position) >= min_distance for other in chosen):
            chosen.append(vertex)
    return chosen


def best_start_spots(
    tiles: Sequence[Tile],
    player_count: int,
    size: float = DEFAULT_TILE_SIZE,
) -> List[StartSpot]:
    if player_count not in START_SPOTS_BY_PLAYERS:
        raise ValueError(f"Nombre de joueurs non supporté: {player_count!r}")

    count = START_SPOTS_BY_PLAYERS[player_count]
    chosen = select_top(score_vertices(tiles, size), count, MIN_DISTANCE_FACTOR * size)
    return [
        StartSpot(
            rank=idx + 1,
            key=vertex.key,
            x=vertex.x,
            y=vertex.y,
            score=round(vertex.score, 2),
        )
        for idx, vertex in enumerate(chosen)
    ]


__all__ = [
    "VertexKey",
    "Vertex",
    "StartSpot",
    "vertex_key",
    "extract_vertices",
    "score_vertex",
    "score_vertices",
    "select_top",
    "best_start_spots",
]
