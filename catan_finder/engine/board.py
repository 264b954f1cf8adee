"""Plateau Catane standard (rayon 2, 19 cases).

Ce module définit:
- `Tile`: case immuable en coordonnées axiales (q, r)
- la disposition par défaut (lignes A..E, triée par r puis q)
- `BoardState`: plateau en cours d'édition + pools de ressources/numéros

Chaque opération d'édition retourne un nouvel état; un coup refusé retourne
l'état d'origine inchangé.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from catan_finder.engine.rules import (
    BOARD_RADIUS,
    DESERT,
    NUMBER_COUNTS,
    RESOURCE_COUNTS,
)

Coord = Tuple[int, int]

_ROW_LABELS = "ABCDE"


@dataclass(frozen=True)
class Tile:
    """Case du plateau. `resource`/`number` valent None tant que non posés."""

    q: int
    r: int
    resource: Optional[str] = None
    number: Optional[int] = None

    @property
    def coord(self) -> Coord:
        return (self.q, self.r)

    @property
    def is_desert(self) -> bool:
        return self.resource == DESERT

    @property
    def is_productive(self) -> bool:
        return self.resource is not None and not self.is_desert and self.number is not None


def axial_coords(radius: int = BOARD_RADIUS) -> List[Coord]:
    """Coordonnées axiales `max(|q|, |r|, |q+r|) <= radius`, triées par (r, q)."""

    coords: List[Coord] = []
    for q in range(-radius, radius + 1):
        for r in range(-radius, radius + 1):
            if max(abs(q), abs(r), abs(q + r)) <= radius:
                coords.append((q, r))
    coords.sort(key=lambda item: (item[1], item[0]))
    return coords


def make_default_tiles() -> List[Tile]:
    """Plateau vide: 19 cases sans ressource ni numéro."""

    return [Tile(q=q, r=r) for q, r in axial_coords()]


def field_label(q: int, r: int) -> str:
    """Étiquette lisible d'une case (`A1`..`E3`), `?` hors plateau."""

    if abs(r) > BOARD_RADIUS:
        return "?"
    row = _ROW_LABELS[r + BOARD_RADIUS]
    start_q = max(-BOARD_RADIUS, -r - BOARD_RADIUS)
    return f"{row}{q - start_q + 1}"


def find_tile_index(tiles: Sequence[Tile], q: int, r: int) -> int:
    for idx, tile in enumerate(tiles):
        if tile.q == q and tile.r == r:
            return idx
    return -1


@dataclass(frozen=True)
class BoardState:
    """Plateau en cours d'édition.

    Les pools comptent ce qui reste à poser; ils sont dérivés des multisets
    officiels et servent à désactiver la sur-allocation côté interface.
    Les pools sont exposés en lecture seule.
    """

    tiles: Tuple[Tile, ...]
    resource_pool: Mapping[str, int]
    number_pool: Mapping[int, int]

    def __post_init__(self) -> None:
        object.__setattr__(self, "tiles", tuple(self.tiles))
        object.__setattr__(self, "resource_pool", MappingProxyType(dict(self.resource_pool)))
        object.__setattr__(self, "number_pool", MappingProxyType(dict(self.number_pool)))

    @classmethod
    def initial(cls) -> "BoardState":
        return cls(
            tiles=tuple(make_default_tiles()),
            resource_pool=dict(RESOURCE_COUNTS),
            number_pool=dict(NUMBER_COUNTS),
        )

    @classmethod
    def from_tiles(cls, tiles: Iterable[Tile]) -> "BoardState":
        """Reconstruit les pools à partir d'une liste de cases déjà remplie."""

        tiles = tuple(tiles)
        resource_pool = dict(RESOURCE_COUNTS)
        number_pool = dict(NUMBER_COUNTS)
        for tile in tiles:
            if tile.resource is not None:
                resource_pool[tile.resource] = resource_pool.get(tile.resource, 0) - 1
            if tile.number is not None:
                number_pool[tile.number] = number_pool.get(tile.number, 0) - 1
        return cls(tiles=tiles, resource_pool=resource_pool, number_pool=number_pool)

    def tile_at(self, q: int, r: int) -> Optional[Tile]:
        idx = find_tile_index(self.tiles, q, r)
        return self.tiles[idx] if idx >= 0 else None

    def resources_remaining(self) -> int:
        return sum(max(0, count) for count in self.resource_pool.values())

    def numbers_remaining(self) -> int:
        return sum(max(0, count) for count in self.number_pool.values())

    def _with(
        self,
        tiles: List[Tile],
        resource_pool: Dict[str, int],
        number_pool: Dict[int, int],
    ) -> "BoardState":
        return BoardState(tiles=tuple(tiles), resource_pool=resource_pool, number_pool=number_pool)


def place_resource(state: BoardState, q: int, r: int, resource: str) -> BoardState:
    """Pose `resource` depuis le pool sur (q, r).

    La ressource remplacée retourne au pool. Poser un désert rend le numéro
    éventuel au pool de numéros.
    """

    idx = find_tile_index(state.tiles, q, r)
    if idx < 0:
        return state
    if state.resource_pool.get(resource, 0) <= 0:
        return state

    tiles = list(state.tiles)
    resource_pool = dict(state.resource_pool)
    number_pool = dict(state.number_pool)

    tile = tiles[idx]
    if tile.resource is not None:
        resource_pool[tile.resource] = resource_pool.get(tile.resource, 0) + 1
    resource_pool[resource] -= 1

    tile = replace(tile, resource=resource)
    if resource == DESERT and tile.number is not None:
        number_pool[tile.number] = number_pool.get(tile.number, 0) + 1
        tile = replace(tile, number=None)
    tiles[idx] = tile

    return state._with(tiles, resource_pool, number_pool)


def set_number(state: BoardState, q: int, r: int, number: Optional[int]) -> BoardState:
    """Pose (ou retire avec None) un numéro sur une case non-désert."""

    idx = find_tile_index(state.tiles, q, r)
    if idx < 0:
        return state

    tile = state.tiles[idx]
    if tile.resource is None or tile.is_desert:
        return state
    if number is not None and number != tile.number and state.number_pool.get(number, 0) <= 0:
        return state

    number_pool = dict(state.number_pool)
    if tile.number is not None:
        number_pool[tile.number] = number_pool.get(tile.number, 0) + 1
    if number is not None:
        number_pool[number] -= 1

    tiles = list(state.tiles)
    tiles[idx] = replace(tile, number=number)
    return state._with(tiles, dict(state.resource_pool), number_pool)


def remove_resource(state: BoardState, q: int, r: int) -> BoardState:
    """Remet la ressource (et le numéro) de (q, r) dans les pools."""

    idx = find_tile_index(state.tiles, q, r)
    if idx < 0:
        return state

    tile = state.tiles[idx]
    if tile.resource is None:
        return state

    resource_pool = dict(state.resource_pool)
    number_pool = dict(state.number_pool)
    resource_pool[tile.resource] = resource_pool.get(tile.resource, 0) + 1
    if tile.number is not None:
        number_pool[tile.number] = number_pool.get(tile.number, 0) + 1

    tiles = list(state.tiles)
    tiles[idx] = replace(tile, resource=None, number=None)
    return state._with(tiles, resource_pool, number_pool)


def swap_resources(state: BoardState, source: Coord, target: Coord) -> BoardState:
    """Déplace la ressource de `source` vers `target` (échange si occupée).

    Les numéros restent sur place; une case devenue désert (ou vide) libère
    son numéro.
    """

    if source == target:
        return state
    a = find_tile_index(state.tiles, *source)
    b = find_tile_index(state.tiles, *target)
    if a < 0 or b < 0:
        return state
    if state.tiles[a].resource is None:
        return state

    tiles = list(state.tiles)
    number_pool = dict(state.number_pool)
    tiles[a], tiles[b] = (
        replace(tiles[a], resource=state.tiles[b].resource),
        replace(tiles[b], resource=state.tiles[a].resource),
    )

    for idx in (a, b):
        tile = tiles[idx]
        if (tile.resource is None or tile.is_desert) and tile.number is not None:
            number_pool[tile.number] = number_pool.get(tile.number, 0) + 1
            tiles[idx] = replace(tile, number=None)

    return state._with(tiles, dict(state.resource_pool), number_pool)


__all__ = [
    "Coord",
    "Tile",
    "BoardState",
    "axial_coords",
    "make_default_tiles",
    "field_label",
    "find_tile_index",
    "place_resource",
    "set_number",
    "remove_resource",
    "swap_resources",
]
