"""Géométrie hexagonale pointy-top.

Ce module fournit les projections axiales -> pixels utilisées par
l'extraction des sommets, ainsi que la classe BoardGeometry qui calcule
l'encombrement du plateau et le décalage vers une surface de dessin.

Les positions "board-local" (sans décalage) sont celles des sommets et des
positions de départ; BoardGeometry les place dans une surface avec marges.
"""

from __future__ import annotations

import math
from typing import List, Sequence, Tuple

from catan_finder.engine.board import Tile

Point = Tuple[float, float]

SQRT3: float = math.sqrt(3.0)


def axial_to_pixel(q: int, r: int, size: float) -> Point:
    x = size * SQRT3 * (q + r / 2)
    y = size * 1.5 * r
    return (x, y)


def hex_corners(cx: float, cy: float, size: float) -> List[Point]:
    """Six coins d'un hexagone pointy-top, angles `60°·i − 30°`."""

    corners: List[Point] = []
    for i in range(6):
        angle = math.radians(60 * i - 30)
        corners.append((cx + size * math.cos(angle), cy + size * math.sin(angle)))
    return corners


def distance(a: Point, b: Point) -> float:
    return math.hypot(a[0] - b[0], a[1] - b[1])


class BoardGeometry:
    """Compute drawing-surface coordinates from board-local positions.

    Cette classe prend les centres des cases (coordonnées axiales projetées)
    et calcule le décalage qui place le centre le plus haut/gauche à
    `(padding, padding)`.
    """

    def __init__(self, tiles: Sequence[Tile], size: float, padding: float) -> None:
        """Initialize geometry calculator.

        Args:
            tiles: Board tiles (only coordinates are used)
            size: Hexagon radius in pixels
            padding: Margin around the tile centers in pixels
        """
        if not tiles:
            raise ValueError("BoardGeometry nécessite au moins une case.")

        self.size = size
        self.padding = padding

        centers = [axial_to_pixel(tile.q, tile.r, size) for tile in tiles]
        self._min_x = min(x for x, _ in centers)
        self._max_x = max(x for x, _ in centers)
        self._min_y = min(y for _, y in centers)
        self._max_y = max(y for _, y in centers)

    @property
    def offset(self) -> Point:
        """Translation board-local -> surface."""
        return (self.padding - self._min_x, self.padding - self._min_y)

    def to_surface(self, point: Point) -> Point:
        dx, dy = self.offset
        return (point[0] + dx, point[1] + dy)

    def tile_center(self, tile: Tile) -> Point:
        return self.to_surface(axial_to_pixel(tile.q, tile.r, self.size))

    @property
    def surface_size(self) -> Tuple[float, float]:
        """Get the required surface size to contain the board.

        Returns:
            (width, height) in pixels
        """
        width = self._max_x - self._min_x + 2 * self.padding
        height = self._max_y - self._min_y + 2 * self.padding
        return (width, height)


__all__ = [
    "Point",
    "SQRT3",
    "axial_to_pixel",
    "hex_corners",
    "distance",
    "BoardGeometry",
]
