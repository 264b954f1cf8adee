"""Génération aléatoire d'un plateau complet.

Les ressources et les numéros sont tirés dans les multisets officiels
(`RESOURCE_COUNTS`, `NUMBER_COUNTS`) puis posés dans l'ordre fixe des cases.
La source aléatoire est injectable pour rendre les tirages reproductibles.
"""

from __future__ import annotations

import random
from dataclasses import replace
from typing import Callable, List, MutableSequence, Optional, Sequence, TypeVar

from catan_finder.engine.board import Tile
from catan_finder.engine.rules import DESERT, NUMBER_COUNTS, RESOURCE_COUNTS, TILE_COUNT

RandomSource = Callable[[], float]

T = TypeVar("T")


def seeded_rng(seed: int | None = None) -> RandomSource:
    """Source uniforme [0, 1) reproductible à partir d'une graine."""

    return random.Random(seed).random


def resource_pool() -> List[str]:
    pool: List[str] = []
    for resource, count in RESOURCE_COUNTS.items():
        pool.extend([resource] * count)
    return pool


def number_pool() -> List[int]:
    pool: List[int] = []
    for number, count in NUMBER_COUNTS.items():
        pool.extend([number] * count)
    return pool


def shuffle(items: MutableSequence[T], rng: RandomSource) -> None:
    """Fisher–Yates en place, piloté par `rng`."""

    for i in range(len(items) - 1, 0, -1):
        j = int(rng() * (i + 1))
        items[i], items[j] = items[j], items[i]


def randomize(tiles: Sequence[Tile], rng: Optional[RandomSource] = None) -> List[Tile]:
    """Retourne un nouveau plateau respectant les comptes officiels.

    Args:
        tiles: Les 19 cases (seules les coordonnées sont conservées)
        rng: Source uniforme [0, 1); `random.random` par défaut

    Returns:
        Nouvelle liste de cases; le désert n'a jamais de numéro
    """
    if len(tiles) != TILE_COUNT:
        raise ValueError(f"Le plateau doit contenir {TILE_COUNT} cases, reçu {len(tiles)}.")

    rng = rng or random.random

    resources = resource_pool()
    shuffle(resources, rng)

    numbers = number_pool()
    shuffle(numbers, rng)

    next_tiles: List[Tile] = []
    number_index = 0
    for tile, resource in zip(tiles, resources):
        if resource == DESERT:
            next_tiles.append(replace(tile, resource=resource, number=None))
        else:
            next_tiles.append(replace(tile, resource=resource, number=numbers[number_index]))
            number_index += 1

    return next_tiles


__all__ = [
    "RandomSource",
    "seeded_rng",
    "resource_pool",
    "number_pool",
    "shuffle",
    "randomize",
]
