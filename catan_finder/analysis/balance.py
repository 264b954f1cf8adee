"""Balance du plateau: répartition de la production entre les 5 ressources.

Force d'une ressource = somme des pips de ses cases (désert exclu). Le score
0..100 dérive du coefficient de variation des 5 forces: cv = 0 donne 100,
cv >= 0.6 donne 0. L'ancienne variante `100 − 5 × (max − min)` n'est plus
utilisée.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, Sequence

import numpy as np

from catan_finder.analysis.pips import pip_value
from catan_finder.engine.board import Tile
from catan_finder.engine.rules import CV_ZERO_SCORE, EXCELLENT_BALANCE, RESOURCE_TYPES


@dataclass(frozen=True)
class BalanceResult:
    score: int
    strengths: Dict[str, int]

    @property
    def is_excellent(self) -> bool:
        return self.score >= EXCELLENT_BALANCE


def resource_strength(tiles: Sequence[Tile]) -> Dict[str, int]:
    strengths = {resource: 0 for resource in RESOURCE_TYPES}
    for tile in tiles:
        if tile.resource in strengths:
            strengths[tile.resource] += pip_value(tile.number)
    return strengths


def balance_score(tiles: Sequence[Tile]) -> BalanceResult:
    """Score de balance 0..100 (100 = production parfaitement répartie)."""

    strengths = resource_strength(tiles)
    values = np.array([strengths[resource] for resource in RESOURCE_TYPES], dtype=np.float64)

    mean = float(values.mean())
    if mean <= 0:
        return BalanceResult(score=0, strengths=strengths)

    cv = float(values.std()) / mean
    raw = 100.0 * (1.0 - min(1.0, cv / CV_ZERO_SCORE))
    # arrondi demi-supérieur
    score = int(math.floor(raw + 0.5))
    return BalanceResult(score=max(0, min(100, score)), strengths=strengths)


__all__ = ["BalanceResult", "resource_strength", "balance_score"]
