"""Validation d'un plateau complet (comptes officiels).

Un plateau incomplet n'est pas une erreur pour le moteur de scoring; ce
validateur sert avant les opérations qui n'ont de sens que sur un plateau
complet (recherche des positions, enregistrement).
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import List, Sequence

import structlog

from catan_finder.engine.board import Tile
from catan_finder.engine.rules import (
    ALL_TILE_KINDS,
    NUMBER_COUNTS,
    RESOURCE_COUNTS,
    TILE_COUNT,
    VALID_NUMBERS,
)

logger = structlog.get_logger()


@dataclass(frozen=True)
class ValidationResult:
    ok: bool
    errors: List[str] = field(default_factory=list)


def validate_complete_board(tiles: Sequence[Tile]) -> ValidationResult:
    resource_counts = Counter(tile.resource for tile in tiles if tile.resource is not None)

    if sum(resource_counts.values()) < TILE_COUNT:
        logger.debug("board_incomplete", placed=sum(resource_counts.values()))
        return ValidationResult(ok=False, errors=[f"Toutes les {TILE_COUNT} ressources doivent être posées."])

    errors: List[str] = []
    for resource in ALL_TILE_KINDS:
        got = resource_counts.get(resource, 0)
        if got != RESOURCE_COUNTS[resource]:
            errors.append(f"Nombre de {resource}: {got} (attendu: {RESOURCE_COUNTS[resource]})")

    number_counts: Counter[int] = Counter()
    for tile in tiles:
        if tile.resource is None:
            continue
        if tile.is_desert:
            if tile.number is not None:
                errors.append("Le désert ne peut pas porter de numéro.")
            continue
        if tile.number is None:
            continue
        if tile.number not in VALID_NUMBERS:
            errors.append(f"Numéro invalide: {tile.number}")
        number_counts[tile.number] += 1

    expected_numbers = sum(NUMBER_COUNTS.values())
    if sum(number_counts.values()) < expected_numbers:
        errors.append(f"Tous les numéros doivent être posés sur les cases hors désert ({expected_numbers}).")

    for number, expected in NUMBER_COUNTS.items():
        got = number_counts.get(number, 0)
        if got != expected:
            errors.append(f"Numéro {number}: {got} (attendu: {expected})")

    if errors:
        logger.debug("board_invalid", error_count=len(errors))
    return ValidationResult(ok=not errors, errors=errors)


__all__ = ["ValidationResult", "validate_complete_board"]
