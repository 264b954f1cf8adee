"""Outils de sérialisation pour l'enregistrement d'un plateau.

Conformité minimale avec le stockage externe:
- Record JSON-friendly (listes/dicts primitifs)
- `tiles`, `player_count`, `balance_score`, `resource_strength`
- Pas de hash ni de déduplication (responsabilité du stockage)
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Sequence

from catan_finder.analysis.balance import balance_score
from catan_finder.engine.board import Tile, axial_coords, field_label
from catan_finder.engine.rules import (
    ALL_TILE_KINDS,
    DESERT,
    START_SPOTS_BY_PLAYERS,
    TILE_COUNT,
    VALID_NUMBERS,
)

SCHEMA_VERSION = "0.1.0"


def board_to_record(tiles: Sequence[Tile], player_count: int) -> Dict[str, Any]:
    """Convertit un plateau en record JSON-friendly."""

    _check_player_count(player_count)
    balance = balance_score(tiles)
    return {
        "schema_version": SCHEMA_VERSION,
        "tiles": [_serialize_tile(tile) for tile in tiles],
        "player_count": player_count,
        "balance_score": balance.score,
        "resource_strength": dict(balance.strengths),
    }


def record_to_tiles(record: Mapping[str, Any]) -> List[Tile]:
    """Reconstruit la liste de cases à partir d'un record."""

    version = record.get("schema_version")
    if version != SCHEMA_VERSION:
        raise ValueError(f"Unsupported schema_version: {version!r}")

    _check_player_count(record.get("player_count"))

    payload = record.get("tiles")
    if not isinstance(payload, list) or len(payload) != TILE_COUNT:
        raise ValueError(f"tiles doit être une liste de {TILE_COUNT} cases")

    tiles = [_deserialize_tile(data) for data in payload]
    coords = [tile.coord for tile in tiles]
    if len(set(coords)) != len(coords) or set(coords) != set(axial_coords()):
        raise ValueError("tiles doit couvrir exactement les 19 cases du plateau")
    return tiles


def _serialize_tile(tile: Tile) -> Dict[str, Any]:
    return {
        "q": tile.q,
        "r": tile.r,
        "label": field_label(tile.q, tile.r),
        "res": tile.resource,
        "num": tile.number,
    }


def _deserialize_tile(data: Mapping[str, Any]) -> Tile:
    resource = data.get("res")
    if resource is not None and resource not in ALL_TILE_KINDS:
        raise ValueError(f"Ressource inconnue: {resource!r}")
    number = data.get("num")
    if number is not None:
        number = int(number)
        if resource is None or resource == DESERT:
            raise ValueError(f"Numéro {number} sur une case sans production: {resource!r}")
        if number not in VALID_NUMBERS:
            raise ValueError(f"Numéro invalide: {number}")
    return Tile(q=int(data["q"]), r=int(data["r"]), resource=resource, number=number)


def _check_player_count(player_count: Any) -> None:
    if player_count not in START_SPOTS_BY_PLAYERS:
        raise ValueError(f"player_count non supporté: {player_count!r}")


__all__ = ["SCHEMA_VERSION", "board_to_record", "record_to_tiles"]
