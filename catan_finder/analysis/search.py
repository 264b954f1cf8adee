"""Recherche best-effort d'un plateau équilibré.

Boucle bornée: randomiser, noter, garder le meilleur candidat; arrêt dès
qu'un candidat atteint le seuil.
"""

from __future__ import annotations

from typing import Callable, List, Optional, Sequence

import structlog

from catan_finder.analysis.balance import balance_score
from catan_finder.engine.board import Tile
from catan_finder.engine.randomize import RandomSource, randomize
from catan_finder.engine.rules import DEFAULT_SEARCH_TRIES, EXCELLENT_BALANCE

logger = structlog.get_logger()

Randomizer = Callable[[Sequence[Tile], Optional[RandomSource]], List[Tile]]


def search(
    tiles: Sequence[Tile],
    max_tries: int = DEFAULT_SEARCH_TRIES,
    threshold: float = EXCELLENT_BALANCE,
    *,
    rng: Optional[RandomSource] = None,
    randomizer: Randomizer = randomize,
) -> List[Tile]:
    """Retourne le premier candidat avec `score >= threshold`, sinon le meilleur.

    Args:
        tiles: Plateau de départ (coordonnées)
        max_tries: Nombre maximal de candidats générés
        threshold: Score de balance qui arrête la recherche
        rng: Source aléatoire transmise au randomiseur
        randomizer: Générateur de candidats (`randomize` par défaut)

    Returns:
        Le plateau retenu; une copie de `tiles` si `max_tries <= 0`
    """
    best: Optional[List[Tile]] = None
    best_score = -1

    for attempt in range(1, max_tries + 1):
        candidate = randomizer(tiles, rng)
        score = balance_score(candidate).score

        if score > best_score:
            best, best_score = candidate, score
            logger.debug("search_improved", attempt=attempt, score=score)

        if score >= threshold:
            logger.info("search_threshold_reached", attempt=attempt, score=score, threshold=threshold)
            return candidate

    logger.info("search_exhausted", tries=max_tries, best_score=best_score, threshold=threshold)
    return best if best is not None else list(tiles)


__all__ = ["Randomizer", "search"]
