"""Tests de la recherche bornée d'un plateau équilibré."""

from typing import List

from board_fixtures import EVEN_LAYOUT, board_from_layout, even_board, skewed_board
from catan_finder.analysis.balance import balance_score
from catan_finder.analysis.search import search
from catan_finder.engine.board import Tile, make_default_tiles
from catan_finder.engine.randomize import randomize, seeded_rng


class RecordingRandomizer:
    """Enveloppe un randomiseur et journalise chaque candidat généré."""

    def __init__(self, inner=randomize) -> None:
        self.inner = inner
        self.candidates: List[List[Tile]] = []

    def __call__(self, tiles, rng):
        candidate = self.inner(tiles, rng)
        self.candidates.append(candidate)
        return candidate


class ScriptedRandomizer(RecordingRandomizer):
    """Retourne un plateau déséquilibré sauf à l'appel `hit_on`."""

    def __init__(self, hit_on: int) -> None:
        super().__init__(inner=self._next)
        self.hit_on = hit_on

    def _next(self, tiles, rng):
        if len(self.candidates) + 1 == self.hit_on:
            return even_board()
        return skewed_board()


def test_search_stops_early_when_threshold_reached():
    randomizer = ScriptedRandomizer(hit_on=10)
    result = search(make_default_tiles(), max_tries=50, threshold=90, randomizer=randomizer)

    assert result == even_board()
    assert balance_score(result).score >= 90
    assert len(randomizer.candidates) == 10


def test_search_returns_best_after_exhaustion():
    randomizer = RecordingRandomizer()
    # 101 est inatteignable: la recherche va jusqu'au bout
    result = search(
        make_default_tiles(),
        max_tries=100,
        threshold=101,
        rng=seeded_rng(7),
        randomizer=randomizer,
    )

    assert len(randomizer.candidates) == 100
    best = max(randomizer.candidates, key=lambda tiles: balance_score(tiles).score)
    assert result is best


def test_search_below_threshold_keeps_first_best():
    # ORE absent: forces 12/12/12/12/0 -> score 17
    partial = board_from_layout(EVEN_LAYOUT[:12])
    script = [skewed_board(2), skewed_board(6), partial, list(partial)]
    calls = []

    def scripted(tiles, rng):
        calls.append(1)
        return script[len(calls) - 1]

    result = search(make_default_tiles(), max_tries=4, threshold=90, randomizer=scripted)

    assert len(calls) == 4
    assert result is script[2]
    assert balance_score(result).score < 90


def test_search_passes_rng_to_randomizer():
    rng = seeded_rng(1)
    seen = []

    def spy(tiles, source):
        seen.append(source)
        return randomize(tiles, source)

    search(make_default_tiles(), max_tries=3, threshold=101, rng=rng, randomizer=spy)
    assert seen == [rng, rng, rng]


def test_search_is_reproducible_with_seed():
    base = make_default_tiles()
    first = search(base, max_tries=30, threshold=101, rng=seeded_rng(3))
    second = search(base, max_tries=30, threshold=101, rng=seeded_rng(3))
    assert first == second


def test_search_without_tries_returns_copy():
    base = make_default_tiles()
    result = search(base, max_tries=0)
    assert result == base
    assert result is not base
