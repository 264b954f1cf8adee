"""Tests de sérialisation du record de plateau.

Objectifs:
- Produire un record JSON-friendly pour le stockage externe.
- Restaurer la liste de cases depuis ce record.
- Rejeter les records mal formés.
"""

import json

import pytest

from board_fixtures import random_board
from catan_finder.analysis.balance import balance_score
from catan_finder.engine.board import BoardState, make_default_tiles
from catan_finder.engine.serialize import SCHEMA_VERSION, board_to_record, record_to_tiles


class TestBoardRecord:
    """Round-trip entre plateau et record."""

    def test_record_fields(self):
        tiles = random_board(12)
        record = board_to_record(tiles, player_count=4)

        json.dumps(record, sort_keys=True)
        assert record["schema_version"] == SCHEMA_VERSION
        assert record["player_count"] == 4
        assert len(record["tiles"]) == 19
        assert record["balance_score"] == balance_score(tiles).score
        assert record["resource_strength"] == balance_score(tiles).strengths
        assert record["tiles"][0]["label"] == "A1"
        assert set(record["tiles"][0]) == {"q", "r", "label", "res", "num"}

    def test_round_trip_preserves_tiles(self):
        tiles = random_board(12)
        record = json.loads(json.dumps(board_to_record(tiles, player_count=3)))
        assert record_to_tiles(record) == tiles

    def test_unsupported_player_count(self):
        with pytest.raises(ValueError):
            board_to_record(random_board(), player_count=2)

    def test_rejects_unknown_schema(self):
        record = board_to_record(random_board(), player_count=4)
        record["schema_version"] = "9.9.9"
        with pytest.raises(ValueError):
            record_to_tiles(record)

    def test_rejects_wrong_tile_count(self):
        record = board_to_record(random_board(), player_count=4)
        record["tiles"] = record["tiles"][:18]
        with pytest.raises(ValueError):
            record_to_tiles(record)

    def test_rejects_unknown_resource(self):
        record = board_to_record(random_board(), player_count=4)
        record["tiles"][0]["res"] = "holz"
        with pytest.raises(ValueError):
            record_to_tiles(record)

    def test_rejects_number_on_desert(self):
        record = board_to_record(random_board(), player_count=4)
        desert = next(t for t in record["tiles"] if t["res"] == "DESERT")
        desert["num"] = 6
        with pytest.raises(ValueError):
            record_to_tiles(record)

    def test_rejects_number_without_resource(self):
        record = board_to_record(random_board(), player_count=4)
        tile = next(t for t in record["tiles"] if t["num"] is not None)
        tile["res"] = None
        with pytest.raises(ValueError):
            record_to_tiles(record)

    def test_rejects_invalid_number(self):
        record = board_to_record(random_board(), player_count=4)
        tile = next(t for t in record["tiles"] if t["res"] != "DESERT")
        tile["num"] = 7
        with pytest.raises(ValueError):
            record_to_tiles(record)

    def test_rejects_coordinate_off_board(self):
        record = board_to_record(random_board(), player_count=4)
        record["tiles"][1]["q"] = 9
        record["tiles"][1]["r"] = 9
        with pytest.raises(ValueError):
            record_to_tiles(record)

    def test_rejects_duplicate_coordinates(self):
        record = board_to_record(random_board(), player_count=4)
        record["tiles"][1]["q"] = record["tiles"][0]["q"]
        record["tiles"][1]["r"] = record["tiles"][0]["r"]
        with pytest.raises(ValueError):
            record_to_tiles(record)

    def test_empty_board_round_trip(self):
        tiles = make_default_tiles()
        restored = record_to_tiles(board_to_record(tiles, player_count=3))
        assert restored == tiles
        assert BoardState.from_tiles(restored) == BoardState.initial()
