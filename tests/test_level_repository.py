"""
Tests for loading level packs from JSON and indexed access to them.
"""

import json

import pytest

from sokoban.model.board import BoardState
from sokoban.model.level import LevelFormatError, LevelPack
from sokoban.model.tile import LevelTile
from sokoban.repository.level_repository_json import DEFAULT_LEVELS_PATH, LevelRepositoryJSON
from sokoban.service.level_service import LevelService


@pytest.fixture
def pack_file(tmp_path):
    path = tmp_path / "classic.json"
    path.write_text(
        json.dumps([
            {"id": "a", "name": "Alpha", "rows": ["#####", "#@$.#", "#####"]},
            {"id": "b", "rows": ["#@ $ .#"]},
        ]),
        encoding="utf-8",
    )
    return path


class TestLevelRepositoryJSON:
    def test_loads_levels_in_file_order(self, pack_file):
        repository = LevelRepositoryJSON(pack_file)

        assert [level.id for level in repository.find_all()] == ["a", "b"]

    def test_load_pack_uses_file_stem_as_name(self, pack_file):
        pack = LevelRepositoryJSON(str(pack_file)).load_pack()

        assert pack.name == "classic"
        assert len(pack) == 2
        assert pack[0].name == "Alpha"
        assert pack[1].name == "b"

    def test_find_by_id(self, pack_file):
        repository = LevelRepositoryJSON(pack_file)

        assert repository.find_by_id("b").width == 7
        assert repository.find_by_id("missing") is None

    def test_levels_are_cached(self, pack_file):
        repository = LevelRepositoryJSON(pack_file)
        first = repository.load_pack()
        pack_file.write_text("[]", encoding="utf-8")

        assert repository.load_pack().levels == first.levels

    def test_missing_file(self, tmp_path):
        with pytest.raises(LevelFormatError):
            LevelRepositoryJSON(tmp_path / "nope.json").load_pack()

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(LevelFormatError):
            LevelRepositoryJSON(path).load_pack()

    def test_top_level_must_be_a_list(self, tmp_path):
        path = tmp_path / "object.json"
        path.write_text('{"id": "a"}', encoding="utf-8")

        with pytest.raises(LevelFormatError):
            LevelRepositoryJSON(path).load_pack()

    def test_bad_level_character(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text('[{"id": "a", "rows": ["#@x#"]}]', encoding="utf-8")

        with pytest.raises(LevelFormatError):
            LevelRepositoryJSON(path).load_pack()


class TestBundledLevels:
    def test_default_path(self):
        assert LevelRepositoryJSON().json_path == DEFAULT_LEVELS_PATH

    def test_bundled_pack_is_playable(self):
        pack = LevelRepositoryJSON().load_pack()

        assert len(pack) >= 1
        assert len({level.id for level in pack}) == len(pack)
        for level in pack:
            board = BoardState.from_level(level)
            targets = sum(1 for row in board.tiles for tile in row if tile == LevelTile.TARGET_SPOT)
            assert board.num_crates >= 1
            assert targets >= board.num_crates
            assert not board.is_solved()


class TestLevelService:
    def test_indexed_access(self, make_level):
        first = make_level(["@"], level_id="first")
        second = make_level(["@"], level_id="second")
        service = LevelService(LevelPack(levels=(first, second)))

        assert service.get_level_count() == 2
        assert service.get(1) is second
        assert service.has_level(0)
        assert not service.has_level(2)
        assert not service.has_level(-1)
        assert service.index_of("second") == 1
        assert service.index_of("third") is None

    def test_get_out_of_range(self):
        service = LevelService(LevelPack())

        with pytest.raises(IndexError):
            service.get(0)
