"""
Board State: bir levelin oynanış sırasındaki değişken görünümü.

Statik tile grid'i (CRATE/PLAYER işaretleri FLOOR'a çevrilmiş), ayrı bir kasa
grid'i ve oyuncu pozisyonunu tutar. Statik grid normalizasyondan sonra hiç
değişmez; oynanış sırasında sadece kasa grid'i ve oyuncu pozisyonu değişir.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from sokoban.model.level import Level, TileGrid
from sokoban.model.position import Position
from sokoban.model.tile import LevelTile


CrateGrid = Tuple[Tuple[bool, ...], ...]


@dataclass
class BoardState:
    level: Level
    tiles: TileGrid
    crates: list[list[bool]]
    player: Position
    num_crates: int = 0
    num_matched: int = 0

    @staticmethod
    def from_level(level: Level) -> "BoardState":
        """
        Levelin statik tile'larından yeni bir board üretir.

        Her CRATE kasa grid'ine taşınır, PLAYER başlangıç pozisyonu olur;
        ikisinin yerine de FLOOR yazılır.
        """
        tiles: list[tuple[LevelTile, ...]] = []
        crates: list[list[bool]] = []
        player: Optional[Position] = None
        num_crates = 0

        for y in range(level.height):
            row: list[LevelTile] = []
            crate_row: list[bool] = []
            for x in range(level.width):
                tile = level.tile_at(x, y)
                crate_row.append(tile == LevelTile.CRATE)
                if tile == LevelTile.CRATE:
                    num_crates += 1
                elif tile == LevelTile.PLAYER:
                    player = Position(x, y)
                row.append(LevelTile.FLOOR if tile.is_spawn_marker else tile)
            tiles.append(tuple(row))
            crates.append(crate_row)

        if player is None:
            # Levellar doğrulanmıyor; oyuncu işareti yoksa sol üst köşe
            player = Position(0, 0)

        board = BoardState(
            level=level,
            tiles=tuple(tiles),
            crates=crates,
            player=player,
            num_crates=num_crates,
        )
        board.num_matched = sum(
            1
            for y, crate_row in enumerate(crates)
            for x, has_crate in enumerate(crate_row)
            if has_crate and board.tiles[y][x] == LevelTile.TARGET_SPOT
        )
        return board

    @property
    def width(self) -> int:
        return self.level.width

    @property
    def height(self) -> int:
        return self.level.height

    def is_inside(self, pos: Position) -> bool:
        return 0 <= pos.x < self.width and 0 <= pos.y < self.height

    def tile_at(self, pos: Position) -> LevelTile:
        return self.tiles[pos.y][pos.x]

    def has_crate(self, pos: Position) -> bool:
        return self.is_inside(pos) and self.crates[pos.y][pos.x]

    def is_wall(self, pos: Position) -> bool:
        return self.tile_at(pos) == LevelTile.WALL

    def move_crate(self, source: Position, target: Position) -> None:
        """Kasayı taşır ve eşleşen kasa sayacını statik tile'lara göre günceller."""
        self.crates[source.y][source.x] = False
        self.crates[target.y][target.x] = True

        was_matched = self.tile_at(source) == LevelTile.TARGET_SPOT
        is_matched = self.tile_at(target) == LevelTile.TARGET_SPOT
        if is_matched and not was_matched:
            self.num_matched += 1
        elif was_matched and not is_matched:
            self.num_matched -= 1

    def crate_count(self) -> int:
        return sum(sum(1 for cell in row if cell) for row in self.crates)

    def is_solved(self) -> bool:
        return self.num_matched == self.num_crates

    def crate_snapshot(self) -> CrateGrid:
        """View'lara verilen salt okunur kasa grid'i kopyası."""
        return tuple(tuple(row) for row in self.crates)
