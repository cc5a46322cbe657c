"""
Board çizimi: controller'ın board event'lerini dinler, son durumu saklar ve
sadece değişen hücreleri (veya tüm board'u) yüzeye çizer.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import AbstractSet, Iterable, Optional

import pygame

from sokoban.model.board import CrateGrid
from sokoban.model.level import Level, TileGrid
from sokoban.model.position import CrateDelta, Position
from sokoban.model.tile import LevelTile
from sokoban.service.game_event_service import BoardEventHandler

Color = tuple[int, int, int]


class BoardRenderer(BoardEventHandler):
    def __init__(self, tile_size: int = 48, colors: Optional["BoardRenderer.Colors"] = None) -> None:
        self.tile_size = tile_size
        self.colors = colors or BoardRenderer.Colors()
        self._level: Optional[Level] = None
        self._tiles: Optional[TileGrid] = None
        self._crates: Optional[CrateGrid] = None
        self._player: Optional[Position] = None
        self._dirty: set[Position] = set()
        self._full_redraw = True

    @dataclass(frozen=True)
    class Colors:
        floor: Color = (30, 30, 36)
        wall: Color = (90, 84, 100)
        target: Color = (200, 70, 70)
        crate: Color = (170, 120, 60)
        crate_on_target: Color = (90, 170, 80)
        player: Color = (230, 220, 90)
        ghost: Color = (150, 200, 240)
        strength: Color = (240, 140, 40)
        pull: Color = (180, 110, 220)

    def on_board_updated(
        self,
        level: Level,
        tiles: TileGrid,
        crates: CrateGrid,
        player: Position,
        deltas: Optional[AbstractSet[CrateDelta]],
    ) -> None:
        if deltas is None or level is not self._level or self._tiles is None:
            self.invalidate()
        else:
            for delta in deltas:
                self._dirty.add(delta.source)
                self._dirty.add(delta.target)
            if self._player is not None:
                self._dirty.add(self._player)
            self._dirty.add(player)

        self._level = level
        self._tiles = tiles
        self._crates = crates
        self._player = player

    @property
    def has_board(self) -> bool:
        return self._tiles is not None

    @property
    def pixel_size(self) -> tuple[int, int]:
        if self._level is None:
            return 0, 0
        return self._level.width * self.tile_size, self._level.height * self.tile_size

    def pending_cells(self) -> Optional[set[Position]]:
        """Bir sonraki draw()'da çizilecek hücreler; None tüm board demektir."""
        if self._full_redraw:
            return None
        return set(self._dirty)

    def invalidate(self) -> None:
        self._full_redraw = True
        self._dirty.clear()

    def clear(self) -> None:
        self._level = None
        self._tiles = None
        self._crates = None
        self._player = None
        self.invalidate()

    def cell_rect(self, pos: Position, offset: tuple[int, int] = (0, 0)) -> pygame.Rect:
        return pygame.Rect(
            offset[0] + pos.x * self.tile_size,
            offset[1] + pos.y * self.tile_size,
            self.tile_size,
            self.tile_size,
        )

    def draw(self, surface: pygame.Surface, offset: tuple[int, int] = (0, 0)) -> list[pygame.Rect]:
        """
        Bekleyen hücreleri çizer.

        Returns:
            list: Güncellenen ekran dikdörtgenleri (display.update için)
        """
        if self._tiles is None:
            return []

        if self._full_redraw:
            cells: Iterable[Position] = (
                Position(x, y) for y in range(len(self._tiles)) for x in range(len(self._tiles[y]))
            )
        else:
            cells = sorted(self._dirty, key=lambda p: (p.y, p.x))

        updated = [self._draw_cell(surface, pos, offset) for pos in cells]
        self._full_redraw = False
        self._dirty.clear()
        return updated

    def _draw_cell(self, surface: pygame.Surface, pos: Position, offset: tuple[int, int]) -> pygame.Rect:
        rect = self.cell_rect(pos, offset)
        tile = self._tiles[pos.y][pos.x]
        pygame.draw.rect(surface, self._tile_color(tile), rect)

        inset = max(1, self.tile_size // 8)
        if tile.is_pickup:
            marker = rect.inflate(-self.tile_size // 2, -self.tile_size // 2)
            pygame.draw.rect(surface, self._pickup_color(tile), marker)

        if self._crates[pos.y][pos.x]:
            color = self.colors.crate_on_target if tile == LevelTile.TARGET_SPOT else self.colors.crate
            pygame.draw.rect(surface, color, rect.inflate(-2 * inset, -2 * inset))
        elif pos == self._player:
            pygame.draw.circle(surface, self.colors.player, rect.center, self.tile_size // 2 - inset)
        return rect

    def _tile_color(self, tile: LevelTile) -> Color:
        match tile:
            case LevelTile.WALL:
                return self.colors.wall
            case LevelTile.TARGET_SPOT:
                return self.colors.target
        return self.colors.floor

    def _pickup_color(self, tile: LevelTile) -> Color:
        match tile:
            case LevelTile.GHOST:
                return self.colors.ghost
            case LevelTile.STRENGTH:
                return self.colors.strength
            case LevelTile.PULL:
                return self.colors.pull
        return self.colors.floor
