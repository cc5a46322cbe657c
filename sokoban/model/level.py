from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, Sequence, Tuple

from sokoban.model.tile import LevelTile


TileGrid = Tuple[Tuple[LevelTile, ...], ...]


class LevelFormatError(ValueError):
    """Level verisi çözümlenemediğinde fırlatılır."""


@dataclass(frozen=True)
class Level:
    id: str
    width: int
    height: int
    tiles: TileGrid
    name: str = ""

    def tile_at(self, x: int, y: int) -> LevelTile:
        return self.tiles[y][x]

    @staticmethod
    def from_rows(level_id: str, rows: Sequence[str], name: str = "") -> "Level":
        """
        Metin satırlarından level oluşturur.
        Kısa satırlar FLOOR ile sağdan doldurulur.

        Raises:
            LevelFormatError: Satır yoksa veya bilinmeyen karakter varsa
        """
        if not rows:
            raise LevelFormatError(f"Level '{level_id}' boş")
        width = max(len(row) for row in rows)
        grid: list[tuple[LevelTile, ...]] = []
        for y, row in enumerate(rows):
            try:
                tiles = [LevelTile.from_char(char) for char in row]
            except ValueError as e:
                raise LevelFormatError(f"Level '{level_id}', satır {y}: {e}") from e
            tiles.extend([LevelTile.FLOOR] * (width - len(tiles)))
            grid.append(tuple(tiles))
        return Level(
            id=level_id,
            width=width,
            height=len(grid),
            tiles=tuple(grid),
            name=name or level_id,
        )

    @staticmethod
    def from_dict(data: dict[str, Any]) -> "Level":
        try:
            level_id = str(data["id"])
            rows = data["rows"]
        except (KeyError, TypeError) as e:
            raise LevelFormatError(f"Eksik level alanı: {e}") from e
        if not isinstance(rows, list) or not all(isinstance(row, str) for row in rows):
            raise LevelFormatError(f"Level '{level_id}': 'rows' metin listesi olmalı")
        return Level.from_rows(level_id, rows, name=str(data.get("name", "")))


@dataclass(frozen=True)
class LevelPack:
    """Sıralı, 0-indexli level listesi."""
    levels: Tuple[Level, ...] = field(default_factory=tuple)
    name: str = "default"

    def __len__(self) -> int:
        return len(self.levels)

    def __iter__(self) -> Iterator[Level]:
        return iter(self.levels)

    def __getitem__(self, index: int) -> Level:
        return self.levels[index]

    @property
    def count(self) -> int:
        return len(self.levels)
