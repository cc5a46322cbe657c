"""
Tile tanımları ve tipleri.
CRATE ve PLAYER sadece spawn işaretidir; level yüklendikten sonra board'da bulunmaz.
"""
from __future__ import annotations

from enum import Enum


class LevelTile(Enum):
    FLOOR = " "
    WALL = "#"
    CRATE = "$"
    TARGET_SPOT = "."
    PLAYER = "@"
    GHOST = "G"
    STRENGTH = "S"
    PULL = "P"

    @staticmethod
    def from_char(char: str) -> "LevelTile":
        """Level dosyasındaki karakteri tile tipine çevirir ('-' de zemin sayılır)."""
        if char == "-":
            return LevelTile.FLOOR
        try:
            return LevelTile(char)
        except ValueError:
            raise ValueError(f"Bilinmeyen tile karakteri: {char!r}") from None

    @property
    def is_spawn_marker(self) -> bool:
        return self in (LevelTile.CRATE, LevelTile.PLAYER)

    @property
    def is_pickup(self) -> bool:
        return self in (LevelTile.GHOST, LevelTile.STRENGTH, LevelTile.PULL)
