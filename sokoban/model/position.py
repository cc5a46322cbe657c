"""
Pozisyon ve kasa hareketi (delta) tanımları.
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """Grid koordinatı: x = sütun, y = satır."""
    x: int
    y: int

    def offset(self, dx: int, dy: int) -> "Position":
        return Position(self.x + dx, self.y + dy)

    def as_tuple(self) -> tuple[int, int]:
        return self.x, self.y


@dataclass(frozen=True)
class CrateDelta:
    """Bir hamlede tek bir kasanın nereden nereye gittiği."""
    source: Position
    target: Position
