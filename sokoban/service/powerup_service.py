"""
Powerup Service: tek kullanımlık power-up mekanikleri (toplama, tüketme).
"""
from __future__ import annotations

from enum import Enum
from typing import Optional

from sokoban.model.tile import LevelTile


class PowerupType(Enum):
    """Power-up türleri."""
    GHOST = "ghost"  # bir kez duvardan geç
    STRENGTH = "strength"  # bir kez üst üste iki kasayı it
    PULL = "pull"  # bir kez arkadaki kasayı çek


PowerupSet = set[PowerupType]


class PowerupService:
    """Power-up toplama ve tüketme kuralları."""

    _PICKUP_TILES: dict[LevelTile, PowerupType] = {
        LevelTile.GHOST: PowerupType.GHOST,
        LevelTile.STRENGTH: PowerupType.STRENGTH,
        LevelTile.PULL: PowerupType.PULL,
    }

    @staticmethod
    def pickup_for(tile: LevelTile) -> Optional[PowerupType]:
        """Tile bir power-up aktivatörüyse karşılık gelen türü döndürür."""
        return PowerupService._PICKUP_TILES.get(tile)

    @staticmethod
    def collect(powerups: PowerupSet, tile: LevelTile) -> Optional[PowerupType]:
        """
        Oyuncunun üzerinde durduğu tile'dan power-up toplar.
        Pickup tile'ı board'dan kalkmaz; aktif power-up tekrar eklenirse değişiklik olmaz.

        Returns:
            Toplanan power-up türü veya None
        """
        powerup = PowerupService.pickup_for(tile)
        if powerup is not None:
            powerups.add(powerup)
        return powerup

    @staticmethod
    def consume(powerups: PowerupSet, powerup: PowerupType) -> bool:
        """Power-up aktifse kaldırır; aktif olup olmadığını döndürür."""
        if powerup in powerups:
            powerups.discard(powerup)
            return True
        return False
