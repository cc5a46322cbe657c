"""
Level Service: level paketine sıra numarasıyla erişim.
Repository ve Model katmanlarını kullanarak level verilerini sağlar.
"""
from __future__ import annotations

from typing import Optional

from sokoban.model.level import Level, LevelPack


class LevelService:
    """Level paketini sıralı olarak sunar (0-indexli)."""

    def __init__(self, level_pack: LevelPack) -> None:
        self._pack = level_pack

    @property
    def pack(self) -> LevelPack:
        return self._pack

    def get_level_count(self) -> int:
        """Toplam level sayısını döndürür."""
        return len(self._pack)

    def has_level(self, index: int) -> bool:
        return 0 <= index < len(self._pack)

    def get(self, index: int) -> Level:
        """
        Sıra numarasına göre level döndürür.

        Raises:
            IndexError: Paket dışında bir index verildiyse
        """
        if not self.has_level(index):
            raise IndexError(f"Level index {index} paket dışında (toplam {len(self._pack)})")
        return self._pack[index]

    def index_of(self, level_id: str) -> Optional[int]:
        """Level ID'sinin paketteki sırasını döndürür."""
        for index, level in enumerate(self._pack):
            if level.id == level_id:
                return index
        return None
