"""
Level Repository: Level verilerini JSON dosyasından yükleyen repository.
SOLID - Repository Pattern: Veri erişim katmanını soyutlar.

Dosya formatı:
    [{"id": "level_1", "name": "...", "rows": ["#####", "#@$.#", "#####"]}, ...]
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterable, Optional

from sokoban.model.level import Level, LevelFormatError, LevelPack

logger = logging.getLogger(__name__)

DEFAULT_LEVELS_PATH = Path(__file__).resolve().parent.parent / "data" / "levels.json"


class LevelRepositoryJSON:
    """
    Level Repository: JSON dosyasından level verilerini yönetir.
    Dosya sırası paket sırasıdır.
    """

    def __init__(self, json_path: str | Path | None = None) -> None:
        """
        Args:
            json_path: JSON dosyasının yolu (None ise paketle gelen data/levels.json)
        """
        self._json_path = Path(json_path) if json_path is not None else DEFAULT_LEVELS_PATH
        self._cache: list[Level] | None = None

    @property
    def json_path(self) -> Path:
        return self._json_path

    def find_by_id(self, level_id: str) -> Optional[Level]:
        """ID'ye göre level bulur"""
        return next((level for level in self._load_all() if level.id == level_id), None)

    def find_all(self) -> Iterable[Level]:
        """Tüm levelları dosya sırasıyla getirir"""
        yield from self._load_all()

    def load_pack(self) -> LevelPack:
        return LevelPack(levels=tuple(self._load_all()), name=self._json_path.stem)

    def _load_all(self) -> list[Level]:
        """Tüm levelları JSON dosyasından yükler (cache'lenmiş)"""
        if self._cache is not None:
            return self._cache

        try:
            with open(self._json_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise LevelFormatError(f"JSON dosyası okunamadı ({self._json_path}): {e}") from e
        except OSError as e:
            raise LevelFormatError(f"JSON dosyası açılamadı ({self._json_path}): {e}") from e

        if not isinstance(data, list):
            raise LevelFormatError(f"{self._json_path}: level listesi bekleniyordu")

        levels = [Level.from_dict(item) for item in data]
        logger.info(f"{len(levels)} level yüklendi: {self._json_path}")
        self._cache = levels
        return levels
