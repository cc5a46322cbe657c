"""
Oyun ayarları: ortam değişkenlerinden okunur.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_STARTING_LIVES = 3
DEFAULT_MAX_LIVES = 5

# Level paketi (None ise paketle gelen data/levels.json)
LEVELS_PATH: Path | None = Path(os.environ["SOKOBAN_LEVELS_PATH"]) if os.getenv("SOKOBAN_LEVELS_PATH") else None

# Ekrandaki tile boyutu (piksel)
TILE_SIZE = int(os.getenv("SOKOBAN_TILE_SIZE", "48"))


@dataclass(frozen=True)
class GameConfiguration:
    starting_lives: int = DEFAULT_STARTING_LIVES
    max_lives: int = DEFAULT_MAX_LIVES

    def __post_init__(self) -> None:
        if self.starting_lives < 1:
            raise ValueError(f"starting_lives pozitif olmalı: {self.starting_lives}")
        if self.max_lives < self.starting_lives:
            raise ValueError(
                f"max_lives ({self.max_lives}) starting_lives'tan ({self.starting_lives}) küçük olamaz"
            )

    @staticmethod
    def from_env() -> "GameConfiguration":
        return GameConfiguration(
            starting_lives=int(os.getenv("SOKOBAN_STARTING_LIVES", str(DEFAULT_STARTING_LIVES))),
            max_lives=int(os.getenv("SOKOBAN_MAX_LIVES", str(DEFAULT_MAX_LIVES))),
        )
