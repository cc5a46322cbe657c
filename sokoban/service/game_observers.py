"""
Game Event Observers: Concrete observer implementasyonları.
Yaşam döngüsü event'lerini dinler (loglama, durum satırı için özet).
"""
from __future__ import annotations

import logging
from typing import Optional

from sokoban.model.level import Level
from sokoban.service.game_event_service import GameLifecycleHandler

logger = logging.getLogger(__name__)


class LoggerObserver(GameLifecycleHandler):
    """Debug için tüm eventleri logla."""

    def on_game_started(self, level: Level, lives: int) -> None:
        logger.debug(f"Game Event: game_started, level={level.id}, lives={lives}")

    def on_game_stopped(self, total_score: int, completed: bool) -> None:
        logger.debug(f"Game Event: game_stopped, total_score={total_score}, completed={completed}")

    def on_next_level(self, previous_level: Level, previous_score: int, level: Level, total_score: int) -> None:
        logger.debug(
            f"Game Event: next_level, {previous_level.id} ({previous_score}) -> {level.id}, "
            f"total_score={total_score}"
        )

    def on_lives_updated(self, lives: int, max_lives: int) -> None:
        logger.debug(f"Game Event: lives_updated, {lives}/{max_lives}")

    def on_score_updated(self, score: int, total_score: int) -> None:
        logger.debug(f"Game Event: score_updated, score={score}, total_score={total_score}")

    def on_game_paused(self) -> None:
        logger.debug("Game Event: game_paused")

    def on_game_resumed(self) -> None:
        logger.debug("Game Event: game_resumed")


class StatusObserver(GameLifecycleHandler):
    """Durum satırı için son bilinen değerleri tutan observer."""

    def __init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        """Değerleri sıfırla (yeni oyun için)."""
        self.level: Optional[Level] = None
        self.lives: int = 0
        self.max_lives: int = 0
        self.score: int = 0
        self.total_score: int = 0
        self.paused: bool = False
        self.last_result: Optional[tuple[int, bool]] = None

    def on_game_started(self, level: Level, lives: int) -> None:
        self.level = level
        self.lives = lives
        self.paused = False
        self.last_result = None

    def on_game_stopped(self, total_score: int, completed: bool) -> None:
        self.level = None
        self.total_score = total_score
        self.paused = False
        self.last_result = (total_score, completed)
        if completed:
            logger.info(f"Tüm leveller tamamlandı! Toplam skor: {total_score}")

    def on_next_level(self, previous_level: Level, previous_score: int, level: Level, total_score: int) -> None:
        self.level = level
        self.total_score = total_score
        logger.info(f"Level {previous_level.id} tamamlandı ({previous_score} hamle)")

    def on_lives_updated(self, lives: int, max_lives: int) -> None:
        self.lives = lives
        self.max_lives = max_lives

    def on_score_updated(self, score: int, total_score: int) -> None:
        self.score = score
        self.total_score = total_score

    def on_game_paused(self) -> None:
        self.paused = True

    def on_game_resumed(self) -> None:
        self.paused = False
