"""
Game controller: oyun akışının tamamını yönetir (hamle, can, skor, seviye ilerleme).
View sadece intent iletir ve state okur; değişiklikler event'lerle bildirilir.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from sokoban.config.settings import GameConfiguration
from sokoban.model.board import BoardState
from sokoban.model.level import Level, LevelPack
from sokoban.model.position import CrateDelta
from sokoban.service.game_event_service import BoardEventHandler, GameEventService, GameLifecycleHandler
from sokoban.service.level_service import LevelService
from sokoban.service.movement_service import MoveDirection, MovementService
from sokoban.service.powerup_service import PowerupService, PowerupSet, PowerupType

logger = logging.getLogger(__name__)


class GameStateError(RuntimeError):
    """Komut mevcut oyun durumunda geçersiz (ör. oyun çalışmıyorken duraklatma)."""


class GameController:
    def __init__(
        self,
        configuration: GameConfiguration,
        level_pack: LevelPack,
        event_service: Optional[GameEventService] = None,
        movement_service: Optional[MovementService] = None,
    ) -> None:
        self._configuration = configuration
        self._level_service = LevelService(level_pack)
        self._event_service = event_service or GameEventService()
        self._movement_service = movement_service or MovementService()

        self._lives: int = 0
        self._streak: int = 0
        self._level_index: int = -1
        self._level: Optional[Level] = None
        self._score: int = 0
        self._total_score: int = 0
        self._powerups: PowerupSet = set()
        self._paused: bool = False
        self._accepts_input: bool = True
        self._board: Optional[BoardState] = None

    @dataclass(frozen=True)
    class GameViewState:
        running: bool
        paused: bool
        accepts_input: bool
        level: Optional[Level]
        level_index: Optional[int]
        lives: int
        max_lives: int
        streak: int
        current_score: int
        total_score: int
        powerups: frozenset[PowerupType]

    # sorgular

    @property
    def configuration(self) -> GameConfiguration:
        return self._configuration

    @property
    def current_lives(self) -> int:
        return self._lives

    @property
    def max_lives(self) -> int:
        return self._configuration.max_lives

    @property
    def current_streak(self) -> int:
        """Sıfırlama yapılmadan üst üste tamamlanan level sayısı."""
        return self._streak

    @property
    def current_score(self) -> int:
        return self._score

    @property
    def total_score(self) -> int:
        return self._total_score

    @property
    def current_level(self) -> Optional[Level]:
        return self._level

    @property
    def current_level_index(self) -> Optional[int]:
        return self._level_index if self.is_running else None

    @property
    def powerups(self) -> frozenset[PowerupType]:
        return frozenset(self._powerups)

    @property
    def is_running(self) -> bool:
        return self._level_index >= 0

    @property
    def is_paused(self) -> bool:
        return self._paused

    @property
    def accepts_input(self) -> bool:
        return self._accepts_input

    @property
    def board(self) -> Optional[BoardState]:
        return self._board

    @property
    def level_count(self) -> int:
        return self._level_service.get_level_count()

    def view_state(self) -> "GameController.GameViewState":
        return self.GameViewState(
            running=self.is_running,
            paused=self._paused,
            accepts_input=self._accepts_input,
            level=self._level,
            level_index=self.current_level_index,
            lives=self._lives,
            max_lives=self.max_lives,
            streak=self._streak,
            current_score=self._score,
            total_score=self._total_score,
            powerups=self.powerups,
        )

    # handler kaydı

    def add_lifecycle_handler(self, handler: GameLifecycleHandler) -> None:
        self._event_service.add_lifecycle_handler(handler)

    def remove_lifecycle_handler(self, handler: GameLifecycleHandler) -> None:
        self._event_service.remove_lifecycle_handler(handler)

    def add_board_handler(self, handler: BoardEventHandler) -> None:
        self._event_service.add_board_handler(handler)

    def remove_board_handler(self, handler: BoardEventHandler) -> None:
        self._event_service.remove_board_handler(handler)

    # yaşam döngüsü

    def start_game(self) -> None:
        """
        Oyunu sıfırlar ve ilk levelden başlatır.

        Raises:
            GameStateError: Oyun zaten çalışıyorsa veya hiç level yoksa
        """
        if self.is_running:
            raise GameStateError("Oyun zaten çalışıyor")
        if self._level_service.get_level_count() == 0:
            raise GameStateError("Oyun başlatılamadı, hiç level tanımlı mı?")

        self._lives = self._configuration.starting_lives
        self._streak = 0
        self._score = 0
        self._total_score = 0
        self._paused = False
        self._advance_level()

        logger.info(f"Oyun başladı: {self._level.id}, can={self._lives}")
        self._event_service.game_started(self._level, self._lives)
        self._event_service.lives_updated(self._lives, self.max_lives)

    def next_level(self) -> bool:
        """
        Sonraki levele geçer.

        Returns:
            bool: Yeni level yüklendiyse True; False ise level kalmamıştır
        """
        self._require_running("next_level")
        previous_level = self._level
        previous_score = self._score

        if not self._advance_level():
            return False

        logger.info(f"Level geçildi: {previous_level.id} ({previous_score}) -> {self._level.id}")
        self._event_service.next_level(previous_level, previous_score, self._level, self._total_score)
        return True

    def _advance_level(self) -> bool:
        next_index = self._level_index + 1
        if not self._level_service.has_level(next_index):
            return False

        self._level_index = next_index
        self._level = self._level_service.get(next_index)
        self._total_score += self._score
        self._score = 0
        self._powerups = set()
        self._prepare_level()

        self._event_service.score_updated(self._score, self._total_score)
        self._notify_board(None)
        return True

    def _prepare_level(self) -> None:
        """Aktif leveli statik tile'larından yeniden kurar."""
        self._board = BoardState.from_level(self._level)
        self._accepts_input = not self._paused

    def reset_level(self) -> None:
        """
        Aktif leveli baştan kurar ve bir can harcar.
        Can kalmamışsa oyun tamamlanmadan biter. Power-up'lar korunur.
        """
        self._require_running("reset_level")
        self._prepare_level()
        self._streak = 0
        if self._lives >= 1:
            self._lives -= 1
            logger.info(f"Level sıfırlandı: {self._level.id}, kalan can={self._lives}")
            self._event_service.lives_updated(self._lives, self.max_lives)
            self._notify_board(None)
        else:
            logger.info("Can kalmadı, oyun bitiyor")
            self.stop_game(False)

    def stop_game(self, completed: bool = False) -> None:
        """
        Oyunu durdurur (oyun çalışmıyorsa hiçbir şey yapmaz).

        Args:
            completed: Tüm leveller bittiği için mi durdu; elle durdurmada False
        """
        if not self.is_running:
            return

        self._total_score += self._score
        logger.info(f"Oyun bitti: skor={self._total_score}, tamamlandı={completed}")
        self._event_service.game_stopped(self._total_score, completed)

        self._lives = 0
        self._streak = 0
        self._level_index = -1
        self._level = None
        self._score = 0
        self._total_score = 0
        self._powerups = set()
        self._paused = False
        self._accepts_input = True
        self._board = None

    def toggle_pause(self) -> None:
        """Oyunu duraklatır veya devam ettirir; duraklatılmışken hamle kabul edilmez."""
        self._require_running("toggle_pause")
        self._paused = not self._paused
        self.enable_input(not self._paused)

        logger.info(f"Pause status: {self._paused}")
        if self._paused:
            self._event_service.game_paused()
        else:
            self._event_service.game_resumed()

    def enable_input(self, enable: bool) -> None:
        self._accepts_input = enable

    # hamle

    def move(self, direction: MoveDirection) -> None:
        """Oyuncuyu bir adım hareket ettirir; geçersiz hamleler sessizce yok sayılır."""
        if not self.is_running or self._paused or not self._accepts_input:
            return

        result = self._movement_service.resolve(self._board, self._powerups, direction)
        if not result.accepted:
            logger.debug(f"Move {direction.name} rejected at {self._board.player.as_tuple()}")
            return

        self._score += 1
        self._event_service.score_updated(self._score, self._total_score)
        self._notify_board(result.deltas)

        if self._board.is_solved():
            self._streak += 1
            if not self.next_level():
                self.stop_game(True)
            return

        collected = PowerupService.collect(self._powerups, self._board.tile_at(self._board.player))
        if collected is not None:
            logger.info(f"Power-up toplandı: {collected.value}")

    def _notify_board(self, deltas: Optional[frozenset[CrateDelta]]) -> None:
        board = self._board
        self._event_service.board_updated(
            self._level,
            board.tiles,
            board.crate_snapshot(),
            board.player,
            deltas,
        )

    def _require_running(self, operation: str) -> None:
        if not self.is_running:
            raise GameStateError(f"{operation}: aktif oyun yok")
