"""
Game Event Service: Observer Pattern implementasyonu.
İki tür dinleyici vardır: yaşam döngüsü (lifecycle) ve board güncellemeleri.
Dinleyiciler kayıt sırasıyla, senkron olarak çağrılır; hatalar yakalanmaz.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import AbstractSet, Optional

from sokoban.model.board import CrateGrid
from sokoban.model.level import Level, TileGrid
from sokoban.model.position import CrateDelta, Position


class GameLifecycleHandler:
    """Oyun yaşam döngüsü event'lerini dinler. Varsayılan metodlar hiçbir şey yapmaz."""

    def on_game_started(self, level: Level, lives: int) -> None:
        pass

    def on_game_stopped(self, total_score: int, completed: bool) -> None:
        pass

    def on_next_level(
        self,
        previous_level: Level,
        previous_score: int,
        level: Level,
        total_score: int,
    ) -> None:
        pass

    def on_lives_updated(self, lives: int, max_lives: int) -> None:
        pass

    def on_score_updated(self, score: int, total_score: int) -> None:
        pass

    def on_game_paused(self) -> None:
        pass

    def on_game_resumed(self) -> None:
        pass


class BoardEventHandler(ABC):
    """Board yeniden çizim event'lerini dinler."""

    @abstractmethod
    def on_board_updated(
        self,
        level: Level,
        tiles: TileGrid,
        crates: CrateGrid,
        player: Position,
        deltas: Optional[AbstractSet[CrateDelta]],
    ) -> None:
        """
        Board değiştiğinde çağrılır.

        Args:
            deltas: None ise tüm board yeniden çizilmeli; değilse sadece
                listelenen kasa hücreleri ve oyuncu
        """


class GameEventService:
    """
    Subject (Gözlemlenen) - Observer Pattern.
    Handler listeleri sıralıdır; aynı handler iki kez eklenmez.
    """

    def __init__(self) -> None:
        self._lifecycle_handlers: list[GameLifecycleHandler] = []
        self._board_handlers: list[BoardEventHandler] = []

    def add_lifecycle_handler(self, handler: GameLifecycleHandler) -> None:
        if handler not in self._lifecycle_handlers:
            self._lifecycle_handlers.append(handler)

    def remove_lifecycle_handler(self, handler: GameLifecycleHandler) -> None:
        if handler in self._lifecycle_handlers:
            self._lifecycle_handlers.remove(handler)

    def add_board_handler(self, handler: BoardEventHandler) -> None:
        if handler not in self._board_handlers:
            self._board_handlers.append(handler)

    def remove_board_handler(self, handler: BoardEventHandler) -> None:
        if handler in self._board_handlers:
            self._board_handlers.remove(handler)

    @property
    def lifecycle_handlers(self) -> tuple[GameLifecycleHandler, ...]:
        return tuple(self._lifecycle_handlers)

    @property
    def board_handlers(self) -> tuple[BoardEventHandler, ...]:
        return tuple(self._board_handlers)

    # event yayınlayıcılar

    def game_started(self, level: Level, lives: int) -> None:
        for handler in self.lifecycle_handlers:
            handler.on_game_started(level, lives)

    def game_stopped(self, total_score: int, completed: bool) -> None:
        for handler in self.lifecycle_handlers:
            handler.on_game_stopped(total_score, completed)

    def next_level(self, previous_level: Level, previous_score: int, level: Level, total_score: int) -> None:
        for handler in self.lifecycle_handlers:
            handler.on_next_level(previous_level, previous_score, level, total_score)

    def lives_updated(self, lives: int, max_lives: int) -> None:
        for handler in self.lifecycle_handlers:
            handler.on_lives_updated(lives, max_lives)

    def score_updated(self, score: int, total_score: int) -> None:
        for handler in self.lifecycle_handlers:
            handler.on_score_updated(score, total_score)

    def game_paused(self) -> None:
        for handler in self.lifecycle_handlers:
            handler.on_game_paused()

    def game_resumed(self) -> None:
        for handler in self.lifecycle_handlers:
            handler.on_game_resumed()

    def board_updated(
        self,
        level: Level,
        tiles: TileGrid,
        crates: CrateGrid,
        player: Position,
        deltas: Optional[AbstractSet[CrateDelta]],
    ) -> None:
        for handler in self.board_handlers:
            handler.on_board_updated(level, tiles, crates, player, deltas)
