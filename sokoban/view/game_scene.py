"""
Oyun sahnesi: klavye girdisini controller komutlarına çevirir, board'u ve
durum satırını çizer.
"""
from __future__ import annotations

import logging
from typing import Callable, Iterable, Optional

import pygame

from sokoban.controller.game_controller import GameController
from sokoban.model.level import Level
from sokoban.service.game_event_service import GameLifecycleHandler
from sokoban.service.game_observers import StatusObserver
from sokoban.service.movement_service import MoveDirection
from sokoban.view.board_renderer import BoardRenderer

logger = logging.getLogger(__name__)

KEY_DIRECTIONS: dict[int, MoveDirection] = {
    pygame.K_UP: MoveDirection.UP,
    pygame.K_w: MoveDirection.UP,
    pygame.K_DOWN: MoveDirection.DOWN,
    pygame.K_s: MoveDirection.DOWN,
    pygame.K_LEFT: MoveDirection.LEFT,
    pygame.K_a: MoveDirection.LEFT,
    pygame.K_RIGHT: MoveDirection.RIGHT,
    pygame.K_d: MoveDirection.RIGHT,
}

STATUS_BAR_HEIGHT = 32


class GameScene(GameLifecycleHandler):

    def __init__(
        self,
        controller: GameController,
        renderer: BoardRenderer,
        status: Optional[StatusObserver] = None,
        exit_callback: Callable[[], None] | None = None,
        background_color: tuple[int, int, int] = (0, 0, 0),
        text_color: tuple[int, int, int] = (220, 220, 220),
    ) -> None:
        self._controller = controller
        self._renderer = renderer
        self._status = status or StatusObserver()
        self._exit_callback = exit_callback
        self._background_color = background_color
        self._text_color = text_color
        self._font: Optional[pygame.font.Font] = None
        self._message: str = "N: yeni oyun, Esc: çıkış"
        self._needs_clear = True

        controller.add_lifecycle_handler(self._status)
        controller.add_lifecycle_handler(self)
        controller.add_board_handler(renderer)

    def handle_events(self, events: Iterable[pygame.event.Event]) -> None:
        for event in events:
            if event.type == pygame.KEYDOWN:
                self.handle_key(event.key)

    def handle_key(self, key: int) -> None:
        controller = self._controller
        if not controller.is_running:
            if key == pygame.K_n:
                controller.start_game()
            elif key == pygame.K_ESCAPE and self._exit_callback:
                self._exit_callback()
            return

        direction = KEY_DIRECTIONS.get(key)
        if direction is not None:
            controller.move(direction)
        elif key == pygame.K_p:
            controller.toggle_pause()
        elif key == pygame.K_r:
            controller.reset_level()
        elif key == pygame.K_ESCAPE:
            controller.stop_game(False)

    def update(self, delta: float) -> None:
        pass

    def status_text(self) -> str:
        if not self._controller.is_running:
            return self._message

        state = self._controller.view_state()
        level_name = state.level.name if state.level else "-"
        powerups = ",".join(sorted(p.value for p in state.powerups)) or "-"
        text = (
            f"{level_name} ({state.level_index + 1}/{self._controller.level_count})  "
            f"Can: {state.lives}/{state.max_lives}  "
            f"Skor: {state.current_score} (toplam {state.total_score})  "
            f"Güç: {powerups}"
        )
        if state.paused:
            text += "  [DURAKLATILDI]"
        return text

    def draw(self, surface: pygame.Surface) -> list[pygame.Rect]:
        updated: list[pygame.Rect] = []
        if self._needs_clear:
            surface.fill(self._background_color)
            updated.append(surface.get_rect())
            self._needs_clear = False

        updated.extend(self._renderer.draw(surface, offset=(0, STATUS_BAR_HEIGHT)))
        updated.append(self._draw_status(surface))
        return updated

    def _draw_status(self, surface: pygame.Surface) -> pygame.Rect:
        rect = pygame.Rect(0, 0, surface.get_width(), STATUS_BAR_HEIGHT)
        surface.fill(self._background_color, rect)
        if pygame.font.get_init():
            if self._font is None:
                self._font = pygame.font.SysFont("monospace", 16)
            label = self._font.render(self.status_text(), True, self._text_color)
            surface.blit(label, (8, (STATUS_BAR_HEIGHT - label.get_height()) // 2))
        return rect

    # yaşam döngüsü event'leri

    def on_game_started(self, level: Level, lives: int) -> None:
        self._needs_clear = True

    def on_next_level(self, previous_level: Level, previous_score: int, level: Level, total_score: int) -> None:
        # Board boyutu değişebilir, eski level kalıntısı kalmasın
        self._needs_clear = True

    def on_game_stopped(self, total_score: int, completed: bool) -> None:
        if completed:
            self._message = f"Tebrikler! Tüm leveller bitti, skor: {total_score}. N: yeni oyun"
        else:
            self._message = f"Oyun bitti, skor: {total_score}. N: yeni oyun, Esc: çıkış"
        self._renderer.clear()
        self._needs_clear = True

    def on_game_resumed(self) -> None:
        self._renderer.invalidate()
