"""
Pygame tabanlı View katmanı: görüntüleme döngüsü ve temel render işlemleri.
Bu sınıf diğer katmanlardan bağımsız kalmalı; sadece sahnenin döndürdüğü bölgeleri günceller.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import pygame

from .scene import Scene


@dataclass(frozen=True)
class ViewConfig:
    """Pygame ekranı için temel yapılandırma."""

    width: int = 960
    height: int = 640
    fps: int = 30
    caption: str = "Sokoban"


class PygameView:
    """Pygame uygulamasını yöneten basit bir renderer."""

    def __init__(self, config: ViewConfig) -> None:
        self._config = config
        self._screen: Optional[pygame.Surface] = None
        self._clock: Optional[pygame.time.Clock] = None
        self._running = False

    def initialize(self) -> None:
        """Pygame'i başlatır ve ekranı hazırlar."""
        pygame.init()
        self._screen = pygame.display.set_mode((self._config.width, self._config.height))
        pygame.display.set_caption(self._config.caption)
        self._clock = pygame.time.Clock()

    def shutdown(self) -> None:
        """Pygame kaynaklarını temizler."""
        pygame.quit()

    def stop(self) -> None:
        self._running = False

    def render(self, scene: Scene, run_seconds: Optional[float] = None) -> None:
        """
        View döngüsünü çalıştırır.

        :param scene: Çizilecek sahne
        :param run_seconds: İsteğe bağlı max süre (test/kontrol amacıyla).
        """
        if self._screen is None or self._clock is None:
            raise RuntimeError("View initialize() çağrılmadan render edilemez.")

        self._running = True
        elapsed = 0.0
        while self._running:
            delta = self._clock.tick(self._config.fps) / 1000.0
            elapsed += delta

            events = list(pygame.event.get())
            if any(event.type == pygame.QUIT for event in events):
                self._running = False

            scene.handle_events(events)
            scene.update(delta)

            updated = scene.draw(self._screen)
            if updated:
                pygame.display.update(updated)

            if run_seconds and elapsed >= run_seconds:
                self._running = False
