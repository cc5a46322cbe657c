"""
Oyunu başlatmak için basit bir giriş noktası.
"""
from __future__ import annotations

import logging

import pygame

# Logging ayarları - INFO level'da tüm loglar görünsün
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

from sokoban.config.settings import LEVELS_PATH, TILE_SIZE, GameConfiguration
from sokoban.controller.game_controller import GameController
from sokoban.repository.level_repository_json import LevelRepositoryJSON
from sokoban.service.game_observers import LoggerObserver, StatusObserver
from sokoban.view.board_renderer import BoardRenderer
from sokoban.view.game_scene import STATUS_BAR_HEIGHT, GameScene
from sokoban.view.pygame_view import PygameView, ViewConfig

logger = logging.getLogger(__name__)


def _exit_app() -> None:
    pygame.event.post(pygame.event.Event(pygame.QUIT))


def main() -> None:
    configuration = GameConfiguration.from_env()
    level_pack = LevelRepositoryJSON(LEVELS_PATH).load_pack()

    # Ekran en büyük levele göre boyutlanır
    max_width = max((level.width for level in level_pack), default=10)
    max_height = max((level.height for level in level_pack), default=10)
    config = ViewConfig(
        width=max(640, max_width * TILE_SIZE),
        height=max_height * TILE_SIZE + STATUS_BAR_HEIGHT,
    )

    controller = GameController(configuration, level_pack)
    controller.add_lifecycle_handler(LoggerObserver())

    renderer = BoardRenderer(tile_size=TILE_SIZE)
    scene = GameScene(controller, renderer, status=StatusObserver(), exit_callback=_exit_app)

    view = PygameView(config)
    view.initialize()
    pygame.font.init()
    logger.info(f"Level paketi: {level_pack.name} ({len(level_pack)} level)")

    try:
        view.render(scene)
    finally:
        controller.stop_game(False)
        view.shutdown()


if __name__ == "__main__":
    main()
