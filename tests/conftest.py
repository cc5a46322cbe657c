"""
Pytest fixtures for sokoban tests.
"""

from typing import AbstractSet, Callable, Optional, Sequence

import pytest

from sokoban.config.settings import GameConfiguration
from sokoban.controller.game_controller import GameController
from sokoban.model.board import CrateGrid
from sokoban.model.level import Level, LevelPack, TileGrid
from sokoban.model.position import CrateDelta, Position
from sokoban.service.game_event_service import BoardEventHandler, GameLifecycleHandler


class RecordingHandler(GameLifecycleHandler, BoardEventHandler):
    """Captures every event as a tuple, in dispatch order."""

    def __init__(self) -> None:
        self.events: list[tuple] = []

    def names(self) -> list[str]:
        return [event[0] for event in self.events]

    def last(self, name: str) -> tuple:
        return next(event for event in reversed(self.events) if event[0] == name)

    def clear(self) -> None:
        self.events.clear()

    def on_game_started(self, level: Level, lives: int) -> None:
        self.events.append(("game_started", level, lives))

    def on_game_stopped(self, total_score: int, completed: bool) -> None:
        self.events.append(("game_stopped", total_score, completed))

    def on_next_level(self, previous_level: Level, previous_score: int, level: Level, total_score: int) -> None:
        self.events.append(("next_level", previous_level, previous_score, level, total_score))

    def on_lives_updated(self, lives: int, max_lives: int) -> None:
        self.events.append(("lives_updated", lives, max_lives))

    def on_score_updated(self, score: int, total_score: int) -> None:
        self.events.append(("score_updated", score, total_score))

    def on_game_paused(self) -> None:
        self.events.append(("game_paused",))

    def on_game_resumed(self) -> None:
        self.events.append(("game_resumed",))

    def on_board_updated(
        self,
        level: Level,
        tiles: TileGrid,
        crates: CrateGrid,
        player: Position,
        deltas: Optional[AbstractSet[CrateDelta]],
    ) -> None:
        self.events.append(("board_updated", level, tiles, crates, player, deltas))


@pytest.fixture
def make_level() -> Callable[..., Level]:
    """Build a level from text rows."""
    counter = iter(range(1, 1000))

    def _make(rows: Sequence[str], level_id: Optional[str] = None) -> Level:
        return Level.from_rows(level_id or f"level_{next(counter)}", list(rows))

    return _make


@pytest.fixture
def recorder() -> RecordingHandler:
    return RecordingHandler()


@pytest.fixture
def make_controller(recorder: RecordingHandler) -> Callable[..., GameController]:
    """Controller over the given levels with the recorder attached to both handler lists."""

    def _make(*levels: Level, starting_lives: int = 3, max_lives: int = 5) -> GameController:
        controller = GameController(
            GameConfiguration(starting_lives=starting_lives, max_lives=max_lives),
            LevelPack(levels=tuple(levels)),
        )
        controller.add_lifecycle_handler(recorder)
        controller.add_board_handler(recorder)
        return controller

    return _make
