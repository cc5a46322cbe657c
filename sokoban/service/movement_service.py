"""
Movement Service: oyuncunun tek adımlık hamlesini çözen servis.
SOLID - Single Responsibility: Sadece hamle kurallarından sorumlu.

4 Yönlü Hareket:
- Yukarı (UP): (0, -1)
- Aşağı (DOWN): (0, 1)
- Sol (LEFT): (-1, 0)
- Sağ (RIGHT): (1, 0)
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

from sokoban.model.board import BoardState
from sokoban.model.position import CrateDelta
from sokoban.service.powerup_service import PowerupService, PowerupSet, PowerupType

logger = logging.getLogger(__name__)


class MoveDirection(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


@dataclass(frozen=True)
class MoveResult:
    accepted: bool
    deltas: frozenset[CrateDelta] = field(default_factory=frozenset)


REJECTED = MoveResult(accepted=False)


class MovementService:
    """
    Hamle çözücü. Board'u sadece resolve() süresince değiştirir, referans tutmaz.

    Sıra önemlidir: sınır, duvar (GHOST), önündeki kasa (STRENGTH),
    arkadaki kasa (PULL), en son oyuncu pozisyonu.
    """

    @staticmethod
    def resolve(board: BoardState, powerups: PowerupSet, direction: MoveDirection) -> MoveResult:
        """
        Hamleyi uygular.

        Args:
            board: Aktif levelin board'u (yerinde değiştirilir)
            powerups: Aktif power-up'lar (tüketilenler çıkarılır)
            direction: Hamle yönü

        Returns:
            MoveResult: Kabul edildiyse taşınan kasaların delta seti
        """
        dx, dy = direction.dx, direction.dy
        origin = board.player
        target = origin.offset(dx, dy)

        if not board.is_inside(target):
            return REJECTED

        if board.is_wall(target) and PowerupType.GHOST not in powerups:
            return REJECTED
        # GHOST aktifken duvar olsun olmasın her hamlede harcanır
        PowerupService.consume(powerups, PowerupType.GHOST)

        deltas: set[CrateDelta] = set()

        if board.has_crate(target):
            beyond = target.offset(dx, dy)
            if not board.is_inside(beyond) or board.is_wall(beyond):
                logger.debug(f"Push blocked at {beyond.as_tuple()}")
                return REJECTED

            if board.has_crate(beyond):
                if PowerupType.STRENGTH not in powerups:
                    logger.debug(f"Stacked crate at {beyond.as_tuple()}, STRENGTH not active")
                    return REJECTED
                far = beyond.offset(dx, dy)
                if not board.is_inside(far) or board.is_wall(far) or board.has_crate(far):
                    logger.debug(f"Stacked push blocked at {far.as_tuple()}")
                    return REJECTED
                PowerupService.consume(powerups, PowerupType.STRENGTH)
                board.move_crate(beyond, far)
                deltas.add(CrateDelta(beyond, far))

            board.move_crate(target, beyond)
            deltas.add(CrateDelta(target, beyond))

        if PowerupType.PULL in powerups:
            behind = origin.offset(-dx, -dy)
            if board.has_crate(behind):
                PowerupService.consume(powerups, PowerupType.PULL)
                board.move_crate(behind, origin)
                deltas.add(CrateDelta(behind, origin))

        board.player = target
        return MoveResult(accepted=True, deltas=frozenset(deltas))
