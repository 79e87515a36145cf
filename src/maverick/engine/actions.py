from __future__ import annotations

from dataclasses import dataclass

from .types import Direction, Entity


@dataclass(frozen=True)
class MoveAction:
    entity: Entity
    direction: Direction


@dataclass(frozen=True)
class RangeAction:
    entity: Entity
    direction: Direction


@dataclass(frozen=True)
class MeleeAction:
    entity: Entity


@dataclass(frozen=True)
class SwapAction:
    pass


@dataclass(frozen=True)
class EndTurnAction:
    pass


Action = MoveAction | RangeAction | MeleeAction | SwapAction | EndTurnAction


@dataclass(frozen=True)
class ActionSelected:
    action: Action


@dataclass(frozen=True)
class CardSelected:
    hand_index: int


@dataclass(frozen=True)
class ResetRequested:
    pass


SelectedInput = ActionSelected | CardSelected | ResetRequested
