"""Deterministic, headless turn resolution engine for Maverick.

IMPORTANT: This package must never import pygame.
"""

from .actions import (
    Action,
    ActionSelected,
    CardSelected,
    EndTurnAction,
    MeleeAction,
    MoveAction,
    RangeAction,
    ResetRequested,
    SelectedInput,
    SwapAction,
)
from .resolver import replay, update
from .serialize import snapshot
from .session import (
    ScoreBreakdown,
    SessionConfig,
    SessionState,
    StepResult,
    available_actions,
    is_victory,
    new_session,
    restart,
    score,
)
from .types import Ability, MonsterArchetype, MonsterCatalog, Requirement

__all__ = [
    "Ability",
    "Action",
    "ActionSelected",
    "CardSelected",
    "EndTurnAction",
    "MeleeAction",
    "MonsterArchetype",
    "MonsterCatalog",
    "MoveAction",
    "RangeAction",
    "Requirement",
    "ResetRequested",
    "ScoreBreakdown",
    "SelectedInput",
    "SessionConfig",
    "SessionState",
    "StepResult",
    "SwapAction",
    "available_actions",
    "is_victory",
    "new_session",
    "replay",
    "restart",
    "score",
    "snapshot",
    "update",
]
