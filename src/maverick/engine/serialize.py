from __future__ import annotations


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
from .roster import Monster
from .session import SessionState


def action_to_dict(a: Action) -> dict[str, object]:
    if isinstance(a, MoveAction):
        return {"type": "move", "entity": a.entity, "direction": a.direction}
    if isinstance(a, RangeAction):
        return {"type": "range", "entity": a.entity, "direction": a.direction}
    if isinstance(a, MeleeAction):
        return {"type": "melee", "entity": a.entity}
    if isinstance(a, SwapAction):
        return {"type": "swap"}
    if isinstance(a, EndTurnAction):
        return {"type": "end_turn"}
    # should be unreachable
    return {"type": "unknown"}


def input_to_dict(i: SelectedInput) -> dict[str, object]:
    if isinstance(i, ActionSelected):
        return {"type": "action", "action": action_to_dict(i.action)}
    if isinstance(i, CardSelected):
        return {"type": "card", "hand_index": i.hand_index}
    if isinstance(i, ResetRequested):
        return {"type": "reset"}
    return {"type": "unknown"}


def _monster_to_dict(m: Monster) -> dict[str, object]:
    return {
        "name": m.name,
        "alive": m.alive,
        "strength": m.archetype.strength,
        "strength_adjustment": m.strength_adjustment,
        "ability": m.ability,
        "current_hits": list(m.current_hits),
    }


def snapshot(state: SessionState) -> dict[str, object]:
    """Return a JSON-serializable canonical snapshot of the current session."""
    return {
        "seed": state.seed,
        "status": state.status,
        "roster": [_monster_to_dict(m) for m in state.roster],
        "player_index": state.player_index,
        "player_kind": state.player_kind,
        "companion_index": state.companion_index,
        "companion_kind": state.companion_kind,
        "deck": list(state.deck),
        "hand": list(state.hand),
        "hand_limit": state.hand_limit,
        "payments": state.payments,
        "trophies": state.trophies,
        "input_log": [input_to_dict(i) for i in state.input_log],
    }
