from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

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
from .cards import discard, refill
from .roster import check_kill, clear_hits, recompute_adjustments
from .session import (
    SessionConfig,
    SessionState,
    StepResult,
    is_victory,
    new_session,
    restart,
    score,
)
from .types import MonsterCatalog, Requirement


@dataclass(frozen=True)
class _Outcome:
    target: int | None = None
    exact: bool = False


_MISS = _Outcome()


def _record_hit(state: SessionState, index: int, requirement: Requirement, num: int) -> _Outcome:
    monster = state.roster[index]
    if not monster.alive:
        state.event_log.append({"type": "TARGET_ALREADY_DEAD", "index": index, "hit": requirement})
        return _MISS
    monster.current_hits.append(requirement)
    exact = num == monster.effective_strength
    state.event_log.append(
        {"type": "HIT", "index": index, "monster": monster.name, "hit": requirement, "exact": exact}
    )
    return _Outcome(target=index, exact=exact)


def _noxious_discard(state: SessionState, index: int) -> None:
    # The played card is already out of the hand, so it can never be the one lost.
    if not state.hand:
        return
    card = state.hand.pop(state.rng.randrange(len(state.hand)))
    state.discarded = True
    state.event_log.append({"type": "NOXIOUS_DISCARD", "index": index, "card": card})


def _move(state: SessionState, action: MoveAction, num: int) -> _Outcome:
    current = state.index_of(action.entity)
    if action.direction == "left":
        new_index = max(0, current - num)
    else:
        new_index = min(state.monster_count - 1, current + num)
    state.set_index(action.entity, new_index)
    state.event_log.append(
        {"type": "MOVED", "entity": action.entity, "from": current, "to": new_index}
    )

    outcome = _record_hit(state, new_index, "Move", num)
    monster = state.roster[new_index]
    if monster.alive and monster.has("Noxious"):
        _noxious_discard(state, new_index)
    return outcome


def _range(state: SessionState, action: RangeAction, num: int) -> _Outcome:
    current = state.index_of(action.entity)
    target = current - num if action.direction == "left" else current + num
    if target < 0 or target >= state.monster_count:
        state.event_log.append(
            {"type": "RANGE_MISSED", "entity": action.entity, "from": current, "target": target}
        )
        return _MISS
    return _record_hit(state, target, "Range", num)


def _melee(state: SessionState, action: MeleeAction, num: int) -> _Outcome:
    index = state.index_of(action.entity)
    strength = state.roster[index].effective_strength
    if num < strength:
        state.event_log.append(
            {"type": "MELEE_TOO_WEAK", "index": index, "card": num, "strength": strength}
        )
        return _MISS
    return _record_hit(state, index, "Melee", num)


def _swap(state: SessionState) -> _Outcome:
    state.companion_kind = "range" if state.companion_kind == "melee" else "melee"
    state.event_log.append({"type": "COMPANION_SWAPPED", "companion": state.companion_kind})
    return _MISS


def _resolve(state: SessionState, action: Action, num: int) -> _Outcome:
    if isinstance(action, MoveAction):
        return _move(state, action, num)
    if isinstance(action, RangeAction):
        return _range(state, action, num)
    if isinstance(action, MeleeAction):
        return _melee(state, action, num)
    if isinstance(action, SwapAction):
        return _swap(state)
    raise AssertionError(f"Unhandled action: {action!r}")


def _apply_kill_check(state: SessionState, outcome: _Outcome) -> None:
    if outcome.target is None:
        return
    monster = state.roster[outcome.target]
    if not check_kill(monster):
        return
    state.event_log.append({"type": "MONSTER_SLAIN", "index": outcome.target, "monster": monster.name})
    if outcome.exact:
        state.trophies += 1
        state.event_log.append({"type": "TROPHY", "index": outcome.target, "trophies": state.trophies})


def _finish_cycle(state: SessionState, end_turn: bool) -> None:
    pending_reset = end_turn

    # Playing out the whole hand without a Noxious discard makes the player Monstrous for good.
    if not state.hand and not state.discarded:
        pending_reset = True
        if state.player_kind != "monstrous":
            state.event_log.append({"type": "BECAME_MONSTROUS"})
        state.player_kind = "monstrous"
        state.hand_limit = state.config.monstrous_hand_limit

    if pending_reset:
        drawn = refill(state.hand, state.deck, state.hand_limit)
        clear_hits(state.roster)
        state.event_log.append({"type": "HAND_REFILLED", "drawn": drawn, "deck_left": len(state.deck)})
        if drawn < state.hand_limit:
            state.event_log.append({"type": "DECK_EMPTY"})

    state.discarded = False

    if not state.hand and not state.deck:
        state.status = "end_game"
        state.event_log.append(
            {"type": "GAME_ENDED", "victory": is_victory(state), "score": score(state).total}
        )


def update(state: SessionState, selected: SelectedInput) -> StepResult:
    """Feed one selected input into the session.

    Combat resolves once both an action and a card are selected; EndTurn
    resolves on its own. This mutates `state` in-place.
    """
    # Log first so replay sees every attempted input
    state.input_log.append(selected)
    before = len(state.event_log)

    if isinstance(selected, ResetRequested):
        state.status = "reset"
        state.pending_action = None
        state.pending_card = None
        state.event_log.append({"type": "RESET_REQUESTED"})
        return StepResult(ok=True, events=state.event_log[before:])

    if state.status != "playing":
        return StepResult(ok=False, events=[], error="Game over. Reset to play again.")

    if isinstance(selected, ActionSelected):
        state.pending_action = selected.action
    elif isinstance(selected, CardSelected):
        state.pending_card = selected.hand_index

    end_turn = False
    outcome = _MISS
    action = state.pending_action
    if isinstance(action, EndTurnAction):
        end_turn = True
        state.pending_action = None
        state.pending_card = None
        state.event_log.append({"type": "TURN_ENDED"})
    elif action is not None and state.pending_card is not None:
        hand_index = state.pending_card
        state.pending_action = None
        state.pending_card = None
        num = discard(state.hand, hand_index)
        state.event_log.append({"type": "CARD_PLAYED", "card": num, "action": type(action).__name__})
        outcome = _resolve(state, action, num)

    _apply_kill_check(state, outcome)
    recompute_adjustments(state.roster)
    _finish_cycle(state, end_turn)
    return StepResult(ok=True, events=state.event_log[before:])


def replay(
    catalog: MonsterCatalog,
    seed: int,
    inputs: Iterable[SelectedInput],
    config: SessionConfig | None = None,
) -> SessionState:
    state = new_session(catalog, seed=seed, config=config)
    for selected in inputs:
        update(state, selected)
        if state.status == "reset":
            state = restart(state)
    return state
