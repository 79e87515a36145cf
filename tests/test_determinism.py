from __future__ import annotations

import random

from maverick.engine.actions import ActionSelected, CardSelected, EndTurnAction, SelectedInput, SwapAction
from maverick.engine.resolver import replay, update
from maverick.engine.serialize import snapshot
from maverick.engine.session import SessionState, available_actions, new_session
from maverick.paths import get_paths
from maverick.services.content import ContentService


def _load_catalog():
    paths = get_paths()
    content = ContentService(paths.data_dir, paths.schema_dir)
    return content.load_catalog()


def _choose_inputs(state: SessionState, chooser: random.Random) -> list[SelectedInput]:
    if not state.hand:
        # Any click lets the engine notice the empty hand and refill it
        return [ActionSelected(SwapAction())]
    if chooser.random() < 0.1:
        return [ActionSelected(EndTurnAction())]
    actions = [a for a in available_actions(state) if not isinstance(a, EndTurnAction)]
    return [
        ActionSelected(chooser.choice(actions)),
        CardSelected(chooser.randrange(len(state.hand))),
    ]


def _play_out(seed: int) -> SessionState:
    state = new_session(_load_catalog(), seed=seed)
    chooser = random.Random(seed * 31 + 1)
    for _ in range(1000):
        if state.status != "playing":
            break
        for selected in _choose_inputs(state, chooser):
            update(state, selected)
    return state


def test_engine_determinism_replay() -> None:
    seed = 424242
    state1 = _play_out(seed)
    snap1 = snapshot(state1)

    state2 = replay(_load_catalog(), seed=seed, inputs=list(state1.input_log))
    snap2 = snapshot(state2)

    assert snap1 == snap2


def test_session_invariants_hold_through_random_play() -> None:
    catalog = _load_catalog()
    for seed in range(6):
        state = new_session(catalog, seed=seed)
        chooser = random.Random(seed)
        cards_total = len(state.hand) + len(state.deck)
        assert cards_total == 40 - state.payments
        hand_limit = state.hand_limit
        dead: set[int] = set()

        for _ in range(1000):
            if state.status != "playing":
                break
            for selected in _choose_inputs(state, chooser):
                update(state, selected)

                assert len(state.hand) <= state.hand_limit
                assert state.hand_limit >= hand_limit
                assert state.hand_limit in (5, 6)
                hand_limit = state.hand_limit

                total = len(state.hand) + len(state.deck)
                assert total <= cards_total
                cards_total = total

                for i, m in enumerate(state.roster):
                    assert m.effective_strength >= 0
                    if not m.alive:
                        assert m.current_hits == []
                        dead.add(i)
                    else:
                        assert i not in dead

        assert state.status == "end_game"
        assert state.hand == [] and state.deck == []
