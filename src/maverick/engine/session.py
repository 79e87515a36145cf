from __future__ import annotations

import random
from dataclasses import dataclass, field

from .actions import (
    Action,
    EndTurnAction,
    MeleeAction,
    MoveAction,
    RangeAction,
    SelectedInput,
    SwapAction,
)
from .cards import build_deck, refill
from .roster import Monster, build_roster, recompute_adjustments
from .types import CompanionKind, Entity, GameStatus, MonsterCatalog, PlayerKind

Event = dict[str, object]


@dataclass(frozen=True)
class SessionConfig:
    monster_count: int = 13
    hand_limit: int = 5
    monstrous_hand_limit: int = 6
    payments: int = 1
    card_values: tuple[int, ...] = (1, 2, 3, 4, 5)
    copies_per_value: int = 8


@dataclass
class StepResult:
    ok: bool
    events: list[Event]
    error: str | None = None


@dataclass(frozen=True)
class ScoreBreakdown:
    payments: int
    trophies: int
    cards_left: int
    total: int


@dataclass
class SessionState:
    catalog: MonsterCatalog
    config: SessionConfig
    seed: int
    rng: random.Random
    roster: list[Monster]
    deck: list[int]
    hand: list[int]
    hand_limit: int
    companion_kind: CompanionKind
    payments: int
    player_index: int = 0
    companion_index: int = 0
    player_kind: PlayerKind = "regular"
    status: GameStatus = "playing"
    pending_action: Action | None = None
    pending_card: int | None = None
    discarded: bool = False
    trophies: int = 0
    input_log: list[SelectedInput] = field(default_factory=list)
    event_log: list[Event] = field(default_factory=list)

    @property
    def monster_count(self) -> int:
        return len(self.roster)

    def index_of(self, entity: Entity) -> int:
        return self.player_index if entity == "character" else self.companion_index

    def set_index(self, entity: Entity, index: int) -> None:
        if entity == "character":
            self.player_index = index
        else:
            self.companion_index = index


def _validate_config(catalog: MonsterCatalog, cfg: SessionConfig) -> None:
    if cfg.monster_count < 1 or cfg.monster_count > len(catalog):
        raise ValueError(f"monster_count must be between 1 and {len(catalog)}.")
    if cfg.hand_limit < 1 or cfg.monstrous_hand_limit < cfg.hand_limit:
        raise ValueError("monstrous_hand_limit must be at least hand_limit, which must be positive.")
    deck_size = len(cfg.card_values) * cfg.copies_per_value
    if cfg.payments < 0 or cfg.payments > deck_size:
        raise ValueError(f"payments must be between 0 and {deck_size}.")


def new_session(
    catalog: MonsterCatalog,
    seed: int,
    config: SessionConfig | None = None,
) -> SessionState:
    cfg = config or SessionConfig()
    _validate_config(catalog, cfg)

    rng = random.Random(seed)
    roster = build_roster(catalog, cfg.monster_count, rng)
    companion_kind: CompanionKind = rng.choice(("melee", "range"))
    deck = build_deck(rng, values=cfg.card_values, copies=cfg.copies_per_value, payments=cfg.payments)

    hand: list[int] = []
    refill(hand, deck, cfg.hand_limit)
    recompute_adjustments(roster)

    state = SessionState(
        catalog=catalog,
        config=cfg,
        seed=seed,
        rng=rng,
        roster=roster,
        deck=deck,
        hand=hand,
        hand_limit=cfg.hand_limit,
        companion_kind=companion_kind,
        payments=cfg.payments,
    )
    state.event_log.append(
        {
            "type": "GAME_STARTED",
            "seed": seed,
            "monsters": [m.name for m in roster],
            "companion": companion_kind,
        }
    )
    return state


def restart(state: SessionState) -> SessionState:
    """Start a brand-new session, seeded from the previous session's rng."""
    return new_session(state.catalog, seed=state.rng.randrange(2**32), config=state.config)


def score(state: SessionState) -> ScoreBreakdown:
    cards_left = len(state.hand) + len(state.deck)
    total = state.payments * 3 + state.trophies * 2 + cards_left
    return ScoreBreakdown(
        payments=state.payments,
        trophies=state.trophies,
        cards_left=cards_left,
        total=total,
    )


def is_victory(state: SessionState) -> bool:
    return not any(m.alive for m in state.roster)


def available_actions(state: SessionState) -> list[Action]:
    """Actions the client offers for the current board.

    The resolver accepts any action; this only mirrors what the board shows.
    """
    last = state.monster_count - 1
    out: list[Action] = []

    if state.player_index > 0:
        out.append(RangeAction("character", "left"))
        out.append(MoveAction("character", "left"))
    if state.player_index < last:
        out.append(RangeAction("character", "right"))
        out.append(MoveAction("character", "right"))
    out.append(MeleeAction("character"))

    ranged = state.companion_kind == "range"
    if state.companion_index > 0:
        if ranged:
            out.append(RangeAction("companion", "left"))
        out.append(MoveAction("companion", "left"))
    if state.companion_index < last:
        if ranged:
            out.append(RangeAction("companion", "right"))
        out.append(MoveAction("companion", "right"))
    if not ranged:
        out.append(MeleeAction("companion"))

    out.append(SwapAction())
    out.append(EndTurnAction())
    return out
