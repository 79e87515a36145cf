from __future__ import annotations

import random
from collections import Counter
from dataclasses import dataclass, field
from typing import Literal, Sequence

from .types import Ability, MonsterArchetype, MonsterCatalog, Requirement


@dataclass
class Monster:
    archetype: MonsterArchetype
    alive: bool = True
    strength_adjustment: int = 0
    current_hits: list[Requirement] = field(default_factory=list)

    @property
    def name(self) -> str:
        return self.archetype.name

    @property
    def ability(self) -> Ability | None:
        return self.archetype.ability

    @property
    def effective_strength(self) -> int:
        return self.archetype.strength + self.strength_adjustment

    def has(self, ability: Ability) -> bool:
        return self.archetype.ability == ability


@dataclass(frozen=True)
class ReignWarning:
    """A living Reign monster whose weaker neighbour should fall first."""

    index: int
    neighbor: int
    side: Literal["left", "right"]


def build_roster(catalog: MonsterCatalog, count: int, rng: random.Random) -> list[Monster]:
    """Draw `count` distinct archetypes, in draw order.

    Duplicates are rejected and re-rolled, so each slot is independent of
    archetype strength.
    """
    if count > len(catalog):
        raise ValueError(f"Cannot draw {count} monsters from a catalog of {len(catalog)}.")

    picked: list[int] = []
    while len(picked) < count:
        idx = rng.randrange(len(catalog))
        if idx in picked:
            continue
        picked.append(idx)
    return [Monster(archetype=catalog.archetypes[i]) for i in picked]


def recompute_adjustments(roster: Sequence[Monster]) -> None:
    for m in roster:
        m.strength_adjustment = 0
    last = len(roster) - 1
    for i, m in enumerate(roster):
        if not m.alive or not m.has("Rally"):
            continue
        if i > 0:
            roster[i - 1].strength_adjustment += 1
        if i < last:
            roster[i + 1].strength_adjustment += 1


def remaining_requirements(monster: Monster) -> Counter[Requirement]:
    needed = Counter(monster.archetype.to_slay)
    needed.subtract(monster.current_hits)
    return +needed


def check_kill(monster: Monster) -> bool:
    """Kill the monster if its hits cover every requirement.

    Returns True only on the transition from alive to dead.
    """
    if not monster.alive:
        return False
    if remaining_requirements(monster):
        return False
    monster.alive = False
    monster.current_hits.clear()
    return True


def clear_hits(roster: Sequence[Monster]) -> None:
    for m in roster:
        m.current_hits.clear()


def reign_warnings(roster: Sequence[Monster]) -> list[ReignWarning]:
    out: list[ReignWarning] = []
    for i, m in enumerate(roster):
        if not m.alive or not m.has("Reign"):
            continue
        strength = m.effective_strength
        if i > 0:
            left = roster[i - 1]
            if left.alive and left.effective_strength < strength:
                out.append(ReignWarning(index=i, neighbor=i - 1, side="left"))
        if i < len(roster) - 1:
            right = roster[i + 1]
            if right.alive and right.effective_strength < strength:
                out.append(ReignWarning(index=i, neighbor=i + 1, side="right"))
    return out
