from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Literal

Ability = Literal["Noxious", "Rally", "Reign"]
Requirement = Literal["Melee", "Range", "Move"]

Entity = Literal["character", "companion"]
Direction = Literal["left", "right"]

PlayerKind = Literal["regular", "monstrous"]
CompanionKind = Literal["melee", "range"]
GameStatus = Literal["playing", "end_game", "reset"]


@dataclass(frozen=True)
class MonsterArchetype:
    name: str
    strength: int
    to_slay: tuple[Requirement, ...]
    ability: Ability | None = None


@dataclass(frozen=True)
class MonsterCatalog:
    """Immutable monster catalog used by the engine."""

    archetypes: tuple[MonsterArchetype, ...]

    def __len__(self) -> int:
        return len(self.archetypes)

    def get(self, name: str) -> MonsterArchetype:
        for arch in self.archetypes:
            if arch.name == name:
                return arch
        raise KeyError(name)

    def names(self) -> Sequence[str]:
        return [a.name for a in self.archetypes]
