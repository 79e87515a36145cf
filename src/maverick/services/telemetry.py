from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Mapping

from maverick.engine.session import SessionState, is_victory, score


@dataclass
class TelemetryService:
    path: Path

    def log(self, event_type: str, payload: Mapping[str, object]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        rec = {
            "ts": datetime.now(tz=timezone.utc).isoformat(),
            "type": event_type,
            "payload": dict(payload),
        }
        with self.path.open("a", encoding="utf-8") as f:
            f.write(json.dumps(rec, ensure_ascii=False) + "\n")

    def game_started(self, state: SessionState) -> None:
        self.log(
            "game_started",
            {
                "seed": state.seed,
                "monsters": [m.name for m in state.roster],
                "companion": state.companion_kind,
                "deck": len(state.deck),
            },
        )

    def game_ended(self, state: SessionState) -> None:
        s = score(state)
        self.log(
            "game_ended",
            {
                "seed": state.seed,
                "victory": is_victory(state),
                "payments": s.payments,
                "trophies": s.trophies,
                "cards_left": s.cards_left,
                "total": s.total,
                "inputs": len(state.input_log),
            },
        )
