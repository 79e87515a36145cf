from __future__ import annotations

import pygame  # type: ignore[import-not-found]

from maverick.engine.actions import (
    Action,
    ActionSelected,
    CardSelected,
    EndTurnAction,
    MeleeAction,
    MoveAction,
    RangeAction,
    ResetRequested,
    SelectedInput,
)
from maverick.engine.resolver import update
from maverick.engine.roster import Monster, reign_warnings
from maverick.engine.session import (
    Event,
    SessionState,
    available_actions,
    is_victory,
    restart,
    score,
)

from ..app import GameContext, SceneTransition
from ..ui import RED, Button, draw_centered, draw_text

PADDING = 10

_EVENT_TEXT: dict[str, str] = {
    "RANGE_MISSED": "Out of range, card spent.",
    "MELEE_TOO_WEAK": "Too weak, card spent.",
    "TARGET_ALREADY_DEAD": "Already slain.",
    "NOXIOUS_DISCARD": "Noxious! A card was lost.",
    "MONSTER_SLAIN": "Monster slain!",
    "TROPHY": "Trophy!",
    "BECAME_MONSTROUS": "You became Monstrous.",
    "DECK_EMPTY": "The deck is empty.",
}


def _arrow(direction: str) -> str:
    return "<" if direction == "left" else ">"


def action_label(action: Action) -> str:
    if isinstance(action, MoveAction):
        return f"Move {_arrow(action.direction)}"
    if isinstance(action, RangeAction):
        return f"Range {_arrow(action.direction)}"
    if isinstance(action, MeleeAction):
        return "Melee"
    if isinstance(action, EndTurnAction):
        return "End turn"
    return "Swap"


def describe(events: list[Event]) -> str:
    parts = [_EVENT_TEXT[str(ev["type"])] for ev in events if str(ev.get("type")) in _EVENT_TEXT]
    return " ".join(parts)


class DungeonScene:
    def __init__(self, ctx: GameContext, state: SessionState) -> None:
        self.ctx = ctx
        self.state = state
        self._message = ""
        self._reported_end = False
        self._buttons: list[Button] = []
        self._cards: list[Button] = []
        self._rebuild()

    # --- layout -------------------------------------------------------

    def _tile_size(self) -> tuple[int, int]:
        n = self.state.monster_count
        w = min(96, (self.ctx.screen.get_width() - PADDING * (n + 1)) // n)
        return w, int(w * 1.3)

    def _col_x(self, index: int) -> int:
        w, _ = self._tile_size()
        return PADDING + index * (w + PADDING)

    def _rows(self) -> dict[str, int]:
        _, h = self._tile_size()
        monsters = 110
        companion = monsters + h + 28
        controls = companion + 70
        hand = controls + 100
        return {"player": 20, "monsters": monsters, "companion": companion, "controls": controls, "hand": hand}

    # --- input --------------------------------------------------------

    def _submit(self, selected: SelectedInput) -> None:
        res = update(self.state, selected)
        if not res.ok:
            self._message = res.error or "Invalid input."
        else:
            self._message = describe(res.events)
        self._rebuild()

    def _rebuild(self) -> None:
        rows = self._rows()
        buttons: list[Button] = []

        if self.state.status != "playing":
            screen_w = self.ctx.screen.get_width()
            buttons.append(
                Button(
                    rect=pygame.Rect(screen_w // 2 - 150, 560, 300, 56),
                    text="Click to reset..",
                    on_click=lambda: self._submit(ResetRequested()),
                )
            )
            self._buttons = buttons
            self._cards = []
            return

        cursor = {"character": PADDING + 110, "companion": PADDING + 110}
        top = {"character": rows["controls"], "companion": rows["controls"] + 46}
        for action in available_actions(self.state):
            # Swap and End turn have no entity and sit on the companion row
            row = getattr(action, "entity", "companion")
            rect = pygame.Rect(cursor[row], top[row], 100, 38)
            cursor[row] += 108
            buttons.append(
                Button(
                    rect=rect,
                    text=action_label(action),
                    on_click=lambda a=action: self._submit(ActionSelected(a)),
                    selected=self.state.pending_action == action,
                )
            )

        # The hand is shown sorted; each button still selects its real hand index
        order = sorted(range(len(self.state.hand)), key=lambda i: self.state.hand[i])
        cards: list[Button] = []
        for slot, hand_index in enumerate(order):
            cards.append(
                Button(
                    rect=pygame.Rect(PADDING + slot * 80, rows["hand"], 70, 96),
                    text=str(self.state.hand[hand_index]),
                    on_click=lambda i=hand_index: self._submit(CardSelected(i)),
                    selected=self.state.pending_card == hand_index,
                    fill=(30, 30, 44),
                )
            )
        self._buttons = buttons
        self._cards = cards

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.KEYDOWN and event.key == pygame.K_r:
            self._submit(ResetRequested())
            return
        for button in self._buttons + self._cards:
            if button.handle_event(event):
                return

    # --- frame --------------------------------------------------------

    def update(self, dt: float) -> SceneTransition | None:
        if self.state.status == "end_game" and not self._reported_end:
            self._reported_end = True
            self.ctx.telemetry.game_ended(self.state)

        if self.state.status == "reset":
            self.ctx.telemetry.log("restart", {"previous_seed": self.state.seed})
            self.state = restart(self.state)
            self.ctx.telemetry.game_started(self.state)
            self._reported_end = False
            self._message = ""
            self._rebuild()
        return None

    def render(self, screen: pygame.Surface) -> None:
        screen.fill((0, 0, 0))
        if self.state.status == "end_game":
            self._draw_game_over(screen)
        else:
            self._draw_board(screen)
        fonts = self.ctx.assets.fonts
        for button in self._buttons:
            button.draw(screen, fonts.ui)
        for card in self._cards:
            card.draw(screen, fonts.big)

    def _draw_token(self, screen: pygame.Surface, index: int, y: int, label: str, color: tuple[int, int, int]) -> None:
        w, _ = self._tile_size()
        rect = pygame.Rect(self._col_x(index), y, w, 60)
        pygame.draw.rect(screen, color, rect, border_radius=10)
        draw_centered(screen, self.ctx.assets.fonts.small, label, rect)

    def _draw_offsets(self, screen: pygame.Surface, origin: int, y: int) -> None:
        # Distances 1..5 help count card values along the row
        font = self.ctx.assets.fonts.small
        for i in range(self.state.monster_count):
            offset = abs(origin - i)
            if 0 < offset <= 5:
                draw_text(screen, font, str(offset), (self._col_x(i), y))

    def _draw_monster(self, screen: pygame.Surface, index: int, monster: Monster, y: int) -> None:
        fonts = self.ctx.assets.fonts
        w, h = self._tile_size()
        rect = pygame.Rect(self._col_x(index), y, w, h)

        if not monster.alive:
            pygame.draw.rect(screen, (24, 24, 70), rect, border_radius=8)
            draw_centered(screen, fonts.small, "slain", rect, color=(120, 120, 160))
            return

        image = self.ctx.assets.monster_image(monster.name, (w, h))
        if image is not None:
            screen.blit(image, rect.topleft)
        else:
            pygame.draw.rect(screen, (52, 34, 34), rect, border_radius=8)
        pygame.draw.rect(screen, (0, 0, 0), rect, width=2, border_radius=8)

        draw_text(screen, fonts.small, monster.name, (rect.x + 4, rect.y + 4))
        draw_text(screen, fonts.ui, str(monster.archetype.strength), (rect.x + 4, rect.y + 22))
        if monster.strength_adjustment > 0:
            draw_text(screen, fonts.ui, f"+{monster.strength_adjustment}", (rect.x + 24, rect.y + 22), color=RED)
        if monster.ability is not None:
            draw_text(screen, fonts.small, monster.ability, (rect.x + 4, rect.y + 46), color=(200, 180, 240))
        need = " ".join(r[:2] for r in monster.archetype.to_slay)
        draw_text(screen, fonts.small, need, (rect.x + 4, rect.bottom - 36), color=(180, 180, 180))
        if monster.current_hits:
            hits = " ".join(r[:2] for r in monster.current_hits)
            draw_text(screen, fonts.small, hits, (rect.x + 4, rect.bottom - 18), color=(120, 160, 255))

    def _draw_board(self, screen: pygame.Surface) -> None:
        fonts = self.ctx.assets.fonts
        rows = self._rows()
        w, h = self._tile_size()

        kind = "Monstrous" if self.state.player_kind == "monstrous" else "Hero"
        self._draw_token(screen, self.state.player_index, rows["player"], kind, (90, 60, 30))
        self._draw_offsets(screen, self.state.player_index, rows["monsters"] - 20)

        for i, monster in enumerate(self.state.roster):
            self._draw_monster(screen, i, monster, rows["monsters"])
        for warn in reign_warnings(self.state.roster):
            x = self._col_x(warn.index) + (0 if warn.side == "left" else w - 14)
            draw_text(screen, fonts.ui, "!", (x + 4, rows["monsters"] + h // 2), color=(250, 210, 60))

        self._draw_offsets(screen, self.state.companion_index, rows["monsters"] + h + 4)
        companion = "Melee pal" if self.state.companion_kind == "melee" else "Range pal"
        self._draw_token(screen, self.state.companion_index, rows["companion"], companion, (30, 70, 60))

        draw_text(screen, fonts.ui, kind, (PADDING, rows["controls"] + 10))
        draw_text(screen, fonts.ui, "Companion", (PADDING, rows["controls"] + 56))

        info_x = PADDING + 80 * 7
        draw_text(screen, fonts.ui, f"Deck left: {len(self.state.deck)}", (info_x, rows["hand"]))
        draw_text(screen, fonts.ui, f"Trophies: {self.state.trophies}", (info_x, rows["hand"] + 28))
        draw_text(screen, fonts.ui, f"Payments: {self.state.payments}", (info_x, rows["hand"] + 56))
        if self._message:
            draw_text(screen, fonts.ui, self._message, (info_x + 200, rows["hand"]), color=(240, 200, 120))

    def _draw_game_over(self, screen: pygame.Surface) -> None:
        fonts = self.ctx.assets.fonts
        s = score(self.state)
        lines = [
            "Game over!",
            "YOU WON!" if is_victory(self.state) else "YOU LOST!",
            "",
            "Score:",
            f"Payments:   {s.payments * 3} ({s.payments} * 3)",
            f"Trophies:   {s.trophies * 2} ({s.trophies} * 2)",
            f"Cards left: {s.cards_left} (hand: {len(self.state.hand)} deck: {len(self.state.deck)})",
            f"Total:      {s.total}",
        ]
        y = 60
        for line in lines:
            draw_text(screen, fonts.big, line, (PADDING, y), color=RED)
            y += 56
