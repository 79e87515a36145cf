from __future__ import annotations

import traceback

import pygame  # type: ignore[import-not-found]

from maverick.engine.session import SessionConfig, new_session
from maverick.services.content import ContentError

from ..app import GameContext, SceneTransition
from ..ui import RED, Button, draw_text
from .dungeon import DungeonScene


class BootScene:
    def __init__(self, ctx: GameContext) -> None:
        self.ctx = ctx
        self._did_boot = False
        self._error: str | None = None
        self._quit_button: Button | None = None

    def handle_event(self, event: pygame.event.Event) -> None:
        if self._quit_button is not None:
            self._quit_button.handle_event(event)

    def update(self, dt: float) -> SceneTransition | None:
        if self._did_boot:
            return None
        self._did_boot = True
        try:
            self.ctx.catalog = self.ctx.content.load_catalog()
            config = SessionConfig(monster_count=self.ctx.monster_count)
            state = new_session(self.ctx.catalog, seed=self.ctx.seed, config=config)
        except (ContentError, ValueError) as e:
            tb = traceback.format_exc(limit=8)
            self._error = f"{e}\n\n{tb}"
            self.ctx.telemetry.log("boot", {"ok": False, "error": str(e)})
            self._quit_button = Button(
                rect=pygame.Rect(20, self.ctx.screen.get_height() - 64, 140, 44),
                text="Quit",
                on_click=lambda: pygame.event.post(pygame.event.Event(pygame.QUIT)),
            )
            return None

        self.ctx.telemetry.log("boot", {"ok": True, "monsters": len(self.ctx.catalog)})
        self.ctx.telemetry.game_started(state)
        return SceneTransition(DungeonScene(self.ctx, state))

    def render(self, screen: pygame.Surface) -> None:
        screen.fill((0, 0, 0))
        fonts = self.ctx.assets.fonts
        if self._error is None:
            draw_text(screen, fonts.big, "Loading Maverick...", (10, 150), color=RED)
            return

        draw_text(screen, fonts.big, "Maverick", (20, 20))
        draw_text(screen, fonts.ui, "BOOT ERROR", (20, 80), color=RED)
        y = 120
        for line in self._error.splitlines()[:22]:
            draw_text(screen, fonts.small, line[:120], (20, y))
            y += 18
        if self._quit_button is not None:
            self._quit_button.draw(screen, fonts.ui)
