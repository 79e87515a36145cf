from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

import pygame  # type: ignore[import-not-found]


Color = tuple[int, int, int]

WHITE: Color = (240, 240, 240)
GREEN: Color = (70, 200, 90)
RED: Color = (230, 70, 70)


def draw_text(
    screen: pygame.Surface,
    font: pygame.font.Font,
    text: str,
    pos: tuple[int, int],
    color: Color = WHITE,
) -> None:
    img = font.render(text, True, color)
    screen.blit(img, pos)


def draw_centered(
    screen: pygame.Surface,
    font: pygame.font.Font,
    text: str,
    rect: pygame.Rect,
    color: Color = WHITE,
) -> None:
    img = font.render(text, True, color)
    screen.blit(img, img.get_rect(center=rect.center).topleft)


@dataclass
class Button:
    rect: pygame.Rect
    text: str
    on_click: Callable[[], None]
    selected: bool = False
    fill: Color = (60, 60, 60)

    def handle_event(self, event: pygame.event.Event) -> bool:
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                self.on_click()
                return True
        return False

    def draw(self, screen: pygame.Surface, font: pygame.font.Font) -> None:
        pygame.draw.rect(screen, self.fill, self.rect, border_radius=6)
        # Selected inputs are outlined red, everything else clickable is green
        outline = RED if self.selected else GREEN
        pygame.draw.rect(screen, outline, self.rect, width=3 if self.selected else 2, border_radius=6)
        draw_centered(screen, font, self.text, self.rect)
