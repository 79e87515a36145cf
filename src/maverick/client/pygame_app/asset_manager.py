from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import pygame  # type: ignore[import-not-found]


@dataclass
class Fonts:
    ui: pygame.font.Font
    small: pygame.font.Font
    big: pygame.font.Font


class AssetManager:
    def __init__(self, assets_dir: Path) -> None:
        self.assets_dir = assets_dir
        self._cache: dict[tuple[str, int, int], pygame.Surface] = {}

        pygame.font.init()
        self.fonts = Fonts(
            ui=pygame.font.SysFont(None, 24),
            small=pygame.font.SysFont(None, 18),
            big=pygame.font.SysFont(None, 48),
        )

    def monster_image(self, name: str, size: tuple[int, int]) -> pygame.Surface | None:
        """Portrait from assets/monsters/<name>.png, or None to draw a plain tile."""
        key = (name, size[0], size[1])
        if key in self._cache:
            return self._cache[key]

        path = self.assets_dir / "monsters" / f"{name}.png"
        if not path.exists():
            return None
        try:
            img = pygame.image.load(path.as_posix()).convert_alpha()
        except pygame.error:
            return None
        img = pygame.transform.smoothscale(img, size)
        self._cache[key] = img
        return img
