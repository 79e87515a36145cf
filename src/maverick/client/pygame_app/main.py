from __future__ import annotations

import argparse
import random

import pygame  # type: ignore[import-not-found]

from maverick.engine.session import SessionConfig
from maverick.paths import get_paths
from maverick.services.content import ContentService
from maverick.services.telemetry import TelemetryService

from .app import App, GameContext
from .asset_manager import AssetManager
from .scenes.boot import BootScene


def main() -> int:
    parser = argparse.ArgumentParser(prog="maverick")
    parser.add_argument("--width", type=int, default=1360)
    parser.add_argument("--height", type=int, default=720)
    parser.add_argument("--seed", type=int, default=None, help="seed for a reproducible dungeon")
    parser.add_argument("--monsters", type=int, default=SessionConfig().monster_count)
    args = parser.parse_args()

    seed = args.seed if args.seed is not None else random.SystemRandom().randrange(2**32)

    pygame.init()
    screen = pygame.display.set_mode((args.width, args.height))
    pygame.display.set_caption("Maverick")

    clock = pygame.time.Clock()
    paths = get_paths()

    ctx = GameContext(
        screen=screen,
        clock=clock,
        paths=paths,
        assets=AssetManager(assets_dir=paths.assets_dir),
        content=ContentService(data_dir=paths.data_dir, schema_dir=paths.schema_dir),
        telemetry=TelemetryService(paths.userdata_dir / "telemetry.jsonl"),
        seed=seed,
        monster_count=args.monsters,
    )

    app = App(ctx, BootScene(ctx))
    return app.run()


if __name__ == "__main__":
    raise SystemExit(main())
