import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from map_loader import AssetManifest
from tile_map import TileMap


@pytest.fixture(scope="session", autouse=True)
def pygame_headless():
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture
def open_map():
    """10x10 tiles of floor, 320x320 px."""
    return TileMap.from_collision_data([0] * 100, cols=10, rows=10, tile_size=32)


def _save_strip(path, frame_w=8, frame_h=8, count=4):
    sheet = pygame.Surface((frame_w * count, frame_h))
    for i in range(count):
        sheet.fill((i * 60, 0, 0), pygame.Rect(i * frame_w, 0, frame_w, frame_h))
    pygame.image.save(sheet, str(path))


@pytest.fixture
def manifest(tmp_path):
    """A 640x480 map (20x15 tiles) with a solid border, plus 4 player strips."""
    cols, rows = 20, 15
    cells = []
    for r in range(rows):
        for c in range(cols):
            cells.append("1" if r in (0, rows - 1) or c in (0, cols - 1) else "-1")
    (tmp_path / "collision.csv").write_text(",".join(cells))

    world = pygame.Surface((cols * 32, rows * 32))
    world.fill((40, 120, 40))
    pygame.image.save(world, str(tmp_path / "map.bmp"))

    images = {}
    for d in ("down", "up", "left", "right"):
        _save_strip(tmp_path / f"player_{d}.bmp")
        images[d] = tmp_path / f"player_{d}.bmp"
    return AssetManifest(collision_csv=tmp_path / "collision.csv",
                         map_image=tmp_path / "map.bmp",
                         player_images=images)
