# sprite_loader.py
from typing import Dict, List

import pygame

from constants import PLAYER_FRAMES


def slice_strip(sheet: pygame.Surface, count: int = PLAYER_FRAMES) -> List[pygame.Surface]:
    """Split a horizontal strip into `count` equal-width frames."""
    count = max(1, count)
    fw = sheet.get_width() // count
    fh = sheet.get_height()
    if fw <= 0 or fh <= 0:
        return [sheet]
    frames = []
    for i in range(count):
        frame = pygame.Surface((fw, fh), pygame.SRCALPHA)
        frame.blit(sheet, (0, 0), pygame.Rect(i * fw, 0, fw, fh))
        frames.append(frame)
    return frames


def load_player_animations(images: Dict[str, pygame.Surface],
                           count: int = PLAYER_FRAMES) -> Dict[str, List[pygame.Surface]]:
    """{direction: [frames]} from one strip per facing."""
    return {direction: slice_strip(sheet, count) for direction, sheet in images.items()}


def prepare_surface(surf: pygame.Surface) -> pygame.Surface:
    """convert_alpha() needs a display mode; skip it when running headless."""
    if pygame.display.get_init() and pygame.display.get_surface() is not None:
        return surf.convert_alpha()
    return surf
