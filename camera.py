# camera.py
from typing import Tuple

from constants import CAMERA_ZOOM


class Camera:
    """Follows the player at a fixed zoom, never showing past the map edges."""
    def __init__(self, scale: float = CAMERA_ZOOM):
        self.x = 0.0
        self.y = 0.0
        self.scale = scale

    def view_size(self, screen_w: int, screen_h: int) -> Tuple[float, float]:
        return screen_w / self.scale, screen_h / self.scale

    def update(self, player, map_w: int, map_h: int, screen_w: int, screen_h: int) -> None:
        view_w, view_h = self.view_size(screen_w, screen_h)
        cx, cy = player.center
        # if the map is smaller than the view, the clamp collapses to 0
        self.x = max(0.0, min(cx - view_w / 2, map_w - view_w))
        self.y = max(0.0, min(cy - view_h / 2, map_h - view_h))

    def world_to_screen(self, x: float, y: float) -> Tuple[float, float]:
        return (x - self.x) * self.scale, (y - self.y) * self.scale
