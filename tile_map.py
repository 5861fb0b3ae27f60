# tile_map.py
from __future__ import annotations
import logging
import math
from typing import Iterator, Sequence, Tuple

import numpy as np
import pygame

from constants import TILE, DEBUG_TILE

log = logging.getLogger(__name__)


class TileMap:
    """
    Grid of tile ids over the map image, answering "is this pixel blocked?".
    Ids > 0 are solid, ids <= 0 are floor, NaN (unparseable CSV cell) is solid.
    Anything outside the grid is solid too; that is what keeps the player on the map.
    """
    def __init__(self, cells: np.ndarray, tile_size: int = TILE) -> None:
        if cells.ndim != 2:
            raise ValueError(f"collision cells must be 2D, got shape {cells.shape}")
        self.tile_size = tile_size
        self.rows, self.cols = cells.shape
        self.width = self.cols * tile_size
        self.height = self.rows * tile_size
        self.cells = cells.astype(float)
        self.cells.flags.writeable = False
        # NaN <= 0 is False, so malformed cells end up blocked
        self.blocked = ~(self.cells <= 0)
        self.blocked.flags.writeable = False

    @classmethod
    def from_collision_data(cls, data: Sequence[float], cols: int, rows: int,
                            tile_size: int = TILE) -> "TileMap":
        """Build from a flat row-major sequence (index = row*cols + col)."""
        flat = np.asarray(data, dtype=float).ravel()
        need = cols * rows
        if flat.size != need:
            log.warning("[TileMap] collision data has %d cells, grid is %dx%d (%d); "
                        "missing cells are blocked, extra cells ignored",
                        flat.size, cols, rows, need)
        grid = np.full(need, np.nan, dtype=float)
        n = min(need, flat.size)
        grid[:n] = flat[:n]
        return cls(grid.reshape(rows, cols), tile_size)

    # ---------- logic ----------
    def tile_at(self, x: float, y: float) -> Tuple[int, int]:
        return int(x // self.tile_size), int(y // self.tile_size)

    def in_bounds(self, tx: int, ty: int) -> bool:
        return 0 <= tx < self.cols and 0 <= ty < self.rows

    def is_blocked(self, x: float, y: float) -> bool:
        if not (math.isfinite(x) and math.isfinite(y)):
            return True
        tx, ty = self.tile_at(x, y)
        if not self.in_bounds(tx, ty):
            return True
        return bool(self.blocked[ty, tx])

    def blocked_cells(self) -> Iterator[Tuple[int, int]]:
        """(col, row) of every solid tile, row-major."""
        for ty, tx in np.argwhere(self.blocked):
            yield int(tx), int(ty)

    # ---------- drawing ----------
    def draw_collision(self, surface: pygame.Surface) -> None:
        """Translucent red over every solid tile (debug overlay)."""
        ts = self.tile_size
        tile = pygame.Surface((ts, ts), pygame.SRCALPHA)
        tile.fill(DEBUG_TILE)
        for tx, ty in self.blocked_cells():
            surface.blit(tile, (tx * ts, ty * ts))
