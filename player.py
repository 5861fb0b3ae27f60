from __future__ import annotations
from typing import AbstractSet, Dict, List, Tuple

import pygame

from constants import (PLAYER_START, PLAYER_W, PLAYER_H, PLAYER_SPEED, PLAYER_FRAMES,
                       ANIM_SPEED, FEET_PAD, FEET_H, FEET_BOTTOM_GAP, MOVE_KEYS, DEBUG_HITBOX)
from tile_map import TileMap


class Player:
    def __init__(self, spawn_xy: Tuple[float, float] = PLAYER_START,
                 size: Tuple[int, int] = (PLAYER_W, PLAYER_H),
                 speed: float = PLAYER_SPEED,
                 frame_count: int = PLAYER_FRAMES,
                 animation_speed: float = ANIM_SPEED) -> None:
        self.x, self.y = float(spawn_xy[0]), float(spawn_xy[1])
        self.width, self.height = size
        self.speed = speed

        self.direction = "down"
        self.is_moving = False
        self.frame = 0.0
        self.frame_count = frame_count
        self.animation_speed = animation_speed

    @property
    def frame_index(self) -> int:
        return int(self.frame)

    @property
    def center(self) -> Tuple[float, float]:
        return self.x + self.width / 2, self.y + self.height / 2

    def update(self, pressed: AbstractSet[int], tile_map: TileMap) -> None:
        self._move(pressed, tile_map)
        self._animate()

    # ---------- movement ----------
    def _held(self, pressed: AbstractSet[int], direction: str) -> bool:
        return any(k in pressed for k in MOVE_KEYS[direction])

    def _move(self, pressed: AbstractSet[int], tile_map: TileMap) -> None:
        dx = dy = 0.0
        # later checks win the facing; diagonals are not normalized
        if self._held(pressed, "up"):    dy -= self.speed; self.direction = "up"
        if self._held(pressed, "down"):  dy += self.speed; self.direction = "down"
        if self._held(pressed, "left"):  dx -= self.speed; self.direction = "left"
        if self._held(pressed, "right"): dx += self.speed; self.direction = "right"

        # moving means "input asked to move", even if walls then stop us
        self.is_moving = dx != 0 or dy != 0
        if not self.is_moving:
            return

        # resolve X then Y separately so we slide along walls
        if self.can_move(self.x + dx, self.y, tile_map):
            self.x += dx
        if self.can_move(self.x, self.y + dy, tile_map):
            self.y += dy

    def feet_hitbox(self, x: float | None = None, y: float | None = None) -> Tuple[float, float, float, float]:
        """(left, top, w, h) of the small collision box at the feet."""
        x = self.x if x is None else x
        y = self.y if y is None else y
        w = self.width - FEET_PAD * 2
        top = y + self.height - FEET_H - FEET_BOTTOM_GAP
        return x + FEET_PAD, top, w, FEET_H

    def can_move(self, target_x: float, target_y: float, tile_map: TileMap) -> bool:
        left, top, w, h = self.feet_hitbox(target_x, target_y)
        corners = ((left, top), (left + w, top), (left, top + h), (left + w, top + h))
        return not any(tile_map.is_blocked(cx, cy) for cx, cy in corners)

    # ---------- animation ----------
    def _animate(self) -> None:
        if self.is_moving:
            self.frame = (self.frame + self.animation_speed) % self.frame_count
        else:
            self.frame = 0.0

    # ---------- drawing ----------
    def draw(self, screen: pygame.Surface, frames: Dict[str, List[pygame.Surface]],
             debug: bool = False) -> None:
        """Draw in world coordinates; the caller has already applied the camera."""
        strip = frames.get(self.direction)
        if strip:
            img = strip[self.frame_index % len(strip)]
            if img.get_size() != (self.width, self.height):
                img = pygame.transform.scale(img, (self.width, self.height))
            screen.blit(img, (round(self.x), round(self.y)))

        if debug:
            left, top, w, h = self.feet_hitbox()
            pygame.draw.rect(screen, DEBUG_HITBOX,
                             pygame.Rect(round(left), round(top), round(w), round(h)), 1)
