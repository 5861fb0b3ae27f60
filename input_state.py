# input_state.py
from typing import FrozenSet

import pygame


class InputState:
    """Keys currently held down, fed from the pygame event queue."""
    def __init__(self) -> None:
        self.keys: set[int] = set()

    def handle_event(self, ev: pygame.event.Event) -> None:
        if ev.type == pygame.KEYDOWN:
            self.keys.add(ev.key)
        elif ev.type == pygame.KEYUP:
            self.keys.discard(ev.key)

    def press(self, key: int) -> None:
        self.keys.add(key)

    def release(self, key: int) -> None:
        self.keys.discard(key)

    def clear(self) -> None:
        self.keys.clear()

    def is_pressed(self, *keys: int) -> bool:
        return any(k in self.keys for k in keys)

    def snapshot(self) -> FrozenSet[int]:
        """Frozen copy read once per tick, so motion never sees a half-updated set."""
        return frozenset(self.keys)
