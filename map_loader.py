# map_loader.py
from __future__ import annotations
import logging
import re
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List

import numpy as np
import pygame

from constants import ASSET_DIR, COLLISION_CSV, MAP_IMAGE, PLAYER_IMAGES

log = logging.getLogger(__name__)

_SEP = re.compile(r"[,\s]+")


class AssetLoadError(Exception):
    """An image or the collision CSV could not be read."""


# ---------- parsers ----------
def parse_collision_csv(text: str) -> np.ndarray:
    """
    Flat row-major tile ids. Commas and newlines both separate cells.
    -1 (Tiled's "empty") becomes 0; anything non-numeric becomes NaN.
    """
    values: List[float] = []
    for tok in _SEP.split(text.strip()):
        if not tok:
            continue
        try:
            v = float(tok)
        except ValueError:
            v = float("nan")
        values.append(0.0 if v == -1 else v)
    return np.array(values, dtype=float)


def load_collision_csv(path: str | Path) -> np.ndarray:
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8-sig")
    except OSError as e:
        raise AssetLoadError(f"Failed to load CSV: {path}") from e
    return parse_collision_csv(text)


def load_image(path: str | Path) -> pygame.Surface:
    path = Path(path)
    if not path.exists():
        raise AssetLoadError(f"Failed to load image: {path}")
    try:
        return pygame.image.load(path.as_posix())
    except (pygame.error, OSError) as e:
        raise AssetLoadError(f"Failed to load image: {path}") from e


# ---------- containers ----------
@dataclass
class AssetManifest:
    collision_csv: Path
    map_image: Path
    player_images: Dict[str, Path] = field(default_factory=dict)

    @classmethod
    def from_dir(cls, asset_dir: str | Path = ASSET_DIR) -> "AssetManifest":
        base = Path(asset_dir)
        return cls(
            collision_csv=base / COLLISION_CSV,
            map_image=base / MAP_IMAGE,
            player_images={d: base / name for d, name in PLAYER_IMAGES.items()},
        )


@dataclass
class Assets:
    collision_data: np.ndarray
    map_image: pygame.Surface
    player_images: Dict[str, pygame.Surface]


# ---------- concurrent loading ----------
class AssetLoader:
    """Starts every fetch at once and hands back one future for the whole set."""
    def __init__(self, executor: ThreadPoolExecutor | None = None):
        self._own_executor = executor is None
        self.executor = executor or ThreadPoolExecutor(max_workers=6, thread_name_prefix="assets")

    def load_all(self, manifest: AssetManifest) -> "Future[Assets]":
        facings = set(manifest.player_images)
        if facings != set(PLAYER_IMAGES):
            # one strip per facing, or the player vanishes when turned that way
            err = AssetLoadError(f"player images must cover {sorted(PLAYER_IMAGES)}, got {sorted(facings)}")
            log.error("[Assets] %s", err)
            failed: Future = Future()
            failed.set_exception(err)
            return failed
        jobs: Dict[str, Future] = {
            "collision": self.executor.submit(load_collision_csv, manifest.collision_csv),
            "map": self.executor.submit(load_image, manifest.map_image),
        }
        for direction, path in manifest.player_images.items():
            jobs[f"player_{direction}"] = self.executor.submit(load_image, path)
        return self._gather(jobs, manifest)

    def _gather(self, jobs: Dict[str, Future], manifest: AssetManifest) -> "Future[Assets]":
        result: Future = Future()
        lock = threading.Lock()
        remaining = [len(jobs)]
        errors: List[BaseException] = []

        def _done(name: str, fut: Future) -> None:
            err = fut.exception()
            if err is not None:
                # every failure is reported, not just the first
                log.error("[Assets] %s: %s", name, err)
            with lock:
                if err is not None:
                    errors.append(err)
                remaining[0] -= 1
                last = remaining[0] == 0
            if not last:
                return
            if errors:
                result.set_exception(errors[0])
                return
            result.set_result(Assets(
                collision_data=jobs["collision"].result(),
                map_image=jobs["map"].result(),
                player_images={d: jobs[f"player_{d}"].result() for d in manifest.player_images},
            ))

        for name, fut in jobs.items():
            fut.add_done_callback(lambda f, n=name: _done(n, f))
        return result

    def shutdown(self) -> None:
        if self._own_executor:
            self.executor.shutdown(wait=False)
