from __future__ import annotations
import logging
from concurrent.futures import Future
from enum import Enum
from typing import Dict, List

import pygame

from constants import FPS, TILE, BG, LOADING_TEXT, DEBUG_KEY
from camera import Camera
from input_state import InputState
from map_loader import AssetLoader, AssetManifest, Assets
from player import Player
from sprite_loader import load_player_animations, prepare_surface
from tile_map import TileMap

log = logging.getLogger(__name__)


class GameState(Enum):
    LOADING = "loading"
    RUNNING = "running"
    FAILED = "failed"


class Game:
    """Owns the map, player, camera and input; steps them once per frame."""
    def __init__(self, screen: pygame.Surface, manifest: AssetManifest | None = None,
                 loader: AssetLoader | None = None):
        self.screen = screen
        self.width, self.height = screen.get_size()
        self.clock = pygame.time.Clock()
        self.font = pygame.font.Font(None, 24)
        self.debug = False

        self.state = GameState.LOADING
        self.input = InputState()
        self.player = Player()
        self.camera = Camera()
        self.tile_map: TileMap | None = None
        self.map_image: pygame.Surface | None = None
        self.map_size = (0, 0)
        self._world: pygame.Surface | None = None
        self.player_frames: Dict[str, List[pygame.Surface]] = {}
        self.load_error: BaseException | None = None

        self.loader = loader or AssetLoader()
        self.assets_future: Future = self.loader.load_all(manifest or AssetManifest.from_dir())

    # ------------- state transitions -------------
    def _poll_assets(self) -> None:
        if self.state is not GameState.LOADING or not self.assets_future.done():
            return
        err = self.assets_future.exception()
        if err is not None:
            self._on_assets_failed(err)
        else:
            self._on_assets_loaded(self.assets_future.result())

    def _on_assets_loaded(self, assets: Assets) -> None:
        self.map_image = prepare_surface(assets.map_image)
        mw, mh = self.map_size = self.map_image.get_size()
        self._world = pygame.Surface(self.map_size)
        # grid size comes from the map image, not from the CSV length
        self.tile_map = TileMap.from_collision_data(assets.collision_data, mw // TILE, mh // TILE, TILE)
        self.player_frames = load_player_animations(
            {d: prepare_surface(img) for d, img in assets.player_images.items()},
            self.player.frame_count)
        self.state = GameState.RUNNING
        log.info("[Assets] All assets successfully loaded (%dx%d map, %dx%d tiles)",
                 mw, mh, self.tile_map.cols, self.tile_map.rows)

    def _on_assets_failed(self, err: BaseException) -> None:
        self.load_error = err
        self.state = GameState.FAILED
        log.error("[Assets] Failed to load assets: %s", err)

    # ------------- events -------------
    def toggle_debug(self) -> None:
        self.debug = not self.debug
        log.info("[Debug] Debug Mode: %s", "Active" if self.debug else "Inactive")

    def handle_event(self, ev: pygame.event.Event) -> bool:
        if ev.type == pygame.QUIT:
            return False
        if ev.type == pygame.KEYDOWN and ev.key == DEBUG_KEY:
            # debug key never reaches the movement keys
            self.toggle_debug()
            return True
        self.input.handle_event(ev)
        return True

    # ------------- per frame -------------
    def update(self) -> None:
        self._poll_assets()
        if self.state is not GameState.RUNNING:
            return
        self.player.update(self.input.snapshot(), self.tile_map)
        # camera reads the position after movement
        self.camera.update(self.player, *self.map_size, self.width, self.height)

    def draw(self) -> None:
        self.screen.fill(BG)
        if self.state is not GameState.RUNNING:
            self._draw_placeholder()
            return

        view_w, view_h = self.camera.view_size(self.width, self.height)
        view = pygame.Surface((max(1, round(view_w)), max(1, round(view_h))))
        view.fill(BG)
        world = self._draw_world()
        view.blit(world, (-round(self.camera.x), -round(self.camera.y)))
        self.screen.blit(pygame.transform.scale(view, (self.width, self.height)), (0, 0))

    def _draw_world(self) -> pygame.Surface:
        world = self._world
        world.fill(BG)
        world.blit(self.map_image, (0, 0))
        if self.debug:
            self.tile_map.draw_collision(world)
        self.player.draw(world, self.player_frames, self.debug)
        return world

    def _draw_placeholder(self) -> None:
        msg = "Loading Game Assets..."
        if self.state is GameState.FAILED:
            msg = "Failed to load game assets"
        text = self.font.render(msg, True, LOADING_TEXT)
        self.screen.blit(text, (self.width // 2 - text.get_width() // 2,
                                self.height // 2 - text.get_height() // 2))

    def run_step(self) -> bool:
        self.clock.tick(FPS)
        for ev in pygame.event.get():
            if not self.handle_event(ev):
                return False
        self.update()
        self.draw()
        pygame.display.flip()
        return True

    def close(self) -> None:
        self.loader.shutdown()
