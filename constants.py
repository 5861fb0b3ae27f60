import os

import pygame

# --- screen & timing ---
SCREEN_W, SCREEN_H = 800, 600
FPS = 60
CAPTION = "Tile Walk"

# --- world scale ---
TILE = 32                 # tile size used by the map art & collision CSV
CAMERA_ZOOM = 2           # 2x zoom

# --- player ---
PLAYER_START = (100, 100)
PLAYER_W, PLAYER_H = 24, 32
PLAYER_SPEED = 0.5        # pixels per tick (not time-scaled)
PLAYER_FRAMES = 4         # frames per directional strip
ANIM_SPEED = 0.2          # frame phase added per tick while walking

# feet hitbox: inset from the sprite sides, a thin band near the bottom edge
FEET_PAD = 2
FEET_H = 4
FEET_BOTTOM_GAP = 2

# --- input ---
MOVE_KEYS = {
    "up":    (pygame.K_UP, pygame.K_w),
    "down":  (pygame.K_DOWN, pygame.K_s),
    "left":  (pygame.K_LEFT, pygame.K_a),
    "right": (pygame.K_RIGHT, pygame.K_d),
}
DEBUG_KEY = pygame.K_TAB

# --- colours ---
BG = (0, 0, 0)
LOADING_TEXT = (255, 255, 255)
DEBUG_TILE = (255, 0, 0, 102)   # red at 0.4 alpha
DEBUG_HITBOX = (0, 255, 0)      # lime

# --- assets ---
ASSET_DIR = os.environ.get("TILEWALK_ASSETS", "assets")
COLLISION_CSV = "keren_collition.csv"
MAP_IMAGE = "lintang.png"
PLAYER_IMAGES = {
    "down":  "playerDown.png",
    "up":    "playerUp.png",
    "left":  "playerLeft.png",
    "right": "playerRight.png",
}
