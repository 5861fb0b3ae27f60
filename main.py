import ctypes
import logging
import sys

import pygame

from constants import SCREEN_W, SCREEN_H, CAPTION
from game import Game

if sys.platform == "win32":
    ctypes.windll.user32.SetProcessDPIAware()


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption(CAPTION)

    game = Game(screen)
    running = True
    try:
        while running:
            running = game.run_step()
    finally:
        game.close()
        pygame.quit()


if __name__ == "__main__":
    main()
