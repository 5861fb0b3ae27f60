import itertools

import pytest

from camera import Camera
from player import Player


def test_centres_on_player_when_room_allows():
    cam = Camera(scale=2)
    p = Player((500, 400))           # centre (512, 416)
    cam.update(p, 2000, 2000, 800, 600)
    assert (cam.x, cam.y) == (512 - 200, 416 - 150)


def test_clamps_to_top_left_and_bottom_right():
    cam = Camera(scale=2)
    cam.update(Player((0, 0)), 1000, 800, 800, 600)
    assert (cam.x, cam.y) == (0, 0)

    cam.update(Player((990, 790)), 1000, 800, 800, 600)
    assert (cam.x, cam.y) == (1000 - 400, 800 - 300)


@pytest.mark.parametrize("px,py", list(itertools.product(range(0, 1000, 97), range(0, 800, 83))))
def test_camera_stays_inside_map(px, py):
    cam = Camera(scale=2)
    cam.update(Player((px, py)), 1000, 800, 800, 600)
    view_w, view_h = cam.view_size(800, 600)
    assert 0 <= cam.x <= 1000 - view_w
    assert 0 <= cam.y <= 800 - view_h


def test_map_smaller_than_view_pins_to_origin():
    cam = Camera(scale=2)
    cam.update(Player((150, 80)), 320, 200, 800, 600)
    assert (cam.x, cam.y) == (0, 0)


def test_zoom_changes_view_size_and_screen_mapping():
    cam = Camera(scale=4)
    assert cam.view_size(800, 600) == (200, 150)
    cam.x, cam.y = 10, 20
    assert cam.world_to_screen(15, 30) == (20, 40)
