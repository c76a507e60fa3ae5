from pathlib import Path

import pygame
import pytest

from demonophobia.controls import InputState, Key
from demonophobia.geometry import Rectangle, Vector2, check_collision_recs
from demonophobia.hero import Hero
from demonophobia.room import SCREEN_HEIGHT, SCREEN_WIDTH, Room, Room1, Scene


def make_hero():
    return Hero(None, Vector2(1110, 1280))


def blue_background():
    background = pygame.Surface((800, 600))
    background.fill((0, 0, 255))
    return background


def test_scene_is_abstract():
    with pytest.raises(TypeError):
        Scene()


def test_room_owns_hero():
    hero = make_hero()
    room = Room(hero)
    assert hero.owner is room


def test_walls_frame_the_screen():
    room = Room(make_hero())
    left, right = room.walls
    assert left.body == Rectangle(0.0, 0.0, 139.0, SCREEN_HEIGHT)
    assert not left.is_right
    assert right.body.right == SCREEN_WIDTH
    assert right.body.height == SCREEN_HEIGHT
    assert right.is_right


def test_update_forwards_to_hero():
    hero = make_hero()
    room = Room(hero)
    room.update(InputState(pressed=[Key.D]))
    assert hero.current_state is hero.move_state


def test_walking_into_right_wall_stops():
    hero = make_hero()
    room = Room(hero)
    hero.body_position.x = 620.0
    hero.set_position()
    hero.change_state(hero.move_state)
    hero.frame_time = 0.1
    room.update(InputState(down=[Key.D]))
    assert hero.current_state is hero.idle_state
    assert hero.collided_wall is room.walls[1]
    assert not check_collision_recs(hero.hitbox, room.walls[1].body)


def test_draw_shows_background():
    room = Room(make_hero(), blue_background())
    target = pygame.Surface((800, 600))
    room.draw(target, False)
    assert target.get_at((10, 10))[:3] == (0, 0, 255)


def test_debug_draw_shows_walls():
    room = Room(make_hero(), blue_background())
    target = pygame.Surface((800, 600))
    room.draw(target, True)
    assert target.get_at((10, 10))[0] > 0


def test_room1_uses_given_background():
    background = blue_background()
    hero = make_hero()
    room = Room1(hero, background)
    assert room.background is background
    assert hero.owner is room


def test_room1_loads_background_from_assets(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    path = Path("assets", "sprite", "rooms", "room1a.png")
    path.parent.mkdir(parents=True)
    pygame.image.save(blue_background(), str(path))
    room = Room1(make_hero())
    assert room.background.get_size() == (800, 600)
    assert room.background.get_at((5, 5))[:3] == (0, 0, 255)