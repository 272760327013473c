import pygame

from gaymwtf.draw import DrawBatch
from gaymwtf.geometry import Vec2

RED = (255, 0, 0)
BLACK = (0, 0, 0)


def _texture(color=RED, size=(2, 2)):
    surface = pygame.Surface(size)
    surface.fill(color)
    return surface


def _target():
    surface = pygame.Surface((10, 10))
    surface.fill(BLACK)
    return surface


def _rgb(surface, point):
    return tuple(surface.get_at(point))[:3]


def test_same_texture_is_grouped():
    batch = DrawBatch()
    tex = _texture()
    batch.add(tex, Vec2(0, 0), 16.0)
    batch.add(tex, Vec2(5, 5), 16.0)
    assert len(batch) == 1


def test_different_textures_make_groups_and_clear_empties():
    batch = DrawBatch()
    batch.add(_texture(), Vec2(0, 0), 16.0)
    batch.add(_texture((0, 255, 0)), Vec2(0, 0), 16.0)
    assert len(batch) == 2
    batch.clear()
    assert len(batch) == 0


def test_draw_blits_at_position_and_empties():
    batch = DrawBatch()
    target = _target()
    batch.add(_texture(), Vec2(3, 4), 16.0)
    batch.draw(target)
    assert _rgb(target, (3, 4)) == RED
    assert _rgb(target, (4, 5)) == RED
    assert _rgb(target, (2, 4)) == BLACK
    assert _rgb(target, (5, 4)) == BLACK
    assert len(batch) == 0


def test_draw_scales_to_dest_size():
    batch = DrawBatch()
    target = _target()
    batch.add(_texture(), Vec2(3, 4), 16.0, Vec2(4, 4))
    batch.draw(target)
    assert _rgb(target, (6, 7)) == RED
    assert _rgb(target, (7, 8)) == BLACK


def test_draw_applies_offset():
    batch = DrawBatch()
    target = _target()
    batch.add(_texture(), Vec2(3, 4), 16.0)
    batch.draw(target, Vec2(1, 1))
    assert _rgb(target, (2, 3)) == RED
    assert _rgb(target, (4, 5)) == BLACK