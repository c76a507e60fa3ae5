import pytest

from demonophobia.geometry import Rectangle, Vector2
from demonophobia.sprite_sheet import SpriteSheet


@pytest.fixture
def sheet():
    # 1110x1280 texture, 6x5 frames of 185x256
    return SpriteSheet(Vector2(1110, 1280), Vector2(6, 5))


def test_frame_size(sheet):
    assert sheet.frame_size == Vector2(185.0, 256.0)


def test_first_frame(sheet):
    sheet.change_frame(0)
    assert sheet.texture_source == Rectangle(0.0, 0.0, 185.0, 256.0)
    assert sheet.selected_frame == 0


def test_frame_on_second_row(sheet):
    sheet.change_frame(6)
    assert sheet.texture_source == Rectangle(0.0, 256.0, 185.0, 256.0)


def test_frames_stay_inside_texture(sheet):
    for frame in range(sheet.frame_count):
        sheet.change_frame(frame)
        src = sheet.texture_source
        assert 0 <= src.x and src.x + src.width <= sheet.texture_size.x
        assert 0 <= src.y and src.y + src.height <= sheet.texture_size.y


def test_all_frames_distinct(sheet):
    positions = set()
    for frame in range(sheet.frame_count):
        sheet.change_frame(frame)
        positions.add((sheet.texture_source.x, sheet.texture_source.y))
    assert len(positions) == sheet.frame_count


def test_frame_index_wraps(sheet):
    sheet.change_frame(3)
    expected = Rectangle(**vars(sheet.texture_source))
    sheet.change_frame(3 + sheet.frame_count)
    assert sheet.texture_source == expected
    assert sheet.selected_frame == 3 + sheet.frame_count


def test_negative_frame_rejected(sheet):
    with pytest.raises(ValueError):
        sheet.change_frame(-1)


def test_set_flip_negates_width(sheet):
    sheet.change_frame(2)
    width = sheet.texture_source.width
    sheet.set_flip(True, False)
    assert sheet.texture_source.width == -width
    assert sheet.get_flip(True) is True
    assert sheet.get_flip(False) is False


def test_set_flip_twice_is_idempotent(sheet):
    sheet.change_frame(2)
    sheet.set_flip(True, True)
    first = Rectangle(**vars(sheet.texture_source))
    sheet.set_flip(True, True)
    assert sheet.texture_source == first


def test_unflip_restores_source(sheet):
    sheet.change_frame(4)
    original = Rectangle(**vars(sheet.texture_source))
    sheet.set_flip(True, True)
    sheet.set_flip(False, False)
    assert sheet.texture_source == original


def test_change_frame_keeps_flip(sheet):
    sheet.set_flip(False, True)
    sheet.change_frame(7)
    assert sheet.texture_source.height == -sheet.frame_size.y
    assert sheet.texture_source.width == sheet.frame_size.x


def test_hard_flip_does_not_record(sheet):
    sheet.change_frame(1)
    sheet.hard_flip_frame(True, False)
    assert sheet.texture_source.width == -sheet.frame_size.x
    assert sheet.get_flip(True) is False