import pytest

from nippon.window import DEFAULT_HEIGHT, DEFAULT_WIDTH, Window


def test_default_size():
    window = Window()
    assert window.size == (1920.0, 1080.0)


def test_default_aspect_ratio():
    assert Window().aspect_ratio() == pytest.approx(DEFAULT_WIDTH / DEFAULT_HEIGHT)


def test_aspect_ratio_follows_resize():
    window = Window()
    window.width = 800.0
    window.height = 800.0
    assert window.aspect_ratio() == pytest.approx(1.0)


def test_zero_height_is_rejected():
    window = Window(width=640.0, height=0.0)
    with pytest.raises(ValueError):
        window.aspect_ratio()