import pytest
from PIL import Image

from meshview.pixel import BLANK, Pixel
from meshview.resourcepack import ResourcePack
from meshview.sprite import SampleMode, Sprite


def make_sprite():
    sprite = Sprite(3, 2)
    for y in range(2):
        for x in range(3):
            sprite.set_pixel(x, y, Pixel(x * 10, y * 10, 5, 255))
    return sprite


def test_new_sprite_is_opaque_black():
    sprite = Sprite(2, 2)
    assert all(sprite.get_pixel(x, y) == Pixel(0, 0, 0, 255) for x in range(2) for y in range(2))


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        Sprite(-1, 3)


def test_set_and_get():
    sprite = make_sprite()
    assert sprite.get_pixel(2, 1) == Pixel(20, 10, 5, 255)
    assert sprite.get_pixel(0, 0) == Pixel(0, 0, 5, 255)


def test_out_of_bounds_read_is_blank_and_write_ignored():
    sprite = make_sprite()
    before = list(sprite.pixels)
    sprite.set_pixel(5, 0, Pixel(1, 1, 1))
    sprite.set_pixel(-1, 0, Pixel(1, 1, 1))
    assert sprite.pixels == before
    assert sprite.get_pixel(3, 0) == BLANK
    assert sprite.get_pixel(0, -1) == BLANK


def test_periodic_mode_wraps():
    sprite = make_sprite()
    sprite.mode = SampleMode.PERIODIC
    assert sprite.get_pixel(4, 3) == sprite.get_pixel(1, 1)
    assert sprite.get_pixel(-1, 0) == sprite.get_pixel(1, 0)
    assert sprite.get_pixel(3, 2) == sprite.get_pixel(0, 0)


def test_sample_maps_normalised_coordinates():
    sprite = make_sprite()
    assert sprite.sample(0.9, 0.9) == sprite.get_pixel(2, 1)
    assert sprite.sample(0.5, 0.25) == sprite.get_pixel(1, 0)


def test_fill():
    sprite = make_sprite()
    sprite.fill(Pixel(7, 8, 9, 10))
    assert set(sprite.pixels) == {Pixel(7, 8, 9, 10)}
    assert len(sprite.pixels) == 6


def test_to_bytes_layout():
    sprite = Sprite(1, 1)
    sprite.set_pixel(0, 0, Pixel(1, 2, 3, 4))
    assert sprite.to_bytes() == b"\x01\x00\x00\x00\x01\x00\x00\x00\x01\x02\x03\x04"


def test_bytes_round_trip():
    sprite = make_sprite()
    copy = Sprite.from_bytes(sprite.to_bytes())
    assert (copy.width, copy.height) == (3, 2)
    assert copy.pixels == sprite.pixels


def test_from_bytes_truncated():
    data = make_sprite().to_bytes()
    with pytest.raises(ValueError):
        Sprite.from_bytes(data[:-1])
    with pytest.raises(ValueError):
        Sprite.from_bytes(data[:4])


def test_save_and_load_file(tmp_path):
    sprite = make_sprite()
    path = tmp_path / "s.spr"
    sprite.save_spr(path)
    loaded = Sprite.load_spr(path)
    assert loaded.pixels == sprite.pixels
    assert loaded.width == sprite.width


def test_load_from_pack(tmp_path):
    sprite = make_sprite()
    path = tmp_path / "s.spr"
    sprite.save_spr(path)
    pack = ResourcePack()
    pack.add(str(path))
    path.unlink()
    loaded = Sprite.load_spr(str(path), pack)
    assert loaded.pixels == sprite.pixels


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        Sprite.load_spr(tmp_path / "none.spr")


def test_load_image(tmp_path):
    image = Image.new("RGBA", (2, 3), (0, 0, 0, 0))
    image.putpixel((1, 2), (11, 22, 33, 44))
    image.putpixel((0, 0), (200, 100, 50, 255))
    path = tmp_path / "img.png"
    image.save(path)

    sprite = Sprite.load_image(path)
    assert (sprite.width, sprite.height) == (2, 3)
    assert sprite.get_pixel(1, 2) == Pixel(11, 22, 33, 44)
    assert sprite.get_pixel(0, 0) == Pixel(200, 100, 50, 255)


def test_load_image_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        Sprite.load_image(tmp_path / "missing.png")