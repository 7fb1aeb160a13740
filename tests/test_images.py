import io

import pytest
from PIL import Image

from inspira.images import ImageCodec


def make_image_bytes(size=(400, 200), mode="RGB", fmt="JPEG"):
    color = (255, 0, 0, 128) if mode == "RGBA" else (255, 0, 0)
    buf = io.BytesIO()
    Image.new(mode, size, color).save(buf, format=fmt)
    return buf.getvalue()


def test_encode_fits_within_max_size_as_png():
    codec = ImageCodec(max_size=100)
    png = codec.encode(make_image_bytes())

    image = codec.decode(png)
    assert image.format == "PNG"
    assert image.size == (100, 50)
    assert image.mode == "RGB"


def test_encode_keeps_small_images_small():
    codec = ImageCodec(max_size=1024)
    image = codec.decode(codec.encode(make_image_bytes(size=(30, 20))))
    assert image.size == (30, 20)


def test_encode_flattens_alpha():
    codec = ImageCodec(max_size=64)
    png = codec.encode(make_image_bytes(size=(10, 10), mode="RGBA", fmt="PNG"))
    assert codec.decode(png).mode == "RGB"


def test_thumbnail_size():
    codec = ImageCodec()
    thumb = codec.decode(codec.thumbnail(make_image_bytes(size=(640, 480)), size=(160, 160)))
    assert thumb.size == (160, 120)


@pytest.mark.parametrize("data", [b"", b"definitely not an image"])
def test_decode_rejects_garbage(data):
    with pytest.raises(ValueError):
        ImageCodec().decode(data)
