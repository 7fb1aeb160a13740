"""Image encoding for quote pictures.

Small wrapper around Pillow. Pictures are stored on the quote as PNG bytes
that fit within `max_size` pixels on the longest edge, with any alpha
flattened against a solid background.

Example:
    codec = ImageCodec(max_size=1024)
    quote_png = codec.encode(open("photo.jpg", "rb").read())
    row_png = codec.thumbnail(quote_png)
"""
from __future__ import annotations

import io
from typing import Tuple

from PIL import Image


class ImageCodec:
    """Encode and decode quote images.

    Args:
        max_size: Longest edge, in pixels, of an encoded image.
        background: RGB color used when flattening transparent images.
    """

    def __init__(self, max_size: int = 1024, background: Tuple[int, int, int] = (255, 255, 255)):
        self.max_size = max_size
        self.background = background

    def decode(self, data: bytes) -> Image.Image:
        """Open stored image bytes.

        Raises:
            ValueError: If the bytes are not a supported image format.
        """
        if not data:
            raise ValueError("No image data")
        try:
            image = Image.open(io.BytesIO(data))
            image.load()
        except Exception as exc:
            raise ValueError("Bytes are not a supported image format") from exc
        return image

    def encode(self, raw: bytes) -> bytes:
        """Fit an image from any supported format into max_size and return PNG bytes."""
        return self._to_png(self.decode(raw), (self.max_size, self.max_size))

    def thumbnail(self, data: bytes, size: Tuple[int, int] = (160, 160)) -> bytes:
        """PNG thumbnail for list rows."""
        return self._to_png(self.decode(data), size)

    def _to_png(self, src: Image.Image, bounds: Tuple[int, int]) -> bytes:
        src = src.convert("RGBA")
        src.thumbnail(bounds, Image.LANCZOS)

        flat = Image.new("RGB", src.size, self.background)
        flat.paste(src, mask=src.split()[3])

        out = io.BytesIO()
        flat.save(out, format="PNG", optimize=True)
        return out.getvalue()
