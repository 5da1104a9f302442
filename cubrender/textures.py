"""Wall and sprite textures and the mirrored frame layout."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from os import PathLike

from cubrender.xpm import Image, load_xpm_file

__all__ = ["TextureSet", "mirror_rows", "load_texture", "frame_from_buffer"]


def mirror_rows(pixels: Sequence[int], width: int, height: int) -> tuple[int, ...]:
    """Reverse each row, reading pixel ``width - x`` of the row for column ``x``.

    Column 0 takes the first pixel of the following row; past the end of
    the data it is 0.
    """
    total = len(pixels)
    result = []
    for y in range(height):
        for x in range(width):
            index = width * y + (width - x)
            result.append(pixels[index] if index < total else 0)
    return tuple(result)


def load_texture(path: str | PathLike[str]) -> Image:
    """Load an XPM file as a texture with mirrored rows."""
    image = load_xpm_file(path)
    return Image(image.width, image.height, mirror_rows(image.pixels, image.width, image.height))


@dataclass(frozen=True)
class TextureSet:
    """The four wall textures and the sprite texture."""

    north: Image
    south: Image
    east: Image
    west: Image
    sprite: Image

    @classmethod
    def load(cls, north, south, east, west, sprite) -> TextureSet:
        return cls(
            load_texture(north),
            load_texture(south),
            load_texture(east),
            load_texture(west),
            load_texture(sprite),
        )

    def __iter__(self) -> Iterator[Image]:
        yield from (self.north, self.south, self.east, self.west, self.sprite)


def frame_from_buffer(buf: Sequence[Sequence[int]], width: int, height: int) -> list[int]:
    """Lay out a rendered buffer as flat, row-mirrored frame pixels."""
    total = width * height
    frame = [0] * total
    for y in range(height):
        for x in range(width):
            index = y * width + (width - x)
            if index < total:
                frame[index] = buf[y][x]
    return frame