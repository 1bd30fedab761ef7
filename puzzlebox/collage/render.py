"""Lay out a collage and draw it to a PNG file."""

from __future__ import annotations

import os
from collections.abc import Sequence
from dataclasses import dataclass

from PIL import Image

from puzzlebox.collage.bargraph import Bar, BarGraph
from puzzlebox.collage.images import Imgres


@dataclass(frozen=True)
class Imgloc:
    """The place of an image in a collage."""

    image: Imgres
    x: int
    y: int


def layout(ground_size: int, images: Sequence[Imgres]) -> tuple[list[Imgloc], BarGraph]:
    """Place the ground row, then stack each further image into the lowest gap."""
    locations: list[Imgloc] = []
    ground: list[Bar] = []
    x = 0
    for image in images[:ground_size]:
        locations.append(Imgloc(image, x, 0))
        ground.append(Bar(w=image.w, h=image.h))
        x += image.w

    bars = BarGraph.with_size(1)
    bars.stack_row(0, ground)

    for image in images[ground_size:]:
        gap = bars.low_index()
        x = sum(bars[j].w for j in range(gap))
        locations.append(Imgloc(image, x, bars[gap].h))
        bars.stack(gap, Bar(w=image.w, h=image.h))
    return locations, bars


def build_collage(ground_size: int, images: Sequence[Imgres]) -> Image.Image:
    """Load the images and draw them into one RGBA image."""
    locations, bars = layout(ground_size, images)
    width, height = bars[0].w, bars[0].h
    result = Image.new("RGBA", (width, height), (0, 0, 0, 0))
    for loc in locations:
        with Image.open(loc.image.filename) as source:
            tile = source.convert("RGBA")
        clip_w = min(loc.image.w, tile.width, width - loc.x)
        clip_h = min(loc.image.h, tile.height, height - loc.y)
        if clip_w <= 0 or clip_h <= 0:
            continue
        result.alpha_composite(tile.crop((0, 0, clip_w, clip_h)), dest=(loc.x, loc.y))
    return result


def write_collage_png(
    filename: str | os.PathLike[str], ground_size: int, images: Sequence[Imgres]
) -> None:
    """Build a collage and write it to ``filename`` as PNG."""
    build_collage(ground_size, images).save(filename, format="PNG")