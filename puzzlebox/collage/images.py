"""Read the resolutions of images in a directory."""

from __future__ import annotations

import os
from dataclasses import dataclass

from PIL import Image, UnidentifiedImageError


@dataclass(frozen=True)
class Imgres:
    """The resolution of an image file."""

    filename: str
    w: int
    h: int


def list_dir(path: str | os.PathLike[str]) -> list[Imgres]:
    """Return the resolution of every file in ``path``, skipping sub-directories.

    Raises :class:`ValueError` naming the file when a file is not an image.
    """
    result: list[Imgres] = []
    with os.scandir(path) as entries:
        names = sorted(entry.name for entry in entries if not entry.is_dir())
    for name in names:
        filename = os.path.join(os.fspath(path), name)
        try:
            with Image.open(filename) as image:
                width, height = image.size
        except (UnidentifiedImageError, OSError) as exc:
            raise ValueError(f"{filename}: {exc}") from exc
        result.append(Imgres(filename, width, height))
    return result