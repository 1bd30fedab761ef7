"""Command line for scraping images and searching collages."""

from __future__ import annotations

import logging
import math
import sys
from collections.abc import Sequence

from puzzlebox.collage.apod import scrape_image_urls
from puzzlebox.collage.images import list_dir
from puzzlebox.collage.solver import Solver

ARCHIVE_URL = "https://apod.nasa.gov/apod/archivepix.html"

_USAGE = """

USAGE
\tnasacollage scrape
\tnasacollage solve <dir> <ground row size>

DESCRIPTION
\t1. Scrape image urls and redirect into a text file

\t\t$ nasacollage scrape > urls.txt

\t2. Download images

\t\t$ mkdir images; cd images
\t\t$ wget -i ../urls.txt

\t3. delete logos and non-image files (for instance *.svf)

\t4. Generate collages (execution will take years
\t\tto come to an end, interrupt sometime)

\t\t$ mkdir ../collages; cd ../collages
\t\t$ nasacollage solve ../images 1
\t\t$ nasacollage solve ../images 2
\t\t$ nasacollage solve ../images 3
\t\t$ nasacollage solve ../images 4"""

_log = logging.getLogger(__name__)


def usage() -> str:
    """Return the usage text."""
    return _USAGE


def _print_usage() -> None:
    print(usage())


def _progress(current: int, maximum: int) -> None:
    _log.info(
        "10^%.4f: 10^%.4f (%.8f %%)",
        math.log10(maximum),
        math.log10(current),
        current * 100 / maximum,
    )


def _scrape() -> int:
    try:
        for url in scrape_image_urls(ARCHIVE_URL):
            print(url)
    except OSError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


def _solve(args: Sequence[str]) -> int:
    if len(args) != 2:
        _print_usage()
        return 0
    try:
        res_data = list_dir(args[0])
    except (OSError, ValueError) as exc:
        print(exc, file=sys.stderr)
        _print_usage()
        return 0
    try:
        ground_row_size = int(args[1])
    except ValueError as exc:
        print(exc, file=sys.stderr)
        _print_usage()
        return 0
    Solver(res_data, _progress).solve(ground_row_size)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run ``scrape`` or ``solve``; anything else prints the usage."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        _print_usage()
        return 0
    if args[0] == "scrape":
        return _scrape()
    if args[0] == "solve":
        return _solve(args[1:])
    _print_usage()
    return 0