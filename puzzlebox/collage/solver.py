"""Search for rectangular collages built from images."""

from __future__ import annotations

import bisect
import logging
import time
from collections.abc import Callable, Iterator, Sequence

from puzzlebox.collage.bargraph import Bar, BarGraph
from puzzlebox.collage.combinatorics import num_variations, permutations, variations
from puzzlebox.collage.images import Imgres
from puzzlebox.collage.progress import Progress
from puzzlebox.collage.render import write_collage_png
from puzzlebox.collage.util import disjoint

_log = logging.getLogger(__name__)

_MAX_IMAGES = 11
_MIN_SOLUTION_IMAGES = 10


class Solver:
    """Build rectangular collages and save each one found as a PNG file."""

    def __init__(
        self, res_data: Sequence[Imgres], progress_callback: Callable[[int, int], object]
    ) -> None:
        self.res_data = sorted(res_data, key=lambda image: image.w)
        self._widths = [image.w for image in self.res_data]
        self.progress_callback = progress_callback
        self.progress: Progress | None = None
        self.solution_indexes: list[int] | None = None
        self.solution_area = 1_000_000
        self.solution_ground_size = 0

    def solve(self, ground_row_size: int) -> tuple[int, list[Imgres]]:
        """Try every ground row of the given size; return the last collage found."""
        n = len(self.res_data)
        self.progress = Progress(num_variations(n, ground_row_size), self.progress_callback)
        for ground_row in variations(n, ground_row_size):
            self.progress.inc()
            self._solve_recursively(
                BarGraph.with_size(1), 0, [], list(ground_row), len(ground_row)
            )
        images = [self.res_data[i] for i in self.solution_indexes or []]
        return self.solution_ground_size, images

    def _solve_recursively(
        self,
        bars: BarGraph,
        gap_index: int,
        img_indexes: list[int],
        new_indexes: list[int],
        ground_size: int,
    ) -> None:
        if len(img_indexes) > _MAX_IMAGES:
            return
        if not disjoint(img_indexes, new_indexes):
            return
        img_indexes = img_indexes + new_indexes
        bars = self._place(bars, gap_index, new_indexes)

        if len(bars) == 1:
            area = bars[0].w * bars[0].h
            if len(img_indexes) > _MIN_SOLUTION_IMAGES and (
                self.solution_indexes is None
                or self.solution_indexes[0] != img_indexes[0]
            ):
                self.solution_area = area
                self.solution_indexes = img_indexes
                self.solution_ground_size = ground_size
                _log.info(
                    "%d %s %d x %d", ground_size, img_indexes, bars[0].w, bars[0].h
                )
                self._write_png()
                return

        gap_index = bars.low_index()
        for fitting in self._fitting_images(bars[gap_index].w, []):
            for order in permutations(fitting):
                self._solve_recursively(
                    bars, gap_index, img_indexes, list(order), ground_size
                )

    def _fitting_images(self, width: int, chosen: list[int]) -> Iterator[list[int]]:
        """Yield rows of distinct images whose widths fill ``width`` or overshoot it."""
        for i in range(bisect.bisect_right(self._widths, width)):
            if i in chosen:
                continue
            chosen.append(i)
            gap = width - self._widths[i]
            if gap > 0:
                yield from self._fitting_images(gap, chosen)
            else:
                yield list(chosen)
            chosen.pop()

    def _place(self, bars: BarGraph, gap_index: int, indexes: list[int]) -> BarGraph:
        placed = bars.copy()
        row = [Bar(w=self.res_data[i].w, h=self.res_data[i].h) for i in indexes]
        placed.stack_row(gap_index, row)
        return placed

    def _write_png(self) -> None:
        images = [self.res_data[i] for i in self.solution_indexes or []]
        filename = f"collage_{int(time.time())}_{self.solution_area}.png"
        write_collage_png(filename, self.solution_ground_size, images)