"""A bar graph tracking the stacked heights of a collage."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, replace

from puzzlebox.collage.util import max_index, min_index


@dataclass
class Bar:
    """A bar of a graph."""

    w: int = 0
    h: int = 0


class BarGraph:
    """A row of bars side by side; adjacent bars of equal height are merged."""

    def __init__(self, bars: Iterable[Bar] = ()) -> None:
        self._bars = [replace(bar) for bar in bars]

    @classmethod
    def with_size(cls, size: int) -> BarGraph:
        """Return a graph of ``size`` empty bars."""
        return cls(Bar() for _ in range(size))

    def __len__(self) -> int:
        return len(self._bars)

    def __getitem__(self, index: int) -> Bar:
        return self._bars[index]

    def __iter__(self) -> Iterator[Bar]:
        return iter(self._bars)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BarGraph):
            return NotImplemented
        return self._bars == other._bars

    def __repr__(self) -> str:
        return f"BarGraph({self._bars!r})"

    def copy(self) -> BarGraph:
        """Return an independent copy."""
        return BarGraph(self._bars)

    def low_index(self) -> int:
        """Return the index of the lowest bar."""
        return min_index(len(self._bars), lambda i: self._bars[i].h)

    def high_index(self) -> int:
        """Return the index of the highest bar."""
        return max_index(len(self._bars), lambda i: self._bars[i].h)

    def stack(self, index: int, bar: Bar) -> None:
        """Stack ``bar`` on the left of the bar at ``index``."""
        self.stack_row(index, [bar])

    def stack_row(self, index: int, bar_row: Iterable[Bar]) -> None:
        """Stack a row of bars side by side, starting at the bar at ``index``."""
        bars = self._bars
        for new in bar_row:
            b = replace(new)
            if bars[index].w == b.w:
                bars[index].h += b.h
                if index > 0 and bars[index - 1].h == bars[index].h:
                    bars[index - 1].w += bars[index].w
                    del bars[index]
                    index -= 1
                if index < len(bars) - 1 and bars[index].h == bars[index + 1].h:
                    bars[index].w += bars[index + 1].w
                    del bars[index + 1]
                return

            b.h += bars[index].h
            bars[index].w -= b.w
            if index > 0 and bars[index - 1].h == b.h:
                bars[index - 1].w += b.w
                continue
            bars.insert(index, b)
            index += 1

        if bars[index].w <= 0:
            del bars[index]