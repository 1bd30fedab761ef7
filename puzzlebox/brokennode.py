"""Work out which nodes of a ring network are broken from their reports."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import combinations


def _consistent(broken: set[int], reports: Sequence[bool]) -> bool:
    """Check a configuration against the reports.

    A working node reports truthfully on its right-hand neighbour; the
    reports of broken nodes carry no information.
    """
    size = len(reports)
    for node, report in enumerate(reports):
        if node in broken:
            continue
        neighbour_broken = (node + 1) % size in broken
        if report == neighbour_broken:
            return False
    return True


def find_broken_nodes(broken_nodes: int, reports: Sequence[bool]) -> str:
    """Return one character per node: ``B`` broken, ``W`` working, ``?`` unknown.

    Every placement of ``broken_nodes`` broken nodes that agrees with the
    reports is considered; a node whose state differs between placements is
    marked ``?``. Nodes that no consistent placement decides stay ``"\\0"``.
    """
    result: list[str | None] = [None] * len(reports)
    for placement in combinations(range(len(reports)), broken_nodes):
        broken = set(placement)
        if not _consistent(broken, reports):
            continue
        for node, seen in enumerate(result):
            state = "B" if node in broken else "W"
            if seen is None:
                result[node] = state
            elif seen != state:
                result[node] = "?"
    return "".join(state if state is not None else "\0" for state in result)