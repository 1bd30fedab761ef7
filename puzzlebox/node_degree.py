"""Degree of a node in a graph given as a list of edges.

The search variants other than :func:`degree_linear` expect the edges to be
sorted by their second node, then by their first.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import takewhile

Graph = Sequence[Sequence[int]]


class NodeNotFoundError(LookupError):
    """Raised when a node lies outside the graph."""

    def __init__(self, node: int) -> None:
        super().__init__(f"node {node} not found in the graph")
        self.node = node


def _check(nodes: int, node: int) -> None:
    if node > nodes:
        raise NodeNotFoundError(node)


def _run_length(edges: Iterable[Sequence[int]], node: int) -> int:
    """Count leading edges whose second node is ``node``."""
    return sum(1 for _ in takewhile(lambda edge: edge[1] == node, edges))


def degree(nodes: int, graph: Graph, node: int) -> int:
    """Return the number of edges that touch ``node``."""
    return degree_linear_reverse(nodes, graph, node)


def degree_linear(nodes: int, graph: Graph, node: int) -> int:
    """Count the edges touching ``node`` by scanning every edge."""
    _check(nodes, node)
    return sum(node in (first, second) for first, second in graph)


def degree_linear_reverse(nodes: int, graph: Graph, node: int) -> int:
    """Scan the sorted edges from the end, stopping once they pass ``node``."""
    _check(nodes, node)
    total = 0
    for first, second in reversed(graph):
        if second > node:
            total += first == node
        elif second == node:
            total += 1
        else:
            break
    return total


def _adjust(index: int, step: int, graph: Graph, node: int) -> tuple[int, int]:
    second = graph[index][1]
    if second == node:
        return index, step
    if second > node:
        while index > 0 and graph[index][1] > node:
            index -= 1
        return index, step + 1
    while index < len(graph) - 1 and graph[index][1] < node:
        index += 1
    return index, step - 1


def _find(index: int, graph: Graph, node: int) -> int:
    first = graph[index][0]
    if first == node:
        return index
    if first > node:
        while index > 0 and graph[index][0] > node:
            index -= 1
        return index
    while index < len(graph) - 1 and graph[index][0] < node:
        index += 1
    return index


def degree_step_reverse(nodes: int, graph: Graph, node: int) -> int:
    """Search the sorted edges backwards in steps sized to the last move."""
    _check(nodes, node)
    size = len(graph)
    last = graph[-1][1]
    step = size // last or 1

    total = 0
    current = last
    index = size - 1
    while current > node:
        if index < 0:
            raise IndexError("step search ran past the start of the graph")
        index, step = _adjust(index, step, graph, current)
        if graph[index][1] == current:
            index = _find(index, graph, node)
            if graph[index][0] == node:
                total += 1
        current -= 1
        index -= step

    if index < 0:
        return total

    index, _ = _adjust(index, 0, graph, node)
    total += _run_length(graph[index + 1 :], node)
    total += _run_length(reversed(graph[: index + 1]), node)
    return total


def _key(edge: Sequence[int], shift: int) -> int:
    return (edge[1] << shift) + edge[0]


def _at(graph: Graph, end: int, index: int) -> Sequence[int]:
    if not 0 <= index < end:
        raise IndexError(f"edge index {index} out of range")
    return graph[index]


def _interpolation_search(
    graph: Graph, end: int, target: tuple[int, int], shift: int
) -> int:
    """Locate ``target`` among the first ``end`` edges by interpolation."""
    low, high = 0, end - 1
    wanted = _key(target, shift)
    position = high
    while high != low:
        key_low = _key(_at(graph, end, low), shift)
        key_high = _key(_at(graph, end, high), shift)
        if wanted < key_low or wanted > key_high:
            return position
        fraction = (wanted - key_low) / (key_high - key_low) * (high - low)
        position = low + int(fraction)
        edge = _at(graph, end, position)
        if edge[0] == target[0] and edge[1] == target[1]:
            break
        if _key(edge, shift) < wanted:
            position += 1
            low = position
        else:
            position -= 1
            high = position
    return position


def degree_interpol(nodes: int, graph: Graph, node: int) -> int:
    """Count the edges touching ``node`` using interpolation search."""
    _check(nodes, node)
    shift = nodes.bit_length()
    size = len(graph)

    total = 0
    end = size
    for current in range(graph[-1][1], node, -1):
        index = _interpolation_search(graph, end, (node, current), shift)
        if _at(graph, size, index)[0] == node:
            total += 1
        end = index

    index = _interpolation_search(graph, size, (node - 1, node), shift)
    total += _run_length(graph[index + 1 :], node)
    total += _run_length(reversed(graph[: index + 1]), node)
    return total