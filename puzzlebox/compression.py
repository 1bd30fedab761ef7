"""Huffman compression of text.

The encoded form is a 4-byte big-endian length of the code table, the code
table itself and then the encoded text as ASCII ``0`` and ``1`` characters.
Each table entry is ``<code length><character length><code><character>``,
with both lengths as single bytes and the character in UTF-8.
"""

from __future__ import annotations

import heapq
import struct
from collections import Counter
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Generic, Protocol, TypeVar

_HEADER = struct.Struct(">i")


class _Orderable(Protocol):
    def __lt__(self, other: object) -> bool: ...


T = TypeVar("T", bound=_Orderable)


class MinPQ(Generic[T]):
    """A minimum priority queue of items ordered by ``<``."""

    def __init__(self) -> None:
        self._heap: list[T] = []

    def is_empty(self) -> bool:
        """Return whether the queue holds no items."""
        return not self._heap

    def __len__(self) -> int:
        return len(self._heap)

    def min(self) -> T:
        """Return the smallest item without removing it."""
        if not self._heap:
            raise IndexError("priority queue is empty")
        return self._heap[0]

    def insert(self, item: T) -> None:
        """Add ``item`` to the queue."""
        heapq.heappush(self._heap, item)

    def delete_min(self) -> T:
        """Remove and return the smallest item."""
        if not self._heap:
            raise IndexError("priority queue is empty")
        return heapq.heappop(self._heap)


@dataclass(eq=False)
class _Node:
    freq: int
    char: str = ""
    left: _Node | None = None
    right: _Node | None = None

    def __lt__(self, other: _Node) -> bool:
        return self.freq < other.freq

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def _build_tree(text: str) -> _Node:
    queue: MinPQ[_Node] = MinPQ()
    for char, freq in sorted(Counter(text).items()):
        queue.insert(_Node(freq, char))
    while True:
        first = queue.delete_min()
        if queue.is_empty():
            return first
        second = queue.delete_min()
        queue.insert(_Node(first.freq + second.freq, left=first, right=second))


def _walk(node: _Node, prefix: str) -> Iterator[tuple[str, str]]:
    if node.is_leaf:
        yield prefix, node.char
        return
    if node.left is not None:
        yield from _walk(node.left, prefix + "0")
    if node.right is not None:
        yield from _walk(node.right, prefix + "1")


def _code_table(root: _Node) -> dict[str, str]:
    """Map each Huffman code to its character."""
    if root.is_leaf:
        return {"0": root.char}
    return dict(_walk(root, ""))


def _serialize(codes: dict[str, str]) -> bytes:
    parts = []
    for code, char in sorted(codes.items()):
        try:
            char_bytes = char.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise ValueError(f"invalid UTF-8 character: {char!r}") from exc
        if len(code) > 255:
            raise ValueError("Huffman code too long to serialise")
        parts.append(bytes((len(code), len(char_bytes))))
        parts.append(code.encode("ascii"))
        parts.append(char_bytes)
    return b"".join(parts)


def _deserialize(data: bytes, start: int, length: int) -> dict[str, str]:
    codes: dict[str, str] = {}
    position = start
    end = start + length
    while position < end:
        if position + 2 > len(data):
            raise ValueError("truncated code table")
        code_len, char_len = data[position], data[position + 1]
        position += 2
        code_bytes = data[position : position + code_len]
        position += code_len
        char_bytes = data[position : position + char_len]
        position += char_len
        if len(code_bytes) != code_len or len(char_bytes) != char_len:
            raise ValueError("truncated code table")
        try:
            char = char_bytes.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ValueError("invalid UTF-8 character in code table") from exc
        if len(char) != 1:
            raise ValueError("invalid UTF-8 character in code table")
        codes[code_bytes.decode("latin-1")] = char
    return codes


def encode(text: str) -> bytes:
    """Compress ``text``; raises :class:`ValueError` for an empty text."""
    if not text:
        raise ValueError("cannot encode an empty text")
    codes = _code_table(_build_tree(text))
    table = _serialize(codes)
    char_codes = {char: code for code, char in codes.items()}
    bits = "".join(char_codes[char] for char in text)
    return _HEADER.pack(len(table)) + table + bits.encode("ascii")


def decode(data: bytes) -> str:
    """Restore the text compressed by :func:`encode`."""
    if len(data) < _HEADER.size:
        raise ValueError("missing code table length")
    (length,) = _HEADER.unpack_from(data)
    if length < 0 or _HEADER.size + length > len(data):
        raise ValueError("invalid code table length")
    codes = _deserialize(data, _HEADER.size, length)

    decoded: list[str] = []
    pending = ""
    for bit in data[_HEADER.size + length :].decode("latin-1"):
        pending += bit
        char = codes.get(pending)
        if char is not None:
            decoded.append(char)
            pending = ""
    return "".join(decoded)