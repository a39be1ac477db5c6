"""Sequence helpers."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import TypeVar

__all__ = ["iter_slices"]

T = TypeVar("T")


def iter_slices(items: Sequence[T], chunk_length: int) -> Iterator[Sequence[T]]:
    """Yield consecutive slices of at most ``chunk_length`` items.

    Nothing is yielded when the sequence is empty or ``chunk_length`` is zero.
    """
    if chunk_length < 0:
        raise ValueError("chunk_length must not be negative")
    size = min(len(items), chunk_length)
    if size == 0:
        return
    for start in range(0, len(items), size):
        yield items[start:start + size]