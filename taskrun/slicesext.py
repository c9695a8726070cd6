"""Helpers for combining sequences."""

from __future__ import annotations

from itertools import chain
from typing import Iterable, TypeVar

T = TypeVar("T")


def unique_join(*args: Iterable[T]) -> list[T]:
    """Concatenate the sequences into a sorted list without duplicates."""
    return sorted(set(chain.from_iterable(args)))