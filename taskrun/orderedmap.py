"""A mapping that keeps an explicit, sortable order of its keys."""

from __future__ import annotations

import functools
from typing import Any, Callable, Generic, Hashable, Iterator, Mapping, Sequence, TypeVar

import yaml

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


def _copy_value(value: Any) -> Any:
    deep_copy = getattr(value, "deep_copy", None)
    return deep_copy() if callable(deep_copy) else value


class OrderedMap(Generic[K, V]):
    """Dictionary with a deterministic, reorderable key order."""

    def __init__(self) -> None:
        self._keys: list[K] = []
        self._data: dict[K, V] = {}

    @classmethod
    def from_map(cls, mapping: Mapping[K, V]) -> "OrderedMap[K, V]":
        """Build a map from a mapping, keeping its iteration order."""
        om: OrderedMap[K, V] = cls()
        for key, value in mapping.items():
            om.set(key, value)
        return om

    @classmethod
    def from_map_with_order(
        cls, mapping: Mapping[K, V], order: Sequence[K]
    ) -> "OrderedMap[K, V]":
        """Build a map whose keys follow ``order``, which must match the mapping."""
        if len(mapping) != len(order):
            raise ValueError("length of map and order must be equal")
        if set(mapping) != set(order):
            raise ValueError("order keys must match map keys")
        om: OrderedMap[K, V] = cls()
        om._keys = list(order)
        om._data = dict(mapping)
        return om

    @classmethod
    def from_yaml(cls, text: str) -> "OrderedMap[Any, Any]":
        """Parse a YAML mapping, keeping the order of its keys."""
        node = yaml.compose(text, Loader=yaml.SafeLoader)
        if not isinstance(node, yaml.MappingNode):
            line = node.start_mark.line + 1 if node is not None else 0
            tag = node.tag.rsplit(":", 1)[-1] if node is not None else "null"
            raise ValueError(
                f"yaml: line {line}: cannot unmarshal !!{tag} into variables"
            )
        loader = yaml.SafeLoader(text)
        try:
            om: OrderedMap[Any, Any] = cls()
            for key_node, value_node in node.value:
                key = loader.construct_object(key_node, deep=True)
                value = loader.construct_object(value_node, deep=True)
                om.set(key, value)
        finally:
            loader.dispose()
        return om

    def __len__(self) -> int:
        return len(self._keys)

    def __iter__(self) -> Iterator[K]:
        return iter(list(self._keys))

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OrderedMap):
            return NotImplemented
        return self._keys == other._keys and self._data == other._data

    def __repr__(self) -> str:
        body = ", ".join(f"{k!r}: {self._data[k]!r}" for k in self._keys)
        return f"OrderedMap({{{body}}})"

    def set(self, key: K, value: V) -> None:
        """Set a value; a new key goes to the end of the order."""
        if key not in self._data:
            self._keys.append(key)
        self._data[key] = value

    def get(self, key: K, default: V | None = None) -> V | None:
        """Return the value for ``key``, or ``default`` when it is absent."""
        return self._data.get(key, default)

    def exists(self, key: K) -> bool:
        """Whether ``key`` is present."""
        return key in self._data

    def sort(self) -> None:
        """Sort the keys in their natural order."""
        self._keys.sort()

    def sort_func(self, compare: Callable[[K, K], int]) -> None:
        """Sort the keys with a three-way comparison function."""
        self._keys.sort(key=functools.cmp_to_key(compare))

    def keys(self) -> list[K]:
        """Keys in order."""
        return list(self._keys)

    def values(self) -> list[V]:
        """Values in key order."""
        return [self._data[key] for key in self._keys]

    def items(self) -> Iterator[tuple[K, V]]:
        """Yield key/value pairs in order."""
        for key in list(self._keys):
            yield key, self._data[key]

    def merge(self, other: "OrderedMap[K, V]") -> None:
        """Set every entry of ``other`` into this map."""
        for key, value in other.items():
            self.set(key, value)

    def deep_copy(self) -> "OrderedMap[K, V]":
        """Copy the map; values offering ``deep_copy`` are copied too."""
        om: OrderedMap[K, V] = type(self)()
        om._keys = [_copy_value(k) for k in self._keys]
        om._data = {k: _copy_value(v) for k, v in self._data.items()}
        return om