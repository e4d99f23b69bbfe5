from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Generic, Iterable, Mapping, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class GroupedIndex(Generic[T]):
    """Entities in insertion order plus a key -> positions grouping.

    Buckets hold positions into `items` rather than the entities themselves,
    so a group is always a view over the single ordered sequence.
    """

    items: tuple[T, ...]
    positions_by_key: Mapping[str, tuple[int, ...]]

    def group(self, key: str) -> tuple[T, ...]:
        positions = self.positions_by_key.get(key)
        if not positions:
            return ()
        items = self.items
        return tuple(items[i] for i in positions)

    def keys(self) -> tuple[str, ...]:
        return tuple(self.positions_by_key)

    def __len__(self) -> int:
        return len(self.items)


class IndexBuilder(Generic[T]):
    """Accumulates entities and groups them by `key(entity)`.

    Entities are never removed or reordered; repeated keys grow the same
    bucket in first-seen order.
    """

    def __init__(self, key: Callable[[T], str]) -> None:
        self._key = key
        self._items: list[T] = []
        self._positions: dict[str, list[int]] = {}

    def add(self, entity: T) -> int:
        position = len(self._items)
        self._items.append(entity)
        self._positions.setdefault(self._key(entity), []).append(position)
        return position

    def __len__(self) -> int:
        return len(self._items)

    def build(self) -> GroupedIndex[T]:
        return GroupedIndex(
            items=tuple(self._items),
            positions_by_key=MappingProxyType(
                {key: tuple(pos) for key, pos in self._positions.items()}
            ),
        )


def build_index(entities: Iterable[T], key: Callable[[T], str]) -> GroupedIndex[T]:
    builder: IndexBuilder[T] = IndexBuilder(key)
    for entity in entities:
        builder.add(entity)
    return builder.build()
