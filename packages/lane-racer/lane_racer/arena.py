"""Arena - index-stable entity storage with deferred removal."""

from __future__ import annotations

from typing import Generic, Iterator, TypeVar

T = TypeVar("T")

EntityId = int


class Arena(Generic[T]):
    """Owns a homogeneous set of entities keyed by monotonically issued ids.

    ``remove`` only marks an entity; it disappears from iteration at once
    but its slot is reclaimed by ``compact`` at the end of the tick, so ids
    stay valid while a tick is in flight and nothing is processed twice.
    """

    def __init__(self) -> None:
        self._items: dict[EntityId, T] = {}
        self._pending: set[EntityId] = set()
        self._next_id: EntityId = 0

    def add(self, item: T) -> EntityId:
        eid = self._next_id
        self._next_id += 1
        self._items[eid] = item
        return eid

    def remove(self, entity_id: EntityId) -> None:
        if entity_id in self._items:
            self._pending.add(entity_id)

    def alive(self, entity_id: EntityId) -> bool:
        return entity_id in self._items and entity_id not in self._pending

    def get(self, entity_id: EntityId) -> T:
        if not self.alive(entity_id):
            raise KeyError(f"Entity {entity_id} is not alive")
        return self._items[entity_id]

    def items(self) -> Iterator[tuple[EntityId, T]]:
        # Snapshot ids so callers may add/remove while iterating.
        for eid in list(self._items):
            if eid in self._pending or eid not in self._items:
                continue
            yield eid, self._items[eid]

    def __iter__(self) -> Iterator[T]:
        for _, item in self.items():
            yield item

    def __len__(self) -> int:
        return len(self._items) - len(self._pending)

    @property
    def pending(self) -> frozenset[EntityId]:
        return frozenset(self._pending)

    def compact(self) -> int:
        """Drop every entity marked for removal. Returns how many went."""
        removed = len(self._pending)
        for eid in self._pending:
            self._items.pop(eid, None)
        self._pending.clear()
        return removed

    def clear(self) -> None:
        self._items.clear()
        self._pending.clear()
