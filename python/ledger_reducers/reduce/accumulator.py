"""Block-scoped signed delta accumulation."""

from __future__ import annotations

from collections import defaultdict
from typing import Iterable, Mapping

from ledger_reducers.core.errors import AccumulatorConsumedError
from ledger_reducers.core.types import Delta, Key


class DeltaAccumulator:
    """Sums signed contributions per key for one block in one direction.

    Merges commute, so traversal order never changes the result. Keys
    whose contributions cancel out stay in the finalized mapping with an
    explicit zero. The accumulator can be finalized once.
    """

    def __init__(self) -> None:
        self._deltas: defaultdict[Key, Delta] = defaultdict(int)
        self._consumed = False

    def merge(self, key: Key, amount: Delta) -> None:
        if self._consumed:
            raise AccumulatorConsumedError("merge after finalize")
        self._deltas[key] += int(amount)

    def merge_all(self, items: Iterable[tuple[Key, Delta]] | Mapping[Key, Delta]) -> None:
        pairs = items.items() if isinstance(items, Mapping) else items
        for key, amount in pairs:
            self.merge(key, amount)

    def finalize(self) -> dict[Key, Delta]:
        if self._consumed:
            raise AccumulatorConsumedError("accumulator already finalized")
        self._consumed = True
        deltas = dict(self._deltas)
        self._deltas.clear()
        return deltas

    def __len__(self) -> int:
        return len(self._deltas)

    def __contains__(self, key: object) -> bool:
        return key in self._deltas
