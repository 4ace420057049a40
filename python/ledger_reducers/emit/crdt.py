"""PNCounter commands for replicated counter stores."""

from __future__ import annotations

from typing import Mapping

from ledger_reducers.core.types import Command, Delta, Key, PNCounter


class CrdtEmitter:
    """Emits one counter increment per touched key, zero nets included."""

    def __init__(self, prefix: str | None = None) -> None:
        self.prefix = prefix

    def namespaced(self, key: Key) -> Key:
        return f"{self.prefix}.{key}" if self.prefix else key

    def emit(self, deltas: Mapping[Key, Delta]) -> list[Command]:
        # Decimal strings keep values beyond 64 bits intact.
        return [
            PNCounter(key=self.namespaced(key), value=str(int(deltas[key])))
            for key in sorted(deltas)
        ]
