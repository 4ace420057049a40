"""Backend-agnostic emitter interface."""

from __future__ import annotations

from typing import Mapping, Protocol

from ledger_reducers.core.config import ReducerConfig
from ledger_reducers.core.types import Command, Delta, Key


class CommandEmitter(Protocol):
    def emit(self, deltas: Mapping[Key, Delta]) -> list[Command]:
        """Turn one block's finalized deltas into backend commands."""


def build_emitter(config: ReducerConfig) -> CommandEmitter:
    """Select the emitter for the configured backend."""
    from ledger_reducers.emit.crdt import CrdtEmitter
    from ledger_reducers.emit.sql import SqlEmitter

    if config.resolved_backend == "relational":
        assert config.table is not None
        return SqlEmitter(config.table)
    return CrdtEmitter(config.prefix)
