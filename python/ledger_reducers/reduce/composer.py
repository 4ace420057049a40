"""Fan a block out over several configured reducers."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Mapping, Sequence

import structlog

from ledger_reducers.core.config import ReducerConfig, ReducerEntry
from ledger_reducers.core.errors import UnknownReducerError
from ledger_reducers.core.types import Block, Command, Direction
from ledger_reducers.reduce.reducer import BalanceReducer

logger = structlog.get_logger()

ReducerFactory = Callable[[ReducerConfig], BalanceReducer]

REGISTRY: dict[str, ReducerFactory] = {
    BalanceReducer.name: BalanceReducer,
}


def _entry(item: ReducerEntry | tuple[str, Any] | Mapping[str, Any]) -> ReducerEntry:
    if isinstance(item, ReducerEntry):
        return item
    if isinstance(item, tuple):
        name, config = item
        return ReducerEntry(name=name, config=config)
    return ReducerEntry.model_validate(dict(item))


class ReducerComposer:
    """Runs independently configured reducers and concatenates their output.

    Each reducer keeps its own accumulator per call, so instances never
    share state; output order follows the order of ``entries``.
    """

    def __init__(
        self,
        entries: Iterable[ReducerEntry | tuple[str, Any] | Mapping[str, Any]],
        registry: Mapping[str, ReducerFactory] | None = None,
    ) -> None:
        registry = REGISTRY if registry is None else registry
        self.reducers: list[BalanceReducer] = []

        for entry in map(_entry, entries):
            factory = registry.get(entry.name)
            if factory is None:
                raise UnknownReducerError(entry.name, sorted(registry))
            self.reducers.append(factory(entry.config))

        logger.debug("reducers_composed", count=len(self.reducers))

    def reduce(self, block: Block, direction: Direction) -> list[Command]:
        commands: list[Command] = []
        for reducer in self.reducers:
            commands.extend(reducer.reduce(block, direction))
        return commands

    def apply(self, block: Block) -> list[Command]:
        return self.reduce(block, Direction.APPLY)

    def undo(self, block: Block) -> list[Command]:
        return self.reduce(block, Direction.UNDO)


def compose_apply(block: Block, entries: Sequence[ReducerEntry | tuple[str, Any]]) -> list[Command]:
    return ReducerComposer(entries).apply(block)


def compose_undo(block: Block, entries: Sequence[ReducerEntry | tuple[str, Any]]) -> list[Command]:
    return ReducerComposer(entries).undo(block)
