"""Balance reducer: block in, backend commands out."""

from __future__ import annotations

from typing import Any, Mapping

import structlog

from ledger_reducers.core.config import ReducerConfig
from ledger_reducers.core.types import Block, Command, Direction
from ledger_reducers.emit.base import build_emitter
from ledger_reducers.reduce.walker import BlockWalker, WalkResult

logger = structlog.get_logger()


class BalanceReducer:
    """Tracks coin balances per payment or stake key.

    ``apply`` and ``undo`` are pure: the same block and config always
    yield the same commands, and the deltas of ``undo`` are the exact
    negation of those of ``apply``.
    """

    name = "BalanceByAddress"

    def __init__(self, config: ReducerConfig) -> None:
        self.config = config
        self.walker = BlockWalker(config.address_type, strict=config.strict)
        self.emitter = build_emitter(config)

    def reduce(self, block: Block, direction: Direction) -> list[Command]:
        result = self.walk(block, direction)
        commands = self.emitter.emit(result.deltas)

        logger.debug(
            "block_reduced",
            reducer=self.name,
            direction=direction.value,
            mode=self.config.address_type.value,
            backend=self.config.resolved_backend,
            keys=len(result.deltas),
            commands=len(commands),
            excluded=result.stats.excluded,
            decode_errors=result.stats.decode_errors,
            **block.point,
        )
        return commands

    def walk(self, block: Block, direction: Direction) -> WalkResult:
        return self.walker.walk(block, direction)

    def apply(self, block: Block) -> list[Command]:
        return self.reduce(block, Direction.APPLY)

    def undo(self, block: Block) -> list[Command]:
        return self.reduce(block, Direction.UNDO)


def _coerce_config(config: ReducerConfig | Mapping[str, Any]) -> ReducerConfig:
    if isinstance(config, ReducerConfig):
        return config
    return ReducerConfig.model_validate(dict(config))


def apply(block: Block, config: ReducerConfig | Mapping[str, Any]) -> list[Command]:
    return BalanceReducer(_coerce_config(config)).apply(block)


def undo(block: Block, config: ReducerConfig | Mapping[str, Any]) -> list[Command]:
    return BalanceReducer(_coerce_config(config)).undo(block)
