"""Traversal of a block's outputs and resolved spends."""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from ledger_reducers.address.codec import EXCLUDED, AddressCodec
from ledger_reducers.core.errors import AddressDecodeError
from ledger_reducers.core.types import AddressMode, Block, Delta, Direction, Key, TxOutput
from ledger_reducers.reduce.accumulator import DeltaAccumulator

logger = structlog.get_logger()


@dataclass(slots=True)
class WalkStats:
    """Counters describing what a walk merged and what it skipped."""

    transactions: int = 0
    outputs: int = 0
    resolved_inputs: int = 0
    unresolved_inputs: int = 0
    excluded: int = 0
    decode_errors: int = 0


@dataclass(frozen=True, slots=True)
class WalkResult:
    deltas: dict[Key, Delta]
    stats: WalkStats


class BlockWalker:
    """Computes per-key signed deltas for one block.

    Under the strict policy an undecodable address aborts the walk by
    propagating ``AddressDecodeError``. Under the lenient policy it is
    logged, counted and treated like an excluded address.
    """

    def __init__(
        self,
        mode: AddressMode,
        strict: bool = True,
        codec: AddressCodec | None = None,
    ) -> None:
        self.mode = mode
        self.strict = strict
        self.codec = codec or AddressCodec()

    def walk(self, block: Block, direction: Direction) -> WalkResult:
        accumulator = DeltaAccumulator()
        stats = WalkStats()

        for tx in block.transactions:
            stats.transactions += 1
            for txo in tx.outputs:
                stats.outputs += 1
                self._merge(accumulator, stats, txo, direction.output_sign)

            for txi in tx.inputs:
                if txi.as_output is None:
                    stats.unresolved_inputs += 1
                    continue
                stats.resolved_inputs += 1
                self._merge(accumulator, stats, txi.as_output, direction.input_sign)

        if stats.unresolved_inputs:
            logger.warning(
                "unresolved_inputs_skipped",
                count=stats.unresolved_inputs,
                mode=self.mode.value,
                direction=direction.value,
                **block.point,
            )

        return WalkResult(deltas=accumulator.finalize(), stats=stats)

    def _merge(
        self,
        accumulator: DeltaAccumulator,
        stats: WalkStats,
        txo: TxOutput,
        sign: int,
    ) -> None:
        try:
            key = self.codec.decode(txo.address, self.mode)
        except AddressDecodeError as e:
            if self.strict:
                raise
            stats.decode_errors += 1
            logger.warning("address_decode_failed", address=e.hex, reason=e.reason, mode=self.mode.value)
            return

        if key is EXCLUDED:
            stats.excluded += 1
            return

        accumulator.merge(key, sign * txo.coin)
