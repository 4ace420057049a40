"""Block reduction: traversal, accumulation and composition."""

from ledger_reducers.reduce.accumulator import DeltaAccumulator
from ledger_reducers.reduce.walker import BlockWalker, WalkResult, WalkStats
from ledger_reducers.reduce.reducer import BalanceReducer, apply, undo
from ledger_reducers.reduce.composer import ReducerComposer, compose_apply, compose_undo

__all__ = [
    "DeltaAccumulator",
    "BlockWalker",
    "WalkResult",
    "WalkStats",
    "BalanceReducer",
    "ReducerComposer",
    "apply",
    "undo",
    "compose_apply",
    "compose_undo",
]
