"""
ledger-reducers: reversible per-block balance reduction for UTxO ledgers.

Walks a block's outputs and resolved spends, sums signed coin deltas per
payment or stake key, and emits CRDT counter increments or parameterized
SQL upserts. Undoing a block yields the exact negation of applying it.
"""

from ledger_reducers.core.types import (
    Block,
    Transaction,
    TxInput,
    TxOutput,
    PNCounter,
    ExecuteSQL,
)
from ledger_reducers.core.config import ReducerConfig
from ledger_reducers.reduce.reducer import BalanceReducer, apply, undo
from ledger_reducers.reduce.composer import ReducerComposer

__version__ = "0.1.0"
__all__ = [
    "Block",
    "Transaction",
    "TxInput",
    "TxOutput",
    "PNCounter",
    "ExecuteSQL",
    "ReducerConfig",
    "BalanceReducer",
    "ReducerComposer",
    "apply",
    "undo",
]
