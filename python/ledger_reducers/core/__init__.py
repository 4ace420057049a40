"""Core types, configuration and errors for ledger reducers."""

from ledger_reducers.core.types import (
    AddressMode,
    Block,
    Command,
    Direction,
    ExecuteSQL,
    PNCounter,
    Transaction,
    TxInput,
    TxOutput,
)
from ledger_reducers.core.config import PipelineConfig, ReducerConfig, ReducerEntry
from ledger_reducers.core.errors import AddressDecodeError, ReducerError

__all__ = [
    "AddressMode",
    "Block",
    "Command",
    "Direction",
    "ExecuteSQL",
    "PNCounter",
    "Transaction",
    "TxInput",
    "TxOutput",
    "PipelineConfig",
    "ReducerConfig",
    "ReducerEntry",
    "AddressDecodeError",
    "ReducerError",
]
