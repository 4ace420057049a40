"""Core type definitions for ledger balance reduction."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, TypeAlias

Key: TypeAlias = str
Coin: TypeAlias = int
Delta: TypeAlias = int


class Direction(str, Enum):
    APPLY = "apply"
    UNDO = "undo"

    @property
    def output_sign(self) -> int:
        """Sign applied to newly created outputs."""
        return 1 if self is Direction.APPLY else -1

    @property
    def input_sign(self) -> int:
        """Sign applied to resolved spends."""
        return -self.output_sign


class AddressMode(str, Enum):
    PAYMENT = "payment"
    STAKE = "stake"


@dataclass(frozen=True, slots=True)
class TxOutput:
    address: bytes
    coin: Coin


@dataclass(frozen=True, slots=True)
class TxInput:
    """Reference to a previously produced output.

    ``as_output`` is only set when the block payload carries the spent
    output already resolved; otherwise the input contributes nothing.
    """

    tx_hash: bytes = b""
    output_index: int = 0
    as_output: TxOutput | None = None

    @property
    def resolved(self) -> bool:
        return self.as_output is not None


@dataclass(frozen=True, slots=True)
class Transaction:
    outputs: tuple[TxOutput, ...] = field(default_factory=tuple)
    inputs: tuple[TxInput, ...] = field(default_factory=tuple)
    hash: bytes = b""


@dataclass(frozen=True, slots=True)
class Block:
    transactions: tuple[Transaction, ...] = field(default_factory=tuple)
    slot: int | None = None
    hash: bytes | None = None
    height: int | None = None

    @property
    def point(self) -> dict[str, Any]:
        """Chain point context for log events."""
        return {
            "slot": self.slot,
            "hash": self.hash.hex() if self.hash else None,
        }


@dataclass(frozen=True, slots=True)
class PNCounter:
    """Increment a replicated counter by a signed decimal amount."""

    command: ClassVar[str] = "PNCounter"

    key: Key
    value: str


@dataclass(frozen=True, slots=True)
class ExecuteSQL:
    """SQL statement template plus its bound parameters (``%s`` paramstyle)."""

    command: ClassVar[str] = "ExecuteSQL"

    sql: str
    params: tuple[Any, ...] = ()


Command: TypeAlias = PNCounter | ExecuteSQL
