"""Parsing of UTxO RPC style JSON blocks into typed blocks.

Byte fields follow the protobuf JSON mapping (base64); ``0x``-prefixed
hex is accepted as well. Integer fields may be JSON numbers or decimal
strings, since 64-bit protobuf integers are rendered as strings.
"""

from __future__ import annotations

import base64
import binascii
import json
from pathlib import Path
from typing import Any

from ledger_reducers.core.errors import BlockFormatError
from ledger_reducers.core.types import Block, Transaction, TxInput, TxOutput


def _field(obj: dict[str, Any], camel: str, snake: str, default: Any = None) -> Any:
    if camel in obj:
        return obj[camel]
    return obj.get(snake, default)


def _bytes(value: Any, name: str) -> bytes:
    if value is None:
        return b""
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    if not isinstance(value, str):
        raise BlockFormatError(f"{name}: expected bytes as string, got {type(value).__name__}")
    try:
        if value[:2].lower() == "0x":
            return bytes.fromhex(value[2:])
        if "-" in value or "_" in value:
            return base64.urlsafe_b64decode(value + "=" * (-len(value) % 4))
        return base64.b64decode(value + "=" * (-len(value) % 4), validate=True)
    except (ValueError, binascii.Error) as e:
        raise BlockFormatError(f"{name}: invalid byte encoding: {e}") from e


def _int(value: Any, name: str, default: int | None = None) -> int | None:
    if value is None:
        return default
    if isinstance(value, bool):
        raise BlockFormatError(f"{name}: expected integer, got bool")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value, 10)
        except ValueError as e:
            raise BlockFormatError(f"{name}: invalid integer {value!r}") from e
    raise BlockFormatError(f"{name}: expected integer, got {type(value).__name__}")


def parse_output(raw: dict[str, Any]) -> TxOutput:
    if not isinstance(raw, dict):
        raise BlockFormatError("output must be an object")
    coin = _int(raw.get("coin"), "coin", 0)
    if coin < 0:
        raise BlockFormatError(f"coin must be non-negative, got {coin}")
    return TxOutput(address=_bytes(raw.get("address"), "address"), coin=coin)


def parse_input(raw: dict[str, Any]) -> TxInput:
    if not isinstance(raw, dict):
        raise BlockFormatError("input must be an object")
    as_output = _field(raw, "asOutput", "as_output")
    return TxInput(
        tx_hash=_bytes(_field(raw, "txHash", "tx_hash"), "txHash"),
        output_index=_int(_field(raw, "outputIndex", "output_index"), "outputIndex", 0),
        as_output=parse_output(as_output) if as_output else None,
    )


def parse_transaction(raw: dict[str, Any]) -> Transaction:
    if not isinstance(raw, dict):
        raise BlockFormatError("transaction must be an object")
    return Transaction(
        outputs=tuple(parse_output(o) for o in raw.get("outputs") or ()),
        inputs=tuple(parse_input(i) for i in raw.get("inputs") or ()),
        hash=_bytes(raw.get("hash"), "hash"),
    )


def parse_block(raw: dict[str, Any]) -> Block:
    """Build a ``Block`` from its JSON document. A missing body is an empty block."""
    if not isinstance(raw, dict):
        raise BlockFormatError("block must be an object")

    header = raw.get("header") or {}
    body = raw.get("body") or {}
    txs = tuple(parse_transaction(tx) for tx in body.get("tx") or ())

    return Block(
        transactions=txs,
        slot=_int(header.get("slot"), "slot"),
        hash=_bytes(header.get("hash"), "hash") or None,
        height=_int(header.get("height"), "height"),
    )


def load_block(path: Path) -> Block:
    with open(path) as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise BlockFormatError(f"{path}: not valid JSON: {e}") from e
    return parse_block(data)
