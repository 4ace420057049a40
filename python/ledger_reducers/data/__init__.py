"""Block ingestion and command serialization."""

from ledger_reducers.data.block_json import load_block, parse_block
from ledger_reducers.data.commands import command_from_json, command_to_json

__all__ = ["load_block", "parse_block", "command_from_json", "command_to_json"]
