"""Command emission for CRDT and relational backends."""

from ledger_reducers.emit.base import CommandEmitter, build_emitter
from ledger_reducers.emit.crdt import CrdtEmitter
from ledger_reducers.emit.sql import SqlEmitter

__all__ = ["CommandEmitter", "CrdtEmitter", "SqlEmitter", "build_emitter"]
