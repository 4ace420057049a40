"""Relational upsert/cleanup statements.

Statements use ``%s`` placeholders (the DB-API ``format`` paramstyle used
by psycopg2) so that on-chain address strings never reach the SQL text.
The table name is an identifier and cannot be bound; it is validated by
``ReducerConfig`` before it gets here.
"""

from __future__ import annotations

import re
from typing import Mapping

from ledger_reducers.core.config import TABLE_PATTERN
from ledger_reducers.core.types import Command, Delta, ExecuteSQL, Key

UPSERT_TEMPLATE = (
    "INSERT INTO {table} (address, balance) "
    "SELECT * FROM unnest(%s::text[], %s::numeric[]) "
    "ON CONFLICT (address) DO UPDATE "
    "SET balance = {table}.balance + EXCLUDED.balance"
)

CLEANUP_TEMPLATE = (
    "DELETE FROM {table} "
    "WHERE address = ANY(%s::text[]) "
    "AND balance = 0"
)


class SqlEmitter:
    """Emits one bulk upsert and one zero-balance cleanup per block."""

    def __init__(self, table: str) -> None:
        if not re.match(TABLE_PATTERN, table):
            raise ValueError(f"invalid table identifier: {table!r}")
        self.table = table

    def emit(self, deltas: Mapping[Key, Delta]) -> list[Command]:
        if not deltas:
            return []

        keys = sorted(deltas)
        values = [int(deltas[k]) for k in keys]

        upsert = ExecuteSQL(
            sql=UPSERT_TEMPLATE.format(table=self.table),
            params=(keys, values),
        )
        cleanup = ExecuteSQL(
            sql=CLEANUP_TEMPLATE.format(table=self.table),
            params=(list(keys),),
        )
        return [upsert, cleanup]
