"""JSON representation of emitted commands."""

from __future__ import annotations

from typing import Any

from ledger_reducers.core.errors import CommandFormatError
from ledger_reducers.core.types import Command, ExecuteSQL, PNCounter


def command_to_json(command: Command) -> dict[str, Any]:
    if isinstance(command, PNCounter):
        return {"command": command.command, "key": command.key, "value": command.value}
    if isinstance(command, ExecuteSQL):
        # ints inside params become strings so big values survive JSON consumers
        params = [
            [str(v) if isinstance(v, int) else v for v in p] if isinstance(p, list) else p
            for p in command.params
        ]
        return {"command": command.command, "sql": command.sql, "params": params}
    raise CommandFormatError(f"unsupported command type {type(command).__name__}")


def command_from_json(value: Any) -> Command:
    if not isinstance(value, dict):
        raise CommandFormatError("expected a JSON object")

    tag = value.get("command")
    try:
        if tag == PNCounter.command:
            key, amount = value["key"], value["value"]
            if not isinstance(key, str):
                raise CommandFormatError("PNCounter key must be a string")
            return PNCounter(key=key, value=str(int(amount)))
        if tag == ExecuteSQL.command:
            sql = value["sql"]
            if not isinstance(sql, str):
                raise CommandFormatError("ExecuteSQL sql must be a string")
            return ExecuteSQL(sql=sql, params=tuple(value.get("params") or ()))
    except KeyError as e:
        raise CommandFormatError(f"{tag}: missing field {e.args[0]!r}") from e
    except (TypeError, ValueError) as e:
        raise CommandFormatError(f"{tag}: invalid value: {e}") from e

    raise CommandFormatError(f"unknown command {tag!r}")
