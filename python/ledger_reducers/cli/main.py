"""CLI entry point for ledger reducers."""

from __future__ import annotations

import json
from pathlib import Path

import typer
import structlog
from pydantic import ValidationError

from ledger_reducers.core.config import PipelineConfig
from ledger_reducers.core.errors import ReducerError
from ledger_reducers.core.logging import configure_logging
from ledger_reducers.core.types import AddressMode, Direction

app = typer.Typer(
    name="ledger-reducers",
    help="Reduce ledger blocks into reversible balance commands",
)

logger = structlog.get_logger()


def _load_config(config_path: Path) -> PipelineConfig:
    config = PipelineConfig.from_yaml(config_path) if config_path.exists() else PipelineConfig()
    configure_logging(config.log_level, config.log_format)
    if not config.reducers:
        logger.warning("no_reducers_configured", config=str(config_path))
    return config


def _run(block_path: Path, config_path: Path, direction: Direction) -> None:
    from ledger_reducers.data.block_json import load_block
    from ledger_reducers.data.commands import command_to_json
    from ledger_reducers.reduce.composer import ReducerComposer

    try:
        config = _load_config(config_path)
        composer = ReducerComposer(config.reducers)
        block = load_block(block_path)
        commands = composer.reduce(block, direction)
    except (ReducerError, ValidationError) as e:
        typer.echo(f"error: {e}", err=True)
        raise typer.Exit(1)

    for command in commands:
        typer.echo(json.dumps(command_to_json(command), separators=(",", ":")))


@app.command()
def apply(
    block_path: Path = typer.Argument(..., help="Block JSON document", exists=True, dir_okay=False),
    config_path: Path = typer.Option(
        Path("reducers.yaml"),
        "--config", "-c",
        help="Path to pipeline configuration file",
    ),
) -> None:
    """Print the commands that apply a block, one JSON object per line."""
    _run(block_path, config_path, Direction.APPLY)


@app.command()
def undo(
    block_path: Path = typer.Argument(..., help="Block JSON document", exists=True, dir_okay=False),
    config_path: Path = typer.Option(
        Path("reducers.yaml"),
        "--config", "-c",
        help="Path to pipeline configuration file",
    ),
) -> None:
    """Print the commands that roll a block back, one JSON object per line."""
    _run(block_path, config_path, Direction.UNDO)


@app.command("inspect-address")
def inspect_address(
    address_hex: str = typer.Argument(..., help="Raw address bytes as hex"),
    mode: AddressMode = typer.Option(AddressMode.PAYMENT, "--mode", "-m"),
) -> None:
    """Show the balance key an address maps to."""
    from ledger_reducers.address.codec import EXCLUDED, AddressCodec, classify

    try:
        raw = bytes.fromhex(address_hex.removeprefix("0x"))
    except ValueError:
        typer.echo(f"error: not a hex string: {address_hex}", err=True)
        raise typer.Exit(1)

    try:
        kind = classify(raw)
        key = AddressCodec().decode(raw, mode)
    except ReducerError as e:
        typer.echo(f"error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"kind: {kind.value}")
    typer.echo(f"key: {'excluded' if key is EXCLUDED else key}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
