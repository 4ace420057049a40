"""Exception hierarchy for ledger reducers."""

from __future__ import annotations


class ReducerError(Exception):
    """Base class for every error raised by this package."""


class AddressDecodeError(ReducerError):
    """Raw address bytes do not match any recognized layout."""

    def __init__(self, raw: bytes, reason: str) -> None:
        self.hex = bytes(raw).hex()
        self.reason = reason
        super().__init__(f"address {self.hex!r} could not be decoded: {reason}")


class AccumulatorConsumedError(ReducerError):
    """The accumulator was already finalized."""


class UnknownReducerError(ReducerError):
    def __init__(self, name: str, known: list[str]) -> None:
        self.name = name
        self.known = known
        super().__init__(f"reducer {name!r} not registered (known: {', '.join(known) or 'none'})")


class BlockFormatError(ReducerError):
    """Block payload is not a recognizable block document."""


class CommandFormatError(ReducerError):
    """Command payload is not a recognizable command document."""
