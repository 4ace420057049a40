"""Address decoding for balance keys."""

from ledger_reducers.address.codec import EXCLUDED, AddressCodec, AddressKind, classify

__all__ = ["AddressCodec", "AddressKind", "EXCLUDED", "classify"]
