"""Address classification and canonical key encoding.

Shelley-era addresses carry their layout in the top four bits of the
first byte and the network id in the bottom four:

    0000-0011  base        payment credential + staking credential
    0100-0101  pointer     payment credential + chain pointer
    0110-0111  enterprise  payment credential only
    1000       byron       legacy CBOR address, base58 encoded
    1110-1111  reward      standalone staking credential

Credentials are 28-byte hashes. In a base address bit 1 of the header
nibble flags a script staking credential, which carries over to the
reward header when the staking part is re-encoded on its own.
"""

from __future__ import annotations

from enum import Enum
from typing import Final

import base58
import bech32

from ledger_reducers.core.errors import AddressDecodeError
from ledger_reducers.core.types import AddressMode, Key

CREDENTIAL_LEN: Final = 28
MAINNET_ID: Final = 1

_BASE_LEN = 1 + 2 * CREDENTIAL_LEN
_REWARD_LEN = 1 + CREDENTIAL_LEN


class _Excluded:
    """Marker for addresses that carry no key under the requested mode."""

    _instance: _Excluded | None = None

    def __new__(cls) -> _Excluded:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "EXCLUDED"

    def __bool__(self) -> bool:
        return False


EXCLUDED: Final = _Excluded()


class AddressKind(str, Enum):
    BASE = "base"
    POINTER = "pointer"
    ENTERPRISE = "enterprise"
    BYRON = "byron"
    REWARD = "reward"


_KIND_BY_NIBBLE: dict[int, AddressKind] = {
    0b0000: AddressKind.BASE,
    0b0001: AddressKind.BASE,
    0b0010: AddressKind.BASE,
    0b0011: AddressKind.BASE,
    0b0100: AddressKind.POINTER,
    0b0101: AddressKind.POINTER,
    0b0110: AddressKind.ENTERPRISE,
    0b0111: AddressKind.ENTERPRISE,
    0b1000: AddressKind.BYRON,
    0b1110: AddressKind.REWARD,
    0b1111: AddressKind.REWARD,
}


def classify(raw: bytes) -> AddressKind:
    """Classify raw address bytes by header nibble."""
    if not raw:
        raise AddressDecodeError(raw, "empty address")
    kind = _KIND_BY_NIBBLE.get(raw[0] >> 4)
    if kind is None:
        raise AddressDecodeError(raw, f"unknown header nibble {raw[0] >> 4:04b}")
    return kind


def network_id(raw: bytes) -> int:
    return raw[0] & 0x0F


def bech32_key(hrp: str, payload: bytes) -> Key:
    """Bech32-encode ``payload`` without the BIP-173 length limit."""
    data = bech32.convertbits(payload, 8, 5)
    if data is None:
        raise AddressDecodeError(payload, "payload cannot be converted to 5-bit groups")
    return bech32.bech32_encode(hrp, data)


def address_hrp(network: int) -> str:
    return "addr" if network == MAINNET_ID else "addr_test"


def stake_hrp(network: int) -> str:
    return "stake" if network == MAINNET_ID else "stake_test"


def reward_address(network: int, stake_credential: bytes, script: bool = False) -> bytes:
    """Build standalone reward address bytes for a staking credential."""
    if len(stake_credential) != CREDENTIAL_LEN:
        raise ValueError(f"staking credential must be {CREDENTIAL_LEN} bytes, got {len(stake_credential)}")
    header = (0xF0 if script else 0xE0) | (network & 0x0F)
    return bytes([header]) + bytes(stake_credential)


class AddressCodec:
    """Stateless decoder from raw address bytes to canonical balance keys."""

    def decode(self, raw: bytes, mode: AddressMode) -> Key | _Excluded:
        """Decode ``raw`` under ``mode``.

        Returns the canonical key, or ``EXCLUDED`` when the address
        legitimately has no key in this mode. Raises ``AddressDecodeError``
        when the bytes match no known layout.
        """
        raw = bytes(raw)
        kind = classify(raw)
        if AddressMode(mode) is AddressMode.STAKE:
            return self._stake_key(raw, kind)
        return self._payment_key(raw, kind)

    def _payment_key(self, raw: bytes, kind: AddressKind) -> Key:
        if kind is AddressKind.BYRON:
            return base58.b58encode(raw).decode("ascii")

        self._check_length(raw, kind)
        network = network_id(raw)
        if kind is AddressKind.REWARD:
            return bech32_key(stake_hrp(network), raw)
        return bech32_key(address_hrp(network), raw)

    def _stake_key(self, raw: bytes, kind: AddressKind) -> Key | _Excluded:
        if kind is AddressKind.BYRON or kind is AddressKind.POINTER or kind is AddressKind.ENTERPRISE:
            return EXCLUDED

        self._check_length(raw, kind)
        network = network_id(raw)
        if kind is AddressKind.REWARD:
            return bech32_key(stake_hrp(network), raw)

        script = bool((raw[0] >> 4) & 0b0010)
        stake_credential = raw[1 + CREDENTIAL_LEN:_BASE_LEN]
        return bech32_key(stake_hrp(network), reward_address(network, stake_credential, script))

    @staticmethod
    def _check_length(raw: bytes, kind: AddressKind) -> None:
        if kind is AddressKind.BASE and len(raw) != _BASE_LEN:
            raise AddressDecodeError(raw, f"base address must be {_BASE_LEN} bytes, got {len(raw)}")
        if kind is AddressKind.REWARD and len(raw) != _REWARD_LEN:
            raise AddressDecodeError(raw, f"reward address must be {_REWARD_LEN} bytes, got {len(raw)}")
        if kind is AddressKind.ENTERPRISE and len(raw) != _REWARD_LEN:
            raise AddressDecodeError(raw, f"enterprise address must be {_REWARD_LEN} bytes, got {len(raw)}")
        if kind is AddressKind.POINTER and len(raw) <= _REWARD_LEN:
            raise AddressDecodeError(raw, "pointer address is missing its chain pointer")
