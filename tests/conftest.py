import pytest
import structlog

from ledger_reducers.address.codec import AddressCodec

from factories import block_of, base_address, enterprise_address, tx, OTHER_PAYMENT_CRED, OTHER_STAKE_CRED, BYRON_ADDR


@pytest.fixture
def codec() -> AddressCodec:
    return AddressCodec()


@pytest.fixture
def busy_block():
    """Several transactions touching overlapping keys, including a self-cancelling one."""
    a = base_address()
    b = base_address(payment=OTHER_PAYMENT_CRED, stake=OTHER_STAKE_CRED)
    c = enterprise_address()
    return block_of(
        tx(outputs=[(a, 1_000_000), (b, 250)], spends=[(c, 40)]),
        tx(outputs=[(a, 5)], spends=[(a, 5), (b, 100)], unresolved=2),
        tx(outputs=[(BYRON_ADDR, 77), (c, 12)], spends=[(BYRON_ADDR, 7)]),
        slot=4242,
    )


@pytest.fixture(autouse=True)
def _reset_structlog():
    yield
    structlog.reset_defaults()
