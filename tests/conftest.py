"""Pytest configuration and fixtures."""

import pytest

from config import Config
from launchlens.models import (
    AuctionSale,
    CapabilityProfile,
    CollectionMetadata,
    CompositeRecord,
    FlatSale,
    Participation,
    RevealSchedule,
)
from tests.fakes import AUCTION_ID_HEX, FLAT_ID_HEX, FakeRecord, make_address

REQUESTER = "0x" + "ab" * 20


@pytest.fixture(autouse=True)
def interface_ids(monkeypatch):
    monkeypatch.setattr(Config, "AUCTION_INTERFACE_ID", AUCTION_ID_HEX)
    monkeypatch.setattr(Config, "FLAT_INTERFACE_ID", FLAT_ID_HEX)


@pytest.fixture
def auction_record():
    return FakeRecord.auction(make_address(1))


@pytest.fixture
def flat_record():
    return FakeRecord.flat(make_address(2))


@pytest.fixture
def composite_auction():
    return CompositeRecord(
        address=make_address(1),
        profile=CapabilityProfile.AUCTION_STYLE,
        collection=CollectionMetadata(name="Smol Joes", symbol="SJ", collection_size=100, total_supply=10),
        reveal=RevealSchedule(reveal_batch_size=10),
        sale=AuctionSale(current_phase=1, auction_price=10**18, public_sale_price=2 * 10**18),
    )


@pytest.fixture
def composite_flat():
    return CompositeRecord(
        address=make_address(2),
        profile=CapabilityProfile.FLAT_PRICE_STYLE,
        collection=CollectionMetadata(name="Flat Cats", symbol="FC", collection_size=50, total_supply=5),
        reveal=RevealSchedule(),
        sale=FlatSale(current_phase=3, sale_price=10**18),
        participation=Participation(requester=REQUESTER, balance=1, number_minted=1, allowlist_allowance=0),
    )
