"""
Assembles a CompositeRecord from the individual view functions of a launch
record.

The record is classified first; an unrecognized record is rejected before any
field is read. Every read is independent and any failure aborts the whole
aggregation, so a CompositeRecord is either complete or not returned at all.
"""

import logging
from typing import Any, Optional

from web3 import Web3

from launchlens.classifier import classify
from launchlens.errors import ExternalReadFailure, UnrecognizedRecord
from launchlens.models import (
    AuctionSale,
    CapabilityProfile,
    CollectionMetadata,
    CompositeRecord,
    FlatSale,
    Participation,
    RevealSchedule,
)

logger = logging.getLogger(__name__)


def _uint(record, function_name: str, *args: Any) -> int:
    value = record.read(function_name, *args)
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ExternalReadFailure(record.address, function_name, f"expected uint, got {value!r}")
    return value


def _text(record, function_name: str) -> str:
    value = record.read(function_name)
    if not isinstance(value, str):
        raise ExternalReadFailure(record.address, function_name, f"expected string, got {value!r}")
    return value


def read_collection(record) -> CollectionMetadata:
    return CollectionMetadata(
        name=_text(record, "name"),
        symbol=_text(record, "symbol"),
        collection_size=_uint(record, "collectionSize"),
        max_batch_size=_uint(record, "maxBatchSize"),
        total_supply=_uint(record, "totalSupply"),
        unrevealed_uri=_text(record, "unrevealedURI"),
        base_uri=_text(record, "baseURI"),
    )


def read_reveal(record) -> RevealSchedule:
    return RevealSchedule(
        reveal_batch_size=_uint(record, "revealBatchSize"),
        last_token_revealed=_uint(record, "lastTokenRevealed"),
        reveal_start_time=_uint(record, "revealStartTime"),
        reveal_interval=_uint(record, "revealInterval"),
    )


def read_auction_sale(record) -> AuctionSale:
    """
    Read the auction-style sale configuration.

    Prices are taken from the record's own price functions rather than
    recomputed from the curve parameters, so pauses or manual adjustments on
    the record are reflected.
    """
    auction_sale_start_time = _uint(record, "auctionSaleStartTime")

    return AuctionSale(
        amount_for_auction=_uint(record, "amountForAuction"),
        amount_for_allowlist=_uint(record, "amountForAllowlist"),
        amount_for_devs=_uint(record, "amountForDevs"),
        auction_sale_start_time=auction_sale_start_time,
        allowlist_start_time=_uint(record, "allowlistStartTime"),
        public_sale_start_time=_uint(record, "publicSaleStartTime"),
        auction_start_price=_uint(record, "auctionStartPrice"),
        auction_end_price=_uint(record, "auctionEndPrice"),
        auction_sale_duration=_uint(record, "auctionSaleDuration"),
        auction_drop_interval=_uint(record, "auctionDropInterval"),
        auction_drop_per_step=_uint(record, "auctionDropPerStep"),
        allowlist_discount_percent=_uint(record, "allowlistDiscountPercent"),
        public_sale_discount_percent=_uint(record, "publicSaleDiscountPercent"),
        current_phase=_uint(record, "currentPhase"),
        auction_price=_uint(record, "getAuctionPrice", auction_sale_start_time),
        allowlist_price=_uint(record, "getAllowlistPrice"),
        public_sale_price=_uint(record, "getPublicSalePrice"),
        amount_minted_during_auction=_uint(record, "amountMintedDuringAuction"),
        amount_minted_during_allowlist=_uint(record, "amountMintedDuringAllowlist"),
        amount_minted_during_public_sale=_uint(record, "amountMintedDuringPublicSale"),
        last_auction_price=_uint(record, "lastAuctionPrice"),
    )


def read_flat_sale(record) -> FlatSale:
    return FlatSale(
        current_phase=_uint(record, "currentPhase"),
        amount_for_allowlist=_uint(record, "amountForAllowlist"),
        amount_for_devs=_uint(record, "amountForDevs"),
        allowlist_start_time=_uint(record, "allowlistStartTime"),
        public_sale_start_time=_uint(record, "publicSaleStartTime"),
        allowlist_price=_uint(record, "allowlistPrice"),
        sale_price=_uint(record, "salePrice"),
        amount_minted_during_allowlist=_uint(record, "amountMintedDuringAllowlist"),
        amount_minted_during_public_sale=_uint(record, "amountMintedDuringPublicSale"),
    )


def read_participation(record, requester: str) -> Participation:
    return Participation(
        requester=requester,
        balance=_uint(record, "balanceOf", requester),
        number_minted=_uint(record, "numberMinted", requester),
        allowlist_allowance=_uint(record, "allowlist", requester),
    )


_SALE_READERS = {
    CapabilityProfile.AUCTION_STYLE: read_auction_sale,
    CapabilityProfile.FLAT_PRICE_STYLE: read_flat_sale,
}


def aggregate(record, requester: Optional[str] = None) -> CompositeRecord:
    """
    Build the composite view of one launch record.

    Args:
        record: Object with ``address``, ``supports_interface(bytes)`` and
            ``read(function_name, *args)``
        requester: Optional wallet address for participation counters

    Returns:
        Fully populated CompositeRecord

    Raises:
        ValueError: If requester is not a valid address; checked before any read
        UnrecognizedRecord: If the record matches neither capability profile
        ExternalReadFailure: If any field read fails
    """
    if requester is not None:
        requester = Web3.to_checksum_address(requester)

    profile = classify(record)
    if profile == CapabilityProfile.UNRECOGNIZED:
        raise UnrecognizedRecord(record.address)

    collection = read_collection(record)
    reveal = read_reveal(record)
    sale = _SALE_READERS[profile](record)

    participation = Participation()
    if requester is not None:
        participation = read_participation(record, requester)

    logger.debug(f"Aggregated {record.address} ({profile.name}, {collection.symbol})")

    return CompositeRecord(
        address=record.address,
        profile=profile,
        collection=collection,
        reveal=reveal,
        sale=sale,
        participation=participation,
    )
