"""
Data model for aggregated launch records.

A CompositeRecord is built fresh for every query and never mutated after
construction. Exactly one sale branch carries data, selected by the record's
capability profile.
"""

from dataclasses import asdict, dataclass, field
from enum import IntEnum
from typing import Any, Dict, Optional, Union

from web3 import Web3


class CapabilityProfile(IntEnum):
    """Which capability surface a launch record exposes."""

    UNRECOGNIZED = 0
    AUCTION_STYLE = 1
    FLAT_PRICE_STYLE = 2


class Phase(IntEnum):
    """Sale phase as reported by the record's currentPhase()."""

    NOT_STARTED = 0
    DUTCH_AUCTION = 1
    ALLOWLIST = 2
    PUBLIC_SALE = 3


def phase_name(value: int) -> str:
    try:
        return Phase(value).name
    except ValueError:
        return f"UNKNOWN({value})"


@dataclass(frozen=True)
class CollectionMetadata:
    """Identity fields of the collection."""
    name: str = ""
    symbol: str = ""
    collection_size: int = 0
    max_batch_size: int = 0
    total_supply: int = 0
    unrevealed_uri: str = ""
    base_uri: str = ""


@dataclass(frozen=True)
class RevealSchedule:
    """Batch reveal progress."""
    reveal_batch_size: int = 0
    last_token_revealed: int = 0
    reveal_start_time: int = 0
    reveal_interval: int = 0


@dataclass(frozen=True)
class AuctionSale:
    """Sale configuration of an auction-style launch.

    auction_price, allowlist_price and public_sale_price are whatever the
    record's own price functions returned at read time.
    """
    amount_for_auction: int = 0
    amount_for_allowlist: int = 0
    amount_for_devs: int = 0
    auction_sale_start_time: int = 0
    allowlist_start_time: int = 0
    public_sale_start_time: int = 0
    auction_start_price: int = 0
    auction_end_price: int = 0
    auction_sale_duration: int = 0
    auction_drop_interval: int = 0
    auction_drop_per_step: int = 0
    allowlist_discount_percent: int = 0
    public_sale_discount_percent: int = 0
    current_phase: int = Phase.NOT_STARTED
    auction_price: int = 0
    allowlist_price: int = 0
    public_sale_price: int = 0
    amount_minted_during_auction: int = 0
    amount_minted_during_allowlist: int = 0
    amount_minted_during_public_sale: int = 0
    last_auction_price: int = 0


@dataclass(frozen=True)
class FlatSale:
    """Sale configuration of a flat-price launch."""
    current_phase: int = Phase.NOT_STARTED
    amount_for_allowlist: int = 0
    amount_for_devs: int = 0
    allowlist_start_time: int = 0
    public_sale_start_time: int = 0
    allowlist_price: int = 0
    sale_price: int = 0
    amount_minted_during_allowlist: int = 0
    amount_minted_during_public_sale: int = 0


@dataclass(frozen=True)
class Participation:
    """Requester-scoped counters. All zero when no requester was given."""
    requester: Optional[str] = None
    balance: int = 0
    number_minted: int = 0
    allowlist_allowance: int = 0


Sale = Union[AuctionSale, FlatSale]

_SALE_TYPES = {
    CapabilityProfile.AUCTION_STYLE: AuctionSale,
    CapabilityProfile.FLAT_PRICE_STYLE: FlatSale,
}


@dataclass(frozen=True)
class CompositeRecord:
    """Full aggregated view of one launch record."""
    address: str
    profile: CapabilityProfile
    collection: CollectionMetadata
    reveal: RevealSchedule
    sale: Sale
    participation: Participation = field(default_factory=Participation)

    def __post_init__(self):
        expected = _SALE_TYPES.get(self.profile)
        if expected is None:
            raise ValueError(f"Cannot build a composite record for profile {self.profile.name}")
        if not isinstance(self.sale, expected):
            raise TypeError(
                f"{self.profile.name} record needs {expected.__name__}, got {type(self.sale).__name__}"
            )

    @property
    def auction_sale(self) -> AuctionSale:
        if isinstance(self.sale, AuctionSale):
            return self.sale
        return AuctionSale()

    @property
    def flat_sale(self) -> FlatSale:
        if isinstance(self.sale, FlatSale):
            return self.sale
        return FlatSale()

    @property
    def current_phase(self) -> int:
        return self.sale.current_phase

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize to a JSON-ready dictionary.

        Both sale branches are present; the one not matching the profile is
        left at its zero value.

        Returns:
            Nested dictionary of plain Python values
        """
        participation = asdict(self.participation)
        if participation["requester"]:
            participation["requester"] = Web3.to_checksum_address(participation["requester"])

        auction = asdict(self.auction_sale)
        auction["current_phase"] = phase_name(auction["current_phase"])
        flat = asdict(self.flat_sale)
        flat["current_phase"] = phase_name(flat["current_phase"])

        return {
            "address": Web3.to_checksum_address(self.address),
            "profile": self.profile.name,
            "collection": asdict(self.collection),
            "reveal": asdict(self.reveal),
            "auction_sale": auction,
            "flat_sale": flat,
            "participation": participation,
        }
