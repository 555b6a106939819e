"""
Capability classification of launch records via ERC-165 probes.
"""

import logging
from functools import reduce
from typing import Iterable, Tuple

from web3 import Web3

from config import Config, is_bytes4_hex
from launchlens.errors import ConfigurationError
from launchlens.models import CapabilityProfile

logger = logging.getLogger(__name__)


def interface_id(signatures: Iterable[str]) -> bytes:
    """
    ERC-165 interface id: XOR of the 4-byte selectors of every function.

    Args:
        signatures: Canonical function signatures, e.g. "salePrice()"

    Returns:
        4-byte interface id
    """
    selectors = (int.from_bytes(Web3.keccak(text=sig)[:4], "big") for sig in signatures)
    return reduce(lambda a, b: a ^ b, selectors, 0).to_bytes(4, "big")


def _configured_id(name: str) -> bytes:
    value = getattr(Config, name)
    if not value:
        raise ConfigurationError(f"{name} not set in .env")
    if not is_bytes4_hex(value):
        raise ConfigurationError(f"{name} must be a 0x-prefixed 4-byte hex string (got {value!r})")
    return bytes.fromhex(value[2:])


def auction_interface_id() -> bytes:
    return _configured_id("AUCTION_INTERFACE_ID")


def flat_price_interface_id() -> bytes:
    return _configured_id("FLAT_INTERFACE_ID")


def probe_order() -> Tuple[Tuple[CapabilityProfile, bytes], ...]:
    """Profiles and their interface ids; the order is the tie-break, auction first."""
    return (
        (CapabilityProfile.AUCTION_STYLE, auction_interface_id()),
        (CapabilityProfile.FLAT_PRICE_STYLE, flat_price_interface_id()),
    )


def _probe(record, interface: bytes) -> bool:
    try:
        return bool(record.supports_interface(interface))
    except Exception as e:
        # No ERC-165 surface, revert or unreachable all count as "does not support"
        logger.debug(f"supportsInterface(0x{interface.hex()}) failed on {record.address}: {e}")
        return False


def classify(record) -> CapabilityProfile:
    """
    Determine which capability profile a launch record exposes.

    Args:
        record: Object with an ``address`` and ``supports_interface(bytes)``

    Returns:
        First matching profile in probe order, or UNRECOGNIZED

    Raises:
        ConfigurationError: If either interface id is missing or malformed;
            nothing is probed in that case
    """
    for profile, interface in probe_order():
        if _probe(record, interface):
            logger.debug(f"{record.address} classified as {profile.name}")
            return profile

    logger.debug(f"{record.address} is unrecognized")
    return CapabilityProfile.UNRECOGNIZED
