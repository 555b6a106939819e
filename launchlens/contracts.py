"""
Web3-backed readers for the launch registry and launch record contracts.

Each reader exposes a narrow query surface: supports_interface()/read() for a
record, count_of()/address_at() for the registry. Any web3 error is logged and
re-raised as ExternalReadFailure.
"""

import logging
from typing import Any, Optional, Union

from web3 import Web3
from web3.contract import Contract

from config import LAUNCH_ABI, REGISTRY_ABI
from launchlens.errors import ExternalReadFailure

logger = logging.getLogger(__name__)

BlockIdentifier = Optional[Union[int, str]]


def _call_kwargs(block_identifier: BlockIdentifier) -> dict:
    return {"block_identifier": block_identifier} if block_identifier is not None else {}


class LaunchContract:
    """Read-only view over one launch record contract."""

    def __init__(self, w3: Web3, address: str, block_identifier: BlockIdentifier = None):
        """
        Bind to a launch record.

        Args:
            w3: Web3 instance
            address: Launch record address
            block_identifier: Optional block number/tag; if None, reads latest state
        """
        self.address = Web3.to_checksum_address(address)
        self.block_identifier = block_identifier
        self.contract: Contract = w3.eth.contract(address=self.address, abi=LAUNCH_ABI)

    def __repr__(self) -> str:
        return f"<LaunchContract(address={self.address})>"

    def supports_interface(self, interface_id: bytes) -> bool:
        """ERC-165 probe. Errors propagate; the classifier decides what they mean."""
        fn = self.contract.functions.supportsInterface(interface_id)
        return bool(fn.call(**_call_kwargs(self.block_identifier)))

    def read(self, function_name: str, *args: Any) -> Any:
        """
        Call a view function on the record.

        Args:
            function_name: ABI function name
            *args: Call arguments

        Returns:
            Decoded return value

        Raises:
            ExternalReadFailure: If the call reverts, the node is unreachable
                or the response cannot be decoded
        """
        try:
            fn = getattr(self.contract.functions, function_name)
            value = fn(*args).call(**_call_kwargs(self.block_identifier))
        except Exception as e:
            logger.error(f"Failed to read {function_name} on {self.address}: {e}")
            raise ExternalReadFailure(self.address, function_name, e) from e

        logger.debug(f"{self.address}.{function_name}{args} -> {value!r}")
        return value


class LaunchRegistry:
    """Read-only view over the registry that indexes launch records by type."""

    def __init__(self, w3: Web3, address: str, block_identifier: BlockIdentifier = None):
        """
        Bind to the registry.

        Args:
            w3: Web3 instance
            address: Registry (factory) contract address
            block_identifier: Optional block number/tag; if None, reads latest state
        """
        self.w3 = w3
        self.address = Web3.to_checksum_address(address)
        self.block_identifier = block_identifier
        self.contract: Contract = w3.eth.contract(address=self.address, abi=REGISTRY_ABI)

    def count_of(self, profile_filter: int) -> int:
        """Number of records the registry holds under a type code."""
        try:
            count = self.contract.functions.numLaunchpegs(profile_filter).call(
                **_call_kwargs(self.block_identifier)
            )
        except Exception as e:
            logger.error(f"Failed to count records of type {profile_filter}: {e}")
            raise ExternalReadFailure(self.address, "numLaunchpegs", e) from e

        if isinstance(count, bool) or not isinstance(count, int) or count < 0:
            raise ExternalReadFailure(self.address, "numLaunchpegs", f"malformed count {count!r}")
        return count

    def address_at(self, profile_filter: int, index: int) -> str:
        """Address of the index-th record under a type code."""
        try:
            address = self.contract.functions.allLaunchpegs(profile_filter, index).call(
                **_call_kwargs(self.block_identifier)
            )
        except Exception as e:
            logger.error(f"Failed to fetch record {index} of type {profile_filter}: {e}")
            raise ExternalReadFailure(self.address, "allLaunchpegs", e) from e

        if not isinstance(address, str) or not Web3.is_address(address):
            raise ExternalReadFailure(self.address, "allLaunchpegs", f"malformed address {address!r}")
        return Web3.to_checksum_address(address)

    def open(self, address: str) -> LaunchContract:
        """Reader for a record address, pinned to the registry's block."""
        return LaunchContract(self.w3, address, self.block_identifier)
