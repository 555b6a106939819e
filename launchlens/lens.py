"""
Launch Lens facade: one Web3 connection, one registry, three queries.
"""

import logging
from typing import List, Optional

from web3 import Web3

from config import Config
from launchlens.aggregator import aggregate
from launchlens.classifier import classify
from launchlens.collector import collect
from launchlens.contracts import BlockIdentifier, LaunchContract, LaunchRegistry
from launchlens.models import CapabilityProfile, CompositeRecord

logger = logging.getLogger(__name__)


class LaunchLens:
    """Batched read-only views over launch records indexed by a registry."""

    def __init__(
        self,
        rpc_url: str,
        registry_address: str,
        block_identifier: BlockIdentifier = None,
        max_workers: Optional[int] = None,
    ):
        """
        Initialize lens with Web3 connection.

        Args:
            rpc_url: JSON-RPC endpoint
            registry_address: Registry (factory) contract address
            block_identifier: Optional block number/tag to pin every read to
            max_workers: Parallel aggregations in collect()
        """
        self.w3 = Web3(Web3.HTTPProvider(rpc_url, request_kwargs={"timeout": Config.RPC_TIMEOUT}))
        self.block_identifier = block_identifier
        self.max_workers = max_workers or Config.MAX_WORKERS
        self.registry = LaunchRegistry(self.w3, registry_address, block_identifier)

        logger.info(f"Lens initialized for registry: {self.registry.address}")
        if block_identifier is not None:
            logger.info(f"Reads pinned to block {block_identifier}")

    def get_latest_block(self) -> int:
        return self.w3.eth.block_number

    def record(self, address: str) -> LaunchContract:
        return LaunchContract(self.w3, address, self.block_identifier)

    def classify(self, address: str) -> CapabilityProfile:
        return classify(self.record(address))

    def aggregate(self, address: str, requester: Optional[str] = None) -> CompositeRecord:
        return aggregate(self.record(address), requester)

    def collect(
        self,
        profile_filter: int,
        offset: int,
        limit: int,
        requester: Optional[str] = None,
    ) -> List[CompositeRecord]:
        return collect(
            self.registry,
            profile_filter,
            offset,
            limit,
            requester=requester,
            max_workers=self.max_workers,
        )

    def count(self, profile_filter: int) -> int:
        return self.registry.count_of(profile_filter)
