"""
Paginated collection of composite records from the registry.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional

from web3 import Web3

from config import Config
from launchlens.aggregator import aggregate
from launchlens.models import CompositeRecord

logger = logging.getLogger(__name__)


def collect(
    registry,
    profile_filter: int,
    offset: int,
    limit: int,
    requester: Optional[str] = None,
    max_workers: Optional[int] = None,
) -> List[CompositeRecord]:
    """
    Aggregate a window of the registry's records for one type code.

    Args:
        registry: Object with ``count_of(type)``, ``address_at(type, index)``
            and ``open(address)``
        profile_filter: Registry type code
        offset: First registry index of the window
        limit: Maximum number of records to return
        requester: Optional wallet address for participation counters
        max_workers: Parallel aggregations (defaults to Config.MAX_WORKERS)

    Returns:
        Composite records in ascending registry index order. Empty when the
        window starts past the end or limit is zero.

    Raises:
        ValueError: If offset or limit is negative or requester is not an address
        UnrecognizedRecord, ExternalReadFailure: If any record in the window fails
    """
    if offset < 0 or limit < 0:
        raise ValueError(f"offset and limit must be non-negative (got {offset}, {limit})")
    if requester is not None:
        requester = Web3.to_checksum_address(requester)

    total = registry.count_of(profile_filter)
    if offset >= total or limit == 0:
        logger.info(f"Empty window for type {profile_filter}: offset={offset}, limit={limit}, total={total}")
        return []

    end = min(offset + limit, total)
    workers = max_workers or Config.MAX_WORKERS

    def _fetch(index: int) -> CompositeRecord:
        address = registry.address_at(profile_filter, index)
        return aggregate(registry.open(address), requester)

    indices = range(offset, end)
    if workers <= 1 or len(indices) == 1:
        results = [_fetch(i) for i in indices]
    else:
        logger.debug(f"Using parallel aggregation with {workers} workers")
        with ThreadPoolExecutor(max_workers=min(workers, len(indices))) as executor:
            # map() yields in submission order and re-raises the first failure
            results = list(executor.map(_fetch, indices))

    logger.info(f"Collected {len(results)} records of type {profile_filter} [{offset}, {end}) of {total}")
    return results
