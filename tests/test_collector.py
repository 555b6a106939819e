"""Tests for paginated collection over the registry."""

import pytest

from launchlens.collector import collect
from launchlens.errors import ExternalReadFailure, UnrecognizedRecord
from launchlens.models import CapabilityProfile
from tests.conftest import REQUESTER
from tests.fakes import FakeRecord, FakeRegistry, make_address

AUCTION_TYPE = 0
FLAT_TYPE = 1


def build_registry(count: int, **record_kwargs) -> FakeRegistry:
    records = [FakeRecord.auction(make_address(100 + i), **record_kwargs) for i in range(count)]
    return FakeRegistry({AUCTION_TYPE: records, FLAT_TYPE: []})


def test_offset_past_end_returns_empty():
    registry = build_registry(3)
    assert collect(registry, AUCTION_TYPE, offset=5, limit=10) == []
    assert registry.index_calls == []


def test_offset_equal_to_total_returns_empty():
    registry = build_registry(3)
    assert collect(registry, AUCTION_TYPE, offset=3, limit=1) == []


def test_zero_limit_returns_empty():
    registry = build_registry(5)
    assert collect(registry, AUCTION_TYPE, offset=0, limit=0) == []
    assert registry.index_calls == []


def test_empty_type_returns_empty():
    registry = build_registry(3)
    assert collect(registry, FLAT_TYPE, offset=0, limit=10) == []
    assert registry.count_calls == [FLAT_TYPE]


def test_window_is_clamped_to_total():
    registry = build_registry(5)
    results = collect(registry, AUCTION_TYPE, offset=2, limit=10, max_workers=1)

    assert [r.address for r in results] == [make_address(102), make_address(103), make_address(104)]
    assert registry.index_calls == [(AUCTION_TYPE, 2), (AUCTION_TYPE, 3), (AUCTION_TYPE, 4)]


def test_window_within_bounds_returns_exactly_limit():
    registry = build_registry(10)
    results = collect(registry, AUCTION_TYPE, offset=4, limit=3)
    assert [r.address for r in results] == [make_address(104), make_address(105), make_address(106)]


def test_parallel_results_keep_index_order():
    records = [
        FakeRecord.auction(make_address(200 + i), delay=0.002 * (6 - i))
        for i in range(6)
    ]
    registry = FakeRegistry({AUCTION_TYPE: records})

    results = collect(registry, AUCTION_TYPE, offset=0, limit=6, max_workers=6)

    assert [r.address for r in results] == [r.address for r in records]
    assert all(r.profile == CapabilityProfile.AUCTION_STYLE for r in results)


def test_requester_is_passed_to_every_record():
    registry = build_registry(3)
    results = collect(registry, AUCTION_TYPE, offset=0, limit=3, requester=REQUESTER)

    for result in results:
        assert result.participation.requester.lower() == REQUESTER
        assert result.participation.balance == 3


def test_failure_in_window_fails_whole_call():
    records = [
        FakeRecord.auction(make_address(300)),
        FakeRecord.auction(make_address(301), fail_on=["totalSupply"]),
        FakeRecord.auction(make_address(302)),
    ]
    registry = FakeRegistry({AUCTION_TYPE: records})

    with pytest.raises(ExternalReadFailure):
        collect(registry, AUCTION_TYPE, offset=0, limit=3)


def test_failure_in_window_fails_sequential_call():
    records = [
        FakeRecord.auction(make_address(300)),
        FakeRecord.auction(make_address(301), fail_on=["totalSupply"]),
        FakeRecord.auction(make_address(302)),
    ]
    registry = FakeRegistry({AUCTION_TYPE: records})

    with pytest.raises(ExternalReadFailure):
        collect(registry, AUCTION_TYPE, offset=0, limit=3, max_workers=1)
    assert records[2].reads == []


def test_unrecognized_record_in_window_fails_whole_call():
    records = [
        FakeRecord.flat(make_address(400)),
        FakeRecord(make_address(401)),
    ]
    registry = FakeRegistry({FLAT_TYPE: records})

    with pytest.raises(UnrecognizedRecord):
        collect(registry, FLAT_TYPE, offset=0, limit=2)


def test_registry_type_code_is_independent_of_live_profile():
    # Tagged flat by the registry but probes as auction-style
    registry = FakeRegistry({FLAT_TYPE: [FakeRecord.auction(make_address(500))]})
    (result,) = collect(registry, FLAT_TYPE, offset=0, limit=1)
    assert result.profile == CapabilityProfile.AUCTION_STYLE


def test_count_failure_propagates():
    registry = FakeRegistry({AUCTION_TYPE: []}, fail_count=True)
    with pytest.raises(ExternalReadFailure):
        collect(registry, AUCTION_TYPE, offset=0, limit=5)


@pytest.mark.parametrize("offset, limit", [(-1, 5), (0, -1)])
def test_negative_window_is_rejected(offset, limit):
    registry = build_registry(3)
    with pytest.raises(ValueError):
        collect(registry, AUCTION_TYPE, offset=offset, limit=limit)
    assert registry.count_calls == []


def test_invalid_requester_is_rejected_before_registry_reads():
    registry = build_registry(3)
    with pytest.raises(ValueError):
        collect(registry, AUCTION_TYPE, offset=0, limit=3, requester="not-an-address")
    assert registry.count_calls == []
    assert registry.index_calls == []
