"""Tests for the web3-backed readers."""

from unittest.mock import MagicMock

import pytest
from web3 import Web3
from web3.exceptions import ContractLogicError

from config import LAUNCH_ABI, REGISTRY_ABI
from launchlens.contracts import LaunchContract, LaunchRegistry
from launchlens.errors import ExternalReadFailure
from tests.fakes import make_address

RECORD = make_address(0xA11CE)
REGISTRY = make_address(0xFAC7)


@pytest.fixture
def w3():
    return MagicMock()


def test_launch_contract_binds_checksummed_address(w3):
    LaunchContract(w3, RECORD)
    w3.eth.contract.assert_called_once_with(address=Web3.to_checksum_address(RECORD), abi=LAUNCH_ABI)


def test_read_returns_decoded_value(w3):
    contract = w3.eth.contract.return_value
    contract.functions.collectionSize.return_value.call.return_value = 10000

    record = LaunchContract(w3, RECORD)

    assert record.read("collectionSize") == 10000
    contract.functions.collectionSize.return_value.call.assert_called_once_with()


def test_read_passes_arguments_and_block(w3):
    contract = w3.eth.contract.return_value
    contract.functions.getAuctionPrice.return_value.call.return_value = 5

    record = LaunchContract(w3, RECORD, block_identifier=123)

    assert record.read("getAuctionPrice", 1_649_000_000) == 5
    contract.functions.getAuctionPrice.assert_called_once_with(1_649_000_000)
    contract.functions.getAuctionPrice.return_value.call.assert_called_once_with(block_identifier=123)


def test_read_wraps_web3_errors(w3):
    contract = w3.eth.contract.return_value
    cause = ContractLogicError("execution reverted")
    contract.functions.baseURI.return_value.call.side_effect = cause

    record = LaunchContract(w3, RECORD)

    with pytest.raises(ExternalReadFailure) as exc_info:
        record.read("baseURI")
    assert exc_info.value.function == "baseURI"
    assert exc_info.value.address == Web3.to_checksum_address(RECORD)
    assert exc_info.value.__cause__ is cause


def test_supports_interface_propagates_errors(w3):
    contract = w3.eth.contract.return_value
    contract.functions.supportsInterface.return_value.call.side_effect = ValueError("no data")

    record = LaunchContract(w3, RECORD)

    with pytest.raises(ValueError):
        record.supports_interface(b"\x01\xff\xc9\xa7")


def test_supports_interface_returns_bool(w3):
    contract = w3.eth.contract.return_value
    contract.functions.supportsInterface.return_value.call.return_value = 1

    assert LaunchContract(w3, RECORD).supports_interface(b"\x01\xff\xc9\xa7") is True
    contract.functions.supportsInterface.assert_called_once_with(b"\x01\xff\xc9\xa7")


def test_registry_count_and_address(w3):
    contract = w3.eth.contract.return_value
    contract.functions.numLaunchpegs.return_value.call.return_value = 7
    contract.functions.allLaunchpegs.return_value.call.return_value = RECORD

    registry = LaunchRegistry(w3, REGISTRY)

    assert registry.count_of(1) == 7
    assert registry.address_at(1, 3) == Web3.to_checksum_address(RECORD)
    contract.functions.numLaunchpegs.assert_called_once_with(1)
    contract.functions.allLaunchpegs.assert_called_once_with(1, 3)
    w3.eth.contract.assert_called_with(address=Web3.to_checksum_address(REGISTRY), abi=REGISTRY_ABI)


@pytest.mark.parametrize("count", [-1, "7", None, True])
def test_registry_rejects_malformed_count(w3, count):
    w3.eth.contract.return_value.functions.numLaunchpegs.return_value.call.return_value = count
    with pytest.raises(ExternalReadFailure):
        LaunchRegistry(w3, REGISTRY).count_of(0)


def test_registry_rejects_malformed_address(w3):
    w3.eth.contract.return_value.functions.allLaunchpegs.return_value.call.return_value = "0x1234"
    with pytest.raises(ExternalReadFailure):
        LaunchRegistry(w3, REGISTRY).address_at(0, 0)


def test_registry_wraps_unreachable_node(w3):
    cause = ConnectionError("connection refused")
    w3.eth.contract.return_value.functions.numLaunchpegs.return_value.call.side_effect = cause
    with pytest.raises(ExternalReadFailure) as exc_info:
        LaunchRegistry(w3, REGISTRY).count_of(0)
    assert exc_info.value.__cause__ is cause


def test_registry_opens_records_at_the_same_block(w3):
    registry = LaunchRegistry(w3, REGISTRY, block_identifier="latest")
    record = registry.open(RECORD)
    assert isinstance(record, LaunchContract)
    assert record.block_identifier == "latest"
