"""Configuration layer and shared ABI exports."""

import os
from typing import Any, Dict, List

from dotenv import load_dotenv

from .settings import (
	AUCTION_INTERFACE_ID,
	DEFAULT_PAGE_SIZE,
	FLAT_INTERFACE_ID,
	MAX_WORKERS,
	REGISTRY_ADDRESS,
	RPC_TIMEOUT,
	RPC_URL,
)

load_dotenv()


class Config:
	RPC_URL = RPC_URL
	RPC_TIMEOUT = RPC_TIMEOUT

	REGISTRY_ADDRESS = REGISTRY_ADDRESS

	AUCTION_INTERFACE_ID = AUCTION_INTERFACE_ID
	FLAT_INTERFACE_ID = FLAT_INTERFACE_ID

	MAX_WORKERS = MAX_WORKERS
	DEFAULT_PAGE_SIZE = DEFAULT_PAGE_SIZE

	LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
	LOG_FILE = os.getenv("LOG_FILE", "")

	@classmethod
	def validate(cls) -> list[str]:
		"""
		Validate configuration and return list of errors.

		Returns:
			List of error messages, empty if valid
		"""
		errors = []

		if not cls.RPC_URL:
			errors.append("RPC_URL not set in .env")

		if not cls.REGISTRY_ADDRESS:
			errors.append("REGISTRY_ADDRESS not set in .env")

		if cls.MAX_WORKERS <= 0:
			errors.append("MAX_WORKERS must be positive")

		for name in ("AUCTION_INTERFACE_ID", "FLAT_INTERFACE_ID"):
			value = getattr(cls, name)
			if not value:
				errors.append(f"{name} not set in .env")
			elif not is_bytes4_hex(value):
				errors.append(f"{name} must be a 0x-prefixed 4-byte hex string")

		return errors


def is_bytes4_hex(value: str) -> bool:
	if not value.startswith("0x") or len(value) != 10:
		return False
	try:
		bytes.fromhex(value[2:])
	except ValueError:
		return False
	return True


def _view(name: str, outputs: str, inputs: List[str] = ()) -> Dict[str, Any]:
	return {
		"inputs": [{"internalType": t, "name": "", "type": t} for t in inputs],
		"name": name,
		"outputs": [{"internalType": outputs, "name": "", "type": outputs}],
		"stateMutability": "view",
		"type": "function",
	}


# Minimal registry (factory) ABI
REGISTRY_ABI = [
	_view("numLaunchpegs", "uint256", ["uint256"]),
	_view("allLaunchpegs", "address", ["uint256", "uint256"]),
]

# Minimal launch record ABI, union of both capability profiles
LAUNCH_ABI = [
	_view("supportsInterface", "bool", ["bytes4"]),
	# Collection
	_view("name", "string"),
	_view("symbol", "string"),
	_view("collectionSize", "uint256"),
	_view("maxBatchSize", "uint256"),
	_view("totalSupply", "uint256"),
	_view("unrevealedURI", "string"),
	_view("baseURI", "string"),
	_view("balanceOf", "uint256", ["address"]),
	# Reveal
	_view("revealBatchSize", "uint256"),
	_view("lastTokenRevealed", "uint256"),
	_view("revealStartTime", "uint256"),
	_view("revealInterval", "uint256"),
	# Shared sale
	_view("currentPhase", "uint8"),
	_view("amountForAllowlist", "uint256"),
	_view("amountForDevs", "uint256"),
	_view("allowlistStartTime", "uint256"),
	_view("publicSaleStartTime", "uint256"),
	_view("amountMintedDuringAllowlist", "uint256"),
	_view("amountMintedDuringPublicSale", "uint256"),
	_view("numberMinted", "uint256", ["address"]),
	_view("allowlist", "uint256", ["address"]),
	# Auction-style
	_view("amountForAuction", "uint256"),
	_view("auctionSaleStartTime", "uint256"),
	_view("auctionStartPrice", "uint256"),
	_view("auctionEndPrice", "uint256"),
	_view("auctionSaleDuration", "uint256"),
	_view("auctionDropInterval", "uint256"),
	_view("auctionDropPerStep", "uint256"),
	_view("allowlistDiscountPercent", "uint256"),
	_view("publicSaleDiscountPercent", "uint256"),
	_view("getAuctionPrice", "uint256", ["uint256"]),
	_view("getAllowlistPrice", "uint256"),
	_view("getPublicSalePrice", "uint256"),
	_view("amountMintedDuringAuction", "uint256"),
	_view("lastAuctionPrice", "uint256"),
	# Flat-price-style
	_view("allowlistPrice", "uint256"),
	_view("salePrice", "uint256"),
]

__all__ = ["Config", "REGISTRY_ABI", "LAUNCH_ABI", "is_bytes4_hex"]
