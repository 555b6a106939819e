"""
Configuration constants and settings for Launch Lens.

Centralizes all configuration including:
- Registry address
- RPC endpoints
- Capability interface ids
- Fan-out limits
"""

import os
from dotenv import load_dotenv

load_dotenv()

# ═══ Contract Addresses ═══
REGISTRY_ADDRESS = os.getenv("REGISTRY_ADDRESS", "")

# ═══ RPC Configuration ═══
RPC_URL = os.getenv("RPC_URL", "https://api.avax.network/ext/bc/C/rpc")
RPC_TIMEOUT = int(os.getenv("RPC_TIMEOUT", "30") or "30")

# ═══ Capability Interface Ids ═══
# Must match the ids the deployed contracts report from supportsInterface
AUCTION_INTERFACE_ID = os.getenv("AUCTION_INTERFACE_ID", "")
FLAT_INTERFACE_ID = os.getenv("FLAT_INTERFACE_ID", "")

# ═══ Fan-out ═══
MAX_WORKERS = int(os.getenv("MAX_WORKERS", "8") or "8")
DEFAULT_PAGE_SIZE = int(os.getenv("DEFAULT_PAGE_SIZE", "20") or "20")

# ═══ Registry Type Codes ═══
# The registry's own tagging, not the live capability probe
REGISTRY_TYPES = {
    "auction": 0,
    "flat": 1,
}
