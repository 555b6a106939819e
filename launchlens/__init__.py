"""
Launch Lens: batched read-only views over collection launch contracts.
"""

from launchlens.aggregator import aggregate
from launchlens.classifier import classify
from launchlens.collector import collect
from launchlens.errors import (
    ConfigurationError,
    ExternalReadFailure,
    LensError,
    UnrecognizedRecord,
)
from launchlens.lens import LaunchLens
from launchlens.models import (
    AuctionSale,
    CapabilityProfile,
    CollectionMetadata,
    CompositeRecord,
    FlatSale,
    Participation,
    Phase,
    RevealSchedule,
)

__all__ = [
    "AuctionSale",
    "CapabilityProfile",
    "CollectionMetadata",
    "CompositeRecord",
    "ConfigurationError",
    "ExternalReadFailure",
    "FlatSale",
    "LaunchLens",
    "LensError",
    "Participation",
    "Phase",
    "RevealSchedule",
    "UnrecognizedRecord",
    "aggregate",
    "classify",
    "collect",
]
