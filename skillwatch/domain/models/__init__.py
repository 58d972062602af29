"""
Domain models package for Skillwatch.

Purpose
-------
Immutable domain objects the snapshot engine computes over. Snapshots and
players are created by external collaborators and never mutated here.
"""

from .base import (
    DomainEvent,
    DomainValidationError,
    validate_not_empty,
    validate_positive,
)
from .player import Player
from .snapshot import (
    SYNTHETIC_ID,
    UNRANKED,
    UNRANKED_RECORD,
    MetricRecord,
    Snapshot,
)

__all__ = [
    "DomainEvent",
    "DomainValidationError",
    "validate_positive",
    "validate_not_empty",
    "Player",
    "Snapshot",
    "MetricRecord",
    "UNRANKED",
    "UNRANKED_RECORD",
    "SYNTHETIC_ID",
]
