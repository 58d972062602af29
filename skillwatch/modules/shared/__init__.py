"""
Skillwatch Shared Module

Purpose
-------
Provides domain-level foundations for the snapshot modules:
- Domain exceptions and error handling
- Pure game formulas (experience curve, levels, combat level)

This module has no infrastructure dependencies and does not import the
metric catalog, which itself builds on these foundations.

Usage
-----
    from skillwatch.modules.shared import (
        InvalidSnapshotsError,
        level_from_experience,
    )
"""

from __future__ import annotations

# Domain exceptions
from .exceptions import (
    ErrorSeverity,
    InvalidMetricError,
    InvalidSnapshotsError,
    SkillwatchDomainException,
    ValidationError,
    get_error_severity,
    should_alert,
)

# Formulas
from .formulas import (
    EXPERIENCE_TABLE,
    MAX_LEVEL,
    MIN_COMBAT_LEVEL,
    combat_level,
    experience_points_curve,
    get_experience_for_level,
    level_from_experience,
    round_half_up,
)

__all__ = [
    # Exceptions
    "SkillwatchDomainException",
    "ErrorSeverity",
    "ValidationError",
    "InvalidMetricError",
    "InvalidSnapshotsError",
    "get_error_severity",
    "should_alert",
    # Formulas
    "EXPERIENCE_TABLE",
    "MAX_LEVEL",
    "MIN_COMBAT_LEVEL",
    "experience_points_curve",
    "get_experience_for_level",
    "level_from_experience",
    "combat_level",
    "round_half_up",
]
