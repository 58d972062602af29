"""
Skillwatch Game Formulas

Purpose
-------
Pure calculation functions for game mechanics: the experience curve, levels
from experience, the combat level formula, and the rounding rule used when
averaging snapshot values.

Design Notes
------------
All formulas:
- Accept parameters explicitly
- Return calculated values
- Have no dependencies on snapshots, config or logging
- Are deterministic and testable

Usage
-----
    from skillwatch.modules.shared.formulas import level_from_experience

    level = level_from_experience(13_034_431)  # 99
    combat = combat_level(99, 99, 99, 99, 99, 99, 99)  # 126
"""

from __future__ import annotations

import math
from bisect import bisect_right
from typing import Final, Optional, Tuple, Union

Number = Union[int, float]

MAX_LEVEL: Final[int] = 99
MIN_COMBAT_LEVEL: Final[int] = 3


def experience_points_curve(max_level: int) -> Tuple[int, ...]:
    """
    Build the cumulative experience table for levels 1..max_level.

    Index ``i`` holds the experience required to reach level ``i + 1``:
    ``floor(sum(floor(l + 300 * 2 ** (l / 7)) for l < level) / 4)``.

    Example:
        >>> experience_points_curve(3)
        (0, 83, 174)
    """
    table = [0]
    points = 0
    for level in range(1, max_level):
        points += math.floor(level + 300 * 2 ** (level / 7))
        table.append(points // 4)
    return tuple(table)


EXPERIENCE_TABLE: Final[Tuple[int, ...]] = experience_points_curve(MAX_LEVEL)


def get_experience_for_level(level: int) -> Optional[int]:
    """
    Minimum experience for a level, or None outside 1..MAX_LEVEL.

    Example:
        >>> get_experience_for_level(2)
        83
        >>> get_experience_for_level(99)
        13034431
    """
    if level < 1 or level > MAX_LEVEL:
        return None
    return EXPERIENCE_TABLE[level - 1]


def level_from_experience(experience: Optional[Number]) -> int:
    """
    Calculate the level reached with the given experience.

    Experience below the first threshold (including the unranked sentinel
    and None) yields level 1. Levels are not extended past MAX_LEVEL.

    Example:
        >>> level_from_experience(-1)
        1
        >>> level_from_experience(83)
        2
        >>> level_from_experience(200_000_000)
        99
    """
    if not experience or experience < 0:
        return 1

    return max(1, bisect_right(EXPERIENCE_TABLE, experience))


def combat_level(
    attack: int,
    strength: int,
    defence: int,
    ranged: int,
    magic: int,
    hitpoints: int,
    prayer: int,
) -> int:
    """
    Calculate combat level from the seven combat skill levels.

    Base combat comes from defence, hitpoints (never below 10) and half of
    prayer; the best of the melee, ranged and magic branches is added on
    top. Any missing (zero) level yields 0.

    Example:
        >>> combat_level(1, 1, 1, 1, 1, 10, 1)
        3
        >>> combat_level(99, 99, 99, 99, 99, 99, 99)
        126
    """
    levels = (attack, strength, defence, ranged, magic, hitpoints, prayer)
    if any(not level for level in levels):
        return 0

    base = 0.25 * (defence + max(hitpoints, 10) + math.floor(prayer / 2))
    melee = 0.325 * (attack + strength)
    ranger = 0.325 * math.floor(3 * ranged / 2)
    mage = 0.325 * math.floor(3 * magic / 2)

    return math.floor(base + max(melee, ranger, mage))


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, with halves rounding towards +infinity.

    Python's round() rounds halves to even; averages must instead keep the
    rounding the snapshot history was produced with.

    Example:
        >>> round_half_up(2.5)
        3
        >>> round_half_up(-0.5)
        0
        >>> round_half_up(-1.5)
        -1
    """
    return math.floor(value + 0.5)
