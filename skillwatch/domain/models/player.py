"""
Player Domain Model for Skillwatch.

Players are owned by an external store; the snapshot engine only reads
their identity to attribute metric leaders.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from skillwatch.domain.models.base import validate_not_empty, validate_positive


@dataclass(frozen=True)
class Player:
    """
    Immutable value object representing player identity.

    Attributes
    ----------
    id : int
        Player id (matches ``Snapshot.player_id``)
    username : str
        Normalized lookup name
    display_name : Optional[str]
        Name as shown to users; defaults to ``username``
    """

    id: int
    username: str
    display_name: Optional[str] = None

    def __post_init__(self) -> None:
        validate_positive(self.id, "id")
        validate_not_empty(self.username, "username")
        if self.display_name is None:
            object.__setattr__(self, "display_name", self.username)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "username": self.username,
            "display_name": self.display_name,
        }
