from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

Rating = Union[int, float]

# Wire keys used by the backend for fields whose Python name differs
WIRE_KEYS: Dict[str, str] = {
    "rating": "strength",
    "image_ref": "picture",
}


@dataclass
class Record:
    """
    A single entity in the remote collection.

    Fields:

    - id: backend-assigned identity, immutable once created
    - name: display name, required
    - explanation: free text (shown as "Name Origin")
    - rating: numeric score, required, drives the card tier
    - powers / tips: ordered string sequences, duplicates allowed
    - image_ref: opaque URI for the card picture
    """
    id: int
    name: str
    explanation: str = ""
    rating: Rating = 0
    powers: List[str] = field(default_factory=list)
    image_ref: str = ""
    tips: List[str] = field(default_factory=list)

    @property
    def tier(self) -> "RatingTier":
        return rating_tier(self.rating)

    def to_draft(self) -> "RecordDraft":
        """Deep copy into an editable draft; the record itself is never touched."""
        return RecordDraft(
            id=self.id,
            name=self.name,
            explanation=self.explanation,
            rating=self.rating,
            powers=copy.deepcopy(self.powers),
            image_ref=self.image_ref,
            tips=copy.deepcopy(self.tips),
        )

    def to_wire(self) -> Dict[str, Any]:
        return _to_wire(self)

    @classmethod
    def from_wire(cls, data: Dict[str, Any]) -> Record:
        if not isinstance(data, dict):
            raise ValueError(f"Expected a record object, got {type(data).__name__}")
        if data.get("id") is None:
            raise ValueError("Record payload has no id")
        return cls(
            id=int(data["id"]),
            name=str(data.get("name") or ""),
            explanation=str(data.get("explanation") or ""),
            rating=data.get(WIRE_KEYS["rating"]) or 0,
            powers=[str(p) for p in (data.get("powers") or [])],
            image_ref=str(data.get(WIRE_KEYS["image_ref"]) or ""),
            tips=[str(t) for t in (data.get("tips") or [])],
        )


@dataclass
class RecordDraft:
    """Partial record held by a form; id is None until the backend assigns one."""
    id: Optional[int] = None
    name: str = ""
    explanation: str = ""
    rating: Optional[Rating] = 0
    powers: List[str] = field(default_factory=list)
    image_ref: str = ""
    tips: List[str] = field(default_factory=list)

    def to_wire(self) -> Dict[str, Any]:
        payload = _to_wire(self)
        if self.id is None:
            payload.pop("id")
        return payload


def _to_wire(obj: Record | RecordDraft) -> Dict[str, Any]:
    return {
        "id": obj.id,
        "name": obj.name,
        "explanation": obj.explanation,
        WIRE_KEYS["rating"]: obj.rating,
        "powers": list(obj.powers),
        WIRE_KEYS["image_ref"]: obj.image_ref,
        "tips": list(obj.tips),
    }


@dataclass(frozen=True)
class RatingTier:
    label: str
    color: str


# Ordered highest first; the first threshold the rating reaches wins
_TIERS = [
    (95, RatingTier("Legendary", "#FF1744")),
    (90, RatingTier("Very Strong", "#FF6D00")),
    (85, RatingTier("Strong", "#FFA000")),
    (80, RatingTier("Above Average", "#FFD600")),
    (70, RatingTier("Average", "#64DD17")),
]
_LOWEST_TIER = RatingTier("Below Average", "#00C853")


def rating_tier(rating: Optional[Rating]) -> RatingTier:
    value = rating or 0
    for threshold, tier in _TIERS:
        if value >= threshold:
            return tier
    return _LOWEST_TIER
