"""
core/records.py
---------------
Typed row models for the six dashboard tables.

Rows come straight from Supabase ``select("*")`` queries. Ids are opaque
(string or integer) and only serve as display keys; no cross-table
references are checked. Non-id fields fall back to their defaults when a
row omits them or stores NULL, so a partially filled row still counts
toward metrics.
"""

from __future__ import annotations

import re
from typing import Any, Dict, Iterable, List, Optional, Tuple, Type, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

RecordId = Union[int, str]


class Record(BaseModel):
    """Base for all dashboard rows: immutable, unknown columns ignored."""
    model_config = ConfigDict(frozen=True, extra="ignore")

    id: RecordId

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        # NULL columns take the field default
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class Participant(Record):
    name: str = ""
    login_time: Optional[str] = None
    is_identified: bool = False
    satisfaction: float = Field(default=0.0, allow_inf_nan=False, description="Satisfaction score, 0–100")


class Match(Record):
    participant1_id: Optional[RecordId] = None
    participant2_id: Optional[RecordId] = None
    match_time: Optional[str] = None


class Meeting(Record):
    match_id: Optional[RecordId] = None
    start_time: Optional[str] = None
    anticipation: bool = False


class Insight(Record):
    type: str = ""
    description: str = ""
    action_link: str = ""

    @property
    def title(self) -> str:
        """Category tag as a card heading: ``"high-engagement"`` -> ``"High Engagement"``."""
        return re.sub(r"\b\w", lambda m: m.group().upper(), self.type.replace("-", " "))


class TopMatching(Record):
    participant_id: Optional[RecordId] = None
    score: float = Field(default=0.0, allow_inf_nan=False)


class Anticipation(Record):
    participant_id: Optional[RecordId] = None
    anticipation_score: float = Field(default=0.0, allow_inf_nan=False)


# --------------------------------------------------------------------------- #
# Table registry
# --------------------------------------------------------------------------- #

# state field -> (Supabase table, row model)
TABLES: Dict[str, Tuple[str, Type[Record]]] = {
    "participants": ("participants", Participant),
    "matches": ("matches", Match),
    "meetings": ("meetings", Meeting),
    "insights": ("insights", Insight),
    "top_matching": ("top_matching", TopMatching),
    "anticipation": ("anticipation", Anticipation),
}

R = TypeVar("R", bound=Record)


def parse_rows(
    model: Type[R],
    rows: Optional[Iterable[Any]],
    debug: bool = False,
) -> Tuple[R, ...]:
    """
    Validate raw rows into ``model`` instances.

    Rows that cannot be validated (no id, not a mapping, ...) are dropped
    individually; the rest of the collection is kept. ``None`` yields ``()``.
    """
    parsed: List[R] = []
    for row in rows or ():
        try:
            parsed.append(model.model_validate(row))
        except ValidationError as e:
            if debug:
                print(f"[Loader] ⚠️ Dropped {model.__name__} row: {e.error_count()} validation error(s)")
    return tuple(parsed)
