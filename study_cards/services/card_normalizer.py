"""
services/card_normalizer.py

Turns loosely-typed question records into canonical cards.
Pure functions, no state.

Parsing is permissive: a malformed record becomes an empty card of
its inferred kind instead of failing the whole load.
"""

import math
from typing import Any, Dict, List, Mapping, Optional

from pydantic import BaseModel

from study_cards.models.card_model import (
    CARD_KINDS,
    CardKind,
    PROMPT_PLACEHOLDER,
    Card,
    McqCard,
    OpenCard,
    TfCard,
)


def infer_kind(record: Any) -> CardKind:
    """
    Card kind of a raw record. First matching rule wins:

      1. explicit `type` of mcq / tf / open
      2. `choices` list + integer `answerIndex`  -> mcq
      3. boolean `answer`                        -> tf
      4. text `a`                                -> open
      5. otherwise                               -> open
    """
    raw = _as_record(record)

    declared = raw.get("type")
    if declared in CARD_KINDS:
        return declared

    answer_index = raw.get("answerIndex")
    if (
        isinstance(raw.get("choices"), list)
        and isinstance(answer_index, int)
        and not isinstance(answer_index, bool)
    ):
        return "mcq"
    if isinstance(raw.get("answer"), bool):
        return "tf"
    if isinstance(raw.get("a"), str):
        return "open"
    return "open"


def normalize_card(record: Any) -> Card:
    """
    Build a canonical card from one raw record. Never raises.

    Args:
        record: dict from questions.json, an already-built card,
                or anything else (treated as an empty record).

    Returns:
        McqCard, TfCard or OpenCard with defaults filled in.
    """
    raw = _as_record(record)
    kind = infer_kind(raw)
    prompt = _text(raw.get("q"), PROMPT_PLACEHOLDER)

    if kind == "mcq":
        choices = raw.get("choices")
        return McqCard(
            prompt=prompt,
            choices=[_text(c, "") for c in choices] if isinstance(choices, list) else [],
            answer_index=_coerce_int(raw.get("answerIndex"), default=0),
        )
    if kind == "tf":
        return TfCard(prompt=prompt, answer=bool(raw.get("answer")))
    return OpenCard(prompt=prompt, answer=_text(raw.get("a"), ""))


def normalize_deck(records: Optional[List[Any]]) -> List[Card]:
    """Normalize every record, preserving order."""
    return [normalize_card(r) for r in records or []]


def extract_records(payload: Any) -> List[Any]:
    """`cards` list of a questions.json payload; [] when missing or not a list."""
    if isinstance(payload, Mapping):
        cards = payload.get("cards")
        if isinstance(cards, list):
            return cards
    return []


# ── helpers ──────────────────────────────────────────────────────────────────

def _as_record(record: Any) -> Dict[str, Any]:
    if isinstance(record, BaseModel):
        return record.model_dump(by_alias=True)
    if isinstance(record, Mapping):
        return dict(record)
    return {}


def _text(value: Any, default: str) -> str:
    if value is None:
        return default
    return value if isinstance(value, str) else str(value)


def _coerce_int(value: Any, default: int = 0) -> int:
    """Coerce a loosely-typed index to int."""
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if math.isfinite(value):
            return int(value)
        return default
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return default
    return default
