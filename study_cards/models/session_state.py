"""
models/session_state.py

State of one study session: the deck, the user's answer sheet,
the cursor and the global reveal flag.
Pydantic BaseModel, no UI code. Derived values (correctness,
visibility) are never stored here; see services/session_service.py.
"""

from typing import List, Optional, Union

from pydantic import BaseModel, Field

from study_cards.models.card_model import Card

# None = no selection; int = mcq choice; bool = tf choice or open "revealed"
AnswerSlot = Optional[Union[bool, int]]


class CardSession(BaseModel):
    """
    Everything the session controller mutates.

    Attributes:
        deck:          Working deck. Replaced only by seed / full reset.
        original_deck: Snapshot taken at load time, used by full reset.
        answers:       Answer sheet, index-aligned with deck.
        cursor:        Index of the current card (0-based).
        reveal_all:    Global "show answers" toggle.
        loading:       True until the initial load has resolved.
    """

    deck: List[Card] = Field(default_factory=list)
    original_deck: List[Card] = Field(default_factory=list)
    answers: List[AnswerSlot] = Field(default_factory=list)
    cursor: int = Field(default=0, ge=0)
    reveal_all: bool = False
    loading: bool = True
