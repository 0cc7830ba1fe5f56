"""
models/view_state.py

Read-model handed to the render layer (JSON API / browser).
Built fresh from CardSession on every request.
"""

from enum import Enum
from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field


class Correctness(str, Enum):
    UNKNOWN = "unknown"
    CORRECT = "correct"
    INCORRECT = "incorrect"


class OptionView(BaseModel):
    """One selectable option of an mcq or tf card."""

    label: str
    value: Union[bool, int]
    is_picked: bool = False
    is_correct: bool = False
    show_reveal: bool = Field(
        default=False,
        description="Ghost 'correct answer' hint on an option the user did not pick"
    )
    status: Optional[Literal["correct", "wrong", "reveal"]] = None


class CardView(BaseModel):
    status: Literal["loading", "empty", "ready"]
    loading: bool
    empty: bool
    position: int = 0
    total: int = 0
    progress: str = ""
    card: Optional[Dict[str, Any]] = None
    kind: Optional[str] = None
    slot: Optional[Union[bool, int]] = None
    reveal_all: bool = False
    correctness: Correctness = Correctness.UNKNOWN
    options: List[OptionView] = Field(default_factory=list)
    answer_shown: bool = False
    answer_text: Optional[str] = None
    hint: Optional[str] = None
