"""
models/card_model.py

Canonical study-card models.
A card is exactly one of three kinds, discriminated by the `type` field:

  - mcq  : prompt + choices + answer_index (0-based)
  - tf   : prompt + boolean answer
  - open : prompt + answer text (hidden until revealed)

Field aliases follow the raw record shape of questions.json
(`q`, `answerIndex`, `a`), so `model_dump(by_alias=True)` gives back a
record that the normalizer maps onto an equal card.
"""

from typing import Annotated, List, Literal, Union

from pydantic import BaseModel, Field

CardKind = Literal["mcq", "tf", "open"]

CARD_KINDS: tuple = ("mcq", "tf", "open")

PROMPT_PLACEHOLDER = "—"


class McqCard(BaseModel):
    """Multiple-choice card."""

    type: Literal["mcq"] = "mcq"
    prompt: str = Field(
        PROMPT_PLACEHOLDER,
        alias="q",
        description="Question text"
    )
    choices: List[str] = Field(
        default_factory=list,
        description="Choice texts, in display order"
    )
    answer_index: int = Field(
        0,
        alias="answerIndex",
        description="Index of the correct choice (0-based)"
    )

    model_config = {"frozen": True, "populate_by_name": True}


class TfCard(BaseModel):
    """True/false card."""

    type: Literal["tf"] = "tf"
    prompt: str = Field(PROMPT_PLACEHOLDER, alias="q")
    answer: bool = Field(False, description="The correct value")

    model_config = {"frozen": True, "populate_by_name": True}


class OpenCard(BaseModel):
    """Open-ended card. No correctness, only a hidden answer."""

    type: Literal["open"] = "open"
    prompt: str = Field(PROMPT_PLACEHOLDER, alias="q")
    answer: str = Field("", alias="a", description="Answer text")

    model_config = {"frozen": True, "populate_by_name": True}


Card = Annotated[Union[McqCard, TfCard, OpenCard], Field(discriminator="type")]
