"""Pytest configuration and fixtures."""

from __future__ import annotations

import json

import pytest

from study_cards.models.card_model import McqCard, OpenCard, TfCard
from study_cards.models.session_state import CardSession
from study_cards.services.session_service import seed

RAW_CARDS = [
    {"type": "mcq", "q": "Pick B", "choices": ["A", "B", "C"], "answerIndex": 1},
    {"q": "Sky is blue", "answer": True},
    {"q": "Open question", "a": "Open answer"},
]


@pytest.fixture
def mcq_card() -> McqCard:
    return McqCard(prompt="Pick B", choices=["A", "B", "C"], answer_index=1)


@pytest.fixture
def tf_card() -> TfCard:
    return TfCard(prompt="Sky is blue", answer=True)


@pytest.fixture
def open_card() -> OpenCard:
    return OpenCard(prompt="Open question", answer="Open answer")


@pytest.fixture
def deck(mcq_card, tf_card, open_card):
    return [mcq_card, tf_card, open_card]


@pytest.fixture
def session(deck) -> CardSession:
    state = CardSession()
    seed(state, deck)
    return state


@pytest.fixture
def empty_session() -> CardSession:
    state = CardSession()
    seed(state, [])
    return state


@pytest.fixture
def cards_file(tmp_path):
    path = tmp_path / "questions.json"
    path.write_text(json.dumps({"cards": RAW_CARDS}), encoding="utf-8")
    return path
