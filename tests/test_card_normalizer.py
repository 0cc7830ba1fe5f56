"""Tests for card normalization and kind inference."""

from __future__ import annotations

import pytest

from study_cards.models.card_model import McqCard, OpenCard, TfCard
from study_cards.services.card_normalizer import (
    extract_records,
    infer_kind,
    normalize_card,
    normalize_deck,
)


class TestInferKind:
    """Kind inference rules, first match wins."""

    @pytest.mark.parametrize("kind", ["mcq", "tf", "open"])
    def test_declared_type_wins(self, kind):
        record = {"type": kind, "choices": ["x"], "answerIndex": 0, "answer": True}
        assert infer_kind(record) == kind

    def test_unknown_declared_type_falls_back_to_inference(self):
        assert infer_kind({"type": "essay", "answer": False}) == "tf"

    def test_choices_and_integer_index_is_mcq(self):
        assert infer_kind({"choices": ["a", "b"], "answerIndex": 1}) == "mcq"

    def test_boolean_index_is_not_mcq(self):
        assert infer_kind({"choices": ["a", "b"], "answerIndex": True}) == "open"

    def test_string_index_is_not_mcq(self):
        assert infer_kind({"choices": ["a", "b"], "answerIndex": "1"}) == "open"

    def test_boolean_answer_is_tf(self):
        assert infer_kind({"answer": False}) == "tf"

    def test_text_answer_is_open(self):
        assert infer_kind({"a": "text"}) == "open"

    def test_default_is_open(self):
        assert infer_kind({}) == "open"
        assert infer_kind(None) == "open"


class TestNormalizeCard:
    """Canonical card construction with defaults."""

    def test_record_without_known_fields_is_empty_open_card(self):
        card = normalize_card({"foo": 1, "bar": [2]})
        assert isinstance(card, OpenCard)
        assert card.answer == ""
        assert card.prompt == "—"

    @pytest.mark.parametrize("record", [None, 42, "text", ["list"]])
    def test_non_mapping_record_never_raises(self, record):
        card = normalize_card(record)
        assert card == OpenCard(prompt="—", answer="")

    def test_mcq_defaults(self):
        card = normalize_card({"type": "mcq"})
        assert card == McqCard(prompt="—", choices=[], answer_index=0)

    def test_mcq_index_is_coerced(self):
        assert normalize_card({"type": "mcq", "answerIndex": "2"}).answer_index == 2
        assert normalize_card({"type": "mcq", "answerIndex": 1.0}).answer_index == 1
        assert normalize_card({"type": "mcq", "answerIndex": "two"}).answer_index == 0
        assert normalize_card({"type": "mcq", "answerIndex": float("nan")}).answer_index == 0

    def test_mcq_choices_are_text(self):
        card = normalize_card({"type": "mcq", "choices": [1, "b", None]})
        assert card.choices == ["1", "b", ""]

    def test_mcq_non_list_choices_become_empty(self):
        assert normalize_card({"type": "mcq", "choices": "a,b"}).choices == []

    def test_tf_answer_is_strict_bool(self):
        assert normalize_card({"type": "tf"}).answer is False
        assert normalize_card({"type": "tf", "answer": 0}).answer is False
        assert normalize_card({"type": "tf", "answer": "yes"}).answer is True

    def test_open_answer_is_text(self):
        assert normalize_card({"type": "open", "a": 12}).answer == "12"
        assert normalize_card({"type": "open", "a": None}).answer == ""

    def test_prompt_kept_when_present(self):
        assert normalize_card({"q": "Hello", "a": "x"}).prompt == "Hello"
        assert normalize_card({"q": "", "a": "x"}).prompt == ""

    def test_inferred_kinds(self):
        assert isinstance(normalize_card({"choices": ["a"], "answerIndex": 0}), McqCard)
        assert isinstance(normalize_card({"answer": True}), TfCard)

    def test_canonical_card_passes_through(self, mcq_card, tf_card, open_card):
        for card in (mcq_card, tf_card, open_card):
            assert normalize_card(card) == card


class TestNormalizeDeck:
    """Deck-level normalization."""

    def test_order_is_preserved(self):
        deck = normalize_deck([{"a": "1"}, {"answer": True}, {"choices": [], "answerIndex": 0}])
        assert [c.type for c in deck] == ["open", "tf", "mcq"]

    def test_empty_input(self):
        assert normalize_deck([]) == []
        assert normalize_deck(None) == []

    def test_idempotent_on_serialized_output(self):
        raw = [
            {"q": "Q1", "choices": ["x", "y"], "answerIndex": 1},
            {"q": "Q2", "answer": False},
            {"q": "Q3", "a": "A3"},
            {"junk": True},
        ]
        once = normalize_deck(raw)
        twice = normalize_deck([c.model_dump(by_alias=True) for c in once])
        assert twice == once
        assert normalize_deck(once) == once


class TestExtractRecords:
    """Top-level `cards` extraction."""

    def test_cards_list(self):
        assert extract_records({"cards": [{"a": "x"}]}) == [{"a": "x"}]

    @pytest.mark.parametrize("payload", [{}, {"cards": None}, {"cards": {"a": 1}}, [], "cards", None])
    def test_missing_or_invalid_cards(self, payload):
        assert extract_records(payload) == []
