"""
services/session_service.py

Session controller: navigation, answer-sheet mutation and the derived
read-model for one CardSession.

Every operation is total. On an empty deck navigation and answer
writes are no-ops. Correctness and visibility are recomputed from
(cursor, answer slot, reveal_all) on each call and never stored.
"""

from typing import List, Optional

from study_cards.models.card_model import Card, McqCard, OpenCard, TfCard
from study_cards.models.session_state import AnswerSlot, CardSession
from study_cards.models.view_state import CardView, Correctness, OptionView

HIDDEN_ANSWER_MASK = "••••••••"

_TF_OPTIONS = (("True", True), ("False", False))


# ── lifecycle ────────────────────────────────────────────────────────────────

def seed(session: CardSession, deck: List[Card]) -> None:
    """Install a freshly loaded deck and clear all answer state."""
    session.deck = list(deck)
    session.original_deck = list(deck)
    session.answers = [None] * len(deck)
    session.cursor = 0
    session.reveal_all = False
    session.loading = False


def full_reset(session: CardSession) -> None:
    """Restore the originally loaded deck and start over."""
    seed(session, session.original_deck)


# ── navigation ───────────────────────────────────────────────────────────────

def advance(session: CardSession) -> None:
    total = len(session.deck)
    if total == 0:
        return
    session.cursor = (session.cursor + 1) % total


def retreat(session: CardSession) -> None:
    total = len(session.deck)
    if total == 0:
        return
    session.cursor = (session.cursor - 1 + total) % total


# ── answer sheet ─────────────────────────────────────────────────────────────

def set_answer(session: CardSession, value: AnswerSlot) -> None:
    """
    Write `value` into the slot of the current card.

    No kind check: the caller supplies kind-appropriate values.
    None clears the slot.
    """
    if not session.deck:
        return
    session.answers[session.cursor] = value


def clear_current(session: CardSession) -> None:
    set_answer(session, None)


def toggle_current_reveal(session: CardSession) -> None:
    """Flip the revealed flag of the current card. Only open cards have one."""
    if not isinstance(current_card(session), OpenCard):
        return
    set_answer(session, not (current_slot(session) is True))


def toggle_reveal_all(session: CardSession) -> None:
    session.reveal_all = not session.reveal_all


# ── derivations ──────────────────────────────────────────────────────────────

def current_card(session: CardSession) -> Optional[Card]:
    if not session.deck:
        return None
    return session.deck[session.cursor]


def current_slot(session: CardSession) -> AnswerSlot:
    if not session.deck:
        return None
    return session.answers[session.cursor]


def derive_correctness(session: CardSession) -> Correctness:
    """
    Correctness of the current card.

    A bool slot never matches an mcq index and an int slot never
    matches a tf answer, so wrong-kind values grade as incorrect.
    """
    card = current_card(session)
    slot = current_slot(session)
    if card is None or isinstance(card, OpenCard) or slot is None:
        return Correctness.UNKNOWN
    if isinstance(card, McqCard):
        matched = not isinstance(slot, bool) and slot == card.answer_index
    else:
        matched = isinstance(slot, bool) and slot == card.answer
    return Correctness.CORRECT if matched else Correctness.INCORRECT


def option_views(session: CardSession) -> List[OptionView]:
    """
    Per-option display state of the current mcq / tf card.

    The ghost "correct answer" hint shows only when reveal_all is on,
    the option is the correct one, the user has picked something, and
    the option is not the picked one.
    """
    card = current_card(session)
    slot = current_slot(session)

    if isinstance(card, McqCard):
        options = [(text, i) for i, text in enumerate(card.choices)]
        correct_value = card.answer_index
    elif isinstance(card, TfCard):
        options = list(_TF_OPTIONS)
        correct_value = card.answer
    else:
        return []

    views: List[OptionView] = []
    for label, value in options:
        is_picked = _same_value(slot, value)
        is_correct = value == correct_value
        show_reveal = session.reveal_all and is_correct and slot is not None and not is_picked
        if is_picked:
            status = "correct" if is_correct else "wrong"
        elif show_reveal:
            status = "reveal"
        else:
            status = None
        views.append(OptionView(
            label=label,
            value=value,
            is_picked=is_picked,
            is_correct=is_correct,
            show_reveal=show_reveal,
            status=status,
        ))
    return views


def is_answer_shown(session: CardSession) -> bool:
    """Whether the open card's answer text is visible."""
    card = current_card(session)
    if not isinstance(card, OpenCard):
        return False
    return session.reveal_all or current_slot(session) is True


def build_view(session: CardSession) -> CardView:
    """Read-model for the render layer."""
    if session.loading:
        return CardView(status="loading", loading=True, empty=False)

    card = current_card(session)
    if card is None:
        return CardView(status="empty", loading=False, empty=True)

    total = len(session.deck)
    position = session.cursor + 1
    correctness = derive_correctness(session)
    slot = current_slot(session)

    answer_shown = is_answer_shown(session)
    answer_text = None
    hint = None
    if isinstance(card, OpenCard):
        answer_text = card.answer if answer_shown else HIDDEN_ANSWER_MASK
    elif slot is None:
        # tf cards show no prompt line until answered
        hint = "Make a selection." if isinstance(card, McqCard) else None
    else:
        hint = "Correct!" if correctness is Correctness.CORRECT else "Wrong."

    return CardView(
        status="ready",
        loading=False,
        empty=False,
        position=position,
        total=total,
        progress=f"{position} / {total}",
        card=card.model_dump(by_alias=True),
        kind=card.type,
        slot=slot,
        reveal_all=session.reveal_all,
        correctness=correctness,
        options=option_views(session),
        answer_shown=answer_shown,
        answer_text=answer_text,
        hint=hint,
    )


def _same_value(slot: AnswerSlot, value) -> bool:
    # True == 1 in Python; picks must match kind as well as value
    return slot is not None and isinstance(slot, bool) == isinstance(value, bool) and slot == value
