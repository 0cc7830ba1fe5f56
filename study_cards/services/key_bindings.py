"""
services/key_bindings.py

Keyboard table for the card view.

  ArrowRight / ArrowLeft : next / previous card
  1-9                    : pick a choice (mcq)
  T / F                  : true / false (tf)
  Space                  : show / hide the answer (open)

Keys pressed with a modifier or inside a text field are ignored,
as is everything while the deck is still loading.
"""

from study_cards.models.card_model import McqCard, OpenCard, TfCard
from study_cards.models.session_state import CardSession
from study_cards.services import session_service as svc


def handle_key(
    session: CardSession,
    key: str,
    *,
    ctrl: bool = False,
    meta: bool = False,
    alt: bool = False,
    in_text_field: bool = False,
) -> bool:
    """
    Dispatch one key press to the session controller.

    Returns:
        True if the key triggered an operation, False if it was ignored.
    """
    if in_text_field or ctrl or meta or alt or session.loading:
        return False

    card = svc.current_card(session)
    if card is None:
        return False

    if key == "ArrowRight":
        svc.advance(session)
        return True
    if key == "ArrowLeft":
        svc.retreat(session)
        return True

    if isinstance(card, McqCard):
        if len(key) == 1 and key in "123456789":
            idx = int(key) - 1
            if idx < len(card.choices):
                svc.set_answer(session, idx)
                return True
    elif isinstance(card, TfCard):
        if key.lower() == "t":
            svc.set_answer(session, True)
            return True
        if key.lower() == "f":
            svc.set_answer(session, False)
            return True
    elif isinstance(card, OpenCard):
        if key == " ":
            svc.toggle_current_reveal(session)
            return True

    return False
