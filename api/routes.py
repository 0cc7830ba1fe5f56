"""
api/routes.py — FastAPI endpoints

Every operation endpoint returns the fresh CardView so the page can
re-render from a single response.
"""

from typing import Optional, Union

from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel

import api.session as session
from study_cards.models.session_state import CardSession
from study_cards.models.view_state import CardView
from study_cards.services import session_service as svc
from study_cards.services.key_bindings import handle_key

router = APIRouter()

# ── Pydantic request bodies ──────────────────────────────────────────────────

class AnswerBody(BaseModel):
    value: Optional[Union[bool, int]] = None


class KeyBody(BaseModel):
    key: str
    ctrl: bool = False
    meta: bool = False
    alt: bool = False
    in_text_field: bool = False


class KeyResult(BaseModel):
    handled: bool
    view: CardView


# ── helpers ──────────────────────────────────────────────────────────────────

def _state(request: Request) -> CardSession:
    state = session.get_session(request.state.session_id)
    if state is None:
        raise HTTPException(status_code=404, detail="Session not found.")
    return state


def _ready_state(request: Request) -> CardSession:
    state = _state(request)
    if state.loading:
        raise HTTPException(status_code=409, detail="Cards are still loading.")
    return state


# ── endpoints ────────────────────────────────────────────────────────────────

@router.get("/api/view", response_model=CardView)
async def get_view(request: Request):
    return svc.build_view(_state(request))


@router.post("/api/next", response_model=CardView)
async def next_card(request: Request):
    state = _ready_state(request)
    svc.advance(state)
    return svc.build_view(state)


@router.post("/api/prev", response_model=CardView)
async def prev_card(request: Request):
    state = _ready_state(request)
    svc.retreat(state)
    return svc.build_view(state)


@router.post("/api/answer", response_model=CardView)
async def set_answer(body: AnswerBody, request: Request):
    state = _ready_state(request)
    svc.set_answer(state, body.value)
    return svc.build_view(state)


@router.post("/api/clear", response_model=CardView)
async def clear_current(request: Request):
    state = _ready_state(request)
    svc.clear_current(state)
    return svc.build_view(state)


@router.post("/api/toggle-open", response_model=CardView)
async def toggle_open(request: Request):
    state = _ready_state(request)
    svc.toggle_current_reveal(state)
    return svc.build_view(state)


@router.post("/api/reveal-all", response_model=CardView)
async def reveal_all(request: Request):
    state = _ready_state(request)
    svc.toggle_reveal_all(state)
    return svc.build_view(state)


@router.post("/api/reset", response_model=CardView)
async def reset_deck(request: Request):
    state = _ready_state(request)
    svc.full_reset(state)
    return svc.build_view(state)


@router.post("/api/key", response_model=KeyResult)
async def press_key(body: KeyBody, request: Request):
    state = _ready_state(request)
    handled = handle_key(
        state,
        body.key,
        ctrl=body.ctrl,
        meta=body.meta,
        alt=body.alt,
        in_text_field=body.in_text_field,
    )
    return KeyResult(handled=handled, view=svc.build_view(state))
