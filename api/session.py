"""
api/session.py — in-memory per-browser sessions (cookie based)

Each browser gets a UUID session id and its own CardSession.
Creating a session starts the deck load; expiring or closing a
session tears its load task down so a late result is discarded.
Sessions expire after SESSION_TTL seconds without access.
"""

import threading
import time
import uuid
from typing import Dict, Optional

from config import CARDS_SOURCE, FETCH_TIMEOUT, SESSION_TTL
from study_cards.models.session_state import CardSession
from study_cards.services.card_loader import DeckLoadTask

_lock = threading.Lock()
_sessions: Dict[str, CardSession] = {}
_loaders: Dict[str, DeckLoadTask] = {}
_timestamps: Dict[str, float] = {}


def create_session(source: str = CARDS_SOURCE, timeout: float = FETCH_TIMEOUT) -> str:
    """Create a session, start loading its deck, return the session id.

    Must be called from inside the running event loop.
    """
    sid = uuid.uuid4().hex
    state = CardSession()
    loader = DeckLoadTask(state, source, timeout)
    with _lock:
        _sessions[sid] = state
        _loaders[sid] = loader
        _timestamps[sid] = time.time()
    loader.start()
    return sid


def get_session(sid: str) -> Optional[CardSession]:
    """Session state by id. None if unknown or expired."""
    with _lock:
        if sid not in _sessions:
            return None
        if time.time() - _timestamps[sid] > SESSION_TTL:
            _drop(sid)
            return None
        _timestamps[sid] = time.time()  # refresh on access
        return _sessions[sid]


def cleanup_expired() -> int:
    """Drop expired sessions. Returns how many were removed."""
    now = time.time()
    with _lock:
        expired = [sid for sid, ts in _timestamps.items() if now - ts > SESSION_TTL]
        for sid in expired:
            _drop(sid)
    return len(expired)


def _drop(sid: str) -> None:
    # caller holds _lock
    _loaders.pop(sid).close()
    del _sessions[sid]
    del _timestamps[sid]
