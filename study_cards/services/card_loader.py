"""
services/card_loader.py

One-time load of the card deck.
Public API:
  - fetch_payload(source, timeout) -> Any         : raw questions.json payload
  - load_deck(source, timeout) -> List[Card]      : async, never raises
  - DeckLoadTask(session, source)                 : in-flight load bound to a session

Failure policy:
- Any fetch / parse problem is a LoadFailure
- LoadFailure is logged and turned into an empty deck, never re-raised
- No automatic retry
"""

import asyncio
import json
import logging
from pathlib import Path
from typing import Any, List, Optional

import requests

from study_cards.models.card_model import Card
from study_cards.models.session_state import CardSession
from study_cards.services.card_normalizer import extract_records, normalize_deck
from study_cards.services.session_service import seed

logger = logging.getLogger(__name__)


class LoadFailure(RuntimeError):
    """The card data could not be fetched or parsed."""


def _is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def fetch_payload(source: str, timeout: float = 10.0) -> Any:
    """
    Fetch and decode the questions document.

    Args:
        source:  http(s) URL or local file path.
        timeout: request timeout in seconds (URLs only).

    Raises:
        LoadFailure: network error, non-OK status, missing file or bad JSON.
    """
    if _is_url(source):
        try:
            response = requests.get(source, timeout=timeout)
            response.raise_for_status()
            return response.json()
        except requests.RequestException as e:
            raise LoadFailure(f"Could not load cards from {source}: {e}") from e
        except (ValueError, RecursionError) as e:
            raise LoadFailure(f"Response from {source} is not valid JSON: {e}") from e

    try:
        text = Path(source).read_bytes().decode("utf-8-sig")
    except OSError as e:
        raise LoadFailure(f"Could not read cards file {source}: {e}") from e
    except UnicodeDecodeError as e:
        raise LoadFailure(f"Cards file {source} is not valid UTF-8: {e}") from e
    try:
        return json.loads(text)
    except (ValueError, RecursionError) as e:
        raise LoadFailure(f"Cards file {source} is not valid JSON: {e}") from e


async def load_deck(source: str, timeout: float = 10.0) -> List[Card]:
    """Fetch + normalize in a worker thread. Returns [] on LoadFailure."""
    try:
        payload = await asyncio.to_thread(fetch_payload, source, timeout)
    except LoadFailure as e:
        logger.error(f"Card load failed: {e}")
        return []

    deck = normalize_deck(extract_records(payload))
    logger.info(f"Loaded {len(deck)} cards from {source}")
    return deck


class DeckLoadTask:
    """
    Load a deck for one session and seed it when the load resolves.

    close() marks the owner as gone; a load that resolves afterwards is
    dropped instead of being written into a stale session. The request
    itself is left to finish.
    """

    def __init__(self, session: CardSession, source: str, timeout: float = 10.0):
        self.session = session
        self.source = source
        self.timeout = timeout
        self.alive = True
        self.task: Optional[asyncio.Task] = None

    def start(self) -> asyncio.Task:
        """Schedule the load on the running event loop."""
        self.session.loading = True
        self.task = asyncio.get_running_loop().create_task(self.run())
        return self.task

    async def run(self) -> bool:
        """Returns True if the result was applied to the session."""
        deck = await load_deck(self.source, self.timeout)
        if not self.alive:
            logger.info("Session closed before card load finished; result discarded")
            return False
        seed(self.session, deck)
        return True

    def close(self) -> None:
        self.alive = False
