"""
api/app.py — FastAPI app instance + session middleware + static file serving
"""

import logging
import os
import threading
import time

from fastapi import FastAPI, Request, Response
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

from config import APP_TITLE, CARDS_SOURCE, FETCH_TIMEOUT, SESSION_CLEANUP_INTERVAL, SESSION_TTL, STATIC_DIR
from api.routes import router
import api.session as session

SESSION_COOKIE = "cards_session"

logger = logging.getLogger(__name__)


def create_app(
    cards_source: str = CARDS_SOURCE,
    fetch_timeout: float = FETCH_TIMEOUT,
    cleanup: bool = True,
) -> FastAPI:
    app = FastAPI(title=APP_TITLE, docs_url=None, redoc_url=None)

    # Session middleware: read the session id from the cookie, issue a new one if missing
    @app.middleware("http")
    async def session_middleware(request: Request, call_next):
        sid = request.cookies.get(SESSION_COOKIE)
        if not sid or session.get_session(sid) is None:
            sid = session.create_session(cards_source, fetch_timeout)
            logger.info(f"New session {sid[:8]}, loading cards from {cards_source}")

        request.state.session_id = sid
        response: Response = await call_next(request)
        response.set_cookie(
            key=SESSION_COOKIE,
            value=sid,
            httponly=True,
            samesite="lax",
            max_age=SESSION_TTL,
        )
        return response

    app.include_router(router)

    if os.path.isdir(STATIC_DIR):
        app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

    # root → index.html
    @app.get("/")
    async def serve_index():
        index_path = os.path.join(STATIC_DIR, "index.html")
        if os.path.exists(index_path):
            return FileResponse(index_path)
        return {"error": "index.html not found"}

    # Periodic cleanup of expired sessions
    def _cleanup_loop():
        while True:
            time.sleep(SESSION_CLEANUP_INTERVAL)
            removed = session.cleanup_expired()
            if removed:
                logger.info(f"Removed {removed} expired sessions")

    if cleanup:
        t = threading.Thread(target=_cleanup_loop, daemon=True)
        t.start()

    return app
