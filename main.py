"""
main.py — flashcard viewer entry point

Starts the API server on a free local port and opens the card view
in the browser.
"""

import os
import socket
import sys
import threading
import time
import logging
import traceback
import webbrowser

# ── package path (must stay at the top) ──────────────────────────────────────
_BASE_DIR = os.path.dirname(os.path.abspath(__file__))
if _BASE_DIR not in sys.path:
    sys.path.insert(0, _BASE_DIR)

from config import DEFAULT_HOST, LOG_FILE, LOG_LEVEL, SERVER_START_TIMEOUT

# ── logging ──────────────────────────────────────────────────────────────────

def setup_logging(level: str = LOG_LEVEL, log_file: str = LOG_FILE) -> None:
    try:
        logging.basicConfig(
            level=level,
            format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
            handlers=[
                logging.FileHandler(log_file, encoding='utf-8'),
                logging.StreamHandler(sys.stdout)
            ]
        )
    except PermissionError:
        # log file is locked, console only
        logging.basicConfig(level=level)

logger = logging.getLogger(__name__)

# ── server / network helpers ─────────────────────────────────────────────────

def _find_free_port() -> int:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind((DEFAULT_HOST, 0))
        return s.getsockname()[1]

def _wait_for_server(port: int, timeout: float = SERVER_START_TIMEOUT) -> bool:
    deadline = time.time() + timeout
    while time.time() < deadline:
        try:
            with socket.create_connection((DEFAULT_HOST, port), timeout=0.5):
                return True
        except OSError:
            time.sleep(0.1)
    return False

def _start_server(port: int) -> None:
    try:
        import uvicorn
        from api.app import create_app
        logger.info(f"Starting uvicorn on port {port}")
        app = create_app()
        uvicorn.run(app, host=DEFAULT_HOST, port=port, log_level="error")
    except Exception:
        logger.error(f"Server error:\n{traceback.format_exc()}")

# ── main ─────────────────────────────────────────────────────────────────────

def main() -> None:
    setup_logging()
    logger.info("=== Flashcard viewer started ===")

    port = _find_free_port()
    server_thread = threading.Thread(target=_start_server, args=(port,), daemon=True)
    server_thread.start()

    if not _wait_for_server(port):
        logger.error("Server did not start in time.")
        sys.exit(1)

    url = f"http://{DEFAULT_HOST}:{port}"
    logger.info(f"Server ready, opening {url}")
    webbrowser.open(url)

    # keep the main thread alive
    try:
        while True:
            time.sleep(10)
    except KeyboardInterrupt:
        logger.info("Stopped by user.")


if __name__ == "__main__":
    main()
