import os

# Base directory
BASE_DIR = os.path.dirname(os.path.abspath(__file__))

# Paths
STATIC_DIR = os.path.join(BASE_DIR, "static")
LOG_FILE = os.path.join(BASE_DIR, "launch.log")

# Server
DEFAULT_HOST = os.getenv("HOST", "127.0.0.1")
DEFAULT_PORT = int(os.getenv("PORT", "8000"))
SERVER_START_TIMEOUT = 15.0

# Card data: an http(s) URL or a local JSON file path
CARDS_SOURCE = os.getenv("CARDS_SOURCE", os.path.join(STATIC_DIR, "questions.json"))
FETCH_TIMEOUT = float(os.getenv("FETCH_TIMEOUT", "10"))

# Sessions
SESSION_TTL = int(os.getenv("SESSION_TTL", "3600"))   # 1 hour
SESSION_CLEANUP_INTERVAL = 300                         # 5 minutes

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

APP_TITLE = "Greek Flashcards"
