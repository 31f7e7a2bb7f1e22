# config.py
"""Fixed application settings. Only the server URL can be changed, from the command line."""

# Server the word lists live on
DEFAULT_SERVER_URL = "http://localhost:8000"

# Endpoint paths, one per collection
DICTIONARY_PATH = "/data/vocab/dictionary"
RECENT_PATH = "/data/vocab/recent"

# Recent items are capped at this many entries (most recent first)
MAX_RECENT_ITEMS = 12

# Dictionary rows shown above / below the word form
ROWS_BEFORE = 5
ROWS_AFTER = 10

# Seconds before a single HTTP request gives up
REQUEST_TIMEOUT = 10.0

APP_TITLE = "Vocab"
