"""Application-wide constants."""

# ---------------------------------------------------------------------------
# Routing
# ---------------------------------------------------------------------------
ROOT_PATH = "/"
HEALTH_PATHS: frozenset[str] = frozenset({"/health"})

# ---------------------------------------------------------------------------
# Response bodies
# ---------------------------------------------------------------------------
GREETING_BODY = "Hello World!\n"
HEALTH_STATUS_OK = "ok"
NOT_FOUND_MESSAGE = "Not Found"

# ---------------------------------------------------------------------------
# Deployment defaults
# ---------------------------------------------------------------------------
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 3000
DEFAULT_SERVICE_NAME = "hello-world"
