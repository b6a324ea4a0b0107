"""Server configuration constants."""

DEFAULT_API_HOST = "0.0.0.0"
DEFAULT_API_PORT = 8000  # Default port for FastAPI backend
SEPARATOR_WIDTH = 60  # Width of the banner printed at startup
