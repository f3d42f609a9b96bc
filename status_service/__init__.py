"""demo-app-service: single-route HTTP status server."""

__version__ = "0.1.0"
