"""Environment configuration."""

from .settings import DEFAULT_API_VERSION, GRAPH_API_URL, Settings, settings

__all__ = ["DEFAULT_API_VERSION", "GRAPH_API_URL", "Settings", "settings"]
