"""Backend access for the fleet console."""

from .api import ApiClient, FetchError, FleetConsoleError

__all__ = ["ApiClient", "FetchError", "FleetConsoleError"]
