"""HTTP API."""
from convertaphile.interfaces.api.app import app

__all__ = ["app"]
