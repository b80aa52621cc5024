"""High-level client API."""

from .base import ClientCore
from .client import Client

__all__ = ["Client", "ClientCore"]
