"""A client library for accessing the GoCardless API"""

from .client import AuthenticatedClient, Environment

__all__ = (
    "AuthenticatedClient",
    "Environment",
)
