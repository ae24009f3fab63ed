"""
Python client for the RecycleMe API.

Public API:
- RecycleMeClient: async client, one method per endpoint
- ClientSession: holds the bearer token of the logged-in account
- ApiError: raised for non-2xx responses
"""

from .client import ApiError, RecycleMeClient
from .session import ClientSession

__all__ = [
    "ApiError",
    "ClientSession",
    "RecycleMeClient",
]
