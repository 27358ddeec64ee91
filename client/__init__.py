"""
Python client for the NutriTrack API.

Attaches the stored bearer token to every request and drops it again as soon
as the server answers 401.
"""

from client.api import NutriTrackClient, APIError, AuthenticationRequired
from client.token_store import TokenStore, FileTokenStore, MemoryTokenStore

__all__ = [
    "NutriTrackClient",
    "APIError",
    "AuthenticationRequired",
    "TokenStore",
    "FileTokenStore",
    "MemoryTokenStore",
]
