"""
Adapters package - External service connections.
SMTP delivery and local file storage.
"""

from adapters import file_storage, mail_adapter

__all__ = [
    "file_storage",
    "mail_adapter",
]
