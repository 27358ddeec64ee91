"""Where the client keeps its bearer token between calls."""

import logging
import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Union

logger = logging.getLogger("nutritrack.client.token")

DEFAULT_TOKEN_PATH = Path("~/.nutritrack/token")


class TokenStore(ABC):
    """Holds a single token string"""

    @abstractmethod
    def get(self) -> Optional[str]:
        pass

    @abstractmethod
    def set(self, token: str) -> None:
        pass

    @abstractmethod
    def clear(self) -> None:
        pass


class MemoryTokenStore(TokenStore):
    def __init__(self, token: Optional[str] = None):
        self._token = token

    def get(self) -> Optional[str]:
        return self._token

    def set(self, token: str) -> None:
        self._token = token

    def clear(self) -> None:
        self._token = None


class FileTokenStore(TokenStore):
    """
    Token persisted in a user-only readable file.

    An unreadable or empty file counts as no token.
    """

    def __init__(self, path: Union[str, Path, None] = None):
        self.path = Path(path or DEFAULT_TOKEN_PATH).expanduser()

    def get(self) -> Optional[str]:
        try:
            token = self.path.read_text(encoding="utf-8").strip()
        except FileNotFoundError:
            return None
        except OSError as exc:
            logger.warning("token_read_failed path=%s error=%s", self.path, exc)
            return None
        return token or None

    def set(self, token: str) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(token, encoding="utf-8")
        os.chmod(self.path, 0o600)

    def clear(self) -> None:
        self.path.unlink(missing_ok=True)
