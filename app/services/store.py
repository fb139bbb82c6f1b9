"""
DesiFit API - Key-Value Store.

Minimal synchronous load/save surface behind the weight log, with file,
in-memory and Redis backends.
"""

import logging
import os
import tempfile
from pathlib import Path
from typing import Dict, Optional

logger = logging.getLogger(__name__)


class KeyValueStore:
    """
    Process-wide string key-value surface.

    Backends only need ``load`` and ``save``; values are opaque strings.
    """

    def load(self, key: str) -> Optional[str]:
        """Return the stored value for ``key`` or None when absent."""
        raise NotImplementedError

    def save(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        raise NotImplementedError


class MemoryStore(KeyValueStore):
    """Dict-backed store. Contents are lost with the process."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def load(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def save(self, key: str, value: str) -> None:
        self._data[key] = value


class JsonFileStore(KeyValueStore):
    """
    One ``<key>.json`` file per key inside a directory.

    Writes go to a temporary file in the same directory and are moved into
    place with ``os.replace``, so a crash mid-write leaves the old value.
    """

    def __init__(self, directory: str):
        self.directory = Path(directory)
        self.logger = logging.getLogger(__name__)

    def _path(self, key: str) -> Path:
        return self.directory / f"{key}.json"

    def load(self, key: str) -> Optional[str]:
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def save(self, key: str, value: str) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=self.directory, prefix=f".{key}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(value)
            os.replace(tmp_path, self._path(key))
        except OSError:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise
        self.logger.debug(f"Saved {len(value)} bytes to {self._path(key)}")


class RedisStore(KeyValueStore):
    """
    Redis-backed store using plain GET/SET (no TTL).

    Uses the blocking client because the store surface is synchronous.
    Each call can wait up to ``socket_timeout``, so callers must stay off
    the event loop; the progress routes are sync handlers for this reason.
    """

    def __init__(self, redis_url: str, socket_timeout: int = 5):
        self._redis_url = redis_url
        self._socket_timeout = socket_timeout
        self._client = None

    @property
    def client(self):
        """Lazy-load Redis client."""
        if self._client is None:
            import redis
            self._client = redis.Redis.from_url(
                self._redis_url,
                encoding="utf-8",
                decode_responses=True,
                socket_connect_timeout=self._socket_timeout,
                socket_timeout=self._socket_timeout
            )
        return self._client

    def load(self, key: str) -> Optional[str]:
        return self.client.get(key)

    def save(self, key: str, value: str) -> None:
        self.client.set(key, value)


def build_store(settings) -> KeyValueStore:
    """
    Create the store selected by ``settings.STORAGE_BACKEND``.

    Raises:
        ValueError: Unknown backend name.
    """
    backend = settings.STORAGE_BACKEND.lower()
    if backend == "file":
        logger.info(f"Using file storage in {settings.STORAGE_DIR}")
        return JsonFileStore(settings.STORAGE_DIR)
    if backend == "memory":
        logger.warning("Using in-memory storage - weight history will not survive a restart")
        return MemoryStore()
    if backend == "redis":
        logger.info("Using Redis storage")
        return RedisStore(settings.REDIS_URL, settings.REDIS_SOCKET_TIMEOUT)
    raise ValueError(f"Unknown STORAGE_BACKEND: {settings.STORAGE_BACKEND}")
