import json
import logging
import os
import re
from typing import Any, Optional

from filelock import FileLock

log = logging.getLogger(__name__)

PRODUCTS = "vural_products"
SITE_CONTENT = "vural_site_content"
MEDIA_LIBRARY = "vural_media_library"
OPEN_POSITIONS = "vural_open_positions"
CONTACT_MESSAGES = "vural_contact_messages"
SETTINGS = "vural_settings"
GEMINI_API_KEY = "gemini_api_key"

KNOWN_KEYS = (
    PRODUCTS,
    SITE_CONTENT,
    MEDIA_LIBRARY,
    OPEN_POSITIONS,
    CONTACT_MESSAGES,
    SETTINGS,
    GEMINI_API_KEY,
)

_SAFE_KEY = re.compile(r"^[a-z0-9_]+$")


class StorageQuotaExceeded(Exception):
    """Raised when a serialized collection is larger than the mirror quota."""
    pass


class StorageMirror:
    """
    Key -> JSON blob store with local-storage semantics: every write replaces
    the whole collection stored under the key.

    Each key lives in ``<directory>/<key>.json``. Writes go to a temp file and
    are swapped in with ``os.replace`` while holding a per-key file lock, so a
    reader never sees a half-written blob.
    """

    def __init__(self, directory: str, quota_bytes: int = 5 * 1024 * 1024, enabled: bool = True):
        self.directory = directory
        self.quota_bytes = quota_bytes
        self.enabled = enabled

    def _path(self, key: str) -> str:
        if not _SAFE_KEY.match(key):
            raise ValueError(f"Invalid storage key: {key!r}")
        return os.path.join(self.directory, f"{key}.json")

    def _lock(self, key: str) -> FileLock:
        return FileLock(self._path(key) + ".lock")

    def write(self, key: str, value: Any) -> int:
        """Serialize ``value`` and store it under ``key``. Returns bytes written."""
        if not self.enabled:
            return 0
        payload = json.dumps(value, ensure_ascii=False, separators=(",", ":")).encode("utf-8")
        if len(payload) > self.quota_bytes:
            raise StorageQuotaExceeded(
                f"{key}: {len(payload)} bytes exceeds quota of {self.quota_bytes}"
            )
        os.makedirs(self.directory, exist_ok=True)
        path = self._path(key)
        tmp = path + ".tmp"
        with self._lock(key).acquire(timeout=5):
            with open(tmp, "wb") as f:
                f.write(payload)
            os.replace(tmp, path)
        log.debug("mirror write key=%s bytes=%d", key, len(payload))
        return len(payload)

    def read(self, key: str) -> Optional[Any]:
        path = self._path(key)
        if not os.path.exists(path):
            return None
        with self._lock(key).acquire(timeout=5):
            with open(path, "r", encoding="utf-8") as f:
                return json.load(f)

    def safe_write(self, key: str, value: Any) -> bool:
        """Like write(), but logs quota and I/O failures instead of raising them."""
        try:
            self.write(key, value)
            return True
        except (StorageQuotaExceeded, OSError) as e:  # filelock.Timeout is an OSError
            log.warning("storage mirror skipped for %s: %s", key, e)
            return False


def get_mirror() -> StorageMirror:
    from vural_api.config import settings

    return StorageMirror(
        settings.STORAGE_DIR,
        quota_bytes=settings.STORAGE_QUOTA_BYTES,
        enabled=settings.STORAGE_MIRROR_ENABLED,
    )
