import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def verified_key(form_type: str) -> str:
    return f"otp_verified_{form_type}"


def phone_key(form_type: str) -> str:
    return f"phone_number_{form_type}"


class MemoryStore:
    """String key/value store with the localStorage surface (get/set/remove)."""

    def __init__(self, data=None):
        self._data = dict(data or {})

    def get(self, key):
        return self._data.get(key)

    def set(self, key, value) -> None:
        self._data[key] = str(value)
        self._flush()

    def remove(self, key) -> None:
        self._data.pop(key, None)
        self._flush()

    def _flush(self) -> None:
        pass


class JsonFileStore(MemoryStore):
    """MemoryStore persisted to a JSON file after every write."""

    def __init__(self, path):
        self.path = Path(path)
        super().__init__(self._load())

    def _load(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable store %s: %s", self.path, e)
            return {}
        return raw if isinstance(raw, dict) else {}

    def _flush(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(self._data, ensure_ascii=False), encoding="utf-8")
