"""
JSON file settings repository.

The whole map is rewritten on every set() through a temporary file and an
atomic rename, so a crash never leaves a half-written file behind.
"""

import json
import os
import tempfile
import threading
from pathlib import Path
from typing import Optional

from privgate.providers.storage.base import SettingsRepository
from privgate.utils.logging import get_logger

logger = get_logger(__name__)


class JsonFileSettingsRepository(SettingsRepository):
    def __init__(self, path: str | Path):
        self.path = Path(path).expanduser()
        self._lock = threading.Lock()
        self._values = self._load()

    def _load(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("settings_file_unreadable", path=str(self.path), error=str(e))
            return {}
        if not isinstance(data, dict):
            logger.warning("settings_file_not_a_mapping", path=str(self.path))
            return {}
        return {str(k): str(v) for k, v in data.items() if v is not None}

    def get(self, key: str) -> Optional[str]:
        with self._lock:
            return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        with self._lock:
            values = dict(self._values)
            values[key] = value
            self._write(values)
            self._values = values
        logger.debug("setting_persisted", key=key, path=str(self.path))

    def _write(self, values: dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(
            dir=str(self.path.parent), prefix=f".{self.path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(values, f, ensure_ascii=False, indent=2, sort_keys=True)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, self.path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise


__all__ = ["JsonFileSettingsRepository"]
