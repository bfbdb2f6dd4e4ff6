import json
from pathlib import Path

from orphanage_form.logging.logger import Log
from orphanage_form.storage.base import BaseKeyValueStore

LATITUDE_KEY = "hope:latitude"
LONGITUDE_KEY = "hope:longitude"


class JsonFileKeyValueStore(BaseKeyValueStore):
    """Key/value cache persisted as a flat JSON object in one file."""

    def __init__(self, path: Path) -> None:
        self._path = path

    def get(self, key: str) -> str | None:
        value = self._read().get(key)
        return None if value is None else str(value)

    def set(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")

    def _read(self) -> dict[str, object]:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            Log.warning(f"Ignoring corrupt key/value cache {self._path}: {exc}")
            return {}
        if not isinstance(data, dict):
            Log.warning(f"Ignoring key/value cache {self._path}: not a JSON object")
            return {}
        return data
