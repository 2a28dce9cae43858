"""JSON file storage for session state."""

import json
from dataclasses import dataclass
from pathlib import Path

from nutrition_planner.services.state import StateStore


@dataclass
class JsonFileStateStore(StateStore):
    """Stores each key as ``<key>.json`` under a data directory."""

    data_dir: Path

    def get(self, key: str) -> object | None:
        """Return the decoded JSON for a key, if the file exists."""
        path = self._path_for(key)
        if not path.exists():
            return None
        return json.loads(path.read_text(encoding="utf-8"))

    def set(self, key: str, value: object) -> None:
        """Write the value, replacing the file in one rename."""
        self.data_dir.mkdir(parents=True, exist_ok=True)
        path = self._path_for(key)
        tmp_path = path.with_suffix(".json.tmp")
        tmp_path.write_text(
            json.dumps(value, ensure_ascii=False, indent=2), encoding="utf-8"
        )
        tmp_path.replace(path)

    def _path_for(self, key: str) -> Path:
        return self.data_dir / f"{key}.json"
