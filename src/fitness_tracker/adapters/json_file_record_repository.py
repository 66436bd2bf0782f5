"""JSON file repository for the record store."""

import json
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from fitness_tracker.services.records import RecordRepository


@dataclass
class JsonFileRecordRepository(RecordRepository):
    """Keeps every key in one JSON object on disk."""

    path: Path

    def get(self, key: str) -> object | None:
        """Return the stored value for a key."""
        return self._read_all().get(key)

    def set_many(self, values: Mapping[str, object]) -> None:
        """Merge values into the file with a single atomic rewrite."""
        data = self._read_all()
        data.update(values)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        tmp.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
        tmp.replace(self.path)

    def _read_all(self) -> dict[str, object]:
        if not self.path.exists():
            return {}
        data = json.loads(self.path.read_text(encoding="utf-8") or "{}")
        if not isinstance(data, dict):
            raise ValueError(f"Record file is not a JSON object: {self.path}")
        return data
