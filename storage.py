# storage.py
import json
from pathlib import Path


class StoreError(Exception):
    """Raised when the progress file cannot be read or written."""


class ProgressStore:
    """
    JSON document store for weekly completion flags.
    Layout: {week_id: {user_id: {exercise_name: bool}}}
    """

    def __init__(self, path):
        self.path = Path(path)

    def load(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise StoreError(f"could not read {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise StoreError(f"{self.path}: expected an object at the top level")
        return data

    def save(self, data: dict):
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
        except OSError as e:
            raise StoreError(f"could not write {self.path}: {e}") from e

    def _document(self, data: dict, user_id: str, week_id: str, create=False):
        week = data.setdefault(week_id, {}) if create else data.get(week_id, {})
        if not isinstance(week, dict):
            raise StoreError(f"{self.path}: week {week_id} is not an object")
        doc = week.setdefault(str(user_id), {}) if create else week.get(str(user_id))
        if doc is not None and not isinstance(doc, dict):
            raise StoreError(f"{self.path}: progress for {user_id} in {week_id} is not an object")
        return doc

    def read(self, user_id: str, week_id: str):
        """Return the progress document, or None when nothing is stored yet."""
        doc = self._document(self.load(), user_id, week_id)
        return dict(doc) if doc is not None else None

    def write(self, user_id: str, week_id: str, partial: dict):
        # merge, never replace: other exercises of the week keep their flags
        data = self.load()
        self._document(data, user_id, week_id, create=True).update(partial)
        self.save(data)


def load_meta(path) -> dict:
    path = Path(path)
    if not path.exists():
        return {}
    try:
        meta = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return meta if isinstance(meta, dict) else {}


def save_meta(path, m: dict):
    Path(path).write_text(json.dumps(m, indent=2))
