"""
History of completed runs, persisted in a key-value string store.
NO UI DEPENDENCIES.

One key holds a JSON list of {date, time} records. The list is capped
to the most recent entries on every write; newest records are appended
at the end and the oldest are trimmed from the front.
"""
import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Callable, Dict, List, Optional, Protocol

from pydantic import BaseModel, TypeAdapter

from .constants import HISTORY_KEY, HISTORY_LIMIT, HISTORY_DATE_FORMAT

logger = logging.getLogger(__name__)


class HistoryRecord(BaseModel):
    """One finished game: when it happened and how long it took (seconds)."""

    date: str
    time: float


_records_adapter = TypeAdapter(List[HistoryRecord])


class KeyValueStore(Protocol):
    """Minimal string store the history is persisted in."""

    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...


class MemoryStore:
    """Dict-backed store; nothing survives the process."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class JsonFileStore:
    """
    Store backed by a JSON object file mapping keys to string values.
    A missing file reads as an empty store.
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def _read_all(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        data = json.loads(self.path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError(f"{self.path} does not hold a JSON object")
        return data

    def get(self, key: str) -> Optional[str]:
        value = self._read_all().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        try:
            data = self._read_all()
        except ValueError:
            logger.warning(f"Overwriting unreadable store file {self.path}")
            data = {}
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, indent=2), encoding="utf-8")


def format_history(records: List[HistoryRecord]) -> List[str]:
    """Display lines for the history panel, oldest first."""
    if not records:
        return ["No record yet"]
    return [f"{i}. {r.date} - {r.time:.1f}s" for i, r in enumerate(records, start=1)]


class HistoryRecorder:
    """
    Appends completion times to the persisted history.

    Reading never fails: absent, unreadable or malformed data all
    count as an empty history.
    """

    def __init__(
        self,
        store: KeyValueStore,
        key: str = HISTORY_KEY,
        limit: int = HISTORY_LIMIT,
        now: Callable[[], datetime] = datetime.now,
    ):
        self.store = store
        self.key = key
        self.limit = limit
        self._now = now

    def load(self) -> List[HistoryRecord]:
        """Load the stored history, or an empty list."""
        try:
            raw = self.store.get(self.key)
            if raw is None:
                return []
            return _records_adapter.validate_json(raw)
        except (OSError, ValueError) as exc:
            logger.warning(f"Ignoring unreadable history under '{self.key}': {exc}")
            return []

    def record(self, seconds: float) -> List[HistoryRecord]:
        """
        Append a record for a finished game and persist the capped list.
        Returns the list as it should now be displayed.
        """
        history = self.load()
        history.append(HistoryRecord(
            date=self._now().strftime(HISTORY_DATE_FORMAT),
            time=round(seconds, 1),
        ))
        history = history[-self.limit:]

        payload = json.dumps([r.model_dump() for r in history])
        try:
            self.store.set(self.key, payload)
            logger.info(f"Saved run of {seconds:.1f}s ({len(history)} records kept)")
        except OSError as exc:
            logger.warning(f"Could not persist history: {exc}")
        return history
