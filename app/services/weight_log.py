"""
DesiFit API - Persistent Weight Log.

Ordered body-weight history, one entry per calendar day, written through to
a key-value store on every change.
"""

import json
import logging
import math
import threading
from datetime import date
from typing import List, Optional, Tuple

from pydantic import ValidationError as PydanticValidationError

from app.schemas.progress import WeightEntry
from app.services.store import KeyValueStore
from app.utils.errors import ValidationRejection

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_KEY = "desifit_weight_history"
MAX_WEIGHT_KG = 500


def validate_weight(weight: float) -> float:
    """
    Check a weight against the accepted range (0, 500] kg.

    Raises:
        ValidationRejection: Not a finite number in range.
    """
    if isinstance(weight, bool) or not isinstance(weight, (int, float)):
        raise ValidationRejection(detail=f"Weight must be a number, got {weight!r}")
    if not math.isfinite(weight) or weight <= 0 or weight > MAX_WEIGHT_KG:
        raise ValidationRejection(detail=f"Weight {weight} outside (0, {MAX_WEIGHT_KG}] kg")
    return float(weight)


class WeightLog:
    """
    Weight history kept in ascending date order.

    Usage:
        log = WeightLog(JsonFileStore(".desifit"))
        log.load()
        log.log_today(72.4)
    """

    def __init__(self, store: KeyValueStore, key: str = DEFAULT_HISTORY_KEY):
        self.store = store
        self.key = key
        self._entries: List[WeightEntry] = []
        # sync route handlers run in a threadpool
        self._lock = threading.Lock()
        self.logger = logging.getLogger(__name__)

    @property
    def entries(self) -> Tuple[WeightEntry, ...]:
        """Entries in ascending date order."""
        return tuple(self._entries)

    def history(self) -> List[WeightEntry]:
        """Entries newest first, as shown in the history list."""
        return list(reversed(self._entries))

    def load(self) -> Tuple[WeightEntry, ...]:
        """
        Replace the in-memory history with the stored one.

        Absent or malformed data yields an empty history; the problem is
        logged and the stored blob is left as is until the next write.
        """
        with self._lock:
            self._entries = self._read()
        return self.entries

    def _read(self) -> List[WeightEntry]:
        try:
            raw = self.store.load(self.key)
        except Exception as e:
            self.logger.warning(f"Failed to read weight history: {e}")
            return []

        if raw is None:
            return []

        try:
            items = json.loads(raw)
            if not isinstance(items, list):
                raise TypeError(f"expected a list, got {type(items).__name__}")
            entries = [WeightEntry.model_validate(item) for item in items]
        except (ValueError, TypeError, PydanticValidationError) as e:
            self.logger.warning(f"Failed to load weight history, starting empty: {e}")
            return []

        by_date = {entry.date: entry for entry in entries}
        return sorted(by_date.values(), key=lambda entry: entry.date)

    def _write(self, entries: List[WeightEntry]) -> None:
        payload = [
            {"date": entry.date.isoformat(), "weight": entry.weight}
            for entry in entries
        ]
        self.store.save(self.key, json.dumps(payload))
        self._entries = entries

    def upsert(self, day: date, weight: float) -> bool:
        """
        Record ``weight`` for ``day``, replacing an existing entry for that day.

        Out-of-range weights are ignored without raising.

        Returns:
            bool: True when the history changed and was saved.
        """
        try:
            weight = validate_weight(weight)
        except ValidationRejection as e:
            self.logger.debug(f"Ignoring weight log request: {e.detail}")
            return False

        with self._lock:
            entries = [entry for entry in self._entries if entry.date != day]
            entries.append(WeightEntry(date=day, weight=weight))
            entries.sort(key=lambda entry: entry.date)
            self._write(entries)
        self.logger.info(f"Logged {weight}kg for {day.isoformat()}")
        return True

    def log_today(self, weight: float, today: Optional[date] = None) -> bool:
        """Upsert ``weight`` for the current local calendar day."""
        return self.upsert(today or date.today(), weight)

    def delete(self, day: date) -> bool:
        """
        Remove the entry for ``day``.

        Returns:
            bool: True when an entry was removed and the history saved.
        """
        with self._lock:
            entries = [entry for entry in self._entries if entry.date != day]
            if len(entries) == len(self._entries):
                return False
            self._write(entries)
        self.logger.info(f"Deleted weight entry for {day.isoformat()}")
        return True
