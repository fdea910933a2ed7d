import logging
import threading
from typing import Dict, List, Optional

from string_analyzer.schemas import StringRecord

logger = logging.getLogger("string_analyzer.store")


class StringStore:
    """In-memory record store keyed by content hash.

    Sync endpoints run in a threadpool, so every access goes through one lock.
    ``all_records`` hands back a copy so a filtering pass never sees a
    half-applied insert or delete.
    """

    def __init__(self) -> None:
        self._records: Dict[str, StringRecord] = {}
        self._lock = threading.Lock()

    def insert_if_absent(self, record: StringRecord) -> bool:
        with self._lock:
            if record.id in self._records:
                return False
            self._records[record.id] = record
        logger.info("Stored string %s", record.id)
        return True

    def get(self, record_id: str) -> Optional[StringRecord]:
        with self._lock:
            return self._records.get(record_id)

    def delete(self, record_id: str) -> bool:
        with self._lock:
            removed = self._records.pop(record_id, None)
        if removed is None:
            return False
        logger.info("Deleted string %s", record_id)
        return True

    def all_records(self) -> List[StringRecord]:
        with self._lock:
            return list(self._records.values())

    def clear(self) -> None:
        with self._lock:
            self._records.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)


store = StringStore()


def get_store() -> StringStore:
    return store
