"""
Append-only JSON record store.

The whole log is one JSON array in a single file. Every append reads the
current log, adds the record and replaces the file atomically.

Known limitation: the read-modify-write cycle is not safe under concurrent
writers. Two processes appending at the same moment can each read the same
log and the later replace wins, losing the other record. The store assumes
at most one writer; no file locking is attempted.
"""

import json
import os
import tempfile
from pathlib import Path
from typing import Any, List, NoReturn, Union

from commentboard.lib.exceptions import (
    CorruptStoreException,
    StoreReadException,
    StoreWriteException,
    wrap_exception,
)
from commentboard.utils.logger import setup_logger

store_logger = setup_logger("commentboard.store")


class JsonRecordStore:
    """Durable append-only list of records of a single JSON type."""

    def __init__(self, path: Union[str, Path], record_type: type = str):
        """
        Args:
            path: File holding the JSON array
            record_type: Python type every stored element must have (str or dict)
        """
        self.path = Path(path)
        self.record_type = record_type

    def read_all(self) -> List[Any]:
        """
        Read the full log in insertion order.

        A missing file is an empty log.

        Raises:
            StoreReadException: If the file cannot be read
            CorruptStoreException: If the file does not hold a JSON array of records
        """
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return []
        except OSError as e:
            store_logger.error("store_read_failed", extra={
                "data": {"path": str(self.path), "error": str(e)}
            })
            raise wrap_exception(e, f"Cannot read record store {self.path}", StoreReadException) from e

        try:
            records = json.loads(raw)
        except json.JSONDecodeError as e:
            self._report_corruption(f"malformed JSON ({e.msg} at line {e.lineno})")

        if not isinstance(records, list):
            self._report_corruption(f"expected a JSON array, found {type(records).__name__}")

        for index, record in enumerate(records):
            if not isinstance(record, self.record_type):
                self._report_corruption(
                    f"element {index} is {type(record).__name__}, expected {self.record_type.__name__}"
                )

        return records

    def append(self, record: Any) -> None:
        """
        Durably add one record to the end of the log.

        Raises:
            TypeError: If record is not of the store's record type
            PersistenceException: If the log cannot be read or written
        """
        if not isinstance(record, self.record_type):
            raise TypeError(
                f"{self.path.name} stores {self.record_type.__name__} records, got {type(record).__name__}"
            )

        records = self.read_all()
        records.append(record)
        self._replace(records)

        store_logger.debug("record_appended", extra={
            "data": {"path": str(self.path), "count": len(records)}
        })

    def _replace(self, records: List[Any]) -> None:
        # Temp file lives next to the target so os.replace stays on one filesystem
        tmp_name = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent
            )
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                json.dump(records, handle, ensure_ascii=False)
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(tmp_name, self.path)
        except OSError as e:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            store_logger.error("store_write_failed", extra={
                "data": {"path": str(self.path), "error": str(e)}
            })
            raise wrap_exception(e, f"Cannot write record store {self.path}", StoreWriteException) from e

    def _report_corruption(self, reason: str) -> NoReturn:
        store_logger.error("store_corrupt", extra={
            "data": {"path": str(self.path), "reason": reason}
        })
        raise CorruptStoreException(
            f"Record store {self.path} is corrupt: {reason}",
            {"path": str(self.path)}
        )
