"""JSON-file-backed UnitOfWork.

All collections live in one document, ``fulfilment.json``, in the data
directory. A unit of work loads the document on entry, lets the
repositories work on the loaded records and writes the whole document on
commit: temp file, fsync, then a single ``os.replace``. Either every
change of the unit lands or none does.

Units on the same data directory are serialized from entry to exit, across
threads by a re-entrant lock and across processes by an exclusive
``fcntl.flock`` on ``<data_dir>/.lock``. Two concurrent allocations
against the same product therefore cannot lose an update. Warehouse
versions are checked once more against the document at commit, which
catches a nested unit on the same thread that committed first.
"""

from __future__ import annotations

import fcntl
import json
import os
import threading
from pathlib import Path
from typing import IO

from fulfilment.domain.exceptions import ConcurrentModificationError
from fulfilment.domain.repository.unit_of_work import UnitOfWork
from fulfilment.infrastructure.persistence.json_allocation_repository import (
    JsonAllocationRepository,
)
from fulfilment.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from fulfilment.infrastructure.persistence.json_store_repository import (
    JsonStoreRepository,
)
from fulfilment.infrastructure.persistence.json_warehouse_repository import (
    JsonWarehouseRepository,
)
from fulfilment.logging_config import get_logger

logger = get_logger(__name__)

COLLECTIONS = ("products", "stores", "warehouses", "allocations")
DOCUMENT_NAME = "fulfilment.json"
LOCK_NAME = ".lock"


class _DirectoryLock:
    """Exclusive access to one data directory.

    The thread lock is re-entrant; the file lock is taken only by the
    outermost holder, since a second ``flock`` from the same process on a
    new file handle would block on itself.
    """

    def __init__(self, lock_path: Path) -> None:
        self._lock_path = lock_path
        self._thread_lock = threading.RLock()
        self._depth = 0
        self._handle: IO[str] | None = None

    def acquire(self) -> None:
        self._thread_lock.acquire()
        if self._depth == 0:
            try:
                handle = self._lock_path.open("a")
                fcntl.flock(handle.fileno(), fcntl.LOCK_EX)
            except OSError:
                self._thread_lock.release()
                raise
            self._handle = handle
        self._depth += 1

    def release(self) -> None:
        self._depth -= 1
        if self._depth == 0 and self._handle is not None:
            try:
                fcntl.flock(self._handle.fileno(), fcntl.LOCK_UN)
            finally:
                self._handle.close()
                self._handle = None
        self._thread_lock.release()


_locks: dict[Path, _DirectoryLock] = {}
_locks_guard = threading.Lock()


def _lock_for(data_dir: Path) -> _DirectoryLock:
    key = data_dir.resolve()
    with _locks_guard:
        if key not in _locks:
            _locks[key] = _DirectoryLock(key / LOCK_NAME)
        return _locks[key]


class JsonUnitOfWork(UnitOfWork):

    def __init__(self, data_dir: Path) -> None:
        self._data_dir = data_dir
        self._records: dict[str, list[dict]] = {}
        self._loaded_versions: dict[str, int] = {}
        self._data_dir.mkdir(parents=True, exist_ok=True)
        self._lock = _lock_for(data_dir)

    # --- UnitOfWork hooks -----------------------------------------------------

    def _begin(self) -> None:
        self._lock.acquire()
        try:
            self._ensure_document()
            self._records = self._load_document()
        except Exception:
            self._lock.release()
            raise
        self._loaded_versions = self._versions(self._records["warehouses"])
        self.products = JsonProductRepository(self._records["products"])
        self.stores = JsonStoreRepository(self._records["stores"])
        self.warehouses = JsonWarehouseRepository(self._records["warehouses"])
        self.allocations = JsonAllocationRepository(self._records["allocations"])

    def _commit(self) -> None:
        self._check_warehouse_versions()
        self._persist_document(self._records)
        self._loaded_versions = self._versions(self._records["warehouses"])
        logger.debug("unit_of_work_committed", extra={"data_dir": str(self._data_dir)})

    def rollback(self) -> None:
        self._records = {}

    def _end(self) -> None:
        self._lock.release()

    # --- Optimistic check -----------------------------------------------------

    def _check_warehouse_versions(self) -> None:
        on_disk = self._versions(self._load_document()["warehouses"])
        for code, loaded in self._loaded_versions.items():
            current = on_disk.get(code, loaded)
            if current != loaded:
                raise ConcurrentModificationError(code, loaded, current)

    @staticmethod
    def _versions(warehouses: list[dict]) -> dict[str, int]:
        return {r["business_unit_code"]: r["version"] for r in warehouses}

    # --- File helpers ---------------------------------------------------------

    @property
    def _path(self) -> Path:
        return self._data_dir / DOCUMENT_NAME

    def _load_document(self) -> dict[str, list[dict]]:
        raw = json.loads(self._path.read_text(encoding="utf-8"))
        return {name: raw.get(name, []) for name in COLLECTIONS}

    def _persist_document(self, records: dict[str, list[dict]]) -> None:
        tmp = self._path.with_suffix(".json.tmp")
        try:
            with tmp.open("w", encoding="utf-8") as fh:
                json.dump({name: records[name] for name in COLLECTIONS}, fh, indent=2)
                fh.write("\n")
                fh.flush()
                os.fsync(fh.fileno())
            os.replace(tmp, self._path)
        except OSError:
            tmp.unlink(missing_ok=True)
            raise

    def _ensure_document(self) -> None:
        if not self._path.exists():
            self._persist_document({name: [] for name in COLLECTIONS})
