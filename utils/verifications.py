"""Verification data hook: in-memory list state backed by the record store."""
import logging
import threading

from utils.supabase_client import LOAD_FAILED, RecordStore, describe_error

logger = logging.getLogger(__name__)

STATUS_LOADING = 'loading'
STATUS_READY = 'ready'
STATUS_ERROR = 'error'


class VerificationHook:
    """Owns the verification list plus loading/error status.

    The list mirrors the store: every successful mutation triggers a full
    refetch. Store errors from mutations propagate to the caller and leave
    the state untouched.

    One hook serves every request in the process, so callers publish the
    snapshot a fetch or mutation returns rather than reading ``snapshot()``
    afterwards, which may catch another request's fetch in flight.
    """

    def __init__(self, store: RecordStore):
        self.store = store
        self._lock = threading.Lock()
        self._records: list[dict] = []
        self._status = STATUS_LOADING
        self._error: str | None = None

    @property
    def records(self) -> list[dict]:
        with self._lock:
            return list(self._records)

    @property
    def status(self) -> str:
        return self._status

    @property
    def loading(self) -> bool:
        return self._status == STATUS_LOADING

    @property
    def error(self) -> str | None:
        return self._error

    def fetch_all(self) -> dict:
        """Reload the list from the store. Failures land in ``error``.

        Returns the ready or error snapshot this fetch produced.
        """
        with self._lock:
            self._status = STATUS_LOADING
            self._error = None
        logger.debug("Fetching verifications from database...")

        try:
            rows = self.store.list_all()
        except Exception as e:
            message = describe_error(e, LOAD_FAILED)
            logger.error(f"Database fetch failed: {message}")
            with self._lock:
                self._records = []
                self._status = STATUS_ERROR
                self._error = message
                return self._snapshot()

        with self._lock:
            self._records = rows
            self._status = STATUS_READY
            self._error = None
            result = self._snapshot()
        logger.debug(f"Fetched {len(rows)} verification(s)")
        return result

    refetch = fetch_all

    def add_verification(self, record: dict) -> dict:
        """Insert a record, then refetch. Raises ``StoreError`` on failure."""
        self.store.insert(record)
        return self.fetch_all()

    def update_verification(self, record_id: str, fields: dict) -> dict:
        """Update a record, then refetch. Raises ``StoreError`` on failure."""
        self.store.update(record_id, fields)
        return self.fetch_all()

    def delete_verification(self, record_id: str) -> dict:
        """Delete a record, then refetch. Raises ``StoreError`` on failure."""
        self.store.delete(record_id)
        return self.fetch_all()

    def get(self, record_id: str | None) -> dict | None:
        """Look up a record in the current list."""
        if not record_id:
            return None
        with self._lock:
            for record in self._records:
                if record.get('id') == record_id:
                    return dict(record)
        return None

    def _snapshot(self) -> dict:
        # caller holds self._lock
        return {
            'status': self._status,
            'records': list(self._records),
            'error': self._error,
        }

    def snapshot(self) -> dict:
        """JSON-serialisable view of the current state for ``dcc.Store``."""
        with self._lock:
            return self._snapshot()
