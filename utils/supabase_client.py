"""Supabase record store for MC verifications."""
import logging

from supabase import Client, create_client

logger = logging.getLogger(__name__)

DEFAULT_TABLE = 'mc_verifications'

# Columns assigned by the store; never sent on insert or update
STORE_MANAGED_FIELDS = ('id', 'created_at')

# Fallback messages when the underlying error carries none
LOAD_FAILED = 'Failed to load verifications'
SAVE_FAILED = 'Failed to save'
UPDATE_FAILED = 'Update failed'
DELETE_FAILED = 'Delete failed'


class StoreError(Exception):
    """Raised when a record store call fails (transport or store-side)."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


def describe_error(error: Exception, fallback: str) -> str:
    """Return a human-readable message for an exception.

    PostgREST errors expose ``message``; anything else falls back to ``str()``.
    """
    message = getattr(error, 'message', None)
    if not isinstance(message, str) or not message.strip():
        message = str(error)
    return message.strip() or fallback


def _strip_managed(fields: dict) -> dict:
    return {k: v for k, v in fields.items() if k not in STORE_MANAGED_FIELDS}


class RecordStore:
    """Thin wrapper around a Supabase table of verification records.

    Every failure surfaces as a single ``StoreError``. Calls are never retried.
    """

    def __init__(self, client: Client | None, table: str = DEFAULT_TABLE):
        self._client = client
        self.table = table

    @property
    def is_configured(self) -> bool:
        return self._client is not None

    def _query(self):
        if self._client is None:
            raise StoreError(
                "Record store is not configured (set SUPABASE_URL and SUPABASE_ANON_KEY)"
            )
        return self._client.table(self.table)

    def list_all(self) -> list[dict]:
        """Fetch all records, newest first."""
        query = self._query()
        try:
            response = query.select('*').order('created_at', desc=True).execute()
        except Exception as e:
            logger.error(f"Listing {self.table} failed: {e}")
            raise StoreError(describe_error(e, LOAD_FAILED)) from e
        return list(response.data or [])

    def insert(self, record: dict) -> None:
        """Insert a new record. ``id`` and ``created_at`` are left to the store."""
        query = self._query()
        try:
            query.insert(_strip_managed(record)).execute()
        except Exception as e:
            logger.error(f"Insert into {self.table} failed: {e}")
            raise StoreError(describe_error(e, SAVE_FAILED)) from e
        logger.info(f"Verification inserted: {record.get('mc_number')}")

    def update(self, record_id: str, fields: dict) -> None:
        """Update the editable fields of an existing record."""
        query = self._query()
        try:
            response = query.update(_strip_managed(fields)).eq('id', record_id).execute()
        except Exception as e:
            logger.error(f"Update of {record_id} failed: {e}")
            raise StoreError(describe_error(e, UPDATE_FAILED)) from e
        if not response.data:
            raise StoreError(f"{UPDATE_FAILED}: no verification with id {record_id}")
        logger.info(f"Verification updated: {record_id}")

    def delete(self, record_id: str) -> None:
        """Delete a record by id."""
        query = self._query()
        try:
            response = query.delete().eq('id', record_id).execute()
        except Exception as e:
            logger.error(f"Delete of {record_id} failed: {e}")
            raise StoreError(describe_error(e, DELETE_FAILED)) from e
        if not response.data:
            raise StoreError(f"{DELETE_FAILED}: no verification with id {record_id}")
        logger.info(f"Verification deleted: {record_id}")


def create_record_store(url: str, key: str, table: str = DEFAULT_TABLE) -> RecordStore:
    """Build the record store from connection settings.

    Missing settings yield an unconfigured store whose calls all fail.
    """
    if not url or not key:
        logger.warning(
            "SUPABASE_URL and SUPABASE_ANON_KEY must be set for database features"
        )
        return RecordStore(None, table)

    logger.debug(f"Supabase config present (URL length: {len(url)})")
    return RecordStore(create_client(url, key), table)
