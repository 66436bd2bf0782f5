"""Supabase repository for the record store."""

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from fitness_tracker.services.records import RecordRepository


@dataclass
class SupabaseRecordRepository(RecordRepository):
    """Supabase implementation storing one row per key."""

    client: Client
    table_name: str = "record_store"

    def get(self, key: str) -> object | None:
        """Return the stored value for a key."""
        response = (
            self.client.table(self.table_name)
            .select("value")
            .eq("key", key)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return response.data[0].get("value")

    def set_many(self, values: Mapping[str, object]) -> None:
        """Insert or replace several keys in one request."""
        updated_at = datetime.now(tz=UTC).isoformat()
        rows = [
            {"key": key, "value": value, "updated_at": updated_at}
            for key, value in values.items()
        ]
        self.client.table(self.table_name).upsert(rows, on_conflict="key").execute()
