"""Supabase key-value storage for session state."""

from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from nutrition_planner.services.state import StateStore


@dataclass
class SupabaseStateStore(StateStore):
    """Supabase implementation backed by a ``key``/``value`` table."""

    client: Client
    table_name: str = "app_state"

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

    def set(self, key: str, value: object) -> None:
        """Insert or replace the value for a key."""
        self.client.table(self.table_name).upsert(
            {
                "key": key,
                "value": value,
                "updated_at": datetime.now(tz=UTC).isoformat(),
            },
            on_conflict="key",
        ).execute()
