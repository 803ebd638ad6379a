from __future__ import annotations

from ..core.constants import CLIENTS_KEY
from ..storage.base import KeyValueStore
from ..storage.collection import Collection
from .model import Client


class KVClientRepository(Collection[Client]):
    def __init__(self, store: KeyValueStore):
        super().__init__(store, CLIENTS_KEY)

    def _id_of(self, item: Client) -> str:
        return item.client_id

    def _to_dict(self, item: Client) -> dict:
        return {
            "id": item.client_id,
            "name": item.name,
            "location": item.location,
            "createdAt": item.created_at,
        }

    def _from_dict(self, data: dict) -> Client:
        return Client(
            client_id=str(data["id"]),
            name=data["name"],
            location=data.get("location") or "",
            created_at=data.get("createdAt") or "",
        )
