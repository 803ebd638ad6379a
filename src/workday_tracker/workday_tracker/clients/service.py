from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional, Sequence

from ..common.datetime_utils import now_iso
from ..common.validators import require_non_empty, require_str
from ..core.exceptions import NotFoundError
from ..storage.collection import generate_id
from .model import Client
from .repository import ClientRepository

logger = logging.getLogger(__name__)


class ClientService:
    def __init__(self, clients: ClientRepository):
        self._clients = clients

    def list_all(self) -> Sequence[Client]:
        return self._clients.get_all()

    def get(self, client_id: str) -> Client:
        client = self._clients.get_by_id(client_id)
        if not client:
            raise NotFoundError(f"Client {client_id} not found")
        return client

    def create(self, *, name: str, location: str = "") -> Client:
        client = Client(
            client_id=generate_id(),
            name=require_non_empty(name, "Name"),
            location=require_str("" if location is None else location, "Location").strip(),
            created_at=now_iso(),
        )
        self._clients.add(client)
        logger.info("[clients] created id=%s", client.client_id)
        return client

    def update(self, client_id: str, *, name: Optional[str] = None, location: Optional[str] = None) -> Client:
        client = self.get(client_id)
        if name is not None:
            client = replace(client, name=require_non_empty(name, "Name"))
        if location is not None:
            client = replace(client, location=require_str(location, "Location").strip())
        self._clients.update(client)
        return client

    def delete(self, client_id: str) -> None:
        """Work records keep referencing the deleted id."""
        self.get(client_id)
        self._clients.delete(client_id)
        logger.info("[clients] deleted id=%s", client_id)
