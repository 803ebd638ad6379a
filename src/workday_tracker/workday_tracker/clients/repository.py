from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Client


class ClientRepository(Protocol):
    def get_all(self) -> Sequence[Client]:
        raise NotImplementedError

    def get_by_id(self, client_id: str) -> Optional[Client]:
        raise NotImplementedError

    def add(self, client: Client) -> None:
        raise NotImplementedError

    def update(self, client: Client) -> None:
        raise NotImplementedError

    def delete(self, client_id: str) -> None:
        raise NotImplementedError
