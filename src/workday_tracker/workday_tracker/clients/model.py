from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Client:
    """Domain entity: a client site employees are assigned to."""

    client_id: str
    name: str
    location: str
    created_at: str
