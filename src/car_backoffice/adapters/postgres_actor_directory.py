from __future__ import annotations

from sqlalchemy.orm import Session

from car_backoffice.domain.actors import Actor, Role
from car_backoffice.infra.db.models.actor import ActorRow
from car_backoffice.ports.actor_directory import ActorDirectory


class PostgresActorDirectory(ActorDirectory):
    """Resolves actors from the ``actors`` table synced from the identity provider."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def get(self, actor_id: str) -> Actor | None:
        row = self._session.get(ActorRow, actor_id)
        if row is None:
            return None
        return Actor(id=row.id, role=Role(row.role))
