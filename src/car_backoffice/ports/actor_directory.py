from __future__ import annotations

from abc import ABC, abstractmethod

from car_backoffice.domain.actors import Actor
from car_backoffice.domain.errors import UnauthorizedError


class ActorDirectory(ABC):
    """Port to the identity provider's ``actor id -> role`` resolution."""

    @abstractmethod
    def get(self, actor_id: str) -> Actor | None: ...

    def require(self, actor_id: str | None) -> Actor:
        """
        Resolve the calling actor.

        Raises:
            UnauthorizedError: If no id was given or it does not resolve
        """
        if not actor_id:
            raise UnauthorizedError("Actor identity is required")
        actor = self.get(actor_id)
        if actor is None:
            raise UnauthorizedError(f"Unknown actor '{actor_id}'", actor_id=actor_id)
        return actor
