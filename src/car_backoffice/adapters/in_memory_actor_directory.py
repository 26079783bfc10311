from __future__ import annotations

from car_backoffice.domain.actors import Actor
from car_backoffice.ports.actor_directory import ActorDirectory


class InMemoryActorDirectory(ActorDirectory):
    """Fixed roster of actors, for tests and local runs."""

    def __init__(self, actors: list[Actor] | None = None) -> None:
        self._actors = {actor.id: actor for actor in actors or []}

    def get(self, actor_id: str) -> Actor | None:
        return self._actors.get(actor_id)
