"""REST routes for persons."""

from typing import Any

from fastapi import APIRouter
from pydantic import BaseModel

from cacheaside.core.entities.person import Person
from cacheaside.core.services.coordinator import CacheAsideCoordinator


class PersonModel(BaseModel):
    """Wire representation of a person."""

    id: int | None = None
    firstname: str
    lastname: str
    age: int

    def to_entity(self) -> Person:
        return Person(
            id=self.id,
            firstname=self.firstname,
            lastname=self.lastname,
            age=self.age,
        )

    @classmethod
    def from_entity(cls, person: Person) -> "PersonModel":
        return cls(**person.to_dict())


def create_router(coordinator: CacheAsideCoordinator) -> APIRouter:
    """Create the person routes bound to a coordinator.

    Args:
        coordinator: The coordinator serving every route.

    Returns:
        An APIRouter to include in the application.
    """
    router = APIRouter()

    # Registered before "/{person_id}" so the literal paths win.
    @router.get("/personByRedisTemplate", response_model=PersonModel | None)
    async def get_last_fetched_person() -> PersonModel | None:
        """Return the person most recently fetched from the store."""
        person = await coordinator.read_last_fetched()
        return PersonModel.from_entity(person) if person is not None else None

    @router.get("/cache/stats")
    async def cache_stats() -> dict[str, Any]:
        """Get cache statistics."""
        policy = coordinator.policy
        return {
            "stats": coordinator.stats,
            "policy": {
                "cache_name": policy.cache_name,
                "ttl_seconds": policy.ttl.total_seconds() if policy.ttl else None,
                "evict_all_entries": policy.evict_all_entries,
                "enabled": policy.enabled,
            },
        }

    @router.put("/update", response_model=PersonModel)
    async def update_person(person: PersonModel) -> PersonModel:
        saved = await coordinator.write(person.to_entity())
        return PersonModel.from_entity(saved)

    @router.get("/{person_id}", response_model=PersonModel)
    async def get_person(person_id: int) -> PersonModel:
        person = await coordinator.read(person_id)
        return PersonModel.from_entity(person)

    @router.delete("/{person_id}")
    async def delete_person(person_id: int) -> None:
        await coordinator.delete(person_id)

    return router
