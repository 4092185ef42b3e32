"""Domain entities for cacheaside."""

from cacheaside.core.entities.cache_policy import CachePolicy
from cacheaside.core.entities.person import Person

__all__ = [
    "CachePolicy",
    "Person",
]
