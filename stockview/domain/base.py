"""Base classes for catalog records and their immutable attributes."""

from abc import ABC
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class ValueObject(ABC):
    """Immutable attribute compared by value, such as an alert threshold."""


@dataclass(eq=False)
class Entity(ABC, Generic[T]):
    """Record keyed by a store-assigned id.

    Two records with the same id are the same product even when a later
    fetch changed their quantity or prices.
    """

    id: T

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
