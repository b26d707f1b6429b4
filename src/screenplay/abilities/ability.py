"""Ability contracts consumed from the actor layer."""

from typing import Protocol, TypeVar

A = TypeVar("A", bound="Ability")


class Ability:
    """Marker base class for anything an actor can be given."""


class UsesAbilities(Protocol):
    """An actor-like object that can hand out the abilities it holds.

    Implementations are expected to raise when the requested ability
    has not been given to the actor.
    """

    def ability_to(self, ability_type: type[A]) -> A: ...
