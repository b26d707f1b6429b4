"""Abilities an actor can use."""

from screenplay.abilities.ability import Ability, UsesAbilities
from screenplay.abilities.call_an_api import CallAnApi, RequestConfig

__all__ = [
    "Ability",
    "CallAnApi",
    "RequestConfig",
    "UsesAbilities",
]
