"""Screenplay-style test automation: HTTP API ability and serialisable artifacts."""

from screenplay.abilities import Ability, CallAnApi, RequestConfig, UsesAbilities
from screenplay.errors import LogicError, ScreenplayError, TestCompromisedError
from screenplay.model import Artifact, ScenarioParameters

__all__ = [
    "Ability",
    "Artifact",
    "CallAnApi",
    "LogicError",
    "RequestConfig",
    "ScenarioParameters",
    "ScreenplayError",
    "TestCompromisedError",
    "UsesAbilities",
]
