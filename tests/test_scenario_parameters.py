"""Tests for ScenarioParameters."""

import pytest
from pydantic import ValidationError

from screenplay.model import ScenarioParameters


class TestScenarioParameters:
    """Tests for scenario example parameters."""

    def test_round_trip(self) -> None:
        """Parameters survive serialisation unchanged."""
        parameters = ScenarioParameters(
            name="Premium customer",
            description="Gets free delivery",
            values={"plan": "premium", "delivery": "free"},
        )

        assert ScenarioParameters.from_json(parameters.to_json()) == parameters

    def test_description_is_optional(self) -> None:
        """A blank description is treated as absent."""
        parameters = ScenarioParameters.from_json({"name": "Guest", "description": "", "values": {}})

        assert parameters.description is None
        assert parameters.to_json() == {"name": "Guest", "description": None, "values": {}}

    def test_name_is_required(self) -> None:
        with pytest.raises(ValidationError):
            ScenarioParameters.from_json({"values": {"plan": "basic"}})

    def test_values_are_required(self) -> None:
        with pytest.raises(ValidationError):
            ScenarioParameters.from_json({"name": "Guest"})
