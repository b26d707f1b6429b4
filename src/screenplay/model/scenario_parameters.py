"""Parameters of a single example in a parametrised scenario."""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ScenarioParameters(BaseModel):
    """Name, optional description and parameter values of one scenario example."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    description: str | None = None
    values: dict[str, str]

    @classmethod
    def from_json(cls, o: Mapping[str, Any]) -> "ScenarioParameters":
        return cls(
            name=o.get("name"),
            description=o.get("description") or None,
            values=o.get("values"),
        )

    def to_json(self) -> dict[str, Any]:
        return self.model_dump()
