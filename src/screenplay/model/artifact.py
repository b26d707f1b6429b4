"""Base artifact: an immutable, base64-encoded payload with a JSON envelope.

Artifacts carry things produced during a scenario (screenshots, logs,
HTTP request/response dumps) between the parts of a test run. The payload
stays encoded until a variant's `map` decodes it, so artifacts can be
passed around and serialised without knowing what they contain.

Wire format:

    {"type": "<registered variant name>", "base64EncodedValue": "<base64>"}
"""

import re
from abc import abstractmethod
from collections.abc import Callable, Mapping
from typing import Any, ClassVar, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

from screenplay.errors import LogicError

T = TypeVar("T")

BASE64_PATTERN = re.compile(r"([A-Za-z0-9+/]{4})*([A-Za-z0-9+/]{4}|[A-Za-z0-9+/]{3}=|[A-Za-z0-9+/]{2}==)")


class Artifact(BaseModel):
    """Abstract artifact; concrete variants live in screenplay.model.artifacts."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    # Wire discriminator, declared by every registered variant
    artifact_type: ClassVar[str]

    base64_encoded_value: str = Field(alias="base64EncodedValue")

    def __init__(self, base64_encoded_value: str | None = None, /, **data: Any):
        if base64_encoded_value is not None:
            data["base64EncodedValue"] = base64_encoded_value
        super().__init__(**data)

    @field_validator("base64_encoded_value")
    @classmethod
    def _looks_like_base64(cls, value: str) -> str:
        if not BASE64_PATTERN.fullmatch(value):
            raise ValueError("must be base64-encoded")
        return value

    @staticmethod
    def of_type(name: Any) -> "type[Artifact] | None":
        """Look up a registered artifact variant by its wire name."""
        from screenplay.model.artifacts import ARTIFACT_TYPES

        if not isinstance(name, str):
            return None
        return ARTIFACT_TYPES.get(name)

    @staticmethod
    def from_json(envelope: Mapping[str, Any]) -> "Artifact":
        """
        Rebuild an artifact from its JSON envelope.

        Raises LogicError when the envelope names a type nobody registered,
        which usually means the writer and the reader disagree on versions.
        """
        from screenplay.model.artifacts import ARTIFACT_TYPES

        type_name = envelope.get("type")
        artifact_type = Artifact.of_type(type_name)

        if artifact_type is None:
            raise LogicError(
                "Couldn't de-serialise artifact of an unknown type. "
                f"{type_name} is not one of the recognised types: {', '.join(ARTIFACT_TYPES)}"
            )

        return artifact_type(base64EncodedValue=envelope.get("base64EncodedValue"))

    @abstractmethod
    def map(self, fn: Callable[[Any], T]) -> T:
        """Decode the payload and apply `fn` to the decoded value."""

    def to_json(self) -> dict[str, str]:
        return {
            "type": self.artifact_type,
            "base64EncodedValue": self.base64_encoded_value,
        }
