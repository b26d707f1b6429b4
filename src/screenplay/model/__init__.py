"""Value objects shared across a test run."""

from screenplay.model.artifact import Artifact
from screenplay.model.artifacts import (
    ARTIFACT_TYPES,
    AssertionReport,
    AssertionReportDiff,
    HttpExchange,
    HTTPRequestResponse,
    JSONData,
    Photo,
    RecordedRequest,
    RecordedResponse,
    TextData,
)
from screenplay.model.scenario_parameters import ScenarioParameters

__all__ = [
    # Artifacts
    "ARTIFACT_TYPES",
    "Artifact",
    "AssertionReport",
    "AssertionReportDiff",
    "HTTPRequestResponse",
    "HttpExchange",
    "JSONData",
    "Photo",
    "RecordedRequest",
    "RecordedResponse",
    "TextData",
    # Scenarios
    "ScenarioParameters",
]
