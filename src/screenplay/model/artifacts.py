"""Concrete artifact variants and the registry that names them on the wire."""

import base64
import json
from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any, ClassVar, TypeVar

import httpx
from pydantic import BaseModel, ConfigDict, Field

from screenplay.model.artifact import Artifact

T = TypeVar("T")


def _encode(value: bytes) -> str:
    return base64.b64encode(value).decode("ascii")


class Photo(Artifact):
    """A binary image, typically a PNG screenshot."""

    artifact_type: ClassVar[str] = "Photo"

    @classmethod
    def from_bytes(cls, value: bytes) -> "Photo":
        return cls(_encode(value))

    def map(self, fn: Callable[[bytes], T]) -> T:
        return fn(base64.b64decode(self.base64_encoded_value))


class TextData(Artifact):
    """UTF-8 text, such as captured log output."""

    artifact_type: ClassVar[str] = "TextData"

    @classmethod
    def from_text(cls, value: str) -> "TextData":
        return cls(_encode(value.encode("utf-8")))

    def map(self, fn: Callable[[str], T]) -> T:
        return fn(base64.b64decode(self.base64_encoded_value).decode("utf-8"))


class JSONData(Artifact):
    """Any JSON-serialisable value."""

    artifact_type: ClassVar[str] = "JSONData"

    @classmethod
    def from_value(cls, value: Any) -> "JSONData":
        return cls(_encode(json.dumps(value).encode("utf-8")))

    def map(self, fn: Callable[[Any], T]) -> T:
        return fn(json.loads(base64.b64decode(self.base64_encoded_value)))


class RecordedRequest(BaseModel):
    """The request half of a HTTP exchange."""

    model_config = ConfigDict(frozen=True)

    method: str
    url: str
    headers: dict[str, str] = Field(default_factory=dict)
    content: str = ""


class RecordedResponse(BaseModel):
    """The response half of a HTTP exchange."""

    model_config = ConfigDict(frozen=True)

    status: int
    headers: dict[str, str] = Field(default_factory=dict)
    content: str = ""


class HttpExchange(BaseModel):
    """A HTTP request together with the response it received."""

    model_config = ConfigDict(frozen=True)

    request: RecordedRequest
    response: RecordedResponse


class HTTPRequestResponse(Artifact):
    """A dump of one HTTP request/response exchange."""

    artifact_type: ClassVar[str] = "HTTPRequestResponse"

    @classmethod
    def from_exchange(cls, exchange: HttpExchange) -> "HTTPRequestResponse":
        return cls(_encode(exchange.model_dump_json().encode("utf-8")))

    @classmethod
    def from_response(cls, response: httpx.Response) -> "HTTPRequestResponse":
        """Record a response, and the request that produced it, as returned by httpx.

        A streamed request body that was never read is recorded as empty.
        """
        request = response.request
        try:
            request_content = request.content.decode("utf-8", errors="replace")
        except httpx.RequestNotRead:
            request_content = ""

        return cls.from_exchange(
            HttpExchange(
                request=RecordedRequest(
                    method=request.method,
                    url=str(request.url),
                    headers=dict(request.headers),
                    content=request_content,
                ),
                response=RecordedResponse(
                    status=response.status_code,
                    headers=dict(response.headers),
                    content=response.text,
                ),
            )
        )

    def map(self, fn: Callable[[HttpExchange], T]) -> T:
        return fn(HttpExchange.model_validate_json(base64.b64decode(self.base64_encoded_value)))


class AssertionReportDiff(BaseModel):
    """Expected and actual values of a failed assertion."""

    model_config = ConfigDict(frozen=True)

    expected: str
    actual: str


class AssertionReport(Artifact):
    """Details of a failed assertion, for the reporting layer."""

    artifact_type: ClassVar[str] = "AssertionReport"

    @classmethod
    def from_diff(cls, expected: str, actual: str) -> "AssertionReport":
        diff = AssertionReportDiff(expected=expected, actual=actual)
        return cls(_encode(diff.model_dump_json().encode("utf-8")))

    def map(self, fn: Callable[[AssertionReportDiff], T]) -> T:
        return fn(AssertionReportDiff.model_validate_json(base64.b64decode(self.base64_encoded_value)))


# Closed set of variants; nothing registers after import.
ARTIFACT_TYPES: Mapping[str, type[Artifact]] = MappingProxyType(
    {
        Photo.artifact_type: Photo,
        TextData.artifact_type: TextData,
        JSONData.artifact_type: JSONData,
        HTTPRequestResponse.artifact_type: HTTPRequestResponse,
        AssertionReport.artifact_type: AssertionReport,
    }
)
