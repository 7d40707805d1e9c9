"""Fake Cachet server backed by httpx.MockTransport."""

import json
from dataclasses import dataclass, field
from typing import Any

import httpx

from cachet_client import CachetClient


API_URL = "https://status.example.com/api/v1"
API_TOKEN = "rRpHYVhsNnG12X3N4ufr"  # noqa: S105


@dataclass
class QueuedResponse:
    """A canned response returned by the fake server."""

    status_code: int = 200
    json_body: Any = None
    content: bytes | None = None

    def build(self) -> httpx.Response:
        if self.content is not None:
            return httpx.Response(self.status_code, content=self.content)
        if self.json_body is None:
            return httpx.Response(self.status_code)
        return httpx.Response(self.status_code, json=self.json_body)


@dataclass
class FakeCachet:
    """Records requests and replays queued responses.

    When the queue is empty the default response is returned.
    """

    default: QueuedResponse = field(default_factory=QueuedResponse)
    queue: list[QueuedResponse] = field(default_factory=list)
    requests: list[httpx.Request] = field(default_factory=list)
    raise_error: Exception | None = None

    def respond(
        self,
        status_code: int = 200,
        json_body: Any = None,
        content: bytes | None = None,
    ) -> "FakeCachet":
        """Queue one response."""
        self.queue.append(QueuedResponse(status_code, json_body, content))
        return self

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.raise_error is not None:
            raise self.raise_error
        if self.queue:
            return self.queue.pop(0).build()
        return self.default.build()

    def http_client(self) -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(self.handler))

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_body(self) -> Any:
        """Decode the JSON body of the most recent request."""
        return json.loads(self.last_request.content)


def envelope(data: Any) -> dict[str, Any]:
    """Wrap a payload the way the API does."""
    return {"data": data}


def make_client(fake: FakeCachet, **kwargs: Any) -> CachetClient:
    """Create a client wired to a fake server."""
    return CachetClient(API_URL, API_TOKEN, http_client=fake.http_client(), **kwargs)
