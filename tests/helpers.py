import json

import httpx


class RecordingTransport:
    """
    httpx.MockTransport wrapper that records every request and replies with a
    fixed response, or raises a given exception.
    """

    def __init__(self, status_code=200, json_body=None, text=None, exception=None):
        self.status_code = status_code
        self.json_body = json_body
        self.text = text
        self.exception = exception
        self.requests = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exception is not None:
            raise self.exception
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text)
        return httpx.Response(self.status_code, json=self.json_body if self.json_body is not None else {})

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))

    @property
    def last_body(self) -> dict:
        assert self.requests, "No request was sent"
        return json.loads(self.requests[-1].content)


def violation_paths(error) -> list:
    """Field paths of a ValidationError's violations."""
    return [path for path, _ in error.violations]
