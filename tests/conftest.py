import pytest
from unittest.mock import AsyncMock

from tests.fixtures.responses import CHAT_COMPLETION_RESPONSE, SAMPLE_CONVERSATION
from tests.helpers import RecordingTransport


@pytest.fixture
def sample_conversation():
    """The four-message conversation used across tests (fresh copy)."""
    return [dict(message) for message in SAMPLE_CONVERSATION]


@pytest.fixture
def chat_arguments(sample_conversation):
    """Valid web_search_chat_completion arguments."""
    return {
        "model": "gpt-4o-search-preview",
        "messages": sample_conversation,
    }


@pytest.fixture
def responses_arguments(sample_conversation):
    """Valid web_search_responses arguments with message-list input."""
    return {
        "model": "gpt-4o",
        "tools": [{"type": "web_search_preview"}],
        "input": sample_conversation,
    }


@pytest.fixture
def mock_forwarder():
    """Forwarder stand-in whose forward() returns a canned chat completion."""
    forwarder = AsyncMock()
    forwarder.forward = AsyncMock(return_value=CHAT_COMPLETION_RESPONSE)
    return forwarder


@pytest.fixture
def recording_transport():
    """Transport answering 200 with a chat completion body."""
    return RecordingTransport(json_body=CHAT_COMPLETION_RESPONSE)


@pytest.fixture
def dispatcher_factory():
    """Build a real dispatcher around a RecordingTransport."""
    from services.dispatcher import OperationDispatcher
    from services.forwarder import RequestForwarder

    def _build(transport, api_key="test-openai-key"):
        return OperationDispatcher(RequestForwarder(api_key, client=transport.client()))

    return _build


@pytest.fixture
def auth_headers():
    """Authentication headers for API requests."""
    return {"X-API-Key": "test-key"}


@pytest.fixture
def configured_app(monkeypatch, recording_transport, dispatcher_factory):
    """HTTP app with auth enabled and the dispatcher wired to the recording transport."""
    from fastapi.testclient import TestClient
    from auth import APIKeyMiddleware
    from main import create_app
    from routes.tools import get_dispatcher

    monkeypatch.setattr(APIKeyMiddleware, "API_KEY", "test-key")

    app = create_app()
    app.dependency_overrides[get_dispatcher] = lambda: dispatcher_factory(recording_transport)

    with TestClient(app) as client:
        yield client
