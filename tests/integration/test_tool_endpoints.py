import httpx

from tests.fixtures.responses import CHAT_COMPLETION_RESPONSE


def test_tool_call_without_api_key_fails(configured_app, chat_arguments):
    """Given no API key, when a tool is called, it should return 401 Unauthorized."""
    response = configured_app.post("/tools/web_search_chat_completion", json=chat_arguments)
    assert response.status_code == 401


def test_health_check_is_public(configured_app):
    response = configured_app.get("/")
    assert response.status_code == 200


def test_list_tools_endpoint(configured_app, auth_headers):
    response = configured_app.get("/tools", headers=auth_headers)

    assert response.status_code == 200
    names = [tool["name"] for tool in response.json()["tools"]]
    assert names == ["web_search_chat_completion", "web_search_responses"]


def test_chat_completion_call_returns_remote_body(configured_app, auth_headers, chat_arguments, recording_transport):
    """Given valid arguments, the remote body is returned verbatim under 'content'."""
    response = configured_app.post(
        "/tools/web_search_chat_completion",
        json=chat_arguments,
        headers=auth_headers,
    )

    assert response.status_code == 200
    assert response.json() == {"content": CHAT_COMPLETION_RESPONSE}
    assert recording_transport.last_body["messages"] == chat_arguments["messages"]


def test_responses_call_forwards_reshaped_input(configured_app, auth_headers, responses_arguments, recording_transport):
    response = configured_app.post(
        "/tools/web_search_responses",
        json=responses_arguments,
        headers=auth_headers,
    )

    assert response.status_code == 200
    assert recording_transport.requests[-1].url.path == "/v1/responses"
    assert recording_transport.last_body["input"] == "And tomorrow?"
    assert recording_transport.last_body["instructions"] == "Be concise"


def test_validation_error_lists_all_violations(configured_app, auth_headers, recording_transport):
    response = configured_app.post(
        "/tools/web_search_chat_completion",
        json={"web_search_options": {"search_context_size": "huge"}},
        headers=auth_headers,
    )

    assert response.status_code == 422
    payload = response.json()
    assert payload["error"] == "validation_error"
    fields = {violation["field"] for violation in payload["violations"]}
    assert {"model", "messages", "web_search_options.search_context_size"} <= fields
    assert recording_transport.requests == []


def test_unknown_tool_returns_404(configured_app, auth_headers):
    response = configured_app.post("/tools/delete_everything", json={}, headers=auth_headers)

    assert response.status_code == 404
    assert response.json() == {"error": "unknown_operation", "message": "Unknown tool: delete_everything"}


def test_remote_error_returns_502(configured_app, auth_headers, chat_arguments, recording_transport):
    recording_transport.status_code = 429
    recording_transport.text = '{"error":"rate_limited"}'

    response = configured_app.post(
        "/tools/web_search_chat_completion",
        json=chat_arguments,
        headers=auth_headers,
    )

    assert response.status_code == 502
    payload = response.json()
    assert payload["error"] == "remote_api_error"
    assert payload["status_code"] == 429
    assert "Traceback" not in payload["message"]


def test_transport_error_returns_504(configured_app, auth_headers, chat_arguments, recording_transport):
    recording_transport.exception = httpx.ConnectError("name resolution failed")

    response = configured_app.post(
        "/tools/web_search_chat_completion",
        json=chat_arguments,
        headers=auth_headers,
    )

    assert response.status_code == 504
    assert response.json()["error"] == "transport_error"
