"""
Tests for the A2A JSON-RPC endpoint and the agent card.
The agent is an AsyncMock; the greeting fallback uses the fake-backed service.
"""

import json
from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from a2a_server.app import create_app
from a2a_server.protocol import A2AMessage, A2AParams, MessagePart, is_new_conversation, message_text
from core.queries import HolidayService
from conftest import TODAY


def _reply(text="Here are Nigeria's holidays.", tool_results=None):
    return SimpleNamespace(text=text, tool_results=tool_results or [])


def _rpc(params=None, request_id="req-1"):
    body = {"jsonrpc": "2.0", "id": request_id, "method": "message/send"}
    if params is not None:
        body["params"] = params
    return body


def _message(role, text, **extra):
    return {"kind": "message", "role": role, "parts": [{"kind": "text", "text": text}], **extra}


@pytest.fixture
def agent():
    return SimpleNamespace(generate=AsyncMock(return_value=_reply()))


@pytest.fixture
def test_client(agent, service: HolidayService):
    app = create_app({"holidayAgent": agent}, service, today=lambda: TODAY)
    return TestClient(app)


class TestAgentCard:
    def test_agent_card(self, test_client: TestClient):
        response = test_client.get("/.well-known/agent.json")

        assert response.status_code == 200
        card = response.json()
        assert card["name"] == "Global Holiday Agent"
        assert card["version"] == "1.0.0"
        assert card["serviceUrl"] == "http://testserver/a2a/agent/holidayAgent"
        assert card["capabilities"] == {"streaming": False, "pushNotifications": False, "proactiveMessages": True}
        assert card["skills"][0]["name"] == "get-holidays"


class TestRequestValidation:
    def test_wrong_jsonrpc_version(self, test_client: TestClient):
        response = test_client.post("/a2a/agent/holidayAgent", json={"jsonrpc": "1.0", "id": "req-1"})

        assert response.status_code == 400
        body = response.json()
        assert body["id"] == "req-1"
        assert body["error"]["code"] == -32600

    def test_missing_id(self, test_client: TestClient):
        response = test_client.post("/a2a/agent/holidayAgent", json={"jsonrpc": "2.0"})

        assert response.status_code == 400
        assert response.json()["id"] is None
        assert response.json()["error"]["code"] == -32600

    def test_unknown_agent(self, test_client: TestClient):
        response = test_client.post("/a2a/agent/weatherAgent", json=_rpc())

        assert response.status_code == 404
        error = response.json()["error"]
        assert error["code"] == -32602
        assert error["message"] == "Agent 'weatherAgent' not found"

    def test_invalid_json_is_an_internal_error(self, test_client: TestClient):
        response = test_client.post(
            "/a2a/agent/holidayAgent",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 500
        body = response.json()
        assert body["id"] is None
        assert body["error"]["code"] == -32603
        assert body["error"]["data"]["details"]


class TestGreeting:
    def test_empty_params_get_a_greeting(self, test_client: TestClient, agent):
        agent.generate.return_value = _reply("Merry Christmas to all!")

        response = test_client.post("/a2a/agent/holidayAgent", json=_rpc())

        assert response.status_code == 200
        result = response.json()["result"]
        assert result["kind"] == "task"
        assert result["status"]["state"] == "completed"
        assert result["artifacts"][0]["name"] == "HolidayGreeting"
        text = result["artifacts"][0]["parts"][0]["text"]
        assert "Today is **25th December, 2025**" in text
        assert "Merry Christmas to all!" in text
        assert result["history"][0]["role"] == "agent"
        assert result["history"][0]["taskId"] == result["id"]

    def test_lone_user_message_gets_a_greeting(self, test_client: TestClient):
        params = {"message": _message("user", "hello"), "taskId": "task-9", "contextId": "ctx-9"}

        result = test_client.post("/a2a/agent/holidayAgent", json=_rpc(params)).json()["result"]

        assert result["artifacts"][0]["name"] == "HolidayGreeting"
        assert (result["id"], result["contextId"]) == ("task-9", "ctx-9")

    def test_greeting_falls_back_to_today_data(self, test_client: TestClient, agent):
        agent.generate.side_effect = RuntimeError("model unavailable")

        response = test_client.post("/a2a/agent/holidayAgent", json=_rpc())

        assert response.status_code == 200
        text = response.json()["result"]["artifacts"][0]["parts"][0]["text"]
        assert "Christmas Day" in text


class TestConversation:
    def test_history_is_sent_to_the_agent(self, test_client: TestClient, agent):
        agent.generate.return_value = _reply(
            "Nigeria has 3 holidays.",
            tool_results=[{"toolName": "get_holidays_by_country", "result": {"count": 3}}],
        )
        params = {
            "messages": [
                _message("user", "Hi", messageId="m1"),
                _message("agent", "Hello! Ask me about holidays."),
                _message("user", "Holidays in Nigeria?"),
            ],
            "contextId": "ctx-1",
        }

        response = test_client.post("/a2a/agent/holidayAgent", json=_rpc(params))

        assert response.status_code == 200
        body = response.json()
        assert body["id"] == "req-1"
        result = body["result"]
        agent.generate.assert_awaited_once_with(["Hi", "Hello! Ask me about holidays.", "Holidays in Nigeria?"])

        assert result["contextId"] == "ctx-1"
        assert result["status"]["message"]["parts"][0]["text"] == "Nigeria has 3 holidays."
        assert [a["name"] for a in result["artifacts"]] == ["holidayAgentResponse", "ToolResults"]
        assert result["artifacts"][1]["parts"] == [
            {"kind": "data", "data": {"toolName": "get_holidays_by_country", "result": {"count": 3}}}
        ]

        history = result["history"]
        assert [m["role"] for m in history] == ["user", "agent", "user", "agent"]
        assert history[0]["messageId"] == "m1"
        assert history[-1]["parts"][0]["text"] == "Nigeria has 3 holidays."

    def test_no_tool_results_means_one_artifact(self, test_client: TestClient):
        params = {"messages": [_message("user", "Hi"), _message("user", "Is today a holiday?")]}

        result = test_client.post("/a2a/agent/holidayAgent", json=_rpc(params)).json()["result"]

        assert [a["name"] for a in result["artifacts"]] == ["holidayAgentResponse"]

    def test_agent_failure_is_an_internal_error(self, test_client: TestClient, agent):
        agent.generate.side_effect = RuntimeError("LLM quota exceeded")
        params = {"messages": [_message("user", "Hi"), _message("user", "Holidays in Nigeria?")]}

        response = test_client.post("/a2a/agent/holidayAgent", json=_rpc(params))

        assert response.status_code == 500
        error = response.json()["error"]
        assert error["code"] == -32603
        assert error["message"] == "Internal error"
        assert error["data"] == {"details": "LLM quota exceeded"}


class TestProtocolHelpers:
    def test_data_parts_are_json_encoded(self):
        message = A2AMessage(
            role="user",
            parts=[MessagePart(kind="text", text="Check these:"), MessagePart(kind="data", data={"country": "NG"})],
        )

        assert message_text(message) == 'Check these:\n' + json.dumps({"country": "NG"})

    @pytest.mark.parametrize("params, expected", [
        ({}, True),
        ({"messages": [_message("user", "hi")]}, True),
        ({"messages": [], "message": _message("user", "hi")}, True),
        ({"message": _message("user", "hi")}, True),
        ({"message": _message("agent", "   ")}, True),
        ({"message": _message("agent", "hi")}, False),
        ({"messages": [_message("user", "hi"), _message("user", "more")]}, False),
        ({"messages": [_message("agent", "hi")]}, False),
    ])
    def test_new_conversation_detection(self, params, expected):
        assert is_new_conversation(A2AParams.model_validate(params)) is expected
