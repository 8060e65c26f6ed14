# =============================================================================
# a2a_server/app.py  —  FastAPI application exposing the agent over A2A
# =============================================================================
#
# ENDPOINTS:
#   POST /a2a/agent/{agent_id}     JSON-RPC 2.0 request -> A2A task
#   GET  /.well-known/agent.json   agent card for discovery
#
# ERRORS (JSON-RPC error objects, never raised to the client as HTML):
#   400 / -32600   jsonrpc is not "2.0" or the id is missing
#   404 / -32602   unknown agent id
#   500 / -32603   anything else; the message goes in error.data.details
#
# AGENTS:
#   Any object with ``async generate(text) -> reply`` where the reply has
#   ``text`` and ``tool_results``.  In production that is
#   agent.holiday_agent.HolidayAgentRunner.
# =============================================================================

import logging
from datetime import date
from typing import Any, Callable, Mapping, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from a2a_server.greeting import generate_holiday_greeting
from a2a_server.protocol import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    INVALID_REQUEST,
    A2AParams,
    agent_message,
    artifact,
    completed_task,
    history_entry,
    is_new_conversation,
    jsonrpc_error,
    jsonrpc_result,
    message_text,
    new_id,
    text_part,
)
from core.queries import HolidayService

logger = logging.getLogger(__name__)

DEFAULT_AGENT_ID = "holidayAgent"
AGENT_VERSION = "1.0.0"


def build_agent_card(base_url: str, agent_id: str = DEFAULT_AGENT_ID) -> dict:
    return {
        "name": "Global Holiday Agent",
        "description": (
            "Your AI assistant for discovering holidays and observances "
            "from over 230 countries worldwide."
        ),
        "version": AGENT_VERSION,
        "serviceUrl": f"{base_url.rstrip('/')}/a2a/agent/{agent_id}",
        "authentication": {"schemes": []},
        "capabilities": {
            "streaming": False,
            "pushNotifications": False,
            "proactiveMessages": True,
        },
        "skills": [
            {
                "name": "get-holidays",
                "description": "Get holidays for any country and date",
                "examples": [
                    "What holidays does Nigeria have?",
                    "Is today a holiday in the US?",
                    "When is Mother's Day?",
                ],
            }
        ],
    }


def create_app(
    agents: Mapping[str, Any],
    service: Optional[HolidayService] = None,
    *,
    today: Callable[[], date] = date.today,
) -> FastAPI:
    """Build the A2A application.

    Args:
        agents: agent id -> agent.  The id is the last path segment of the
                JSON-RPC route.
        service: used for the data-driven greeting when the agent can't
                 produce one.
        today: date provider for greetings.
    """
    app = FastAPI(title="Global Holiday Agent", version=AGENT_VERSION)

    @app.get("/.well-known/agent.json")
    async def agent_card(request: Request):
        return build_agent_card(str(request.base_url))

    @app.post("/a2a/agent/{agent_id}")
    async def a2a_agent(agent_id: str, request: Request):
        try:
            body = await request.json()
            if not isinstance(body, dict):
                body = {}
            request_id = body.get("id")

            if body.get("jsonrpc") != "2.0" or request_id in (None, ""):
                return JSONResponse(
                    jsonrpc_error(
                        request_id if request_id != "" else None,
                        INVALID_REQUEST,
                        'Invalid Request: jsonrpc must be "2.0" and id is required',
                    ),
                    status_code=400,
                )

            agent = agents.get(agent_id)
            if agent is None:
                return JSONResponse(
                    jsonrpc_error(request_id, INVALID_PARAMS, f"Agent '{agent_id}' not found"),
                    status_code=404,
                )

            params = A2AParams.model_validate(body.get("params") or {})
            task_id = params.taskId or new_id()
            context_id = params.contextId or new_id()

            if is_new_conversation(params):
                logger.info("New conversation detected - sending proactive greeting")
                greeting = await generate_holiday_greeting(agent, service, today())
                task = completed_task(
                    task_id=task_id,
                    context_id=context_id,
                    text=greeting,
                    artifacts=[artifact("HolidayGreeting", [text_part(greeting)])],
                    history=[agent_message(greeting, task_id)],
                )
                return jsonrpc_result(request_id, task)

            messages = params.message_list()
            reply = await agent.generate([message_text(m) for m in messages])
            text = reply.text or ""

            artifacts = [artifact(f"{agent_id}Response", [text_part(text)])]
            if reply.tool_results:
                artifacts.append(
                    artifact("ToolResults", [{"kind": "data", "data": r} for r in reply.tool_results])
                )

            history = [history_entry(m, task_id) for m in messages]
            history.append(agent_message(text, task_id))

            task = completed_task(
                task_id=task_id,
                context_id=context_id,
                text=text,
                artifacts=artifacts,
                history=history,
            )
            return jsonrpc_result(request_id, task)

        except Exception as exc:
            logger.exception("A2A request failed")
            return JSONResponse(
                jsonrpc_error(
                    None,
                    INTERNAL_ERROR,
                    "Internal error",
                    data={"details": str(exc) or "Unknown error occurred"},
                ),
                status_code=500,
            )

    return app
