# =============================================================================
# agent/holiday_agent.py  —  Google ADK Agent Configuration
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Creates the Google ADK agent that answers holiday questions, and a small
#   runner around it that both the CLI (main.py) and the A2A server use.
#
# HOW IT FITS TOGETHER:
#
#   ┌──────────────────────────────────────────────────────────────────┐
#   │                       Google ADK Agent                           │
#   │  System prompt ───▶ LLM (LiteLlm) ───▶ MCP tool connection        │
#   └──────────────────────────────────────────────────────────────────┘
#                                                      │ stdio
#                                                      ▼
#                                          ┌──────────────────────────┐
#                                          │  FastMCP Server          │
#                                          │  (tools/mcp_server)      │
#                                          │  • get_holidays_by_country│
#                                          │  • get_holidays_for_date │
#                                          │  • search_holidays_by_name│
#                                          │  • check_today_holidays  │
#                                          │  • validate_country_code │
#                                          │  • get_supported_countries│
#                                          └──────────────────────────┘
#                                                      │
#                                                      ▼
#                                          ┌──────────────────────────┐
#                                          │  core/ (pure Python)     │
#                                          └──────────────────────────┘
#
# MCP CONNECTION:
#   ADK starts the tool server as a subprocess ("uv run" so it gets the
#   project's .venv) and talks to it over stdin/stdout.
# =============================================================================

import logging
import os
import uuid
from dataclasses import dataclass, field
from typing import Any, Optional, Sequence

from google.adk.agents import Agent
from google.adk.models.lite_llm import LiteLlm
from google.adk.runners import Runner
from google.adk.sessions import InMemorySessionService
from google.adk.tools.mcp_tool.mcp_toolset import MCPToolset, StdioServerParameters
from google.genai import types

from agent.prompt import get_holiday_assistant_prompt
from core.config import Settings, load_settings

logger = logging.getLogger(__name__)

APP_NAME = "global_holiday_agent"
AGENT_NAME = "holiday_agent"

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def create_agent(settings: Optional[Settings] = None) -> Agent:
    """Create and configure the holiday assistant agent.

    Args:
        settings: Runtime settings; read from the environment when omitted.
                  Only ``agent_model`` is used here.  The tool subprocess
                  reads its own settings (API key, cache) from the same
                  environment.

    Returns:
        A configured Google ADK Agent instance.
    """
    settings = settings or load_settings()

    # Run the server as a module from the project root so "core" resolves.
    mcp_tools = MCPToolset(
        connection_params=StdioServerParameters(
            command="uv",
            args=["run", "python", "-m", "tools.mcp_server"],
            cwd=PROJECT_ROOT,
        ),
    )

    return Agent(
        name=AGENT_NAME,
        model=LiteLlm(model=settings.agent_model),
        instruction=get_holiday_assistant_prompt(),
        tools=[mcp_tools],
    )


# =============================================================================
# Runner
# =============================================================================
# ADK's Runner streams Events.  Callers here just want "the answer" plus the
# tool results that produced it, so HolidayAgentRunner drains the stream and
# returns an AgentReply.
# =============================================================================


@dataclass
class AgentReply:
    text: str
    tool_results: list[dict[str, Any]] = field(default_factory=list)


class HolidayAgentRunner:
    """Runs the agent one request at a time, each in a fresh session."""

    def __init__(self, agent: Optional[Agent] = None, *, user_id: str = "a2a_user"):
        self.agent = agent or create_agent()
        self.user_id = user_id
        self.session_service = InMemorySessionService()
        self.runner = Runner(
            agent=self.agent,
            app_name=APP_NAME,
            session_service=self.session_service,
        )

    async def new_session_id(self) -> str:
        session = await self.session_service.create_session(
            app_name=APP_NAME,
            user_id=self.user_id,
            session_id=str(uuid.uuid4()),
        )
        return session.id

    async def generate(self, messages: str | Sequence[str], session_id: Optional[str] = None) -> AgentReply:
        """Send ``messages`` as one user turn and collect the final reply.

        A list of messages is joined with newlines.  Without ``session_id``
        a new session is created, so the call has no memory of earlier ones.
        """
        if not isinstance(messages, str):
            messages = "\n".join(messages)
        session_id = session_id or await self.new_session_id()

        content = types.Content(role="user", parts=[types.Part(text=messages)])

        text = ""
        tool_results: list[dict[str, Any]] = []
        async for event in self.runner.run_async(
            user_id=self.user_id,
            session_id=session_id,
            new_message=content,
        ):
            if not (event.content and event.content.parts):
                continue
            for part in event.content.parts:
                if part.function_call:
                    logger.info("Agent calling tool: %s", part.function_call.name)
                if part.function_response:
                    tool_results.append(
                        {
                            "toolName": part.function_response.name,
                            "result": part.function_response.response,
                        }
                    )
                if part.text and event.is_final_response():
                    text = part.text

        return AgentReply(text=text, tool_results=tool_results)
