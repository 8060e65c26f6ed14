# =============================================================================
# main.py  —  Entry Point for the Global Holiday Assistant (terminal)
# =============================================================================
#
# HOW TO RUN:
#   uv run python main.py
#
# WHAT HAPPENS:
#   1. Creates the Google ADK agent (agent/holiday_agent.py)
#   2. Opens one conversation session
#   3. Sends each question you type to the agent
#   4. Shows which tools it called and prints its answer
#
# To serve the same agent over HTTP instead, run:  python -m a2a_server
# =============================================================================

import asyncio
import logging
import sys

from dotenv import load_dotenv

# LiteLlm reads OPENROUTER_API_KEY from the environment when the agent is
# created, so .env must be loaded first.
load_dotenv()

from agent.holiday_agent import HolidayAgentRunner, create_agent
from core.config import load_settings
from core.greeting import fallback_greeting


async def run_agent():
    """Run the holiday assistant interactively in the terminal."""
    settings = load_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s [agent] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )

    print("=" * 70)
    print("  GLOBAL HOLIDAY ASSISTANT")
    print(f"  Powered by Google ADK + {settings.agent_model} + FastMCP")
    print("=" * 70)
    print("\n🔧 Initializing agent...")

    runner = HolidayAgentRunner(create_agent(settings), user_id="cli_user")
    # One session for the whole run so follow-up questions keep context.
    session_id = await runner.new_session_id()

    print("✅ Agent initialized and ready!\n")
    print(fallback_greeting())
    print("   (Type 'quit' to exit)\n")
    print("-" * 70)

    while True:
        try:
            user_input = input("\n🧑 You: ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\n\n👋 Goodbye!")
            break

        if user_input.lower() in ("quit", "exit", "q"):
            print("\n👋 Goodbye!")
            break

        if not user_input:
            continue

        print("\n🤖 Agent is thinking...\n")
        print("-" * 70)

        reply = await runner.generate(user_input, session_id=session_id)

        for result in reply.tool_results:
            print(f"  🔧 Used tool: {result['toolName']}")

        print("-" * 70)
        if reply.text:
            print(f"\n🤖 Agent:\n\n{reply.text}")
        else:
            print("\n⚠️  No response generated. The agent may have encountered an error.")

        print("\n" + "=" * 70)


if __name__ == "__main__":
    asyncio.run(run_agent())
