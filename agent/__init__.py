# =============================================================================
# agent/__init__.py
# =============================================================================
# This package contains the Google ADK agent configuration.
#
# ARCHITECTURAL ROLE:
#   The agent/ layer is the coordinator.  It:
#     1. Receives the user's question ("Is today a holiday in Nigeria?")
#     2. Decides which holiday tool answers it
#     3. Calls that tool (via MCP)
#     4. Turns the tool output into a readable answer
#
# WHAT THE AGENT IS NOT:
#   - It is NOT the business logic (that's in core/)
#   - It is NOT the tool implementations (that's in tools/)
#
# The model runs through LiteLlm (HOLIDAY_AGENT_MODEL, an OpenRouter model
# string by default), so the provider can change without touching the agent.
# =============================================================================
