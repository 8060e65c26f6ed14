# =============================================================================
# tools/__init__.py
# =============================================================================
# This package contains the FastMCP tool wrappers.
#
# ARCHITECTURAL ROLE:
#   tools/ sits between the agent framework and the holiday core.  Each tool:
#     1. Calls one HolidayService operation from core/queries.py
#     2. Converts the result dataclass to a dict for JSON
#     3. Turns core errors into {"error": ..., "operation": ...} results
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT validate input or talk to Calendarific (that's core/)
#   - They do NOT know about Google ADK or the A2A server
#
# The docstrings are the tool contracts the LLM reads to decide WHEN to
# call each tool and WHAT to pass, so they are written for the model.
# =============================================================================
