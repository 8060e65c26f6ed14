# =============================================================================
# core/__init__.py
# =============================================================================
# This package contains ALL business logic for the holiday assistant:
# the Calendarific client and its cache, the country directory, the
# multi-country aggregator and the query operations built on top of them.
#
# Nothing in this package imports Google ADK, FastMCP or FastAPI.  The agent,
# the tool server and the A2A server are wiring around it.
# =============================================================================
