# =============================================================================
# a2a_server/__init__.py
# =============================================================================
# HTTP surface of the holiday agent: a JSON-RPC 2.0 route speaking the A2A
# task format, an agent card for discovery, and the proactive greeting sent
# when a conversation opens without a question.
#
#   python -m a2a_server      (serves on A2A_HOST:A2A_PORT)
# =============================================================================
