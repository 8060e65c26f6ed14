# =============================================================================
# a2a_server/protocol.py  —  A2A JSON-RPC message shapes and helpers
# =============================================================================
#
# Incoming requests are JSON-RPC 2.0 envelopes whose params carry either a
# single `message` or a `messages` history.  Each message has a role and a
# list of parts; a part is text or arbitrary JSON data.
#
# Outgoing results are A2A "task" objects.  They are built as plain dicts
# since they go straight into a JSONResponse.
# =============================================================================

import json
import uuid
from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel, Field

JSONRPC_VERSION = "2.0"

INVALID_REQUEST = -32600
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603


class MessagePart(BaseModel):
    kind: str = "text"
    text: Optional[str] = None
    data: Optional[Any] = None


class A2AMessage(BaseModel):
    kind: str = "message"
    role: str = "user"
    parts: list[MessagePart] = Field(default_factory=list)
    messageId: Optional[str] = None
    taskId: Optional[str] = None


class A2AParams(BaseModel):
    message: Optional[A2AMessage] = None
    messages: Optional[list[A2AMessage]] = None
    contextId: Optional[str] = None
    taskId: Optional[str] = None
    metadata: Optional[dict[str, Any]] = None

    def message_list(self) -> list[A2AMessage]:
        """The conversation to hand to the agent: ``message`` wins over ``messages``."""
        if self.message is not None:
            return [self.message]
        return list(self.messages or [])


def new_id() -> str:
    return str(uuid.uuid4())


def now_iso() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


# =============================================================================
# Conversation helpers
# =============================================================================


def message_text(message: A2AMessage) -> str:
    """Flatten a message's parts to text; data parts are JSON-encoded."""
    chunks = []
    for part in message.parts:
        if part.kind == "text" and part.text:
            chunks.append(part.text)
        elif part.kind == "data" and part.data:
            chunks.append(json.dumps(part.data))
        else:
            chunks.append("")
    return "\n".join(chunks)


def is_new_conversation(params: A2AParams) -> bool:
    """Whether the client just opened a chat rather than asking something.

    True when there are no messages at all, when the only message is from
    the user, or when the message has no text.
    """
    message, messages = params.message, params.messages

    if not messages and message is None:
        return True
    if messages and len(messages) == 1 and messages[0].role == "user":
        return True
    if message is not None and not messages and message.role == "user":
        return True
    if message is not None and not message_text(message).strip():
        return True
    return False


# =============================================================================
# Response builders
# =============================================================================


def text_part(text: str) -> dict:
    return {"kind": "text", "text": text}


def agent_message(text: str, task_id: Optional[str] = None) -> dict:
    message = {
        "kind": "message",
        "role": "agent",
        "parts": [text_part(text)],
        "messageId": new_id(),
    }
    if task_id is not None:
        message["taskId"] = task_id
    return message


def history_entry(message: A2AMessage, task_id: str) -> dict:
    return {
        "kind": "message",
        "role": message.role,
        "parts": [part.model_dump(exclude_none=True) for part in message.parts],
        "messageId": message.messageId or new_id(),
        "taskId": message.taskId or task_id,
    }


def artifact(name: str, parts: list[dict]) -> dict:
    return {"artifactId": new_id(), "name": name, "parts": parts}


def completed_task(
    *,
    task_id: str,
    context_id: str,
    text: str,
    artifacts: list[dict],
    history: list[dict],
) -> dict:
    status_message = agent_message(text)
    return {
        "id": task_id,
        "contextId": context_id,
        "status": {
            "state": "completed",
            "timestamp": now_iso(),
            "message": status_message,
        },
        "artifacts": artifacts,
        "history": history,
        "kind": "task",
    }


def jsonrpc_result(request_id: Any, result: dict) -> dict:
    return {"jsonrpc": JSONRPC_VERSION, "id": request_id, "result": result}


def jsonrpc_error(request_id: Any, code: int, message: str, data: Optional[dict] = None) -> dict:
    error: dict[str, Any] = {"code": code, "message": message}
    if data is not None:
        error["data"] = data
    return {"jsonrpc": JSONRPC_VERSION, "id": request_id, "error": error}
