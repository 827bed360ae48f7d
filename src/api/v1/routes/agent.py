"""
API Routes: Agent Envelope (JSON-RPC 2.0)

Translates a JSON-RPC message envelope into an agent call and wraps the
agent's reply into a completed task.
"""

import json
import logging
import uuid
from datetime import datetime, timezone
from typing import Any, Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from api.v1.dependencies import get_agent_registry
from api.v1.schemas import IncomingMessage, JsonRpcRequest
from application.ports.agent import AgentMessage, IAgent

logger = logging.getLogger(__name__)


INVALID_REQUEST = -32600
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603


router = APIRouter()


def _new_id() -> str:
    return str(uuid.uuid4())


def _error(request_id: Any, code: int, message: str, status_code: int,
           data: Optional[dict] = None) -> JSONResponse:
    error = {"code": code, "message": message}
    if data is not None:
        error["data"] = data
    return JSONResponse(
        status_code=status_code,
        content={"jsonrpc": "2.0", "id": request_id, "error": error}
    )


def _flatten(message: IncomingMessage) -> AgentMessage:
    """Join text parts verbatim and data parts as JSON, one per line"""
    contents = []
    for part in message.parts or []:
        if part.kind == "text":
            contents.append(part.text or "")
        elif part.kind == "data":
            contents.append(json.dumps(part.data))
        else:
            contents.append("")
    return AgentMessage(role=message.role, content="\n".join(contents))


def _dump_parts(message: IncomingMessage) -> Optional[list]:
    if message.parts is None:
        return None
    return [part.model_dump(exclude_none=True) for part in message.parts]


@router.post("/agent/{agent_id}")
async def agent_envelope(
    agent_id: str,
    request: Request,
    registry: dict[str, IAgent] = Depends(get_agent_registry)
):
    """Run an agent on the messages of a JSON-RPC request"""
    try:
        body = await request.json()
        rpc = JsonRpcRequest.model_validate(body)
    except (ValueError, ValidationError):
        return _error(None, INVALID_REQUEST, "Invalid Request", 400)

    if rpc.jsonrpc != "2.0" or not rpc.id:
        return _error(rpc.id, INVALID_REQUEST, "Invalid Request", 400)

    agent = registry.get(agent_id)
    if agent is None:
        return _error(rpc.id, INVALID_PARAMS, f"Agent '{agent_id}' not found", 404)

    try:
        params = rpc.params
        incoming: list[IncomingMessage] = []
        if params and params.message:
            incoming = [params.message]
        elif params and params.messages:
            incoming = list(params.messages)
        task_id = params.task_id if params else None
        context_id = params.context_id if params else None

        response = agent.generate([_flatten(m) for m in incoming])
        agent_text = response.text or ""

        artifacts = [{
            "artifactId": _new_id(),
            "name": f"{agent_id}Response",
            "parts": [{"kind": "text", "text": agent_text}],
        }]
        if response.tool_results:
            artifacts.append({
                "artifactId": _new_id(),
                "name": "ToolResults",
                "parts": [{"kind": "data", "data": r} for r in response.tool_results],
            })

        history = [
            {
                "kind": "message",
                "role": m.role,
                "parts": _dump_parts(m),
                "messageId": m.message_id or _new_id(),
                "taskId": m.task_id or task_id or _new_id(),
            }
            for m in incoming
        ]
        history.append({
            "kind": "message",
            "role": "agent",
            "parts": [{"kind": "text", "text": agent_text}],
            "messageId": _new_id(),
            "taskId": task_id or _new_id(),
        })

        return JSONResponse(content={
            "jsonrpc": "2.0",
            "id": rpc.id,
            "result": {
                "id": task_id or _new_id(),
                "contextId": context_id or _new_id(),
                "status": {
                    "state": "completed",
                    "timestamp": datetime.now(timezone.utc).isoformat(),
                    "message": {
                        "messageId": _new_id(),
                        "role": "agent",
                        "parts": [{"kind": "text", "text": agent_text}],
                        "kind": "message",
                    },
                },
                "artifacts": artifacts,
                "history": history,
                "kind": "task",
            },
        })

    except Exception as e:
        logger.exception(f"[agent] {agent_id} failed")
        return _error(None, INTERNAL_ERROR, "Internal error", 500, data={"details": str(e)})
