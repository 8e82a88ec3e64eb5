"""Team room WebSocket endpoint.

Clients connect to `/ws?token=<id token>`, then send
`{"event": "join-team", "teamId": "..."}` to receive the team's
`message-received`, `task-update-received` and `project-update-received`
events.
"""

import json
from typing import Any

from dishka import AsyncContainer
from fastapi import APIRouter, Query, WebSocket, WebSocketDisconnect, status
import logfire

from hive.adapter.error import ProviderError
from hive.adapter.realtime import RoomRegistry
from hive.application.usecase.auth import GetCurrentUserUseCase
from hive.domain.error import AuthenticationError, DomainError
from hive.domain.model import User

router = APIRouter(tags=["realtime"])


async def _resolve_caller(container: AsyncContainer, token: str | None) -> User:
    """Resolve the connection's token inside its own request scope."""
    async with container() as request_container:
        use_case = await request_container.get(GetCurrentUserUseCase)
        return await use_case.resolve(token)


async def _send_error(websocket: WebSocket, message: str) -> None:
    await websocket.send_json({"event": "error", "data": {"message": message}})


async def _refuse(websocket: WebSocket, error: DomainError | ProviderError) -> None:
    """Close a connection whose caller could not be resolved.

    Bad credentials and rejected callers are policy violations; an
    unavailable identity provider is a server error the client may retry.
    """
    if isinstance(error, ProviderError):
        logfire.error(
            "WebSocket caller unresolvable", provider=error.provider, error=str(error)
        )
        code = status.WS_1011_INTERNAL_ERROR
    elif isinstance(error, AuthenticationError):
        logfire.warn("WebSocket rejected", error=str(error))
        code = status.WS_1008_POLICY_VIOLATION
    else:
        logfire.warn(
            "WebSocket caller refused", error=str(error), error_type=type(error).__name__
        )
        code = status.WS_1008_POLICY_VIOLATION
    await websocket.close(code=code)


@router.websocket("/ws")
async def team_socket(
    websocket: WebSocket, token: str | None = Query(default=None)
) -> None:
    """Serve one client connection until it disconnects."""
    container: AsyncContainer = websocket.app.state.dishka_container
    rooms = await container.get(RoomRegistry)

    try:
        user = await _resolve_caller(container, token)
    except (DomainError, ProviderError) as e:
        await _refuse(websocket, e)
        return

    await websocket.accept()
    logfire.info("WebSocket connected", user_id=str(user.id))

    try:
        while True:
            raw = await websocket.receive_text()
            try:
                message: Any = json.loads(raw)
            except ValueError:
                await _send_error(websocket, "Malformed message")
                continue
            if not isinstance(message, dict):
                await _send_error(websocket, "Malformed message")
                continue

            event = message.get("event")
            if event == "join-team":
                # Team may have changed since connecting (invitation used)
                try:
                    user = await _resolve_caller(container, token)
                except (DomainError, ProviderError) as e:
                    await _refuse(websocket, e)
                    return

                team_id = str(message.get("teamId") or "")
                if user.team_id is None or team_id != str(user.team_id):
                    logfire.warn(
                        "Join of foreign team room refused",
                        user_id=str(user.id),
                        team_id=team_id,
                    )
                    await _send_error(websocket, "Cannot join another team's room")
                    continue

                rooms.join(websocket, user.team_id)
                await websocket.send_json(
                    {"event": "joined-team", "data": {"teamId": team_id}}
                )
            elif event == "leave-team":
                left = rooms.leave(websocket)
                await websocket.send_json(
                    {
                        "event": "left-team",
                        "data": {"teamId": str(left) if left else None},
                    }
                )
            else:
                await _send_error(websocket, f"Unknown event: {event}")
    except WebSocketDisconnect as e:
        logfire.info("WebSocket disconnected", user_id=str(user.id), code=e.code)
    finally:
        rooms.disconnect(websocket)
