"""End-to-end tests for the team room WebSocket."""

import pytest
from starlette.websockets import WebSocketDisconnect

from hive.adapter.error import ProviderError
from hive.adapter.identity import MockIdentityVerifier
from hive.domain.error import ConflictError
from hive.domain.service import UserService


def _register(client, auth, name: str) -> dict:
    response = client.post(
        "/auth/register",
        json={"email": f"{name}@example.com", "name": name.title()},
        headers=auth(name),
    )
    return response.json()["data"]["user"]


class TestTeamRoom:
    """Joining a team room and receiving its events."""

    def test_invalid_token_is_refused(self, client):
        with pytest.raises(WebSocketDisconnect) as exc_info:
            with client.websocket_connect("/ws?token=not-a-token"):
                pass

        assert exc_info.value.code == 1008

    def test_missing_token_is_refused(self, client):
        with pytest.raises(WebSocketDisconnect) as exc_info:
            with client.websocket_connect("/ws"):
                pass

        assert exc_info.value.code == 1008

    def test_unavailable_identity_provider_closes_with_server_error(
        self, client, token_for, monkeypatch
    ):
        async def unavailable(self, token):
            raise ProviderError("identity", "JWKS endpoint unreachable")

        monkeypatch.setattr(MockIdentityVerifier, "verify", unavailable)

        with pytest.raises(WebSocketDisconnect) as exc_info:
            with client.websocket_connect(f"/ws?token={token_for('alice')}"):
                pass

        assert exc_info.value.code == 1011

    def test_domain_error_on_first_sight_is_refused(
        self, client, token_for, monkeypatch
    ):
        """A conflict while creating the caller closes cleanly with 1008."""

        async def conflicting(self, claims):
            raise ConflictError("Email already registered")

        monkeypatch.setattr(UserService, "create_user", conflicting)

        with pytest.raises(WebSocketDisconnect) as exc_info:
            with client.websocket_connect(f"/ws?token={token_for('dave')}"):
                pass

        assert exc_info.value.code == 1008

    def test_member_receives_team_messages(self, client, auth, token_for):
        alice = _register(client, auth, "alice")
        _register(client, auth, "bob")

        with client.websocket_connect(f"/ws?token={token_for('alice')}") as ws:
            ws.send_json({"event": "join-team", "teamId": alice["teamId"]})
            assert ws.receive_json() == {
                "event": "joined-team",
                "data": {"teamId": alice["teamId"]},
            }

            sent = client.post(
                "/messages", json={"content": "ship it"}, headers=auth("bob")
            )
            assert sent.status_code == 201

            event = ws.receive_json()
            assert event["event"] == "message-received"
            assert event["data"]["content"] == "ship it"
            assert event["data"]["sender"]["name"] == "Bob"

    def test_task_updates_are_pushed(self, client, auth, token_for):
        alice = _register(client, auth, "alice")
        project_id = client.post(
            "/projects", json={"name": "Launch"}, headers=auth("alice")
        ).json()["data"]["id"]
        task_id = client.post(
            "/tasks",
            json={"title": "Write copy", "projectId": project_id},
            headers=auth("alice"),
        ).json()["data"]["id"]

        with client.websocket_connect(f"/ws?token={token_for('alice')}") as ws:
            ws.send_json({"event": "join-team", "teamId": alice["teamId"]})
            ws.receive_json()

            client.put(f"/tasks/{task_id}", json={"status": "done"}, headers=auth("alice"))

            event = ws.receive_json()
            assert event["event"] == "task-update-received"
            assert event["data"]["id"] == task_id
            assert event["data"]["status"] == "done"

    def test_cannot_join_another_team_room(self, client, auth, token_for):
        _register(client, auth, "alice")

        with client.websocket_connect(f"/ws?token={token_for('alice')}") as ws:
            ws.send_json(
                {"event": "join-team", "teamId": "00000000-0000-0000-0000-000000000000"}
            )

            event = ws.receive_json()
            assert event["event"] == "error"

    def test_leave_and_unknown_events(self, client, auth, token_for):
        alice = _register(client, auth, "alice")

        with client.websocket_connect(f"/ws?token={token_for('alice')}") as ws:
            ws.send_json({"event": "join-team", "teamId": alice["teamId"]})
            ws.receive_json()
            assert client.get("/health").json()["open_rooms"] == 1

            ws.send_json({"event": "leave-team"})
            assert ws.receive_json() == {
                "event": "left-team",
                "data": {"teamId": alice["teamId"]},
            }

            ws.send_json({"event": "dance"})
            assert ws.receive_json()["event"] == "error"

            ws.send_text("{not json")
            assert ws.receive_json() == {
                "event": "error",
                "data": {"message": "Malformed message"},
            }
