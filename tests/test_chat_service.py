from __future__ import annotations

import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer

from daily_mission.chat_service import FALLBACK_RESPONSES, ChatService
from daily_mission.models.dc_models import ChatAgent


def chat_app(status: int = 200, body: str | bytes = "", requests: list | None = None) -> web.Application:
    async def handle(request: web.Request) -> web.Response:
        if requests is not None:
            requests.append((request.match_info["agent"], await request.json()))
        if isinstance(body, bytes):
            return web.Response(status=status, body=body)
        return web.Response(status=status, text=body)

    app = web.Application()
    app.router.add_post("/{agent}/message", handle)
    return app


async def test_send_message_returns_reply() -> None:
    requests: list = []
    body = '[{"user": "WolfPup", "text": "Awoo!", "action": "NONE"}]'
    async with TestServer(chat_app(body=body, requests=requests)) as server:
        service = ChatService(str(server.make_url("/")))
        reply = await service.send_message("hello", "player-1", ChatAgent.WolfPup)

    assert reply == "Awoo!"
    assert requests == [("WolfPup", {"text": "hello", "userId": "player-1", "userName": "User"})]


@pytest.mark.parametrize("status, body", [(502, ""), (200, "[]"), (200, "garbage"), (200, b"\xff\xfe[{]")])
async def test_send_message_falls_back(status: int, body: str | bytes) -> None:
    async with TestServer(chat_app(status=status, body=body)) as server:
        service = ChatService(str(server.make_url("/")))
        reply = await service.send_message("hello", "player-1", ChatAgent.Solarius)

    assert reply in FALLBACK_RESPONSES


@pytest.mark.parametrize(
    "beast_type, agent",
    [
        ("wolf", ChatAgent.WolfPup),
        ("Dragon", ChatAgent.Solarius),
        ("SNAKE", ChatAgent.Foxling),
        ("unicorn", ChatAgent.Solarius),
        (None, ChatAgent.Solarius),
        ("", ChatAgent.Solarius),
    ],
)
def test_get_agent_for_beast_type(beast_type, agent) -> None:
    assert ChatService.get_agent_for_beast_type(beast_type) == agent


async def test_failed_reply_is_logged_as_chat_error(caplog) -> None:
    async with TestServer(chat_app(body="[]")) as server:
        service = ChatService(str(server.make_url("/")))
        await service.send_message("hello", "player-1", ChatAgent.Foxling)

    assert "Chat API error: no reply found" in caplog.text
    assert "no mission found" not in caplog.text
