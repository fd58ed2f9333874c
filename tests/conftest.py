"""Fixtures emulating the mein-senec.de cloud API."""

from __future__ import annotations

from typing import Any

import aiohttp
import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer

from meinsenec import MeinSenec

DASHBOARD_PAYLOAD = {
    "aktuell": {
        "stromerzeugung": {"wert": 4213.7, "einheit": "W"},
        "stromverbrauch": {"wert": 812.25, "einheit": "W"},
        "netzeinspeisung": {"wert": 2900.0, "einheit": "W"},
        "netzbezug": {"wert": 0.0, "einheit": "W"},
        "speicherbeladung": {"wert": 501.45, "einheit": "W"},
        "speicherentnahme": {"wert": 0.0, "einheit": "W"},
        "speicherfuellstand": {"wert": 87.5, "einheit": "%"},
        "autarkie": {"wert": 100.0, "einheit": "%"},
        "wallbox": {"wert": 11000.0, "einheit": "W"},
    },
    "heute": {
        "stromerzeugung": {"wert": 18.93, "einheit": "kWh"},
        "stromverbrauch": {"wert": 7.41, "einheit": "kWh"},
        "netzeinspeisung": {"wert": 9.12, "einheit": "kWh"},
        "netzbezug": {"wert": 0.37, "einheit": "kWh"},
        "speicherbeladung": {"wert": 4.8, "einheit": "kWh"},
        "speicherentnahme": {"wert": 1.02, "einheit": "kWh"},
        "speicherfuellstand": {"wert": 87.5, "einheit": "%"},
        "autarkie": {"wert": 95.0, "einheit": "%"},
        "wallbox": {"wert": 3.3, "einheit": "kWh"},
    },
    "zeitstempel": "2023-06-14T12:30:05Z",
    "electricVehicleConnected": True,
}


class FakeSenecCloud:
    """In-process stand-in for the cloud API recording every request it gets."""

    def __init__(self) -> None:
        self.login_response: tuple[int, Any] = (200, {"token": "T"})
        self.devices_response: tuple[int, Any] = (200, [{"id": "D1"}])
        self.dashboard_response: tuple[int, Any] = (200, DASHBOARD_PAYLOAD)
        self.requests: list[dict[str, Any]] = []

    def app(self) -> web.Application:
        app = web.Application()
        app.router.add_post("/login", self._login)
        app.router.add_get("/anlagen", self._devices)
        app.router.add_get("/anlagen/{device_id}/dashboard", self._dashboard)
        return app

    def requests_to(self, path: str) -> list[dict[str, Any]]:
        return [request for request in self.requests if request["path"] == path]

    async def _record(self, request: web.Request) -> None:
        self.requests.append(
            {
                "method": request.method,
                "path": request.path,
                "headers": dict(request.headers),
                "body": await request.text(),
            }
        )

    @staticmethod
    def _respond(response: tuple[int, Any]) -> web.Response:
        status, body = response
        if isinstance(body, str):
            return web.Response(text=body, status=status, content_type="application/json")
        return web.json_response(body, status=status)

    async def _login(self, request: web.Request) -> web.Response:
        await self._record(request)
        return self._respond(self.login_response)

    async def _devices(self, request: web.Request) -> web.Response:
        await self._record(request)
        return self._respond(self.devices_response)

    async def _dashboard(self, request: web.Request) -> web.Response:
        await self._record(request)
        return self._respond(self.dashboard_response)


@pytest.fixture
def cloud() -> FakeSenecCloud:
    return FakeSenecCloud()


@pytest_asyncio.fixture
async def base_url(cloud):
    server = TestServer(cloud.app())
    await server.start_server()
    yield str(server.make_url("/")).rstrip("/")
    await server.close()


@pytest_asyncio.fixture
async def api(base_url):
    async with aiohttp.ClientSession() as websession:
        yield MeinSenec(websession=websession, base_url=base_url)
