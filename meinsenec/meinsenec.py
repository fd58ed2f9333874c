"""Main MeinSenec class for connecting to the mein-senec.de cloud API."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import aiohttp

from .const import (
    BASE_URL,
    ENDPOINT_DASHBOARD,
    ENDPOINT_DEVICES,
    ENDPOINT_LOGIN,
    HEADER_AUTHORIZATION,
)
from .exceptions import (
    MeinSenecAuthenticationError,
    MeinSenecConnectionError,
    MeinSenecDataError,
    MeinSenecError,
)
from .models import Dashboard, Device, Session

_LOGGER = logging.getLogger(__name__)


class MeinSenec:
    """Main class for interacting with the mein-senec.de cloud API."""

    def __init__(
        self,
        websession: aiohttp.ClientSession | None = None,
        base_url: str = BASE_URL,
    ) -> None:
        """Initialize the mein-senec.de connection.

        Args:
            websession: Optional aiohttp ClientSession shared by all requests.
                If not provided, one will be created on first use.
            base_url: Root of the API, overridable for tests and proxies
        """
        self.base_url = base_url.rstrip("/")
        self._websession = websession
        self._own_session = websession is None
        self._username = ""
        self._password = ""
        self._session = Session()

    @property
    def session(self) -> Session:
        """Get the session produced by the last login."""
        return self._session

    @property
    def is_enabled(self) -> bool:
        """Check if the dashboard can be fetched."""
        return self._session.enabled

    async def close_connection(self) -> None:
        """Close the connection and clean up resources."""
        if self._own_session and self._websession:
            await self._websession.close()
            self._websession = None

    async def _ensure_session(self) -> None:
        """Ensure a websession exists."""
        if self._websession is None:
            self._websession = aiohttp.ClientSession()
            self._own_session = True

    async def __aenter__(self) -> MeinSenec:
        """Async context manager entry."""
        await self._ensure_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.close_connection()

    async def login(self, username: str, password: str, device_id_hint: str = "") -> Session:
        """Log in and resolve the device to read the dashboard from.

        Invalid credentials leave the client disabled without any request being
        sent. Network and API failures are logged and also leave it disabled.

        Args:
            username: E-mail address of the mein-senec.de account
            password: Account password
            device_id_hint: Device id to pick when the account holds several devices

        Returns:
            The new session, also available as ``session``.
        """
        self._session = Session()

        if not username or "@" not in username:
            _LOGGER.debug("No username given, mein-senec.de stays disabled")
            return self._session
        if not password:
            _LOGGER.debug("No password given, mein-senec.de stays disabled")
            return self._session

        self._username = username
        self._password = password

        token = await self._authenticate()
        device_id = await self._resolve_device(token, device_id_hint or "")
        self._session = Session(token=token, device_id=device_id)

        if not self._session.enabled:
            _LOGGER.debug("Problems with token or device id, mein-senec.de stays disabled")
        return self._session

    async def fetch_dashboard(self) -> Dashboard:
        """Fetch the dashboard of the resolved device.

        Returns an empty Dashboard if the request or the parsing fails.
        """
        url = f"{self.base_url}{ENDPOINT_DASHBOARD.format(device_id=self._session.device_id)}"
        try:
            data = await self._request("GET", url, token=self._session.token)
            dashboard = self._parse_dashboard(data)
        except MeinSenecError as err:
            _LOGGER.error("An error occurred while retrieving dashboard data: %s", err)
            return Dashboard()
        _LOGGER.debug("Dashboard Data: %s", data)
        return dashboard

    async def _authenticate(self) -> str:
        """Log in with the stored credentials and return the token, or "" on failure."""
        url = f"{self.base_url}{ENDPOINT_LOGIN}"
        payload = {"username": self._username, "password": self._password}
        try:
            data = await self._request("POST", url, json=payload)
            token = data.get("token") if isinstance(data, dict) else None
            if not isinstance(token, str) or not token:
                raise MeinSenecAuthenticationError("Token not found in response")
        except MeinSenecError as err:
            _LOGGER.error("An error occurred during login: %s", err)
            return ""
        _LOGGER.debug("Login successful")
        return token

    async def _resolve_device(self, token: str, device_id_hint: str) -> str:
        """Fetch the device list and return the id of the selected device, or ""."""
        url = f"{self.base_url}{ENDPOINT_DEVICES}"
        try:
            data = await self._request("GET", url, token=token)
            if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
                raise MeinSenecDataError(f"Device list is not an array of objects: {data}")
        except MeinSenecError as err:
            _LOGGER.error("An error occurred while retrieving devices: %s", err)
            return ""
        _LOGGER.debug("Devices Data: %s", data)

        device = self._select_device([Device.from_dict(item) for item in data], device_id_hint)
        device_id = device.id if device is not None and isinstance(device.id, str) else ""
        if device_id:
            _LOGGER.debug("Device ID %s found and verified", device_id)
        else:
            _LOGGER.debug("Device ID not found in the devices data")
        return device_id

    @staticmethod
    def _select_device(devices: list[Device], device_id_hint: str) -> Device | None:
        """Pick the device to read from.

        A single device is always taken. Several devices need a matching hint;
        without a hint every candidate is logged so one can be configured.
        """
        if not devices:
            return None
        if len(devices) == 1:
            return devices[0]
        if not device_id_hint:
            _LOGGER.warning(
                "There are %s devices configured in mein-senec.de, but no device id was configured",
                len(devices),
            )
            for device in devices:
                _LOGGER.warning("%s", device.describe())
            return None
        return next((device for device in devices if device.id == device_id_hint), None)

    async def _request(self, method: str, url: str, token: str | None = None, **kwargs: Any) -> Any:
        """Send a request and return the decoded JSON body of a 200 response."""
        await self._ensure_session()
        assert self._websession is not None
        headers = {HEADER_AUTHORIZATION: token} if token is not None else None
        try:
            async with self._websession.request(method, url, headers=headers, **kwargs) as response:
                if response.status != 200:
                    _LOGGER.debug("Request failed with status code: %s", response.status)
                    _LOGGER.debug("Request URL: %s", url)
                    _log_request_headers(response)
                    raise MeinSenecDataError(f"HTTP {response.status} from {url}")
                return await response.json(content_type=None)
        except MeinSenecDataError:
            raise
        except (aiohttp.ClientError, asyncio.TimeoutError) as err:
            raise MeinSenecConnectionError(f"Failed to connect to {url}: {err}") from err
        except ValueError as err:
            raise MeinSenecDataError(f"Failed to parse response from {url}: {err}") from err

    @staticmethod
    def _parse_dashboard(data: Any) -> Dashboard:
        """Parse dashboard JSON response."""
        if not isinstance(data, dict):
            raise MeinSenecDataError(f"Dashboard is not an object: {data}")
        try:
            return Dashboard.from_dict(data)
        except (AttributeError, KeyError, TypeError, ValueError) as err:
            raise MeinSenecDataError(f"Failed to parse dashboard data: {err}") from err


def _log_request_headers(response: aiohttp.ClientResponse) -> None:
    """Log the outbound headers of a failed request, hiding the token."""
    for name, value in response.request_info.headers.items():
        if name.lower() == HEADER_AUTHORIZATION.lower():
            value = "***"
        _LOGGER.debug("Header %s: %s", name, value)
