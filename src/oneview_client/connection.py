from __future__ import annotations

import logging
import time
from typing import Any

import httpx
import structlog
from pydantic import BaseModel

from .config import Settings
from .errors import AuthenticationError, ConfigError, OneViewConnectionError, OneViewHTTPError
from .metrics import LOGINS, REST_CALLS, REST_LATENCY

logger = logging.getLogger(__name__)

LOGIN_URI = "/rest/login-sessions"
VERSION_URI = "/rest/version"
# methods that carry If-Match on the appliance
CONDITIONAL_METHODS = {"PUT", "PATCH", "DELETE"}


def to_wire(body: Any) -> Any:
    if isinstance(body, BaseModel):
        return body.model_dump(by_alias=True, exclude_none=True, mode="json")
    return body


def response_json(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


class OVConnection:
    """Authenticated HTTP session against one OneView appliance.

    Logs in lazily on the first call, and logs in again once if the
    appliance answers 401 (expired session).
    """

    def __init__(self, settings: Settings, transport: httpx.BaseTransport | None = None) -> None:
        if not settings.endpoint:
            raise ConfigError("OneView endpoint is not configured (ONEVIEW_OV_ENDPOINT)")
        self.settings = settings
        self.base_url = settings.endpoint.rstrip("/")
        self.api_version = settings.api_version
        self.session_id: str | None = None
        self.client = httpx.Client(
            base_url=self.base_url,
            verify=settings.ssl_verify,
            timeout=settings.request_timeout,
            transport=transport,
        )

    def __enter__(self) -> OVConnection:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        if self.session_id:
            self.logout()
        self.client.close()

    def _send(self, method: str, uri: str, *, json: Any = None, params: dict | None = None, headers: dict | None = None) -> httpx.Response:
        start = time.perf_counter()
        status = "error"
        try:
            response = self.client.request(method, uri, json=json, params=params or None, headers=headers)
            status = str(response.status_code)
            return response
        except httpx.TransportError as exc:
            raise OneViewConnectionError(f"{method} {uri}: {exc}") from exc
        finally:
            duration = time.perf_counter() - start
            REST_CALLS.labels(method=method, status=status).inc()
            REST_LATENCY.labels(method=method).observe(duration)
            structlog.get_logger().info(
                "rest_call",
                method=method,
                path=uri,
                status=status,
                duration_ms=int(duration * 1000),
            )

    def get_api_version(self) -> int:
        """Highest API version the appliance supports."""
        r = self._send("GET", VERSION_URI)
        if r.status_code >= 400:
            raise OneViewHTTPError.from_body(r.status_code, response_json(r), method="GET", uri=VERSION_URI)
        data = response_json(r)
        if not isinstance(data, dict) or "currentVersion" not in data:
            raise OneViewHTTPError(r.status_code, "version response carried no currentVersion", method="GET", uri=VERSION_URI)
        return int(data["currentVersion"])

    def ensure_api_version(self) -> int:
        if self.api_version <= 0:
            self.api_version = self.get_api_version()
            logger.debug(f"Using appliance API version {self.api_version}")
        return self.api_version

    def login(self) -> str:
        self.ensure_api_version()
        body = {
            "userName": self.settings.username,
            "password": self.settings.password,
            "loginMsgAck": "true",
        }
        if self.settings.domain:
            body["authLoginDomain"] = self.settings.domain
        r = self._send("POST", LOGIN_URI, json=body, headers={"X-API-Version": str(self.api_version)})
        if r.status_code >= 400:
            LOGINS.labels(result="failed").inc()
            raise AuthenticationError.from_body(r.status_code, response_json(r), method="POST", uri=LOGIN_URI)
        data = response_json(r) or {}
        session_id = data.get("sessionID") if isinstance(data, dict) else None
        if not session_id:
            LOGINS.labels(result="failed").inc()
            raise AuthenticationError(r.status_code, "login response carried no sessionID", method="POST", uri=LOGIN_URI)
        LOGINS.labels(result="ok").inc()
        self.session_id = session_id
        logger.info(f"Logged in to {self.base_url} as {self.settings.username}")
        return session_id

    def refresh_login(self) -> None:
        if not self.session_id:
            self.login()

    def logout(self) -> None:
        try:
            r = self._send("DELETE", LOGIN_URI, headers=self.headers())
        except OneViewConnectionError as exc:
            logger.warning(f"Logout from {self.base_url} failed: {exc}")
        else:
            if r.status_code >= 400:
                logger.warning(f"Logout from {self.base_url} returned {r.status_code}")
        self.session_id = None

    def headers(self, method: str = "GET", if_match: str | None = None) -> dict[str, str]:
        h = {
            "Content-Type": "application/json",
            "Accept-Language": "en_US",
            "X-API-Version": str(self.api_version),
        }
        if self.session_id:
            h["Auth"] = self.session_id
        if method in CONDITIONAL_METHODS:
            tag = if_match or self.settings.if_match
            if tag:
                h["If-Match"] = tag
        return h

    def request(self, method: str, uri: str, body: Any = None, *, params: dict | None = None, if_match: str | None = None) -> httpx.Response:
        """Issue one REST call, raising OneViewHTTPError on 4xx/5xx."""
        self.refresh_login()
        payload = to_wire(body)
        r = self._send(method, uri, json=payload, params=params, headers=self.headers(method, if_match))
        if r.status_code == 401:
            logger.info("Session rejected by appliance, logging in again")
            self.session_id = None
            self.login()
            r = self._send(method, uri, json=payload, params=params, headers=self.headers(method, if_match))
        if r.status_code >= 400:
            err_cls = AuthenticationError if r.status_code == 401 else OneViewHTTPError
            raise err_cls.from_body(r.status_code, response_json(r), method=method, uri=uri)
        return r

    def get(self, uri: str, params: dict | None = None) -> Any:
        return response_json(self.request("GET", uri, params=params))

    def post(self, uri: str, body: Any = None) -> httpx.Response:
        return self.request("POST", uri, body)

    def put(self, uri: str, body: Any = None, if_match: str | None = None) -> httpx.Response:
        return self.request("PUT", uri, body, if_match=if_match)

    def delete(self, uri: str, if_match: str | None = None) -> httpx.Response:
        return self.request("DELETE", uri, if_match=if_match)
