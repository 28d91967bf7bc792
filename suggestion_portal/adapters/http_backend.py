"""
aiohttp implementation of the backend port.

Usage:
    backend = AiohttpBackend(settings.require_base_url(), timeout=settings.request_timeout)
    async with backend:            # optional: reuse one connection pool
        await backend.list_student_suggestions("a@ybit.ac.in")

Without ``async with`` every request opens and closes its own session, which
is what the Streamlit page needs since each rerun drives a fresh event loop.
"""
from __future__ import annotations

import asyncio
import json
from typing import Any, Dict, Optional
from urllib.parse import quote

import aiohttp

from ..infra.exceptions import APIError, NetworkError, handle_async_errors
from ..infra.logging import get_logger
from ..ports.backend import BackendAPI

logger = get_logger(__name__)


class AiohttpBackend(BackendAPI):
    """Portal REST API over aiohttp."""

    def __init__(self, base_url: str, timeout: float = 30.0):
        """
        Args:
            base_url: backend root, e.g. ``https://portal.example.edu``
            timeout: total seconds allowed per request
        """
        self.base_url = (base_url or "").rstrip("/")
        self.timeout = timeout
        self.session: Optional[aiohttp.ClientSession] = None
        self._connector: Optional[aiohttp.TCPConnector] = None

    async def __aenter__(self):
        if not self.session:
            self._connector = aiohttp.TCPConnector(limit=10)
            self.session = aiohttp.ClientSession(
                connector=self._connector,
                timeout=aiohttp.ClientTimeout(total=self.timeout),
            )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def close(self) -> None:
        if self.session:
            await self.session.close()
            self.session = None
        if self._connector:
            await self._connector.close()
            self._connector = None

    # ------------------------------------------------------------------
    # transport
    # ------------------------------------------------------------------

    @staticmethod
    def _decode(text: str) -> Any:
        if not text.strip():
            return None
        return json.loads(text)

    @handle_async_errors(logger)
    async def _request(
        self,
        method: str,
        path: str,
        *,
        api_name: str,
        params: Optional[Dict[str, str]] = None,
        body: Optional[Dict[str, Any]] = None,
    ) -> Any:
        url = f"{self.base_url}{path}"
        logger.debug(f"{method} {url} params={params}")
        try:
            if self.session:
                return await self._send(self.session, method, url, api_name, params, body)
            async with aiohttp.ClientSession(timeout=aiohttp.ClientTimeout(total=self.timeout)) as session:
                return await self._send(session, method, url, api_name, params, body)
        except aiohttp.ClientError as e:
            logger.error(f"{api_name}: network error for {method} {url}: {e}", exc_info=True)
            raise NetworkError(f"Network error: {e}", url=url) from e
        except asyncio.TimeoutError:
            logger.error(f"{api_name}: {method} {url} timed out after {self.timeout}s")
            raise NetworkError(f"Request timed out after {self.timeout}s", url=url)

    async def _send(
        self,
        session: aiohttp.ClientSession,
        method: str,
        url: str,
        api_name: str,
        params: Optional[Dict[str, str]],
        body: Optional[Dict[str, Any]],
    ) -> Any:
        async with session.request(method, url, params=params, json=body) as response:
            text = await response.text()
            if not 200 <= response.status < 300:
                server_message = None
                try:
                    data = self._decode(text)
                    if isinstance(data, dict) and isinstance(data.get("error"), str):
                        server_message = data["error"]
                except json.JSONDecodeError:
                    pass
                raise APIError(
                    f"{api_name} failed with HTTP {response.status}",
                    api_name=api_name,
                    status_code=response.status,
                    server_message=server_message,
                )
            try:
                return self._decode(text)
            except json.JSONDecodeError as e:
                raise NetworkError(f"Malformed JSON from {api_name}: {e}", url=url, status_code=response.status) from e

    # ------------------------------------------------------------------
    # endpoints
    # ------------------------------------------------------------------

    async def exchange_token(self, token: str) -> Dict[str, Any]:
        return await self._request("POST", "/api/auth/google", api_name="login", body={"token": token})

    async def list_admin_suggestions(self, email: str) -> Any:
        return await self._request("GET", "/api/admin/suggestions", api_name="list", params={"email": email})

    async def list_student_suggestions(self, email: str) -> Any:
        return await self._request("GET", "/api/student/suggestions", api_name="list", params={"email": email})

    async def create_suggestion(self, payload: Dict[str, str]) -> Any:
        return await self._request("POST", "/api/suggestions", api_name="create", body=payload)

    async def delete_suggestion(self, suggestion_id: str) -> Any:
        return await self._request("DELETE", f"/api/student/suggestions/{quote(suggestion_id, safe='')}", api_name="delete")

    async def update_status(self, suggestion_id: str, status: str, updated_by: str) -> Dict[str, Any]:
        return await self._request(
            "PATCH",
            f"/api/admin/suggestions/{quote(suggestion_id, safe='')}",
            api_name="update_status",
            body={"status": status, "updatedBy": updated_by},
        )

    async def view_admin_suggestion(self, suggestion_id: str) -> Dict[str, Any]:
        return await self._request("GET", f"/api/admin/suggestions/view/{quote(suggestion_id, safe='')}", api_name="view")

    async def view_student_suggestion(self, suggestion_id: str, email: str) -> Dict[str, Any]:
        return await self._request(
            "GET",
            f"/api/student/suggestions/view/{quote(suggestion_id, safe='')}",
            api_name="view",
            params={"email": email},
        )
