"""
Data Service HTTP Client
Client for forwarding user requests from the gateway to the data service

One shared AsyncClient is opened at app startup and closed at shutdown.
Upstream failures are returned as values, never raised.
"""

from typing import Any, Dict, Optional
from urllib.parse import quote

import httpx
import structlog

from app.models.upstream import (
    UpstreamHTTPError,
    UpstreamOk,
    UpstreamResult,
    UpstreamTransportError,
)

logger = structlog.get_logger(__name__)

USERS_ENDPOINT = "/api/users"


class DataServiceClient:
    """
    HTTP client for data service operations.

    Lifecycle:
        - Call start() during app startup (FastAPI lifespan)
        - Call stop() during app shutdown
        - If not started, falls back to a per-request client
    """

    def __init__(self, base_url: str, timeout: float = 30.0):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self._client: Optional[httpx.AsyncClient] = None

    @property
    def started(self) -> bool:
        return self._client is not None

    async def start(self):
        """Open the shared HTTP client"""
        if self._client is not None:
            logger.warning("DataServiceClient already started")
            return

        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=httpx.Timeout(self.timeout),
        )
        logger.info("DataServiceClient started", base_url=self.base_url, timeout=self.timeout)

    async def stop(self):
        """Close the shared HTTP client and release its connections"""
        if self._client:
            await self._client.aclose()
            self._client = None
            logger.info("DataServiceClient stopped")

    async def request(self, method: str, endpoint: str, json: Optional[Any] = None) -> UpstreamResult:
        """Issue one call to the data service and classify the outcome"""
        kwargs: Dict[str, Any] = {}
        if json is not None:
            kwargs['json'] = json

        try:
            if self._client:
                response = await self._client.request(method, endpoint, **kwargs)
            else:
                logger.warning("DataServiceClient not started, using per-request client")
                async with httpx.AsyncClient(timeout=httpx.Timeout(self.timeout)) as client:
                    response = await client.request(method, f"{self.base_url}{endpoint}", **kwargs)
        except httpx.TimeoutException as e:
            logger.error("Data service timed out", method=method, endpoint=endpoint, error=str(e))
            return UpstreamTransportError(detail=f"Timed out calling data service: {str(e) or type(e).__name__}")
        except httpx.RequestError as e:
            logger.error("Request error calling data service", method=method, endpoint=endpoint, error=str(e))
            return UpstreamTransportError(detail=f"Failed to connect to data service: {str(e) or type(e).__name__}")

        if response.is_success:
            return self._parse_success(method, endpoint, response)

        detail = self._error_detail(response)
        logger.error(
            "HTTP error from data service",
            method=method,
            endpoint=endpoint,
            status_code=response.status_code,
            error=detail,
        )
        return UpstreamHTTPError(status_code=response.status_code, detail=detail)

    @staticmethod
    def _parse_success(method: str, endpoint: str, response: httpx.Response) -> UpstreamResult:
        # Handle empty responses
        if response.status_code == 204 or not response.content:
            return UpstreamOk(status_code=response.status_code)

        try:
            body = response.json()
        except ValueError:
            logger.error(
                "Malformed response from data service",
                method=method,
                endpoint=endpoint,
                status_code=response.status_code,
            )
            return UpstreamTransportError(detail="Malformed response from data service: body is not valid JSON")

        return UpstreamOk(status_code=response.status_code, body=body)

    @staticmethod
    def _error_detail(response: httpx.Response) -> str:
        """Prefer the upstream envelope's message over a generic status line"""
        try:
            body = response.json()
        except ValueError:
            body = None

        if isinstance(body, dict) and body.get("message"):
            return str(body["message"])
        return f"Request failed with status code {response.status_code}"

    @staticmethod
    def _user_endpoint(user_id: str) -> str:
        """Single-user path; the id is one encoded path segment"""
        return f"{USERS_ENDPOINT}/{quote(str(user_id), safe='')}"

    async def list_users(self) -> UpstreamResult:
        return await self.request("GET", USERS_ENDPOINT)

    async def get_user(self, user_id: str) -> UpstreamResult:
        return await self.request("GET", self._user_endpoint(user_id))

    async def create_user(self, payload: Any) -> UpstreamResult:
        return await self.request("POST", USERS_ENDPOINT, json=payload)

    async def update_user(self, user_id: str, payload: Any) -> UpstreamResult:
        return await self.request("PUT", self._user_endpoint(user_id), json=payload)

    async def delete_user(self, user_id: str) -> UpstreamResult:
        return await self.request("DELETE", self._user_endpoint(user_id))
