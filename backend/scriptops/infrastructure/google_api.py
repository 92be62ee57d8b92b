"""Google API Clients — Apps Script content reader and Service Usage registry over httpx.

Invariants:
    - One shared httpx.AsyncClient per CLI invocation, signed with BearerTokenAuth
    - ScriptApiClient.get_content never raises on HTTP status: status + reason returned;
      a success response whose body is not JSON → RemoteFetchError
    - ServiceUsageClient raises httpx.HTTPStatusError on non-2xx (left unrecognized on
      purpose: the toggle orchestrator reclassifies it)
    - No retries, no polling of the long-running operation returned by enable/disable

Design Decisions:
    - Thin wrappers, no SDK: the two endpoints used are plain REST calls
    - Base URLs injected from Settings so tests and private endpoints can swap them
"""

import logging

import httpx

from scriptops.core.boundary_protocols import RemoteResponse
from scriptops.core.domain_types import ServiceState
from scriptops.core.errors import ErrorContext, RemoteFetchError
from scriptops.infrastructure.credentials import BearerTokenAuth, ClasprcCredentialLoader

logger = logging.getLogger(__name__)


def create_google_client(
    credentials: ClasprcCredentialLoader,
    timeout_seconds: float = 60.0,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """AsyncClient that signs every request with the loaded OAuth token."""
    return httpx.AsyncClient(
        auth=BearerTokenAuth(credentials),
        timeout=timeout_seconds,
        transport=transport,
        headers={"Accept": "application/json"},
    )


class ScriptApiClient:
    """Apps Script API: projects.getContent."""

    def __init__(self, http: httpx.AsyncClient, base_url: str):
        self.http = http
        self.base_url = base_url

    async def get_content(self, script_id: str) -> RemoteResponse:
        response = await self.http.get(
            f"{self.base_url}/v1/projects/{script_id}/content",
        )
        data: dict = {}
        if response.is_success and response.content:
            try:
                data = response.json()
            except ValueError as e:
                logger.warning(
                    f"GET content returned a non-JSON body: {e}",
                    extra={"script_id": script_id, "status_code": response.status_code},
                )
                raise RemoteFetchError(
                    "Script content response was not valid JSON",
                    response.status_code,
                    ErrorContext(script_id=script_id),
                ) from e
        logger.debug(
            f"GET content -> {response.status_code}",
            extra={"script_id": script_id, "status_code": response.status_code},
        )
        return RemoteResponse(
            status=response.status_code,
            status_text=response.reason_phrase,
            data=data,
        )


class ServiceUsageClient:
    """Service Usage API: services.enable / services.disable / services.get."""

    def __init__(self, http: httpx.AsyncClient, base_url: str):
        self.http = http
        self.base_url = base_url

    async def enable(self, name: str) -> None:
        await self._post(f"{name}:enable")

    async def disable(self, name: str) -> None:
        await self._post(f"{name}:disable")

    async def get_state(self, name: str) -> str:
        response = await self.http.get(f"{self.base_url}/v1/{name}")
        response.raise_for_status()
        return response.json().get("state", ServiceState.STATE_UNSPECIFIED.value)

    async def _post(self, path: str) -> None:
        response = await self.http.post(f"{self.base_url}/v1/{path}", json={})
        logger.debug(
            f"POST {path} -> {response.status_code}",
            extra={"status_code": response.status_code},
        )
        response.raise_for_status()
