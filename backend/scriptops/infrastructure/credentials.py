"""Credential Loader — reads `.clasprc.json`, refreshes expired tokens, signs requests.

Invariants:
    - load_credentials() must complete before any Google API request is sent
    - BearerTokenAuth raises CredentialsError when used before credentials are loaded
    - Expired token + refresh token + OAuth client settings → refreshed and persisted
    - Expired token without a way to refresh → CredentialsError (user must log in again)
    - All read/refresh failures surface as CredentialsError, never raw httpx/OS errors

Design Decisions:
    - Token refresh uses its own short-lived httpx.AsyncClient: the API client carries
      BearerTokenAuth, which must not be applied to the token endpoint
    - transport injectable for tests (httpx.MockTransport)
"""

import json
import logging
from collections.abc import Generator
from datetime import datetime, timedelta, timezone
from pathlib import Path

import httpx
from pydantic import ValidationError

from scriptops.core.errors import CredentialsError
from scriptops.schemas.local_files import StoredCredentials, StoredToken

logger = logging.getLogger(__name__)

_LOGIN_HINT = "Run `clasp login` to authorize."


class ClasprcCredentialLoader:
    """Loads the OAuth token clasp stores in the user's home directory."""

    def __init__(
        self,
        path: Path,
        token_url: str,
        timeout_seconds: float = 60.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.path = path
        self.token_url = token_url
        self.timeout_seconds = timeout_seconds
        self.transport = transport
        self._credentials: StoredCredentials | None = None

    @property
    def access_token(self) -> str:
        if self._credentials is None:
            raise CredentialsError(f"Credentials not loaded. {_LOGIN_HINT}")
        return self._credentials.token.access_token

    async def load_credentials(self) -> None:
        credentials = self._read()
        if credentials.token.is_expired():
            logger.info("Access token expired, refreshing")
            credentials = await self._refresh(credentials)
            self._write(credentials)
        self._credentials = credentials

    def _read(self) -> StoredCredentials:
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            raise CredentialsError(f"No credentials found at {self.path}. {_LOGIN_HINT}")
        except (OSError, json.JSONDecodeError) as e:
            raise CredentialsError(f"Could not read {self.path}: {e}") from e
        try:
            return StoredCredentials.model_validate(raw)
        except ValidationError as e:
            raise CredentialsError(
                f"Invalid credentials file {self.path}. {_LOGIN_HINT}",
            ) from e

    def _write(self, credentials: StoredCredentials) -> None:
        self.path.write_text(
            json.dumps(credentials.to_file_dict(), indent=2), encoding="utf-8",
        )

    async def _refresh(self, credentials: StoredCredentials) -> StoredCredentials:
        client_settings = credentials.oauth2_client_settings
        refresh_token = credentials.token.refresh_token
        if not refresh_token or client_settings is None:
            raise CredentialsError(f"Access token expired. {_LOGIN_HINT}")

        params = {
            "client_id": client_settings.client_id,
            "client_secret": client_settings.client_secret,
            "refresh_token": refresh_token,
            "grant_type": "refresh_token",
        }
        try:
            async with httpx.AsyncClient(
                transport=self.transport, timeout=self.timeout_seconds,
            ) as client:
                response = await client.post(self.token_url, data=params)
                response.raise_for_status()
                payload = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Token refresh failed: {e}", exc_info=True)
            raise CredentialsError(f"Could not refresh access token. {_LOGIN_HINT}") from e
        if not payload.get("access_token"):
            raise CredentialsError(f"Token endpoint returned no access token. {_LOGIN_HINT}")

        expires_at = datetime.now(timezone.utc) + timedelta(
            seconds=payload.get("expires_in", 3600),
        )
        token = StoredToken(
            **{
                **credentials.token.model_dump(exclude_none=True),
                "access_token": payload["access_token"],
                "refresh_token": payload.get("refresh_token", refresh_token),
                "expiry_date": int(expires_at.timestamp() * 1000),
            }
        )
        return credentials.model_copy(update={"token": token})


class BearerTokenAuth(httpx.Auth):
    """Adds `Authorization: Bearer <token>` from a loaded ClasprcCredentialLoader."""

    def __init__(self, loader: ClasprcCredentialLoader):
        self.loader = loader

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        request.headers["Authorization"] = f"Bearer {self.loader.access_token}"
        yield request
