"""Local File Schemas — pydantic models for `.clasp.json` and `.clasprc.json`.

Invariants:
    - Unknown keys are preserved (extra="allow") so rewriting a file never drops data
    - Serialized back with camelCase aliases, None values omitted
    - StoredToken.expiry_date is milliseconds since epoch (clasp convention)
"""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field


class ProjectSettings(BaseModel):
    """`.clasp.json` — links a local directory to a script and a cloud project."""
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    script_id: str | None = Field(None, alias="scriptId")
    project_id: str | None = Field(None, alias="projectId")
    root_dir: str | None = Field(None, alias="rootDir")

    def to_file_dict(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


class StoredToken(BaseModel):
    model_config = ConfigDict(extra="allow")

    access_token: str
    refresh_token: str | None = None
    token_type: str | None = "Bearer"
    expiry_date: int | None = None

    def is_expired(self, now: datetime | None = None, skew_seconds: int = 60) -> bool:
        if self.expiry_date is None:
            return False
        now = now or datetime.now(timezone.utc)
        return self.expiry_date / 1000 <= now.timestamp() + skew_seconds


class OAuthClientSettings(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    client_id: str = Field(alias="clientId")
    client_secret: str = Field(alias="clientSecret")


class StoredCredentials(BaseModel):
    """`.clasprc.json` — the user's OAuth token and client settings."""
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    token: StoredToken
    oauth2_client_settings: OAuthClientSettings | None = Field(
        None, alias="oauth2ClientSettings",
    )

    def to_file_dict(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)
